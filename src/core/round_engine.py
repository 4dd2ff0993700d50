from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Mapping, Optional, Sequence

from .card import CardEntry, Role
from .catalog import DEFAULT_CATALOGS, freeze_catalogs
from .deck import Deck


class Phase(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED   = "completed"


@dataclass(slots=True)
class RoundState:
    round_number: int = 1
    sniper_pick: Optional[CardEntry] = None
    keeper_pick: Optional[CardEntry] = None

    def pick_for(self, role: Role) -> Optional[CardEntry]:
        if role is Role.SNIPER:
            return self.sniper_pick
        return self.keeper_pick

    def set_pick(self, role: Role, card: CardEntry) -> None:
        if role is Role.SNIPER:
            self.sniper_pick = card
        else:
            self.keeper_pick = card

    def clear_picks(self) -> None:
        self.sniper_pick = None
        self.keeper_pick = None

    def both_picked(self) -> bool:
        return self.sniper_pick is not None and self.keeper_pick is not None


@dataclass(slots=True)
class GameState:
    phase: Phase = Phase.NOT_STARTED
    sniper_deck: Deck = field(default_factory=lambda: Deck(cards=[]))
    keeper_deck: Deck = field(default_factory=lambda: Deck(cards=[]))
    round: RoundState = field(default_factory=RoundState)

    def deck_for(self, role: Role) -> Deck:
        if role is Role.SNIPER:
            return self.sniper_deck
        return self.keeper_deck


# ── RoundEngine ──────────────────────────────────────────────────────────────

class RoundEngine:
    """
    Round/deck state machine for one sniper-vs-goalkeeper game.

    Phases: NOT_STARTED -> IN_PROGRESS (start) -> COMPLETED (advance_round
    on the last round). start() may be called from any phase and always
    begins a fresh game.

    Commands never raise on a bad precondition. draw_for() returns None and
    advance_round() returns False when nothing changed.
    """

    def __init__(
        self,
        catalogs: Optional[Mapping[Role, Sequence[CardEntry]]] = None,
        max_rounds: Optional[int] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        verbose: bool = False,
    ) -> None:
        self._catalogs = freeze_catalogs(DEFAULT_CATALOGS if catalogs is None else catalogs)
        smallest = min(len(c) for c in self._catalogs.values())
        if max_rounds is None:
            max_rounds = smallest
        if not 1 <= max_rounds <= smallest:
            raise ValueError(
                f"max_rounds must be between 1 and {smallest} (smallest catalog), got {max_rounds}"
            )
        self._max_rounds = max_rounds
        self._rng = rng if rng is not None else random.Random(seed)
        self.verbose = verbose
        self._state = GameState()

    def _log(self, msg: str) -> None:
        if self.verbose:
            print(f"[engine] {msg}")

    # ── commands ─────────────────────────────────────────────────────────────

    def start(self) -> None:
        self._state = GameState(
            phase=Phase.IN_PROGRESS,
            sniper_deck=Deck.new_shuffled(self._catalogs[Role.SNIPER], rng=self._rng),
            keeper_deck=Deck.new_shuffled(self._catalogs[Role.GOALKEEPER], rng=self._rng),
            round=RoundState(round_number=1),
        )
        self._log(f"new game, {self._max_rounds} rounds")

    def draw_for(self, role: Role) -> Optional[CardEntry]:
        """Draw a card for role. Returns None if the draw was not allowed."""
        state = self._state
        if state.phase is not Phase.IN_PROGRESS:
            return None
        if state.round.pick_for(role) is not None:
            return None
        deck = state.deck_for(role)
        if deck.is_empty():
            return None

        card = deck.draw_random(self._rng)
        state.round.set_pick(role, card)
        self._log(f"round {state.round.round_number}: {role} drew {card}")
        return card

    def advance_round(self) -> bool:
        """
        Move to the next round, or complete the game on the last one.
        Needs both picks for the current round; returns False otherwise.
        """
        state = self._state
        if state.phase is not Phase.IN_PROGRESS or not state.round.both_picked():
            return False

        if state.round.round_number >= self._max_rounds:
            # final picks stay on the table
            state.phase = Phase.COMPLETED
            self._log("all rounds completed")
            return True

        state.round.clear_picks()
        state.round.round_number += 1
        self._log(f"round {state.round.round_number}")
        return True

    # ── queries ──────────────────────────────────────────────────────────────

    def snapshot(self) -> GameState:
        """Copy of the current game state; changing it does not touch the engine."""
        s = self._state
        return GameState(
            phase=s.phase,
            sniper_deck=Deck(cards=list(s.sniper_deck.cards)),
            keeper_deck=Deck(cards=list(s.keeper_deck.cards)),
            round=replace(s.round),
        )

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def round_number(self) -> int:
        return self._state.round.round_number

    @property
    def max_rounds(self) -> int:
        return self._max_rounds

    @property
    def sniper_pick(self) -> Optional[CardEntry]:
        return self._state.round.sniper_pick

    @property
    def keeper_pick(self) -> Optional[CardEntry]:
        return self._state.round.keeper_pick

    def pick_for(self, role: Role) -> Optional[CardEntry]:
        return self._state.round.pick_for(role)

    def remaining(self, role: Role) -> int:
        return self._state.deck_for(role).remaining()

    def both_picked(self) -> bool:
        return self._state.round.both_picked()

    def is_last_round(self) -> bool:
        return self.round_number >= self._max_rounds

    def catalog(self, role: Role) -> tuple[CardEntry, ...]:
        return self._catalogs[role]
