from __future__ import annotations

from typing import Callable

from .card import CardEntry, Role
from .round_engine import Phase, RoundEngine

_HELP = "  [s] sniper draws   [g] goalkeeper draws   [n] next round   [r] restart   [q] quit"

_ROLE_KEYS = {"s": Role.SNIPER, "g": Role.GOALKEEPER}


class ConsoleSession:
    """Plain-text front end: reads one command per line and drives the engine."""

    def __init__(
        self,
        engine: RoundEngine,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.engine = engine
        self._input = input_fn
        self._out = output_fn

    # ── output helpers ───────────────────────────────────────────────────────

    def _show_card(self, role: Role, card: CardEntry) -> None:
        head = card.title or card.effect
        self._out(f"  {role.value.upper():<10} {card.kind.value.upper():<8} {head}")
        if card.title:
            self._out(f"  {'':<19} {card.effect}")

    def _show_round(self) -> None:
        e = self.engine
        self._out(f"\n{'═'*50}")
        self._out(f"  ROUND {e.round_number} / {e.max_rounds}")
        self._out(f"  Deck: sniper {e.remaining(Role.SNIPER)}/{len(e.catalog(Role.SNIPER))}  │  "
                  f"goalkeeper {e.remaining(Role.GOALKEEPER)}/{len(e.catalog(Role.GOALKEEPER))}")
        self._out(_HELP)

    def _show_completed(self) -> None:
        self._out(f"\n{'═'*50}")
        self._out("  All rounds completed!")
        self._out("  [r] play again   [q] quit")

    # ── commands ─────────────────────────────────────────────────────────────

    def handle(self, cmd: str) -> bool:
        """Apply one command. Returns False when the session should end."""
        cmd = cmd.strip().lower()
        e = self.engine

        if cmd == "q":
            return False
        if cmd == "r":
            e.start()
            self._show_round()
            return True

        if e.phase is Phase.COMPLETED:
            self._out("  The game is over. Press r to play again.")
            return True

        if cmd in _ROLE_KEYS:
            role = _ROLE_KEYS[cmd]
            card = e.draw_for(role)
            if card is None:
                self._out(f"  ✗ {role} cannot draw now.")
            else:
                self._show_card(role, card)
                if e.both_picked() and e.is_last_round():
                    e.advance_round()
                    self._show_completed()
        elif cmd == "n":
            if not e.both_picked():
                self._out("  ✗ Both roles must draw before the next round.")
            elif e.advance_round():
                if e.phase is Phase.COMPLETED:
                    self._show_completed()
                else:
                    self._show_round()
        else:
            self._out(f"  Unknown command {cmd!r}.")
            self._out(_HELP)
        return True

    def run(self) -> None:
        """Start a game and read commands until quit or end of input."""
        self.engine.start()
        self._show_round()
        while True:
            try:
                raw = self._input("  > ")
            except EOFError:
                break
            if not self.handle(raw):
                break
        self._out("  Bye!")
