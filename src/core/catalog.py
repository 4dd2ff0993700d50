from __future__ import annotations

from typing import Mapping, Sequence

from .card import CardEntry, CardKind, Role

B, P, N = CardKind.BONUS, CardKind.PENALTY, CardKind.NEUTRAL


SNIPER_CARDS: tuple[CardEntry, ...] = (
    CardEntry(B, "Free Run: You can freely run or move before your shot!"),
    CardEntry(B, "Second Chance: If you miss, you get one extra kick!"),
    CardEntry(B, "Close Range: Move one large step closer to the goal!"),
    CardEntry(B, "Crossbar Bonus: Hitting the crossbar counts as scoring a goal!"),
    CardEntry(P, "Dizzy Spin: Spin around 5 times before kicking!"),
    CardEntry(P, "Weak Foot: You must shoot using your weaker foot!"),
    CardEntry(P, "Blindfolded Shot: Cover your eyes completely while kicking!"),
    CardEntry(P, "Sitting Kick: Shoot the ball while sitting on the ground!"),
    CardEntry(N, "Fair Shot: No bonus, no penalty - normal shot!"),
)

GOALKEEPER_CARDS: tuple[CardEntry, ...] = (
    CardEntry(B, "Goalie Charge: You can freely run forward to defend!"),
    CardEntry(B, "Long Shot: Shooter moves two large steps back from the spot!"),
    CardEntry(B, "Double Defense: Another player joins to help you defend!"),
    CardEntry(B, "Angled Shot: Sniper must shoot from a difficult angle (side)!"),
    CardEntry(P, "Oversized Keeper: Wear oversized clothing while defending!"),
    CardEntry(P, "One-Eyed Keeper: Cover one eye during your defense!"),
    CardEntry(P, "Empty Net: Start outside the goal when the shooter begins!"),
    CardEntry(P, "Backward Defender: Face backward until you hear the kick!"),
    CardEntry(N, "Fair Defense: No bonus, no penalty - normal defense!"),
)

DEFAULT_CATALOGS: dict[Role, tuple[CardEntry, ...]] = {
    Role.SNIPER:     SNIPER_CARDS,
    Role.GOALKEEPER: GOALKEEPER_CARDS,
}


def freeze_catalogs(
    catalogs: Mapping[Role, Sequence[CardEntry]],
) -> dict[Role, tuple[CardEntry, ...]]:
    """
    Validate role catalogs and return an immutable copy.

    Every role needs a non-empty catalog of distinct CardEntry values.
    Raises ValueError otherwise.
    """
    frozen: dict[Role, tuple[CardEntry, ...]] = {}
    for role in Role:
        if role not in catalogs:
            raise ValueError(f"No catalog given for role {role}")
        cards = tuple(catalogs[role])
        if not cards:
            raise ValueError(f"Catalog for role {role} is empty")
        for card in cards:
            if not isinstance(card, CardEntry):
                raise ValueError(f"Catalog for role {role} holds a non-card item: {card!r}")
        if len(set(cards)) != len(cards):
            raise ValueError(f"Catalog for role {role} holds duplicate cards")
        frozen[role] = cards
    return frozen
