from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, MutableSequence, Optional, Sequence, TypeVar

from .card import CardEntry

T = TypeVar("T")


def fisher_yates(items: MutableSequence[T], rng: random.Random) -> None:
    """Shuffle items in place; every ordering is equally likely."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


@dataclass(slots=True)
class Deck:
    cards: List[CardEntry]

    @classmethod
    def new_shuffled(cls, catalog: Sequence[CardEntry], *,
                     rng: Optional[random.Random] = None,
                     seed: Optional[int] = None) -> Deck:
        if rng is None:
            rng = random.Random(seed)
        cards: List[CardEntry] = list(catalog)
        fisher_yates(cards, rng)
        return cls(cards=cards)

    def draw_random(self, rng: random.Random) -> CardEntry:
        if not self.cards:
            raise IndexError("Cannot draw: deck is empty")
        # remaining order carries no meaning, so pop any index
        return self.cards.pop(rng.randrange(len(self.cards)))

    def remaining(self) -> int:
        return len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)
