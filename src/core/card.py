from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CardKind(Enum):
    BONUS   = "bonus"
    PENALTY = "penalty"
    NEUTRAL = "neutral"

    def __str__(self) -> str:
        return self.value


class Role(Enum):
    SNIPER     = "sniper"
    GOALKEEPER = "goalkeeper"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class CardEntry:
    kind: CardKind
    text: str

    @property
    def title(self) -> str:
        """Short name before the colon, e.g. 'Free Run'."""
        head, sep, _ = self.text.partition(":")
        return head.strip() if sep else ""

    @property
    def effect(self) -> str:
        _, sep, tail = self.text.partition(":")
        return tail.strip() if sep else self.text

    def __str__(self) -> str:
        return f"[{self.kind}] {self.text}"

    def __repr__(self) -> str:
        return self.__str__()
