from enum import Enum
from typing import Optional

from .errors import ValidationError


class Priority(Enum):
    """Ordinal urgency; P0 is the most urgent."""

    P0 = (0, "Urgent")
    P1 = (1, "Must have")
    P2 = (2, "Should do")
    P3 = (3, "Nice to have")
    P4 = (4, "Wishlist")
    P5 = (5, "Worth considering")

    @property
    def rank(self) -> int:
        return self.value[0]

    @property
    def description(self) -> str:
        return self.value[1]

    @property
    def label(self) -> str:
        return self.name

    def raise_(self) -> "Priority":
        return _BY_RANK[max(0, self.rank - 1)]

    def lower(self) -> "Priority":
        return _BY_RANK[min(5, self.rank + 1)]

    @classmethod
    def default(cls) -> "Priority":
        return cls.P2

    @classmethod
    def from_string(cls, value: str) -> "Priority":
        parsed = try_parse_priority(value)
        if parsed is None:
            raise ValidationError(
                f"Invalid priority: {value}. Valid values: p0, p1, p2, p3, p4, p5",
                field="priority",
            )
        return parsed


_BY_RANK = {p.rank: p for p in Priority}


def try_parse_priority(value: str) -> Optional[Priority]:
    token = (value or "").strip().upper()
    if len(token) == 2 and token[0] == "P" and token[1] in "012345":
        return _BY_RANK[int(token[1])]
    return None


__all__ = ["Priority", "try_parse_priority"]
