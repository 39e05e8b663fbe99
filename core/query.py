"""Search query parsing.

A raw search string is split on whitespace and each token is classified by
its leading sigil:

    #tag        tag predicate (exact, lowercase)
    @category   category predicate (case-insensitive exact)
    !status     status predicate (todo, inprogress, done, archived)
    p0..p5      priority predicate
    anything    free-text term (lowercased)

Repeated predicates of one kind: the last one wins. Parsing never fails;
unrecognised input degrades to free text.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .priority import Priority, try_parse_priority
from .status import Status, try_parse_status


@dataclass(frozen=True)
class Query:
    terms: Tuple[str, ...] = ()
    tag: Optional[str] = None
    category: Optional[str] = None
    status: Optional[Status] = None
    priority: Optional[Priority] = None

    @property
    def has_predicates(self) -> bool:
        return any(p is not None for p in (self.tag, self.category, self.status, self.priority))

    @property
    def is_empty(self) -> bool:
        return not self.terms and not self.has_predicates

    def describe(self) -> str:
        parts: List[str] = [" ".join(self.terms)] if self.terms else []
        if self.tag is not None:
            parts.append(f"tag={self.tag}")
        if self.category is not None:
            parts.append(f"category={self.category}")
        if self.status is not None:
            parts.append(f"status={self.status.label}")
        if self.priority is not None:
            parts.append(f"priority={self.priority.label}")
        return ", ".join(parts) if parts else "all"


def parse_query(raw: str) -> Query:
    terms: List[str] = []
    tag: Optional[str] = None
    category: Optional[str] = None
    status: Optional[Status] = None
    priority: Optional[Priority] = None

    for token in (raw or "").split():
        sigil, rest = token[0], token[1:]
        if sigil == "#":
            if rest:
                tag = rest.lower()
            continue
        if sigil == "@":
            if rest:
                category = rest.lower()
            continue
        if sigil == "!":
            if not rest:
                continue
            parsed_status = try_parse_status(rest)
            if parsed_status is not None:
                status = parsed_status
                continue
            terms.append(token.lower())
            continue
        parsed_priority = try_parse_priority(token) if len(token) == 2 else None
        if parsed_priority is not None:
            priority = parsed_priority
            continue
        terms.append(token.lower())

    return Query(terms=tuple(terms), tag=tag, category=category, status=status, priority=priority)


__all__ = ["Query", "parse_query"]
