"""
people_explorer.filters.models - Search and filter criteria
============================================================

Caller-owned criteria objects consumed by the compilers in
``people_explorer.filters.compiler``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from people_explorer.filters.errors import UnsupportedMatchModeError


class MatchMode(str, Enum):
    """How a value is matched against a field."""

    EXACT_MATCH = "ExactMatch"
    CONTAINS = "Contains"
    STARTS_WITH = "StartsWith"

    def __str__(self) -> str:
        return self.value


class FieldType(str, Enum):
    STRING = "String"
    NUMBER = "Number"


def coerce_match_mode(mode: Union[MatchMode, str]) -> MatchMode:
    """
    Normalise a match mode given as enum member, value or member name.

    Raises
    ------
    UnsupportedMatchModeError
        For anything other than ExactMatch, Contains or StartsWith
    """
    if isinstance(mode, MatchMode):
        return mode
    if isinstance(mode, str):
        try:
            return MatchMode(mode)
        except ValueError:
            pass
        if mode in MatchMode.__members__:
            return MatchMode[mode]
    raise UnsupportedMatchModeError(mode)


def is_blank(value: Optional[str]) -> bool:
    """True for ``None``, empty, or whitespace-only strings."""
    return value is None or not value.strip()


@dataclass
class FieldFilter:
    """
    One field/value/mode triple of an advanced filter.

    Parameters
    ----------
    field_name : str, optional
        Catalog field name, e.g. "FirstName" or "City"
    value : str, optional
        Raw user value; blank values are skipped at compile time
    match_mode : MatchMode
        Defaults to exact match
    """
    field_name: Optional[str] = None
    value: Optional[str] = None
    match_mode: MatchMode = MatchMode.EXACT_MATCH

    def describe(self) -> str:
        mode = coerce_match_mode(self.match_mode).value.lower()
        return f"{self.field_name} {mode} '{self.value}'"


@dataclass
class FilterCriteria:
    """
    Ordered set of field filters combined with ``and``.

    Built incrementally by the advanced filter builder.

    Examples
    --------
    >>> criteria = FilterCriteria()
    >>> criteria.add(FieldFilter("FirstName", "John"))
    >>> criteria.is_empty()
    False
    """
    filters: List[FieldFilter] = field(default_factory=list)

    def is_empty(self) -> bool:
        if not self.filters:
            return True
        return all(is_blank(f.value) for f in self.filters)

    def add(self, field_filter: FieldFilter) -> None:
        self.filters.append(field_filter)

    def remove(self, index: int) -> FieldFilter:
        """Remove and return the filter at zero-based ``index``."""
        return self.filters.pop(index)

    def clear(self) -> int:
        """Drop all filters, returning how many were removed."""
        count = len(self.filters)
        self.filters.clear()
        return count

    def __len__(self) -> int:
        return len(self.filters)


@dataclass
class SearchCriteria:
    """
    Quick-search criteria over FirstName, LastName and UserName.

    The three values are combined with ``or`` using a single match mode.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    user_name: Optional[str] = None
    match_mode: MatchMode = MatchMode.EXACT_MATCH

    @classmethod
    def for_term(cls, term: str) -> "SearchCriteria":
        """Apply one free-text term to all three fields with Contains."""
        return cls(
            first_name=term,
            last_name=term,
            user_name=term,
            match_mode=MatchMode.CONTAINS,
        )

    def is_empty(self) -> bool:
        return is_blank(self.first_name) and is_blank(self.last_name) and is_blank(self.user_name)

    def active_fields(self) -> List[str]:
        """Names of the fields that carry a non-blank value."""
        pairs = (
            ("FirstName", self.first_name),
            ("LastName", self.last_name),
            ("UserName", self.user_name),
        )
        return [name for name, value in pairs if not is_blank(value)]

    def term(self) -> str:
        return self.first_name or self.last_name or self.user_name or ""
