"""
people_explorer.filters.sanitizer - OData string literal safety
================================================================

Validation and escaping of user-supplied values before they are embedded
in a single-quoted OData string literal.
"""

from __future__ import annotations

import unicodedata

from people_explorer.filters.errors import InvalidInputError

_ALLOWED_CONTROL = frozenset("\t\r\n")


def validate_value(value: str) -> None:
    """
    Reject values containing control characters other than tab, CR and LF.

    Parameters
    ----------
    value : str
        Raw user value

    Raises
    ------
    InvalidInputError
        If a disallowed control character is present
    """
    for ch in value:
        if ch not in _ALLOWED_CONTROL and unicodedata.category(ch) == "Cc":
            raise InvalidInputError(
                "Search value contains invalid control characters.", value
            )


def escape_literal(value: str) -> str:
    """
    Escape a string value for use in OData $filter expressions.

    Examples
    --------
    >>> escape_literal("O'Brien")
    "O''Brien"
    """
    return value.replace("'", "''")


def escape_and_validate(value: str) -> str:
    validate_value(value)
    return escape_literal(value)
