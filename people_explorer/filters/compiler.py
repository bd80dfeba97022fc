"""
people_explorer.filters.compiler - Criteria to $filter compilation
===================================================================

Two compilers turn caller criteria into a complete ``$filter`` value:

- SearchCompiler: quick search, ORs FirstName/LastName/UserName
- FilterCompiler: advanced filter, ANDs an arbitrary list of field filters

An empty result string means "no filter". Both compilers are stateless.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from people_explorer.filters.catalog import find_field
from people_explorer.filters.errors import NullCriteriaError
from people_explorer.filters.expressions import build_match_expression
from people_explorer.filters.models import FilterCriteria, SearchCriteria, coerce_match_mode, is_blank
from people_explorer.filters.sanitizer import validate_value

logger = logging.getLogger("people_explorer.filters")

UNKNOWN_FIELD = "Unknown"


class SearchCompiler:
    """
    Compile ``SearchCriteria`` into an ``or`` chain of scalar predicates.

    Examples
    --------
    >>> SearchCompiler().compile(
    ...     SearchCriteria(first_name="Jo", last_name="Do", match_mode=MatchMode.CONTAINS)
    ... )
    "contains(FirstName, 'Jo') or contains(LastName, 'Do')"
    """

    def compile(self, criteria: Optional[SearchCriteria]) -> str:
        if criteria is None:
            raise NullCriteriaError("criteria")
        if criteria.is_empty():
            return ""

        mode = coerce_match_mode(criteria.match_mode)
        parts: List[str] = []
        for field_name, value in (
            ("FirstName", criteria.first_name),
            ("LastName", criteria.last_name),
            ("UserName", criteria.user_name),
        ):
            if is_blank(value):
                continue
            validate_value(value)
            parts.append(build_match_expression(field_name, value.strip(), mode))

        expr = " or ".join(parts)
        logger.debug("Compiled search filter: %s", expr)
        return expr


class FilterCompiler:
    """
    Compile ``FilterCriteria`` into an ``and`` chain of predicates.

    Blank values are skipped. A value with invalid control characters
    aborts the whole compilation; no partial expression is returned.
    Field names are resolved against the filterable catalog; names that
    are not in the catalog produce a simple predicate on that name.
    """

    def compile(self, criteria: Optional[FilterCriteria]) -> str:
        if criteria is None:
            raise NullCriteriaError("criteria")
        if criteria.is_empty():
            return ""

        parts: List[str] = []
        for flt in criteria.filters:
            if is_blank(flt.value):
                continue
            validate_value(flt.value)

            field = find_field(flt.field_name)
            parts.append(
                build_match_expression(
                    flt.field_name if flt.field_name is not None else UNKNOWN_FIELD,
                    flt.value.strip(),
                    flt.match_mode,
                    field,
                )
            )

        expr = " and ".join(parts)
        logger.debug("Compiled advanced filter (%d predicates): %s", len(parts), expr)
        return expr


def compile_search(criteria: Optional[SearchCriteria]) -> str:
    """Module-level shortcut for ``SearchCompiler().compile``."""
    return SearchCompiler().compile(criteria)


def compile_filter(criteria: Optional[FilterCriteria]) -> str:
    """Module-level shortcut for ``FilterCompiler().compile``."""
    return FilterCompiler().compile(criteria)
