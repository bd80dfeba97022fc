"""
people_explorer.filters.expressions - Single predicate construction
====================================================================

Builds one OData boolean predicate for a field/value/match-mode triple.

Scalar fields::

    FirstName eq 'John'
    contains(FirstName, 'Jo')
    startswith(FirstName, 'J')

Nested (collection) fields::

    AddressInfo/any(a: a/City/Name eq 'Seattle')
    AddressInfo/any(a: contains(a/City/Name, 'Sea'))
"""

from __future__ import annotations

from typing import Optional, Union

from people_explorer.filters.catalog import CollectionPath, FilterableField
from people_explorer.filters.models import MatchMode, coerce_match_mode
from people_explorer.filters.sanitizer import escape_literal

_FUNCTIONS = {
    MatchMode.CONTAINS: "contains",
    MatchMode.STARTS_WITH: "startswith",
}


def _comparison(subject: str, literal: str, mode: MatchMode) -> str:
    if mode is MatchMode.EXACT_MATCH:
        return f"{subject} eq '{literal}'"
    return f"{_FUNCTIONS[mode]}({subject}, '{literal}')"


def build_simple_expression(field_name: str, value: str, mode: Union[MatchMode, str]) -> str:
    """Predicate against a top-level property; ``value`` is escaped here."""
    mode = coerce_match_mode(mode)
    return _comparison(field_name, escape_literal(value), mode)


def build_nested_expression(path: CollectionPath, value: str, mode: Union[MatchMode, str]) -> str:
    """
    Predicate against a collection member using an ``any`` lambda.

    Exact matches use the infix ``eq`` operator inside the lambda; the
    other modes call the string function on the member path.
    """
    mode = coerce_match_mode(mode)
    inner = _comparison(path.member, escape_literal(value), mode)
    return f"{path.collection}/any({path.variable}: {inner})"


def build_match_expression(
    field_name: str,
    value: str,
    mode: Union[MatchMode, str],
    field: Optional[FilterableField] = None,
) -> str:
    """
    Build one predicate, choosing the nested form when the catalog says so.

    Parameters
    ----------
    field_name : str
        Property name used for the simple form
    value : str
        Unescaped value
    mode : MatchMode or str
        Match mode
    field : FilterableField, optional
        Catalog entry; ``None`` or a scalar entry yields the simple form

    Returns
    -------
    str
        OData predicate fragment
    """
    if field is not None and field.nested is not None:
        return build_nested_expression(field.nested, value, mode)
    return build_simple_expression(field_name, value, mode)
