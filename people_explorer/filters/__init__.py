"""
people_explorer.filters - OData $filter construction
=====================================================

This module turns structured search/filter criteria into injection-safe
OData ``$filter`` expressions:

- sanitizer: validation and quote-doubling of user values
- catalog: static registry of filterable fields (scalar and nested)
- expressions: one predicate per field/value/match mode
- compiler: quick-search (``or``) and advanced-filter (``and``) compilers

"""

from people_explorer.filters.catalog import (
    FILTERABLE_FIELDS,
    CollectionPath,
    FilterableField,
    find_field,
    get_field,
    list_filterable_fields,
)
from people_explorer.filters.compiler import (
    FilterCompiler,
    SearchCompiler,
    compile_filter,
    compile_search,
)
from people_explorer.filters.errors import (
    FieldNotFoundError,
    FilterError,
    InvalidInputError,
    NullCriteriaError,
    UnsupportedMatchModeError,
)
from people_explorer.filters.expressions import (
    build_match_expression,
    build_nested_expression,
    build_simple_expression,
)
from people_explorer.filters.models import (
    FieldFilter,
    FieldType,
    FilterCriteria,
    MatchMode,
    SearchCriteria,
    coerce_match_mode,
)
from people_explorer.filters.sanitizer import (
    escape_and_validate,
    escape_literal,
    validate_value,
)

__all__ = [
    # Models
    "MatchMode",
    "FieldType",
    "FieldFilter",
    "FilterCriteria",
    "SearchCriteria",
    # Catalog
    "CollectionPath",
    "FilterableField",
    "FILTERABLE_FIELDS",
    "list_filterable_fields",
    "find_field",
    "get_field",
    # Sanitizer
    "validate_value",
    "escape_literal",
    "escape_and_validate",
    # Expressions
    "coerce_match_mode",
    "build_simple_expression",
    "build_nested_expression",
    "build_match_expression",
    # Compilers
    "SearchCompiler",
    "FilterCompiler",
    "compile_search",
    "compile_filter",
    # Errors
    "FilterError",
    "NullCriteriaError",
    "InvalidInputError",
    "UnsupportedMatchModeError",
    "FieldNotFoundError",
]
