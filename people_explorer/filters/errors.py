"""
people_explorer.filters.errors - Filter compilation errors
===========================================================
"""


class FilterError(Exception):
    """Base class for all filter-construction errors."""


class NullCriteriaError(FilterError, TypeError):
    """Raised when a compiler is handed ``None`` instead of criteria."""

    def __init__(self, name: str = "criteria"):
        super().__init__(f"{name} must not be None")
        self.name = name


class InvalidInputError(FilterError, ValueError):
    """
    Raised when a user-supplied value cannot be embedded in a filter.

    Attributes
    ----------
    value : str
        The rejected value
    """

    def __init__(self, message: str, value: str = ""):
        super().__init__(message)
        self.value = value


class UnsupportedMatchModeError(FilterError, ValueError):
    """Raised for a match mode outside ExactMatch/Contains/StartsWith."""

    def __init__(self, mode: object):
        super().__init__(f"Unsupported match mode: {mode!r}")
        self.mode = mode


class FieldNotFoundError(FilterError, KeyError):
    """Raised when a field name is not present in the filterable catalog."""

    def __init__(self, field_name: str):
        super().__init__(field_name)
        self.field_name = field_name

    def __str__(self) -> str:
        return f"Unknown filterable field: {self.field_name}"
