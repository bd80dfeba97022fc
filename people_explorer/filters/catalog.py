"""
people_explorer.filters.catalog - Filterable field registry
============================================================

Static, read-only table of the fields offered by the advanced filter.
Nested fields reach into a collection of the Person entity and are
described by a ``CollectionPath`` instead of a format template.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from people_explorer.filters.errors import FieldNotFoundError
from people_explorer.filters.models import FieldType


@dataclass(frozen=True)
class CollectionPath:
    """
    Lambda traversal over a collection-valued property.

    Attributes
    ----------
    collection : str
        Collection property on the entity, e.g. "AddressInfo"
    variable : str
        Lambda range variable, e.g. "a"
    target : str
        Property path relative to the variable, e.g. "City/Name"
    """
    collection: str
    variable: str
    target: str

    @property
    def member(self) -> str:
        """The target as seen through the range variable (``a/City/Name``)."""
        return f"{self.variable}/{self.target}"


@dataclass(frozen=True)
class FilterableField:
    """
    A field that may appear in an advanced filter.

    Attributes
    ----------
    field_name : str
        Unique key used by ``FieldFilter.field_name``
    display_name : str
        Label shown in the field picker
    path : str
        OData property path for scalar fields
    nested : CollectionPath, optional
        Collection traversal for nested fields
    field_type : FieldType
        Declared value type
    """
    field_name: str
    display_name: str
    path: str
    nested: Optional[CollectionPath] = None
    field_type: FieldType = FieldType.STRING

    @property
    def is_nested(self) -> bool:
        return self.nested is not None

    @property
    def path_template(self) -> str:
        """
        Template form with ``{0}`` for the function and ``{1}`` for the value.

        Informational only; expression building works on ``nested``.
        """
        if self.nested is None:
            return self.path
        n = self.nested
        return f"{n.collection}/any({n.variable}: {{0}}({n.member}, '{{1}}'))"


def _nested(field_name: str, display_name: str, collection: str, variable: str, target: str) -> FilterableField:
    return FilterableField(
        field_name=field_name,
        display_name=display_name,
        path=collection,
        nested=CollectionPath(collection, variable, target),
    )


FILTERABLE_FIELDS: Tuple[FilterableField, ...] = (
    FilterableField("FirstName", "First Name", "FirstName"),
    FilterableField("LastName", "Last Name", "LastName"),
    FilterableField("UserName", "User Name", "UserName"),
    FilterableField("Age", "Age", "Age", field_type=FieldType.NUMBER),
    FilterableField("Gender", "Gender", "Gender"),
    _nested("City", "City Name", "AddressInfo", "a", "City/Name"),
    _nested("Friend", "Friend Name", "Friends", "f", "FirstName"),
    _nested("Trip", "Trip Name", "Trips", "t", "Name"),
)

_BY_NAME = {f.field_name: f for f in FILTERABLE_FIELDS}


def list_filterable_fields() -> Tuple[FilterableField, ...]:
    """Return the catalog in display order."""
    return FILTERABLE_FIELDS


def find_field(field_name: Optional[str]) -> Optional[FilterableField]:
    if field_name is None:
        return None
    return _BY_NAME.get(field_name)


def get_field(field_name: str) -> FilterableField:
    """
    Look up a catalog entry by its field name.

    Raises
    ------
    FieldNotFoundError
        If no entry has that name
    """
    found = find_field(field_name)
    if found is None:
        raise FieldNotFoundError(field_name)
    return found
