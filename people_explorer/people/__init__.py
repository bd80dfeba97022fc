"""
people_explorer.people - People domain
=======================================

- models: Person, Friend, Trip, AddressInfo, City, PaginatedResult
- repository: PeopleRepository over the People entity set
- service: PersonService use cases (browse, search, filter, details)

"""

from people_explorer.people.models import (
    AddressInfo,
    City,
    Friend,
    PaginatedResult,
    Person,
    Trip,
)
from people_explorer.people.repository import PeopleRepository
from people_explorer.people.service import PersonService

__all__ = [
    "City",
    "AddressInfo",
    "Friend",
    "Trip",
    "Person",
    "PaginatedResult",
    "PeopleRepository",
    "PersonService",
]
