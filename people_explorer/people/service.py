"""
people_explorer.people.service - People use cases
==================================================

Validates paging and criteria, compiles filters and delegates to the
repository. Failures are logged and re-raised to the caller.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from people_explorer.filters.compiler import FilterCompiler, SearchCompiler
from people_explorer.filters.errors import NullCriteriaError
from people_explorer.filters.models import FilterCriteria, SearchCriteria
from people_explorer.people.models import PaginatedResult, Person
from people_explorer.people.repository import PeopleRepository

logger = logging.getLogger("people_explorer.people")

MAX_PAGE_SIZE = 100


class PersonService:
    """
    Browse, search, filter and inspect people.

    Parameters
    ----------
    repository : PeopleRepository
        Data access for the People entity set
    search_compiler : SearchCompiler, optional
        Quick-search compiler
    filter_compiler : FilterCompiler, optional
        Advanced-filter compiler
    """

    def __init__(
        self,
        repository: PeopleRepository,
        search_compiler: Optional[SearchCompiler] = None,
        filter_compiler: Optional[FilterCompiler] = None,
    ) -> None:
        self.repository = repository
        self.search_compiler = search_compiler or SearchCompiler()
        self.filter_compiler = filter_compiler or FilterCompiler()

    def get_people(self, page: int, page_size: int) -> PaginatedResult:
        if page < 1:
            raise ValueError("Page number must be greater than 0.")
        if page_size < 1:
            raise ValueError("Page size must be greater than 0.")
        if page_size > MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {MAX_PAGE_SIZE}.")

        try:
            logger.info("Fetching people: page=%s, page_size=%s", page, page_size)
            result = self.repository.get_people((page - 1) * page_size, page_size)
            logger.info(
                "Fetched %d people (page %d of %d)",
                len(result.items), result.current_page, result.total_pages,
            )
            return result
        except Exception:
            logger.error("Error fetching people: page=%s, page_size=%s", page, page_size, exc_info=True)
            raise

    def search_people(self, criteria: Optional[SearchCriteria]) -> List[Person]:
        """
        Run a quick search.

        Raises
        ------
        NullCriteriaError
            If criteria is None
        ValueError
            If every search field is blank
        """
        if criteria is None:
            raise NullCriteriaError("criteria")
        if criteria.is_empty():
            raise ValueError("Search criteria must contain at least one search field.")

        try:
            logger.info(
                "Searching people: match_mode=%s, first_name=%s, last_name=%s, user_name=%s",
                criteria.match_mode, criteria.first_name, criteria.last_name, criteria.user_name,
            )
            filter_query = self.search_compiler.compile(criteria)
            logger.info("Built filter query: %s", filter_query)

            results = self.repository.search_people(filter_query)
            logger.info("Search completed: found %d matching people", len(results))
            return results
        except Exception:
            logger.error("Error searching people: match_mode=%s", criteria.match_mode, exc_info=True)
            raise

    def filter_people(self, criteria: Optional[FilterCriteria]) -> List[Person]:
        """
        Run an advanced filter.

        Raises
        ------
        NullCriteriaError
            If criteria is None
        ValueError
            If no filter carries a value
        """
        if criteria is None:
            raise NullCriteriaError("criteria")
        if criteria.is_empty():
            raise ValueError("Filter criteria must contain at least one filter.")

        try:
            logger.info("Filtering people with %d filters", len(criteria))
            filter_query = self.filter_compiler.compile(criteria)
            logger.info("Built filter query: %s", filter_query)

            results = self.repository.search_people(filter_query)
            logger.info("Filter completed: found %d matching people", len(results))
            return results
        except Exception:
            logger.error("Error filtering people with %d filters", len(criteria), exc_info=True)
            raise

    def get_person_details(self, username: str) -> Optional[Person]:
        """Fetch one person with friends and trips expanded."""
        if username is None:
            raise TypeError("username must not be None")
        if not username.strip():
            raise ValueError("Username cannot be empty or whitespace.")

        try:
            logger.info("Fetching person details for username: %s", username)
            person = self.repository.get_person(username, include_related=True)
            if person is not None:
                logger.info(
                    "Retrieved details for user: %s (friends: %d, trips: %d)",
                    username, len(person.friends), len(person.trips),
                )
            else:
                logger.info("Person not found: %s", username)
            return person
        except Exception:
            logger.error("Error fetching person details for username: %s", username, exc_info=True)
            raise
