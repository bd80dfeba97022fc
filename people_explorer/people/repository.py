"""
people_explorer.people.repository - People entity set access
=============================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

from people_explorer.odata.service import ODataService
from people_explorer.people.models import PaginatedResult, Person

logger = logging.getLogger("people_explorer.people")

ENTITY_SET = "People"
RELATED = ("Friends", "Trips")
FIRST_PAGE = 1
MAX_FILTER_LENGTH = 500


class PeopleRepository:
    """
    Reads people from the ``People`` entity set.

    Parameters
    ----------
    service : ODataService
        Service client bound to the People service root
    """

    def __init__(self, service: ODataService) -> None:
        self.service = service

    def get_people(self, skip: int, top: int) -> PaginatedResult:
        """
        Fetch one server-side page, with the total count.

        Parameters
        ----------
        skip : int
            Records to skip; must not be negative
        top : int
            Page size; must be greater than zero

        Returns
        -------
        PaginatedResult
            The page, numbered ``skip // top + 1``
        """
        if skip < 0:
            raise ValueError("skip cannot be negative.")
        if top <= 0:
            raise ValueError("top must be greater than zero.")

        logger.info("get_people: fetching people with skip=%s, top=%s", skip, top)
        page = self.service.query(ENTITY_SET, skip=skip, top=top, count=True)

        result = PaginatedResult(
            items=[Person.model_validate(item) for item in page.items],
            total_count=page.count or 0,
            current_page=skip // top + FIRST_PAGE,
            page_size=top,
        )
        logger.info(
            "get_people: fetched %d people. Page %d of %d",
            len(result.items), result.current_page, result.total_pages,
        )
        return result

    def search_people(self, filter_query: str) -> List[Person]:
        """
        Fetch every person matching a compiled ``$filter`` expression.

        An empty expression requests the whole collection. Server-driven
        paging is followed to the end.

        Raises
        ------
        TypeError
            If ``filter_query`` is None
        ValueError
            If the expression is longer than 500 characters
        """
        if filter_query is None:
            raise TypeError("filter_query must not be None")
        if len(filter_query) > MAX_FILTER_LENGTH:
            raise ValueError(
                f"Filter query exceeds maximum length of {MAX_FILTER_LENGTH} characters."
            )

        logger.info("search_people: searching people with filter: %s", filter_query)
        params = self.service.build_params(filter_expr=filter_query)
        rows = self.service.read_all(ENTITY_SET, **params)
        people = [Person.model_validate(row) for row in rows]
        logger.info("search_people: search returned %d people", len(people))
        return people

    def get_person(self, username: str, include_related: bool = False) -> Optional[Person]:
        """
        Fetch one person by user name.

        Parameters
        ----------
        username : str
            Key of the person
        include_related : bool
            Expand Friends and Trips

        Returns
        -------
        Person or None
            None if the service does not know the user
        """
        if username is None:
            raise TypeError("username must not be None")
        if not username.strip():
            raise ValueError("Username cannot be empty or whitespace.")

        logger.info(
            "get_person: fetching person with username: %s, include_related: %s",
            username, include_related,
        )
        data = self.service.get_entity(
            ENTITY_SET, username, expand=RELATED if include_related else None
        )
        if data is None:
            logger.info("get_person: person with username %s not found", username)
            return None
        return Person.model_validate(data)
