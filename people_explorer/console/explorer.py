"""
people_explorer.console.explorer - Main browse loop
====================================================

Without an active search or filter the explorer pages through the service
(server-side ``$skip``/``$top``). Once a search or filter has run, the
matching people are held in memory and paged locally.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from people_explorer.console.display import DisplayService, double_line, single_line
from people_explorer.console.handlers import (
    AdvancedFilterHandler,
    GlobalSearchHandler,
    PersonDetailsHandler,
)
from people_explorer.console.io import ConsoleIO
from people_explorer.filters.models import FilterCriteria, SearchCriteria
from people_explorer.people.models import PaginatedResult, Person
from people_explorer.people.service import PersonService

logger = logging.getLogger("people_explorer.console")


class PeopleExplorer:
    """
    Interactive people browser.

    Parameters
    ----------
    console : ConsoleIO
        Terminal
    person_service : PersonService
        Use cases
    display : DisplayService
        Renderer
    search_handler, filter_handler, details_handler
        Sub-prompts
    page_size : int
        People per page
    """

    def __init__(
        self,
        console: ConsoleIO,
        person_service: PersonService,
        display: DisplayService,
        search_handler: GlobalSearchHandler,
        filter_handler: AdvancedFilterHandler,
        details_handler: PersonDetailsHandler,
        page_size: int = 10,
    ) -> None:
        self.console = console
        self.person_service = person_service
        self.display = display
        self.search_handler = search_handler
        self.filter_handler = filter_handler
        self.details_handler = details_handler
        self.page_size = page_size

        self.current_page = 1
        self.active_search: Optional[SearchCriteria] = None
        self.active_filter: Optional[FilterCriteria] = None
        self.filtered_results: Optional[List[Person]] = None
        self._page: Optional[PaginatedResult] = None

    @property
    def has_active_filter(self) -> bool:
        return self.filtered_results is not None

    def run(self) -> None:
        """Loop until the user exits or input ends."""
        keep_going = True
        while keep_going:
            try:
                self.render()
            except Exception as exc:
                logger.error("Failed to load people", exc_info=True)
                self.display.display_error(f"Error: {exc}")

            self.console.write("Your choice: ")
            line = self.console.read_line()
            if line is None:
                break

            try:
                keep_going = self.process_command(line.strip().upper())
            except Exception as exc:
                logger.error("Command failed", exc_info=True)
                self.display.display_error(f"Error: {exc}")

    # ---------------- rendering ----------------

    def render(self) -> None:
        c = self.console
        c.clear()
        c.write_line(double_line())
        c.write_line("                    People Explorer")
        c.write_line(double_line())
        c.write_line("[G] Global Search  [F] Advanced Filter  [C] Clear Filter")
        c.write_line("[X] Exit")
        c.write_line(single_line())

        count = len(self.filtered_results) if self.filtered_results is not None else None
        self.display.display_filter_summary(self.active_search, self.active_filter, count)
        c.write_line(single_line())
        c.write_line()

        page = self.current_view()
        if not page.items:
            message = "No people found matching the filter." if self.has_active_filter else "No people found."
            self.display.display_empty_result(message)
        else:
            self.display.display_people_list(page)
        c.write_line()

    # ---------------- paging ----------------

    def _load_page(self) -> PaginatedResult:
        if self._page is None or self._page.current_page != self.current_page:
            self._page = self.person_service.get_people(self.current_page, self.page_size)
        return self._page

    def current_view(self) -> PaginatedResult:
        """The page on screen: a server page, or a slice of the filtered results."""
        if self.filtered_results is None:
            return self._load_page()
        skip = (self.current_page - 1) * self.page_size
        return PaginatedResult(
            items=self.filtered_results[skip: skip + self.page_size],
            total_count=len(self.filtered_results),
            current_page=self.current_page,
            page_size=self.page_size,
        )

    def total_pages(self) -> int:
        return self.current_view().total_pages

    def current_items(self) -> List[Person]:
        return self.current_view().items

    # ---------------- commands ----------------

    def process_command(self, choice: str) -> bool:
        """
        Dispatch one menu command.

        Returns
        -------
        bool
            False when the user asked to exit
        """
        handlers = {
            "N": self.next_page,
            "P": self.previous_page,
            "S": self.select_person,
            "G": self.global_search,
            "F": self.advanced_filter,
            "C": self.clear_filter,
        }
        if choice == "X":
            return False
        handler = handlers.get(choice)
        if handler is None:
            self.display.display_error("Invalid command. Please try again.")
            return True
        handler()
        return True

    def next_page(self) -> None:
        if self.current_page >= self.total_pages():
            self.display.display_error("You are already on the last page.")
            return
        self.current_page += 1

    def previous_page(self) -> None:
        if self.current_page <= 1:
            self.display.display_error("You are already on the first page.")
            return
        self.current_page -= 1

    def select_person(self) -> None:
        self.console.write("Enter person number: ")
        text = (self.console.read_line() or "").strip()
        try:
            number = int(text)
        except ValueError:
            number = 0
        if number < 1:
            self.display.display_error("Invalid person number. Please enter a valid number.")
            return

        items = self.current_items()
        if number > len(items):
            self.display.display_error(f"Invalid person number. Please select between 1 and {len(items)}.")
            return

        self.console.clear()
        self.details_handler.display_person(items[number - 1].user_name)
        self.console.write_line()
        self.console.write_line("Press Enter to return to the list...")
        self.console.read_key()

    def global_search(self) -> None:
        criteria = self.search_handler.prompt()
        if criteria is None:
            return
        self.filtered_results = self.person_service.search_people(criteria)
        self.active_search = criteria
        self.active_filter = None
        self.current_page = 1

    def advanced_filter(self) -> None:
        criteria = self.filter_handler.prompt()
        if criteria is None:
            return
        self.filtered_results = self.person_service.filter_people(criteria)
        self.active_filter = criteria
        self.active_search = None
        self.current_page = 1

    def clear_filter(self) -> None:
        self.active_search = None
        self.active_filter = None
        self.filtered_results = None
        self.current_page = 1
