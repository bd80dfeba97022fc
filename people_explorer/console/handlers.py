"""
people_explorer.console.handlers - Interactive prompts
=======================================================

Prompts that collect criteria from the user, plus the person detail view.
"""

from __future__ import annotations

import logging
from typing import Optional

from people_explorer.console.display import DisplayService, double_line, single_line
from people_explorer.console.io import ConsoleIO
from people_explorer.filters.catalog import list_filterable_fields
from people_explorer.filters.models import FieldFilter, FilterCriteria, MatchMode, SearchCriteria
from people_explorer.people.service import PersonService

logger = logging.getLogger("people_explorer.console")

MATCH_MODE_CHOICES = {
    "1": MatchMode.EXACT_MATCH,
    "2": MatchMode.CONTAINS,
    "3": MatchMode.STARTS_WITH,
}


def _read(console: ConsoleIO) -> str:
    return (console.read_line() or "").strip()


def _parse_index(text: str, upper: int) -> Optional[int]:
    """One-based menu number to zero-based index, or None if out of range."""
    try:
        number = int(text)
    except ValueError:
        return None
    if number < 1 or number > upper:
        return None
    return number - 1


class GlobalSearchHandler:
    """Free-text search over first name, last name and user name."""

    def __init__(self, console: ConsoleIO) -> None:
        self.console = console

    def prompt(self) -> Optional[SearchCriteria]:
        self.console.write_line()
        self.console.write_line(double_line())
        self.console.write_line("                    Global Search")
        self.console.write_line(double_line())
        self.console.write_line("Search across: First Name, Last Name, Username")
        self.console.write_line("Uses: Contains (partial match)")
        self.console.write_line()
        self.console.write("Enter search term (or M to cancel): ")

        term = _read(self.console)
        if not term or term.upper() == "M":
            return None
        return SearchCriteria.for_term(term)


class AdvancedFilterHandler:
    """
    Menu for building a FilterCriteria one field filter at a time.

    The criteria survive between prompts so the user can refine them.
    """

    def __init__(self, console: ConsoleIO) -> None:
        self.console = console
        self.criteria = FilterCriteria()

    def prompt(self) -> Optional[FilterCriteria]:
        """
        Run the builder menu.

        Returns
        -------
        FilterCriteria or None
            The criteria on [S]earch, None on [M] cancel or end of input
        """
        while True:
            self._show_menu()
            line = self.console.read_line()
            if line is None:
                return None

            choice = line.strip().upper()
            if choice == "A":
                self._add_filter()
            elif choice == "R":
                self._remove_filter()
            elif choice == "C":
                self._clear_filters()
            elif choice == "S":
                return self.criteria
            elif choice == "M":
                return None
            else:
                self.console.write_line("Invalid choice. Please try again.")
                self.console.write_line()

    def _show_menu(self) -> None:
        c = self.console
        c.write_line()
        c.write_line(double_line())
        c.write_line("                  Advanced Filter Builder")
        c.write_line(double_line())
        c.write_line()
        if self.criteria.filters:
            c.write_line("Current Filters:")
            for i, flt in enumerate(self.criteria.filters, start=1):
                c.write_line(f"  {i}. {flt.field_name} {flt.match_mode.value} '{flt.value}'")
        else:
            c.write_line("No filters added yet.")
        c.write_line()
        c.write_line(single_line())
        c.write_line("[A] Add Filter")
        c.write_line("[R] Remove Filter")
        c.write_line("[C] Clear All Filters")
        c.write_line("[S] Search")
        c.write_line("[M] Cancel")
        c.write_line(single_line())
        c.write("Your choice: ")

    def _add_filter(self) -> None:
        c = self.console
        fields = list_filterable_fields()

        c.write_line()
        c.write_line("Select field to filter:")
        for i, fld in enumerate(fields, start=1):
            c.write_line(f"  {i}. {fld.display_name}")
        c.write("Field number: ")
        index = _parse_index(_read(c), len(fields))
        if index is None:
            c.write_line("Invalid field selection.")
            return
        selected = fields[index]

        c.write_line()
        c.write_line("Select search type:")
        for key, mode in MATCH_MODE_CHOICES.items():
            c.write_line(f"  {key}. {mode.value}")
        c.write("Search type number: ")
        mode = MATCH_MODE_CHOICES.get(_read(c))
        if mode is None:
            c.write_line("Invalid search type selection.")
            return

        c.write_line()
        c.write(f"Enter value for {selected.display_name}: ")
        value = _read(c)
        if not value:
            c.write_line("Value cannot be empty.")
            return

        self.criteria.add(FieldFilter(selected.field_name, value, mode))
        c.write_line()
        c.write_line(f"Filter added: {selected.display_name} {mode.value} '{value}'")

    def _remove_filter(self) -> None:
        c = self.console
        if not self.criteria.filters:
            c.write_line()
            c.write_line("No filters to remove.")
            return

        c.write_line()
        c.write("Enter filter number to remove: ")
        index = _parse_index(_read(c), len(self.criteria))
        if index is None:
            c.write_line("Invalid filter number.")
            return

        removed = self.criteria.remove(index)
        c.write_line()
        c.write_line(f"Filter removed: {removed.field_name} {removed.match_mode.value} '{removed.value}'")

    def _clear_filters(self) -> None:
        count = self.criteria.clear()
        self.console.write_line()
        self.console.write_line(f"All filters cleared ({count} filter(s) removed).")


class PersonDetailsHandler:
    """Fetches one person and renders the detail card."""

    def __init__(self, console: ConsoleIO, person_service: PersonService, display: DisplayService) -> None:
        self.console = console
        self.person_service = person_service
        self.display = display

    @staticmethod
    def validate_username(username: Optional[str]) -> bool:
        return username is not None and bool(username.strip())

    def display_person(self, username: Optional[str]) -> None:
        if not self.validate_username(username):
            self.display.display_error("Invalid username. Please enter a valid username.")
            return

        try:
            person = self.person_service.get_person_details(username)
        except Exception:
            logger.error("Error occurred while fetching details for username: %s", username, exc_info=True)
            self.display.display_error(
                "An error occurred while fetching person details. Please try again later."
            )
            return

        if person is None:
            self.display.display_error(f"Person with username '{username}' was not found.")
            return
        self.display.display_person_details(person)
