"""
people_explorer.console.display - Box-drawn views
==================================================

Renders people lists, the person detail card, and result/error panels.
"""

from __future__ import annotations

from typing import Optional

from people_explorer.console.io import ConsoleIO
from people_explorer.filters.models import FilterCriteria, SearchCriteria, coerce_match_mode
from people_explorer.people.models import PaginatedResult, Person

BOX_WIDTH = 59
CARD_WIDTH = 58


def center_text(text: str, width: int) -> str:
    if len(text) >= width:
        return text
    left = (width - len(text)) // 2
    return " " * left + text + " " * (width - len(text) - left)


def pad_right(text: str, width: int) -> str:
    """Pad to ``width``, truncating overlong text with ``...``."""
    if width < 4:
        return text[:width].ljust(width)
    if len(text) > width:
        return text[: width - 3] + "..."
    return text.ljust(width)


def double_line(width: int = BOX_WIDTH) -> str:
    return "═" * width


def single_line(width: int = BOX_WIDTH) -> str:
    return "─" * width


class DisplayService:
    """
    Writes formatted views to a ConsoleIO.

    Parameters
    ----------
    console : ConsoleIO
        Output target
    """

    def __init__(self, console: ConsoleIO) -> None:
        self.console = console

    def _banner(self, title: str) -> None:
        self.console.write_line(double_line())
        self.console.write_line(center_text(title, BOX_WIDTH))
        self.console.write_line(double_line())
        self.console.write_line()

    def display_people_list(self, people: PaginatedResult) -> None:
        self._banner(f"People (Page {people.current_page} of {people.total_pages})")
        for index, person in enumerate(people.items, start=1):
            self.console.write_line(f"{index:2}. {person.full_name} - {person.user_name or ''}")
        self.console.write_line()
        self.console.write_line(single_line())
        self.console.write_line("Navigation:")
        self.console.write_line("  [N] Next Page  [P] Previous Page  [S] Select Person")

    # ---------------- person card ----------------

    def _row(self, text: str) -> None:
        inner = CARD_WIDTH - 2
        self.console.write_line("│ " + pad_right(text, inner - 1) + "│")

    def _divider(self) -> None:
        self.console.write_line("├" + "─" * (CARD_WIDTH - 2) + "┤")

    def display_person_details(self, person: Person) -> None:
        if person is None:
            raise TypeError("person must not be None")

        self.console.write_line("┌" + "─" * (CARD_WIDTH - 2) + "┐")
        self.console.write_line("│" + center_text("Person Details", CARD_WIDTH - 2) + "│")
        self._divider()

        self._row(f"Name:        {person.full_name}")
        self._row(f"Username:    {person.user_name or ''}")
        if person.gender and person.gender.strip():
            self._row(f"Gender:      {person.gender}")
        if person.age is not None:
            self._row(f"Age:         {person.age}")
        if person.emails:
            self._row(f"Email(s):    {', '.join(person.emails)}")
        if person.favorite_feature and person.favorite_feature.strip():
            self._row(f"Fav Feature: {person.favorite_feature}")
        if person.features:
            self._row(f"Features:    {', '.join(person.features)}")

        if person.address_info:
            self._divider()
            self._row(f"Addresses ({len(person.address_info)}):")
            for address in person.address_info:
                self._row(f"  {address.display()}")

        if person.home_address is not None:
            self._divider()
            self._row("Home Address:")
            self._row(f"  {person.home_address.display()}")

        if person.friends:
            self._divider()
            self._row(f"Friends ({len(person.friends)}):")
            for friend in person.friends:
                user_name = friend.user_name or ""
                name = friend.full_name
                self._row(f"  {name} ({user_name})" if name else f"  {user_name}")

                details = []
                if friend.gender and friend.gender.strip():
                    details.append(friend.gender)
                if friend.age is not None:
                    details.append(f"Age: {friend.age}")
                if details:
                    self._row(f"    {', '.join(details)}")
                if friend.emails:
                    self._row(f"    Email: {', '.join(friend.emails)}")

        if person.trips:
            self._divider()
            self._row(f"Trips ({len(person.trips)}):")
            for trip in person.trips:
                start = trip.starts_at.strftime("%Y-%m-%d") if trip.starts_at else "?"
                end = trip.ends_at.strftime("%Y-%m-%d") if trip.ends_at else "?"
                self._row(f"  {trip.name or 'Trip'} ({start} to {end})")
                self._row(f"    Budget: ${trip.budget:,.2f}")
                if trip.description and trip.description.strip():
                    self._row(f"    {trip.description}")
                if trip.tags:
                    self._row(f"    Tags: {', '.join(trip.tags)}")

        self.console.write_line("└" + "─" * (CARD_WIDTH - 2) + "┘")

    # ---------------- panels ----------------

    def display_empty_result(self, message: str) -> None:
        if not message or not message.strip():
            raise ValueError("Message cannot be empty or whitespace.")

        self._banner("Search Results")
        self.console.write_line(message)
        self.console.write_line()
        self.console.write_line("Suggestions:")
        self.console.write_line('  • Try broader search criteria (use "Contains" instead of "Exact Match")')
        self.console.write_line("  • Check spelling of search terms")
        self.console.write_line("  • Try searching with fewer fields")
        self.console.write_line('  • Use "Clear Filter" to browse all available people')

    def display_error(self, message: str) -> None:
        if not message or not message.strip():
            raise ValueError("Message cannot be empty or whitespace.")

        self._banner("ERROR")
        self.console.write_line(f"⚠ {message}")

    def display_filter_summary(
        self,
        search: Optional[SearchCriteria],
        filters: Optional[FilterCriteria],
        result_count: Optional[int] = None,
    ) -> None:
        """One-line description of the active search or filter."""
        suffix = f" ({result_count} results)" if result_count is not None else ""
        if search is not None and not search.is_empty():
            fields = "/".join(search.active_fields())
            mode = coerce_match_mode(search.match_mode).value.lower()
            self.console.write_line(f"Current Filter: {fields} {mode} '{search.term()}'{suffix}")
        elif filters is not None and not filters.is_empty():
            text = " AND ".join(f.describe() for f in filters.filters)
            self.console.write_line(f"Current Filter: {text}{suffix}")
        else:
            self.console.write_line("Current Filter: None")
