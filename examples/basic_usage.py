"""
Example: Querying People with people_explorer
=============================================

Shows the filter compiler on its own and against the live TripPin service.
"""

from people_explorer import ConnectionContext, ODataServiceSettings
from people_explorer.filters import (
    FieldFilter,
    FilterCriteria,
    MatchMode,
    SearchCriteria,
    compile_filter,
    compile_search,
)


def example_compile_only():
    """Build $filter expressions without touching the network."""
    print(compile_search(SearchCriteria.for_term("Russ")))

    criteria = FilterCriteria([
        FieldFilter("LastName", "O'Brien"),
        FieldFilter("City", "San", MatchMode.STARTS_WITH),
        FieldFilter("Trip", "US", MatchMode.CONTAINS),
    ])
    print(compile_filter(criteria))


def example_query():
    """Run a compiled filter through ConnectionContext."""
    criteria = FilterCriteria([FieldFilter("Gender", "Female")])

    with ConnectionContext(ODataServiceSettings()) as conn:
        service = conn.get_service()
        page = service.query(
            "People",
            fields=["UserName", "FirstName", "LastName"],
            filter_expr=compile_filter(criteria),
            top=5,
            count=True,
        )
        print(f"Found {page.count} people, first {len(page.items)}:")
        for item in page.items:
            print(f"  {item['FirstName']} {item['LastName']} ({item['UserName']})")


def example_person_details():
    """Fetch one person with friends and trips expanded."""
    from people_explorer.people import PeopleRepository, PersonService

    with ConnectionContext() as conn:
        people = PersonService(PeopleRepository(conn.get_service()))
        person = people.get_person_details("russellwhyte")
        if person is not None:
            print(f"{person.full_name}: {len(person.friends)} friends, {len(person.trips)} trips")


if __name__ == "__main__":
    example_compile_only()
    # example_query()
    # example_person_details()

    print("Set ODATA_BASE_URL (or use the TripPin default) and uncomment an example to run.")
