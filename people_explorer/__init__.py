"""
People Explorer (people_explorer)
=================================

An interactive terminal client for browsing, searching and filtering the
People collection of an OData v4 service (TripPin by default).

Usage
-----
>>> from people_explorer import ConnectionContext
>>> from people_explorer.filters import FieldFilter, FilterCriteria, MatchMode, compile_filter
>>>
>>> criteria = FilterCriteria([
...     FieldFilter("FirstName", "John"),
...     FieldFilter("City", "Seattle", MatchMode.CONTAINS),
... ])
>>> compile_filter(criteria)
"FirstName eq 'John' and AddressInfo/any(a: contains(a/City/Name, 'Seattle'))"
>>>
>>> with ConnectionContext() as conn:
...     page = conn.get_service().query("People", filter_expr=compile_filter(criteria))

Subpackages
-----------
- people_explorer.filters: $filter construction (the query compiler)
- people_explorer.core: Settings, session, connection, logging
- people_explorer.odata: Generic entity-set query client
- people_explorer.people: People models, repository and service
- people_explorer.console: Interactive terminal UI

Run with ``python -m people_explorer``.
"""

__version__ = "0.1.0"

from people_explorer.core.config import ODataServiceSettings
from people_explorer.core.session import ODataSession, ODataUpstreamError
from people_explorer.core.connection import ConnectionContext

from people_explorer.odata import ODataService

__all__ = [
    "__version__",
    # Core
    "ODataServiceSettings",
    "ODataSession",
    "ODataUpstreamError",
    "ConnectionContext",
    # OData
    "ODataService",
]
