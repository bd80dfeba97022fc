"""
people_explorer.odata - Generic OData Service Access
=====================================================

- ODataService: Query builder and entity set access
- ODataPage: One page of results with count and next link

"""

from people_explorer.odata.service import ODataPage, ODataService, entity_key

__all__ = [
    "ODataService",
    "ODataPage",
    "entity_key",
]
