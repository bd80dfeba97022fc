"""
people_explorer.odata.service - OData Service Client
=====================================================

Entity-set query client on top of an ODataSession.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generator, List, Optional, Sequence
from urllib.parse import quote

from people_explorer.core.session import ODataSession
from people_explorer.filters.sanitizer import escape_literal


def _join_csv(items: Sequence[str]) -> str:
    """Join items as comma-separated values, stripping whitespace."""
    return ",".join([s.strip() for s in items if s and s.strip()])


def _items(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    return payload.get("value") or []


def _next_link(payload: Dict[str, Any]) -> Optional[str]:
    return payload.get("@odata.nextLink")


def entity_key(key: str) -> str:
    """
    Render a string key segment, e.g. ``People('russellwhyte')``.

    The key is escaped as an OData literal, then percent-encoded for the path.
    """
    return f"('{quote(escape_literal(key), safe='')}')"


@dataclass
class ODataPage:
    """
    One page of an entity-set response.

    Attributes
    ----------
    items : list of dict
        Entities on this page
    count : int, optional
        ``@odata.count`` when requested with ``$count=true``
    next_link : str, optional
        Server-driven paging link
    """
    items: List[Dict[str, Any]] = field(default_factory=list)
    count: Optional[int] = None
    next_link: Optional[str] = None


class ODataService:
    """
    Service-scoped OData query client.

    Parameters
    ----------
    sess : ODataSession
        Active OData session

    Examples
    --------
    >>> with ODataSession(settings) as sess:
    ...     api = ODataService(sess)
    ...     page = api.query(
    ...         "People",
    ...         filter_expr="FirstName eq 'Russell'",
    ...         top=10,
    ...         count=True,
    ...     )
    """

    def __init__(self, sess: ODataSession) -> None:
        self.sess = sess

    # ---------------- core reads ----------------

    def read(self, entity_set: str, **query: str) -> List[Dict[str, Any]]:
        """Read a single page of results from an entity set."""
        payload = self.sess.get(entity_set, params=query) or {}
        return _items(payload)

    def iterate(
        self,
        entity_set: str,
        *,
        max_pages: Optional[int] = None,
        **query: str,
    ) -> Generator[List[Dict[str, Any]], None, None]:
        """
        Iterate through pages of results.

        Yields each page as a list of records, following ``@odata.nextLink``.

        Parameters
        ----------
        entity_set : str
            Entity set name
        max_pages : int, optional
            Maximum number of pages to fetch
        **query
            OData query parameters

        Yields
        ------
        list of dict
            Each page of entity records
        """
        p = self.sess.get(entity_set, params=query) or {}

        yielded = 0
        first = _items(p)
        if first:
            yield first
            yielded += 1
            if max_pages is not None and yielded >= int(max_pages):
                return

        next_link = _next_link(p)
        seen = set()

        while next_link:
            if next_link in seen:
                return
            seen.add(next_link)

            # next links already carry the query string
            p = self.sess.get(next_link) or {}

            chunk = _items(p)
            if chunk:
                yield chunk
                yielded += 1
                if max_pages is not None and yielded >= int(max_pages):
                    return

            next_link = _next_link(p)

    def read_all(
        self,
        entity_set: str,
        *,
        max_pages: Optional[int] = None,
        **query: str,
    ) -> List[Dict[str, Any]]:
        """Read all pages of results into a single list."""
        out: List[Dict[str, Any]] = []
        for page in self.iterate(entity_set, max_pages=max_pages, **query):
            out.extend(page)
        return out

    # ---------------- query builder ----------------

    @staticmethod
    def build_params(
        *,
        fields: Optional[List[str]] = None,
        filter_expr: Optional[str] = None,
        orderby: Optional[str] = None,
        top: Optional[int] = None,
        skip: Optional[int] = None,
        expand: Optional[Sequence[str]] = None,
        count: bool = False,
    ) -> Dict[str, str]:
        """
        Assemble OData system query options.

        An empty ``filter_expr`` leaves ``$filter`` out entirely.
        """
        params: Dict[str, str] = {}
        if fields:
            params["$select"] = _join_csv(fields)
        if filter_expr:
            params["$filter"] = filter_expr
        if orderby:
            params["$orderby"] = orderby
        if expand:
            params["$expand"] = _join_csv(expand)
        if top is not None:
            params["$top"] = str(int(top))
        if skip is not None:
            params["$skip"] = str(int(skip))
        if count:
            params["$count"] = "true"
        return params

    def query(
        self,
        entity_set: str,
        *,
        fields: Optional[List[str]] = None,
        filter_expr: Optional[str] = None,
        orderby: Optional[str] = None,
        top: Optional[int] = None,
        skip: Optional[int] = None,
        expand: Optional[Sequence[str]] = None,
        count: bool = False,
    ) -> ODataPage:
        """
        Execute a single-page query against an entity set.

        Parameters
        ----------
        entity_set : str
            Entity set name
        fields : list of str, optional
            Fields for $select
        filter_expr : str, optional
            Compiled $filter expression
        orderby : str, optional
            $orderby expression
        top : int, optional
            Maximum records ($top)
        skip : int, optional
            Records to skip ($skip)
        expand : list of str, optional
            Navigation properties for $expand
        count : bool
            Request ``@odata.count``

        Returns
        -------
        ODataPage
            Items, total count (if requested) and next link
        """
        params = self.build_params(
            fields=fields,
            filter_expr=filter_expr,
            orderby=orderby,
            top=top,
            skip=skip,
            expand=expand,
            count=count,
        )
        payload = self.sess.get(entity_set, params=params) or {}
        raw_count = payload.get("@odata.count")
        return ODataPage(
            items=_items(payload),
            count=int(raw_count) if raw_count is not None else None,
            next_link=_next_link(payload),
        )

    def get_entity(
        self,
        entity_set: str,
        key: str,
        *,
        expand: Optional[Sequence[str]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Read one entity by its string key.

        Returns
        -------
        dict or None
            The entity, or None if the service answers 404
        """
        params = self.build_params(expand=expand)
        return self.sess.get(f"{entity_set}{entity_key(key)}", params=params or None, allow_not_found=True)
