"""
people_explorer.core.session - OData HTTP Session Management
=============================================================

Low-level session handling for OData v4 services with:
- Automatic retry with exponential backoff
- JSON / OData-Version negotiation headers
- Proper error extraction from OData error payloads
- Optional pass-through of 404 for single-entity reads
"""

from __future__ import annotations

from typing import Any, Dict, Optional
import logging
import time

import requests
from requests import Response, Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from people_explorer.core.config import ODataServiceSettings


class ODataUpstreamError(RuntimeError):
    """
    Exception raised when the OData service returns an error.

    Attributes
    ----------
    status : int
        HTTP status code
    body : str
        Response body (truncated for display)
    url : str
        The URL that was called
    headers : dict
        Response headers
    """

    def __init__(
        self,
        status: int,
        body: str,
        url: str,
        headers: Optional[Dict[str, str]] = None
    ):
        snippet = (body or "")[:1200]
        kind = "Server error" if status >= 500 else "Client error"
        super().__init__(f"OData request failed - {kind}: HTTP {status} for {url}: {snippet}")
        self.status = status
        self.body = body or ""
        self.url = url
        self.headers = headers or {}


class ODataSession:
    """
    Low-level HTTP session for an OData v4 service root.

    Handles retries, timeouts, TLS verification and error extraction.
    Use as a context manager for automatic cleanup.

    Parameters
    ----------
    settings : ODataServiceSettings
        Connection settings

    Examples
    --------
    >>> with ODataSession(ODataServiceSettings()) as sess:
    ...     data = sess.get("People", {"$top": "5"})
    """

    def __init__(self, settings: ODataServiceSettings) -> None:
        self.settings = settings
        self.base = settings.base_url.strip().rstrip("/") + "/"
        self.timeout = float(settings.request_timeout)
        self.verify = settings.verify
        self.logger = logging.getLogger("people_explorer.odata")

        self.session = self._build_session()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "ODataSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---------------- session ----------------

    def _build_session(self) -> Session:
        sess = requests.Session()

        sess.headers.update({
            "Accept": "application/json",
            "OData-Version": "4.0",
            "OData-MaxVersion": "4.0",
            "User-Agent": self.settings.user_agent,
        })

        retry = Retry(
            total=self.settings.retries,
            backoff_factor=self.settings.backoff,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=frozenset({"GET", "HEAD", "OPTIONS"}),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry, pool_connections=10, pool_maxsize=10)
        sess.mount("https://", adapter)
        sess.mount("http://", adapter)
        return sess

    # ---------------- helpers ----------------

    def url(self, path: str) -> str:
        """Resolve a path relative to the service root; absolute URLs pass through."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base}{path.lstrip('/')}"

    def _extract_error(self, r: Response) -> str:
        try:
            data = r.json()
        except ValueError:
            return r.text
        if not isinstance(data, dict):
            return r.text
        err = data.get("error")
        if not isinstance(err, dict):
            return r.text

        code = err.get("code")
        message = err.get("message")
        if isinstance(message, dict):
            message = message.get("value")

        inner = err.get("innererror") or err.get("innerError")
        detail = inner.get("message") if isinstance(inner, dict) else None

        parts = []
        if code:
            parts.append(f"code={code}")
        if message:
            parts.append(f"message={message}")
        if detail:
            parts.append(f"detail={detail}")
        return " | ".join(parts) or r.text

    def raise_for_error(self, r: Response, url: str) -> None:
        if r.status_code >= 400 or r.status_code in (301, 302, 303, 307, 308):
            body = self._extract_error(r)
            self.logger.error("Request failed with status code %s: %s", r.status_code, url)
            raise ODataUpstreamError(r.status_code, body, url, dict(r.headers))

    def _request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, str]],
    ) -> Response:
        t0 = time.perf_counter()
        try:
            r = self.session.request(
                method=method,
                url=url,
                params=params,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.RequestException:
            self.logger.error("%s %s: HTTP request failed", method.upper(), url, exc_info=True)
            raise
        dt = (time.perf_counter() - t0) * 1000.0
        self.logger.debug("%s %s %s %sms", method.upper(), url, r.status_code, round(dt, 1))
        return r

    # ---------------- public ops ----------------

    def get(
        self,
        path: str,
        params: Optional[Dict[str, str]] = None,
        *,
        allow_not_found: bool = False,
    ) -> Optional[Dict[str, Any]]:
        """
        Execute a GET request against a service path.

        Parameters
        ----------
        path : str
            Entity set or path relative to the service root, e.g. "People",
            or an absolute next-link URL
        params : dict, optional
            Query parameters; values are percent-encoded by requests
        allow_not_found : bool
            If True, a 404 returns None instead of raising

        Returns
        -------
        dict or None
            Parsed JSON response
        """
        url = self.url(path)
        r = self._request("GET", url, params=params)
        if allow_not_found and r.status_code == 404:
            return None
        self.raise_for_error(r, url)
        try:
            return r.json()
        except ValueError:
            self.logger.error("GET %s: Failed to parse JSON response", url)
            raise
