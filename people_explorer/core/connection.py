"""
people_explorer.core.connection - High-level connection management
===================================================================

Provides a ConnectionContext that owns one lazily-built session.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from people_explorer.core.config import ODataServiceSettings, validate_settings
from people_explorer.core.session import ODataSession

if TYPE_CHECKING:
    from people_explorer.odata.service import ODataService


class ConnectionContext:
    """
    High-level connection manager for the People OData service.

    Parameters
    ----------
    settings : ODataServiceSettings, optional
        Explicit settings. Falls back to ``ODataServiceSettings.from_env()``.

    Raises
    ------
    ValueError
        If the settings do not validate

    Examples
    --------
    >>> with ConnectionContext() as conn:
    ...     service = conn.get_service()
    ...     page = service.query("People", top=10, count=True)
    """

    def __init__(self, settings: Optional[ODataServiceSettings] = None) -> None:
        self._settings = settings or ODataServiceSettings.from_env()

        result = validate_settings(self._settings)
        if not result.is_valid:
            raise ValueError("Invalid configuration: " + "; ".join(result.errors))

        self._session: Optional[ODataSession] = None

    @property
    def session(self) -> ODataSession:
        """Get or create the underlying OData session."""
        if self._session is None:
            self._session = ODataSession(self._settings)
        return self._session

    def close(self) -> None:
        """Close the connection."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "ConnectionContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_service(self) -> "ODataService":
        """Get an ODataService bound to this connection's session."""
        # Import here to avoid circular imports
        from people_explorer.odata.service import ODataService
        return ODataService(self.session)

    @property
    def settings(self) -> ODataServiceSettings:
        return self._settings

    @property
    def base_url(self) -> str:
        """The configured base URL."""
        return self.session.base if self._session else self._settings.base_url
