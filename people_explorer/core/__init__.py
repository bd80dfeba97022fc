"""
people_explorer.core - Core connectivity and configuration
===========================================================

This module provides the foundational classes for talking to the service:

- ODataServiceSettings: Settings loaded from the environment / .env
- validate_settings: Configuration checks with all errors collected
- ODataSession: Low-level HTTP session with retry and error extraction
- ConnectionContext: High-level connection manager
- configure_logging: Rotating file log for the package

"""

from people_explorer.core.config import (
    ODataServiceSettings,
    ValidationResult,
    validate_settings,
)
from people_explorer.core.session import ODataSession, ODataUpstreamError
from people_explorer.core.connection import ConnectionContext
from people_explorer.core.log import configure_logging

__all__ = [
    "ODataServiceSettings",
    "ValidationResult",
    "validate_settings",
    "ODataSession",
    "ODataUpstreamError",
    "ConnectionContext",
    "configure_logging",
]
