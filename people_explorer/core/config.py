"""
people_explorer.core.config - Service settings and validation
==============================================================

Settings are read from ``ODATA_*`` environment variables, optionally
seeded from a ``.env`` file in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, TypeVar, Union
from urllib.parse import urlparse

from dotenv import load_dotenv

Number = TypeVar("Number", int, float)

DEFAULT_BASE_URL = "https://services.odata.org/V4/TripPinServiceRW/"

MAX_PAGE_SIZE = 1000
MAX_TIMEOUT_SECONDS = 300

_FALSE_VALUES = ("false", "0", "no", "off")
_TRUE_VALUES = ("true", "1", "yes", "on", "")


def _env_number(name: str, default: str, kind: Callable[[str], Number]) -> Number:
    raw = os.environ.get(name, default).strip()
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"{name} must be a valid {kind.__name__}, got {raw!r}") from None


def _env_verify(raw: str) -> Union[bool, str]:
    """Map ODATA_VERIFY_TLS to a bool, or keep it as a CA bundle path."""
    value = raw.strip()
    if value.lower() in _FALSE_VALUES:
        return False
    if value.lower() in _TRUE_VALUES:
        return True
    return value


@dataclass
class ODataServiceSettings:
    """
    Connection and runtime settings for the People service.

    Parameters
    ----------
    base_url : str
        Service root, e.g. "https://services.odata.org/V4/TripPinServiceRW/"
    default_page_size : int
        People per page in the explorer (default: 10)
    request_timeout : float
        Request timeout in seconds (default: 30)
    retries : int
        Number of retry attempts (default: 3)
    backoff : float
        Backoff factor for retries (default: 0.5)
    verify : bool or str
        SSL verification (True, False, or path to CA bundle). ODATA_VERIFY_TLS
        takes true/false or a CA bundle path.
    user_agent : str
        User-Agent header value
    log_level : str
        Logging level name for the file log
    log_dir : str
        Directory receiving the rotating log file
    """
    base_url: str = DEFAULT_BASE_URL
    default_page_size: int = 10
    request_timeout: float = 30.0
    retries: int = 3
    backoff: float = 0.5
    verify: Union[bool, str] = True
    user_agent: str = "people-explorer/0.1"
    log_level: str = "INFO"
    log_dir: str = "logs"

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "ODataServiceSettings":
        """
        Build settings from the environment.

        Parameters
        ----------
        env_file : str or Path, optional
            ``.env`` file to load first; defaults to ``./.env`` when present.
            Variables already set in the environment win.

        Raises
        ------
        ValueError
            If a numeric variable does not parse
        """
        env_path = Path(env_file) if env_file else Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=False)

        return cls(
            base_url=os.environ.get("ODATA_BASE_URL", DEFAULT_BASE_URL),
            default_page_size=_env_number("ODATA_PAGE_SIZE", "10", int),
            request_timeout=_env_number("ODATA_TIMEOUT", "30", float),
            retries=_env_number("ODATA_RETRIES", "3", int),
            backoff=_env_number("ODATA_BACKOFF", "0.5", float),
            verify=_env_verify(os.environ.get("ODATA_VERIFY_TLS", "true")),
            log_level=os.environ.get("ODATA_LOG_LEVEL", "INFO").upper(),
            log_dir=os.environ.get("ODATA_LOG_DIR", "logs"),
        )


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(True, [])

    @classmethod
    def failure(cls, *errors: str) -> "ValidationResult":
        return cls(False, list(errors))


def validate_settings(settings: Optional[ODataServiceSettings]) -> ValidationResult:
    """
    Check settings before any connection is attempted.

    Returns
    -------
    ValidationResult
        All problems found, not just the first
    """
    if settings is None:
        return ValidationResult.failure("Settings cannot be None")

    errors: List[str] = []

    if not settings.base_url or not settings.base_url.strip():
        errors.append("base_url is required and cannot be empty")
    else:
        parsed = urlparse(settings.base_url.strip())
        if not parsed.scheme or not parsed.netloc:
            errors.append("base_url must be a valid absolute URL")
        elif parsed.scheme not in ("http", "https"):
            errors.append("base_url must use HTTP or HTTPS protocol")

    if settings.default_page_size <= 0:
        errors.append("default_page_size must be greater than 0")
    elif settings.default_page_size > MAX_PAGE_SIZE:
        errors.append(f"default_page_size must not exceed {MAX_PAGE_SIZE}")

    if settings.request_timeout <= 0:
        errors.append("request_timeout must be greater than 0")
    elif settings.request_timeout > MAX_TIMEOUT_SECONDS:
        errors.append(f"request_timeout must not exceed {MAX_TIMEOUT_SECONDS} seconds")

    return ValidationResult.success() if not errors else ValidationResult.failure(*errors)
