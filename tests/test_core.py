"""
Tests for people_explorer.core module.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from unittest.mock import Mock, patch, MagicMock

from people_explorer.core.config import (
    DEFAULT_BASE_URL,
    ODataServiceSettings,
    validate_settings,
)
from people_explorer.core.connection import ConnectionContext
from people_explorer.core.log import LOG_FILE, LOGGER_NAME, configure_logging
from people_explorer.core.session import ODataSession, ODataUpstreamError


class TestODataServiceSettings:
    """Tests for ODataServiceSettings dataclass."""

    def test_default_values(self):
        settings = ODataServiceSettings()
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.default_page_size == 10
        assert settings.request_timeout == 30.0
        assert settings.retries == 3
        assert settings.verify is True

    @patch.dict("os.environ", {
        "ODATA_BASE_URL": "https://env.test.com/odata/",
        "ODATA_PAGE_SIZE": "25",
        "ODATA_TIMEOUT": "15",
        "ODATA_VERIFY_TLS": "false",
        "ODATA_LOG_LEVEL": "debug",
    })
    def test_reads_from_environment(self, tmp_path):
        settings = ODataServiceSettings.from_env(tmp_path / "missing.env")
        assert settings.base_url == "https://env.test.com/odata/"
        assert settings.default_page_size == 25
        assert settings.request_timeout == 15.0
        assert settings.verify is False
        assert settings.log_level == "DEBUG"

    def test_loads_dotenv_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("ODATA_PAGE_SIZE", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("ODATA_PAGE_SIZE=42\n")

        settings = ODataServiceSettings.from_env(env_file)
        assert settings.default_page_size == 42
        monkeypatch.delenv("ODATA_PAGE_SIZE", raising=False)

    @pytest.mark.parametrize("name,raw", [
        ("ODATA_PAGE_SIZE", "ten"),
        ("ODATA_TIMEOUT", "soon"),
        ("ODATA_RETRIES", "1.5"),
        ("ODATA_BACKOFF", ""),
    ])
    def test_malformed_number_names_variable(self, tmp_path, monkeypatch, name, raw):
        monkeypatch.setenv(name, raw)
        with pytest.raises(ValueError, match=name):
            ODataServiceSettings.from_env(tmp_path / "missing.env")

    @pytest.mark.parametrize("raw,expected", [
        ("true", True),
        ("1", True),
        ("FALSE", False),
        ("no", False),
        ("/etc/ssl/corp-ca.pem", "/etc/ssl/corp-ca.pem"),
    ])
    def test_verify_accepts_ca_bundle_path(self, tmp_path, monkeypatch, raw, expected):
        monkeypatch.setenv("ODATA_VERIFY_TLS", raw)
        settings = ODataServiceSettings.from_env(tmp_path / "missing.env")
        assert settings.verify == expected


class TestValidateSettings:
    """Tests for configuration validation."""

    def test_valid_defaults(self):
        result = validate_settings(ODataServiceSettings())
        assert result.is_valid
        assert result.errors == []

    def test_none_settings(self):
        result = validate_settings(None)
        assert not result.is_valid

    def test_missing_base_url(self):
        result = validate_settings(ODataServiceSettings(base_url=""))
        assert not result.is_valid
        assert any("base_url is required" in e for e in result.errors)

    def test_relative_base_url(self):
        result = validate_settings(ODataServiceSettings(base_url="People"))
        assert any("valid absolute URL" in e for e in result.errors)

    def test_non_http_scheme(self):
        result = validate_settings(ODataServiceSettings(base_url="ftp://host/odata/"))
        assert any("HTTP or HTTPS" in e for e in result.errors)

    def test_collects_all_errors(self):
        result = validate_settings(ODataServiceSettings(default_page_size=0, request_timeout=301))
        assert len(result.errors) == 2

    def test_page_size_upper_bound(self):
        assert validate_settings(ODataServiceSettings(default_page_size=1000)).is_valid
        assert not validate_settings(ODataServiceSettings(default_page_size=1001)).is_valid


class TestODataUpstreamError:
    """Tests for ODataUpstreamError exception."""

    def test_error_attributes(self):
        err = ODataUpstreamError(
            status=404,
            body="Not found",
            url="https://test.com/People",
            headers={"x-request-id": "123"},
        )
        assert err.status == 404
        assert err.body == "Not found"
        assert err.url == "https://test.com/People"
        assert err.headers == {"x-request-id": "123"}
        assert "Client error" in str(err)

    def test_server_error_message(self):
        err = ODataUpstreamError(503, "", "https://test.com")
        assert "Server error" in str(err)

    def test_error_message_truncation(self):
        long_body = "x" * 2000
        err = ODataUpstreamError(500, long_body, "https://test.com")
        assert len(str(err)) < 1500


def _response(status=200, json_data=None, text="", headers=None):
    r = Mock()
    r.status_code = status
    r.text = text
    r.headers = headers or {}
    if isinstance(json_data, Exception):
        r.json.side_effect = json_data
    else:
        r.json.return_value = json_data
    return r


class TestODataSession:
    """Tests for ODataSession."""

    @patch("people_explorer.core.session.requests.Session")
    def test_session_creation(self, mock_session_class):
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session

        sess = ODataSession(ODataServiceSettings(base_url="https://test.com/odata"))
        assert sess.base == "https://test.com/odata/"
        mock_session.headers.update.assert_called()
        headers = mock_session.headers.update.call_args[0][0]
        assert headers["OData-Version"] == "4.0"

    @patch("people_explorer.core.session.requests.Session")
    def test_context_manager(self, mock_session_class):
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session

        with ODataSession(ODataServiceSettings()) as sess:
            assert sess is not None

        mock_session.close.assert_called_once()

    @patch("people_explorer.core.session.requests.Session")
    def test_get_returns_json(self, mock_session_class):
        mock_session = MagicMock()
        mock_session.request.return_value = _response(json_data={"value": []})
        mock_session_class.return_value = mock_session

        sess = ODataSession(ODataServiceSettings(base_url="https://test.com/odata/"))
        data = sess.get("People", {"$top": "5"})

        assert data == {"value": []}
        kwargs = mock_session.request.call_args.kwargs
        assert kwargs["url"] == "https://test.com/odata/People"
        assert kwargs["params"] == {"$top": "5"}
        assert kwargs["timeout"] == 30.0

    @patch("people_explorer.core.session.requests.Session")
    def test_absolute_url_passes_through(self, mock_session_class):
        mock_session_class.return_value = MagicMock()
        sess = ODataSession(ODataServiceSettings(base_url="https://test.com/odata/"))
        assert sess.url("https://other.com/next") == "https://other.com/next"
        assert sess.url("/People") == "https://test.com/odata/People"

    @patch("people_explorer.core.session.requests.Session")
    def test_error_payload_is_extracted(self, mock_session_class):
        mock_session = MagicMock()
        mock_session.request.return_value = _response(
            status=400,
            json_data={"error": {"code": "", "message": "The query specified in the URI is not valid."}},
        )
        mock_session_class.return_value = mock_session

        sess = ODataSession(ODataServiceSettings())
        with pytest.raises(ODataUpstreamError) as info:
            sess.get("People")

        assert info.value.status == 400
        assert "message=The query specified in the URI is not valid." in info.value.body

    @patch("people_explorer.core.session.requests.Session")
    def test_not_found_raises_by_default(self, mock_session_class):
        mock_session = MagicMock()
        mock_session.request.return_value = _response(status=404, json_data=ValueError(), text="nope")
        mock_session_class.return_value = mock_session

        sess = ODataSession(ODataServiceSettings())
        with pytest.raises(ODataUpstreamError) as info:
            sess.get("People('ghost')")
        assert info.value.body == "nope"

    @patch("people_explorer.core.session.requests.Session")
    def test_allowed_not_found_returns_none(self, mock_session_class):
        mock_session = MagicMock()
        mock_session.request.return_value = _response(status=404)
        mock_session_class.return_value = mock_session

        sess = ODataSession(ODataServiceSettings())
        assert sess.get("People('ghost')", allow_not_found=True) is None


class TestConnectionContext:
    """Tests for ConnectionContext."""

    def test_invalid_settings_raise(self):
        with pytest.raises(ValueError, match="Invalid configuration"):
            ConnectionContext(ODataServiceSettings(base_url=""))

    @patch.dict("os.environ", {"ODATA_BASE_URL": "https://env.test.com/odata/"})
    def test_reads_from_environment(self):
        conn = ConnectionContext()
        assert conn.base_url == "https://env.test.com/odata/"

    @patch("people_explorer.core.session.requests.Session")
    def test_session_is_lazy_and_closed(self, mock_session_class):
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session

        with ConnectionContext(ODataServiceSettings()) as conn:
            mock_session_class.assert_not_called()
            service = conn.get_service()
            assert service.sess is conn.session

        mock_session.close.assert_called_once()


def _own_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_people_explorer", False)]


@pytest.fixture
def package_logger():
    """The package logger, restored to its prior state afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    level, propagate = logger.level, logger.propagate
    yield logger
    for h in _own_handlers(logger):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(level)
    logger.propagate = propagate


class TestConfigureLogging:
    """Tests for the file log setup."""

    def test_creates_log_file(self, tmp_path, package_logger):
        logger = configure_logging("DEBUG", tmp_path / "logs")

        logging.getLogger("people_explorer.filters").debug("hello")
        for h in _own_handlers(logger):
            h.flush()
        assert (tmp_path / "logs" / LOG_FILE).read_text().strip().endswith("hello")
        assert logger.level == logging.DEBUG

    def test_reconfigure_replaces_handler(self, tmp_path, package_logger):
        configure_logging("INFO", tmp_path)
        configure_logging("INFO", tmp_path)

        own = _own_handlers(package_logger)
        assert len(own) == 1
        assert isinstance(own[0], RotatingFileHandler)

    def test_foreign_handlers_are_kept(self, tmp_path, package_logger):
        foreign = logging.NullHandler()
        package_logger.addHandler(foreign)
        try:
            configure_logging("INFO", tmp_path)
            configure_logging("INFO", tmp_path)
            assert foreign in package_logger.handlers
        finally:
            package_logger.removeHandler(foreign)
