"""
Storefront API — Settings, Request ID and Access Log Tests
============================================================
"""

import logging

import pytest
from pydantic import ValidationError

from storefront.config import Settings
from storefront.middleware.logging import level_for_status
from storefront.middleware.request_id import resolve_request_id


class TestSettings:
    """Tests for Settings validation."""

    def test_log_level_is_upper_cased(self):
        """A lower-case log level should be normalised."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_is_rejected(self):
        """An unknown log level should fail validation."""
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_port_range(self):
        """Privileged ports should be rejected."""
        with pytest.raises(ValidationError):
            Settings(backend_port=80)

    def test_cors_origins_list(self):
        """Comma-separated origins should be split and blanks dropped."""
        s = Settings(cors_origins="http://a.test, http://b.test,")
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_reads_environment(self, monkeypatch):
        """Environment variables should override defaults."""
        monkeypatch.setenv("BACKEND_PORT", "9001")
        assert Settings().backend_port == 9001


class TestResolveRequestID:
    """Tests for client request ID acceptance."""

    @pytest.mark.parametrize("value", ["abc-123", "trace.42_x", "a" * 64])
    def test_safe_client_id_is_kept(self, value):
        """Short IDs of safe characters should be kept as sent."""
        assert resolve_request_id(value) == value

    @pytest.mark.parametrize("value", [None, "", "has space", "a" * 65, "x\r\ny"])
    def test_missing_or_unsafe_id_is_replaced(self, value):
        """Missing, long or unsafe IDs should be replaced with a generated one."""
        rid = resolve_request_id(value)
        assert rid != value
        assert len(rid) == 8


class TestAccessLog:
    """Tests for the access log level and output."""

    @pytest.mark.parametrize(
        "status,level",
        [(200, logging.INFO), (307, logging.INFO), (404, logging.WARNING), (500, logging.ERROR)],
    )
    def test_level_for_status(self, status, level):
        """Status classes should map to INFO, WARNING and ERROR."""
        assert level_for_status(status) == level

    @pytest.mark.asyncio
    async def test_not_found_logged_as_warning(self, test_client, caplog):
        """A 404 should log one WARNING line with the request ID and no route."""
        with caplog.at_level(logging.INFO, logger="storefront.access"):
            await test_client.get("/unknown", headers={"X-Request-ID": "req-1"})

        records = [r for r in caplog.records if r.name == "storefront.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].status == 404
        assert records[0].request_id == "req-1"
        assert records[0].route == "-"

    @pytest.mark.asyncio
    async def test_matched_route_template_is_logged(self, test_client, caplog):
        """A matched request should log the route template, not the raw id."""
        with caplog.at_level(logging.INFO, logger="storefront.access"):
            await test_client.get("/orders/42")

        (record,) = [r for r in caplog.records if r.name == "storefront.access"]
        assert record.levelno == logging.INFO
        assert record.path == "/orders/42"
        assert record.route == "/orders/{id}"

    @pytest.mark.asyncio
    async def test_health_is_not_logged(self, test_client, caplog):
        """Health probes should not produce access log lines."""
        with caplog.at_level(logging.INFO, logger="storefront.access"):
            await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "storefront.access"]
