"""Unit tests for the structlog configuration helpers."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
import structlog.testing

from nft_market.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestJsonLoggerFactory:
    def test_json_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("INFO")
        get_logger("nft_market.test", workflow="create_order").info("workflow_started")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "workflow_started"
        assert record["workflow"] == "create_order"
        assert record["level"] == "info"
        assert record["logger"] == "nft_market.test"

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.WARNING)
        get_logger("nft_market.test").info("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_console_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("DEBUG", json_output=False)
        get_logger("nft_market.test").debug("listing_query")
        assert "listing_query" in capsys.readouterr().err


def test_get_logger_binds_initial_values() -> None:
    with structlog.testing.capture_logs() as logs:
        get_logger("x", network="ETHEREUM").info("listing_query")
    assert logs == [{"network": "ETHEREUM", "event": "listing_query", "log_level": "info"}]
