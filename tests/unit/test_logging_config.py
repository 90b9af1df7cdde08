"""Tests for structlog setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from cert_codec.config import CodecSettings
from cert_codec.logging_config import configure_from_settings, configure_structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def _renderer() -> object:
    return structlog.get_config()["processors"][-1]


class TestConfigureStructlog:
    """Verify structlog configuration function."""

    def test_configure_structlog_defaults_to_console(self) -> None:
        """
        GIVEN no explicit arguments
        WHEN configure_structlog is called
        THEN the console renderer is installed.
        """
        configure_structlog()
        assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)

    def test_json_format_uses_json_renderer(self) -> None:
        configure_structlog("INFO", "json")
        assert isinstance(_renderer(), structlog.processors.JSONRenderer)

    def test_level_filters_below_threshold(self) -> None:
        """
        GIVEN log_level="WARNING"
        WHEN configure_structlog is called
        THEN the bound logger filters out info messages.
        """
        configure_structlog("WARNING")
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.WARNING)

    def test_invalid_level_falls_back_to_info(self) -> None:
        configure_structlog("NONEXISTENT")
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.INFO)


class TestConfigureFromSettings:
    def test_uses_settings_values(self) -> None:
        settings = CodecSettings(_env_file=None, log_level="DEBUG", log_format="json")  # type: ignore[call-arg]
        configure_from_settings(settings)
        assert isinstance(_renderer(), structlog.processors.JSONRenderer)
        assert structlog.get_config()["wrapper_class"] is structlog.make_filtering_bound_logger(logging.DEBUG)
