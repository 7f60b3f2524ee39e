"""Tests for configuration and logging setup."""

from __future__ import annotations

import json
import logging

from schemabuilder.config import SchemaBuilderConfig, get_config, reset_config
from schemabuilder.log import JsonFormatter, configure_logging
from schemabuilder.ordering.constraints import DEFAULT_START


class TestConfig:
    def test_defaults(self):
        config = SchemaBuilderConfig()
        assert config.default_start == list(DEFAULT_START)
        assert config.default_end == []
        assert config.extensions == [".py", ".graphql", ".gql"]

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SCHEMABUILDER_DEFAULT_START", '["Query"]')
        reset_config()
        assert get_config().default_start == ["Query"]
        assert get_config().log_level == "warning"

    def test_singleton_and_overrides(self):
        assert get_config() is get_config()
        overridden = get_config(default_end=["Scalars"])
        assert overridden.default_end == ["Scalars"]
        assert get_config() is overridden

    def test_extensions_normalized(self):
        assert SchemaBuilderConfig(extensions=["py", ".gql"]).extensions == [".py", ".gql"]


class TestLogging:
    def test_configure_text(self):
        logger = configure_logging("debug", "text")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_configure_replaces_handlers(self):
        configure_logging("info", "text")
        logger = configure_logging("warning", "json")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_json_formatter(self):
        record = logging.LogRecord(
            "schemabuilder.registry", logging.INFO, __file__, 1, "Registered %s", ("User",), None
        )
        entry = json.loads(JsonFormatter().format(record))
        assert entry["level"] == "info"
        assert entry["logger"] == "schemabuilder.registry"
        assert entry["message"] == "Registered User"
