# ============================================================================
# STRUCTURED LOGGING TESTS
# ============================================================================
# STATUS: Tests - Logging context and formatters
# PURPOSE: Verify context nesting and JSON/human output
# CREATED: 19 OCT 2026
# ============================================================================
"""
Structured Logging Tests

Run with:
    pytest tests/test_logging.py -v
"""

import io
import json
import logging

import pytest

from model_maker.core.logging import (
    ComponentType,
    configure_logging,
    get_current_context,
    get_logger,
    log_checkpoint,
    log_context,
)


@pytest.fixture
def stream():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    buffer = io.StringIO()
    yield buffer
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLogContext:

    def test_nested_context_merges(self):
        with log_context(type_name="User", table_name="user"):
            with log_context(attribute="name"):
                context = get_current_context()

                assert context.type_name == "User"
                assert context.table_name == "user"
                assert context.attribute == "name"

            assert get_current_context().attribute is None

        assert get_current_context().type_name is None

    def test_to_dict_skips_unset(self):
        with log_context(type_name="User", extra={"run": 1}):
            assert get_current_context().to_dict() == {"type_name": "User", "run": 1}


class TestFormatters:

    def test_json_output(self, stream, monkeypatch):
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        configure_logging(level="INFO", json_output=True, stream=stream)
        logger = get_logger("model_maker.test", ComponentType.BUILDER)

        with log_context(type_name="User", attribute="name"):
            logger.info("Parsed field", extra={"column": "name"})

        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["level"] == "INFO"
        assert record["message"] == "Parsed field"
        assert record["context"] == {"type_name": "User", "attribute": "name"}
        assert record["data"]["column"] == "name"
        assert record["data"]["component"] == "builder"

    def test_human_output(self, stream, monkeypatch):
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        configure_logging(level="WARNING", stream=stream)
        logger = get_logger("model_maker.test")

        with log_context(type_name="User", table_name="user", attribute="nick"):
            logger.warning("No type")
            logger.info("hidden")

        output = stream.getvalue()
        assert "WARNING" in output
        assert "[type=User, table=user, field=nick]: No type" in output
        assert "hidden" not in output

    def test_checkpoint(self, stream, monkeypatch):
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        configure_logging(level="INFO", json_output=True, stream=stream)

        with log_context(type_name="User", table_name="user"):
            log_checkpoint("table_built", {"columns": 2})

        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["message"] == "CHECKPOINT: table_built"
        assert record["data"] == {
            "checkpoint": "table_built",
            "type_name": "User",
            "table_name": "user",
            "data": {"columns": 2},
        }
