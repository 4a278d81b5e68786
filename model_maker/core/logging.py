# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# STATUS: Core - Structured logging with context
# PURPOSE: Tag every log line with the declaration and field being processed
# CREATED: 19 OCT 2026
# ============================================================================
"""
Structured Logging

Every record logged through get_logger() carries the active generation
context: which file, type, table and source attribute the pipeline is
working on. Two renderings:

    HumanFormatter       12:00:01 WARNING  model_maker.core.schema.builder [type=User, table=user, field=nick]: ...
    StructuredFormatter  one JSON object per line (--json-logs, LOG_FORMAT=json)

All output goes to stderr; stdout belongs to --dry-run.

Usage:
    from model_maker.core.logging import get_logger, log_context

    logger = get_logger(__name__, ComponentType.BUILDER)

    with log_context(type_name="User", table_name="user"):
        logger.info("Building table", extra={"field_count": 5})
"""

import json
import logging
import os
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union


class ComponentType(str, Enum):
    """Pipeline stage a logger belongs to."""
    CLI = "cli"
    READER = "reader"
    PARSER = "parser"
    BUILDER = "builder"
    GENERATOR = "generator"
    WRITER = "writer"
    SERVICE = "service"


# ============================================================================
# CONTEXT
# ============================================================================

@dataclass(frozen=True)
class LogContext:
    """What the pipeline is currently working on."""
    source_file: Optional[str] = None
    type_name: Optional[str] = None
    table_name: Optional[str] = None
    attribute: Optional[str] = None
    component: Optional[str] = None
    operation: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Set fields only, with extra merged in."""
        result = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "extra" and getattr(self, f.name) is not None
        }
        result.update(self.extra)
        return result


_local = threading.local()
_EMPTY = LogContext()


def _stack() -> List[LogContext]:
    if not hasattr(_local, "stack"):
        _local.stack = []
    return _local.stack


def get_current_context() -> LogContext:
    """Innermost active context, or an empty one."""
    stack = _stack()
    return stack[-1] if stack else _EMPTY


@contextmanager
def log_context(**kwargs) -> Iterator[LogContext]:
    """
    Narrow the logging context for the duration of a block.

    Unspecified fields are inherited from the enclosing context; extra
    dicts are merged.

    Example:
        with log_context(type_name="User"):
            with log_context(attribute="created_at"):
                logger.debug("Parsing annotation")
    """
    parent = get_current_context()
    extra = {**parent.extra, **kwargs.pop("extra", {})}
    context = replace(parent, extra=extra, **kwargs)

    stack = _stack()
    stack.append(context)
    try:
        yield context
    finally:
        stack.pop()


# ============================================================================
# FORMATTERS
# ============================================================================

def _record_data(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, "extra", None) or {}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for CI log collection."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = get_current_context().to_dict()
        if context:
            entry["context"] = context

        data = _record_data(record)
        if data:
            entry["data"] = data

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry["source"] = f"{record.filename}:{record.lineno}"
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Single-line text with the context in brackets."""

    CONTEXT_LABELS = (
        ("type_name", "type"),
        ("table_name", "table"),
        ("attribute", "field"),
    )

    def format(self, record: logging.LogRecord) -> str:
        context = get_current_context()
        labels = [
            f"{label}={getattr(context, name)}"
            for name, label in self.CONTEXT_LABELS
            if getattr(context, name)
        ]

        line = "{time} {level:<8} {name}{context}: {message}".format(
            time=datetime.now(timezone.utc).strftime("%H:%M:%S"),
            level=record.levelname,
            name=record.name,
            context=f" [{', '.join(labels)}]" if labels else "",
            message=record.getMessage(),
        )

        data = _record_data(record)
        if data:
            line = f"{line} {data}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class ContextLogger(logging.LoggerAdapter):
    """
    Adapter that folds the active context and the logger's component
    into a single `extra` attribute on every record.
    """

    def process(self, msg, kwargs):
        data = dict(kwargs.get("extra") or {})
        data.update(get_current_context().to_dict())
        component = self.extra.get("component") if self.extra else None
        if component:
            data.setdefault("component", component)
        kwargs["extra"] = {"extra": data}
        return msg, kwargs


def get_logger(
    name: str,
    component: Optional[ComponentType] = None,
) -> ContextLogger:
    """
    Get a context-aware logger.

    Args:
        name: Logger name, normally the module's __name__
        component: Pipeline stage, recorded on every line

    Returns:
        ContextLogger wrapping logging.getLogger(name)
    """
    return ContextLogger(
        logging.getLogger(name),
        {"component": component.value if component else None},
    )


def configure_logging(
    level: Union[str, int] = "WARNING",
    json_output: bool = False,
    stream=None,
) -> None:
    """
    Install a single root handler.

    Args:
        level: Level name or number; unknown names fall back to WARNING
        json_output: JSON lines instead of text (also LOG_FORMAT=json)
        stream: Destination, stderr by default
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    use_json = json_output or os.getenv("LOG_FORMAT", "").lower() == "json"

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter() if use_json else HumanFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


# ============================================================================
# CHECKPOINTS
# ============================================================================

CHECKPOINT_LOGGER = "model_maker.checkpoint"


def log_checkpoint(
    name: str,
    data: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Mark a pipeline step as reached.

    Checkpoints (declaration_read, table_built, artifacts_rendered,
    ddl_written, source_written) trace a run from its log alone.

    Args:
        name: Checkpoint name
        data: Optional payload
        logger: Logger to use instead of model_maker.checkpoint
    """
    context = get_current_context()
    payload: Dict[str, Any] = {"checkpoint": name}
    for key in ("type_name", "table_name"):
        value = getattr(context, key)
        if value:
            payload[key] = value
    if data:
        payload["data"] = data

    (logger or logging.getLogger(CHECKPOINT_LOGGER)).info(
        f"CHECKPOINT: {name}", extra={"extra": payload}
    )


__all__ = [
    "ComponentType",
    "LogContext",
    "StructuredFormatter",
    "HumanFormatter",
    "ContextLogger",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_current_context",
    "log_checkpoint",
]
