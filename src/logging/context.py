# src/logging/context.py — v1
"""Contextual logging support: attach session, format and stage to log records."""

from __future__ import annotations

import contextvars
from dataclasses import asdict, dataclass
from typing import Any

_session_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "session_id", default=None
)
_export_format: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "export_format", default=None
)
_stage: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "stage", default=None
)


@dataclass(frozen=True)
class LogContext:
    """Immutable snapshot of current logging context."""

    session_id: str | None = None
    export_format: str | None = None
    stage: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in asdict(self).items() if v is not None}


def get_context() -> LogContext:
    return LogContext(
        session_id=_session_id.get(),
        export_format=_export_format.get(),
        stage=_stage.get(),
    )


def set_export_context(export_format: str, session_id: str | None = None) -> None:
    """Set export-level context (called once per exported document)."""
    _export_format.set(export_format)
    _session_id.set(session_id)


def set_stage_context(stage: str | None) -> None:
    """Set the current pipeline stage (preprocess, encode, write)."""
    _stage.set(stage)


def clear_context() -> None:
    _session_id.set(None)
    _export_format.set(None)
    _stage.set(None)
