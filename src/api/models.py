# src/api/models.py — v1
"""API-level models: the export input file accepted by the CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ncexport.core.models import Codebook, Session


class ExportInput(BaseModel):
    """A protocol codebook and the sessions collected with it."""

    codebook: Codebook
    sessions: list[Session] = Field(default_factory=list)
