"""Typed schemas used by chat log extraction."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExtractionRequest:
    """Caller input for extracting a chat log from a RAGEMP directory."""

    base_directory: Path
    strip_timestamps: bool = False
