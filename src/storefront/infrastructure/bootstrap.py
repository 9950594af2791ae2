"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path

from storefront.application.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.json_document_repository import (
    JsonDocumentRepository,
)

DATA_FILE_ENV = "STOREFRONT_DATA_FILE"

# Resolve the default data file relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "store.json"

# One writer lock per document per process.
_sessions: dict[Path, UnitOfWork] = {}
_sessions_lock = threading.Lock()


def data_file() -> Path:
    configured = os.environ.get(DATA_FILE_ENV)
    return Path(configured) if configured else _DEFAULT_DATA_FILE


def unit_of_work(path: Path | None = None) -> UnitOfWork:
    """Return the process-wide UnitOfWork for *path* (default: configured file)."""
    resolved = (path or data_file()).resolve()
    with _sessions_lock:
        if resolved not in _sessions:
            _sessions[resolved] = UnitOfWork(JsonDocumentRepository(resolved))
        return _sessions[resolved]
