"""Single-writer load/mutate/save cycle over the document repository.

Every mutation runs under one in-process lock: it loads a fresh
EntityStore, lets the handler change it, and saves it back only if the
handler returned normally. Two writers can therefore never decide
against the same "before" snapshot. Reads skip the lock and see the
last committed document.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.entity_store import EntityStore
from storefront.domain.repository.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


class UnitOfWork:

    def __init__(self, repository: DocumentRepository) -> None:
        self._repository = repository
        self._write_lock = threading.Lock()

    @contextmanager
    def write(self) -> Iterator[EntityStore]:
        """Yield a private snapshot; persist it when the block exits cleanly.

        If the load or the block raises, nothing is saved.
        If the save fails, PersistenceError is raised and the change is
        not considered committed.
        """
        with self._write_lock:
            store = self._repository.load()
            yield store
            if not self._repository.save(store):
                logger.error("Document save failed; change discarded")
                raise PersistenceError("The change could not be saved")

    def read(self) -> EntityStore:
        return self._repository.load()
