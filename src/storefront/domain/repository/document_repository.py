"""Abstract repository for the whole users/products/orders document.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.entity_store import EntityStore


class DocumentRepository(ABC):

    @abstractmethod
    def load(self) -> EntityStore:
        """Return a fresh snapshot of the document.

        Never raises: an unreadable document loads as an empty store.
        """

    @abstractmethod
    def save(self, store: EntityStore) -> bool:
        """Replace the persisted document with *store*.

        Returns False if the write did not happen. A partially written
        document must never become visible.
        """
