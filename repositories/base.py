from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]


class Store(ABC):
    """Persistence capability shared by every resource.

    Records are plain dicts.  ``create`` and ``update`` receive every field
    except ``id``; the records handed back always carry ``id``.  Callers get
    copies, never references into the store's own collection.
    """

    def __init__(self, resource_name: str) -> None:
        self.resource_name = resource_name

    @abstractmethod
    async def create(self, data: Record) -> str:
        """Persist ``data`` under a freshly assigned id and return that id."""

    @abstractmethod
    async def get(self, item_id: str) -> Record:
        """Return the record with ``item_id`` or raise ``NotFoundError``."""

    @abstractmethod
    async def update(self, item_id: str, data: Record) -> Record:
        """Replace every field but ``id``; raise ``NotFoundError`` when absent."""

    @abstractmethod
    async def delete(self, item_id: str) -> None:
        """Remove the record or raise ``NotFoundError``."""

    @abstractmethod
    async def list(self, name: Optional[str] = None) -> List[Record]:
        """Return all records, optionally pre-narrowed by a name substring."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(resource_name={self.resource_name!r})"
