from __future__ import annotations

import copy
import logging
import threading
from typing import List, Optional

from repositories.base import Record, Store
from services.exceptions import InvalidIDError, NotFoundError

logger = logging.getLogger(__name__)


class InMemoryStore(Store):
    """Ordered in-process collection with sequential decimal ids.

    Ids come from a counter that only moves forward, so an id is never
    handed out twice even after deletes.  All access goes through one lock.
    """

    def __init__(self, resource_name: str) -> None:
        super().__init__(resource_name)
        self._items: List[Record] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def _check_id(self, item_id: str) -> str:
        if not (isinstance(item_id, str) and item_id.isascii() and item_id.isdecimal()):
            raise InvalidIDError(f"{item_id!r} is not a valid {self.resource_name} id.")
        return item_id.lstrip("0") or "0"

    def _index_of(self, item_id: str) -> int:
        for index, item in enumerate(self._items):
            if item["id"] == item_id:
                return index
        raise NotFoundError(f"{self.resource_name} with id={item_id} was not found.")

    async def create(self, data: Record) -> str:
        with self._lock:
            self._last_id += 1
            item_id = str(self._last_id)
            self._items.append({**copy.deepcopy(data), "id": item_id})
        logger.debug("Stored %s %s in memory", self.resource_name, item_id)
        return item_id

    async def get(self, item_id: str) -> Record:
        item_id = self._check_id(item_id)
        with self._lock:
            return copy.deepcopy(self._items[self._index_of(item_id)])

    async def update(self, item_id: str, data: Record) -> Record:
        item_id = self._check_id(item_id)
        with self._lock:
            index = self._index_of(item_id)
            replacement = {**copy.deepcopy(data), "id": item_id}
            self._items[index] = replacement
            return copy.deepcopy(replacement)

    async def delete(self, item_id: str) -> None:
        item_id = self._check_id(item_id)
        with self._lock:
            del self._items[self._index_of(item_id)]

    async def list(self, name: Optional[str] = None) -> List[Record]:
        # The name hint is left to the service-level predicate.
        with self._lock:
            return copy.deepcopy(self._items)
