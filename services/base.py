from __future__ import annotations

import logging
from typing import ClassVar, Generic, List, Type, TypeVar

from pydantic import BaseModel

from repositories.base import Store
from services.exceptions import NotFoundError
from services.filters import SearchCriteria, matches

logger = logging.getLogger(__name__)

ReadT = TypeVar("ReadT", bound=BaseModel)


class ResourceService(Generic[ReadT]):
    """CRUD and search for one resource on top of an injected ``Store``.

    Store errors pass through unchanged except ``NotFoundError``, which is
    re-raised with a resource-level message.
    """

    label: ClassVar[str] = "Entity"
    read_schema: ClassVar[Type[BaseModel]]

    def __init__(self, store: Store) -> None:
        self.store = store

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found")

    async def create(self, payload: BaseModel) -> ReadT:
        data = payload.model_dump()
        item_id = await self.store.create(data)
        logger.info("Created %s %s", self.label.lower(), item_id)
        return self.read_schema.model_validate({**data, "id": item_id})

    async def get(self, item_id: str) -> ReadT:
        try:
            item = await self.store.get(item_id)
        except NotFoundError as exc:
            raise self._not_found() from exc
        return self.read_schema.model_validate(item)

    async def update(self, item_id: str, payload: BaseModel) -> ReadT:
        try:
            item = await self.store.update(item_id, payload.model_dump())
        except NotFoundError as exc:
            raise self._not_found() from exc
        logger.info("Updated %s %s", self.label.lower(), item_id)
        return self.read_schema.model_validate(item)

    async def delete(self, item_id: str) -> None:
        try:
            await self.store.delete(item_id)
        except NotFoundError as exc:
            raise self._not_found() from exc
        logger.info("Deleted %s %s", self.label.lower(), item_id)

    async def search(self, criteria: SearchCriteria) -> List[ReadT]:
        candidates = await self.store.list(name=criteria.name_hint)
        # Storage may only pre-narrow on name, so every criterion is rechecked here.
        found = [
            self.read_schema.model_validate(item)
            for item in candidates
            if matches(item, criteria)
        ]
        logger.debug(
            "Search on %s matched %d of %d candidates",
            self.label.lower(),
            len(found),
            len(candidates),
        )
        return found
