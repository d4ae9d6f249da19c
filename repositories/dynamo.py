from __future__ import annotations

import asyncio
import logging
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, TypeVar
from uuid import UUID, uuid4

from boto3.dynamodb.conditions import Attr  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore

from repositories.base import Record, Store
from services.exceptions import InvalidIDError, NotFoundError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEARCH_ATTRIBUTE = "search_name"


def serialize_for_dynamo(value: Any) -> Any:
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, float):
        # DynamoDB rejects floats.
        return Decimal(str(value))
    if isinstance(value, list):
        return [serialize_for_dynamo(item) for item in value]
    if isinstance(value, dict):
        return {key: serialize_for_dynamo(val) for key, val in value.items()}
    return value


def clean_from_dynamo(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value % 1 == 0 else float(value)
    if isinstance(value, list):
        return [clean_from_dynamo(item) for item in value]
    if isinstance(value, dict):
        return {key: clean_from_dynamo(val) for key, val in value.items()}
    return value


class DynamoStore(Store):
    """Store backed by one DynamoDB table keyed by a UUID string ``id``.

    A casefolded copy of ``name`` is kept in ``search_name`` so scans can
    narrow by name without DynamoDB's case-sensitive ``contains``.
    """

    partition_key = "id"

    def __init__(self, resource_name: str, table: Any) -> None:
        super().__init__(resource_name)
        self.table = table

    def native_id(self, item_id: str) -> str:
        try:
            return str(UUID(str(item_id)))
        except ValueError as exc:
            raise InvalidIDError(f"{item_id!r} is not a valid {self.resource_name} id.") from exc

    def serialize_input(self, item_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        item = {key: serialize_for_dynamo(value) for key, value in data.items()}
        item[self.partition_key] = item_id
        if isinstance(data.get("name"), str):
            item[SEARCH_ATTRIBUTE] = data["name"].casefold()
        return item

    def clean(self, item: Dict[str, Any]) -> Record:
        return {
            key: clean_from_dynamo(value)
            for key, value in item.items()
            if key != SEARCH_ATTRIBUTE
        }

    def _not_found(self, item_id: str) -> NotFoundError:
        return NotFoundError(f"{self.resource_name} with id={item_id} was not found.")

    async def _call(self, operation: str, func: Callable[..., T], **kwargs) -> T:
        try:
            return await asyncio.to_thread(func, **kwargs)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise
            logger.error("DynamoDB %s on %s failed: %s", operation, self.resource_name, exc)
            raise StorageError(f"Could not {operation} {self.resource_name}.") from exc
        except BotoCoreError as exc:
            logger.error("DynamoDB %s on %s failed: %s", operation, self.resource_name, exc)
            raise StorageError(f"Could not {operation} {self.resource_name}.") from exc

    def _exists_condition(self) -> Dict[str, Any]:
        return {
            "ConditionExpression": "attribute_exists(#pk)",
            "ExpressionAttributeNames": {"#pk": self.partition_key},
        }

    async def create(self, data: Record) -> str:
        item_id = str(uuid4())
        await self._call("create", self.table.put_item, Item=self.serialize_input(item_id, data))
        return item_id

    async def get(self, item_id: str) -> Record:
        key = self.native_id(item_id)
        response = await self._call("read", self.table.get_item, Key={self.partition_key: key})
        item = response.get("Item")
        if not item:
            raise self._not_found(key)
        return self.clean(item)

    async def update(self, item_id: str, data: Record) -> Record:
        key = self.native_id(item_id)
        item = self.serialize_input(key, data)
        try:
            await self._call("update", self.table.put_item, Item=item, **self._exists_condition())
        except ClientError as exc:
            raise self._not_found(key) from exc
        return self.clean(item)

    async def delete(self, item_id: str) -> None:
        key = self.native_id(item_id)
        try:
            await self._call(
                "delete",
                self.table.delete_item,
                Key={self.partition_key: key},
                **self._exists_condition(),
            )
        except ClientError as exc:
            raise self._not_found(key) from exc

    async def list(self, name: Optional[str] = None) -> List[Record]:
        scan_kwargs: Dict[str, Any] = {}
        if name:
            scan_kwargs["FilterExpression"] = Attr(SEARCH_ATTRIBUTE).contains(name.casefold())

        items: List[Dict[str, Any]] = []
        response = await self._call("list", self.table.scan, **scan_kwargs)
        items.extend(response.get("Items", []))

        while "LastEvaluatedKey" in response:
            response = await self._call(
                "list",
                self.table.scan,
                ExclusiveStartKey=response["LastEvaluatedKey"],
                **scan_kwargs,
            )
            items.extend(response.get("Items", []))

        return [self.clean(item) for item in items]
