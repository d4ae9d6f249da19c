from config import Settings

from .base import Record, Store
from .dynamo import DynamoStore
from .memory import InMemoryStore

STORE_BACKENDS = ("memory", "dynamodb")


def build_store(resource_name: str, table_name: str, settings: Settings) -> Store:
    if settings.store_backend == "memory":
        return InMemoryStore(resource_name)
    if settings.store_backend == "dynamodb":
        from data.dynamodb import get_table  # local import keeps boto3 sessions lazy

        return DynamoStore(resource_name, get_table(settings, table_name))
    raise ValueError(
        f"Unknown store backend {settings.store_backend!r}; expected one of {STORE_BACKENDS}."
    )


__all__ = [
    "DynamoStore",
    "InMemoryStore",
    "Record",
    "STORE_BACKENDS",
    "Store",
    "build_store",
]
