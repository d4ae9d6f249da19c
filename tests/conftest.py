import copy

import pytest
from botocore.exceptions import ClientError
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from repositories import DynamoStore, InMemoryStore


def _conditional_failure(operation):
    return ClientError(
        {"Error": {"Code": "ConditionalCheckFailedException", "Message": "The conditional request failed"}},
        operation,
    )


def _reject_floats(value):
    if isinstance(value, float):
        raise TypeError("Float types are not supported. Use Decimal types instead.")
    if isinstance(value, dict):
        for item in value.values():
            _reject_floats(item)
    if isinstance(value, list):
        for item in value:
            _reject_floats(item)


def _evaluate(condition, item):
    expression = condition.get_expression()
    assert expression["operator"] == "contains"
    attribute, needle = expression["values"]
    return needle in str(item.get(attribute.name, ""))


class FakeTable:
    """Just enough of a boto3 ``Table`` for ``DynamoStore``."""

    def __init__(self, page_size=None):
        self.items = {}
        self.page_size = page_size
        self.scans = []

    def put_item(self, Item, ConditionExpression=None, ExpressionAttributeNames=None):
        _reject_floats(Item)
        if ConditionExpression and Item["id"] not in self.items:
            raise _conditional_failure("PutItem")
        self.items[Item["id"]] = copy.deepcopy(Item)
        return {}

    def get_item(self, Key):
        item = self.items.get(Key["id"])
        return {"Item": copy.deepcopy(item)} if item else {}

    def delete_item(self, Key, ConditionExpression=None, ExpressionAttributeNames=None):
        if Key["id"] not in self.items:
            raise _conditional_failure("DeleteItem")
        del self.items[Key["id"]]
        return {}

    def scan(self, FilterExpression=None, ExclusiveStartKey=None):
        self.scans.append({"FilterExpression": FilterExpression, "ExclusiveStartKey": ExclusiveStartKey})
        keys = list(self.items)
        start = keys.index(ExclusiveStartKey["id"]) + 1 if ExclusiveStartKey else 0
        end = start + self.page_size if self.page_size else len(keys)
        page = keys[start:end]
        items = [copy.deepcopy(self.items[key]) for key in page]
        if FilterExpression is not None:
            items = [item for item in items if _evaluate(FilterExpression, item)]
        response = {"Items": items}
        if end < len(keys):
            response["LastEvaluatedKey"] = {"id": page[-1]}
        return response


class BrokenTable(FakeTable):
    """A table whose writes and scans always fail with ``error``."""

    def __init__(self, error):
        super().__init__()
        self.error = error

    def put_item(self, **kwargs):
        raise self.error

    def scan(self, **kwargs):
        raise self.error


@pytest.fixture
def fake_table():
    return FakeTable()


@pytest.fixture
def memory_store():
    return InMemoryStore("Airplane")


@pytest.fixture
def dynamo_store(fake_table):
    return DynamoStore("Airplane", fake_table)


@pytest.fixture(params=["memory", "dynamodb"])
def store_factory(request):
    """Build fresh stores of either backend."""

    def build(resource_name):
        if request.param == "memory":
            return InMemoryStore(resource_name)
        return DynamoStore(resource_name, FakeTable())

    return build


@pytest.fixture
def client():
    app = create_app(Settings(store_backend="memory"))
    return TestClient(app)


@pytest.fixture
def dynamo_client():
    app = create_app(
        Settings(store_backend="dynamodb"),
        product_store=DynamoStore("Product", FakeTable()),
        airplane_store=DynamoStore("Airplane", FakeTable()),
    )
    return TestClient(app)


@pytest.fixture
def boeing():
    return {"name": "Boeing 737", "model": "737-800", "passenger_capacity": 189}


@pytest.fixture
def airbus():
    return {"name": "Airbus A320", "model": "A320neo", "passenger_capacity": 180}


@pytest.fixture
def smartphone():
    return {
        "name": "Smartphone",
        "description": "6.1 inch screen",
        "price": 599.99,
        "category": {"id": "cat_1", "name": "Electrónicos", "description": ""},
    }
