from services.exceptions import (
    InvalidIDError,
    NotFoundError,
    ServiceError,
    StorageError,
    ValidationError,
)
from services.airplane import AirplaneService
from services.base import ResourceService
from services.filters import SearchCriteria, matches
from services.product import ProductService

__all__ = [
    "InvalidIDError",
    "NotFoundError",
    "ServiceError",
    "StorageError",
    "ValidationError",
    "AirplaneService",
    "ProductService",
    "ResourceService",
    "SearchCriteria",
    "matches",
]
