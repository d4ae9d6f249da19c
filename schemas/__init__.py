from .airplane import AirplaneCreate, AirplaneQuery, AirplaneRead
from .common import HealthResponse, MessageResponse, parse_lower_bound
from .product import Category, ProductCreate, ProductQuery, ProductRead

__all__ = [
    "AirplaneCreate",
    "AirplaneQuery",
    "AirplaneRead",
    "Category",
    "HealthResponse",
    "MessageResponse",
    "ProductCreate",
    "ProductQuery",
    "ProductRead",
    "parse_lower_bound",
]
