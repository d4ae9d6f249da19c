from __future__ import annotations

from schemas.product import ProductQuery, ProductRead
from services.base import ResourceService
from services.filters import SearchCriteria


class ProductService(ResourceService[ProductRead]):
    label = "Product"
    read_schema = ProductRead

    @staticmethod
    def criteria_for(query: ProductQuery) -> SearchCriteria:
        return SearchCriteria(
            contains={
                "name": query.name,
                "description": query.description,
                "category.name": query.category,
            },
            at_least={"price": query.min_price},
        )
