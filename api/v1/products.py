from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from api.deps import get_product_service, guard_service
from schemas.common import MessageResponse
from schemas.product import ProductCreate, ProductQuery, ProductRead
from services import ProductService

router = APIRouter()


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    return await guard_service(service.create(payload))


@router.get("", response_model=List[ProductRead])
async def list_products(
    name: Optional[str] = None,
    description: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[str] = None,
    service: ProductService = Depends(get_product_service),
) -> List[ProductRead]:
    query = ProductQuery(
        name=name,
        description=description,
        category=category,
        min_price=min_price,
    )
    return await guard_service(service.search(service.criteria_for(query)))


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    return await guard_service(service.get(product_id))


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: str,
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    return await guard_service(service.update(product_id, payload))


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    await guard_service(service.delete(product_id))
    return MessageResponse(message=f"Product {product_id} deleted")
