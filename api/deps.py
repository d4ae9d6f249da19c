from __future__ import annotations

from typing import Awaitable, TypeVar

from fastapi import HTTPException, Request

from services import (
    AirplaneService,
    InvalidIDError,
    NotFoundError,
    ProductService,
    ServiceError,
    StorageError,
    ValidationError,
)

T = TypeVar("T")


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


def get_airplane_service(request: Request) -> AirplaneService:
    return request.app.state.airplane_service


async def guard_service(call: Awaitable[T]) -> T:
    try:
        return await call
    except (NotFoundError, InvalidIDError) as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except StorageError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    except ServiceError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
