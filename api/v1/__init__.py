from fastapi import APIRouter

from . import airplanes, products

api_router = APIRouter()

api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(airplanes.router, prefix="/airplanes", tags=["airplanes"])
