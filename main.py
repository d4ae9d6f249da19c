import logging
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.gzip import GZipMiddleware

from api import api_router
from config import Settings, settings
from logging_config import setup_logging
from repositories import Store, build_store
from schemas.common import HealthResponse
from services import AirplaneService, ProductService

logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    # Rejected input can be non-finite, which JSON cannot encode.
    detail = [{key: value for key, value in error.items() if key != "input"} for error in errors]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(detail)},
    )


def create_app(
    app_settings: Optional[Settings] = None,
    *,
    product_store: Optional[Store] = None,
    airplane_store: Optional[Store] = None,
) -> FastAPI:
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level)

    app = FastAPI(title=app_settings.app_name, version="1.0.0")

    app.add_middleware(GZipMiddleware, minimum_size=512)

    allowed = app_settings.allowed_origins or ["*"]
    allow_credentials = False if "*" in allowed else True
    logger.info("CORS allow_origins: %s | allow_credentials=%s", allowed, allow_credentials)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=86400,
    )

    app.router.redirect_slashes = False

    if product_store is None:
        product_store = build_store("Product", app_settings.products_table_name, app_settings)
    if airplane_store is None:
        airplane_store = build_store("Airplane", app_settings.airplanes_table_name, app_settings)
    logger.info("Stores: products=%r airplanes=%r", product_store, airplane_store)

    app.state.settings = app_settings
    app.state.product_service = ProductService(product_store)
    app.state.airplane_service = AirplaneService(airplane_store)

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(api_router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", store_backend=app_settings.store_backend)

    return app


app = create_app()

if __name__ == "__main__":
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=False)
