import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class Settings(BaseModel):
    app_name: str = "Catalog API"
    log_level: str = "INFO"
    store_backend: str = "memory"
    aws_region: str = "us-east-1"
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_session_token: Optional[str] = None
    dynamodb_endpoint_url: Optional[str] = None
    products_table_name: str = "catalog-products"
    airplanes_table_name: str = "catalog-airplanes"
    allowed_origins: List[str] = []

    @classmethod
    def from_env(cls) -> "Settings":
        raw_origins = os.getenv("ALLOWED_ORIGINS", "")
        allowed_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
        return cls(
            app_name=os.getenv("APP_NAME", "Catalog API"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            store_backend=os.getenv("STORE_BACKEND", "memory").strip().lower(),
            aws_region=os.getenv("AWS_REGION", "us-east-1"),
            aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID"),
            aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY"),
            aws_session_token=os.getenv("AWS_SESSION_TOKEN"),
            dynamodb_endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL") or None,
            products_table_name=os.getenv("PRODUCTS_TABLE_NAME", "catalog-products"),
            airplanes_table_name=os.getenv("AIRPLANES_TABLE_NAME", "catalog-airplanes"),
            allowed_origins=allowed_origins,
        )


# Create a single, shared instance for the whole application to use
settings = Settings.from_env()
