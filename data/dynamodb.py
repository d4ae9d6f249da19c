from functools import lru_cache
from typing import Any, Optional

import boto3

from config import Settings


@lru_cache(maxsize=None)
def get_session(
    region_name: str,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    session_token: Optional[str] = None,
) -> boto3.session.Session:
    kwargs: dict[str, Any] = {"region_name": region_name}
    if access_key_id and secret_access_key:
        kwargs["aws_access_key_id"] = access_key_id
        kwargs["aws_secret_access_key"] = secret_access_key
    if session_token:
        kwargs["aws_session_token"] = session_token
    return boto3.session.Session(**kwargs)


def get_table(settings: Settings, table_name: str):
    session = get_session(
        settings.aws_region,
        settings.aws_access_key_id,
        settings.aws_secret_access_key,
        settings.aws_session_token,
    )
    resource_kwargs: dict[str, Any] = {}
    if settings.dynamodb_endpoint_url:
        resource_kwargs["endpoint_url"] = settings.dynamodb_endpoint_url
    return session.resource("dynamodb", **resource_kwargs).Table(table_name)
