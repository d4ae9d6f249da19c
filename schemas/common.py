import math
from typing import Any, Optional

from pydantic import BaseModel


def parse_lower_bound(raw: Any) -> Optional[float]:
    """Turn a query-string bound into a float, or ``None`` when unusable.

    Unparsable, non-finite, zero and negative input all mean
    "unconstrained" rather than a request error.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    store_backend: str
