from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator

from .common import parse_lower_bound

NameStr = constr(min_length=1, max_length=255)


class AirplaneBase(BaseModel):
    name: NameStr
    model: NameStr
    passenger_capacity: int = Field(ge=1)

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        extra="forbid",
    )


class AirplaneCreate(AirplaneBase):
    pass


class AirplaneRead(AirplaneBase):
    id: str

    model_config = ConfigDict(from_attributes=True, extra="ignore")


class AirplaneQuery(BaseModel):
    name: Optional[str] = None
    model: Optional[str] = None
    min_passengers: Optional[float] = None

    @field_validator("min_passengers", mode="before")
    @classmethod
    def _clamp_bound(cls, value):
        return parse_lower_bound(value)
