from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator

from .common import parse_lower_bound

NameStr = constr(min_length=1, max_length=255)


class Category(BaseModel):
    id: NameStr
    name: NameStr
    description: str = ""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")


class ProductBase(BaseModel):
    name: NameStr
    description: str = ""
    price: float = Field(ge=0, allow_inf_nan=False, description="Unit price, never negative")
    category: Category

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        extra="forbid",
    )


class ProductCreate(ProductBase):
    pass


class ProductRead(ProductBase):
    id: str

    model_config = ConfigDict(from_attributes=True, extra="ignore")


class ProductQuery(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, description="Substring of the category name")
    min_price: Optional[float] = None

    @field_validator("min_price", mode="before")
    @classmethod
    def _clamp_bound(cls, value):
        return parse_lower_bound(value)
