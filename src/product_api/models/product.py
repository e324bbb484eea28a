"""
Product Pydantic models
"""

from decimal import Decimal
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def _float_to_decimal(value: Any) -> Any:
    # Go through the float's shortest repr so 11.22 stays Decimal("11.22")
    if isinstance(value, float):
        return str(value)
    return value


class ProductBase(BaseModel):
    name: str = ""
    price: Decimal = Decimal("0.00")

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, value: Any) -> Any:
        return _float_to_decimal(value)

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class ProductCreate(ProductBase):
    pass


class ProductUpdateRequest(ProductBase):
    pass


class ProductResponse(ProductBase):
    id: int


class ProductNameFilter(BaseModel):
    name: str = ""


class ProductPriceFilter(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    min_price: Decimal = Field(default=Decimal("0"), alias="minPrice")
    max_price: Decimal = Field(default=Decimal("0"), alias="maxPrice")

    @field_validator("min_price", "max_price", mode="before")
    @classmethod
    def coerce_bounds(cls, value: Any) -> Any:
        return _float_to_decimal(value)


class ProductDuplicateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    origin_id: int = Field(default=0, alias="originId")
    new_name: str = Field(default="", alias="newName")
