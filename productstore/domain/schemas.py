# productstore/domain/schemas.py
import math
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator


class ProductIn(BaseModel):
    """Schema for creating / replacing a product (request body)."""

    # wire name only, in_stock is not accepted
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    name: StrictStr
    description: StrictStr
    # strict types: "1.5" and true are not prices
    price: Union[StrictInt, StrictFloat]
    category: StrictStr
    in_stock: StrictBool = Field(..., alias="inStock")

    @field_validator("name", "description", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        # stored as sent, only the check is trimmed
        return v

    @field_validator("price")
    @classmethod
    def finite(cls, v: Union[int, float]) -> Union[int, float]:
        # NaN and Infinity get through json.loads
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("must be a finite number")
        # BSON stores ints as int64 at most
        if isinstance(v, int) and not -(2**63) <= v < 2**63:
            raise ValueError("out of range")
        return v

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)


class ProductOut(BaseModel):
    """Schema for a stored product (response)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool = Field(..., alias="inStock")


class ProductPage(BaseModel):
    page: int
    limit: int
    total: int
    data: List[ProductOut]


class ProductDeleted(BaseModel):
    message: str = "Product deleted"
    product: ProductOut


class ErrorOut(BaseModel):
    error: str
    message: str


class HealthOut(BaseModel):
    status: str
    service: str
