from pydantic import BaseModel, ConfigDict, Field

from datetime import datetime
from typing import Optional

# Upper bound of the INTEGER columns on every supported store
MAX_DB_INT = 2**31 - 1


class AccountCredentials(BaseModel):
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=4096)


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    token: str


class ProductIn(BaseModel):
    """
    Product fields accepted on create and full update.

    Wire names follow the products table columns (productName, ...).
    """
    product_name: str = Field(..., alias="productName", min_length=1, max_length=255)
    description: str
    quantity: int = Field(..., ge=0, le=MAX_DB_INT)
    price: float = Field(..., ge=0, allow_inf_nan=False)

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {"productName": "Widget", "description": "d", "quantity": 5, "price": 9.99}
            ]
        },
    )


class ProductOut(BaseModel):
    product_id: int = Field(..., serialization_alias="productId")
    product_name: str = Field(..., serialization_alias="productName")
    description: str
    quantity: int
    price: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
