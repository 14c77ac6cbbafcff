"""Pydantic request/response schemas for the storefront API.

These are external contracts, separate from the application DTOs.
Money travels as two-decimal strings in responses.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class OrderLineSchema(BaseModel):
    product_id: str
    quantity: int
    unit_price: Decimal = Field(ge=0)


class CreateOrderBody(BaseModel):
    delivery_address_id: str
    payment_method: str
    shipping_cost: Decimal = Field(ge=0)
    lines: list[OrderLineSchema] = Field(min_length=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "delivery_address_id": "1",
                    "payment_method": "credit-card",
                    "shipping_cost": "15.00",
                    "lines": [
                        {"product_id": "1", "quantity": 2, "unit_price": "50.00"},
                        {"product_id": "2", "quantity": 1, "unit_price": "100.00"},
                    ],
                }
            ]
        }
    }


class UpdateStatusBody(BaseModel):
    status: str


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class OrderCreatedResponse(BaseModel):
    order_number: str
    total: str


class OrderSummaryResponse(BaseModel):
    order_number: str
    created_at: datetime
    total: str
    status: str


class AddressResponse(BaseModel):
    id: str
    postal_code: str
    street: str
    number: str
    complement: str
    district: str
    city: str
    state: str
    is_default: bool


class OrderDetailLineResponse(BaseModel):
    product_id: str
    product_name: str
    product_image: str
    quantity: int
    unit_price: str
    line_total: str


class OrderDetailResponse(BaseModel):
    order_number: str
    created_at: datetime
    status: str
    payment_method: str
    shipping_cost: str
    total: str
    delivery_address: AddressResponse
    items: list[OrderDetailLineResponse]
