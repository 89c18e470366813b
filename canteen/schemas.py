"""
Pydantic Schemas for Request/Response Validation

Wire format uses camelCase field names (rollNumber, categoryId, isVeg,
studentId, paymentMethod, createdAt, ...). Python code uses the
snake_case attribute names; both are accepted on input.
"""

import re
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from canteen.models import OrderStatus, PaymentMethod

DECIMAL_PATTERN = re.compile(r"^\d+(\.\d{1,2})?$")


class CamelModel(BaseModel):
    """Base model serializing to camelCase and reading from dataclasses."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _validate_decimal_string(v: str) -> str:
    v = v.strip()
    if not DECIMAL_PATTERN.match(v):
        raise ValueError("Must be a decimal amount string such as '45.00'")
    return v


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class LoginRequest(CamelModel):
    """Roll-number login. An empty value is rejected by the identity service."""
    roll_number: Optional[str] = Field(None, examples=["21CS001"])


class OrderItemCreate(CamelModel):
    """Single line of a finalized cart."""
    dish_id: int = Field(..., ge=1, examples=[13])
    quantity: int = Field(..., ge=1, examples=[2])
    price: str = Field(..., examples=["45.00"])

    @field_validator("price")
    @classmethod
    def validate_price(cls, v: str) -> str:
        return _validate_decimal_string(v)


class OrderCreate(CamelModel):
    """
    Request schema for creating a new order.

    Any ``status`` sent by the client is ignored: new orders are always placed.
    """
    student_id: int = Field(..., ge=1, examples=[1])
    items: List[OrderItemCreate] = Field(..., min_length=1)
    total: str = Field(..., examples=["94.50"])
    payment_method: PaymentMethod = Field(..., examples=["cash", "upi", "card"])

    @field_validator("total")
    @classmethod
    def validate_total(cls, v: str) -> str:
        return _validate_decimal_string(v)


class OrderStatusUpdate(BaseModel):
    """Requested status. Checked against the lifecycle by the order service."""
    status: str = Field(..., examples=["confirmed"])


class QuoteItemRequest(CamelModel):
    dish_id: int = Field(..., ge=1)
    quantity: int = Field(1, ge=1)


class QuoteRequest(CamelModel):
    """Cart contents to price before checkout."""
    items: List[QuoteItemRequest] = Field(..., min_length=1)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class StudentResponse(CamelModel):
    id: int
    roll_number: str
    name: str


class LoginResponse(BaseModel):
    student: StudentResponse


class CategoryResponse(CamelModel):
    id: int
    name: str
    image: str


class DishResponse(CamelModel):
    id: int
    name: str
    price: str
    image: str
    category_id: int
    is_veg: bool
    is_popular: bool
    popular_category: Optional[str] = None


class OrderItemResponse(CamelModel):
    dish_id: int
    quantity: int
    price: str


class OrderResponse(CamelModel):
    """Response schema for a single order."""
    id: int
    student_id: int
    items: List[OrderItemResponse]
    total: str
    status: OrderStatus
    payment_method: PaymentMethod
    created_at: Optional[datetime] = None


class QuoteLineResponse(CamelModel):
    dish_id: int
    name: str
    quantity: int
    unit_price: str
    line_total: str


class QuoteResponse(CamelModel):
    """Checkout pricing: subtotal, tax and total as two-place strings."""
    items: List[QuoteLineResponse]
    subtotal: str
    tax: str
    total: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: str
    detail: Optional[Any] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    environment: str
    store: dict[str, int]
    timestamp: datetime
