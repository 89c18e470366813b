"""
Domain Models

In-memory entities held by the EntityStore:
- Student (created on first login)
- Category and Dish (fixed catalog, seeded at startup)
- Order with its line items and status lifecycle

Entities are frozen dataclasses. The only field that ever changes is
Order.status, and that change is made by storing a replaced copy, so a
reader holding an entity never sees it change underneath it.
"""

import enum
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional


class OrderStatus(str, enum.Enum):
    """Order status workflow, in lifecycle order."""
    PLACED = "placed"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"

    @property
    def position(self) -> int:
        return ORDER_STATUS_SEQUENCE.index(self)

    def next_status(self) -> Optional["OrderStatus"]:
        """Return the following status, or None once completed."""
        index = self.position + 1
        if index < len(ORDER_STATUS_SEQUENCE):
            return ORDER_STATUS_SEQUENCE[index]
        return None


ORDER_STATUS_SEQUENCE: tuple[OrderStatus, ...] = tuple(OrderStatus)


class PaymentMethod(str, enum.Enum):
    """How the student pays at the counter. Recorded only, never charged."""
    CASH = "cash"
    UPI = "upi"
    CARD = "card"


# "Popular in X" buckets, independent of the all-time is_popular flag
POPULAR_CATEGORIES = ("veg", "non-veg", "breakfast", "south-indian")


@dataclass(frozen=True)
class Student:
    id: int
    roll_number: str
    name: str

    def __repr__(self):
        return f"<Student #{self.id} - {self.roll_number} - {self.name}>"


@dataclass(frozen=True)
class Category:
    id: int
    name: str
    image: str


@dataclass(frozen=True)
class Dish:
    id: int
    name: str
    price: str  # decimal string, e.g. "45.00"
    image: str
    category_id: int
    is_veg: bool = True
    is_popular: bool = False
    popular_category: Optional[str] = None

    def __repr__(self):
        return f"<Dish #{self.id} - {self.name} - {self.price}>"


@dataclass(frozen=True)
class OrderItem:
    dish_id: int
    quantity: int
    price: str


@dataclass(frozen=True)
class Order:
    """
    A single checkout.

    Tracks the kitchen/pickup lifecycle from placement to completion.
    Everything except ``status`` is fixed at creation time.
    """
    id: int
    student_id: int
    items: tuple[OrderItem, ...]
    total: str
    payment_method: PaymentMethod
    status: OrderStatus = OrderStatus.PLACED
    created_at: Optional[datetime] = field(default=None)

    def with_status(self, status: OrderStatus) -> "Order":
        """Return a copy of this order carrying the new status."""
        return replace(self, status=status)

    def __repr__(self):
        return f"<Order #{self.id} - student {self.student_id} - {self.status.value}>"
