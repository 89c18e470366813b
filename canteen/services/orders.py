"""
Order Lifecycle Service

Creates orders, answers order queries and moves orders through the
kitchen/pickup lifecycle:

    placed -> confirmed -> preparing -> ready -> completed

Every new order starts as ``placed``, whatever the caller sends. With
``enforce_sequence`` on (the default) a status change must be the
immediate successor of the current status; with it off any of the five
statuses is accepted, which reproduces the lenient behaviour of the
first canteen release.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterable, Optional, Union

from canteen.core.errors import (
    InvalidRequestError,
    InvalidStatusTransitionError,
    NotFoundError,
)
from canteen.database import EntityStore
from canteen.models import Order, OrderItem, OrderStatus, PaymentMethod

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
CENTS = Decimal("0.01")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_amount(amount: Decimal) -> str:
    """Render a decimal amount as a two-place string ("45.00")."""
    return str(amount.quantize(CENTS, rounding=ROUND_HALF_UP))


@dataclass
class QuoteLine:
    dish_id: int
    name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass
class Quote:
    """
    Checkout pricing for a cart.

    Attributes:
        items: One priced line per requested dish
        subtotal: Sum of line totals
        tax: subtotal * tax rate
        total: subtotal + tax
    """
    items: list[QuoteLine]
    subtotal: str
    tax: str
    total: str


class OrderService:
    """
    Order creation, lookup and status changes.

    Attributes:
        store: Entity store holding the orders
        enforce_sequence: Only accept one-step forward status changes
        tax_rate: Rate used by ``quote``
        max_item_quantity: Largest quantity accepted on one order line
        clock: Source of ``created_at`` timestamps
    """

    def __init__(
        self,
        store: EntityStore,
        enforce_sequence: bool = True,
        tax_rate: Decimal = Decimal("0.05"),
        max_item_quantity: int = 20,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.enforce_sequence = enforce_sequence
        self.tax_rate = Decimal(tax_rate)
        self.max_item_quantity = max_item_quantity
        self.clock = clock

    def _check_quantity(self, dish_id: int, quantity: int) -> None:
        if quantity < 1:
            raise InvalidRequestError(f"Quantity for dish #{dish_id} must be at least 1")
        if quantity > self.max_item_quantity:
            raise InvalidRequestError(
                f"Quantity for dish #{dish_id} cannot exceed {self.max_item_quantity}",
                detail={"dishId": dish_id, "quantity": quantity, "max": self.max_item_quantity},
            )

    # =========================================================================
    # CREATION
    # =========================================================================

    def create_order(
        self,
        student_id: int,
        items: Iterable[OrderItem],
        total: str,
        payment_method: Union[str, PaymentMethod],
    ) -> Order:
        """
        Place a new order for a student.

        Raises:
            InvalidRequestError: Unknown student or payment method, or a
                line quantity outside 1..max_item_quantity
        """
        items = tuple(items)
        for item in items:
            self._check_quantity(item.dish_id, item.quantity)

        if self.store.get_student(student_id) is None:
            logger.warning(f"Order rejected: student #{student_id} does not exist")
            raise InvalidRequestError(f"Student #{student_id} does not exist")

        try:
            method = PaymentMethod(payment_method)
        except ValueError:
            valid = [m.value for m in PaymentMethod]
            raise InvalidRequestError(f"Invalid payment method. Options: {valid}")

        order = self.store.insert_order(
            student_id=student_id,
            items=items,
            total=total,
            payment_method=method,
            created_at=self.clock(),
        )
        logger.info(
            f"Order #{order.id} placed by student #{student_id} "
            f"({len(order.items)} items, total {order.total}, {method.value})"
        )
        return order

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_order(self, order_id: int) -> Order:
        order = self.store.orders.get(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    def orders_by_student(self, student_id: int) -> list[Order]:
        """A student's orders, most recent first."""
        orders = [o for o in self.store.orders.list() if o.student_id == student_id]
        return sorted(orders, key=_recency_key, reverse=True)

    # =========================================================================
    # STATUS LIFECYCLE
    # =========================================================================

    def update_status(self, order_id: int, status: Union[str, OrderStatus]) -> Order:
        """
        Replace an order's status. No other field changes.

        Raises:
            NotFoundError: Unknown order id (nothing is created)
            InvalidRequestError: Status is not one of the five lifecycle values
            InvalidStatusTransitionError: Skipped or reversed step while
                enforcement is on
        """
        new_status = _parse_status(status)

        with self.store.lock:
            order = self.get_order(order_id)
            if order.status == new_status:
                return order

            if self.enforce_sequence and new_status != order.status.next_status():
                logger.warning(
                    f"Order #{order_id}: rejected {order.status.value} -> {new_status.value}"
                )
                raise InvalidStatusTransitionError(
                    order_id, order.status.value, new_status.value
                )

            updated = self.store.replace_order(order.with_status(new_status))

        logger.info(f"Order #{order_id}: {order.status.value} -> {new_status.value}")
        return updated

    def advance_status(self, order_id: int) -> Order:
        """
        Move an order to the next lifecycle step.

        Raises:
            NotFoundError: Unknown order id
            InvalidStatusTransitionError: Order is already completed
        """
        with self.store.lock:
            order = self.get_order(order_id)
            next_status = order.status.next_status()
            if next_status is None:
                raise InvalidStatusTransitionError(
                    order_id, order.status.value, "<none>"
                )
            return self.update_status(order_id, next_status)

    # =========================================================================
    # PRICING
    # =========================================================================

    def quote(self, items: Iterable[tuple[int, int]]) -> Quote:
        """
        Price a cart from catalog prices.

        Args:
            items: (dish_id, quantity) pairs

        Raises:
            InvalidRequestError: Unknown dish or quantity out of range
        """
        lines: list[QuoteLine] = []
        subtotal = Decimal("0")

        for dish_id, quantity in items:
            self._check_quantity(dish_id, quantity)
            dish = self.store.dishes.get(dish_id)
            if dish is None:
                raise InvalidRequestError(f"Unknown dish #{dish_id}")

            unit_price = Decimal(dish.price)
            line_total = unit_price * quantity
            subtotal += line_total
            lines.append(
                QuoteLine(
                    dish_id=dish.id,
                    name=dish.name,
                    quantity=quantity,
                    unit_price=format_amount(unit_price),
                    line_total=format_amount(line_total),
                )
            )

        tax = (subtotal * self.tax_rate).quantize(CENTS, rounding=ROUND_HALF_UP)
        return Quote(
            items=lines,
            subtotal=format_amount(subtotal),
            tax=format_amount(tax),
            total=format_amount(subtotal + tax),
        )


def _parse_status(status: Union[str, OrderStatus]) -> OrderStatus:
    try:
        return OrderStatus(status)
    except ValueError:
        valid = [s.value for s in OrderStatus]
        raise InvalidRequestError(f"Invalid status. Options: {valid}")


def _recency_key(order: Order) -> tuple[datetime, int]:
    created_at: Optional[datetime] = order.created_at
    if created_at is None:
        created_at = EPOCH
    elif created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at, order.id
