from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from canteen.core.errors import (
    InvalidRequestError,
    InvalidStatusTransitionError,
    NotFoundError,
)
from canteen.models import OrderItem, OrderStatus, PaymentMethod
from canteen.services.orders import OrderService

ITEMS = [
    OrderItem(dish_id=13, quantity=2, price="45.00"),
    OrderItem(dish_id=1, quantity=1, price="15.00"),
]


@pytest.fixture
def orders(store, clock):
    return OrderService(store, clock=clock)


@pytest.fixture
def lenient_orders(store, clock):
    return OrderService(store, enforce_sequence=False, clock=clock)


def place(service, student_id, total="110.25", payment_method="cash"):
    return service.create_order(student_id, ITEMS, total, payment_method)


def test_status_sequence_helpers():
    assert OrderStatus.PLACED.next_status() == OrderStatus.CONFIRMED
    assert OrderStatus.READY.next_status() == OrderStatus.COMPLETED
    assert OrderStatus.COMPLETED.next_status() is None
    assert [s.position for s in OrderStatus] == [0, 1, 2, 3, 4]


def test_create_order(orders, student, clock):
    expected_time = clock.current
    order = place(orders, student.id)

    assert order.id == 1
    assert order.student_id == student.id
    assert order.status == OrderStatus.PLACED
    assert order.items == tuple(ITEMS)
    assert order.total == "110.25"
    assert order.payment_method == PaymentMethod.CASH
    assert order.created_at == expected_time
    assert orders.get_order(order.id) == order


def test_create_order_rejects_unknown_student(orders, store):
    with pytest.raises(InvalidRequestError):
        place(orders, student_id=99)
    assert len(store.orders) == 0


def test_create_order_rejects_unknown_payment_method(orders, student):
    with pytest.raises(InvalidRequestError, match="payment method"):
        place(orders, student.id, payment_method="bitcoin")


def test_get_unknown_order(orders):
    with pytest.raises(NotFoundError):
        orders.get_order(5)


def test_orders_by_student_newest_first(orders, store, student):
    other = store.insert_student("22EC010", "Neha Patel")
    first = place(orders, student.id)
    place(orders, other.id)
    second = place(orders, student.id)
    third = place(orders, student.id)

    result = orders.orders_by_student(student.id)
    assert [o.id for o in result] == [third.id, second.id, first.id]
    assert result[0].created_at > result[1].created_at > result[2].created_at


def test_orders_without_timestamp_sort_oldest(orders, store, student):
    undated = store.insert_order(student.id, ITEMS, "110.25", "cash", created_at=None)
    dated = place(orders, student.id)
    assert [o.id for o in orders.orders_by_student(student.id)] == [dated.id, undated.id]


def test_orders_by_unknown_student_is_empty(orders):
    assert orders.orders_by_student(42) == []


def test_update_status_changes_only_status(lenient_orders, student):
    order = place(lenient_orders, student.id)
    updated = lenient_orders.update_status(order.id, "ready")

    assert updated.status == OrderStatus.READY
    assert updated == replace(order, status=OrderStatus.READY)
    assert lenient_orders.get_order(order.id) == updated


def test_update_status_follows_sequence(orders, student):
    order = place(orders, student.id)
    for status in ("confirmed", "preparing", "ready", "completed"):
        order = orders.update_status(order.id, status)
        assert order.status.value == status


@pytest.mark.parametrize("target", ["preparing", "ready", "completed"])
def test_update_status_rejects_skipping(orders, student, target):
    order = place(orders, student.id)
    with pytest.raises(InvalidStatusTransitionError):
        orders.update_status(order.id, target)
    assert orders.get_order(order.id).status == OrderStatus.PLACED


def test_update_status_rejects_going_back(orders, student):
    order = place(orders, student.id)
    orders.update_status(order.id, "confirmed")
    with pytest.raises(InvalidStatusTransitionError) as excinfo:
        orders.update_status(order.id, "placed")
    assert excinfo.value.current == "confirmed"
    assert excinfo.value.requested == "placed"


def test_update_status_to_current_is_noop(orders, student):
    order = place(orders, student.id)
    assert orders.update_status(order.id, "placed") == order


@pytest.mark.parametrize("service_fixture", ["orders", "lenient_orders"])
def test_update_status_rejects_unknown_value(request, student, service_fixture):
    service = request.getfixturevalue(service_fixture)
    order = place(service, student.id)
    with pytest.raises(InvalidRequestError, match="Invalid status"):
        service.update_status(order.id, "cooking")


def test_lenient_mode_allows_any_transition(lenient_orders, student):
    order = place(lenient_orders, student.id)
    assert lenient_orders.update_status(order.id, "completed").status == OrderStatus.COMPLETED
    assert lenient_orders.update_status(order.id, "placed").status == OrderStatus.PLACED


def test_update_status_unknown_order_creates_nothing(orders, store):
    with pytest.raises(NotFoundError):
        orders.update_status(12, "confirmed")
    assert len(store.orders) == 0
    assert store.orders.get(12) is None


def test_advance_status_walks_lifecycle(orders, student):
    order = place(orders, student.id)
    seen = []
    for _ in range(4):
        order = orders.advance_status(order.id)
        seen.append(order.status.value)
    assert seen == ["confirmed", "preparing", "ready", "completed"]

    with pytest.raises(InvalidStatusTransitionError):
        orders.advance_status(order.id)


def test_quote_prices_from_catalog(orders):
    quote = orders.quote([(13, 2), (1, 1)])

    assert [line.name for line in quote.items] == ["Dosa", "Coffee"]
    assert quote.items[0].unit_price == "45.00"
    assert quote.items[0].line_total == "90.00"
    assert quote.subtotal == "105.00"
    assert quote.tax == "5.25"
    assert quote.total == "110.25"


def test_quote_uses_configured_tax_rate(store):
    service = OrderService(store, tax_rate=Decimal("0"))
    quote = service.quote([(2, 3)])
    assert quote.subtotal == "36.00"
    assert quote.tax == "0.00"
    assert quote.total == "36.00"


def test_quote_rejects_unknown_dish(orders):
    with pytest.raises(InvalidRequestError, match="Unknown dish"):
        orders.quote([(13, 1), (999, 1)])


def test_quote_rejects_zero_quantity(orders):
    with pytest.raises(InvalidRequestError):
        orders.quote([(13, 0)])


def test_naive_timestamps_sort_with_aware_ones(store, student):
    timestamps = iter([
        datetime(2024, 7, 1, 9, 0),
        datetime(2024, 7, 1, 10, 0, tzinfo=timezone.utc),
    ])
    service = OrderService(store, clock=lambda: next(timestamps))
    early = place(service, student.id)
    late = place(service, student.id)
    assert [o.id for o in service.orders_by_student(student.id)] == [late.id, early.id]


def test_create_order_rejects_quantity_above_cap(store, student, clock):
    service = OrderService(store, max_item_quantity=1, clock=clock)
    with pytest.raises(InvalidRequestError, match="cannot exceed 1"):
        place(service, student.id)
    assert len(store.orders) == 0


def test_quote_rejects_quantity_above_cap(store):
    service = OrderService(store, max_item_quantity=5)
    assert service.quote([(13, 5)]).subtotal == "225.00"
    with pytest.raises(InvalidRequestError):
        service.quote([(13, 6)])
