"""
In-Memory Entity Store

Holds the four entity collections (students, categories, dishes, orders)
for the lifetime of the process. Nothing is persisted: every start
re-seeds the fixed catalog.

Id assignment and every mutation run under one store-wide lock, so the
API can be served from a threaded worker pool without two inserts ever
receiving the same id. Reads return snapshots of immutable entities.
"""

import logging
import threading
from datetime import datetime
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from fastapi import Request

from canteen.core.errors import InvalidRequestError, NotFoundError
from canteen.models import (
    Category,
    Dish,
    Order,
    OrderItem,
    OrderStatus,
    PaymentMethod,
    Student,
)
from canteen.seed import CATEGORIES, DISHES

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Table(Generic[T]):
    """
    Append-only id -> entity mapping with a monotonically increasing id counter.

    Iteration order is insertion order. Ids start at 1 and are never reused.
    """

    def __init__(self, name: str, lock: threading.RLock):
        self.name = name
        self._lock = lock
        self._rows: dict[int, T] = {}
        self._next_id = 1

    def insert(self, build: Callable[[int], T]) -> T:
        """
        Assign the next id, build the entity with it and store it.

        Args:
            build: Callable receiving the new id and returning the entity
        """
        with self._lock:
            entity_id = self._next_id
            entity = build(entity_id)
            self._rows[entity_id] = entity
            self._next_id += 1
        return entity

    def get(self, entity_id: int) -> Optional[T]:
        return self._rows.get(entity_id)

    def list(self) -> list[T]:
        with self._lock:
            return list(self._rows.values())

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first entity (in insertion order) matching predicate."""
        for entity in self.list():
            if predicate(entity):
                return entity
        return None

    def replace(self, entity_id: int, entity: T) -> T:
        """Swap a stored entity for an updated copy."""
        with self._lock:
            if entity_id not in self._rows:
                raise NotFoundError(self.name, entity_id)
            self._rows[entity_id] = entity
        return entity

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._rows


class EntityStore:
    """
    Owner of every entity collection.

    Create one per process (the application factory does this) and hand it
    to request handlers through ``get_store``. Tests build their own.

    Example:
        >>> store = EntityStore.seeded()
        >>> store.dishes.get(13).name
        'Dosa'
    """

    def __init__(self):
        self._lock = threading.RLock()
        self.students: Table[Student] = Table("Student", self._lock)
        self.categories: Table[Category] = Table("Category", self._lock)
        self.dishes: Table[Dish] = Table("Dish", self._lock)
        self.orders: Table[Order] = Table("Order", self._lock)

    @classmethod
    def seeded(
        cls,
        categories: Iterable[dict[str, Any]] = CATEGORIES,
        dishes: Iterable[dict[str, Any]] = DISHES,
    ) -> "EntityStore":
        """Build a store pre-loaded with the canteen catalog."""
        store = cls()
        for category in categories:
            store.insert_category(**category)
        for dish in dishes:
            store.insert_dish(**dish)
        logger.info(
            f"Entity store seeded: {len(store.categories)} categories, "
            f"{len(store.dishes)} dishes"
        )
        return store

    # =========================================================================
    # STUDENTS
    # =========================================================================

    def insert_student(self, roll_number: str, name: str) -> Student:
        return self.students.insert(
            lambda new_id: Student(id=new_id, roll_number=roll_number, name=name)
        )

    def get_student(self, student_id: int) -> Optional[Student]:
        return self.students.get(student_id)

    def student_by_roll_number(self, roll_number: str) -> Optional[Student]:
        return self.students.find(lambda s: s.roll_number == roll_number)

    def get_or_create_student(
        self,
        roll_number: str,
        name_for: Callable[[str], str],
    ) -> tuple[Student, bool]:
        """
        Look up a student by roll number, creating it if absent.

        Lookup and insert happen under the store lock, so concurrent first
        logins with the same roll number produce a single student.

        Returns:
            (student, created)
        """
        with self._lock:
            existing = self.student_by_roll_number(roll_number)
            if existing is not None:
                return existing, False
            return self.insert_student(roll_number, name_for(roll_number)), True

    # =========================================================================
    # CATALOG
    # =========================================================================

    def insert_category(self, name: str, image: str) -> Category:
        return self.categories.insert(
            lambda new_id: Category(id=new_id, name=name, image=image)
        )

    def insert_dish(
        self,
        name: str,
        price: str,
        image: str,
        category_id: int,
        is_veg: bool = True,
        is_popular: bool = False,
        popular_category: Optional[str] = None,
    ) -> Dish:
        """Add a dish. The referenced category must already exist."""
        if category_id not in self.categories:
            raise InvalidRequestError(f"Category #{category_id} does not exist")
        return self.dishes.insert(
            lambda new_id: Dish(
                id=new_id,
                name=name,
                price=price,
                image=image,
                category_id=category_id,
                is_veg=is_veg,
                is_popular=is_popular,
                popular_category=popular_category,
            )
        )

    # =========================================================================
    # ORDERS
    # =========================================================================

    def insert_order(
        self,
        student_id: int,
        items: Iterable[OrderItem],
        total: str,
        payment_method: PaymentMethod,
        created_at: Optional[datetime],
    ) -> Order:
        """Store a new order. Every order starts out as ``placed``."""
        frozen_items = tuple(items)
        return self.orders.insert(
            lambda new_id: Order(
                id=new_id,
                student_id=student_id,
                items=frozen_items,
                total=total,
                payment_method=PaymentMethod(payment_method),
                status=OrderStatus.PLACED,
                created_at=created_at,
            )
        )

    def replace_order(self, order: Order) -> Order:
        return self.orders.replace(order.id, order)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def counts(self) -> dict[str, int]:
        """Entity counts per collection (used by the health check)."""
        return {
            "students": len(self.students),
            "categories": len(self.categories),
            "dishes": len(self.dishes),
            "orders": len(self.orders),
        }


def get_store(request: Request) -> EntityStore:
    """
    Dependency injection for FastAPI routes.
    Returns the store owned by the running application.
    """
    return request.app.state.store
