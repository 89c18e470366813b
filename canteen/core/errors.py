"""
Domain Errors

Typed failures raised by the store and services. The HTTP layer maps
each one to a status code through a single exception handler, so the
services never import FastAPI.
"""

from typing import Any, Optional


class CanteenError(Exception):
    """Base class for all expected canteen failures."""

    status_code: int = 500

    def __init__(self, message: str, detail: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidRequestError(CanteenError):
    """Missing or malformed input (empty roll number, bad status, ...)."""

    status_code = 400


class InvalidStatusTransitionError(InvalidRequestError):
    """A status change that skips or reverses the order lifecycle."""

    def __init__(self, order_id: int, current: str, requested: str):
        super().__init__(
            f"Order #{order_id} cannot move from '{current}' to '{requested}'",
            detail={"current": current, "requested": requested},
        )
        self.order_id = order_id
        self.current = current
        self.requested = requested


class NotFoundError(CanteenError):
    """Unknown student, dish or order id."""

    status_code = 404

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} #{entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id
