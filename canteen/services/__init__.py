"""
                        Services Module

Business logic on top of the in-memory entity store.

Services:
    - catalog: category and dish queries
    - identity: roll-number login
    - orders: order creation, history and status lifecycle
"""

from canteen.services.catalog import CatalogService
from canteen.services.identity import IdentityService, generate_student_name
from canteen.services.orders import OrderService, Quote, QuoteLine

__all__ = [
    "CatalogService",
    "IdentityService",
    "generate_student_name",
    "OrderService",
    "Quote",
    "QuoteLine",
]
