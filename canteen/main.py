"""
FastAPI Application Entry Point

College Canteen Ordering API
Students log in with a roll number, browse the menu, place orders and
follow them through the kitchen lifecycle.

Endpoints:
    - POST /api/auth/login: Roll-number login
    - GET /api/categories: Menu categories
    - GET /api/dishes: Menu, optionally filtered
    - POST /api/orders/quote: Price a cart
    - POST /api/orders: Place an order
    - GET /api/students/{id}/orders: Order history
    - PATCH /api/orders/{id}/status: Kitchen status update
    - GET /health: System health check
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import List, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from canteen.core.config import Settings, get_settings, setup_logging
from canteen.core.errors import CanteenError
from canteen.database import EntityStore, get_store
from canteen.models import OrderItem
from canteen.schemas import (
    CategoryResponse,
    DishResponse,
    ErrorResponse,
    HealthResponse,
    LoginRequest,
    LoginResponse,
    OrderCreate,
    OrderResponse,
    OrderStatusUpdate,
    QuoteRequest,
    QuoteResponse,
    StudentResponse,
)
from canteen.services import CatalogService, IdentityService, OrderService

logger = logging.getLogger(__name__)


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog_service(store: EntityStore = Depends(get_store)) -> CatalogService:
    return CatalogService(store)


def get_identity_service(store: EntityStore = Depends(get_store)) -> IdentityService:
    return IdentityService(store)


def get_order_service(
    store: EntityStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> OrderService:
    return OrderService(
        store,
        enforce_sequence=settings.enforce_status_sequence,
        tax_rate=settings.tax_rate,
        max_item_quantity=settings.max_item_quantity,
    )


# =============================================================================
# APPLICATION FACTORY
# =============================================================================

def create_app(
    store: Optional[EntityStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        store: Entity store to serve (a freshly seeded one by default)
        settings: Configuration (cached environment settings by default)
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application startup and shutdown events.
        """
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {settings.app_name}")
        logger.info(f"   Version: {settings.app_version}")
        logger.info(f"   Environment: {settings.env_mode.value}")
        logger.info(f"   Debug: {settings.debug}")
        logger.info(f"   Strict status sequence: {settings.enforce_status_sequence}")
        logger.info(f"   Catalog: {app.state.store.counts()}")
        logger.info("=" * 60)

        yield  # Application runs

        logger.info("Shutting down, in-memory data will be discarded")

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Ordering API for the college canteen: roll-number login, "
            "menu browsing and order tracking."
        ),
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.store = store if store is not None else EntityStore.seeded()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


# =============================================================================
# ERROR HANDLERS
# =============================================================================

def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(CanteenError)
    async def canteen_error_handler(request: Request, exc: CanteenError) -> JSONResponse:
        """Expected domain failures (400 / 404)."""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path}: {exc.message}")
        else:
            logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message, detail=exc.detail).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Schema violations are client errors (400), not 422."""
        logger.warning(f"{request.method} {request.url.path}: invalid request data")
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "error": "Invalid request data",
                "detail": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all exception handler."""
        logger.exception(f"Unhandled exception: {exc}")
        settings: Settings = request.app.state.settings
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal Server Error",
                detail=str(exc) if settings.debug else "An unexpected error occurred",
            ).model_dump(),
        )


# =============================================================================
# ROUTES
# =============================================================================

def register_routes(app: FastAPI) -> None:

    # -------------------------------------------------------------------------
    # ROOT & HEALTH
    # -------------------------------------------------------------------------

    @app.get("/", tags=["Root"])
    async def root(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
        """API root with navigation links."""
        return {
            "message": f"🍛 Welcome to {settings.canteen_name}",
            "version": settings.app_version,
            "environment": settings.env_mode.value,
            "documentation": "/docs",
            "health": "/health",
        }

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="System Health Check",
    )
    async def health_check(
        store: EntityStore = Depends(get_store),
        settings: Settings = Depends(get_app_settings),
    ) -> HealthResponse:
        """Report entity counts of the in-memory store."""
        counts = store.counts()
        return HealthResponse(
            status="operational" if counts["categories"] and counts["dishes"] else "degraded",
            environment=settings.env_mode.value,
            store=counts,
            timestamp=datetime.now(),
        )

    # -------------------------------------------------------------------------
    # AUTHENTICATION
    # -------------------------------------------------------------------------

    @app.post(
        "/api/auth/login",
        response_model=LoginResponse,
        responses={400: {"model": ErrorResponse}},
        tags=["Auth"],
        summary="Roll-number login",
    )
    async def login(
        payload: LoginRequest,
        identity: IdentityService = Depends(get_identity_service),
    ) -> LoginResponse:
        """Return the student for a roll number, registering it on first login."""
        student = identity.login(payload.roll_number)
        return LoginResponse(student=StudentResponse.model_validate(student))

    @app.get(
        "/api/students/{student_id}",
        response_model=StudentResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Auth"],
    )
    async def get_student(
        student_id: int,
        identity: IdentityService = Depends(get_identity_service),
    ) -> StudentResponse:
        return StudentResponse.model_validate(identity.get_student(student_id))

    # -------------------------------------------------------------------------
    # CATALOG
    # -------------------------------------------------------------------------

    @app.get(
        "/api/categories",
        response_model=List[CategoryResponse],
        tags=["Catalog"],
    )
    async def list_categories(
        catalog: CatalogService = Depends(get_catalog_service),
    ) -> List[CategoryResponse]:
        return [CategoryResponse.model_validate(c) for c in catalog.list_categories()]

    @app.get(
        "/api/dishes",
        response_model=List[DishResponse],
        tags=["Catalog"],
        summary="List or filter dishes",
    )
    async def list_dishes(
        category_id: Optional[str] = Query(None, alias="categoryId"),
        popular: Optional[str] = Query(None),
        popular_category: Optional[str] = Query(None, alias="popularCategory"),
        search: Optional[str] = Query(None),
        catalog: CatalogService = Depends(get_catalog_service),
    ) -> List[DishResponse]:
        """
        Apply one filter: search, then categoryId, then popular=true,
        then popularCategory. Without filters the whole menu is returned.
        """
        dishes = catalog.filter_dishes(
            category_id=category_id,
            popular=popular == "true",
            popular_category=popular_category,
            search=search,
        )
        return [DishResponse.model_validate(d) for d in dishes]

    @app.get(
        "/api/dishes/{dish_id}",
        response_model=DishResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Catalog"],
    )
    async def get_dish(
        dish_id: int,
        catalog: CatalogService = Depends(get_catalog_service),
    ) -> DishResponse:
        return DishResponse.model_validate(catalog.get_dish(dish_id))

    # -------------------------------------------------------------------------
    # ORDERS
    # -------------------------------------------------------------------------

    @app.post(
        "/api/orders/quote",
        response_model=QuoteResponse,
        responses={400: {"model": ErrorResponse}},
        tags=["Orders"],
        summary="Price a cart",
    )
    async def quote_order(
        payload: QuoteRequest,
        orders: OrderService = Depends(get_order_service),
    ) -> QuoteResponse:
        """Subtotal, tax and total for a cart, using catalog prices."""
        quote = orders.quote((item.dish_id, item.quantity) for item in payload.items)
        return QuoteResponse.model_validate(quote)

    @app.post(
        "/api/orders",
        response_model=OrderResponse,
        status_code=201,
        responses={400: {"model": ErrorResponse}},
        tags=["Orders"],
        summary="Place an order",
    )
    async def create_order(
        payload: OrderCreate,
        orders: OrderService = Depends(get_order_service),
    ) -> OrderResponse:
        """Create an order from a finalized cart. The order starts as ``placed``."""
        order = orders.create_order(
            student_id=payload.student_id,
            items=[
                OrderItem(dish_id=item.dish_id, quantity=item.quantity, price=item.price)
                for item in payload.items
            ],
            total=payload.total,
            payment_method=payload.payment_method,
        )
        return OrderResponse.model_validate(order)

    @app.get(
        "/api/students/{student_id}/orders",
        response_model=List[OrderResponse],
        tags=["Orders"],
        summary="Order history",
    )
    async def list_student_orders(
        student_id: int,
        orders: OrderService = Depends(get_order_service),
    ) -> List[OrderResponse]:
        """A student's orders, newest first."""
        return [OrderResponse.model_validate(o) for o in orders.orders_by_student(student_id)]

    @app.get(
        "/api/orders/{order_id}",
        response_model=OrderResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Orders"],
    )
    async def get_order(
        order_id: int,
        orders: OrderService = Depends(get_order_service),
    ) -> OrderResponse:
        """Get a specific order by ID."""
        return OrderResponse.model_validate(orders.get_order(order_id))

    @app.patch(
        "/api/orders/{order_id}/status",
        response_model=OrderResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        tags=["Orders"],
        summary="Update order status",
    )
    async def update_order_status(
        order_id: int,
        payload: OrderStatusUpdate,
        orders: OrderService = Depends(get_order_service),
    ) -> OrderResponse:
        return OrderResponse.model_validate(orders.update_status(order_id, payload.status))

    @app.post(
        "/api/orders/{order_id}/advance",
        response_model=OrderResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        tags=["Orders"],
        summary="Move order to the next status",
    )
    async def advance_order(
        order_id: int,
        orders: OrderService = Depends(get_order_service),
    ) -> OrderResponse:
        return OrderResponse.model_validate(orders.advance_status(order_id))


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

setup_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
