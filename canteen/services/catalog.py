"""
Catalog Query Service

Read-only filters over the category and dish collections. Every query
returns dishes in catalog (insertion) order and never raises for an
unknown category or bucket; it simply matches nothing.
"""

import logging
from typing import Optional, Union

from canteen.core.errors import NotFoundError
from canteen.database import EntityStore
from canteen.models import Category, Dish

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Menu browsing for the student app.

    Example:
        >>> catalog = CatalogService(EntityStore.seeded())
        >>> [d.name for d in catalog.search_dishes("dosa")]
        ['Dosa', 'Rava Dosa', 'Set Dosa (3pc)']
    """

    def __init__(self, store: EntityStore):
        self.store = store

    # =========================================================================
    # CATEGORIES
    # =========================================================================

    def list_categories(self) -> list[Category]:
        return self.store.categories.list()

    def get_category(self, category_id: int) -> Category:
        category = self.store.categories.get(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    # =========================================================================
    # DISHES
    # =========================================================================

    def list_dishes(self) -> list[Dish]:
        return self.store.dishes.list()

    def get_dish(self, dish_id: int) -> Dish:
        dish = self.store.dishes.get(dish_id)
        if dish is None:
            raise NotFoundError("Dish", dish_id)
        return dish

    def dishes_by_category(self, category_id: int) -> list[Dish]:
        return [d for d in self.list_dishes() if d.category_id == category_id]

    def popular_dishes(self) -> list[Dish]:
        """Dishes flagged as popular of all time."""
        return [d for d in self.list_dishes() if d.is_popular]

    def popular_dishes_by_category(self, bucket: str) -> list[Dish]:
        """Dishes in a "Popular in X" bucket. Exact, case-sensitive match."""
        return [d for d in self.list_dishes() if d.popular_category == bucket]

    def search_dishes(self, query: str) -> list[Dish]:
        """Case-insensitive substring match on the dish name."""
        needle = query.lower()
        return [d for d in self.list_dishes() if needle in d.name.lower()]

    def filter_dishes(
        self,
        category_id: Union[int, str, None] = None,
        popular: Optional[bool] = None,
        popular_category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[Dish]:
        """
        Apply exactly one dish filter, chosen by which argument is present.

        Precedence: search > category_id > popular > popular_category.
        With no usable argument the full menu is returned. A blank search
        string counts as absent so it never lists the whole menu as
        "search results".

        ``category_id`` may be the raw query string value: blank counts as
        absent, and a non-integer value still selects the category filter
        but matches no dish.

        Args:
            category_id: Restrict to one category
            popular: Only the all-time popular dishes (when True)
            popular_category: One of the popularity buckets
            search: Free-text name search
        """
        if isinstance(category_id, str):
            category_id = category_id.strip() or None

        if search is not None and search.strip():
            logger.debug(f"Dish filter: search={search!r}")
            return self.search_dishes(search)
        if category_id is not None:
            logger.debug(f"Dish filter: category_id={category_id!r}")
            try:
                category_id = int(category_id)
            except ValueError:
                return []
            return self.dishes_by_category(category_id)
        if popular:
            logger.debug("Dish filter: popular")
            return self.popular_dishes()
        if popular_category:
            logger.debug(f"Dish filter: popular_category={popular_category!r}")
            return self.popular_dishes_by_category(popular_category)
        return self.list_dishes()
