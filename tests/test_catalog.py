import pytest

from canteen.core.errors import NotFoundError
from canteen.services.catalog import CatalogService


@pytest.fixture
def catalog(store):
    return CatalogService(store)


def names(dishes):
    return [d.name for d in dishes]


def test_list_dishes_keeps_insertion_order(catalog):
    dishes = catalog.list_dishes()
    assert [d.id for d in dishes] == sorted(d.id for d in dishes)
    assert names(dishes)[:4] == ["Coffee", "Masala Tea", "Vada Pav", "Samosa"]


def test_dishes_by_category_only_returns_that_category(catalog):
    south_indian = catalog.dishes_by_category(1)
    assert south_indian
    assert all(d.category_id == 1 for d in south_indian)
    assert "Dosa" in names(south_indian)


def test_dishes_by_category_partitions_the_menu(catalog):
    seen = []
    for category in catalog.list_categories():
        seen.extend(d.id for d in catalog.dishes_by_category(category.id))
    assert sorted(seen) == [d.id for d in catalog.list_dishes()]


def test_unknown_category_matches_nothing(catalog):
    assert catalog.dishes_by_category(99) == []


def test_popular_dishes(catalog):
    assert names(catalog.popular_dishes()) == ["Coffee", "Masala Tea", "Vada Pav", "Samosa"]


@pytest.mark.parametrize(
    "bucket, expected",
    [
        ("non-veg", ["Chicken Roll", "Egg Roll", "Chicken Biryani"]),
        ("breakfast", ["Poha", "Upma", "Paratha with Curd", "Bread Omelet"]),
        ("south-indian", ["Idli (2pc)", "Dosa", "Uttapam", "Sambhar Vada"]),
        ("veg", ["Vada Pav", "Roti with Dal", "Rajma Rice", "Chole Bhature", "Pav Bhaji"]),
    ],
)
def test_popular_dishes_by_bucket(catalog, bucket, expected):
    assert names(catalog.popular_dishes_by_category(bucket)) == expected


def test_popular_bucket_is_case_sensitive(catalog):
    assert catalog.popular_dishes_by_category("Breakfast") == []
    assert catalog.popular_dishes_by_category("desserts") == []


def test_search_is_case_insensitive_substring(catalog):
    assert names(catalog.search_dishes("dosa")) == ["Dosa", "Rava Dosa", "Set Dosa (3pc)"]
    assert names(catalog.search_dishes("LASSI")) == ["Sweet Lassi", "Salt Lassi", "Mango Lassi"]
    assert catalog.search_dishes("pizza") == []


def test_filter_precedence_search_wins(catalog):
    result = catalog.filter_dishes(
        category_id=2, popular=True, popular_category="veg", search="dosa"
    )
    assert names(result) == ["Dosa", "Rava Dosa", "Set Dosa (3pc)"]


def test_filter_precedence_category_beats_popular(catalog):
    result = catalog.filter_dishes(category_id=6, popular=True, popular_category="veg")
    assert all(d.category_id == 6 for d in result)
    assert "Kulfi" in names(result)


def test_filter_precedence_popular_beats_bucket(catalog):
    result = catalog.filter_dishes(popular=True, popular_category="breakfast")
    assert names(result) == names(catalog.popular_dishes())


def test_filter_with_bucket_only(catalog):
    result = catalog.filter_dishes(popular=False, popular_category="non-veg")
    assert names(result) == ["Chicken Roll", "Egg Roll", "Chicken Biryani"]


def test_blank_search_does_not_list_everything_as_results(catalog):
    result = catalog.filter_dishes(category_id=5, search="   ")
    assert all(d.category_id == 5 for d in result)


def test_filter_without_arguments_returns_full_menu(catalog):
    assert catalog.filter_dishes() == catalog.list_dishes()


def test_get_dish(catalog):
    assert catalog.get_dish(13).name == "Dosa"
    with pytest.raises(NotFoundError):
        catalog.get_dish(999)


def test_get_category(catalog):
    assert catalog.get_category(5).name == "Beverages"
    with pytest.raises(NotFoundError):
        catalog.get_category(7)


@pytest.mark.parametrize("raw", ["abc", "1.5", "one"])
def test_non_integer_category_string_matches_nothing(catalog, raw):
    assert catalog.filter_dishes(category_id=raw, popular=True) == []


def test_category_string_is_parsed(catalog):
    assert catalog.filter_dishes(category_id=" 5 ") == catalog.dishes_by_category(5)


@pytest.mark.parametrize("raw", ["", "   "])
def test_blank_category_string_is_absent(catalog, raw):
    assert catalog.filter_dishes(category_id=raw) == catalog.list_dishes()
    assert catalog.filter_dishes(category_id=raw, popular=True) == catalog.popular_dishes()
