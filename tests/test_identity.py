import pytest

from canteen.core.errors import InvalidRequestError, NotFoundError
from canteen.services.identity import (
    STUDENT_NAME_POOL,
    IdentityService,
    generate_student_name,
)


@pytest.fixture
def identity(store):
    return IdentityService(store)


@pytest.mark.parametrize(
    "roll_number, expected",
    [
        ("B", "Rahul Kumar"),  # 66 % 6 == 0
        ("A", "Sneha Jain"),  # 65 % 6 == 5
        ("21CS001", "Rohit Gupta"),  # 394 % 6 == 4
    ],
)
def test_generate_student_name(roll_number, expected):
    assert generate_student_name(roll_number) == expected


def test_generated_names_come_from_pool():
    for roll in ("20ME100", "23EE045", "x", "ROLL-9999"):
        assert generate_student_name(roll) in STUDENT_NAME_POOL


def test_login_twice_returns_same_student(identity, store):
    first = identity.login("21CS001")
    second = identity.login("21CS001")
    assert first.id == second.id
    assert first == second
    assert len(store.students) == 1


def test_login_creates_student_with_generated_name(identity):
    student = identity.login("21CS001")
    assert student.roll_number == "21CS001"
    assert student.name == "Rohit Gupta"


def test_login_returns_existing_student_unchanged(identity, store):
    existing = store.insert_student("22EC010", "Custom Name")
    assert identity.login("22EC010") == existing


def test_different_roll_numbers_get_different_ids(identity):
    a = identity.login("A")
    b = identity.login("B")
    assert a.id != b.id


def test_login_ignores_surrounding_whitespace(identity):
    assert identity.login("  21CS001 ").id == identity.login("21CS001").id


@pytest.mark.parametrize("roll_number", ["", "   ", None])
def test_login_rejects_empty_roll_number(identity, store, roll_number):
    with pytest.raises(InvalidRequestError, match="Roll number is required"):
        identity.login(roll_number)
    assert len(store.students) == 0


def test_get_student(identity):
    student = identity.login("21CS001")
    assert identity.get_student(student.id) == student
    with pytest.raises(NotFoundError):
        identity.get_student(999)
