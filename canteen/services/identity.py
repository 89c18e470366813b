"""
Student Identity Service

Resolves a roll number to a student record. The roll number is a plain
identifier, not a credential: the first login with an unseen roll number
creates the student with a generated display name.
"""

import logging

from canteen.core.errors import InvalidRequestError, NotFoundError
from canteen.database import EntityStore
from canteen.models import Student

logger = logging.getLogger(__name__)

STUDENT_NAME_POOL = (
    "Rahul Kumar",
    "Priya Sharma",
    "Amit Singh",
    "Neha Patel",
    "Rohit Gupta",
    "Sneha Jain",
)


def generate_student_name(roll_number: str) -> str:
    """
    Derive a display name from a roll number.

    Sum of the character codes modulo the pool size. Deterministic for a
    given roll number, not unique across roll numbers.

    Example:
        >>> generate_student_name("21CS001")
        'Rohit Gupta'
    """
    code_sum = sum(ord(char) for char in roll_number)
    return STUDENT_NAME_POOL[code_sum % len(STUDENT_NAME_POOL)]


class IdentityService:
    """Login and student lookup."""

    def __init__(self, store: EntityStore):
        self.store = store

    def login(self, roll_number: str) -> Student:
        """
        Return the student for a roll number, creating one on first login.

        Surrounding whitespace is ignored; the match is otherwise exact.

        Raises:
            InvalidRequestError: If the roll number is empty
        """
        roll_number = (roll_number or "").strip()
        if not roll_number:
            logger.warning("Login rejected: empty roll number")
            raise InvalidRequestError("Roll number is required")

        student, created = self.store.get_or_create_student(
            roll_number, generate_student_name
        )
        if created:
            logger.info(f"New student registered: {student!r}")
        else:
            logger.debug(f"Student logged in: {student!r}")
        return student

    def get_student(self, student_id: int) -> Student:
        student = self.store.get_student(student_id)
        if student is None:
            raise NotFoundError("Student", student_id)
        return student
