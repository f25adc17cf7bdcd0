import pytest
from sqlalchemy.exc import IntegrityError

from src.adapter.repositories.integrity import translate_integrity_error
from src.app.repositories.errors import DuplicateKeyError, ValidationFailedError


def integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception(message))


@pytest.mark.parametrize(
    "message, field",
    [
        ("UNIQUE constraint failed: users.email", "email"),
        ("UNIQUE constraint failed: users.username", "username"),
        ('duplicate key value violates unique constraint "ix_users_email"\n'
         "DETAIL:  Key (email)=(a@example.com) already exists.", "email"),
    ],
)
def test_duplicate_key(message, field):
    error = translate_integrity_error(integrity_error(message))

    assert isinstance(error, DuplicateKeyError)
    assert error.field == field


def test_other_constraint_failures():
    error = translate_integrity_error(integrity_error("FOREIGN KEY constraint failed"))

    assert isinstance(error, ValidationFailedError)
    assert error.messages == ["FOREIGN KEY constraint failed"]
