import re

from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import DuplicateKeyError, RepositoryError, ValidationFailedError

# SQLite: "UNIQUE constraint failed: users.email"
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: \w+\.(\w+)")
# PostgreSQL: "Key (email)=(a@b.c) already exists."
_POSTGRES_UNIQUE = re.compile(r"Key \((\w+)\)=")


def translate_integrity_error(exc: IntegrityError) -> RepositoryError:
    message = str(exc.orig) if exc.orig is not None else str(exc)

    for pattern in (_SQLITE_UNIQUE, _POSTGRES_UNIQUE):
        match = pattern.search(message)
        if match:
            return DuplicateKeyError(match.group(1))

    if "unique" in message.lower() or "duplicate" in message.lower():
        return DuplicateKeyError("record")

    return ValidationFailedError([message])


async def flush_or_raise(session: AsyncSession) -> None:
    """Flush pending changes, turning constraint violations into repository errors."""
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        raise translate_integrity_error(exc) from exc
