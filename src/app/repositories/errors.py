"""
Persistence errors surfaced by repositories.

Adapters translate driver-specific failures into these types so use cases
never inspect store error codes.
"""

from typing import List


class RepositoryError(Exception):
    pass


class DuplicateKeyError(RepositoryError):
    """A unique constraint was violated on `field`."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Duplicate value for {field}")


class ValidationFailedError(RepositoryError):
    """The store rejected a row (NOT NULL, foreign key, check constraint)."""

    def __init__(self, messages: List[str]):
        self.messages = messages
        super().__init__("; ".join(messages))
