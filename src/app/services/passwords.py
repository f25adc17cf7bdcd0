"""
Password hashing and strength policy.
"""

import re
from functools import lru_cache

import bcrypt

from libs.result import Error, Result, Return

# 8+ chars from [A-Za-z0-9@$!%*?&] with one lower, one upper, one digit, one symbol
PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$"
)
WEAK_PASSWORD_MESSAGE = (
    "Password must be at least 8 characters with uppercase, lowercase, "
    "number, and special character"
)


def validate_password_strength(password: str) -> Result[None]:
    if not PASSWORD_PATTERN.match(password):
        return Return.err(Error("WEAK_PASSWORD", WEAK_PASSWORD_MESSAGE))
    return Return.ok(None)


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash, or the password is over 72 bytes
        return False


@lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> str:
    return bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds)).decode("utf-8")


def burn_password_check(password: str, rounds: int = 12) -> None:
    """Spend the same bcrypt work as a real check when no user was found."""
    verify_password(password, _dummy_hash(rounds))
