import pytest

from src.app.services.passwords import (
    burn_password_check,
    hash_password,
    validate_password_strength,
    verify_password,
)


@pytest.mark.parametrize(
    "password",
    ["Str0ng!Pass", "Aa1@aaaa", "ZZ9$zzzzzzzz"],
)
def test_strong_passwords(password):
    assert validate_password_strength(password).is_ok()


@pytest.mark.parametrize(
    "password",
    [
        "Sh0rt!a",        # 7 characters
        "str0ng!pass",    # no upper-case
        "STR0NG!PASS",    # no lower-case
        "Strong!Pass",    # no digit
        "Str0ngPass",     # no symbol
        "Str0ng!Pass#",   # '#' is outside the allowed set
        "Str0ng! Pass",   # whitespace
    ],
)
def test_weak_passwords(password):
    result = validate_password_strength(password)

    assert result.is_err()
    assert result.error.code == "WEAK_PASSWORD"


def test_hash_and_verify():
    password_hash = hash_password("Str0ng!Pass", rounds=4)

    assert password_hash.startswith("$2")
    assert verify_password("Str0ng!Pass", password_hash)
    assert not verify_password("Str0ng!Pasz", password_hash)


def test_verify_against_non_bcrypt_value():
    assert verify_password("Str0ng!Pass", "plain-text") is False


def test_burn_password_check_returns_nothing():
    assert burn_password_check("whatever", rounds=4) is None


def test_long_multibyte_password_is_rejected_not_raised():
    password_hash = hash_password("Str0ng!Pass", rounds=4)

    assert verify_password("é" * 40, password_hash) is False
    assert burn_password_check("é" * 40, rounds=4) is None
