import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import User
from tests.utils.api_client import API, register


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, test_data):
    alice = test_data.get_copy("alice")
    await register(client, alice)

    response = await client.post(
        f"{API}/auth/login", json={"email": alice["email"], "password": "Wr0ng!Pass"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == {
        "code": "INVALID_CREDENTIALS",
        "message": "Invalid credentials",
    }


@pytest.mark.asyncio
async def test_login_unknown_email_matches_wrong_password(client: AsyncClient):
    """Unknown accounts get the exact same error as a wrong password"""
    response = await client.post(
        f"{API}/auth/login", json={"email": "nobody@example.com", "password": "Str0ng!Pass"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == {
        "code": "INVALID_CREDENTIALS",
        "message": "Invalid credentials",
    }


@pytest.mark.asyncio
async def test_login_email_is_case_insensitive(client: AsyncClient, test_data):
    alice = test_data.get_copy("alice")
    await register(client, alice)

    response = await client.post(
        f"{API}/auth/login",
        json={"email": alice["email"].upper(), "password": alice["password"]},
    )

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_login_deactivated_account(client: AsyncClient, db_session, test_data):
    alice = test_data.get_copy("alice")
    await register(client, alice)

    user = (await db_session.exec(select(User).where(User.email == alice["email"]))).one()
    user.is_active = False
    db_session.add(user)
    await db_session.commit()

    response = await client.post(
        f"{API}/auth/login", json={"email": alice["email"], "password": alice["password"]}
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "ACCOUNT_DEACTIVATED"


@pytest.mark.asyncio
@pytest.mark.parametrize("known_email", [True, False])
async def test_login_multibyte_password_over_72_bytes(
    client: AsyncClient, test_data, known_email
):
    """40 two-byte characters pass field validation but exceed bcrypt's input limit"""
    alice = test_data.get_copy("alice")
    await register(client, alice)
    email = alice["email"] if known_email else "nobody@example.com"

    response = await client.post(f"{API}/auth/login", json={"email": email, "password": "é" * 40})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"
