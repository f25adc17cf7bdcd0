import pytest
from httpx import AsyncClient

from tests.utils.api_client import API, register


@pytest.mark.asyncio
async def test_update_profile_changes_only_supplied_fields(client: AsyncClient, user_headers, test_data):
    alice = test_data.get_copy("alice")

    response = await client.put(
        f"{API}/auth/profile", json={"name": "Alice N."}, headers=user_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Profile updated successfully"
    assert data["user"]["name"] == "Alice N."
    assert data["user"]["username"] == alice["username"]
    assert data["user"]["email"] == alice["email"]


@pytest.mark.asyncio
async def test_update_profile_duplicate_username(client: AsyncClient, user_headers, test_data):
    await register(client, test_data.get_copy("bob"))

    response = await client.put(
        f"{API}/auth/profile", json={"username": "bob"}, headers=user_headers
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "USER_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_change_password(client: AsyncClient, user_headers, test_data, outbox):
    alice = test_data.get_copy("alice")

    response = await client.post(
        f"{API}/auth/change-password",
        json={
            "current_password": alice["password"],
            "new_password": "N3w!Passw0rd",
            "confirm_password": "N3w!Passw0rd",
        },
        headers=user_headers,
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Password changed successfully"}
    assert outbox.to(alice["email"])[-1]["subject"] == "Your Password Has Been Changed"

    old = await client.post(
        f"{API}/auth/login", json={"email": alice["email"], "password": alice["password"]}
    )
    assert old.status_code == 401
    new = await client.post(
        f"{API}/auth/login", json={"email": alice["email"], "password": "N3w!Passw0rd"}
    )
    assert new.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "current, new, confirm, status_code, code",
    [
        ("Str0ng!Pass", "N3w!Passw0rd", "N3w!Passw0rd-x", 400, "PASSWORD_MISMATCH"),
        ("Wr0ng!Pass", "N3w!Passw0rd", "N3w!Passw0rd", 401, "INVALID_CURRENT_PASSWORD"),
        ("Str0ng!Pass", "Str0ng!Pass", "Str0ng!Pass", 400, "SAME_PASSWORD"),
        ("Str0ng!Pass", "weakpass", "weakpass", 400, "WEAK_PASSWORD"),
    ],
)
async def test_change_password_errors(
    client: AsyncClient, user_headers, current, new, confirm, status_code, code
):
    response = await client.post(
        f"{API}/auth/change-password",
        json={"current_password": current, "new_password": new, "confirm_password": confirm},
        headers=user_headers,
    )

    assert response.status_code == status_code
    assert response.json()["error"]["code"] == code


@pytest.mark.asyncio
async def test_change_password_requires_auth(client: AsyncClient):
    response = await client.post(
        f"{API}/auth/change-password",
        json={
            "current_password": "Str0ng!Pass",
            "new_password": "N3w!Passw0rd",
            "confirm_password": "N3w!Passw0rd",
        },
    )

    assert response.status_code == 401
