from datetime import date, timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.utils.api_client import API


async def create_training(client: AsyncClient, headers, test_data) -> dict:
    start = date.today() + timedelta(days=30)
    payload = test_data.get_copy(
        "first_aid_training",
        sessions=[
            {"start_date": start.isoformat(), "end_date": (start + timedelta(days=2)).isoformat()}
        ],
    )
    response = await client.post(f"{API}/trainings", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["training"]


async def create_testimonial(client: AsyncClient, headers, payload: dict) -> dict:
    response = await client.post(f"{API}/testimonials", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["testimonial"]


@pytest.mark.asyncio
async def test_editor_creates_testimonial(client: AsyncClient, editor_headers, test_data):
    training = await create_training(client, editor_headers, test_data)

    testimonial = await create_testimonial(
        client, editor_headers, test_data.get_copy("testimonial", training_id=training["id"])
    )

    assert testimonial["image"] == "GW"
    assert testimonial["company"] == "Acme Construction"
    assert testimonial["avatar_color"] == "#3b82f6"
    assert testimonial["training_name"] == "First Aid at Work"
    assert testimonial["featured"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides, code",
    [
        ({"rating": 6}, "VALIDATION_ERROR"),
        ({"avatar_color": "blue"}, "VALIDATION_ERROR"),
        ({"training_id": str(uuid4())}, "INVALID_TRAINING"),
    ],
)
async def test_create_rejects_bad_input(
    client: AsyncClient, editor_headers, test_data, overrides, code
):
    response = await client.post(
        f"{API}/testimonials",
        json=test_data.get_copy("testimonial", **overrides),
        headers=editor_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == code


@pytest.mark.asyncio
async def test_regular_user_cannot_write_testimonials(client: AsyncClient, user_headers, test_data):
    response = await client.post(
        f"{API}/testimonials", json=test_data.get_copy("testimonial"), headers=user_headers
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_listing_shows_approved_only(client: AsyncClient, editor_headers, test_data):
    shown = await create_testimonial(client, editor_headers, test_data.get_copy("testimonial"))
    hidden = await create_testimonial(
        client, editor_headers, test_data.get_copy("testimonial", name="Peter Mwangi", rating=3)
    )
    response = await client.put(
        f"{API}/testimonials/{hidden['id']}", json={"approved": False}, headers=editor_headers
    )
    assert response.status_code == 200

    listing = (await client.get(f"{API}/testimonials")).json()
    assert [t["id"] for t in listing["testimonials"]] == [shown["id"]]
    assert listing["pagination"]["total_testimonials"] == 1

    by_rating = (await client.get(f"{API}/testimonials", params={"min_rating": 4})).json()
    assert len(by_rating["testimonials"]) == 1


@pytest.mark.asyncio
async def test_toggle_featured_is_admin_only(
    client: AsyncClient, admin_headers, editor_headers, test_data
):
    testimonial = await create_testimonial(
        client, editor_headers, test_data.get_copy("testimonial")
    )
    url = f"{API}/testimonials/{testimonial['id']}/featured"

    response = await client.patch(url, headers=editor_headers)
    assert response.status_code == 403

    response = await client.patch(url, headers=admin_headers)
    assert response.json()["message"] == "Testimonial featured successfully"

    featured = (await client.get(f"{API}/testimonials/featured")).json()
    assert [t["id"] for t in featured["testimonials"]] == [testimonial["id"]]

    response = await client.patch(url, headers=admin_headers)
    assert response.json()["message"] == "Testimonial unfeatured successfully"
    assert (await client.get(f"{API}/testimonials/featured")).json()["testimonials"] == []


@pytest.mark.asyncio
async def test_training_testimonials(client: AsyncClient, editor_headers, test_data):
    training = await create_training(client, editor_headers, test_data)
    for rating in (3, 5, 4):
        await create_testimonial(
            client,
            editor_headers,
            test_data.get_copy("testimonial", rating=rating, training_id=training["id"]),
        )
    await create_testimonial(client, editor_headers, test_data.get_copy("testimonial"))

    response = await client.get(
        f"{API}/testimonials/training/{training['id']}", params={"limit": 2}
    )

    body = response.json()
    assert body["training"] == {
        "id": training["id"],
        "title": "First Aid at Work",
        "code": "FAA-001",
    }
    assert [t["rating"] for t in body["testimonials"]] == [5, 4]
    assert body["count"] == 2

    missing = await client.get(f"{API}/testimonials/training/{uuid4()}")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "TRAINING_NOT_FOUND"


@pytest.mark.asyncio
async def test_statistics(client: AsyncClient, editor_headers, test_data):
    training = await create_training(client, editor_headers, test_data)
    for rating in (5, 5, 4):
        await create_testimonial(
            client,
            editor_headers,
            test_data.get_copy("testimonial", rating=rating, training_id=training["id"]),
        )

    stats = (await client.get(f"{API}/testimonials/statistics")).json()["statistics"]

    assert stats["total_testimonials"] == 3
    assert stats["featured_count"] == 0
    assert stats["average_rating"] == 4.7
    assert stats["rating_distribution"] == [
        {"rating": 5, "count": 2, "percentage": 67},
        {"rating": 4, "count": 1, "percentage": 33},
    ]
    assert len(stats["recent_testimonials"]) == 3
    assert stats["top_trainings"] == [
        {
            "training_id": training["id"],
            "training_name": "First Aid at Work",
            "training_code": "FAA-001",
            "testimonial_count": 3,
        }
    ]


@pytest.mark.asyncio
async def test_admin_deletes_testimonial(
    client: AsyncClient, admin_headers, editor_headers, test_data
):
    testimonial = await create_testimonial(
        client, editor_headers, test_data.get_copy("testimonial")
    )

    response = await client.delete(
        f"{API}/testimonials/{testimonial['id']}", headers=editor_headers
    )
    assert response.status_code == 403

    response = await client.delete(f"{API}/testimonials/{testimonial['id']}", headers=admin_headers)
    assert response.json() == {"message": "Testimonial deleted successfully"}

    response = await client.get(f"{API}/testimonials/{testimonial['id']}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TESTIMONIAL_NOT_FOUND"
