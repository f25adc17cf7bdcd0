import pytest
from httpx import AsyncClient

from tests.utils.api_client import API


async def create_blog(client: AsyncClient, headers, payload: dict) -> dict:
    response = await client.post(f"{API}/blogs", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["blog"]


@pytest.mark.asyncio
async def test_editor_creates_blog(client: AsyncClient, editor_headers, test_data):
    payload = test_data.get_copy("blog")

    blog = await create_blog(client, editor_headers, payload)

    assert blog["slug"] == "getting-started-with-python"
    assert blog["meta_title"] == payload["title"]
    assert blog["meta_description"] == payload["excerpt"]
    assert blog["views"] == 0
    assert blog["likes"] == 0
    assert blog["author_id"] is not None


@pytest.mark.asyncio
async def test_duplicate_title_conflicts(client: AsyncClient, editor_headers, test_data):
    payload = test_data.get_copy("blog")
    await create_blog(client, editor_headers, payload)

    response = await client.post(f"{API}/blogs", json=payload, headers=editor_headers)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "BLOG_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_regular_user_cannot_write_blogs(client: AsyncClient, user_headers, test_data):
    response = await client.post(f"{API}/blogs", json=test_data.get_copy("blog"), headers=user_headers)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_only_admin_deletes_blogs(client: AsyncClient, admin_headers, editor_headers, test_data):
    blog = await create_blog(client, editor_headers, test_data.get_copy("blog"))

    response = await client.delete(f"{API}/blogs/{blog['id']}", headers=editor_headers)
    assert response.status_code == 403

    response = await client.delete(f"{API}/blogs/{blog['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Blog deleted successfully"}

    response = await client.get(f"{API}/blogs/{blog['id']}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "BLOG_NOT_FOUND"


@pytest.mark.asyncio
async def test_slug_reads_count_views(client: AsyncClient, editor_headers, test_data):
    blog = await create_blog(client, editor_headers, test_data.get_copy("blog"))

    first = await client.get(f"{API}/blogs/slug/{blog['slug']}")
    second = await client.get(f"{API}/blogs/slug/{blog['slug']}")

    assert first.json()["blog"]["views"] == 1
    assert second.json()["blog"]["views"] == 2

    by_id = await client.get(f"{API}/blogs/{blog['id']}")
    assert by_id.json()["blog"]["views"] == 2

    missing = await client.get(f"{API}/blogs/slug/no-such-post")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_like_blog(client: AsyncClient, editor_headers, test_data):
    blog = await create_blog(client, editor_headers, test_data.get_copy("blog"))

    await client.post(f"{API}/blogs/{blog['id']}/like")
    response = await client.post(f"{API}/blogs/{blog['id']}/like")

    assert response.status_code == 200
    assert response.json() == {"message": "Blog liked successfully", "likes": 2}


@pytest.mark.asyncio
async def test_update_blog_regenerates_slug(client: AsyncClient, editor_headers, test_data):
    blog = await create_blog(client, editor_headers, test_data.get_copy("blog"))

    response = await client.put(
        f"{API}/blogs/{blog['id']}",
        json={"title": "Python for Data Analysis!", "featured": True},
        headers=editor_headers,
    )

    assert response.status_code == 200
    updated = response.json()["blog"]
    assert updated["slug"] == "python-for-data-analysis"
    assert updated["featured"] is True
    assert updated["content"] == blog["content"]


@pytest.mark.asyncio
async def test_list_blogs_filters_and_paginates(client: AsyncClient, editor_headers, test_data):
    base = test_data.get_copy("blog")
    for i in range(3):
        await create_blog(client, editor_headers, dict(base, title=f"Python tips {i}"))
    await create_blog(
        client, editor_headers, dict(base, title="Design systems", category="design", featured=True)
    )
    await create_blog(client, editor_headers, dict(base, title="Draft post", published=False))

    response = await client.get(f"{API}/blogs", params={"limit": 2})
    assert response.status_code == 200
    data = response.json()
    assert len(data["blogs"]) == 2
    assert data["pagination"] == {
        "current_page": 1,
        "total_pages": 2,
        "total_blogs": 4,
        "has_next_page": True,
        "has_prev_page": False,
    }

    page_two = (await client.get(f"{API}/blogs", params={"limit": 2, "page": 2})).json()
    assert page_two["pagination"]["has_next_page"] is False
    assert page_two["pagination"]["has_prev_page"] is True

    design = (await client.get(f"{API}/blogs", params={"category": "design"})).json()
    assert [b["title"] for b in design["blogs"]] == ["Design systems"]

    search = (await client.get(f"{API}/blogs", params={"search": "TIPS", "sort": "title"})).json()
    assert [b["title"] for b in search["blogs"]] == ["Python tips 0", "Python tips 1", "Python tips 2"]

    featured = (await client.get(f"{API}/blogs/featured")).json()
    assert [b["title"] for b in featured["blogs"]] == ["Design systems"]

    categories = (await client.get(f"{API}/blogs/categories")).json()["categories"]
    assert categories == [{"name": "programming", "count": 3}, {"name": "design", "count": 1}]


@pytest.mark.asyncio
async def test_list_blogs_rejects_bad_query(client: AsyncClient):
    response = await client.get(f"{API}/blogs", params={"limit": 101})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    response = await client.get(f"{API}/blogs", params={"sort": "-title"})
    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/blogs", "/blogs/featured"])
async def test_listing_returns_stored_blog(client: AsyncClient, editor_headers, test_data, path):
    blog = await create_blog(client, editor_headers, dict(test_data.get_copy("blog"), featured=True))

    response = await client.get(f"{API}{path}")

    assert response.status_code == 200
    blogs = response.json()["blogs"]
    assert [b["id"] for b in blogs] == [blog["id"]]
    assert blogs[0]["title"] == blog["title"]
