"""Integration test fixtures.

Provides a client built from ``Settings`` and a respx router that serves a
small fake blog by path, answering like the real API does (JSON envelope on
success, JSON ``message`` on failure).
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest
import respx

from dibapi.client import DibApi
from dibapi.config import Settings

TOKEN = "integration-token"
BLOG_ID = "demo-blog"


@pytest.fixture()
def blog(post_data: dict, list_data: dict, sitemap_data: dict, feed_data: dict) -> dict:
    """Rendered resources keyed by the path below ``/rendered/``."""
    return {
        "list": list_data,
        "post/hello-world": post_data,
        "list/category/news": {**list_data, "content_type": "category"},
        "list/author/jane": {**list_data, "content_type": "author"},
        "sitemap": sitemap_data,
        "feed": feed_data,
        "feed/category/news": feed_data,
        "feed/author/jane": feed_data,
    }


@pytest.fixture()
def fake_api(blog: dict, make_envelope: Any):
    prefix = f"/v2/blog/{BLOG_ID}/rendered/"

    def serve(request: httpx.Request) -> httpx.Response:
        if request.headers.get("authorization") != f"Bearer {TOKEN}":
            body = {"success": False, "code": 401, "message": "Unauthorized"}
            return httpx.Response(401, json=body)
        resource = request.url.path.removeprefix(prefix)
        if resource not in blog:
            body = {"success": False, "code": 404, "message": "Not found"}
            return httpx.Response(404, json=body)
        return httpx.Response(200, json=make_envelope(blog[resource]))

    with respx.mock(assert_all_called=False) as router:
        router.route(host="api.dropinblog.com").mock(side_effect=serve)
        yield router


@pytest.fixture()
async def dib_api(fake_api: respx.MockRouter):
    settings = Settings(api={"token": TOKEN, "blog_id": BLOG_ID}, cache={"ttl_ms": 60_000})
    async with DibApi.from_settings(settings) as api:
        yield api
