"""Shared fixtures: sample API payloads and response envelopes."""

from __future__ import annotations

from typing import Any

import pytest


def _envelope(data: dict[str, Any] | None = None, /, **overrides: Any) -> dict[str, Any]:
    """Wrap ``data`` the way the API does."""
    body: dict[str, Any] = {
        "success": True,
        "code": 200,
        "locale": "en",
        "message": "",
        "data": data if data is not None else {},
    }
    body.update(overrides)
    return body


@pytest.fixture()
def make_envelope():
    """Factory wrapping a payload in the API response envelope."""
    return _envelope


@pytest.fixture()
def post_data() -> dict[str, Any]:
    return {
        "body_html": "<article><h1>Hello world</h1></article>",
        "head_html": "<title>Hello world</title>",
        "head_data": {
            "title": "Hello world",
            "rss_url": "https://example.com/blog/feed",
            "seo_url_next": "",
            "css": "https://cdn.example.com/blog.css",
        },
        "content_type": "post",
        "slug": "hello-world",
    }


@pytest.fixture()
def list_data() -> dict[str, Any]:
    return {
        "body_html": "<ul><li>Hello world</li><li>Second post</li></ul>",
        "head_html": "<title>Blog</title>",
        "head_data": {
            "title": "Blog",
            "rss_url": "https://example.com/blog/feed",
            "seo_url_next": "https://example.com/blog?page=2",
            "css": "",
        },
        "content_type": "list",
    }


@pytest.fixture()
def sitemap_data() -> dict[str, Any]:
    return {"sitemap": '<?xml version="1.0"?><urlset><url><loc>/blog</loc></url></urlset>'}


@pytest.fixture()
def feed_data() -> dict[str, Any]:
    return {"feed": '<?xml version="1.0"?><rss><channel><title>Blog</title></channel></rss>'}
