"""Async client for the DropInBlog rendered-content API.

    >>> async with DibApi(token, blog_id) as api:
    ...     post = await api.fetch_post("hello-world")
    ...     print(post.body_html)
"""

from __future__ import annotations

from dibapi.client import DibApi, build_http_client, rendered_url
from dibapi.config import Settings
from dibapi.errors import ApiError, ConfigurationError, DibApiError, ErrorCode
from dibapi.logs import configure_logging
from dibapi.models import CacheEntry, ContentPayload, HeadData, HeadItems

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # client
    "DibApi",
    "build_http_client",
    "rendered_url",
    # config
    "Settings",
    "configure_logging",
    # errors
    "DibApiError",
    "ErrorCode",
    "ApiError",
    "ConfigurationError",
    # models
    "CacheEntry",
    "ContentPayload",
    "HeadData",
    "HeadItems",
]
