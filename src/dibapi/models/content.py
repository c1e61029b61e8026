from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HeadData(BaseModel):
    """Structured ``<head>`` metadata for a rendered page."""

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    rss_url: str | None = None
    seo_url_next: str | None = None
    css: str | None = None


class HeadItems(BaseModel):
    """Individual ``<head>`` items, keyed the way the API names them."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str | None = None
    og_title: str | None = Field(default=None, alias="og:title")
    twitter_title: str | None = Field(default=None, alias="twitter:title")
    rss_url: str | None = None
    seo_url_next: str | None = None
    js: str | None = None
    css: str | None = None


class ContentPayload(BaseModel):
    """The ``data`` object of a rendered-content response.

    Which fields are populated depends on the endpoint: list and post
    endpoints fill the HTML and head fields, ``sitemap`` fills ``sitemap``,
    and the feed endpoints fill ``feed``.
    """

    model_config = ConfigDict(extra="allow")

    body_html: str | None = None
    head_html: str | None = None
    head_data: HeadData | None = None
    head_items: HeadItems | None = None
    content_type: str | None = None
    slug: str | None = None
    sitemap: str | None = None
    feed: str | None = None
