"""Async client for the DropInBlog rendered-content API.

Every public ``fetch_*`` method builds a URL under
``{base}/blog/{blog_id}/rendered/`` and runs it through one pipeline:

  1. Return the cached payload if the URL was fetched within the TTL.
  2. Reject empty credentials with ``ConfigurationError``.
  3. GET the URL with a bearer token and parse the JSON body.
  4. Validate, cache and return ``data`` on 2xx, raise ``ApiError`` otherwise.

Callers always receive a deep copy, so mutating a returned payload never
changes what later cache hits see.

The cache key is the literal URL, query string included, so each page or
slug gets its own entry. There is no retry and no request deduplication:
two concurrent calls for an uncached URL both reach the network.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

import httpx
import structlog

from dibapi.cache import ResponseCache
from dibapi.config import DEFAULT_BASE_URL, DEFAULT_CACHE_TTL_MS, ApiSettings, Settings
from dibapi.errors import ApiError, ConfigurationError
from dibapi.models.content import ContentPayload

if TYPE_CHECKING:
    from types import TracebackType

log = structlog.get_logger()

_FALLBACK_ERROR_MESSAGE = "API request failed"


def build_http_client(settings: ApiSettings | None = None) -> httpx.AsyncClient:
    """Create the shared httpx client used when the caller does not supply one."""
    settings = settings or ApiSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
        follow_redirects=True,
    )


def rendered_url(
    base_url: str,
    blog_id: str,
    *segments: str,
    pagination: str | None = None,
    fields: str | None = None,
) -> str:
    """Build ``{base}/blog/{blog_id}/rendered/{segments...}?{query}``.

    Segments and ``pagination`` are inserted verbatim. ``page`` always
    precedes ``fields`` in the query string.
    """
    url = f"{base_url.rstrip('/')}/blog/{blog_id}/rendered/" + "/".join(segments)
    query: list[str] = []
    if pagination:
        query.append(f"page={pagination}")
    if fields is not None:
        query.append(f"fields={fields}")
    if query:
        url += "?" + "&".join(query)
    return url


def _data_field(body: Any) -> Any:
    return body.get("data") if isinstance(body, dict) else None


def _error_message(body: Any) -> str:
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return _FALLBACK_ERROR_MESSAGE


class DibApi:
    """DropInBlog API client with an in-memory TTL cache.

    Args:
        token: Bearer token sent with every request.
        blog_id: Blog identifier scoping every URL.
        cache_ttl: Cache lifetime in milliseconds (default five minutes).
        base_url: API root, without the ``/blog/...`` suffix.
        http_client: Optional caller-owned ``httpx.AsyncClient``. When
            omitted, the client creates one and closes it in ``aclose``.
        http_settings: Timeout settings for the client created when
            ``http_client`` is omitted.

    Credentials are not validated here; an empty token or blog id raises
    ``ConfigurationError`` on the first request that misses the cache.
    """

    # Response fields requested from list and post endpoints
    FIELDS: tuple[str, ...] = ("head_data", "body_html")

    def __init__(
        self,
        token: str,
        blog_id: str,
        cache_ttl: int = DEFAULT_CACHE_TTL_MS,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
        http_settings: ApiSettings | None = None,
    ) -> None:
        self._token = token
        self._blog_id = blog_id
        self._base_url = base_url
        self._cache_ttl = cache_ttl
        self._cache = ResponseCache(cache_ttl)
        self._http = http_client if http_client is not None else build_http_client(http_settings)
        self._owns_http = http_client is None

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> DibApi:
        """Build a client from loaded ``Settings`` (env, YAML, defaults)."""
        settings = settings or Settings()
        return cls(
            settings.api.token,
            settings.api.blog_id,
            settings.cache.ttl_ms,
            base_url=settings.api.base_url,
            http_client=http_client,
            http_settings=settings.api,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def token(self) -> str:
        return self._token

    @property
    def blog_id(self) -> str:
        return self._blog_id

    @property
    def cache_ttl(self) -> int:
        """Cache lifetime in milliseconds."""
        return self._cache_ttl

    def get_token(self) -> str:
        return self._token

    def get_blog_id(self) -> str:
        return self._blog_id

    @property
    def fields(self) -> str:
        """The URL-encoded ``fields`` selector sent to list and post endpoints."""
        return "%2C".join(self.FIELDS)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> DibApi:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Fetch pipeline
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self._token}",
        }

    def _url(self, *segments: str, pagination: str | None = None, with_fields: bool = True) -> str:
        return rendered_url(
            self._base_url,
            self._blog_id,
            *segments,
            pagination=pagination,
            fields=self.fields if with_fields else None,
        )

    async def _fetch_and_process(self, url: str, return_full_response: bool = False) -> Any:
        """Fetch ``url`` through the cache.

        Returns the body's ``data`` field as a ``ContentPayload``, or the
        whole parsed body when ``return_full_response`` is set. A ``data``
        field that does not validate raises before anything is cached.

        Raises ``ConfigurationError`` for empty credentials and ``ApiError``
        for non-2xx responses; httpx transport errors and JSON decode errors
        propagate unchanged.
        """
        cached = self._cache.get(url)
        if cached is not None:
            log.debug("cache_hit", url=url)
            return copy.deepcopy(cached.data)
        log.debug("cache_miss", url=url)

        if not self._token or not self._blog_id:
            raise ConfigurationError()

        log.debug("api_request", url=url)
        response = await self._http.get(url, headers=self._headers())
        # The API sends a JSON body for errors too
        body = response.json()

        if response.is_success:
            if return_full_response:
                result = body
            else:
                result = ContentPayload.model_validate(_data_field(body) or {})
            self._cache.set(url, result)
            return copy.deepcopy(result)

        message = _error_message(body)
        log.warning(
            "api_request_failed",
            url=url,
            status_code=response.status_code,
            message=message,
        )
        raise ApiError(message, response.status_code)

    async def _fetch_content(self, resource: str, url: str) -> ContentPayload:
        try:
            return await self._fetch_and_process(url)
        except Exception as exc:
            log.error("fetch_failed", resource=resource, error=str(exc))
            raise

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def fetch_main_list(self, pagination: str | None = None) -> ContentPayload:
        """Fetch the main post list, optionally a specific page."""
        return await self._fetch_content("main list", self._url("list", pagination=pagination))

    async def fetch_post(self, slug: str) -> ContentPayload:
        """Fetch a single post by slug."""
        return await self._fetch_content("post", self._url("post", slug))

    async def fetch_categories(self, slug: str, pagination: str | None = None) -> ContentPayload:
        """Fetch the post list for a category."""
        return await self._fetch_content(
            "categories", self._url("list", "category", slug, pagination=pagination)
        )

    async def fetch_author(self, slug: str, pagination: str | None = None) -> ContentPayload:
        """Fetch the post list for an author."""
        return await self._fetch_content(
            "author", self._url("list", "author", slug, pagination=pagination)
        )

    async def fetch_sitemap(self) -> ContentPayload:
        return await self._fetch_content("sitemap", self._url("sitemap", with_fields=False))

    async def fetch_blog_feed(self) -> ContentPayload:
        return await self._fetch_content("blog feed", self._url("feed", with_fields=False))

    async def fetch_category_feed(self, slug: str) -> ContentPayload:
        return await self._fetch_content(
            "category feed", self._url("feed", "category", slug, with_fields=False)
        )

    async def fetch_author_feed(self, slug: str) -> ContentPayload:
        return await self._fetch_content(
            "author feed", self._url("feed", "author", slug, with_fields=False)
        )
