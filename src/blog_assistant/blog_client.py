"""Blog API client for listing posts, creating posts, and reading site statistics."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Protocol, TypeVar, assert_never

import httpx
import structlog
from pydantic import ValidationError

from blog_assistant.models import AllBlogsResponse, NewBlogPostRequest, Statistics
from blog_assistant.outcomes import DecodeFault, Failure, Outcome, Success, TransportFault

log = structlog.get_logger()

T = TypeVar("T")

CONNECT_TIMEOUT_SECONDS = 10.0
BLOGS_API = "blogs"
STATS_API = "stats"


class BlogApiError(RuntimeError):
    """Base class for blog API faults that abort the calling step."""


class BlogApiTransportError(BlogApiError):
    """Raised when a request never produced an HTTP response."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class BlogApiDecodeError(BlogApiError):
    """Raised when a success response carries a body of the wrong shape."""

    def __init__(self, message: str, body: str) -> None:
        super().__init__(message)
        self.body = body


class BlogApiClientProtocol(Protocol):
    """Interface for blog API operations."""

    def fetch_all_posts(self) -> AllBlogsResponse | None: ...
    def create_post(self, request: NewBlogPostRequest) -> bool: ...
    def fetch_statistics(self) -> Statistics | None: ...


class BlogApiClient:
    """Synchronous client for the blog API served at a single base URL.

    Request URLs are ``base_url + "?api=<name>"`` with no normalization, so
    the base URL must already point at the API script (e.g. ``.../index.php``).
    """

    def __init__(self, base_url: str, *, transport: httpx.BaseTransport | None = None) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("base_url is required")
        self._base_url = base_url
        self._client = httpx.Client(
            follow_redirects=True,
            timeout=httpx.Timeout(None, connect=CONNECT_TIMEOUT_SECONDS),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> BlogApiClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def fetch_all_posts(self) -> AllBlogsResponse | None:
        """Fetch every post. Returns None when the server does not answer 200."""
        outcome = self.exchange(
            "GET", BLOGS_API, expected_status=200, decode=AllBlogsResponse.model_validate_json
        )
        result = self._unwrap("fetch_all_posts", outcome)
        if result is not None:
            log.info("blog_posts_fetched", count=len(result.posts))
        return result

    def create_post(self, request: NewBlogPostRequest) -> bool:
        """Submit a new post. Only 201 Created counts as success."""
        outcome = self.exchange(
            "POST",
            BLOGS_API,
            expected_status=201,
            decode=lambda _body: True,
            body=request.model_dump_json(),
        )
        created = self._unwrap("create_post", outcome) is True
        if created:
            log.info("blog_post_created", title=request.title, author=request.author)
        return created

    def fetch_statistics(self) -> Statistics | None:
        """Fetch site statistics. Returns None when the server does not answer 200."""
        outcome = self.exchange(
            "GET", STATS_API, expected_status=200, decode=Statistics.model_validate_json
        )
        return self._unwrap("fetch_statistics", outcome)

    def url_for(self, api: str) -> str:
        return f"{self._base_url}?api={api}"

    def exchange(
        self,
        method: str,
        api: str,
        *,
        expected_status: int,
        decode: Callable[[bytes], T],
        body: str | None = None,
    ) -> Outcome[T]:
        """Send one request and classify the result without raising.

        The body is decoded only when the status matches ``expected_status``.
        """
        url = self.url_for(api)
        headers = {"Accept": "application/json"}
        if body is not None:
            headers["Content-Type"] = "application/json"

        try:
            resp = self._client.request(method, url, headers=headers, content=body)
        except httpx.RequestError as exc:
            return TransportFault(cause=exc, url=url)

        if resp.status_code != expected_status:
            return Failure(status_code=resp.status_code, body=resp.text)

        try:
            return Success(decode(resp.content))
        except ValidationError as exc:
            return DecodeFault(cause=exc, body=resp.text)

    def _unwrap(self, operation: str, outcome: Outcome[T]) -> T | None:
        match outcome:
            case Success(value=value):
                return value
            case Failure(status_code=status_code, body=body):
                log.warning(
                    "blog_api_unexpected_status",
                    operation=operation,
                    status_code=status_code,
                    body=body,
                )
                return None
            case TransportFault(cause=cause, url=url):
                raise BlogApiTransportError(f"{operation} failed: {cause}", url=url) from cause
            case DecodeFault(cause=cause, body=body):
                raise BlogApiDecodeError(
                    f"{operation} received a malformed response: {cause.error_count()} error(s)",
                    body=body,
                ) from cause
            case _:
                assert_never(outcome)
