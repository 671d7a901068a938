"""Request base class, URL builder and the awaitable Route wrapper"""
from __future__ import annotations

import functools
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Generator, List, Optional, Tuple, Type
from urllib.parse import quote, urlencode

import httpx
from pydantic import ValidationError

from ..core.logging import get_logger
from ..errors import ApiError, DecodeError, HTTPTransportError
from ..models.base import WireModel
from ..models.errors import ApiErrorEnvelope

if TYPE_CHECKING:
    from ..client import Client


logger = get_logger(__name__)


class UriBuilder:
    """Collects path segments and query parameters for one request URL."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")
        self._segments: List[str] = []
        self._query: List[Tuple[str, str]] = []

    def write_segment(self, *segments: str) -> "UriBuilder":
        for segment in segments:
            self._segments.extend(part for part in segment.split("/") if part)
        return self

    def write_query_param(self, key: str, value: Any) -> "UriBuilder":
        self._query.append((key, str(value)))
        return self

    def write_optional_query_param(self, key: str, value: Optional[Any]) -> "UriBuilder":
        if value is not None:
            self.write_query_param(key, value)
        return self

    @property
    def path(self) -> str:
        return "/".join(self._segments)

    @property
    def query(self) -> str:
        if not self._query:
            return ""
        return "?" + urlencode(self._query, quote_via=quote, safe="")

    def render(self, include_query: bool = True) -> str:
        url = f"{self.base_url}/{self.path}"
        if include_query:
            url += self.query
        return url

    def __str__(self) -> str:
        return self.render()


class Request(ABC):
    """One API operation: HTTP method, URI and optional JSON body."""

    method: ClassVar[str] = "GET"
    response_model: ClassVar[Type[WireModel]]

    @abstractmethod
    def format_uri(self, builder: UriBuilder) -> None:
        """Write path segments and query parameters after the API version."""
        raise NotImplementedError()

    def body(self) -> Optional[Dict[str, Any]]:
        return None


def decode_response(response: httpx.Response, model: Type[WireModel]) -> WireModel:
    """Map a reply onto ``model`` or raise the matching client error."""
    if response.content:
        try:
            payload = response.json()
        except ValueError as exc:
            if response.is_error:
                raise HTTPTransportError(
                    f"HTTP {response.status_code}: {response.text[:200]}",
                    status_code=response.status_code,
                ) from exc
            raise DecodeError(f"Response body is not valid JSON: {exc}") from exc
    else:
        payload = {}

    if isinstance(payload, dict) and "error" in payload:
        try:
            envelope = ApiErrorEnvelope.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(
                "Malformed error envelope",
                details={"errors": exc.errors(include_url=False)},
            ) from exc
        raise ApiError(envelope.error)

    if response.is_error:
        raise HTTPTransportError(
            f"HTTP {response.status_code} without an error envelope",
            status_code=response.status_code,
        )

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"Response does not match {model.__name__}",
            details={"errors": exc.errors(include_url=False)},
        ) from exc


class Route:
    """A request bound to a client; awaiting it performs the HTTP call.

    Attribute access falls through to the wrapped request, so builder
    methods can be called on the route directly. Builder methods that
    return the request hand back the route instead, keeping chains
    awaitable::

        reply = await client.generate_content("gemini-1.5-flash").message("Hi")
    """

    def __init__(self, client: "Client", request: Request) -> None:
        self._client = client
        self._request = request

    @property
    def request(self) -> Request:
        return self._request

    def _builder(self) -> UriBuilder:
        builder = UriBuilder(self._client.base_url)
        builder.write_segment(self._client.api_version)
        self._request.format_uri(builder)
        return builder

    @property
    def path(self) -> str:
        return self._builder().path

    @property
    def url(self) -> str:
        builder = self._builder()
        builder.write_query_param("key", self._client.api_key)
        return builder.render()

    async def send(self) -> Any:
        request = self._request
        builder = self._builder()
        log_url = builder.render()
        url = builder.write_query_param("key", self._client.api_key).render()
        body = request.body()

        logger.debug("gemini_request_started", method=request.method, url=log_url)
        start_time = time.time()

        try:
            response = await self._client.http_client.request(request.method, url, json=body)
        except httpx.HTTPError as exc:
            logger.error(
                "gemini_request_failed",
                method=request.method,
                url=log_url,
                error=type(exc).__name__,
            )
            raise HTTPTransportError(f"{type(exc).__name__}: {exc}") from exc

        latency_ms = (time.time() - start_time) * 1000
        logger.info(
            "gemini_request_completed",
            method=request.method,
            url=log_url,
            status_code=response.status_code,
            latency_ms=round(latency_ms, 2),
        )

        try:
            return decode_response(response, request.response_model)
        except ApiError as exc:
            logger.warning(
                "gemini_api_error",
                url=log_url,
                code=exc.detail.code,
                status=exc.status_name,
            )
            raise

    def __await__(self) -> Generator[Any, None, Any]:
        return self.send().__await__()

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        attr = getattr(self._request, name)
        if not callable(attr):
            return attr

        @functools.wraps(attr)
        def proxy(*args: Any, **kwargs: Any) -> Any:
            result = attr(*args, **kwargs)
            return self if result is self._request else result

        return proxy

    def __repr__(self) -> str:
        return f"<Route {self._request.method} {self._builder().render()}>"
