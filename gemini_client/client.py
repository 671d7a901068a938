"""Client handle: API key, shared HTTP client and route factories."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import httpx
from pydantic import SecretStr

from .chat import Chat
from .core.config import Settings, get_settings
from .core.logging import get_logger
from .errors import ConfigurationError
from .files import GeminiFile, upload_file
from .routes.base import Route
from .routes.files import DeleteFile, GetFile, ListFiles
from .routes.generate import GenerateContent
from .routes.models import GetModel, ListModels

logger = get_logger(__name__)


class Client:
    """Entry point for every API operation.

    Routes returned by the factory methods are awaitable::

        async with Client() as client:
            models = await client.models()
            reply = await client.generate_content("gemini-1.5-flash").message("Hello")
    """

    _instance: Optional["Client"] = None

    def __init__(
        self,
        api_key: Optional[Union[str, SecretStr]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()

        key = api_key if api_key is not None else self.settings.gemini_key
        if isinstance(key, str):
            key = SecretStr(key)
        if key is None or not key.get_secret_value():
            raise ConfigurationError(
                "API key must be set either via argument or GEMINI_API_KEY environment variable"
            )
        self._key: SecretStr = key

        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.request_timeout, connect=self.settings.connect_timeout),
            limits=httpx.Limits(
                max_keepalive_connections=self.settings.max_keepalive_connections,
                max_connections=self.settings.max_connections,
            ),
            headers={"User-Agent": f"{self.settings.app_name}/{self.settings.app_version}"},
        )

    @property
    def api_key(self) -> str:
        return self._key.get_secret_value()

    @property
    def base_url(self) -> str:
        return self.settings.gemini_base_url

    @property
    def api_version(self) -> str:
        return self.settings.gemini_api_version

    @classmethod
    def instance(cls) -> "Client":
        """Process-wide default client, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
            logger.debug("default_client_created")
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def chat(self, model: str) -> Chat:
        return Chat(self, model)

    def models(self, page_size: Optional[int] = None, page_token: Optional[str] = None) -> Route:
        return Route(self, ListModels(page_size, page_token))

    def model(self, name: str) -> Route:
        return Route(self, GetModel(name))

    def generate_content(self, model: str) -> Route:
        return Route(self, GenerateContent(model))

    def files(self, page_size: Optional[int] = None, page_token: Optional[str] = None) -> Route:
        return Route(self, ListFiles(page_size, page_token))

    def file(self, name: str) -> Route:
        return Route(self, GetFile(name))

    def delete_file(self, name: str) -> Route:
        return Route(self, DeleteFile(name))

    async def upload_file(
        self,
        path: Union[str, Path],
        mime_type: str,
        display_name: Optional[str] = None,
    ) -> GeminiFile:
        return await upload_file(self, path, mime_type, display_name)

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"Client(base_url={self.base_url!r}, api_version={self.api_version!r}, api_key=SecretStr('**********'))"
