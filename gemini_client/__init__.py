"""Async client for Google's Generative Language (Gemini) REST API."""

from .chat import Chat, JsonChat
from .client import Client
from .errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    GeminiError,
    HTTPTransportError,
    SchemaValidationError,
    UploadError,
)
from .files import GeminiFile, upload_file

__version__ = "0.4.0"


def client() -> Client:
    return Client.instance()


def chat(model: str) -> Chat:
    return client().chat(model)


__all__ = [
    "ApiError",
    "Chat",
    "Client",
    "ConfigurationError",
    "DecodeError",
    "GeminiError",
    "GeminiFile",
    "HTTPTransportError",
    "JsonChat",
    "SchemaValidationError",
    "UploadError",
    "chat",
    "client",
    "upload_file",
]
