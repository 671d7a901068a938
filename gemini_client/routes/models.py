"""Model catalogue operations."""

from __future__ import annotations

from typing import Optional

from ..models.responses import Model, Models
from .base import Request, UriBuilder


def model_resource(name: str) -> str:
    """Accept both ``gemini-1.5-flash`` and ``models/gemini-1.5-flash``."""
    return name[len("models/"):] if name.startswith("models/") else name


class ListModels(Request):
    method = "GET"
    response_model = Models

    def __init__(self, page_size: Optional[int] = None, page_token: Optional[str] = None) -> None:
        self._page_size = page_size
        self._page_token = page_token

    def page_size(self, size: int) -> "ListModels":
        self._page_size = size
        return self

    def page_token(self, token: str) -> "ListModels":
        self._page_token = token
        return self

    def format_uri(self, builder: UriBuilder) -> None:
        builder.write_segment("models")
        builder.write_optional_query_param("page_size", self._page_size)
        builder.write_optional_query_param("page_token", self._page_token)


class GetModel(Request):
    method = "GET"
    response_model = Model

    def __init__(self, name: str) -> None:
        self.name = model_resource(name)

    def format_uri(self, builder: UriBuilder) -> None:
        builder.write_segment("models", self.name)
