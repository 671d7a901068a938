"""File listing, lookup and deletion."""

from __future__ import annotations

from typing import Optional

from ..models.base import Empty
from ..models.files import File, FileList
from .base import Request, UriBuilder


def file_resource(name: str) -> str:
    return name if name.startswith("files/") else f"files/{name}"


class ListFiles(Request):
    method = "GET"
    response_model = FileList

    def __init__(self, page_size: Optional[int] = None, page_token: Optional[str] = None) -> None:
        self._page_size = page_size
        self._page_token = page_token

    def page_size(self, size: int) -> "ListFiles":
        self._page_size = size
        return self

    def page_token(self, token: str) -> "ListFiles":
        self._page_token = token
        return self

    def format_uri(self, builder: UriBuilder) -> None:
        builder.write_segment("files")
        builder.write_optional_query_param("page_size", self._page_size)
        builder.write_optional_query_param("page_token", self._page_token)


class GetFile(Request):
    method = "GET"
    response_model = File

    def __init__(self, name: str) -> None:
        self.name = file_resource(name)

    def format_uri(self, builder: UriBuilder) -> None:
        builder.write_segment(self.name)


class DeleteFile(Request):
    method = "DELETE"
    response_model = Empty

    def __init__(self, name: str) -> None:
        self.name = file_resource(name)

    def format_uri(self, builder: UriBuilder) -> None:
        builder.write_segment(self.name)
