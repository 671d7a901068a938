"""Uploaded file metadata."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import WireModel


class File(WireModel):
    name: str
    display_name: Optional[str] = None
    mime_type: Optional[str] = None
    size_bytes: Optional[int] = None
    create_time: Optional[str] = None
    update_time: Optional[str] = None
    expiration_time: Optional[str] = None
    sha256_hash: Optional[str] = None
    uri: Optional[str] = None
    state: Optional[str] = None


class FileList(WireModel):
    files: List[File] = Field(default_factory=list)
    next_page_token: Optional[str] = None


class UploadedFile(WireModel):
    """Reply to the finalize step of a resumable upload."""

    file: Optional[File] = None
