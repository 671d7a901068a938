"""Conversation content: roles, parts and turns."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import WireModel


class Role(str, Enum):
    USER = "user"
    MODEL = "model"


class Offset(WireModel):
    seconds: int = 0
    nanos: int = 0


class VideoMetadata(WireModel):
    start_offset: Offset
    end_offset: Offset


class FileData(WireModel):
    mime_type: str
    file_uri: str


class InlineData(WireModel):
    """Base64 encoded bytes sent inline with the request."""

    mime_type: str
    data: str


class Part(WireModel):
    text: Optional[str] = None
    inline_data: Optional[InlineData] = None
    file_data: Optional[FileData] = None
    video_metadata: Optional[VideoMetadata] = None

    @classmethod
    def text_part(cls, text: str) -> "Part":
        return cls(text=text)

    @classmethod
    def inline(cls, mime_type: str, data: str) -> "Part":
        return cls(inline_data=InlineData(mime_type=mime_type, data=data))

    @classmethod
    def file(cls, mime_type: str, file_uri: str) -> "Part":
        return cls(file_data=FileData(mime_type=mime_type, file_uri=file_uri))


class Content(WireModel):
    role: Optional[Role] = None
    parts: List[Part] = Field(default_factory=list)

    @classmethod
    def user(cls, text: str) -> "Content":
        return cls(role=Role.USER, parts=[Part.text_part(text)])

    @classmethod
    def model(cls, text: str) -> "Content":
        return cls(role=Role.MODEL, parts=[Part.text_part(text)])


class SystemInstructionPart(WireModel):
    text: Optional[str] = None


class SystemInstructionContent(WireModel):
    parts: List[SystemInstructionPart] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "SystemInstructionContent":
        return cls(parts=[SystemInstructionPart(text=text)])
