"""Typed replies for model listing and content generation."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import Field, field_validator

from .base import WireModel, coerce_enum
from .content import Content
from .safety import SafetyRating


class FinishReason(str, Enum):
    FINISH_REASON_UNSPECIFIED = "FINISH_REASON_UNSPECIFIED"
    STOP = "STOP"
    MAX_TOKENS = "MAX_TOKENS"
    SAFETY = "SAFETY"
    RECITATION = "RECITATION"
    LANGUAGE = "LANGUAGE"
    OTHER = "OTHER"
    BLOCKLIST = "BLOCKLIST"
    PROHIBITED_CONTENT = "PROHIBITED_CONTENT"
    SPII = "SPII"
    MALFORMED_FUNCTION_CALL = "MALFORMED_FUNCTION_CALL"
    IMAGE_SAFETY = "IMAGE_SAFETY"


class UsageMetadata(WireModel):
    prompt_token_count: int = 0
    candidates_token_count: int = 0
    total_token_count: Optional[int] = None


class Candidate(WireModel):
    content: Optional[Content] = None
    # unknown reasons stay as plain strings
    finish_reason: Optional[Union[FinishReason, str]] = None
    index: Optional[int] = None
    safety_ratings: List[SafetyRating] = Field(default_factory=list)

    @field_validator("finish_reason", mode="before")
    @classmethod
    def known_finish_reason(cls, value):
        return coerce_enum(FinishReason, value)


class PromptFeedback(WireModel):
    safety_ratings: List[SafetyRating] = Field(default_factory=list)
    block_reason: Optional[str] = None


class Response(WireModel):
    candidates: List[Candidate] = Field(default_factory=list)
    prompt_feedback: Optional[PromptFeedback] = None
    usage_metadata: Optional[UsageMetadata] = None

    @property
    def text(self) -> str:
        """Text of the first part of the first candidate, or an empty string."""
        if not self.candidates:
            return ""
        content = self.candidates[0].content
        if content is None or not content.parts:
            return ""
        return content.parts[0].text or ""

    def __str__(self) -> str:
        return self.text


class Model(WireModel):
    name: str
    version: str = ""
    display_name: str = ""
    description: str = ""
    input_token_limit: int = 0
    output_token_limit: int = 0
    supported_generation_methods: List[str] = Field(default_factory=list)
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    top_k: Optional[int] = None


class Models(WireModel):
    models: List[Model] = Field(default_factory=list)
    next_page_token: Optional[str] = None
