"""Generation parameters, response schemas and the generateContent body."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import WireModel
from .content import Content, SystemInstructionContent
from .safety import SafetySetting


class Type(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"

    @classmethod
    def _missing_(cls, value):
        # the API docs spell types in upper case
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


class Schema(WireModel):
    """OpenAPI-subset schema accepted as ``responseSchema``."""

    schema_type: Optional[Type] = Field(default=None, alias="type")
    format: Optional[str] = None
    description: Optional[str] = None
    nullable: Optional[bool] = None
    enum_values: Optional[List[str]] = Field(default=None, alias="enum")
    max_items: Optional[int] = None
    min_items: Optional[int] = None
    properties: Optional[Dict[str, "Schema"]] = None
    required: Optional[List[str]] = None
    property_ordering: Optional[List[str]] = None
    items: Optional["Schema"] = None


class GenerationConfig(WireModel):
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    top_k: Optional[int] = None
    candidate_count: Optional[int] = None
    max_output_tokens: Optional[int] = None
    stop_sequences: Optional[List[str]] = None
    response_mime_type: Optional[str] = None
    response_schema: Optional[Schema] = None


class FunctionDeclaration(WireModel):
    name: str
    description: str
    parameters: Dict[str, Any] = Field(default_factory=dict)


class Tools(WireModel):
    function_declarations: List[FunctionDeclaration] = Field(default_factory=list)


class GenerateContentRequest(WireModel):
    contents: List[Content] = Field(default_factory=list)
    tools: List[Tools] = Field(default_factory=list)
    safety_settings: List[SafetySetting] = Field(default_factory=list)
    generation_config: Optional[GenerationConfig] = None
    system_instruction: Optional[SystemInstructionContent] = Field(default=None, alias="system_instruction")

    def to_wire(self) -> Dict[str, Any]:
        body = super().to_wire()
        # contents is always sent, the optional lists only when populated
        body["contents"] = body.get("contents", [])
        for key in ("tools", "safetySettings"):
            if not body.get(key):
                body.pop(key, None)
        return body
