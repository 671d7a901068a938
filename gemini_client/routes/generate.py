"""The generateContent operation and its request builder."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models.content import Content, SystemInstructionContent
from ..models.generation import GenerateContentRequest, GenerationConfig, Tools
from ..models.responses import Response
from ..models.safety import SafetySetting
from .base import Request, UriBuilder
from .models import model_resource


class GenerateContent(Request):
    method = "POST"
    response_model = Response

    def __init__(self, model: str) -> None:
        self.model = model_resource(model)
        self.payload = GenerateContentRequest()

    def config(self, config: Optional[GenerationConfig]) -> "GenerateContent":
        self.payload.generation_config = config
        return self

    def system_instruction(self, instruction: str) -> "GenerateContent":
        self.payload.system_instruction = SystemInstructionContent.from_text(instruction)
        return self

    def contents(self, contents: List[Content]) -> "GenerateContent":
        self.payload.contents = list(contents)
        return self

    def message(self, message: str) -> "GenerateContent":
        self.payload.contents.append(Content.user(message))
        return self

    def safety_settings(self, settings: List[SafetySetting]) -> "GenerateContent":
        self.payload.safety_settings = list(settings)
        return self

    def tools(self, tools: List[Tools]) -> "GenerateContent":
        self.payload.tools = list(tools)
        return self

    def format_uri(self, builder: UriBuilder) -> None:
        builder.write_segment("models", f"{self.model}:generateContent")

    def body(self) -> Optional[Dict[str, Any]]:
        return self.payload.to_wire()
