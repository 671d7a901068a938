"""Chat sessions that replay their whole history on every call."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any, List, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from .core.logging import get_logger
from .errors import DecodeError, SchemaValidationError
from .history import load_history, save_history
from .models.content import Content, Role
from .models.generation import GenerationConfig, Schema
from .models.responses import Response
from .models.safety import SafetySetting
from .routes.base import Route
from .validation import ResponseValidator

if TYPE_CHECKING:
    from .client import Client

logger = get_logger(__name__)

JSON_MIME_TYPE = "application/json"

_JSON_BLOCK = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)


def parse_json_reply(text: str) -> Any:
    """Parse a JSON reply, unwrapping a fenced ```json block if the model added one."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        error = exc

    block = _JSON_BLOCK.search(text)
    if block:
        try:
            return json.loads(block.group(1))
        except json.JSONDecodeError:
            pass

    raise DecodeError(f"Model reply is not valid JSON: {error}", details={"text": text[:500]}) from error


class Chat:
    """Accumulates a linear, role-tagged history against one model.

    ``send_message`` appends the user turn, sends everything so far and
    records the model's reply as the next turn.
    """

    def __init__(self, client: "Client", model: str) -> None:
        self.client = client
        self.model = model
        self.history: List[Content] = []
        self.instruction: Optional[str] = None
        self.safety: List[SafetySetting] = []
        self._config: Optional[GenerationConfig] = None

    @property
    def config(self) -> GenerationConfig:
        if self._config is None:
            self._config = GenerationConfig()
        return self._config

    @config.setter
    def config(self, config: GenerationConfig) -> None:
        self._config = config

    def system_instruction(self, instruction: str) -> "Chat":
        self.instruction = instruction
        return self

    def temperature(self, value: float) -> "Chat":
        self.config.temperature = value
        return self

    def safety_settings(self, settings: List[SafetySetting]) -> "Chat":
        self.safety = list(settings)
        return self

    def to_json(self) -> "JsonChat":
        json_chat = JsonChat(self.client, self.model)
        json_chat.history = self.history
        json_chat.instruction = self.instruction
        json_chat.safety = self.safety
        json_chat.config = self.config
        json_chat.config.response_mime_type = JSON_MIME_TYPE
        return json_chat

    def build_request(self) -> Route:
        route = self.client.generate_content(self.model)
        if self.instruction is not None:
            route.system_instruction(self.instruction)
        if self._config is not None:
            route.config(self._config.model_copy(deep=True))
        if self.safety:
            route.safety_settings(self.safety)
        route.contents([content.model_copy(deep=True) for content in self.history])
        return route

    async def generate_content(self) -> Response:
        return await self.build_request()

    async def send_message(self, message: str) -> Response:
        self.history.append(Content.user(message))
        logger.debug("chat_message_sent", model=self.model, turns=len(self.history))

        response = await self.generate_content()

        if response.candidates and response.candidates[0].content is not None:
            reply = response.candidates[0].content.model_copy(deep=True)
            if reply.role is None:
                reply.role = Role.MODEL
            self.history.append(reply)
        return response

    def save(self, path: Union[str, Path]) -> Path:
        return save_history(self.history, path)

    @classmethod
    def load(cls, client: "Client", model: str, path: Union[str, Path]) -> "Chat":
        chat = cls(client, model)
        chat.history = load_history(path)
        return chat


class JsonChat(Chat):
    """A chat whose replies are requested, and parsed, as JSON."""

    def __init__(self, client: "Client", model: str) -> None:
        super().__init__(client, model)
        self.config.response_mime_type = JSON_MIME_TYPE
        self.validator = ResponseValidator()

    def to_json(self) -> "JsonChat":
        return self

    def response_schema(self, schema: Schema) -> "JsonChat":
        self.config.response_schema = schema
        return self

    async def json(self, message: str, model: Optional[Type[BaseModel]] = None) -> Any:
        response = await self.send_message(message)
        payload = parse_json_reply(str(response))

        schema = self.config.response_schema
        if schema is not None:
            ok, errors = self.validator.validate(payload, schema)
            if not ok:
                logger.warning("json_reply_schema_mismatch", model=self.model, errors=[e.to_dict() for e in errors])
                raise SchemaValidationError("Model reply does not match the response schema", errors)

        if model is None:
            return payload

        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(
                f"Model reply does not match {model.__name__}",
                details={"errors": exc.errors(include_url=False)},
            ) from exc
