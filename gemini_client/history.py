"""Saving and restoring chat history as JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence, Union

from pydantic import ValidationError

from .core.logging import get_logger
from .errors import DecodeError
from .models.content import Content

logger = get_logger(__name__)

PathLike = Union[str, Path]


def save_history(history: Sequence[Content], path: PathLike) -> Path:
    target = Path(path)
    document = {"history": [content.to_wire() for content in history]}
    target.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("history_saved", path=str(target), turns=len(history))
    return target


def load_history(path: PathLike) -> List[Content]:
    source = Path(path)
    try:
        document = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DecodeError(f"History file {source} is not valid JSON: {exc}") from exc

    if not isinstance(document, dict) or not isinstance(document.get("history"), list):
        raise DecodeError(f"History file {source} has no 'history' list")

    try:
        history = [Content.model_validate(item) for item in document["history"]]
    except ValidationError as exc:
        raise DecodeError(
            f"History file {source} contains malformed turns",
            details={"errors": exc.errors(include_url=False)},
        ) from exc

    logger.info("history_loaded", path=str(source), turns=len(history))
    return history
