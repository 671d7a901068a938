"""Command line entry point: ask, list models, JSON prompts and uploads."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .client import Client
from .core.config import get_settings
from .core.logging import get_logger, setup_logging
from .errors import DecodeError, GeminiError
from .models.generation import Schema

logger = get_logger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gemini-client", description="Talk to the Gemini REST API.")
    sub = p.add_subparsers(dest="command", required=True)

    ask = sub.add_parser("ask", help="Send one prompt and print the reply text")
    ask.add_argument("prompt")
    ask.add_argument("--model", default=DEFAULT_MODEL)
    ask.add_argument("--system", default=None, help="System instruction")
    ask.add_argument("--temperature", type=float, default=None)

    models = sub.add_parser("models", help="List available models")
    models.add_argument("--page-size", type=int, default=None)
    models.add_argument("--page-token", default=None)

    js = sub.add_parser("json", help="Send a prompt in JSON mode and pretty-print the reply")
    js.add_argument("prompt")
    js.add_argument("--model", default=DEFAULT_MODEL)
    js.add_argument("--schema", dest="schema_path", default=None, help="Path to a response Schema in JSON")

    upload = sub.add_parser("upload", help="Upload a file and print its URI")
    upload.add_argument("path")
    upload.add_argument("--mime-type", required=True)
    upload.add_argument("--display-name", default=None)

    return p


def load_schema(path: str) -> Schema:
    try:
        return Schema.model_validate_json(Path(path).read_text(encoding="utf-8"))
    except ValidationError as exc:
        raise DecodeError(
            f"Schema file {path} is invalid",
            details={"errors": exc.errors(include_url=False)},
        ) from exc


async def run(args: argparse.Namespace, client: Client) -> None:
    if args.command == "ask":
        chat = client.chat(args.model)
        if args.system:
            chat.system_instruction(args.system)
        if args.temperature is not None:
            chat.temperature(args.temperature)
        print(await chat.send_message(args.prompt))

    elif args.command == "models":
        listing = await client.models(args.page_size, args.page_token)
        for model in listing.models:
            print(f"{model.name}\t{model.display_name}")
        if listing.next_page_token:
            print(f"next_page_token: {listing.next_page_token}")

    elif args.command == "json":
        chat = client.chat(args.model).to_json()
        if args.schema_path:
            chat.response_schema(load_schema(args.schema_path))
        payload = await chat.json(args.prompt)
        print(json.dumps(payload, indent=2, ensure_ascii=False))

    elif args.command == "upload":
        uploaded = await client.upload_file(args.path, args.mime_type, args.display_name)
        print(uploaded.file_uri)


async def _main(args: argparse.Namespace) -> None:
    async with Client() as client:
        await run(args, client)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)

    try:
        asyncio.run(_main(args))
    except GeminiError as exc:
        logger.error("command_failed", command=args.command, code=exc.code)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
