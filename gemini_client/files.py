"""Resumable uploads of local files for use in prompts.

The upload is two requests against the ``upload/`` endpoint: a ``start``
call that announces size and MIME type and returns a session URL in the
``x-goog-upload-url`` header, then a single ``upload, finalize`` call that
sends the bytes. MIME types should come from the IANA registry, the API
needs them to process the file.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

import httpx
from pydantic import BaseModel

from .core.logging import get_logger
from .errors import HTTPTransportError, UploadError
from .models.base import Empty
from .models.content import Part
from .models.files import UploadedFile
from .routes.base import UriBuilder, decode_response

if TYPE_CHECKING:
    from .client import Client

logger = get_logger(__name__)


class GeminiFile(BaseModel):
    """A file the API can reference by URI."""

    file_uri: str
    mime_type: str
    name: Optional[str] = None

    def to_part(self) -> Part:
        return Part.file(self.mime_type, self.file_uri)


def default_display_name(path: Path) -> str:
    # ".env" has no stem before the first dot
    stem = path.name.split(".", 1)[0]
    return stem or path.name


async def upload_file(
    client: "Client",
    path: Union[str, Path],
    mime_type: str,
    display_name: Optional[str] = None,
) -> GeminiFile:
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"No such file: {file_path}")

    data = file_path.read_bytes()
    size = len(data)
    display_name = display_name or default_display_name(file_path)

    builder = UriBuilder(client.base_url).write_segment("upload", client.api_version, "files")
    log_url = builder.render()
    start_url = builder.write_query_param("key", client.api_key).render()

    logger.info("file_upload_started", path=str(file_path), mime_type=mime_type, size_bytes=size)

    try:
        start = await client.http_client.post(
            start_url,
            headers={
                "X-Goog-Upload-Protocol": "resumable",
                "X-Goog-Upload-Command": "start",
                "X-Goog-Upload-Header-Content-Length": str(size),
                "X-Goog-Upload-Header-Content-Type": mime_type,
            },
            json={"file": {"display_name": display_name}},
        )
    except httpx.HTTPError as exc:
        raise HTTPTransportError(f"{type(exc).__name__}: {exc}") from exc

    if start.is_error:
        decode_response(start, Empty)

    upload_url = start.headers.get("x-goog-upload-url")
    if not upload_url:
        raise UploadError("Upload session did not return an x-goog-upload-url header", details={"url": log_url})

    try:
        final = await client.http_client.post(
            upload_url,
            headers={
                "Content-Length": str(size),
                "X-Goog-Upload-Offset": "0",
                "X-Goog-Upload-Command": "upload, finalize",
            },
            content=data,
        )
    except httpx.HTTPError as exc:
        raise HTTPTransportError(f"{type(exc).__name__}: {exc}") from exc

    uploaded = decode_response(final, UploadedFile)

    if uploaded.file is not None and uploaded.file.uri:
        name, uri = uploaded.file.name, uploaded.file.uri
    else:
        # finalize replied without metadata, fall back to the newest listed file
        listing = await client.files()
        if not listing.files or not listing.files[0].uri:
            raise UploadError("Uploaded file not found in file listing")
        name, uri = listing.files[0].name, listing.files[0].uri

    logger.info("file_upload_completed", name=name, mime_type=mime_type)
    return GeminiFile(file_uri=uri, mime_type=mime_type, name=name)
