"""API operations, one Request subclass each."""

from .base import Request, Route, UriBuilder, decode_response
from .files import DeleteFile, GetFile, ListFiles
from .generate import GenerateContent
from .models import GetModel, ListModels

__all__ = [
    "DeleteFile",
    "GenerateContent",
    "GetFile",
    "GetModel",
    "ListFiles",
    "ListModels",
    "Request",
    "Route",
    "UriBuilder",
    "decode_response",
]
