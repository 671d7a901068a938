"""Exceptions raised by the client"""
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .models.errors import ErrorDetail


class GeminiError(Exception):
    """Base error with a code/message/details envelope"""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class ConfigurationError(GeminiError):
    """No API key could be resolved"""

    def __init__(self, message: str):
        super().__init__("CONFIGURATION_ERROR", message)


class HTTPTransportError(GeminiError):
    """The request could not be sent or the reply was not usable HTTP"""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        super().__init__("HTTP_ERROR", message, details)


class DecodeError(GeminiError):
    """The reply body did not decode into the expected model"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("DECODE_ERROR", message, details)


class ApiError(GeminiError):
    """The API answered with an error envelope"""

    def __init__(self, detail: "ErrorDetail"):
        self.detail = detail
        super().__init__(
            "API_ERROR",
            detail.message,
            {
                "code": detail.code,
                "status": self.status_name,
            },
        )

    @property
    def status(self):
        return self.detail.status

    @property
    def status_name(self) -> Optional[str]:
        status = self.detail.status
        return getattr(status, "value", status)

    @property
    def status_code(self) -> int:
        return self.detail.code

    def __str__(self) -> str:
        status = self.status_name or "UNKNOWN"
        return f"gemini: {self.detail.code} {status}: {self.detail.message}"


class SchemaValidationError(GeminiError):
    """A JSON reply does not satisfy the configured response schema"""

    def __init__(self, message: str, errors: list):
        self.errors = errors
        super().__init__("SCHEMA_VALIDATION_ERROR", message, {"errors": [e.to_dict() for e in errors]})


class UploadError(GeminiError):
    """The resumable upload protocol did not complete"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("UPLOAD_ERROR", message, details)
