"""Wire models for the Generative Language API."""

from .base import Empty, WireModel
from .content import (
    Content,
    FileData,
    InlineData,
    Offset,
    Part,
    Role,
    SystemInstructionContent,
    SystemInstructionPart,
    VideoMetadata,
)
from .errors import ApiErrorEnvelope, ErrorDetail, ErrorInfo, Status
from .files import File, FileList, UploadedFile
from .generation import (
    FunctionDeclaration,
    GenerateContentRequest,
    GenerationConfig,
    Schema,
    Tools,
    Type,
)
from .responses import (
    Candidate,
    FinishReason,
    Model,
    Models,
    PromptFeedback,
    Response,
    UsageMetadata,
)
from .safety import (
    HarmBlockThreshold,
    HarmCategory,
    HarmProbability,
    SafetyRating,
    SafetySetting,
)

__all__ = [
    "ApiErrorEnvelope",
    "Candidate",
    "Content",
    "Empty",
    "ErrorDetail",
    "ErrorInfo",
    "File",
    "FileData",
    "FileList",
    "FinishReason",
    "FunctionDeclaration",
    "GenerateContentRequest",
    "GenerationConfig",
    "HarmBlockThreshold",
    "HarmCategory",
    "HarmProbability",
    "InlineData",
    "Model",
    "Models",
    "Offset",
    "Part",
    "PromptFeedback",
    "Response",
    "Role",
    "SafetyRating",
    "SafetySetting",
    "Schema",
    "Status",
    "SystemInstructionContent",
    "SystemInstructionPart",
    "Tools",
    "Type",
    "UploadedFile",
    "UsageMetadata",
    "VideoMetadata",
    "WireModel",
]
