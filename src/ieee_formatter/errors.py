"""
Error types for the IEEE formatting pipeline.

Every error raised at the pipeline boundary derives from FormatterError and
knows the HTTP status it maps to, so the API, the review UI and the CLI can
all report it the same way.
"""

from typing import Any, Dict, Optional


class FormatterError(Exception):
    """Base class for all pipeline errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class DocumentParseError(FormatterError):
    """The uploaded bytes could not be read as a word-processing document."""

    status_code = 400

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class InvalidInputError(FormatterError):
    """Request payload is missing required fields or has the wrong shape."""

    status_code = 400


class ValidationError(FormatterError):
    """A submitted paragraph entry or label is not acceptable."""

    status_code = 400

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.index is not None:
            result["index"] = self.index
        return result


class InvalidLabelError(ValidationError):
    """A label outside the closed label set."""

    def __init__(self, label: str, index: Optional[int] = None):
        super().__init__(f"Invalid label: {label}", index=index)
        self.label = label


class PayloadTooLargeError(FormatterError):
    """Upload exceeds the configured size limit."""

    status_code = 413

    def __init__(self, limit_bytes: int):
        limit_mb = limit_bytes / (1024 * 1024)
        super().__init__(f"Upload exceeds the maximum size of {limit_mb:g} MB")
        self.limit_bytes = limit_bytes


class RenderError(FormatterError):
    """The renderer failed to produce a document from a valid model."""

    status_code = 500
