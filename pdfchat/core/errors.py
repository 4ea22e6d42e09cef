# pdfchat/core/errors.py
from typing import Optional


class PdfChatError(Exception):
    """Base class for failures that are reported to the client as {success: false}."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ExtractionError(PdfChatError):
    """A document could not be read or contained no text."""

    def __init__(self, reason: str):
        super().__init__(f"Error processing PDF: {reason}")
        self.reason = reason


class ValidationError(PdfChatError):
    """A question was rejected before touching the session state."""


class ProviderError(PdfChatError):
    """The language model API call failed."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
