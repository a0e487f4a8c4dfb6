"""
Custom Exceptions for the NomiBot answer service.

The answer pipeline itself never raises: missing labels or URLs are normal
outcomes. Everything here describes failures of the chat completion backend,
which stop a request before any post-processing happens.

Exception Hierarchy:
    ChatError (base)
    └── UpstreamError
        ├── UpstreamStatusError
        ├── UpstreamConnectionError
        └── UpstreamResponseError

Usage:
    from nomibot.exceptions import UpstreamStatusError

    try:
        result = service.ask(question)
    except UpstreamStatusError as e:
        return PlainTextResponse(e.body, status_code=400)
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class ChatError(Exception):
    """
    Base exception for all service errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A chat service error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


# =============================================================================
# UPSTREAM ERRORS
# =============================================================================


class UpstreamError(ChatError):
    """
    Base class for failures of the chat completion backend.

    Attributes:
        status_code: HTTP status returned by the backend, if any
        body: Raw response payload as sent by the backend
        original_error: The underlying client exception
    """

    def __init__(
        self,
        message: str = "Chat completion backend failed",
        status_code: Optional[int] = None,
        body: str = "",
        original_error: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.original_error = original_error

        if status_code:
            message = f"{message} (HTTP {status_code})"
        details = str(original_error) if original_error else None
        super().__init__(message, details)


class UpstreamStatusError(UpstreamError):
    """Raised when the backend answers with a non-success status."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            "Chat completion request was rejected",
            status_code=status_code,
            body=body,
            original_error=original_error,
        )


class UpstreamConnectionError(UpstreamError):
    """
    Raised when the backend cannot be reached.

    This includes network errors, DNS failures, and timeouts.
    """

    def __init__(self, original_error: Optional[Exception] = None):
        super().__init__(
            "Cannot connect to chat completion backend",
            body=str(original_error) if original_error else "",
            original_error=original_error,
        )


class UpstreamResponseError(UpstreamError):
    """Raised when a successful response carries no usable message content."""

    def __init__(self, message: str = "Chat completion returned no message content", body: str = ""):
        super().__init__(message, body=body)
        if body:
            self.details = body[:500]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def format_error_chain(error: Exception) -> str:
    """
    Format an exception and its chain for logging.

    Returns a multi-line string showing the error hierarchy.
    """
    lines = []
    current = error
    depth = 0

    while current is not None:
        prefix = "  " * depth + ("└─ " if depth > 0 else "")
        lines.append(f"{prefix}{type(current).__name__}: {current}")

        if getattr(current, "original_error", None):
            current = current.original_error
            depth += 1
        elif current.__cause__:
            current = current.__cause__
            depth += 1
        else:
            break

    return "\n".join(lines)
