"""
Error types shared by the service client, the form, and the page views.
"""

from __future__ import annotations

from typing import Optional


class DashboardError(Exception):
    """Base class for failures the dashboard knows how to display."""


class ValidationError(DashboardError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class ServiceError(DashboardError):
    """Non-2xx response or malformed payload from the prediction service."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        status_text: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.status_text = status_text

    @classmethod
    def from_status(
        cls,
        status: int,
        status_text: str,
        message: Optional[str] = None,
    ) -> "ServiceError":
        detail = message or f"Error {status}: {status_text}"
        return cls(detail, status=status, status_text=status_text)


class UnknownError(DashboardError):
    """Anything that is not a service response, e.g. the host is unreachable."""

    def __init__(self, message: str = "An unknown error occurred", cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


def describe_error(exc: BaseException) -> str:
    """Return the single display string for an exception."""
    if isinstance(exc, DashboardError):
        text = str(exc).strip()
        if text:
            return text
    elif str(exc).strip():
        return f"An unknown error occurred: {exc}"
    return "An unknown error occurred"
