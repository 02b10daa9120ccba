"""
Exception hierarchy for the document chat application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocsChatError(Exception):
    """Base exception for all document chat application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(DocsChatError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentLoadError(DocsChatError):
    """Raised when a source document cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        kind: str | None = None,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document load error.

        Args:
            message: Error message
            kind: Document kind (csv, pdf)
            path: File path that failed
            details: Additional context
        """
        details = details or {}
        if kind:
            details["kind"] = kind
        if path:
            details["path"] = path
        super().__init__(message, details)


class CapabilityFailure(DocsChatError):
    """Base for failures of the remote model endpoints."""

    def __init__(
        self,
        message: str,
        model_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize capability failure.

        Args:
            message: Error message
            model_id: Model that was being invoked
            details: Additional context
        """
        details = details or {}
        if model_id:
            details["model_id"] = model_id
        super().__init__(message, details)


class EmbeddingFailure(CapabilityFailure):
    """Raised when embedding generation fails or returns no usable vector."""

    pass


class GenerationFailure(CapabilityFailure):
    """Raised when text generation fails."""

    pass


class BuildFailure(DocsChatError):
    """Raised when an index build attempt fails at any stage."""

    def __init__(
        self,
        message: str,
        stage: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize build failure.

        Args:
            message: Error message
            stage: Build stage that failed (fetch, chunk, embed, publish)
            details: Additional context
        """
        details = details or {}
        if stage:
            details["stage"] = stage
        self.stage = stage
        super().__init__(message, details)


class IndexNotReady(DocsChatError):
    """
    Raised when retrieval is attempted before a successful index build.

    Recoverable: callers may continue without retrieved context.
    """

    def __init__(
        self,
        status: str,
        last_error: BaseException | None = None,
    ) -> None:
        """
        Initialize index-not-ready error.

        Args:
            status: Current index status (building, failed)
            last_error: Error captured by the last failed build, if any
        """
        self.status = status
        self.last_error = last_error
        details: dict[str, Any] = {"status": status}
        if last_error is not None:
            details["last_error"] = str(last_error)
        super().__init__("Embedding index not ready", details)
