"""
Core domain layer.

Exception hierarchy, prompt text and the retrieval subsystem.
"""

from docs_chat.core.exceptions import (
    BuildFailure,
    DocsChatError,
    DocumentLoadError,
    EmbeddingFailure,
    GenerationFailure,
    IndexNotReady,
    ValidationError,
)

__all__ = [
    "BuildFailure",
    "DocsChatError",
    "DocumentLoadError",
    "EmbeddingFailure",
    "GenerationFailure",
    "IndexNotReady",
    "ValidationError",
]
