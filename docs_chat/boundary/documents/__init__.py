"""Source document loading."""

from docs_chat.boundary.documents.loader import DocumentLoader

__all__ = ["DocumentLoader"]
