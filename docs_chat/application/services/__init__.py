"""
Application services.

Orchestrate retrieval, document loading and generation for API handlers.
"""

from docs_chat.application.services.chat_service import ChatService
from docs_chat.application.services.summary_service import SummaryService

__all__ = ["ChatService", "SummaryService"]
