"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    AppContext,
    get_app_context,
    get_chat_service,
    get_gateway,
    get_index_state,
    get_summary_service,
)

__all__ = [
    "AppContext",
    "get_app_context",
    "get_chat_service",
    "get_gateway",
    "get_index_state",
    "get_summary_service",
]
