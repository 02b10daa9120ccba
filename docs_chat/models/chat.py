"""
Chat domain models and schemas.

Request/response schemas for the query endpoint.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    prompt: str | None = Field(default="", description="User question")
    context: str | None = Field(
        default=None,
        description="Optional caller-supplied context, appended after retrieved context",
    )


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    answer: str
