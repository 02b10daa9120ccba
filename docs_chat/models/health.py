"""
Health/status response schema.

Dependencies: pydantic
System role: Status API contract
"""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Service health, index readiness and static model configuration."""

    ok: bool = True
    model: str
    embed_model: str
    region: str
    index_status: str
    index_ready: bool
    index_size: int
    index_error: str | None = None
    index_built_at: datetime | None = None
