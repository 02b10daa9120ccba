"""
Health check API endpoint.

Routes: GET /health

Reports index readiness, entry count and the last build error, plus the
static model configuration.

Dependencies: docs_chat.core.retrieval, docs_chat.boundary.aws
System role: Status HTTP API
"""

from fastapi import APIRouter, Depends

from docs_chat.api.deps import get_gateway, get_index_state
from docs_chat.boundary.aws.bedrock_client import BedrockGateway
from docs_chat.core.retrieval import IndexState
from docs_chat.models.health import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(
    index_state: IndexState = Depends(get_index_state),
    gateway: BedrockGateway = Depends(get_gateway),
) -> HealthResponse:
    """Service status with retrieval index readiness."""
    snapshot = index_state.snapshot
    return HealthResponse(
        model=gateway.model_id,
        embed_model=gateway.embed_model_id,
        region=gateway.region,
        index_status=snapshot.status.value,
        index_ready=snapshot.is_ready,
        index_size=snapshot.size,
        index_error=snapshot.error_message,
        index_built_at=snapshot.built_at,
    )
