"""
Chat service for single-turn Q&A over the indexed documents.

Retrieval is best-effort: a not-ready index means the question is answered
without retrieved context. Embedding and generation failures propagate.

Dependencies: docs_chat.core.retrieval, docs_chat.boundary.aws
System role: Query endpoint orchestration
"""

import logging
from typing import TYPE_CHECKING

from docs_chat.core.exceptions import ValidationError
from docs_chat.core.prompts import build_chat_prompt
from docs_chat.core.retrieval.retrieval_service import RetrievalService

if TYPE_CHECKING:
    from docs_chat.boundary.aws.bedrock_client import BedrockGateway

logger = logging.getLogger(__name__)


class ChatService:
    """Answer user questions with retrieved and caller-supplied context."""

    def __init__(
        self,
        retrieval: RetrievalService,
        gateway: "BedrockGateway",
    ) -> None:
        """
        Initialize chat service.

        Args:
            retrieval: Retrieval facade over the shared index
            gateway: Text-generation capability
        """
        self.retrieval = retrieval
        self.gateway = gateway

    async def answer(self, prompt: str | None, context: str | None = None) -> str:
        """
        Answer a question.

        Flow:
        1. Validate the prompt is not blank
        2. Retrieve context (skipped with a warning if the index is not ready)
        3. Append caller context after retrieved context
        4. Generate the answer

        Args:
            prompt: User question
            context: Optional caller-supplied context

        Returns:
            str: Model answer

        Raises:
            ValidationError: Prompt is blank
            EmbeddingFailure: Query embedding failed
            GenerationFailure: Answer generation failed
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt is required", field="prompt")

        result = await self.retrieval.try_retrieve_context(prompt)
        if not result.ok:
            logger.warning(f"{__name__}:answer - Retrieval skipped: {result.error}")

        combined_context = "\n\n".join(part for part in (result.context, context) if part)
        return await self.gateway.generate(
            build_chat_prompt(prompt),
            combined_context or None,
        )
