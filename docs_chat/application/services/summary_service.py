"""
Summary service.

Asks the generation model for a JSON purpose/status summary of both
documents and tolerates replies that are not valid JSON.

Dependencies: docs_chat.boundary, docs_chat.core.prompts
System role: Summaries endpoint orchestration
"""

import asyncio
import json
import logging
import re
from typing import TYPE_CHECKING

from docs_chat.core.prompts import build_summary_prompt
from docs_chat.models.retrieval import SourceKind
from docs_chat.models.summary import NO_PURPOSE, NO_STATUS, SummaryResponse

if TYPE_CHECKING:
    from docs_chat.boundary.aws.bedrock_client import BedrockGateway
    from docs_chat.boundary.documents.loader import DocumentLoader

logger = logging.getLogger(__name__)

SUMMARY_MAX_TOKENS = 400
SUMMARY_TEMPERATURE = 0.0

_PURPOSE_LINE = re.compile(r"""purpose["']?\s*[:\-]\s*([^\n]+)""", re.IGNORECASE)
_STATUS_LINE = re.compile(r"""status["']?\s*[:\-]\s*([^\n]+)""", re.IGNORECASE)


def parse_summary(raw: str) -> SummaryResponse:
    """
    Extract purpose and status from a model reply.

    Tries JSON first, then ``purpose: ...`` / ``status: ...`` lines, then
    falls back to the whole reply for a missing field.

    Args:
        raw: Model reply text

    Returns:
        SummaryResponse: Parsed summary with placeholders for empty values
    """
    purpose = ""
    status = ""
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        parsed = None

    if isinstance(parsed, dict):
        purpose = str(parsed.get("purpose") or "")
        status = str(parsed.get("status") or "")
    else:
        purpose_match = _PURPOSE_LINE.search(raw)
        status_match = _STATUS_LINE.search(raw)
        purpose = purpose_match.group(1).strip() if purpose_match else raw
        status = status_match.group(1).strip() if status_match else raw

    return SummaryResponse(
        purpose=purpose or NO_PURPOSE,
        status=status or NO_STATUS,
    )


class SummaryService:
    """Summarize the purpose and progress implied by the two documents."""

    def __init__(self, loader: "DocumentLoader", gateway: "BedrockGateway") -> None:
        """
        Initialize summary service.

        Args:
            loader: Source document loader
            gateway: Text-generation capability
        """
        self.loader = loader
        self.gateway = gateway

    async def summarize(self) -> SummaryResponse:
        """
        Load both documents and ask the model for a summary.

        Returns:
            SummaryResponse: Purpose and status

        Raises:
            DocumentLoadError: Either document could not be loaded
            GenerationFailure: The model call failed
        """
        csv_text, pdf_text = await asyncio.gather(
            self.loader.load(SourceKind.CSV),
            self.loader.load(SourceKind.PDF),
        )
        raw = await self.gateway.generate(
            build_summary_prompt(csv_text, pdf_text),
            None,
            max_tokens=SUMMARY_MAX_TOKENS,
            temperature=SUMMARY_TEMPERATURE,
        )
        logger.info(f"{__name__}:summarize - reply_len={len(raw)}")
        return parse_summary(raw)
