"""
Test suite for SummaryService and reply parsing.

System role: Verification of summary orchestration
"""

import json

import pytest

from docs_chat.application.services.summary_service import (
    SUMMARY_MAX_TOKENS,
    SUMMARY_TEMPERATURE,
    SummaryService,
    parse_summary,
)
from docs_chat.core.exceptions import DocumentLoadError, GenerationFailure
from docs_chat.core.prompts import build_summary_prompt
from docs_chat.models.retrieval import SourceKind
from docs_chat.models.summary import NO_PURPOSE, NO_STATUS


class TestParseSummary:
    """Test suite for parse_summary."""

    def test_json_reply_should_be_parsed(self) -> None:
        raw = json.dumps({"purpose": "Track garment sales", "status": "Phase one done"})

        summary = parse_summary(raw)

        assert summary.purpose == "Track garment sales"
        assert summary.status == "Phase one done"

    def test_json_with_missing_keys_should_use_placeholders(self) -> None:
        summary = parse_summary(json.dumps({"purpose": ""}))

        assert summary.purpose == NO_PURPOSE
        assert summary.status == NO_STATUS

    def test_labelled_lines_should_be_extracted(self) -> None:
        raw = "Purpose: Track garment orders\nStatus - Inventory module live"

        summary = parse_summary(raw)

        assert summary.purpose == "Track garment orders"
        assert summary.status == "Inventory module live"

    def test_unstructured_reply_should_fill_both_fields(self) -> None:
        summary = parse_summary("The files describe a sales tracker.")

        assert summary.purpose == "The files describe a sales tracker."
        assert summary.status == "The files describe a sales tracker."

    def test_empty_reply_should_use_placeholders(self) -> None:
        summary = parse_summary("")

        assert summary.purpose == NO_PURPOSE
        assert summary.status == NO_STATUS


class TestSummaryService:
    """Test suite for SummaryService.summarize."""

    @pytest.mark.asyncio
    async def test_should_prompt_with_both_documents(
        self, mock_loader, mock_gateway, csv_text, pdf_text
    ) -> None:
        mock_gateway.generate.return_value = '{"purpose": "p", "status": "s"}'
        service = SummaryService(loader=mock_loader, gateway=mock_gateway)

        summary = await service.summarize()

        assert (summary.purpose, summary.status) == ("p", "s")
        mock_gateway.generate.assert_awaited_once_with(
            build_summary_prompt(csv_text, pdf_text),
            None,
            max_tokens=SUMMARY_MAX_TOKENS,
            temperature=SUMMARY_TEMPERATURE,
        )

    @pytest.mark.asyncio
    async def test_load_failure_should_propagate(self, mock_loader, mock_gateway) -> None:
        async def load(kind: SourceKind) -> str:
            raise DocumentLoadError("File not found", kind=kind.value)

        mock_loader.load.side_effect = load
        service = SummaryService(loader=mock_loader, gateway=mock_gateway)

        with pytest.raises(DocumentLoadError):
            await service.summarize()

        mock_gateway.generate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_generation_failure_should_propagate(self, mock_loader, mock_gateway) -> None:
        mock_gateway.generate.side_effect = GenerationFailure("throttled")
        service = SummaryService(loader=mock_loader, gateway=mock_gateway)

        with pytest.raises(GenerationFailure):
            await service.summarize()
