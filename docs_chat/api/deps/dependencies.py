"""
Dependency injection container.

Application context holding the shared index state and services, plus
FastAPI dependency providers that read it from ``app.state``.

Dependencies: fastapi, docs_chat.configs, docs_chat.application, docs_chat.core, docs_chat.boundary
System role: DI container for service injection
"""

import asyncio
import logging

from fastapi import Request

from docs_chat.application.services import ChatService, SummaryService
from docs_chat.boundary.aws.bedrock_client import BedrockGateway
from docs_chat.boundary.documents.loader import DocumentLoader
from docs_chat.configs import Settings
from docs_chat.core.retrieval import IndexBuilder, IndexState, RetrievalService

logger = logging.getLogger(__name__)


class AppContext:
    """Container for the process-wide index state and service instances."""

    def __init__(
        self,
        settings: Settings,
        gateway: BedrockGateway | None = None,
        loader: DocumentLoader | None = None,
    ) -> None:
        """
        Wire services around one shared IndexState.

        Args:
            settings: Application settings
            gateway: Bedrock gateway (built from settings if None)
            loader: Document loader (built from settings if None)
        """
        self.settings = settings
        self.index_state = IndexState()
        self.gateway = gateway or BedrockGateway(settings.bedrock)
        self.loader = loader or DocumentLoader(settings.documents)
        self.index_builder = IndexBuilder(
            state=self.index_state,
            loader=self.loader,
            gateway=self.gateway,
            settings=settings.retrieval,
        )
        self.retrieval = RetrievalService(
            state=self.index_state,
            gateway=self.gateway,
            settings=settings.retrieval,
        )
        self.chat_service = ChatService(retrieval=self.retrieval, gateway=self.gateway)
        self.summary_service = SummaryService(loader=self.loader, gateway=self.gateway)
        self._build_task: asyncio.Task | None = None

    def start_index_build(self) -> asyncio.Task:
        """
        Start the index build in the background.

        Returns the running task if a build was already started and is
        still in progress.
        """
        if self._build_task is not None and not self._build_task.done():
            return self._build_task
        self._build_task = asyncio.create_task(
            self.index_builder.build(),
            name="index-build",
        )
        return self._build_task

    async def aclose(self) -> None:
        """Cancel an unfinished index build."""
        task = self._build_task
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.info("Index build cancelled on shutdown")


def get_app_context(request: Request) -> AppContext:
    """Get the application context created by the lifespan."""
    return request.app.state.context


def get_index_state(request: Request) -> IndexState:
    """Get the shared index state."""
    return get_app_context(request).index_state


def get_gateway(request: Request) -> BedrockGateway:
    """Get the Bedrock gateway."""
    return get_app_context(request).gateway


def get_chat_service(request: Request) -> ChatService:
    """Get the chat service."""
    return get_app_context(request).chat_service


def get_summary_service(request: Request) -> SummaryService:
    """Get the summary service."""
    return get_app_context(request).summary_service
