"""
Amazon Bedrock gateway.

Exposes the two remote capabilities the app depends on:
``embed(text)`` via Titan embeddings and ``generate(prompt, context)`` via
the Converse API. Every call runs under a timeout; transport errors,
timeouts and malformed responses surface as EmbeddingFailure or
GenerationFailure with the underlying error chained.

Dependencies: langchain_aws, langchain_core, botocore, fastapi.concurrency
System role: External model capability adapter
"""

import asyncio
import logging
import math
from numbers import Real

from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool
from langchain_aws import BedrockEmbeddings, ChatBedrockConverse
from langchain_core.messages import HumanMessage

from docs_chat.configs.bedrock import BedrockSettings
from docs_chat.core.exceptions import EmbeddingFailure, GenerationFailure

logger = logging.getLogger(__name__)

NO_TEXT_RETURNED = "(no text returned)"


def _error_code(error: Exception) -> str | None:
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code")
    return None


def _is_finite_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _message_text(content) -> str:
    """Flatten string or content-block message content into plain text."""
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else "")
            for item in content
        )
    return str(content or "")


class BedrockGateway:
    """Embedding and text-generation calls against Amazon Bedrock."""

    def __init__(
        self,
        settings: BedrockSettings | None = None,
        embeddings: BedrockEmbeddings | None = None,
    ) -> None:
        """
        Initialize Bedrock clients.

        Args:
            settings: Model IDs, region and defaults (loaded from env if None)
            embeddings: Optional pre-built embeddings client
        """
        self._settings = settings or BedrockSettings()
        self._embeddings = embeddings or BedrockEmbeddings(
            model_id=self._settings.embed_model_id,
            region_name=self._settings.region,
        )
        self._chat_models: dict[tuple[int, float], ChatBedrockConverse] = {}
        logger.info(
            f"{__name__}:__init__ - model={self._settings.model_id}, "
            f"embed_model={self._settings.embed_model_id}, region={self._settings.region}"
        )

    @property
    def model_id(self) -> str:
        return self._settings.model_id

    @property
    def embed_model_id(self) -> str:
        return self._settings.embed_model_id

    @property
    def region(self) -> str:
        return self._settings.region

    def _chat_model(self, max_tokens: int, temperature: float) -> ChatBedrockConverse:
        """Get or create a chat model for one (max_tokens, temperature) pair."""
        key = (max_tokens, temperature)
        if key not in self._chat_models:
            self._chat_models[key] = ChatBedrockConverse(
                model=self._settings.model_id,
                region_name=self._settings.region,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        return self._chat_models[key]

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Args:
            text: Input text (callers truncate to the model's input limit)

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingFailure: On transport/service error, timeout or malformed vector
        """
        model_id = self._settings.embed_model_id
        timeout = self._settings.request_timeout_seconds
        try:
            vector = await asyncio.wait_for(
                run_in_threadpool(self._embeddings.embed_query, text),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            raise EmbeddingFailure(
                f"Embedding request timed out after {timeout}s",
                model_id=model_id,
            ) from e
        except (ClientError, BotoCoreError) as e:
            raise EmbeddingFailure(
                f"Bedrock embedding call failed: {e}",
                model_id=model_id,
                details={"error_code": _error_code(e)},
            ) from e
        except Exception as e:
            raise EmbeddingFailure(f"Embedding request failed: {e}", model_id=model_id) from e

        if (
            not isinstance(vector, list)
            or not vector
            or not all(_is_finite_number(value) for value in vector)
        ):
            raise EmbeddingFailure("No embedding returned", model_id=model_id)
        return [float(value) for value in vector]

    async def generate(
        self,
        prompt: str,
        context: str | None = None,
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str:
        """
        Generate text for a prompt with optional context.

        Args:
            prompt: Instruction or question
            context: Text placed before the question, skipped when empty
            max_tokens: Completion limit (settings default if None)
            temperature: Sampling temperature (settings default if None)

        Returns:
            str: Model text, or NO_TEXT_RETURNED when the reply has no text

        Raises:
            GenerationFailure: On transport/service error or timeout
        """
        user_text = f"{context}\n\nQuestion: {prompt}" if context else prompt
        model = self._chat_model(
            max_tokens if max_tokens is not None else self._settings.max_tokens,
            temperature if temperature is not None else self._settings.temperature,
        )
        model_id = self._settings.model_id
        timeout = self._settings.request_timeout_seconds

        try:
            message = await asyncio.wait_for(
                model.ainvoke([HumanMessage(content=user_text)]),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            raise GenerationFailure(
                f"Generation request timed out after {timeout}s",
                model_id=model_id,
            ) from e
        except (ClientError, BotoCoreError) as e:
            raise GenerationFailure(
                f"Bedrock generation call failed: {e}",
                model_id=model_id,
                details={"error_code": _error_code(e)},
            ) from e
        except Exception as e:
            raise GenerationFailure(f"Generation request failed: {e}", model_id=model_id) from e

        text = _message_text(getattr(message, "content", None)).strip()
        return text or NO_TEXT_RETURNED
