"""AWS boundary adapters."""

from docs_chat.boundary.aws.bedrock_client import NO_TEXT_RETURNED, BedrockGateway

__all__ = ["BedrockGateway", "NO_TEXT_RETURNED"]
