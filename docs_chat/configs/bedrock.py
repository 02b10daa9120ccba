"""
Amazon Bedrock configuration settings.

Model identifiers, region and generation defaults for the embedding and
text-generation capabilities.

Dependencies: pydantic, pydantic_settings
System role: External model configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BedrockSettings(BaseSettings):
    """Bedrock model and runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BEDROCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        protected_namespaces=(),
    )

    region: str = Field(
        default="us-east-1",
        validation_alias=AliasChoices("BEDROCK_REGION", "AWS_REGION"),
        description="AWS region hosting the Bedrock runtime",
    )
    model_id: str = Field(
        default="anthropic.claude-3-haiku-20240307-v1:0",
        description="Bedrock text-generation model ID",
    )
    embed_model_id: str = Field(
        default="amazon.titan-embed-text-v1",
        description="Bedrock embedding model ID",
    )
    max_tokens: int = Field(
        default=500,
        gt=0,
        validation_alias=AliasChoices("BEDROCK_MAX_TOKENS", "MAX_TOKENS"),
        description="Default completion token limit",
    )
    temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Default sampling temperature",
    )
    request_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Per-call timeout for embedding and generation requests",
    )
