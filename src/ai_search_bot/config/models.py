"""Pydantic configuration models for search bot components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

# ============================================================
# Search Provider Configs
# ============================================================


class GoogleSearchConfig(BaseModel):
    """Configuration for GoogleSearchProvider."""

    type: Literal["google"] = "google"
    num_results: int = Field(default=10, ge=1, le=10)
    timeout: float = 30.0

    model_config = {"frozen": True}


class ExaSearchConfig(BaseModel):
    """Configuration for ExaSearchProvider."""

    type: Literal["exa"] = "exa"
    num_results: int = Field(default=10, ge=1)

    model_config = {"frozen": True}


SearchConfig = Annotated[
    GoogleSearchConfig | ExaSearchConfig,
    Field(discriminator="type"),
]


# ============================================================
# Generator Configs
# ============================================================


class ClaudeGeneratorConfig(BaseModel):
    """Configuration for ClaudeGenerator."""

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"

    model_config = {"frozen": True}


class CloudflareGeneratorConfig(BaseModel):
    """Configuration for CloudflareGenerator."""

    type: Literal["cloudflare"] = "cloudflare"
    model: str = "@cf/meta/llama-3.1-8b-instruct"
    timeout: float = 30.0

    model_config = {"frozen": True}


GeneratorConfig = Annotated[
    ClaudeGeneratorConfig | CloudflareGeneratorConfig,
    Field(discriminator="type"),
]


# ============================================================
# Enrichment / Delivery Configs
# ============================================================


class EnricherConfig(BaseModel):
    """Output limits and fallback text for result enrichment."""

    insight_max_tokens: int = Field(default=120, gt=0)
    summary_max_tokens: int = Field(default=180, gt=0)
    fallback_insight: str = "AI analysis unavailable."

    model_config = {"frozen": True}


class DeliveryConfig(BaseModel):
    """Pacing between messages of one response."""

    section_pause_seconds: float = Field(default=0.3, ge=0.0)
    result_pause_seconds: float = Field(default=0.4, ge=0.0)

    model_config = {"frozen": True}


class TelegramConfig(BaseModel):
    """Configuration for TelegramChannel."""

    disable_web_page_preview: bool = True
    timeout: float = 30.0

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class BotConfig(BaseModel):
    """Root configuration for the search bot."""

    search: SearchConfig = Field(default_factory=GoogleSearchConfig)
    generator: GeneratorConfig = Field(default_factory=ClaudeGeneratorConfig)
    enricher: EnricherConfig = Field(default_factory=EnricherConfig)
    delivery: DeliveryConfig = Field(default_factory=DeliveryConfig)
    telegram: TelegramConfig = Field(default_factory=TelegramConfig)

    model_config = {"frozen": True}
