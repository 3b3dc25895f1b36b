"""Application settings — Pydantic-based configuration with YAML and env var support.

The sort client itself never reads the environment; these settings are a
convenience for applications that embed it.

Configuration is loaded from (in order of precedence):
  1. Environment variables (VIBESORT_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class SortSettings(BaseModel):
    """Chat-completion endpoint used for sorting.

    Any OpenAI-compatible endpoint works. The defaults point at Gemini's
    OpenAI-compatible API.
    """

    api_key: str = Field(default="", description="Endpoint API key")
    model: str = Field(default="gemini-2.5-flash-lite", description="Model identifier")
    base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai",
        description="API root; '/chat/completions' is appended",
    )
    timeout: float | None = Field(default=None, description="Request timeout in seconds (None = no timeout)")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the VIBESORT_ prefix.
    Nested settings use double underscores.

    Example:
        VIBESORT_AI__API_KEY=sk-...
        VIBESORT_AI__MODEL=gpt-4o-mini
        VIBESORT_AI__BASE_URL=https://api.openai.com/v1
        VIBESORT_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "VIBESORT_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    ai: SortSettings = Field(default_factory=SortSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        still take precedence.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
