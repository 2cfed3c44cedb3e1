"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (SEARCHREPO_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from searchrepo.models.page import DEFAULT_PAGE_SIZE, Direction


def _parse_str_list(v: Any) -> list[str]:
    """Parse a list from a JSON string, a comma-separated string or a sequence."""
    if isinstance(v, str):
        try:
            parsed = json.loads(v)
            if isinstance(parsed, list):
                return [str(item) for item in parsed]
        except (json.JSONDecodeError, TypeError):
            pass
        return [part.strip() for part in v.split(",") if part.strip()]
    return [str(item) for item in v]


class OpenSearchSettings(BaseModel):
    """Connection settings for the OpenSearch client."""

    hosts: list[str] = Field(default_factory=lambda: ["http://localhost:9200"], description="Node URLs")
    indices: list[str] = Field(default_factory=list, description="Index names every repository request targets")
    username: str | None = Field(default=None, description="HTTP basic-auth username")
    password: str | None = Field(default=None, description="HTTP basic-auth password")
    verify_certs: bool = Field(default=True, description="Verify TLS certificates")
    timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")
    extra: dict[str, Any] = Field(default_factory=dict, description="Extra AsyncOpenSearch keyword arguments")

    @field_validator("hosts", "indices", mode="before")
    @classmethod
    def _parse_lists(cls, v: Any) -> list[str]:
        """Parse from JSON string (env var), comma-separated string or list."""
        return _parse_str_list(v)


class RepositorySettings(BaseModel):
    """Repository behavior configuration."""

    default_sort_field: str = Field(default="dateTime", min_length=1, description="Sort field when a page request has none")
    default_sort_direction: Direction = Field(default=Direction.ASC, description="Direction of the default sort")
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, description="Page size when none is requested")
    raise_on_error: bool = Field(default=False, description="Raise on transport failures instead of returning empty results")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the SEARCHREPO_ prefix.
    Nested settings use double underscores.

    Example:
        SEARCHREPO_OPENSEARCH__HOSTS='["https://search-1:9200"]'
        SEARCHREPO_OPENSEARCH__INDICES='["users-v1", "users-v2"]'
        SEARCHREPO_REPOSITORY__RAISE_ON_ERROR=true
    """

    model_config = {
        "env_prefix": "SEARCHREPO_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    opensearch: OpenSearchSettings = Field(default_factory=OpenSearchSettings)
    repository: RepositorySettings = Field(default_factory=RepositorySettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

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
