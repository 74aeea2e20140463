"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (when loaded with ``Settings.from_yaml``)
  2. Environment variables (SCOUT_ prefix)
  3. Default values

The layout mirrors the ``scout.elasticsearch`` configuration block::

    driver: elasticsearch
    elasticsearch:
      index: scout
      config:
        hosts: ["http://localhost:9200"]
        ssl:
          enabled: true
          certificate: /etc/ssl/certs/es-ca.pem
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class SSLSettings(BaseModel):
    """TLS verification for the search client."""

    enabled: bool = Field(default=False, description="Verify TLS certificates of the search nodes")
    certificate: str | None = Field(default=None, description="Path to a CA bundle used for verification")


class ClientSettings(BaseModel):
    """Connection settings used to build the search client."""

    hosts: list[str] = Field(default=["http://localhost:9200"], description="Search node URLs")
    ssl: SSLSettings = Field(default_factory=SSLSettings)

    @field_validator("hosts", mode="before")
    @classmethod
    def _parse_hosts(cls, v: Any) -> list[str]:
        """Parse hosts from JSON string (env var) or list."""
        if isinstance(v, str):
            import json

            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(h) for h in parsed]
            except (json.JSONDecodeError, TypeError):
                pass
            # Single host as plain string
            return [v] if v else []
        return list(v)


class ElasticsearchSettings(BaseModel):
    """Elasticsearch engine configuration."""

    index: str = Field(default="scout", description="Index every searchable model is written to")
    include_type: bool = Field(
        default=False,
        description="Send the model's search category as _type in bulk metadata (legacy clusters with mapping types)",
    )
    config: ClientSettings = Field(default_factory=ClientSettings)


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the SCOUT_ prefix.
    Nested settings use double underscores: SCOUT_ELASTICSEARCH__INDEX=posts

    Example:
        SCOUT_DRIVER=elasticsearch
        SCOUT_ELASTICSEARCH__CONFIG__HOSTS='["https://es-1:9200", "https://es-2:9200"]'
        SCOUT_ELASTICSEARCH__CONFIG__SSL__ENABLED=true
    """

    model_config = {
        "env_prefix": "SCOUT_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    driver: str = Field(default="elasticsearch", description="Search driver used by default")

    elasticsearch: ElasticsearchSettings = Field(default_factory=ElasticsearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are passed as explicit arguments, so they
        override environment variables for the keys they set.

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
