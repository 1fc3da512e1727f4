"""
Upstream source configuration.
"""

from typing import Dict
from pydantic import Field
from pydantic_settings import BaseSettings


class SourceConfig(BaseSettings):
    """Configuration for the upstream record source."""

    url: str = Field(
        default="https://api.github.com/repos/elastic/beats/issues",
        description="REST resource returning a JSON array of issues"
    )
    timeout: float = Field(default=30.0, description="HTTP request timeout in seconds")
    headers: Dict[str, str] = Field(
        default_factory=lambda: {
            "Accept": "application/vnd.github+json",
            "User-Agent": "kafkawrite",
        },
        description="Headers sent with the request"
    )

    model_config = {
        "env_prefix": "SOURCE_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
