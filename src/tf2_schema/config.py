"""
Configuration for Steam Web API schema clients.
"""

import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from .constants import DEFAULT_LANGUAGE, DEFAULT_TIMEOUT, DEFAULT_VERSION

logger = logging.getLogger("tf2-schema")

API_KEY_ENV = "STEAM_WEB_API_KEY"


class SchemaSettings(BaseModel):
    """Settings for fetching the item schema."""

    api_key: str = Field(min_length=1, description="Steam Web API key")
    version: str = Field(default=DEFAULT_VERSION, description="Schema API version, e.g. 'v0001'")
    language: str = Field(default=DEFAULT_LANGUAGE, description="ISO 639 language code for localized names")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0, description="HTTP timeout in seconds")
    max_pages: int | None = Field(
        default=None,
        ge=1,
        description="Upper bound on GetSchemaItems pages; None follows the cursor to the end",
    )

    def __repr__(self) -> str:
        return (
            f"SchemaSettings(version={self.version!r}, language={self.language!r}, "
            f"timeout={self.timeout}, max_pages={self.max_pages})"
        )

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "SchemaSettings":
        """
        Build settings from environment variables.

        Reads STEAM_WEB_API_KEY, TF2_SCHEMA_VERSION, TF2_SCHEMA_LANGUAGE,
        TF2_SCHEMA_TIMEOUT and TF2_SCHEMA_MAX_PAGES, after loading a
        ``.env`` file if ``dotenv`` is set.

        Raises:
            ValueError: If no API key is configured
        """
        if dotenv and not load_dotenv(find_dotenv(usecwd=True)):
            logger.debug(".env file not found, using process environment only")

        api_key = os.getenv(API_KEY_ENV)
        if not api_key:
            raise ValueError(f"No Steam Web API key configured. Set the {API_KEY_ENV} environment variable.")

        max_pages = os.getenv("TF2_SCHEMA_MAX_PAGES")
        return cls(
            api_key=api_key,
            version=os.getenv("TF2_SCHEMA_VERSION") or DEFAULT_VERSION,
            language=os.getenv("TF2_SCHEMA_LANGUAGE") or DEFAULT_LANGUAGE,
            timeout=float(os.getenv("TF2_SCHEMA_TIMEOUT") or DEFAULT_TIMEOUT),
            max_pages=int(max_pages) if max_pages else None,
        )
