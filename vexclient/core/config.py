"""Client configuration via Pydantic BaseSettings."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vexclient.core.console import PROTOCOL_VERSION

_log = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    debug: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    # Wire protocol
    protocol_version: str = Field(
        default=PROTOCOL_VERSION,
        description="Version tag sent with every vulnerability exception request",
    )

    # Workflow behaviour
    optimistic_comment_updates: bool = Field(
        default=False,
        description="Write comment updates to the local record before the console confirms them",
    )
    strict_listing: bool = Field(
        default=False,
        description="Raise ConsoleRequestError on a failed listing instead of returning []",
    )

    @model_validator(mode="after")
    def _warn_protocol_version(self) -> "Settings":
        """Emit a warning when the configured protocol version is not the supported one."""
        if self.protocol_version != PROTOCOL_VERSION:
            _log.warning(
                "Protocol version '%s' differs from supported version '%s'",
                self.protocol_version,
                PROTOCOL_VERSION,
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
