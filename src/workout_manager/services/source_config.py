"""
Source configuration from a structured note.

The note is a list of `key: value` lines, e.g.

    remote: true
    url: https://example.com/workouts.txt
    auth: dXNlcjpwYXNz

Keys are case-insensitive. Unknown keys are kept in `extra`.
"""

import logging
from typing import Dict, Optional

from pydantic import BaseModel, Field

from workout_manager.config import Settings

logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "yes", "1", "on"}


class SourceConfig(BaseModel):
    """Where the workout document comes from"""
    remote_enabled: Optional[bool] = Field(default=None, description="None means 'not set in the note'")
    url: Optional[str] = None
    auth_token: Optional[str] = None
    extra: Dict[str, str] = Field(default_factory=dict)

    def merged_with(self, settings: Settings) -> "SourceConfig":
        """Fill values the note does not set from application settings."""
        return SourceConfig(
            remote_enabled=(
                self.remote_enabled
                if self.remote_enabled is not None
                else settings.REMOTE_FETCH_ENABLED
            ),
            url=self.url or settings.WORKOUT_SOURCE_URL,
            auth_token=self.auth_token or settings.WORKOUT_SOURCE_AUTH,
            extra=dict(self.extra),
        )


def parse_config_note(text: Optional[str]) -> SourceConfig:
    """Parse a `key: value` note into a SourceConfig; blank or malformed lines are skipped."""
    config = SourceConfig()
    if not text:
        return config

    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip().lower()
        value = value.strip()

        if key == "remote":
            config.remote_enabled = value.lower() in TRUE_VALUES
        elif key == "url":
            config.url = value or None
        elif key == "auth":
            config.auth_token = value or None
        elif key:
            config.extra[key] = value

    logger.debug(f"Parsed source config: remote={config.remote_enabled} url={config.url}")
    return config
