"""
Runtime settings for dirtools.

Values come from the environment, optionally populated from a .env file in the
working directory.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_IGNORE_NAMES = frozenset({".DS_Store"})

_TRUTHY = {"1", "true", "yes", "on"}


def _parse_names(raw: str | None) -> frozenset[str]:
    if raw is None:
        return DEFAULT_IGNORE_NAMES
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


@dataclass
class Settings:
    ignore_names: frozenset[str] = DEFAULT_IGNORE_NAMES
    verbose: bool = False


def load_settings() -> Settings:
    """
    Build settings from environment variables.

    DIRTOOLS_IGNORE_NAMES: comma-separated base names to skip (default ".DS_Store").
    DIRTOOLS_VERBOSE: enable [INFO] output from library calls.
    """
    return Settings(
        ignore_names=_parse_names(os.environ.get("DIRTOOLS_IGNORE_NAMES")),
        verbose=os.environ.get("DIRTOOLS_VERBOSE", "").strip().lower() in _TRUTHY,
    )


# Global settings instance
settings = load_settings()
