"""Browsing settings models."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from firescope.constants.defaults import (
    FILTER_CHAR_LIMIT_DEFAULT,
    PAGE_SIZE_MIN_DEFAULT,
)
from firescope.constants.limits import (
    FILTER_CHAR_LIMIT_MAX,
    FILTER_CHAR_LIMIT_MIN,
    MIN_VISIBLE_ROWS,
    PAGE_SIZE_MIN_CEILING,
    PAGE_SIZE_MIN_FLOOR,
)

logger = logging.getLogger(__name__)


class BrowseSettings(BaseModel):
    """Tunables shared by every table view, with validation."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Navigation
    page_size_min: int = Field(
        default=PAGE_SIZE_MIN_DEFAULT,
        ge=PAGE_SIZE_MIN_FLOOR,
        le=PAGE_SIZE_MIN_CEILING,
    )
    min_visible_rows: int = Field(default=MIN_VISIBLE_ROWS, ge=MIN_VISIBLE_ROWS)

    # Filter input
    filter_char_limit: int = Field(
        default=FILTER_CHAR_LIMIT_DEFAULT,
        ge=FILTER_CHAR_LIMIT_MIN,
        le=FILTER_CHAR_LIMIT_MAX,
    )


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


def load_browse_settings(raw: Mapping[str, Any] | None = None) -> BrowseSettings:
    """Build settings from a plain mapping, falling back to defaults.

    Raises:
        ConfigLoadError: If any value fails validation.
    """
    if not raw:
        return BrowseSettings()
    try:
        return BrowseSettings.model_validate(dict(raw))
    except ValidationError as exc:
        logger.debug("Rejected browse settings %r: %s", raw, exc)
        raise ConfigLoadError(f"Invalid browse settings: {exc}") from exc
