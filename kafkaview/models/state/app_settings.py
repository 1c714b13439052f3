"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from kafkaview.constants.defaults import (
    EXPORT_PATH_DEFAULT,
    MAX_RECORDS_DEFAULT,
    PAGE_SIZE_DEFAULT,
    RECORD_URL_TEMPLATE_DEFAULT,
    SEARCH_HISTORY_SIZE_DEFAULT,
    THEME_DEFAULT,
    VIEWPORT_HEIGHT_DEFAULT,
)
from kafkaview.constants.limits import (
    MAX_RECORDS_MAX,
    MAX_RECORDS_MIN,
    PAGE_SIZE_MAX,
    PAGE_SIZE_MIN,
    SEARCH_HISTORY_SIZE_MAX,
    SEARCH_HISTORY_SIZE_MIN,
    VIEWPORT_HEIGHT_MIN,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Paths
    export_path: str = EXPORT_PATH_DEFAULT
    log_file: str = ""

    # UI preferences
    theme: str = THEME_DEFAULT
    viewport_height: int = Field(
        default=VIEWPORT_HEIGHT_DEFAULT, ge=VIEWPORT_HEIGHT_MIN
    )

    # Search
    search_history_size: int = Field(
        default=SEARCH_HISTORY_SIZE_DEFAULT,
        ge=SEARCH_HISTORY_SIZE_MIN,
        le=SEARCH_HISTORY_SIZE_MAX,
    )
    search_history: list[str] = []

    # Record source
    max_records: int = Field(
        default=MAX_RECORDS_DEFAULT, ge=MAX_RECORDS_MIN, le=MAX_RECORDS_MAX
    )
    page_size: int = Field(default=PAGE_SIZE_DEFAULT, ge=PAGE_SIZE_MIN, le=PAGE_SIZE_MAX)

    # Browser launcher, e.g. "https://kafka-ui/topics/{topic}/{partition}/{offset}"
    record_url_template: str = RECORD_URL_TEMPLATE_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSaveError",
]
