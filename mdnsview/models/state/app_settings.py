"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from mdnsview.constants.defaults import (
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    NEAR_END_ROWS_DEFAULT,
    SHOW_SUBTYPES_DEFAULT,
    SORT_DIRECTION_DEFAULT,
    SORT_FIELD_DEFAULT,
)
from mdnsview.constants.enums import SortDirection, SortField
from mdnsview.constants.limits import (
    METRICS_INTERVAL_MIN,
    NEAR_END_ROWS_MIN,
    REDRAW_INTERVAL_MIN,
)
from mdnsview.constants.timeouts import (
    METRICS_INTERVAL_DEFAULT,
    REDRAW_INTERVAL_DEFAULT,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=False)

    # View preferences
    default_sort_field: SortField = SORT_FIELD_DEFAULT
    default_sort_direction: SortDirection = SORT_DIRECTION_DEFAULT
    show_subtypes: bool = SHOW_SUBTYPES_DEFAULT

    # Selection behaviour after pruning offline services
    near_end_rows: int = Field(default=NEAR_END_ROWS_DEFAULT, ge=NEAR_END_ROWS_MIN)

    # Cadence
    metrics_interval: float = Field(default=METRICS_INTERVAL_DEFAULT, ge=METRICS_INTERVAL_MIN)
    redraw_interval: float = Field(default=REDRAW_INTERVAL_DEFAULT, ge=REDRAW_INTERVAL_MIN)

    # Logging
    log_file: str = LOG_FILE_DEFAULT
    log_level: str = LOG_LEVEL_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
