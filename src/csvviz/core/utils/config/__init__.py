from .analysis import ChartLimitsConfig, InferenceConfig
from .system import LoggingConfig
from .main import (
    CsvVizConfig,
    ENV_PREFIX,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from .base import (
    BAR_MAX_GROUPS,
    GEOGRAPHIC_NAME_HINTS,
    LINE_MAX_POINTS,
    PIE_MAX_SLICES,
    SEQUENTIAL_NAME_HINTS,
    UNKNOWN_LABEL,
)

# Short alias used by callers that only need "the config"
Config = CsvVizConfig

__all__ = [
    "Config",
    "CsvVizConfig",
    "InferenceConfig",
    "ChartLimitsConfig",
    "LoggingConfig",
    "ENV_PREFIX",
    "get_config",
    "set_config",
    "load_config",
    "reset_config",
    "BAR_MAX_GROUPS",
    "PIE_MAX_SLICES",
    "LINE_MAX_POINTS",
    "SEQUENTIAL_NAME_HINTS",
    "GEOGRAPHIC_NAME_HINTS",
    "UNKNOWN_LABEL",
]
