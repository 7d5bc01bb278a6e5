"""Top-level csvviz configuration."""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .analysis import ChartLimitsConfig, InferenceConfig
from .system import LoggingConfig

ENV_PREFIX = "CSVVIZ_"


class CsvVizConfig:
    """
    Main configuration class for csvviz.

    Combines configuration from multiple sources:
    - Default values
    - Configuration file (JSON)
    - Environment variables

    The configuration is organized into logical sections:
    - inference: thresholds and name hints for column role inference
    - charts: output limits and bar color strategy
    - logging: settings for the logging system

    Loading order (highest to lowest priority):
    1. Environment variables
    2. Configuration file (if provided)
    3. Default values
    """

    def __init__(self, config_file: str | None = None):
        self.inference = InferenceConfig()
        self.charts = ChartLimitsConfig()
        self.logging = LoggingConfig()

        if config_file:
            self._load_from_file(config_file)

        self._load_from_env()

    def _load_from_env(self) -> None:
        """
        Load configuration from environment variables.

        Supported environment variables:
        - CSVVIZ_NUMERIC_RATIO: Fraction of numeric cells for the numeric role
        - CSVVIZ_CATEGORICAL_RATIO: Distinct-value ratio below which a column is categorical
        - CSVVIZ_BAR_MAX_GROUPS: Maximum bars in a bar chart
        - CSVVIZ_PIE_MAX_SLICES: Maximum slices in a pie chart
        - CSVVIZ_LINE_MAX_POINTS: Maximum points in a line chart
        - CSVVIZ_BAR_COLOR_STRATEGY: "index" or "random"
        - CSVVIZ_RANDOM_SEED: Seed for the random bar color strategy
        - CSVVIZ_LOG_LEVEL: Logging level
        - CSVVIZ_LOG_FILE: Log file path
        """
        inference_env = {
            "NUMERIC_RATIO": "numeric_ratio",
            "CATEGORICAL_RATIO": "categorical_ratio",
        }
        for suffix, attr in inference_env.items():
            raw = os.getenv(f"{ENV_PREFIX}{suffix}")
            if raw:
                setattr(self.inference, attr, raw.strip())
        self.inference.validate()

        charts_env = {
            "BAR_MAX_GROUPS": "bar_max_groups",
            "PIE_MAX_SLICES": "pie_max_slices",
            "LINE_MAX_POINTS": "line_max_points",
            "BAR_COLOR_STRATEGY": "bar_color_strategy",
            "RANDOM_SEED": "random_seed",
        }
        for suffix, attr in charts_env.items():
            raw = os.getenv(f"{ENV_PREFIX}{suffix}")
            if raw:
                setattr(self.charts, attr, raw.strip())
        self.charts.validate()

        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            self.logging.level = log_level
        log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
        if log_file:
            self.logging.file = log_file
        self.logging.validate()

    def _load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a JSON file.

        The file should have sections matching the configuration classes:
        {
            "inference": { ... },
            "charts": { ... },
            "logging": { ... }
        }

        Raises:
            ValueError: If the file cannot be read or parsed
        """
        if not os.path.exists(config_file):
            return
        try:
            with open(config_file, encoding="utf-8") as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to load configuration from {config_file}: {e}")

        if not isinstance(config_data, dict):
            raise ValueError(
                f"Failed to load configuration from {config_file}: expected a JSON object"
            )

        for section in ("inference", "charts", "logging"):
            values = config_data.get(section)
            if isinstance(values, dict):
                self._apply_section(getattr(self, section), values)

    def _apply_section(self, config_obj: Any, values: dict[str, Any]) -> None:
        for key, value in values.items():
            if hasattr(config_obj, key):
                if isinstance(value, list):
                    value = tuple(value)
                setattr(config_obj, key, value)
        if hasattr(config_obj, "validate"):
            config_obj.validate()

    def to_dict(self) -> dict[str, Any]:
        """Return a complete configuration snapshot as a dictionary."""
        snapshot = {
            "inference": asdict(self.inference),
            "charts": asdict(self.charts),
            "logging": asdict(self.logging),
        }
        for key in ("sequential_name_hints", "geographic_name_hints"):
            snapshot["inference"][key] = list(snapshot["inference"][key])
        return snapshot

    def save_to_file(self, config_file: str) -> None:
        """Save current configuration to a JSON file."""
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)


# Global configuration instance
_config: CsvVizConfig | None = None
_env_loaded = False


def _load_dotenv() -> None:
    global _env_loaded
    if _env_loaded:
        return
    _env_loaded = True
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)


def get_config() -> CsvVizConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _load_dotenv()
        _config = CsvVizConfig()
    return _config


def set_config(config: CsvVizConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def load_config(config_file: str) -> CsvVizConfig:
    """Load configuration from file and set as global config."""
    _load_dotenv()
    config = CsvVizConfig(config_file)
    set_config(config)
    return config


def reset_config() -> None:
    """Drop the global configuration so the next access rebuilds it."""
    global _config
    _config = None
