"""Application settings loaded from YAML."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from mealwise.data_layer.exceptions import SettingsError

LOG_LEVEL_ENV_VAR = "MEALWISE_LOG_LEVEL"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Settings:
    """Settings for the recommendation and shopping list adapters."""

    min_overall_score: int = 40  # Recommendations must score strictly above this
    recommendation_limit: Optional[int] = 5
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate ranges and the log level name."""
        if not 0 <= self.min_overall_score <= 100:
            raise SettingsError(
                f"min_overall_score must be between 0 and 100, got {self.min_overall_score}"
            )
        if self.recommendation_limit is not None and self.recommendation_limit < 1:
            raise SettingsError(
                f"recommendation limit must be positive, got {self.recommendation_limit}"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise SettingsError(f"Unknown log level '{self.log_level}'")


class SettingsLoader:
    """Loader for settings configuration from YAML."""

    def __init__(self, yaml_path: str):
        """Initialize settings loader from YAML file.

        Args:
            yaml_path: Path to YAML settings file
        """
        self.yaml_path = Path(yaml_path)

    def load(self) -> Settings:
        """Load settings from the YAML file.

        A missing file yields the built-in defaults. The log level can be
        overridden with the MEALWISE_LOG_LEVEL environment variable.

        Returns:
            Settings object

        Raises:
            SettingsError: If the file is not valid YAML or holds bad values
        """
        data: Dict[str, Any] = {}
        if self.yaml_path.exists():
            try:
                with open(self.yaml_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise SettingsError(f"Invalid YAML in {self.yaml_path}: {exc}") from exc
            if not isinstance(data, dict):
                raise SettingsError(f"{self.yaml_path} must contain a mapping")

        recommendations = self._section(data, "recommendations")
        logging_section = self._section(data, "logging")

        try:
            min_score = int(recommendations.get("min_overall_score", 40))
            limit = recommendations.get("limit", 5)
            limit = int(limit) if limit is not None else None
        except (TypeError, ValueError) as exc:
            raise SettingsError(f"Invalid recommendations settings: {exc}") from exc

        log_level = os.environ.get(LOG_LEVEL_ENV_VAR) or logging_section.get("level", "INFO")

        return Settings(
            min_overall_score=min_score,
            recommendation_limit=limit,
            log_level=str(log_level),
        )

    @staticmethod
    def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise SettingsError(f"'{name}' section must be a mapping")
        return section
