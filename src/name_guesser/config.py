#!/usr/bin/env python

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from .exceptions import ConfigurationError

# --- Configuration ---
DATA_URL = "https://www.ssa.gov/oact/babynames/names.zip"
STATE_DATA_URL = "https://www.ssa.gov/oact/babynames/state/namesbystate.zip"
TERRITORY_DATA_URL = "https://www.ssa.gov/oact/babynames/territory/namesbyterritory.zip"
DATA_DIR = Path("names")
STATE_DATA_DIR = Path("namesbystate")
TERRITORY_DATA_DIR = Path("namesbyterritory")
START_YEAR = 1880
END_YEAR = 2024
DEFAULT_YEARS: Tuple[int, ...] = (2020, 2021, 2022, 2023, 2024)

ENV_PREFIX = "NAME_GUESSER_"

DECADE_MODES = ("coarse", "per_year")


@dataclass
class DataSettings:
    """Where name files live and which years get loaded."""
    data_dir: Path = DATA_DIR
    state_dir: Optional[Path] = STATE_DATA_DIR
    territory_dir: Optional[Path] = TERRITORY_DATA_DIR
    years: Tuple[int, ...] = DEFAULT_YEARS

    def validate(self) -> None:
        for year in self.years:
            if not (START_YEAR <= year <= END_YEAR):
                raise ConfigurationError(
                    f"Year out of range: {year}",
                    config_field="data.years",
                ).add_suggestion(f"Use years between {START_YEAR} and {END_YEAR}")


@dataclass
class ScoringSettings:
    decade_mode: str = "coarse"

    def validate(self) -> None:
        if self.decade_mode not in DECADE_MODES:
            raise ConfigurationError(
                f"Invalid decade mode: {self.decade_mode}",
                config_field="scoring.decade_mode",
            ).add_suggestion(f"Use one of: {DECADE_MODES}")


@dataclass
class RankingSettings:
    top_k: int = 5
    rule_weight: float = 0.7
    ml_weight: float = 0.3
    confidence_noise: float = 3.0
    use_predictor: bool = True

    def validate(self) -> None:
        if self.top_k <= 0:
            raise ConfigurationError("top_k must be positive", config_field="ranking.top_k")
        if abs(self.rule_weight + self.ml_weight - 1.0) > 1e-9:
            raise ConfigurationError(
                "rule_weight and ml_weight must sum to 1",
                config_field="ranking.rule_weight",
            )
        if self.confidence_noise < 0:
            raise ConfigurationError(
                "confidence_noise must be non-negative",
                config_field="ranking.confidence_noise",
            )


@dataclass
class EngineSettings:
    data: DataSettings = field(default_factory=DataSettings)
    scoring: ScoringSettings = field(default_factory=ScoringSettings)
    ranking: RankingSettings = field(default_factory=RankingSettings)
    log_level: str = "INFO"

    def validate(self) -> "EngineSettings":
        self.data.validate()
        self.scoring.validate()
        self.ranking.validate()
        return self

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from NAME_GUESSER_* environment variables."""
        settings = cls()
        env = os.environ

        if data_dir := env.get(f"{ENV_PREFIX}DATA_DIR"):
            settings.data.data_dir = Path(data_dir)
        if state_dir := env.get(f"{ENV_PREFIX}STATE_DIR"):
            settings.data.state_dir = Path(state_dir)
        if territory_dir := env.get(f"{ENV_PREFIX}TERRITORY_DIR"):
            settings.data.territory_dir = Path(territory_dir)
        if years := env.get(f"{ENV_PREFIX}YEARS"):
            try:
                settings.data.years = tuple(int(y) for y in years.split(",") if y.strip())
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid year list: {years}", config_field="data.years"
                ) from e
        if decade_mode := env.get(f"{ENV_PREFIX}DECADE_MODE"):
            settings.scoring.decade_mode = decade_mode
        if top_k := env.get(f"{ENV_PREFIX}TOP_K"):
            try:
                settings.ranking.top_k = int(top_k)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid top_k: {top_k}", config_field="ranking.top_k"
                ) from e
        if log_level := env.get(f"{ENV_PREFIX}LOG_LEVEL"):
            settings.log_level = log_level.upper()

        return settings.validate()
