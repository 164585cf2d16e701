"""Centralized configuration management for the franchise fit scorer."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class FullWeightsConfig(BaseModel):
    """Composite weights for the six-dimension scoring model.

    These weights control how much each dimension contributes to the
    final fit score. They should sum to 1.0.
    """
    financial: float = Field(0.25, description="Weight for budget and capital readiness")
    category: float = Field(0.20, description="Weight for industry interest match")
    style: float = Field(0.15, description="Weight for ownership style and operating fit")
    risk: float = Field(0.15, description="Weight for risk tolerance alignment")
    experience: float = Field(0.15, description="Weight for background vs. franchise complexity")
    growth: float = Field(0.10, description="Weight for growth ambition and commitment")


class ClassicWeightsConfig(BaseModel):
    """Composite weights for the four-dimension scoring model."""
    financial: float = Field(0.35, description="Weight for budget fit")
    category: float = Field(0.25, description="Weight for industry interest match")
    style: float = Field(0.20, description="Weight for ownership style fit")
    risk: float = Field(0.20, description="Weight for risk tolerance alignment")


class ExplainerThresholdsConfig(BaseModel):
    """Thresholds for match tiers and fit summaries.

    Tiers mirror the colour bands of the results page: 90+ excellent,
    80+ strong.
    """
    excellent_score: int = Field(90, description="Minimum composite score for an Excellent match")
    strong_score: int = Field(80, description="Minimum composite score for a Strong match")
    fair_score: int = Field(60, description="Minimum composite score for a Fair match")
    strength_threshold: int = Field(80, description="Dimension score at or above which it is a strength")
    concern_threshold: int = Field(40, description="Dimension score at or below which it is a concern")


class OutputConfig(BaseModel):
    """Configuration for result presentation."""
    max_results: int = Field(15, description="Number of ranked franchises to show")
    highlight_count: int = Field(3, description="Number of top matches shown with a full breakdown")


class FitConfig(BaseModel):
    """Complete configuration for the franchise fit scorer."""
    full_weights: FullWeightsConfig = Field(default_factory=FullWeightsConfig)
    classic_weights: ClassicWeightsConfig = Field(default_factory=ClassicWeightsConfig)
    explainer: ExplainerThresholdsConfig = Field(default_factory=ExplainerThresholdsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


_config: Optional[FitConfig] = None


def get_config() -> FitConfig:
    """The active configuration, defaults until a file is loaded."""
    global _config
    if _config is None:
        _config = FitConfig()
    return _config


def load_config(path: Path) -> FitConfig:
    """Load a YAML config file and make it the active configuration.

    Raises:
        OSError, yaml.YAMLError, pydantic.ValidationError: on an unreadable
            or invalid file; the previous configuration stays active.
    """
    global _config

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    _config = FitConfig.model_validate(data or {})
    return _config


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _config
    _config = FitConfig()


def find_config_file() -> Optional[Path]:
    """Find a fit scorer configuration file.

    Looks in (order of priority):
    1. FRANCHISE_FIT_CONFIG environment variable
    2. ./fit-config.yaml
    3. ./fit-config.yml
    4. ~/.config/franchise-fit/config.yaml
    """
    env_path = os.environ.get("FRANCHISE_FIT_CONFIG")
    if env_path:
        path = Path(env_path)
        if path.exists():
            return path

    for name in ["fit-config.yaml", "fit-config.yml"]:
        path = Path(name)
        if path.exists():
            return path

    user_config = Path.home() / ".config" / "franchise-fit" / "config.yaml"
    if user_config.exists():
        return user_config

    return None


def save_default_config(path: Path) -> None:
    """Write the default configuration as commented YAML."""
    data = FitConfig().model_dump()

    yaml_content = """# Franchise Fit Scorer Configuration
# Composite weights, match tiers and result limits. All keys are optional.

"""
    yaml_content += yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(yaml_content)
