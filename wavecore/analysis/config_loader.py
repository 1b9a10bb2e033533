"""
YAML configuration loader for analysis settings.

Loads analysis configurations from YAML files, allowing parameters to be
shared and tuned without code changes. Missing keys fall back to the
centralized defaults.
"""
import yaml
from pathlib import Path
from typing import Any, Dict, Union

from .config import AnalysisConfig
from ..shared.defaults import (
    PIVOT_DEPTH, MIN_CANDLES, MIN_PIVOTS,
    PIVOT_WINDOW, TREND_LOOKBACK, PROJECTION_STEPS,
    ENTRY_BAND_LOW, ENTRY_BAND_HIGH, FALLBACK_TARGET_MULTIPLIER,
)


def load_config_from_yaml(yaml_path: Union[str, Path]) -> AnalysisConfig:
    """
    Load analysis configuration from YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        AnalysisConfig object

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is empty or holds invalid values
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config_dict = yaml.safe_load(f)

    if not config_dict:
        raise ValueError(f"Empty config file: {yaml_path}")
    if not isinstance(config_dict, dict):
        raise ValueError(f"Config file must contain a mapping: {yaml_path}")

    return config_from_dict(config_dict, default_name=yaml_path.stem)


def config_from_dict(config_dict: Dict[str, Any], default_name: str = "default") -> AnalysisConfig:
    """Build an AnalysisConfig from the nested YAML structure."""
    pivots = config_dict.get('pivots', {}) or {}
    trend = config_dict.get('trend', {}) or {}
    validation = config_dict.get('validation', {}) or {}
    projection = config_dict.get('projection', {}) or {}
    trade_setup = config_dict.get('trade_setup', {}) or {}

    return AnalysisConfig(
        name=config_dict.get('name', default_name),
        description=config_dict.get('description', ''),

        pivot_depth=int(pivots.get('depth', PIVOT_DEPTH)),
        pivot_window=int(pivots.get('window', PIVOT_WINDOW)),

        trend_lookback=int(trend.get('lookback', TREND_LOOKBACK)),

        min_candles=int(validation.get('min_candles', MIN_CANDLES)),
        min_pivots=int(validation.get('min_pivots', MIN_PIVOTS)),

        projection_steps=int(projection.get('steps', PROJECTION_STEPS)),

        entry_band_low=float(trade_setup.get('entry_band_low', ENTRY_BAND_LOW)),
        entry_band_high=float(trade_setup.get('entry_band_high', ENTRY_BAND_HIGH)),
        fallback_target_multiplier=float(
            trade_setup.get('fallback_target_multiplier', FALLBACK_TARGET_MULTIPLIER)
        ),
    )


def save_config_to_yaml(config: AnalysisConfig, yaml_path: Union[str, Path]) -> None:
    """
    Save analysis configuration to YAML file.

    Args:
        config: AnalysisConfig to save
        yaml_path: Path to save YAML file
    """
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = {
        'name': config.name,
        'description': config.description,
        'pivots': {
            'depth': config.pivot_depth,
            'window': config.pivot_window,
        },
        'trend': {
            'lookback': config.trend_lookback,
        },
        'validation': {
            'min_candles': config.min_candles,
            'min_pivots': config.min_pivots,
        },
        'projection': {
            'steps': config.projection_steps,
        },
        'trade_setup': {
            'entry_band_low': config.entry_band_low,
            'entry_band_high': config.entry_band_high,
            'fallback_target_multiplier': config.fallback_target_multiplier,
        },
    }

    with open(yaml_path, 'w') as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
