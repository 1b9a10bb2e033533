"""
Analysis pipeline and its supporting pieces.

- ElliottWaveAnalyzer / analyze_elliott_waves: full pipeline
- AnalysisConfig and the YAML loader
- TargetCalculator: entry/stop/target from projections
- generate_thematic_story: bull and bear narratives
"""
from .config import AnalysisConfig, DEFAULT_CONFIG
from .config_loader import load_config_from_yaml, save_config_to_yaml
from .result import (
    AnalysisError,
    AnalysisOutcome,
    AnalysisResult,
    ErrorKind,
    StructuralPoint,
    ThematicStory,
    TradeSetup,
)
from .trade_setup import TargetCalculator
from .narrative import generate_thematic_story
from .pipeline import ElliottWaveAnalyzer, analyze_elliott_waves, measure_w1_length

__all__ = [
    'AnalysisConfig',
    'DEFAULT_CONFIG',
    'load_config_from_yaml',
    'save_config_to_yaml',
    'AnalysisError',
    'AnalysisOutcome',
    'AnalysisResult',
    'ErrorKind',
    'StructuralPoint',
    'ThematicStory',
    'TradeSetup',
    'TargetCalculator',
    'generate_thematic_story',
    'ElliottWaveAnalyzer',
    'analyze_elliott_waves',
    'measure_w1_length',
]
