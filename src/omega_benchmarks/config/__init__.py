"""Configuration management for Omega Benchmarks.

Provides the run settings and random seed management for reproducible datasets.
"""

from .settings import get_config, Settings
from .random_state import resolve_seed, unit_rng
from .defaults import REFERENCE_CONFIG, RESEARCH_CONFIGS, VARIANTS, DefaultConfig, validate_config

__all__ = [
    'get_config',
    'resolve_seed',
    'unit_rng',
    'Settings',
    'REFERENCE_CONFIG',
    'RESEARCH_CONFIGS',
    'VARIANTS',
    'DefaultConfig',
    'validate_config'
]
