"""Main configuration settings with TOML loading support."""

from dataclasses import dataclass, field, asdict
from typing import Tuple, Optional, Dict, Any, Union
from pathlib import Path
import logging

try:
    import tomllib  # Python 3.11+
except ImportError:
    try:
        import tomli as tomllib  # Fallback for older Python
    except ImportError:
        tomllib = None

try:
    import tomli_w
except ImportError:
    tomli_w = None

from .defaults import (
    RESEARCH_CONFIGS, VARIANTS, MIN_ALPHABET_SIZE, MAX_ALPHABET_SIZE, MIN_AUTOMATON_SIZE,
    DefaultConfig, validate_config
)

logger = logging.getLogger(__name__)

# Sequence-valued fields; TOML hands them over as lists
_TUPLE_FIELDS = ('automaton_sizes', 'train_sizes', 'variants')

@dataclass(frozen=True)
class Settings:
    """Immutable settings for one benchmark generation run.

    Settings are passed explicitly through the pipeline; nothing reads them
    from module state. They can be loaded from TOML files or created from a
    named preset.
    """

    # Alphabet and automaton scale
    alphabet_size: int = 2
    automaton_sizes: Tuple[int, ...] = (4,)
    automata_per_size: int = 2

    # Word sample scale
    train_sizes: Tuple[int, ...] = (100,)
    test_size: int = 1000
    sets_per_size: int = 2

    # Random automaton parameters
    acceptance_lambda: float = 0.95
    variants: Tuple[str, ...] = ("dba",)
    priority_count: Optional[int] = None

    # Rejection sampling ceiling, None loops until success
    max_attempts: Optional[int] = 100_000

    # Output
    output_dir: str = "output"

    # Reproducibility
    random_seed: Optional[int] = None

    verbose: bool = False

    def __post_init__(self):
        """Normalise sequence fields and reject malformed settings."""
        for name in _TUPLE_FIELDS:
            object.__setattr__(self, name, tuple(getattr(self, name)))

        if not MIN_ALPHABET_SIZE <= self.alphabet_size <= MAX_ALPHABET_SIZE:
            raise ValueError(
                f"alphabet_size must be in [{MIN_ALPHABET_SIZE}, {MAX_ALPHABET_SIZE}], "
                f"got {self.alphabet_size}"
            )
        if not self.automaton_sizes:
            raise ValueError("automaton_sizes must not be empty")
        for size in self.automaton_sizes:
            if size < MIN_AUTOMATON_SIZE:
                raise ValueError(
                    f"Automaton size {size} is below minimum {MIN_AUTOMATON_SIZE}"
                )
        if self.automata_per_size < 0 or self.sets_per_size < 0:
            raise ValueError("automata_per_size and sets_per_size must be non-negative")
        if any(size < 0 for size in self.train_sizes) or self.test_size < 0:
            raise ValueError("Sample sizes must be non-negative")
        if not 0.0 < self.acceptance_lambda < 1.0:
            raise ValueError(f"acceptance_lambda must lie in (0, 1), got {self.acceptance_lambda}")

        for variant in self.variants:
            if variant not in VARIANTS:
                raise ValueError(f"Unknown variant '{variant}'. Available: {VARIANTS}")
        if "dpa" in self.variants and (self.priority_count is None or self.priority_count < 1):
            raise ValueError("Variant 'dpa' requires a positive priority_count")
        # TOML has no null, 0 stands for an unbounded rejection loop
        if self.max_attempts == 0:
            object.__setattr__(self, 'max_attempts', None)
        if self.max_attempts is not None and self.max_attempts < 0:
            raise ValueError("max_attempts must be positive, 0 or None")

        warnings = validate_config(self.to_default_config())
        for warning in warnings:
            if self.verbose:
                logger.warning("Configuration warning: %s", warning)
            else:
                logger.debug("Configuration warning: %s", warning)

    def to_default_config(self) -> DefaultConfig:
        """Project the generation parameters onto a :class:`DefaultConfig`."""
        return DefaultConfig(
            alphabet_size=self.alphabet_size,
            automaton_sizes=self.automaton_sizes,
            automata_per_size=self.automata_per_size,
            train_sizes=self.train_sizes,
            test_size=self.test_size,
            sets_per_size=self.sets_per_size,
            acceptance_lambda=self.acceptance_lambda,
            variants=self.variants,
            priority_count=self.priority_count,
            max_attempts=self.max_attempts
        )

    @classmethod
    def from_preset(cls, preset: str, **overrides) -> 'Settings':
        """Create settings from a preset configuration.

        Parameters
        ----------
        preset : str
            Preset name ('reference', 'parity', 'minimal')
        **overrides
            Fields replacing the preset values (e.g. ``output_dir``)

        Returns
        -------
        Settings
            Settings object with preset values
        """
        if preset not in RESEARCH_CONFIGS:
            raise ValueError(f"Unknown preset '{preset}'. Available: {list(RESEARCH_CONFIGS.keys())}")

        values = asdict(RESEARCH_CONFIGS[preset])
        values.update(overrides)
        return cls(**values)

    @classmethod
    def from_toml(cls, toml_path: Union[str, Path]) -> 'Settings':
        """Load settings from TOML file.

        Parameters
        ----------
        toml_path : Union[str, Path]
            Path to TOML configuration file

        Returns
        -------
        Settings
            Settings object with values from TOML file

        Raises
        ------
        ImportError
            If tomllib is not available
        FileNotFoundError
            If TOML file doesn't exist
        """
        if tomllib is None:
            raise ImportError("tomllib not available. Install tomli for Python < 3.11")

        toml_path = Path(toml_path)
        if not toml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {toml_path}")

        with open(toml_path, 'rb') as f:
            config_data = tomllib.load(f)

        settings_data: Dict[str, Any] = {}

        # Handle nested configuration structure
        for section in ('automata', 'samples', 'generation', 'output'):
            if section in config_data:
                settings_data.update(config_data[section])

        # Also handle flat structure
        for key, value in config_data.items():
            if not isinstance(value, dict):
                settings_data[key] = value

        return cls(**settings_data)

    def to_toml(self, toml_path: Union[str, Path]) -> None:
        """Save settings to TOML file.

        Optional fields that are ``None`` are omitted since TOML has no null.

        Raises
        ------
        ImportError
            If tomli_w is not available
        """
        if tomli_w is None:
            raise ImportError("tomli_w not available. Install tomli-w for TOML writing")

        config_data = {
            'automata': {
                'alphabet_size': self.alphabet_size,
                'automaton_sizes': list(self.automaton_sizes),
                'automata_per_size': self.automata_per_size,
                'variants': list(self.variants),
                'priority_count': self.priority_count
            },
            'samples': {
                'train_sizes': list(self.train_sizes),
                'test_size': self.test_size,
                'sets_per_size': self.sets_per_size
            },
            'generation': {
                'acceptance_lambda': self.acceptance_lambda,
                'max_attempts': self.max_attempts or 0,
                'random_seed': self.random_seed
            },
            'output': {
                'output_dir': self.output_dir,
                'verbose': self.verbose
            }
        }
        config_data = {
            section: {key: value for key, value in values.items() if value is not None}
            for section, values in config_data.items()
        }

        toml_path = Path(toml_path)
        with open(toml_path, 'wb') as f:
            tomli_w.dump(config_data, f)

    def update(self, **kwargs) -> 'Settings':
        """Create new Settings with updated values."""
        current_dict = asdict(self)
        current_dict.update(kwargs)
        return Settings(**current_dict)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation used in run manifests."""
        data = asdict(self)
        for name in _TUPLE_FIELDS:
            data[name] = list(data[name])
        return data


DEFAULT_CONFIG_PATHS = (
    'omega_benchmarks.toml',
    'config.toml',
    Path.home() / '.omega_benchmarks.toml',
    Path.cwd() / 'config' / 'config.toml'
)

def get_config(config_path: Optional[Union[str, Path]] = None,
               preset: Optional[str] = None) -> Settings:
    """Load run settings.

    Parameters
    ----------
    config_path : Optional[Union[str, Path]]
        Path to TOML configuration file. If None, looks for default locations.
    preset : Optional[str]
        Preset configuration name ('reference', 'parity', 'minimal') used when
        no configuration file is found.

    Returns
    -------
    Settings
        Freshly loaded settings; nothing is cached between calls
    """
    if config_path is not None:
        return Settings.from_toml(config_path)

    for path in DEFAULT_CONFIG_PATHS:
        if Path(path).exists():
            logger.info("Loading configuration from %s", path)
            return Settings.from_toml(path)

    preset = preset or 'reference'
    logger.info("No configuration file found, using preset '%s'", preset)
    return Settings.from_preset(preset)
