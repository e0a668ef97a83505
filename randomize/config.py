"""Configuration module for the randomize library."""

from dataclasses import dataclass
from typing import Dict, Any
import json
import logging

from .core.exceptions import ConfigurationError
from .core.seeding import BIT_GENERATORS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RandomizeConfig:
    """Settings used when a per-type engine is first created."""

    bit_generator: str = "MT19937"  # NumPy bit generator backing each engine
    seed_bits: int = 32  # Width of the time-derived seed (32 = native unsigned)

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.bit_generator not in BIT_GENERATORS:
            raise ConfigurationError(
                f"bit_generator must be one of {sorted(BIT_GENERATORS)}, got {self.bit_generator!r}"
            )

        if isinstance(self.seed_bits, bool) or not isinstance(self.seed_bits, int):
            raise ConfigurationError(f"seed_bits must be an integer, got {self.seed_bits!r}")

        if not 1 <= self.seed_bits <= 64:
            raise ConfigurationError(f"seed_bits must be in [1, 64], got {self.seed_bits}")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "RandomizeConfig":
        """Create a RandomizeConfig from a dictionary, ignoring unknown keys."""
        return cls(**{
            k: v for k, v in config_dict.items()
            if k in cls.__dataclass_fields__
        })

    @classmethod
    def from_json_file(cls, filepath: str) -> "RandomizeConfig":
        """Load configuration from a JSON file."""
        with open(filepath, "r") as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "bit_generator": self.bit_generator,
            "seed_bits": self.seed_bits,
        }


_active_config = RandomizeConfig()


def get_config() -> RandomizeConfig:
    """Return the configuration applied to engines created from now on."""
    return _active_config


def set_config(config: RandomizeConfig) -> None:
    """
    Replace the active configuration.

    Engines are seeded once and never rebuilt, so types that already have an
    engine keep it; only types initialised afterwards see the new settings.
    """
    global _active_config
    if not isinstance(config, RandomizeConfig):
        raise ConfigurationError(f"Expected a RandomizeConfig, got {type(config).__name__}")

    from .cache import initialized_types
    existing = initialized_types()
    if existing:
        logger.warning(
            f"Configuration changed after engines were created for {[str(t) for t in existing]}; "
            "those engines are left untouched."
        )
    _active_config = config
