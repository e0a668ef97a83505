from .api import sample_value, sample_fixed, fixed_sampler, make_generator, RandomGenerator
from .config import RandomizeConfig, get_config, set_config
from .core.exceptions import RandomizeError, TypeConstraintError, InvalidRangeError, ConfigurationError

__version__ = "0.1.0"
