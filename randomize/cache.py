"""
Process-wide engine and distribution cache.

Each arithmetic type gets one pseudo-random engine, seeded once from the
clock on first use, and one mapping from (min, max) to the distribution built
for that range. Nothing is ever evicted or reseeded.

Only engine creation and cache insertion are serialised; concurrent draws
from the same engine are left to the caller to coordinate.
"""
import numpy as np
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .config import get_config
from .core.seeding import generate_seed, make_engine
from .distributions import Distribution, Sample, make_distribution
from .ranges import resolve_dtype, resolve_range

logger = logging.getLogger(__name__)

RangeKey = Tuple[Any, Any]


@dataclass
class TypeState:
    """Engine and cached distributions owned by one arithmetic type."""
    dtype: np.dtype
    engine: np.random.Generator
    seed: int
    bit_generator: str
    distributions: Dict[RangeKey, Distribution] = field(default_factory=dict)


_lock = threading.RLock()

# Global registry of per-type state
# Key format: normalised numpy dtype, e.g. dtype('int64')
_registry: Dict[np.dtype, TypeState] = {}


def _get_state(dtype: np.dtype) -> TypeState:
    with _lock:
        state = _registry.get(dtype)
        if state is None:
            config = get_config()
            seed = generate_seed(config.seed_bits)
            state = TypeState(
                dtype=dtype,
                engine=make_engine(seed, config.bit_generator),
                seed=seed,
                bit_generator=config.bit_generator,
            )
            _registry[dtype] = state
            logger.debug(f"Initialized {config.bit_generator} engine for {dtype} with seed {seed}")
        return state


def get_engine(arithmetic_type: Any) -> np.random.Generator:
    """Return the shared engine of ``arithmetic_type``, creating it on first use."""
    return _get_state(resolve_dtype(arithmetic_type)).engine


def get_or_create(arithmetic_type: Any, min_value: Any, max_value: Any) -> Distribution:
    """
    Look up the distribution cached for (min, max), building it on a miss.

    Keys compare by exact value. Bound types are checked before the lookup,
    since 1 == 1.0 == True would otherwise hit an entry cached for another
    bound type. Invalid ranges propagate the factory's InvalidRangeError /
    TypeConstraintError and are never cached.
    """
    type_range = resolve_range(arithmetic_type)
    type_range.check_bound_type("min", min_value)
    type_range.check_bound_type("max", max_value)
    dtype = type_range.dtype
    key = (min_value, max_value)
    with _lock:
        state = _get_state(dtype)
        distribution = state.distributions.get(key)
        if distribution is None:
            distribution = make_distribution(dtype, min_value, max_value)
            state.distributions[key] = distribution
            logger.debug(
                f"Cached {distribution!r} for key {key} "
                f"({len(state.distributions)} range(s) for {dtype})"
            )
    return distribution


def sample(
    arithmetic_type: Any,
    min_value: Any,
    max_value: Any,
    size: Optional[int] = None
) -> Sample:
    """Draw from the cached (min, max) distribution using the type's shared engine."""
    distribution = get_or_create(arithmetic_type, min_value, max_value)
    return distribution(get_engine(arithmetic_type), size)


def cached_ranges(arithmetic_type: Any) -> Tuple[RangeKey, ...]:
    """Snapshot of the (min, max) keys cached so far for ``arithmetic_type``."""
    dtype = resolve_dtype(arithmetic_type)
    with _lock:
        state = _registry.get(dtype)
        if state is None:
            return ()
        return tuple(state.distributions)


def initialized_types() -> Tuple[np.dtype, ...]:
    """Arithmetic types whose engine has already been created."""
    with _lock:
        return tuple(_registry)
