"""
Public sampling API.

Runtime bounds::

    sample_value(1, 6)                  # int64 in [1, 6]
    sample_value(3.14, 42.0)            # float64 in [3.14, 42.0)
    g = make_generator(-16.0, 64.0)     # reusable handle
    g(), g.sample(10)

Fixed bounds, resolved once per (type, min, max) signature::

    sample_fixed(np.int16)              # full int16 range
    rand_double = fixed_sampler(np.float64, -2, 3)
    rand_double()
"""
import numpy as np
import logging
from functools import lru_cache
from typing import Any, Callable, Iterator, Optional

from . import cache
from .core.exceptions import InvalidRangeError
from .distributions import Sample, make_distribution
from .ranges import infer_dtype, resolve_dtype, resolve_range

logger = logging.getLogger(__name__)


def _runtime_dtype(min_value: Any, max_value: Any, dtype: Any) -> np.dtype:
    if dtype is None:
        return infer_dtype(min_value, max_value)
    return resolve_dtype(dtype)


class RandomGenerator:
    """
    Reusable sampler bound to a fixed (min, max) range.

    Only the key is held; every call goes through the shared cache, so all
    handles with the same key draw from the same distribution and engine.
    """

    __slots__ = ("dtype", "min", "max")

    def __init__(self, dtype: np.dtype, min_value: Any, max_value: Any):
        self.dtype = dtype
        self.min = min_value
        self.max = max_value

    @property
    def key(self):
        return (self.min, self.max)

    def __call__(self) -> np.generic:
        return cache.sample(self.dtype, self.min, self.max)

    def sample(self, size: int) -> np.ndarray:
        """Fill an array of ``size`` values drawn from the range."""
        return cache.sample(self.dtype, self.min, self.max, size=size)

    def __iter__(self) -> Iterator[np.generic]:
        while True:
            yield self()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RandomGenerator):
            return NotImplemented
        return self.dtype == other.dtype and self.key == other.key

    def __hash__(self) -> int:
        return hash((self.dtype, self.key))

    def __repr__(self) -> str:
        closing = "]" if resolve_range(self.dtype).is_integral else ")"
        return f"RandomGenerator([{self.min}, {self.max}{closing}, dtype={self.dtype})"


def make_generator(min_value: Any, max_value: Any, dtype: Any = None) -> RandomGenerator:
    """
    Build a reusable generator over [min, max] (integral) or [min, max) (real).

    The type is deduced from the bounds unless ``dtype`` is given. The
    distribution is created (and the range validated) immediately.

    Raises:
        TypeConstraintError: the type is not arithmetic or the bounds disagree.
        InvalidRangeError: min > max.
    """
    dtype = _runtime_dtype(min_value, max_value, dtype)
    cache.get_or_create(dtype, min_value, max_value)
    return RandomGenerator(dtype, min_value, max_value)


def sample_value(min_value: Any, max_value: Any, dtype: Any = None) -> np.generic:
    """Draw one value in [min, max] (integral) or [min, max) (real)."""
    dtype = _runtime_dtype(min_value, max_value, dtype)
    return cache.sample(dtype, min_value, max_value)


@lru_cache(maxsize=None)
def _fixed_sampler(dtype: np.dtype, min_bound: int, max_bound: int) -> Callable[..., Sample]:
    distribution = make_distribution(dtype, min_bound, max_bound)
    engine = cache.get_engine(dtype)

    def sampler(size: Optional[int] = None) -> Sample:
        return distribution(engine, size)

    sampler.__name__ = f"rand_{dtype}_{min_bound}_{max_bound}".replace("-", "m")
    sampler.__qualname__ = sampler.__name__
    logger.debug(f"Created fixed sampler {sampler.__name__} over {distribution!r}")
    return sampler


def fixed_sampler(
    dtype: Any,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None
) -> Callable[..., Sample]:
    """
    Return the dedicated sampler for a fixed (type, min, max) signature.

    Omitted bounds default to the type's full range. Bounds are expressed in
    the type's representation type: the type itself for integral types, a
    64-bit signed integer for real types (so real bounds must be integers and
    the default real range is that of int64).

    The same signature always returns the same function object.
    """
    type_range = resolve_range(dtype)
    min_bound = type_range.min if min_value is None else type_range.check_representable(min_value)
    max_bound = type_range.max if max_value is None else type_range.check_representable(max_value)
    if min_bound > max_bound:
        raise InvalidRangeError(f"Invalid range: min ({min_bound}) > max ({max_bound})")
    return _fixed_sampler(type_range.dtype, min_bound, max_bound)


def sample_fixed(
    dtype: Any,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None
) -> np.generic:
    """One-shot draw from ``fixed_sampler(dtype, min_value, max_value)``."""
    return fixed_sampler(dtype, min_value, max_value)()
