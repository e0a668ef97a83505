import numpy as np
from typing import Any, Optional, Tuple, Union

from .core.exceptions import InvalidRangeError, TypeConstraintError
from .ranges import ArithmeticKind, resolve_range

Sample = Union[np.generic, np.ndarray]


def _exact(value: Any) -> Union[int, float]:
    # Exact comparison: integer bounds past 2**53 collapse under float()
    if isinstance(value, (int, np.integer)):
        return int(value)
    return float(value)


class UniformIntDistribution:
    """Uniform integer distribution over the closed interval [low, high]."""

    def __init__(self, low: Any, high: Any, dtype: Any = np.int64):
        self.dtype = np.dtype(dtype)
        type_range = resolve_range(self.dtype)
        info = np.iinfo(self.dtype)

        for name, value in (("low", low), ("high", high)):
            type_range.check_bound_type(name, value)
            if not info.min <= int(value) <= info.max:
                raise TypeConstraintError(
                    f"{name}={value} is not representable in {self.dtype} [{info.min}, {info.max}]"
                )

        if int(low) > int(high):
            raise InvalidRangeError(f"Invalid range: min ({low}) > max ({high})")

        self.low = self.dtype.type(low)
        self.high = self.dtype.type(high)

    def __call__(self, engine: np.random.Generator, size: Optional[int] = None) -> Sample:
        """Draw one value (or ``size`` values) from ``engine``."""
        values = engine.integers(
            int(self.low), int(self.high), size=size, dtype=self.dtype, endpoint=True
        )
        if size is None:
            return self.dtype.type(values)
        return values

    def param(self) -> Tuple[np.generic, np.generic]:
        return self.low, self.high

    def min(self) -> np.generic:
        return self.low

    def max(self) -> np.generic:
        return self.high

    def __repr__(self) -> str:
        return f"UniformIntDistribution([{self.low}, {self.high}], dtype={self.dtype})"


class UniformRealDistribution:
    """
    Uniform real distribution over the half-open interval [low, high).

    Values are drawn in double precision and cast to ``dtype``. A cast that
    rounds up onto ``high`` is pulled back to the largest representable value
    below it, so ``high`` itself is never returned (unless low == high).
    """

    def __init__(self, low: Any, high: Any, dtype: Any = np.float64):
        self.dtype = np.dtype(dtype)
        type_range = resolve_range(self.dtype)
        finfo = np.finfo(self.dtype)

        for name, value in (("low", low), ("high", high)):
            type_range.check_bound_type(name, value)
            if not np.isfinite(float(value)):
                raise InvalidRangeError(f"{name} must be finite, got {value}")
            if abs(float(value)) > float(finfo.max):
                raise InvalidRangeError(
                    f"{name}={value} exceeds the range of {self.dtype} (max {finfo.max})"
                )

        if _exact(low) > _exact(high):
            raise InvalidRangeError(f"Invalid range: min ({low}) > max ({high})")

        if not np.isfinite(float(high) - float(low)):
            raise InvalidRangeError(
                f"Range width max - min overflows double precision for [{low}, {high})"
            )

        self.low = self.dtype.type(low)
        self.high = self.dtype.type(high)
        self._below_high = np.nextafter(self.high, self.low)

    def __call__(self, engine: np.random.Generator, size: Optional[int] = None) -> Sample:
        """Draw one value (or ``size`` values) from ``engine``."""
        if self.low == self.high:
            if size is None:
                return self.low
            return np.full(size, self.low, dtype=self.dtype)

        values = engine.uniform(float(self.low), float(self.high), size=size)
        if size is None:
            value = self.dtype.type(values)
            return self._below_high if value >= self.high else value

        values = np.asarray(values).astype(self.dtype)
        values[values >= self.high] = self._below_high
        return values

    def param(self) -> Tuple[np.generic, np.generic]:
        return self.low, self.high

    def min(self) -> np.generic:
        return self.low

    def max(self) -> np.generic:
        return self.high

    def __repr__(self) -> str:
        return f"UniformRealDistribution([{self.low}, {self.high}), dtype={self.dtype})"


Distribution = Union[UniformIntDistribution, UniformRealDistribution]


def make_distribution(arithmetic_type: Any, min_value: Any, max_value: Any) -> Distribution:
    """
    Build the uniform distribution matching the kind of ``arithmetic_type``.

    Integral types get an inclusive [min, max] distribution, real types a
    half-open [min, max) one.
    """
    type_range = resolve_range(arithmetic_type)
    if type_range.kind is ArithmeticKind.INTEGRAL:
        return UniformIntDistribution(min_value, max_value, type_range.dtype)
    return UniformRealDistribution(min_value, max_value, type_range.dtype)
