"""
Range resolution for the supported arithmetic types.

Maps a type tag onto its NumPy dtype, its kind (integral or real), the
default bounds used by fixed-bound samplers and the representation type of
those bounds.
"""
import numpy as np
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Union

from .core.exceptions import TypeConstraintError

# Fixed bounds for real types are expressed with this surrogate type
REAL_BOUND_TYPE = np.dtype(np.int64)

INTEGRAL_TYPES = tuple(np.dtype(t) for t in (
    np.int8, np.int16, np.int32, np.int64,
    np.uint8, np.uint16, np.uint32, np.uint64,
))
REAL_TYPES = tuple(np.dtype(t) for t in (np.float32, np.float64))


class ArithmeticKind(Enum):
    """Category of an arithmetic type, selecting the distribution used for it."""
    INTEGRAL = "integral"
    REAL = "real"


@dataclass(frozen=True)
class TypeRange:
    """Default bounds and bound representation for one arithmetic type."""
    dtype: np.dtype
    kind: ArithmeticKind
    value_type: np.dtype
    min: int
    max: int
    actual_min: Union[int, float]
    actual_max: Union[int, float]

    @property
    def is_integral(self) -> bool:
        return self.kind is ArithmeticKind.INTEGRAL

    def check_bound_type(self, name: str, value: Any) -> None:
        """Reject runtime bounds whose type cannot express a value of this kind."""
        if self.is_integral:
            accepted = (int, np.integer)
            expected = "an integer"
        else:
            accepted = (int, float, np.integer, np.floating)
            expected = "a real number"
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, accepted):
            raise TypeConstraintError(
                f"{name} must be {expected} for {self.dtype}, got {value!r}"
            )

    def check_representable(self, value: Any) -> int:
        """
        Validate a fixed bound against the representation type.

        Returns the bound as a Python int.
        """
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise TypeConstraintError(
                f"Fixed bounds for {self.dtype} must be integers of type {self.value_type}, "
                f"got {value!r}"
            )
        info = np.iinfo(self.value_type)
        if not info.min <= int(value) <= info.max:
            raise TypeConstraintError(
                f"Fixed bound {value} is not representable in {self.value_type} "
                f"[{info.min}, {info.max}]"
            )
        return int(value)


def resolve_dtype(arithmetic_type: Any) -> np.dtype:
    """
    Normalise a type tag into one of the supported dtypes.

    Accepts Python ``int``/``float``, NumPy scalar types, dtypes and dtype
    strings. Raises TypeConstraintError for anything that is not a supported
    arithmetic type.
    """
    # np.dtype(None) would silently mean float64
    if arithmetic_type is None or arithmetic_type is bool:
        raise TypeConstraintError(f"{arithmetic_type!r} is not an arithmetic type")
    if arithmetic_type is int:
        return np.dtype(np.int64)
    if arithmetic_type is float:
        return np.dtype(np.float64)

    try:
        dtype = np.dtype(arithmetic_type)
    except TypeError as e:
        raise TypeConstraintError(f"{arithmetic_type!r} is not an arithmetic type") from e

    if dtype not in INTEGRAL_TYPES and dtype not in REAL_TYPES:
        raise TypeConstraintError(
            f"the provided type must be arithmetic (one of "
            f"{[str(t) for t in INTEGRAL_TYPES + REAL_TYPES]}), got {dtype}"
        )
    return dtype


def _dtype_of(value: Any) -> np.dtype:
    if isinstance(value, (bool, np.bool_)):
        raise TypeConstraintError(f"Boolean bound {value!r} is not arithmetic")
    if isinstance(value, np.generic):
        return resolve_dtype(value.dtype)
    if isinstance(value, int):
        return np.dtype(np.int64)
    if isinstance(value, float):
        return np.dtype(np.float64)
    raise TypeConstraintError(f"Bound {value!r} of type {type(value).__name__} is not arithmetic")


def infer_dtype(min_value: Any, max_value: Any) -> np.dtype:
    """Deduce the arithmetic type of a runtime range; both bounds must agree."""
    min_dtype = _dtype_of(min_value)
    max_dtype = _dtype_of(max_value)
    if min_dtype != max_dtype:
        raise TypeConstraintError(
            f"Bounds deduce to different types ({min_dtype} and {max_dtype}); "
            "pass matching bounds or an explicit dtype"
        )
    return min_dtype


@lru_cache(maxsize=None)
def _resolve(dtype: np.dtype) -> TypeRange:
    if dtype in INTEGRAL_TYPES:
        info = np.iinfo(dtype)
        return TypeRange(
            dtype=dtype,
            kind=ArithmeticKind.INTEGRAL,
            value_type=dtype,
            min=int(info.min),
            max=int(info.max),
            actual_min=int(info.min),
            actual_max=int(info.max),
        )

    # Limitation: the default span is the surrogate's range, not the real type's.
    # Use runtime bounds when a larger range is needed.
    surrogate = np.iinfo(REAL_BOUND_TYPE)
    finfo = np.finfo(dtype)
    return TypeRange(
        dtype=dtype,
        kind=ArithmeticKind.REAL,
        value_type=REAL_BOUND_TYPE,
        min=int(surrogate.min),
        max=int(surrogate.max),
        actual_min=float(finfo.tiny),
        actual_max=float(finfo.max),
    )


def resolve_range(arithmetic_type: Any) -> TypeRange:
    """Return the TypeRange describing ``arithmetic_type``."""
    return _resolve(resolve_dtype(arithmetic_type))
