import time
import numpy as np
from typing import Optional

from .exceptions import ConfigurationError

BIT_GENERATORS = {
    "MT19937": np.random.MT19937,
    "PCG64": np.random.PCG64,
    "PCG64DXSM": np.random.PCG64DXSM,
    "Philox": np.random.Philox,
    "SFC64": np.random.SFC64,
}


def generate_seed(bits: int = 32) -> int:
    """
    Generate a seed from the current high-resolution clock reading.
    The nanosecond count since the epoch is truncated to an unsigned
    integer of the given width. Not suitable for cryptographic use.
    """
    return time.time_ns() & ((1 << bits) - 1)


def make_engine(seed: Optional[int] = None, bit_generator: str = "MT19937") -> np.random.Generator:
    """
    Centralized factory for the pseudo-random engines shared per arithmetic type.
    """
    try:
        bit_generator_cls = BIT_GENERATORS[bit_generator]
    except KeyError:
        raise ConfigurationError(
            f"Unknown bit generator '{bit_generator}', expected one of {sorted(BIT_GENERATORS)}"
        ) from None
    return np.random.Generator(bit_generator_cls(seed))
