import numpy as np
import pytest
import randomize.core.seeding as seeding
from randomize.core.seeding import generate_seed, make_engine
from randomize.core.exceptions import ConfigurationError


def test_seed_fits_native_unsigned():
    seed = generate_seed()
    assert 0 <= seed < 2**32


def test_seed_truncates_clock_reading(monkeypatch):
    monkeypatch.setattr(seeding.time, "time_ns", lambda: (7 << 40) + 123)
    assert generate_seed() == 123
    assert generate_seed(bits=64) == (7 << 40) + 123


def test_make_engine_defaults_to_mersenne_twister():
    engine = make_engine(42)
    assert isinstance(engine, np.random.Generator)
    assert isinstance(engine.bit_generator, np.random.MT19937)


def test_same_seed_same_stream():
    a = make_engine(1234).integers(0, 1000, size=10)
    b = make_engine(1234).integers(0, 1000, size=10)
    assert np.array_equal(a, b)


@pytest.mark.parametrize("name", ["PCG64", "PCG64DXSM", "Philox", "SFC64"])
def test_alternative_bit_generators(name):
    engine = make_engine(1, bit_generator=name)
    assert type(engine.bit_generator).__name__ == name


def test_unknown_bit_generator():
    with pytest.raises(ConfigurationError):
        make_engine(1, bit_generator="xorshift")
