import pytest

import randomize.api
import randomize.cache
import randomize.config


@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    """Give every test its own engine registry, fixed samplers and configuration."""
    monkeypatch.setattr(randomize.cache, "_registry", {})
    monkeypatch.setattr(randomize.config, "_active_config", randomize.config.RandomizeConfig())
    randomize.api._fixed_sampler.cache_clear()
    yield
    randomize.api._fixed_sampler.cache_clear()
