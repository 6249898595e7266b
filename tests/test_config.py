"""Tests for OxidizerConfig."""

import pytest

from oxidizer.config import OxidizerConfig, make_noise_generator
from oxidizer.core.levels import OxidationLevel
from oxidizer.core.noise import BrownianNoise, WhiteNoise
from oxidizer.errors import InvalidValue


class TestOxidizerConfig:
    """Tests for defaults and validation."""

    def test_defaults(self):
        cfg = OxidizerConfig()

        assert cfg.level is OxidationLevel.DEEP
        assert cfg.noise == "brown"
        assert cfg.intensity == 0.05
        assert cfg.passes == 1
        assert cfg.sample_rate is None
        assert cfg.seed is None

    def test_level_string_is_parsed(self):
        assert OxidizerConfig(level="MUFFLED").level is OxidationLevel.MUFFLED

    def test_noise_name_normalized(self):
        assert OxidizerConfig(noise=" White ").noise == "white"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"level": "loud"},
            {"noise": "pink"},
            {"intensity": -0.1},
            {"intensity": 1.5},
            {"passes": -1},
            {"sample_rate": 0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidValue):
            OxidizerConfig(**kwargs)

    def test_make_noise_generator(self):
        assert isinstance(OxidizerConfig(noise="white").make_noise_generator(), WhiteNoise)
        assert isinstance(OxidizerConfig(noise="brown").make_noise_generator(), BrownianNoise)

    def test_seeded_generators_match(self):
        a = OxidizerConfig(seed=3).make_noise_generator()
        b = OxidizerConfig(seed=3).make_noise_generator()

        assert [a.next_sample() for _ in range(5)] == [b.next_sample() for _ in range(5)]


def test_make_noise_generator_unknown():
    with pytest.raises(InvalidValue) as excinfo:
        make_noise_generator("violet")

    assert excinfo.value.value == "violet"
