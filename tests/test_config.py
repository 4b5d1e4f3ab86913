"""Tests for environment-driven settings."""

import pytest

from bspricer.config import Settings, get_settings

ENV_VARS = (
    "BSPRICER_LOG_LEVEL",
    "BSPRICER_CURVE_RANGE",
    "BSPRICER_CURVE_POINTS",
    "BSPRICER_PARITY_TOLERANCE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self):
        assert get_settings() == Settings()
        s = get_settings()
        assert s.log_level == "WARNING"
        assert s.curve_range == 50.0
        assert s.curve_points == 100
        assert s.parity_tolerance == 0.01

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("BSPRICER_LOG_LEVEL", " debug ")
        monkeypatch.setenv("BSPRICER_CURVE_RANGE", "25")
        monkeypatch.setenv("BSPRICER_CURVE_POINTS", "11")
        monkeypatch.setenv("BSPRICER_PARITY_TOLERANCE", "1e-4")
        s = get_settings()
        assert s == Settings(log_level="DEBUG", curve_range=25.0,
                             curve_points=11, parity_tolerance=1e-4)

    def test_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv("BSPRICER_CURVE_POINTS", "   ")
        assert get_settings().curve_points == 100

    def test_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("BSPRICER_CURVE_POINTS", "7")
        assert get_settings() is first
        get_settings.cache_clear()
        assert get_settings().curve_points == 7

    @pytest.mark.parametrize("name, value", [
        ("BSPRICER_CURVE_RANGE", "wide"),
        ("BSPRICER_CURVE_RANGE", "-1"),
        ("BSPRICER_CURVE_RANGE", "nan"),
        ("BSPRICER_CURVE_POINTS", "1.5"),
        ("BSPRICER_CURVE_POINTS", "0"),
        ("BSPRICER_PARITY_TOLERANCE", "inf"),
        ("BSPRICER_LOG_LEVEL", "LOUD"),
    ])
    def test_malformed(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(RuntimeError, match=name):
            get_settings()
