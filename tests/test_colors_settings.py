from __future__ import annotations

from pathlib import Path

import pytest

from zodiacwheel.chart import ChartContext
from zodiacwheel.colors import adjust_color, color_to_rgb
from zodiacwheel.i18n import t
from zodiacwheel.settings import load_settings

_ENV = (
    "ZODIACWHEEL_EPHEMERIS_DIR",
    "ZODIACWHEEL_KERNEL",
    "ZODIACWHEEL_TRANSITION_MS",
    "ZODIACWHEEL_BOUNDARY_EPSILON",
    "ZODIACWHEEL_TZ",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_color_to_rgb():
    assert color_to_rgb("#ffdd44") == "255, 221, 68"
    assert color_to_rgb("c1440e") == "193, 68, 14"


def test_adjust_color_clamps_channels():
    assert adjust_color("#ffdd44", 20) == "#fff158"
    assert adjust_color("#ffdd44", -40) == "#d7b51c"
    assert adjust_color("#101010", -40) == "#000000"


@pytest.mark.parametrize("bad", ["#fff", "", "#12345678"])
def test_malformed_colours_rejected(bad):
    with pytest.raises(ValueError):
        color_to_rgb(bad)


def test_translation_fallbacks():
    assert t("btn_now", "ko") == "지금"
    assert t("btn_now", "fr") == "Now"
    assert t("no_such_key", "en") == "no_such_key"
    assert "{count}" in t("degraded_notice", "en")


def test_settings_defaults(clean_env):
    settings = load_settings()
    assert settings.kernel == "de421.bsp"
    assert settings.transition_ms == 1000.0
    assert settings.boundary_epsilon == 1.0
    assert settings.timezone == "UTC"
    assert settings.ephemeris_dir.name == "resources"


def test_settings_from_environment(clean_env, tmp_path):
    clean_env.setenv("ZODIACWHEEL_EPHEMERIS_DIR", str(tmp_path))
    clean_env.setenv("ZODIACWHEEL_KERNEL", "de440s.bsp")
    clean_env.setenv("ZODIACWHEEL_TRANSITION_MS", "250")
    clean_env.setenv("ZODIACWHEEL_BOUNDARY_EPSILON", "0.5")
    clean_env.setenv("ZODIACWHEEL_TZ", "Asia/Seoul")
    settings = load_settings()
    assert settings.ephemeris_dir == Path(tmp_path)
    assert settings.kernel == "de440s.bsp"
    assert settings.transition_ms == 250.0
    assert settings.boundary_epsilon == 0.5
    assert settings.timezone == "Asia/Seoul"


def test_blank_values_fall_back_to_defaults(clean_env):
    clean_env.setenv("ZODIACWHEEL_TRANSITION_MS", "  ")
    clean_env.setenv("ZODIACWHEEL_KERNEL", "")
    settings = load_settings()
    assert settings.transition_ms == 1000.0
    assert settings.kernel == "de421.bsp"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("ZODIACWHEEL_BOUNDARY_EPSILON", "fast"),
        ("ZODIACWHEEL_BOUNDARY_EPSILON", "-1"),
        ("ZODIACWHEEL_TRANSITION_MS", "slow"),
        ("ZODIACWHEEL_TRANSITION_MS", "0"),
        ("ZODIACWHEEL_TRANSITION_MS", "-250"),
    ],
)
def test_bad_numbers_name_the_variable(clean_env, name, value):
    clean_env.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        load_settings()


def test_zero_epsilon_is_allowed(clean_env):
    clean_env.setenv("ZODIACWHEEL_BOUNDARY_EPSILON", "0")
    assert load_settings().boundary_epsilon == 0.0


def test_loaded_transition_duration_builds_a_context(clean_env):
    clean_env.setenv("ZODIACWHEEL_TRANSITION_MS", "250")
    settings = load_settings()
    ctx = ChartContext(
        transition_ms=settings.transition_ms,
        boundary_epsilon=settings.boundary_epsilon,
    )
    assert ctx.transition.duration_ms == 250.0
