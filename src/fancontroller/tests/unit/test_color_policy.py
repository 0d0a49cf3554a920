"""
Unit tests for the dial color policy and Palette.
"""
import dataclasses

import pytest

from fancontroller import constants
from fancontroller.core.color_policy import (
    DEFAULT_SPEED_COLOR, INDICATOR_COLOR, OFF_COLOR, Palette, fill_color_for
)
from fancontroller.core.speed import FanSpeed


def test_fixed_colors():
    assert OFF_COLOR == "#888888"
    assert INDICATOR_COLOR == "#000000"
    assert DEFAULT_SPEED_COLOR == "#CCCCCC"


@pytest.mark.parametrize("palette", [
    Palette(),
    Palette(low="#112233", medium="#445566", high="#778899"),
    Palette(low=OFF_COLOR, medium=OFF_COLOR, high=OFF_COLOR),
])
def test_off_is_always_gray(palette):
    assert fill_color_for(FanSpeed.OFF, palette) == OFF_COLOR


def test_running_speeds_use_palette_entries():
    palette = Palette(low="#112233", medium="#445566", high="#778899")
    assert fill_color_for(FanSpeed.LOW, palette) == "#112233"
    assert fill_color_for(FanSpeed.MEDIUM, palette) == "#445566"
    assert fill_color_for(FanSpeed.HIGH, palette) == "#778899"


def test_palette_entries_equal_to_default():
    palette = Palette(low=DEFAULT_SPEED_COLOR)
    for speed in (FanSpeed.LOW, FanSpeed.MEDIUM, FanSpeed.HIGH):
        assert fill_color_for(speed, palette) == DEFAULT_SPEED_COLOR


def test_palette_falls_back_silently_for_unset_or_invalid():
    palette = Palette(low=None, medium="green", high=0x00FF00)
    assert palette.low == DEFAULT_SPEED_COLOR
    assert palette.medium == DEFAULT_SPEED_COLOR
    assert palette.high == DEFAULT_SPEED_COLOR


def test_palette_normalizes_case():
    assert Palette(low="#00ff00").low == "#00FF00"


def test_palette_is_immutable():
    palette = Palette(low="#00FF00")
    with pytest.raises(dataclasses.FrozenInstanceError):
        palette.low = "#FF0000"


def test_palette_from_config_only_low_set():
    config = constants.config.defaults.DEFAULT_CONFIG.copy()
    config["fan_speed_low_color"] = "#00FF00"
    del config["fan_speed_high_color"]
    palette = Palette.from_config(config)
    assert fill_color_for(FanSpeed.LOW, palette) == "#00FF00"
    assert fill_color_for(FanSpeed.MEDIUM, palette) == DEFAULT_SPEED_COLOR
    assert fill_color_for(FanSpeed.HIGH, palette) == DEFAULT_SPEED_COLOR


def test_palette_colors_are_distinct_and_include_off():
    palette = Palette(low="#00FF00")
    assert palette.colors() == (OFF_COLOR, "#00FF00", DEFAULT_SPEED_COLOR)
