"""Tests for parameter clamping, repair and messages."""

import logging
import math

import pytest

from double_slit.constants import PARAM_BOUNDS
from double_slit.params import NUMERIC_FIELDS, PhysicsParams
from double_slit.validation import (
    clamp_param,
    format_param_value,
    is_within_bounds,
    midpoint,
    slit_constraint_message,
    validate,
    validation_errors,
    validation_message,
)

ODD_INPUTS = [
    PhysicsParams(),
    PhysicsParams(wavelength=-4.0, slit_separation=100.0),
    PhysicsParams(slit_width=3.0, slit_separation=2.0),
    PhysicsParams(slit_width=2.0, slit_separation=2.0),
    PhysicsParams(slit_width=50.0, slit_separation=0.1),
    PhysicsParams(screen_distance=math.nan, time_scale=math.inf, particle_rate=-math.inf),
    PhysicsParams(amplitude=None, wave_speed="fast"),
    PhysicsParams(wavelength=10 ** 400, screen_distance=-(10 ** 400)),
]


class TestValidate:
    """validate() is a total, idempotent repair function."""

    def test_defaults_pass_unchanged(self, default_params):
        assert validate(default_params) == default_params

    def test_clamps_to_bounds(self):
        result = validate(PhysicsParams(wavelength=5.0, screen_distance=0.0, particle_rate=1e6))
        assert result.wavelength == 2.0
        assert result.screen_distance == 1.0
        assert result.particle_rate == 1000.0

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, None, "abc"])
    def test_non_finite_falls_back_to_midpoint(self, bad):
        result = validate(PhysicsParams(time_scale=bad))
        assert result.time_scale == pytest.approx((0.1 + 5.0) / 2)

    def test_wide_slits_are_repaired(self):
        result = validate(PhysicsParams(slit_width=3.0, slit_separation=2.0))
        assert result.slit_width == 0.8 * result.slit_separation

    def test_touching_slits_are_repaired(self):
        result = validate(PhysicsParams(slit_width=2.0, slit_separation=2.0))
        assert result.slit_width == 0.8 * result.slit_separation

    def test_clamp_happens_before_repair(self):
        # width clamps to 5.0, separation to 0.5, then the width is repaired
        result = validate(PhysicsParams(slit_width=50.0, slit_separation=0.1))
        assert result.slit_separation == 0.5
        assert result.slit_width == 0.8 * 0.5

    @pytest.mark.parametrize("params", ODD_INPUTS)
    def test_idempotent(self, params):
        once = validate(params)
        assert validate(once) == once

    @pytest.mark.parametrize("params", ODD_INPUTS)
    def test_result_is_valid(self, params):
        result = validate(params)
        for key in NUMERIC_FIELDS:
            assert is_within_bounds(key, getattr(result, key))
        assert result.slit_width < result.slit_separation

    def test_accepts_camel_case_mapping(self):
        result = validate({"slitSeparation": 4.0, "particleMode": 1, "timeScale": 2.0, "unknown": 3})
        assert result.slit_separation == 4.0
        assert result.particle_mode is True
        assert result.time_scale == 2.0

    def test_flags_become_booleans(self):
        result = validate(PhysicsParams(show_waves=0, is_paused="yes"))
        assert result.show_waves is False
        assert result.is_paused is True

    def test_huge_integers_clamp_to_their_bound(self):
        result = validate(PhysicsParams(wavelength=10 ** 400, screen_distance=-(10 ** 400)))
        assert result.wavelength == 2.0
        assert result.screen_distance == 1.0

    @pytest.mark.parametrize(
        "text, expected",
        [("False", False), ("false", False), ("0", False), ("no", False), ("", False), ("True", True), (" on ", True)],
    )
    def test_string_flags_are_parsed(self, text, expected):
        assert validate({"particleMode": text}).particle_mode is expected

    def test_non_string_mapping_keys_are_ignored(self):
        assert validate({1: 2.0, None: "x", "wavelength": 1.0}) == PhysicsParams(wavelength=1.0)

    def test_does_not_mutate_input(self):
        params = PhysicsParams(wavelength=9.0)
        validate(params)
        assert params.wavelength == 9.0

    def test_repairs_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="double_slit.validation"):
            validate(PhysicsParams(slit_width=3.0, slit_separation=2.0, wavelength=math.nan))
        messages = " ".join(record.getMessage() for record in caplog.records)
        assert "wavelength" in messages
        assert "Slit width" in messages


class TestClampParam:
    def test_inside_range_is_untouched(self):
        assert clamp_param("amplitude", 0.42) == 0.42

    @pytest.mark.parametrize("key", list(PARAM_BOUNDS))
    def test_midpoint_within_range(self, key):
        low, high, _ = PARAM_BOUNDS[key]
        assert low < midpoint(key) < high


class TestMessages:
    """Control-panel messages for invalid input."""

    def test_validation_message(self):
        assert validation_message("wavelength", -1) == "Minimum: 0.1μm"
        assert validation_message("wavelength", 0.5) is None
        assert validation_message("wavelength", math.nan) == "Invalid number"
        assert validation_message("slit_width", 10) == "Maximum: 5.0μm"
        assert validation_message("wavelength", 10 ** 400) == "Maximum: 2.0μm"
        assert validation_message("wavelength", -(10 ** 400)) == "Minimum: 0.1μm"

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            validation_message("colour", 1.0)

    def test_slit_constraint_message(self):
        assert slit_constraint_message(0.3, 2.0) is None
        assert slit_constraint_message(2.5, 2.0) == "Slit width must be less than slit separation"
        assert slit_constraint_message(2.0, 2.0) == "Slit width must be less than slit separation"

    def test_validation_errors(self):
        errors = validation_errors(PhysicsParams(wavelength=-1.0, slit_width=3.0, slit_separation=2.0))
        assert errors == {
            "wavelength": "Minimum: 0.1μm",
            "slit_width": "Slit width must be less than slit separation",
        }

    def test_no_errors_for_defaults(self, default_params):
        assert validation_errors(default_params) == {}

    @pytest.mark.parametrize(
        "key, value, expected",
        [
            ("amplitude", 0.333, "0.33"),
            ("wavelength", 0.532, "0.5"),
            ("slit_width", 0.333, "0.3"),
            ("screen_distance", 15.7, "16"),
            ("particle_rate", 250.7, "251"),
        ],
    )
    def test_format_param_value(self, key, value, expected):
        assert format_param_value(key, value) == expected
