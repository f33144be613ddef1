"""Parameter validation: clamping, repair and user-facing messages.

``validate`` is the single gate every parameter update passes through before
it reaches the intensity model, the clock or the particle emitter. It never
raises; bad numbers are repaired and the repair is logged.
"""
import logging
import math
import numbers
from typing import Any, Dict, Mapping, Optional, Union

from double_slit.constants import PARAM_BOUNDS, SLIT_WIDTH_REPAIR_RATIO
from double_slit.params import FLAG_FIELDS, NUMERIC_FIELDS, PhysicsParams

logger = logging.getLogger(__name__)


def _as_float(value: Any) -> float:
    """Float value of ``value``; exact numbers too large for a float become a signed infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return math.nan


def _unusable(value: Any, number: float) -> bool:
    # an int or fraction beyond float range is still a number, just out of range
    if math.isinf(number) and isinstance(value, numbers.Rational):
        return False
    return not math.isfinite(number)


_TRUE_WORDS = ("true", "1", "yes", "on")


def _as_flag(value: Any) -> bool:
    """Boolean value of ``value``; strings are read as words, anything unrecognised is False."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_WORDS
    return bool(value)


def midpoint(key: str) -> float:
    low, high, _ = PARAM_BOUNDS[key]
    return (low + high) / 2.0


def clamp_param(key: str, value: Any) -> float:
    """Clamp ``value`` into the bounds of ``key``.

    NaN, infinite floats and non-numbers map to the midpoint; an integer too
    large for a float is clamped to the bound on its side.
    """
    low, high, _ = PARAM_BOUNDS[key]
    number = _as_float(value)
    if _unusable(value, number):
        logger.warning("Invalid value for %s: %r, using %s", key, value, midpoint(key))
        return midpoint(key)
    clamped = max(low, min(high, number))
    if clamped != number:
        logger.warning("%s=%s outside [%s, %s], clamped to %s", key, number, low, high, clamped)
    return clamped


def validate(params: Union[PhysicsParams, Mapping[str, Any]]) -> PhysicsParams:
    """Return a physically valid copy of ``params``.

    Every numeric field is clamped first; afterwards, if the slits would touch
    or overlap (width >= separation) the width is set to 80% of the separation.
    The result is a fixed point: validating it again changes nothing.
    """
    if not isinstance(params, PhysicsParams):
        params = PhysicsParams.from_mapping(params)

    values = {key: clamp_param(key, getattr(params, key)) for key in NUMERIC_FIELDS}
    values.update({key: _as_flag(getattr(params, key)) for key in FLAG_FIELDS})

    if values["slit_width"] >= values["slit_separation"]:
        repaired = SLIT_WIDTH_REPAIR_RATIO * values["slit_separation"]
        logger.warning(
            "Slit width (%s) must be less than slit separation (%s), adjusting to %s",
            values["slit_width"],
            values["slit_separation"],
            repaired,
        )
        values["slit_width"] = repaired

    return PhysicsParams(**values)


# ---------------- Messages for the control panel ----------------

def is_within_bounds(key: str, value: float) -> bool:
    low, high, _ = PARAM_BOUNDS[key]
    return low <= value <= high


def validation_message(key: str, value: Any) -> Optional[str]:
    """Describe why ``value`` is not acceptable for ``key``, or None when it is.

    >>> validation_message("wavelength", 3.0)
    'Maximum: 2.0μm'
    """
    low, high, unit = PARAM_BOUNDS[key]
    number = _as_float(value)
    if _unusable(value, number):
        return "Invalid number"
    if number < low:
        return f"Minimum: {low}{unit}"
    if number > high:
        return f"Maximum: {high}{unit}"
    return None


def slit_constraint_message(slit_width: float, slit_separation: float) -> Optional[str]:
    if slit_width >= slit_separation:
        return "Slit width must be less than slit separation"
    return None


def validation_errors(params: PhysicsParams) -> Dict[str, str]:
    """Map each offending field of unvalidated ``params`` to its message."""
    errors = {}
    for key in NUMERIC_FIELDS:
        message = validation_message(key, getattr(params, key))
        if message:
            errors[key] = message

    slit_error = slit_constraint_message(
        _as_float(params.slit_width), _as_float(params.slit_separation)
    )
    if slit_error:
        errors["slit_width"] = slit_error
    return errors


def format_param_value(key: str, value: float) -> str:
    """Format with a precision that suits the width of the field's range."""
    low, high, _ = PARAM_BOUNDS[key]
    span = high - low
    if span < 1:
        precision = 2
    elif span < 10:
        precision = 1
    else:
        precision = 0
    return f"{value:.{precision}f}"


__all__ = [
    "validate",
    "clamp_param",
    "midpoint",
    "is_within_bounds",
    "validation_message",
    "slit_constraint_message",
    "validation_errors",
    "format_param_value",
]
