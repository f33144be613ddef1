"""Physics parameters of one simulation session.

A ``PhysicsParams`` value is never edited in place: every user edit produces
a new instance (see ``merge``) which then goes through
``double_slit.validation.validate`` before anything consumes it.
"""
import re
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

NUMERIC_FIELDS = (
    "wavelength",
    "slit_separation",
    "slit_width",
    "screen_distance",
    "amplitude",
    "wave_speed",
    "particle_rate",
    "time_scale",
)
FLAG_FIELDS = ("show_waves", "particle_mode", "is_paused")

# fields whose change invalidates a generated particle population
GEOMETRY_FIELDS = (
    "wavelength",
    "slit_separation",
    "slit_width",
    "screen_distance",
    "particle_rate",
)


@dataclass(frozen=True)
class PhysicsParams:
    wavelength: float = 0.5        # μm
    slit_separation: float = 2.0   # μm, centre to centre
    slit_width: float = 0.3        # μm
    screen_distance: float = 10.0  # μm
    amplitude: float = 0.5
    wave_speed: float = 2.0
    particle_rate: float = 100.0   # particles per second of simulation time
    time_scale: float = 1.0
    show_waves: bool = True
    particle_mode: bool = False
    is_paused: bool = False

    def merge(self, **changes) -> "PhysicsParams":
        """Return a copy with ``changes`` applied; unknown names raise TypeError."""
        return replace(self, **changes)

    def geometry(self):
        """Values that determine the particle distribution and its timing."""
        return tuple(getattr(self, name) for name in GEOMETRY_FIELDS)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PhysicsParams":
        """Build params from a mapping with snake_case or camelCase keys.

        Keys that are not strings or do not name a field are ignored; missing
        ones take defaults.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            name = _snake_case(key)
            if name in known:
                values[name] = value
        return cls(**values)


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


__all__ = ["PhysicsParams", "NUMERIC_FIELDS", "FLAG_FIELDS", "GEOMETRY_FIELDS"]
