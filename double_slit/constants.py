"""Physical bounds and fixed geometry of the simulated apparatus."""

# ---------------- Parameter bounds ----------------
# (min, max, unit) per numeric field of PhysicsParams
PARAM_BOUNDS = {
    "wavelength": (0.1, 2.0, "μm"),
    "slit_separation": (0.5, 10.0, "μm"),
    "slit_width": (0.1, 5.0, "μm"),
    "screen_distance": (1.0, 20.0, "μm"),
    "amplitude": (0.1, 1.0, ""),
    "wave_speed": (0.1, 10.0, "c"),
    "particle_rate": (10.0, 1000.0, "/s"),
    "time_scale": (0.1, 5.0, "x"),
}

# width repaired to this fraction of the separation when slits would overlap
SLIT_WIDTH_REPAIR_RATIO = 0.8

# ---------------- Apparatus geometry ----------------
SCREEN_WIDTH = 12.0          # detection screen extent along z
FRINGE_MARKER_COUNT = 10     # markers on each side of the centre
FRINGE_MARKER_OFFSET = 0.1   # markers sit just in front of the screen
WAVE_FIELD_WIDTH = 12.0      # z extent of the wave plane

# ---------------- Particle emission ----------------
NUM_PARTICLES = 500
ATTEMPTS_PER_PARTICLE = 200
PARTICLE_SPEED_FACTOR = 2.0  # particles fly at twice the wave speed

# ---------------- Wave field ----------------
MIN_SOURCE_DISTANCE = 0.1
MAX_SOURCE_AMPLITUDE = 3.0

__all__ = [
    "PARAM_BOUNDS",
    "SLIT_WIDTH_REPAIR_RATIO",
    "SCREEN_WIDTH",
    "FRINGE_MARKER_COUNT",
    "FRINGE_MARKER_OFFSET",
    "WAVE_FIELD_WIDTH",
    "NUM_PARTICLES",
    "ATTEMPTS_PER_PARTICLE",
    "PARTICLE_SPEED_FACTOR",
    "MIN_SOURCE_DISTANCE",
    "MAX_SOURCE_AMPLITUDE",
]
