"""
double_slit - interactive double-slit experiment simulator.

Physics core (intensity model, simulation clock, particle emission,
parameter validation) plus the coordinating Simulation that a display layer
subscribes to.
"""

__version__ = "0.1.0"

from .params import PhysicsParams
from .validation import validate
from .physics import intensity, intensity_profile, fringe_spacing, fringe_markers, wave_field
from .clock import ClockState, SimulationClock
from .particles import Particle, ParticlePopulation, ParticleEmitter, generate, visible_subset, in_flight
from .simulation import Frame, Simulation
from .scheduler import FrameLoop

__all__ = [
    "PhysicsParams",
    "validate",
    "intensity",
    "intensity_profile",
    "fringe_spacing",
    "fringe_markers",
    "wave_field",
    "ClockState",
    "SimulationClock",
    "Particle",
    "ParticlePopulation",
    "ParticleEmitter",
    "generate",
    "visible_subset",
    "in_flight",
    "Frame",
    "Simulation",
    "FrameLoop",
]
