"""Coordinating context that owns the parameters, the clock and the particles.

Consumers never reach into the state directly. They subscribe and receive a
frozen ``Frame`` per tick (or per parameter update), so everything drawn in
one frame observes the same simulation time and the same parameter set.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

import numpy as np

from double_slit import physics
from double_slit.clock import SimulationClock
from double_slit.constants import NUM_PARTICLES
from double_slit.params import PhysicsParams
from double_slit.particles import Particle, ParticleEmitter, in_flight
from double_slit.validation import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    time: float
    params: PhysicsParams
    visible_particles: Tuple[Particle, ...] = ()
    moving_particles: Tuple[Particle, ...] = ()
    population_size: int = 0


Subscriber = Callable[[Frame], None]


class Simulation:
    def __init__(
        self,
        params: Optional[PhysicsParams] = None,
        rng: Optional[np.random.Generator] = None,
        num_particles: int = NUM_PARTICLES,
    ):
        self._params = validate(params if params is not None else PhysicsParams())
        self._clock = SimulationClock(
            time_scale=self._params.time_scale, paused=self._params.is_paused
        )
        self._emitter = ParticleEmitter(rng=rng, num_particles=num_particles)
        self._subscribers: List[Subscriber] = []
        self._emitter.sync(self._params)
        self._frame = self._snapshot()

    # ---------------- Read access ----------------

    @property
    def params(self) -> PhysicsParams:
        return self._params

    @property
    def simulation_time(self) -> float:
        return self._frame.time

    @property
    def visible_particles(self) -> Tuple[Particle, ...]:
        return self._frame.visible_particles

    @property
    def frame(self) -> Frame:
        return self._frame

    @property
    def clock(self) -> SimulationClock:
        return self._clock

    @property
    def population(self):
        return self._emitter.population

    def intensity(self, z: float) -> float:
        return physics.intensity(z, self._params)

    def intensity_profile(self, z) -> np.ndarray:
        return physics.intensity_profile(z, self._params)

    # ---------------- Subscriptions ----------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for every published frame; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self) -> Frame:
        self._frame = self._snapshot()
        for callback in list(self._subscribers):
            callback(self._frame)
        return self._frame

    def _snapshot(self) -> Frame:
        population = self._emitter.population
        now = self._clock.elapsed
        moving = in_flight(population, now, self._params) if population is not None else ()
        return Frame(
            time=now,
            params=self._params,
            visible_particles=self._emitter.visible,
            moving_particles=moving,
            population_size=len(population) if population is not None else 0,
        )

    # ---------------- Updates ----------------

    def update_params(self, params: Union[PhysicsParams, Mapping[str, Any], None] = None, **changes) -> PhysicsParams:
        """
        Replace the parameters wholesale or merge a partial update.

        ``params`` (a PhysicsParams or a mapping) replaces the whole set; keyword ``changes`` are merged on
        top of ``params`` (or the current set when omitted). The result is
        validated before the clock and the emitter see it.
        """
        candidate = params if params is not None else self._params
        if not isinstance(candidate, PhysicsParams):
            candidate = PhysicsParams.from_mapping(candidate)
        if changes:
            candidate = candidate.merge(**changes)
        validated = validate(candidate)

        self._params = validated
        self._clock.time_scale = validated.time_scale
        self._clock.set_paused(validated.is_paused)
        if self._emitter.sync(validated):
            logger.info("Particle population regenerated, restarting simulation time")
            self._clock.reset()

        self._publish()
        return validated

    def reset(self) -> Frame:
        """Restart simulation time; fresh particles in particle mode, none otherwise."""
        self._clock.reset()
        if self._params.particle_mode:
            self._emitter.regenerate(self._params)
        else:
            self._emitter.clear()
        return self._publish()

    def tick(self, timestamp: float) -> Frame:
        """One frame: advance the clock, then reveal particles, then publish."""
        now = self._clock.tick(timestamp)
        self._emitter.advance(now)
        return self._publish()


__all__ = ["Frame", "Simulation"]
