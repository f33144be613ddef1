"""Particle detections sampled from the interference pattern.

A population is drawn all at once by rejection sampling against
``physics.intensity_profile`` and every detection carries the simulation time
at which it should appear, so the pattern builds up dot by dot at the
configured particle rate.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from double_slit.constants import (
    ATTEMPTS_PER_PARTICLE,
    NUM_PARTICLES,
    PARTICLE_SPEED_FACTOR,
    SCREEN_WIDTH,
)
from double_slit.params import PhysicsParams
from double_slit.physics import intensity_profile

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]

# candidates evaluated per vectorized batch
_BATCH_SIZE = 4096


@dataclass(frozen=True)
class Particle:
    position: Vec3
    reveal_time: float  # simulation time, not wall-clock time


@dataclass(frozen=True)
class ParticlePopulation:
    particles: Tuple[Particle, ...]
    params: Optional[PhysicsParams] = None
    requested: int = NUM_PARTICLES

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def __getitem__(self, index):
        return self.particles[index]

    @property
    def complete(self) -> bool:
        return len(self.particles) == self.requested


def generate(
    params,
    rng: Optional[np.random.Generator] = None,
    num_particles: int = NUM_PARTICLES,
    screen_width: float = SCREEN_WIDTH,
    max_attempts: Optional[int] = None,
) -> ParticlePopulation:
    """
    Sample up to ``num_particles`` detections on the screen.

    Candidates are uniform over the screen width and kept when a uniform
    threshold falls below the intensity there. Sampling stops after
    ``max_attempts`` draws (default 200 per particle); the population is then
    simply smaller than requested. Reveal times are uniform over
    num_particles / particle_rate seconds.
    """
    if num_particles < 0:
        raise ValueError(f"num_particles must be non-negative, got {num_particles}")
    if rng is None:
        rng = np.random.default_rng()
    if max_attempts is None:
        max_attempts = num_particles * ATTEMPTS_PER_PARTICLE

    accepted = []
    attempts = 0
    while len(accepted) < num_particles and attempts < max_attempts:
        batch = min(_BATCH_SIZE, max_attempts - attempts)
        candidates = (rng.random(batch) - 0.5) * screen_width
        thresholds = rng.random(batch)
        hits = candidates[thresholds < intensity_profile(candidates, params)]
        accepted.extend(hits[: num_particles - len(accepted)].tolist())
        attempts += batch

    if len(accepted) < num_particles:
        logger.info(
            "Rejection sampling exhausted after %d attempts: %d of %d particles",
            attempts,
            len(accepted),
            num_particles,
        )

    total_duration = num_particles / params.particle_rate if params.particle_rate > 0 else 0.0
    reveal_times = rng.random(len(accepted)) * total_duration

    x = float(params.screen_distance)
    particles = tuple(
        Particle(position=(x, 0.0, float(z)), reveal_time=float(t))
        for z, t in zip(accepted, reveal_times)
    )
    return ParticlePopulation(particles=particles, params=params, requested=num_particles)


def visible_subset(population, current_time: float) -> Tuple[Particle, ...]:
    """Particles already revealed at ``current_time``, in population order."""
    return tuple(p for p in population if p.reveal_time <= current_time)


def in_flight(population, current_time: float, params) -> Tuple[Particle, ...]:
    """
    Particles still travelling from the source to the screen.

    Each one leaves x = 0 at its reveal time and moves at twice the wave
    speed; the returned copies carry their current position.
    """
    speed = params.wave_speed * PARTICLE_SPEED_FACTOR
    if speed <= 0 or params.screen_distance <= 0:
        return ()
    travel_time = params.screen_distance / speed

    moving = []
    for particle in population:
        elapsed = current_time - particle.reveal_time
        if 0 <= elapsed < travel_time:
            progress = elapsed / travel_time
            _, y, z = particle.position
            moving.append(
                Particle(position=(progress * params.screen_distance, y, z), reveal_time=particle.reveal_time)
            )
    return tuple(moving)


class ParticleEmitter:
    """
    Owns the live population and its growing visible subset.

    The population is rebuilt whole whenever particle mode switches on or a
    parameter that shapes the distribution changes; it is never patched.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        num_particles: int = NUM_PARTICLES,
        screen_width: float = SCREEN_WIDTH,
    ):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.num_particles = num_particles
        self.screen_width = screen_width
        self._population: Optional[ParticlePopulation] = None
        self._visible: Tuple[Particle, ...] = ()

    @property
    def population(self) -> Optional[ParticlePopulation]:
        return self._population

    @property
    def visible(self) -> Tuple[Particle, ...]:
        return self._visible

    def sync(self, params) -> bool:
        """Bring the population in line with ``params``; True when it was regenerated."""
        if not params.particle_mode:
            if self._population is not None:
                self.clear()
            return False
        if self._population is None or self._population.params.geometry() != params.geometry():
            self.regenerate(params)
            return True
        return False

    def regenerate(self, params) -> ParticlePopulation:
        self._population = generate(
            params,
            rng=self.rng,
            num_particles=self.num_particles,
            screen_width=self.screen_width,
        )
        self._visible = ()
        logger.debug("Generated %d particles", len(self._population))
        return self._population

    def advance(self, current_time: float) -> Tuple[Particle, ...]:
        """Recompute the visible subset; it only ever grows until the next regeneration."""
        if self._population is None:
            return self._visible
        shown = visible_subset(self._population, current_time)
        if len(shown) > len(self._visible):
            self._visible = shown
        return self._visible

    def clear(self):
        self._population = None
        self._visible = ()


__all__ = [
    "Vec3",
    "Particle",
    "ParticlePopulation",
    "generate",
    "visible_subset",
    "in_flight",
    "ParticleEmitter",
]
