"""Particle emitter simulation: spawning, integrating and retiring particles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace

from quadkit.curve import BatchedCurve, Curve
from quadkit.emission import Color, EmitterConfig
from quadkit.geometry import Vec2

_WHOLE_TEXTURE = (0.0, 0.0, 1.0, 1.0)


@dataclass
class Particle:
    """One live particle: what gets drawn plus the state that drives it."""

    position: Vec2
    rotation: float
    size: float
    velocity: Vec2
    angular_velocity: float
    lifetime: float
    initial_size: float
    spawn_index: int
    color: Color
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)
    progress: float = 0.0
    lived: float = 0.0
    frame: int = 0


def _batch(curve: Curve | None) -> BatchedCurve | None:
    return curve.batch() if curve is not None else None


def _random_initial_vector(
    direction: Vec2, spread: float, velocity: float, rng: random.Random
) -> Vec2:
    angle = rng.uniform(-spread / 2.0, spread / 2.0)
    cos, sin = math.cos(angle), math.sin(angle)
    rotated = Vec2(direction.x * cos - direction.y * sin, direction.x * sin + direction.y * cos)
    return rotated * velocity


def _randomized(value: float, randomness: float, rng: random.Random) -> float:
    return value - value * rng.uniform(0.0, randomness)


class Emitter:
    """Spawns particles according to an EmitterConfig and advances them in time."""

    MAX_PARTICLES = 10000

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self._rng = rng or random.Random()
        self.blend_mode = config.blend_mode
        self.blend_state = config.blend_mode.blend_state()
        self.geometry = config.shape.geometry()
        self.batched_size_curve = _batch(config.size_curve)
        self.position = Vec2(0.0, 0.0)
        self.particles: list[Particle] = []
        self.particles_spawned = 0
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.mesh_dirty = False

    def reset(self) -> None:
        """Drop every particle and restart the emission cycle."""
        self.particles.clear()
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0

    def rebuild_size_curve(self) -> None:
        """Re-sample config.size_curve after it was changed."""
        self.batched_size_curve = _batch(self.config.size_curve)

    def update_particle_mesh(self) -> None:
        """Rebuild the particle mesh from config.shape on the next update."""
        self.mesh_dirty = True

    def _emit_particle(self, offset: Vec2) -> None:
        if len(self.particles) >= self.MAX_PARTICLES:
            raise OverflowError(f"an emitter holds at most {self.MAX_PARTICLES} particles")
        cfg = self.config
        rng = self._rng
        offset = offset + cfg.emission_shape.random_point(rng)

        size = _randomized(cfg.size, cfg.size_randomness, rng)
        rotation = _randomized(cfg.initial_rotation, cfg.initial_rotation_randomness, rng)
        position = offset if cfg.local_coords else self.position + offset

        particle = Particle(
            position=position,
            rotation=rotation,
            size=size,
            velocity=_random_initial_vector(
                cfg.initial_direction,
                cfg.initial_direction_spread,
                _randomized(cfg.initial_velocity, cfg.initial_velocity_randomness, rng),
                rng,
            ),
            angular_velocity=_randomized(
                cfg.initial_angular_velocity, cfg.initial_angular_velocity_randomness, rng
            ),
            lifetime=_randomized(cfg.lifetime, cfg.lifetime_randomness, rng),
            initial_size=size,
            spawn_index=self.particles_spawned,
            color=cfg.colors_curve.start,
        )
        self.particles_spawned += 1
        self.particles.append(particle)

    def emit(self, pos: Vec2, n: int) -> None:
        """Immediately emit n particles at pos, ignoring "emitting" and "amount"."""
        for _ in range(n):
            self._emit_particle(pos)
            self.particles_spawned += 1

    def _advance(self, particle: Particle, dt: float) -> None:
        cfg = self.config
        particle.velocity = particle.velocity + particle.velocity * (cfg.linear_accel * dt)
        particle.angular_velocity += particle.angular_velocity * cfg.angular_accel * dt
        particle.angular_velocity *= 1.0 - cfg.angular_damping

        has_lifetime = particle.lifetime != 0.0
        t = particle.lived / particle.lifetime if has_lifetime else 1.0
        particle.color = cfg.colors_curve.at(t)
        particle.position = particle.position + particle.velocity * dt
        particle.rotation += particle.angular_velocity * dt

        scale = self.batched_size_curve.get(t) if self.batched_size_curve else 1.0
        particle.size = particle.initial_size * scale
        if has_lifetime:
            particle.progress = t

        particle.lived += dt
        particle.velocity = particle.velocity + cfg.gravity * dt

        atlas = cfg.atlas
        if atlas is None:
            particle.uv = _WHOLE_TEXTURE
            return
        if has_lifetime:
            span = atlas.end_index - atlas.start_index
            particle.frame = max(int(particle.lived / particle.lifetime * span), 0) + atlas.start_index
        particle.uv = atlas.frame_uv(particle.frame)

    def update(self, dt: float) -> None:
        """Spawn, move and retire particles for a frame of dt seconds."""
        cfg = self.config
        if self.mesh_dirty:
            self.geometry = cfg.shape.geometry()
            self.mesh_dirty = False

        if cfg.emitting:
            self.time_passed += dt
            if cfg.amount == 0:
                spawn_amount = 0
            else:
                gap = (cfg.lifetime / cfg.amount) * (1.0 - cfg.explosiveness)
                if gap < 0.001:
                    spawn_amount = cfg.amount
                else:
                    spawn_amount = max(int((self.time_passed - self.last_emit_time) / gap), 0)

            for _ in range(spawn_amount):
                self.last_emit_time = self.time_passed
                if self.particles_spawned < cfg.amount:
                    self._emit_particle(Vec2(0.0, 0.0))
                if len(self.particles) >= cfg.amount:
                    break

        if cfg.one_shot and self.time_passed > cfg.lifetime:
            self.time_passed = 0.0
            self.last_emit_time = 0.0
            cfg.emitting = False

        for particle in self.particles:
            self._advance(particle, dt)

        survivors = []
        for particle in self.particles:
            # The second test covers a config lifetime lowered while particles live.
            if particle.lived >= particle.lifetime or particle.lived > cfg.lifetime:
                if particle.lived != particle.lifetime:
                    self.particles_spawned -= 1
            else:
                survivors.append(particle)
        self.particles = survivors

    def draw(self, pos: Vec2, dt: float) -> list[Particle]:
        """Move the emitter to pos, advance by dt and return the particles to render."""
        if self.config.blend_mode != self.blend_mode:
            self.blend_mode = self.config.blend_mode
            self.blend_state = self.blend_mode.blend_state()
        self.position = pos
        self.update(dt)
        return list(self.particles)


class EmittersCache:
    """Many short-lived emitters sharing one config, recycled through a pool."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self._rng = rng or random.Random()
        self.emitter = Emitter(replace(config), self._rng)
        self.pool: list[Emitter] = [
            Emitter(replace(config, emitting=False), self._rng)
            for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self.active: list[tuple[Emitter, Vec2]] = []

    def spawn(self, pos: Vec2) -> None:
        """Start a fresh emission cycle at pos."""
        emitter = self.pool.pop() if self.pool else Emitter(replace(self.config), self._rng)
        emitter.mesh_dirty = True
        emitter.config.emitting = True
        emitter.reset()
        self.active.append((emitter, pos))

    def draw(self, dt: float) -> list[Particle]:
        """Advance every active emitter; finished ones go back to the pool."""
        drawn: list[Particle] = []
        still_active: list[tuple[Emitter, Vec2]] = []
        for emitter, pos in self.active:
            emitter.position = pos
            emitter.update(dt)
            drawn.extend(emitter.particles)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self.pool.append(emitter)
        self.active = still_active
        return drawn