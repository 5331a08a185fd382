"""Asteroids game logic: a drifting ship, timed shots and splitting rocks."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from quadkit.geometry import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
MAX_SPEED = 5.0
SHOT_INTERVAL = 0.5
BULLET_LIFETIME = 1.5
BULLET_SPEED = 7.0
ASTEROID_COUNT = 10


def wrap_around(pos: Vec2, width: float, height: float) -> Vec2:
    """Move a point that left the screen to the opposite edge."""
    x, y = pos.x, pos.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


@dataclass
class Ship:
    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = field(default_factory=Vec2)


@dataclass
class Bullet:
    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


class AsteroidsGame:
    """One round of asteroids on a width x height screen."""

    def __init__(self, width: float = 800.0, height: float = 600.0,
                 rng: random.Random | None = None, now: float = 0.0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self._rng = rng or random.Random()
        self.last_shot = now
        self.reset(now)

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def won(self) -> bool:
        return self.game_over and not self.asteroids

    def reset(self, now: float) -> None:
        """Start a new round with a fresh ring of asteroids."""
        rng = self._rng
        self.ship = Ship(pos=self.center)
        self.bullets: list[Bullet] = []
        self.game_over = False
        short_side = min(self.width, self.height)
        self.asteroids: list[Asteroid] = [
            Asteroid(
                pos=self.center
                + Vec2(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)).normalize()
                * short_side / 2.0,
                vel=Vec2(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)),
                rot=0.0,
                rot_speed=rng.uniform(-2.0, 2.0),
                size=short_side / 10.0,
                sides=rng.randrange(3, 8),
            )
            for _ in range(ASTEROID_COUNT)
        ]

    def _fragment(self, parent: Asteroid, direction: Vec2) -> Asteroid:
        rng = self._rng
        return Asteroid(
            pos=parent.pos,
            vel=direction.normalize() * rng.uniform(1.0, 3.0),
            rot=rng.uniform(0.0, 360.0),
            rot_speed=rng.uniform(-2.0, 2.0),
            size=parent.size * 0.8,
            sides=parent.sides - 1,
        )

    def update(self, now: float, up: bool = False, left: bool = False,
               right: bool = False, space: bool = False) -> None:
        """Advance one frame at time now; does nothing once the round is over."""
        if self.game_over:
            return
        ship = self.ship
        rotation = math.radians(ship.rot)
        heading = Vec2(math.sin(rotation), -math.cos(rotation))

        acc = -ship.vel / 100.0
        if up:
            acc = heading / 3.0

        if space and now - self.last_shot > SHOT_INTERVAL:
            self.bullets.append(Bullet(
                pos=ship.pos + heading * SHIP_HEIGHT / 2.0,
                vel=heading * BULLET_SPEED,
                shot_at=now,
            ))
            self.last_shot = now

        if right:
            ship.rot += 5.0
        elif left:
            ship.rot -= 5.0

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel
        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.game_over = True
                break
            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 3:
                        fragments.append(self._fragment(asteroid, Vec2(bullet.vel.y, -bullet.vel.x)))
                        fragments.append(self._fragment(asteroid, Vec2(-bullet.vel.y, bullet.vel.x)))
                    break

        self.bullets = [
            b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided] + fragments

        if not self.asteroids:
            self.game_over = True

    def ship_vertices(self) -> tuple[Vec2, Vec2, Vec2]:
        """Nose, left and right corners of the ship triangle."""
        pos = self.ship.pos
        rotation = math.radians(self.ship.rot)
        sin, cos = math.sin(rotation), math.cos(rotation)
        half_h = SHIP_HEIGHT / 2.0
        half_b = SHIP_BASE / 2.0
        nose = Vec2(pos.x + sin * half_h, pos.y - cos * half_h)
        left = Vec2(pos.x - cos * half_b - sin * half_h, pos.y - sin * half_b + cos * half_h)
        right = Vec2(pos.x + cos * half_b - sin * half_h, pos.y + sin * half_b + cos * half_h)
        return nose, left, right