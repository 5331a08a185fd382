"""Particle emitter configuration: colours, emission shapes, meshes, blending and atlases."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum

from quadkit.curve import Curve
from quadkit.geometry import Vec2


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def lerp(self, other: Color, t: float) -> Color:
        """Blend linearly from this colour (t=0) to other (t=1)."""
        keep = 1.0 - t
        return Color(
            self.r * keep + other.r * t,
            self.g * keep + other.g * t,
            self.b * keep + other.b * t,
            self.a * keep + other.a * t,
        )


WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class ColorCurve:
    """Particle colour over its lifetime: start, middle and end."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE

    def at(self, t: float) -> Color:
        """Colour at lifetime fraction t; first half runs start->mid, second mid->end."""
        if t < 0.5:
            return self.start.lerp(self.mid, t * 2.0)
        return self.mid.lerp(self.end, (t - 0.5) * 2.0)


@dataclass(frozen=True)
class PointEmission:
    """Every particle starts exactly at the emitter position."""

    def random_point(self, rng: random.Random) -> Vec2:
        return Vec2(0.0, 0.0)


@dataclass(frozen=True)
class RectEmission:
    """Particles start anywhere in a rectangle centred on the emitter."""

    width: float
    height: float

    def random_point(self, rng: random.Random) -> Vec2:
        return Vec2(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class SphereEmission:
    """Particles start uniformly inside a disc centred on the emitter."""

    radius: float

    def random_point(self, rng: random.Random) -> Vec2:
        distance = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        angle = rng.uniform(0.0, math.pi * 2.0)
        return Vec2(distance * math.cos(angle), distance * math.sin(angle))


EmissionShape = PointEmission | RectEmission | SphereEmission

# Each vertex is: x, y, z, u, v, r, g, b, a.
_VERTEX_SIZE = 9


@dataclass(frozen=True)
class RectangleMesh:
    """A quad particle, stretched horizontally by aspect_ratio."""

    aspect_ratio: float = 1.0

    def geometry(self) -> tuple[list[float], list[int]]:
        """Return interleaved vertex data and triangle indices."""
        ar = self.aspect_ratio
        vertices = [
            -ar, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            ar, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            ar, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
            -ar, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        ]
        return vertices, [0, 1, 2, 0, 2, 3]


@dataclass(frozen=True)
class CircleMesh:
    """A triangle-fan disc particle."""

    subdivisions: int

    def __post_init__(self) -> None:
        if self.subdivisions < 1:
            raise ValueError("a circle needs at least one subdivision")

    def geometry(self) -> tuple[list[float], list[int]]:
        """Return interleaved vertex data and triangle indices."""
        vertices = [0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend([rx, ry, 0.0, rx, ry, 1.0, 1.0, 1.0, 1.0])
            if i != self.subdivisions:
                indices.extend([0, i + 1, i + 2])
        return vertices, indices


@dataclass(frozen=True)
class CustomMesh:
    """A user-supplied mesh in the same interleaved vertex layout."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "indices", tuple(self.indices))
        if len(self.vertices) % _VERTEX_SIZE:
            raise ValueError(f"vertex data must be a multiple of {_VERTEX_SIZE} floats")
        count = len(self.vertices) // _VERTEX_SIZE
        if any(not 0 <= index < count for index in self.indices):
            raise ValueError("index refers to a vertex that does not exist")

    def geometry(self) -> tuple[list[float], list[int]]:
        return list(self.vertices), list(self.indices)


ParticleShape = RectangleMesh | CircleMesh | CustomMesh


class BlendFactor(Enum):
    ONE = "one"
    SOURCE_ALPHA = "source_alpha"
    ONE_MINUS_SOURCE_ALPHA = "one_minus_source_alpha"


@dataclass(frozen=True)
class BlendState:
    """Additive blend equation: source * src_factor + dest * dst_factor."""

    src_factor: BlendFactor
    dst_factor: BlendFactor


class BlendMode(Enum):
    """How overlapping particles combine."""

    ALPHA = "alpha"
    ADDITIVE = "additive"

    def blend_state(self) -> BlendState:
        if self is BlendMode.ALPHA:
            return BlendState(BlendFactor.SOURCE_ALPHA, BlendFactor.ONE_MINUS_SOURCE_ALPHA)
        return BlendState(BlendFactor.SOURCE_ALPHA, BlendFactor.ONE)


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite-sheet layout of n columns by m rows, animated over a frame range."""

    n: int
    m: int
    start_index: int
    end_index: int

    def __post_init__(self) -> None:
        if self.n <= 0 or self.m <= 0:
            raise ValueError("atlas dimensions must be positive")
        if not 0 <= self.start_index <= self.end_index:
            raise ValueError("atlas frame range is invalid")

    @classmethod
    def from_bounds(cls, n: int, m: int, start: int | None = None, end: int | None = None) -> AtlasConfig:
        """Build from a half-open frame range; missing bounds span the whole sheet."""
        return cls(n, m, 0 if start is None else start, n * m if end is None else end)

    def frame_uv(self, frame: int) -> tuple[float, float, float, float]:
        """Texture rectangle (u, v, width, height) of a frame."""
        x = frame % self.n
        y = frame // self.n
        return (x / self.n, y / self.m, 1.0 / self.n, 1.0 / self.m)


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom vertex and fragment shader sources for particles."""

    vertex: str
    fragment: str


@dataclass
class EmitterConfig:
    """Everything that describes how an emitter spawns, moves and draws particles."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=PointEmission)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=RectangleMesh)
    emitting: bool = True
    initial_direction: Vec2 = field(default_factory=lambda: Vec2(0.0, -1.0))
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    initial_rotation: float = 0.0
    initial_rotation_randomness: float = 0.0
    initial_angular_velocity: float = 0.0
    initial_angular_velocity_randomness: float = 0.0
    angular_accel: float = 0.0
    angular_damping: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Curve | None = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    texture: object | None = None
    atlas: AtlasConfig | None = None
    material: ParticleMaterial | None = None
    post_processing: bool = False