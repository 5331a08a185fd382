"""Keyboard and mouse-wheel driven 2D camera state with smoothed rotation."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

_FULL_TURN = 360.0
_KNOWN_KEYS = frozenset(
    {"w", "s", "a", "d", "left", "right", "up", "down", "ctrl", "q", "escape"}
)


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest distance in degrees from a0 to a1."""
    da = math.fmod(a1 - a0, _FULL_TURN)
    return math.fmod(2.0 * da, _FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate from a0 towards a1 along the shorter way round."""
    return a0 + short_angle_dist(a0, a1) * t


def wrap_rotation(angle: float) -> float:
    """Bring an angle that left [0, 360) by less than one turn back into it."""
    if angle >= _FULL_TURN:
        return angle - _FULL_TURN
    if angle < 0.0:
        return angle + _FULL_TURN
    return angle


@dataclass
class CameraRig:
    """Camera target, zoom, rotation and offset updated once per frame."""

    target: tuple[float, float] = (0.0, 0.0)
    zoom: float = 1.0
    rotation: float = 0.0
    smooth_rotation: float = 0.0
    offset: tuple[float, float] = (0.0, 0.0)

    def step(self, keys: Iterable[str], wheel_y: float = 0.0) -> bool:
        """Apply one frame of input; return False when quit was requested.

        Keys are lower-case names: w, s, a, d, left, right, up, down,
        ctrl, q and escape.
        """
        held = set(keys)
        unknown = held - _KNOWN_KEYS
        if unknown:
            raise ValueError(f"unknown keys: {sorted(unknown)}")

        tx, ty = self.target
        if "w" in held:
            ty -= 0.1
        if "s" in held:
            ty += 0.1
        if "a" in held:
            tx += 0.1
        if "d" in held:
            tx -= 0.1
        self.target = (tx, ty)

        ox, oy = self.offset
        if "left" in held:
            ox -= 0.1
        if "right" in held:
            ox += 0.1
        if "up" in held:
            oy += 0.1
        if "down" in held:
            oy -= 0.1
        self.offset = (ox, oy)

        if held & {"q", "escape"}:
            return False

        if wheel_y != 0.0:
            if "ctrl" in held:
                self.zoom *= 1.1 ** wheel_y
            else:
                self.rotation = wrap_rotation(self.rotation + 10.0 * wheel_y)

        self.smooth_rotation = angle_lerp(self.smooth_rotation, self.rotation, 0.1)
        return True