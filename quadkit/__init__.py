"""Rendering-free game logic: platformer physics, particle emitters, curves, a camera rig and mini-game simulations."""

__version__ = "0.1.0"