"""Breakout-style game logic: a paddle, a bouncing ball and a wall of blocks."""

from __future__ import annotations

from quadkit.geometry import Rect


class Arkanoid:
    """Game state in a SCREEN_WIDTH x SCREEN_HEIGHT world with y growing downwards."""

    BLOCKS_W = 10
    BLOCKS_H = 10
    SCREEN_WIDTH = 20.0
    SCREEN_HEIGHT = 20.0
    BLOCKS_AREA_HEIGHT = 7.0
    PLATFORM_WIDTH = 5.0
    PLATFORM_HEIGHT = 0.2
    PLATFORM_SPEED = 3.0
    BALL_RADIUS = 0.2

    def __init__(self) -> None:
        self.blocks: list[list[bool]] = [
            [True] * self.BLOCKS_W for _ in range(self.BLOCKS_H)
        ]
        self.ball_x = 12.0
        self.ball_y = 7.0
        self.dx = 3.5
        self.dy = -3.5
        self.platform_x = 10.0
        self.stick = True

    @property
    def remaining_blocks(self) -> int:
        return sum(row.count(True) for row in self.blocks)

    def block_rect(self, i: int, j: int) -> Rect:
        """Area in which the ball hits block column i, row j."""
        if not (0 <= i < self.BLOCKS_W and 0 <= j < self.BLOCKS_H):
            raise IndexError(f"block ({i}, {j}) is outside the wall")
        block_w = self.SCREEN_WIDTH / self.BLOCKS_W
        block_h = self.BLOCKS_AREA_HEIGHT / self.BLOCKS_H
        return Rect(i * block_w + 0.05, j * block_h + 0.05, block_w, block_h)

    def _over_platform(self) -> bool:
        half = self.PLATFORM_WIDTH / 2.0
        return self.platform_x - half <= self.ball_x <= self.platform_x + half

    def update(self, dt: float, left: bool, right: bool, space: bool) -> list[tuple[int, int]]:
        """Advance one frame of dt seconds; return the (i, j) blocks broken in it."""
        half = self.PLATFORM_WIDTH / 2.0
        if right and self.platform_x < self.SCREEN_WIDTH - half:
            self.platform_x += self.PLATFORM_SPEED * dt
        if left and self.platform_x > half:
            self.platform_x -= self.PLATFORM_SPEED * dt

        if not self.stick:
            self.ball_x += self.dx * dt
            self.ball_y += self.dy * dt
        else:
            self.ball_x = self.platform_x
            self.ball_y = self.SCREEN_HEIGHT - 0.5
            self.stick = not space

        if self.ball_x <= 0.0 or self.ball_x > self.SCREEN_WIDTH:
            self.dx = -self.dx
        paddle_line = self.SCREEN_HEIGHT - self.PLATFORM_HEIGHT - 0.15 / 2.0
        if self.ball_y <= 0.0 or (self.ball_y > paddle_line and self._over_platform()):
            self.dy = -self.dy
        if self.ball_y >= self.SCREEN_HEIGHT:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        broken: list[tuple[int, int]] = []
        for j, row in enumerate(self.blocks):
            for i, alive in enumerate(row):
                if not alive:
                    continue
                rect = self.block_rect(i, j)
                if (rect.left <= self.ball_x < rect.right
                        and rect.top <= self.ball_y < rect.bottom):
                    self.dy = -self.dy
                    row[i] = False
                    broken.append((i, j))
        return broken