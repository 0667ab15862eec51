"""The scrolling star field behind the playfield."""

from __future__ import annotations

import random

from .geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Colour, Vec2

STAR_COUNT = 400
STAR_SPEED = 12.0
STAR_COLOUR: Colour = (0, 0, 255)


class StarField:
    """Randomly placed stars that scroll opposite to the ship."""

    def __init__(
        self,
        rng: random.Random | None = None,
        count: int = STAR_COUNT,
        speed: float = STAR_SPEED,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.speed = speed
        self.colour = STAR_COLOUR
        self.stars = [
            Vec2(
                float(self._rng.randrange(WINDOW_WIDTH)),
                float(self._rng.randrange(WINDOW_HEIGHT)),
            )
            for _ in range(count)
        ]

    def _wrap(self, star: Vec2, right_edge_height: int) -> Vec2:
        if star.x < 0:
            return Vec2(float(WINDOW_WIDTH), float(self._rng.randrange(WINDOW_HEIGHT)))
        if star.x > WINDOW_WIDTH:
            return Vec2(0.0, float(self._rng.randrange(right_edge_height)))
        return star

    def move_left(self) -> None:
        """Scroll the stars leftwards, wrapping those that leave the screen."""
        self.stars = [
            self._wrap(Vec2(s.x - self.speed, s.y), WINDOW_HEIGHT) for s in self.stars
        ]

    def move_right(self) -> None:
        """Scroll the stars rightwards, wrapping those that leave the screen."""
        self.stars = [
            self._wrap(Vec2(s.x + self.speed, s.y), WINDOW_WIDTH) for s in self.stars
        ]