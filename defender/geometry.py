"""Basic geometry, screen dimensions and the movable-object base class."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum

WINDOW_WIDTH = 1600
WINDOW_HEIGHT = 900
PLAYFIELD_TOP = 110

SHIP_SPEED = 0.5
LASER_SPEED = 0.1
LANDER_SPEED = 0.4
MISSILE_SPEED = 0.6

Colour = tuple[int, int, int]
WHITE: Colour = (255, 255, 255)


class Direction(IntEnum):
    """Movement directions; the numbering is used for random choices."""

    UP = 0
    D_RIGHTUP = 1
    D_LEFTUP = 2
    LEFT = 3
    RIGHT = 4
    DOWN = 5
    D_LEFTDOWN = 6
    D_RIGHTDOWN = 7


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; a zero vector has none."""
        size = self.length()
        if size == 0:
            raise ValueError("cannot normalise a zero vector")
        return self / size


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap by a non-zero area."""
        return (
            max(self.left, other.left) < min(self.right, other.right)
            and max(self.top, other.top) < min(self.bottom, other.bottom)
        )

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside; the right and bottom edges are outside."""
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass
class Sprite:
    """A positioned, scaled texture of a given pixel size."""

    position: Vec2
    size: Vec2
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    colour: Colour = WHITE

    def move(self, dx: float, dy: float) -> None:
        self.position = self.position + Vec2(dx, dy)

    def bounds(self) -> Rect:
        """Bounding box on screen, taking scale (also negative) into account."""
        x_edges = (self.position.x, self.position.x + self.size.x * self.scale.x)
        y_edges = (self.position.y, self.position.y + self.size.y * self.scale.y)
        return Rect(
            min(x_edges),
            min(y_edges),
            abs(self.size.x * self.scale.x),
            abs(self.size.y * self.scale.y),
        )


class MobileObject(ABC):
    """Something on screen that moves by a fixed step."""

    def __init__(self, sprite: Sprite, speed: float) -> None:
        self.sprite = sprite
        self.speed = speed

    @property
    def position(self) -> Vec2:
        return self.sprite.position

    @position.setter
    def position(self, value: Vec2) -> None:
        self.sprite.position = value

    def move_left(self) -> None:
        self.sprite.move(-self.speed, 0.0)

    def move_right(self) -> None:
        self.sprite.move(self.speed, 0.0)

    def move_up(self) -> None:
        self.sprite.move(0.0, -self.speed)

    def move_down(self) -> None:
        self.sprite.move(0.0, self.speed)

    @abstractmethod
    def move(self) -> None:
        """Advance one frame according to the object's own rules."""