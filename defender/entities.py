"""The ship, its lasers, the landers, their missiles and the humanoids."""

from __future__ import annotations

import random

from .geometry import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Colour,
    Direction,
    MobileObject,
    Sprite,
    Vec2,
)

SHIP_TEXTURE = Vec2(128.0, 64.0)
LASER_TEXTURE = Vec2(64.0, 16.0)
MISSILE_TEXTURE = Vec2(64.0, 64.0)
LANDER_TEXTURE = Vec2(128.0, 128.0)
HUMANOID_TEXTURE = Vec2(128.0, 128.0)

SHIP_START = Vec2(700.0, 400.0)
SHIP_COLOUR: Colour = (128, 0, 0)
SHIELDED_COLOUR: Colour = (0, 255, 255)

HUMANOID_START = Vec2(20.0, 832.0)
HUMANOID_SPACING = 368.0


class HumanoidCannotMoveHorizontally(Exception):
    """A humanoid only moves vertically or towards the ship."""


class BulletDoesntMoveVertically(Exception):
    """A laser bullet only travels left or right."""


class Laser(MobileObject):
    """A bullet fired by the ship."""

    SPEED = 50.0

    def __init__(
        self,
        ship_position: Vec2 = Vec2(),
        direction: Direction = Direction.RIGHT,
        texture_size: Vec2 = LASER_TEXTURE,
    ) -> None:
        sprite = Sprite(
            ship_position + Vec2(10.0, 15.0), texture_size, Vec2(0.6, 0.6)
        )
        super().__init__(sprite, self.SPEED)
        self.direction = direction

    def move(self) -> None:
        if self.direction is Direction.LEFT:
            self.move_left()
        elif self.direction is Direction.RIGHT:
            self.move_right()

    def move_up(self) -> None:
        raise BulletDoesntMoveVertically("a bullet cannot move up")

    def move_down(self) -> None:
        raise BulletDoesntMoveVertically("a bullet cannot move down")


class SpaceShip(MobileObject):
    """The player's ship."""

    SPEED = 65.0
    FALLING_SPEED = 2.0

    def __init__(self, texture_size: Vec2 = SHIP_TEXTURE) -> None:
        sprite = Sprite(SHIP_START, texture_size, Vec2(0.5, 0.5), SHIP_COLOUR)
        super().__init__(sprite, self.SPEED)
        self.facing = Direction.RIGHT
        self.heading = Direction.RIGHT
        self.turned_left = False
        self.out_of_fuel = False
        self.is_saving = False
        self.moved = False
        self.invulnerable = False

    def turn_left(self) -> None:
        if not self.turned_left:
            self.turned_left = True
            scale = self.sprite.scale
            self.sprite.scale = Vec2(-abs(scale.x), scale.y)
            self.facing = Direction.LEFT

    def turn_right(self) -> None:
        if self.turned_left:
            self.turned_left = False
            scale = self.sprite.scale
            self.sprite.scale = Vec2(abs(scale.x), scale.y)
            self.facing = Direction.RIGHT

    def shoot(self) -> Laser:
        """Fire a bullet in the direction the ship faces."""
        return Laser(self.position, self.facing)

    def set_invulnerable(self) -> None:
        self.invulnerable = True
        self.sprite.colour = SHIELDED_COLOUR

    def restore_colour(self) -> None:
        self.sprite.colour = SHIP_COLOUR

    def move_left(self) -> None:
        if self.position.x > 70:
            self.sprite.move(-self.speed, 0.0)

    def move_right(self) -> None:
        if self.position.x < WINDOW_WIDTH - self.sprite.size.x:
            self.sprite.move(self.speed, 0.0)

    def move_up(self) -> None:
        if self.position.y > 180:
            self.sprite.move(0.0, -self.speed)

    def move_down(self) -> None:
        if self.position.y < WINDOW_HEIGHT - self.sprite.size.y:
            self.sprite.move(0.0, self.speed)

    def move(self) -> None:
        if self.out_of_fuel:
            self.speed = self.FALLING_SPEED
            self.heading = Direction.DOWN
        step = {
            Direction.RIGHT: self.move_right,
            Direction.LEFT: self.move_left,
            Direction.UP: self.move_up,
            Direction.DOWN: self.move_down,
        }.get(self.heading)
        if step is not None:
            step()

    def reset(self) -> None:
        self.position = SHIP_START
        self.speed = self.SPEED
        self.out_of_fuel = False


class Missile(MobileObject):
    """A missile travelling in a straight line towards where the ship was."""

    SPEED = 4.0

    def __init__(
        self,
        ship_position: Vec2 = Vec2(),
        launch_position: Vec2 = Vec2(),
        texture_size: Vec2 = MISSILE_TEXTURE,
    ) -> None:
        sprite = Sprite(launch_position, texture_size, Vec2(0.26, 0.26))
        super().__init__(sprite, self.SPEED)
        offset = ship_position - launch_position
        self.direction = offset.normalized() if offset.length() else Vec2()

    def move(self) -> None:
        step = self.direction * self.speed
        self.sprite.move(step.x, step.y)


class Humanoid(MobileObject):
    """A humanoid standing on the ground, to be rescued from the landers."""

    SPEED = 2.0
    CARRY_SPEED = 65.0

    def __init__(
        self,
        position: Vec2 = HUMANOID_START,
        texture_size: Vec2 = HUMANOID_TEXTURE,
    ) -> None:
        sprite = Sprite(position, texture_size, Vec2(0.25, 0.25))
        super().__init__(sprite, self.SPEED)
        self.initial_position = position
        self.freed = False
        self.picked_by_lander = False
        self.targeted = False
        self.following_ship = False

    def move(self) -> None:
        self.sprite.move(0.0, self.SPEED if self.freed else -self.SPEED)

    def move_left(self) -> None:
        raise HumanoidCannotMoveHorizontally("a humanoid cannot move left")

    def move_right(self) -> None:
        raise HumanoidCannotMoveHorizontally("a humanoid cannot move right")

    def reset_status(self) -> None:
        self.position = self.initial_position
        self.following_ship = False
        self.targeted = False
        self.picked_by_lander = False
        self.freed = False

    def follow_ship(self, ship_position: Vec2) -> None:
        """Step towards the ship that carries this humanoid."""
        offset = ship_position - self.position
        if offset.length() == 0:
            return
        step = offset.normalized() * self.CARRY_SPEED
        self.sprite.move(step.x, step.y)


class Lander(MobileObject):
    """An enemy lander that wanders, abducts humanoids and fires missiles."""

    SPEED = 2.0

    def __init__(
        self,
        rng: random.Random | None = None,
        texture_size: Vec2 = LANDER_TEXTURE,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        position = Vec2(
            float(self._rng.randint(100, 1400)), float(self._rng.randint(100, 750))
        )
        sprite = Sprite(position, texture_size, Vec2(0.25, 0.25))
        super().__init__(sprite, self.SPEED)
        self.direction = Direction(self._rng.randint(0, 7))
        self.has_target = False
        self.has_captured = False
        self.target: Humanoid | None = None

    def move(self) -> None:
        d = self.direction
        if d in (Direction.RIGHT, Direction.D_RIGHTUP, Direction.D_RIGHTDOWN):
            self.move_right()
        if d in (Direction.LEFT, Direction.D_LEFTUP, Direction.D_LEFTDOWN):
            self.move_left()
        if d in (Direction.UP, Direction.D_RIGHTUP, Direction.D_LEFTUP):
            self.move_up()
        if d in (Direction.DOWN, Direction.D_RIGHTDOWN, Direction.D_LEFTDOWN):
            self.move_down()

    def change_direction(self) -> None:
        """Pick a new random direction away from the edge that was hit."""
        pos, size = self.position, self.sprite.size
        if pos.x < 0:
            low, high = 4, 7
        elif pos.x + size.x > WINDOW_WIDTH:
            low, high = 0, 3
        elif pos.y < 110:
            low, high = 3, 7
        elif pos.y + size.y > 800:
            low, high = 0, 4
        else:
            return
        self.direction = Direction(self._rng.randint(low, high))

    def shoot_missile(self, ship_position: Vec2) -> Missile:
        """Launch a missile from here towards the ship."""
        return Missile(ship_position, self.position)

    def attack_humanoid(self) -> None:
        """Step towards the targeted humanoid."""
        if self.target is None:
            raise ValueError("lander has no target")
        offset = self.target.position - self.position
        if offset.length() == 0:
            return
        step = offset.normalized() * self.SPEED
        self.sprite.move(step.x, step.y)