"""Game state: status flags, score, fuel, shields, the gas pump and the object lists."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path

from .entities import HUMANOID_SPACING, HUMANOID_START, Humanoid, Lander, Laser, Missile, SpaceShip
from .geometry import Colour, Rect, Sprite, Vec2

HIGHEST_SCORE_PATH = Path("resources/HighestScore.txt")

FULL_TANK = 100
REFILL_AMOUNT = 50

MAX_SHIELDS = 3
SHIELD_RADIUS = 15.0
SHIELD_DURATION = 5.0
SHIELD_READY: Colour = (0, 255, 0)
SHIELD_IN_USE: Colour = (255, 0, 0)

HUMANOID_COUNT = 5

GAS_PUMP_TEXTURE = Vec2(256.0, 256.0)
GAS_PUMP_POSITION = Vec2(800.0, 780.0)


@dataclass
class GameStatus:
    """Which screen the game is on and how it ended."""

    gameplay: bool = False
    beginning: bool = True
    game_end: bool = False
    victory: bool = False
    loss: bool = False

    def start(self) -> None:
        """Enter play, clearing any previous result."""
        self.gameplay = True
        self.game_end = False
        self.beginning = False
        self.victory = False
        self.loss = False

    def declare_victory(self) -> None:
        self.gameplay = False
        self.beginning = False
        self.game_end = True
        self.victory = True

    def declare_loss(self) -> None:
        self.gameplay = False
        self.beginning = False
        self.game_end = True
        self.loss = True


@dataclass
class ScoreBoard:
    """The current score and the highest score kept in a file."""

    path: Path = HIGHEST_SCORE_PATH
    current: int = 0
    highest: int = 0

    def increment(self, points: int) -> None:
        self.current += int(points)

    def load_highest(self) -> int:
        """Read the highest score from the file, if it can be read."""
        try:
            text = Path(self.path).read_text()
        except OSError:
            return self.highest
        tokens = text.split()
        if tokens:
            try:
                self.highest = int(tokens[0])
            except ValueError:
                self.highest = 0
        return self.highest

    def update_highest(self) -> None:
        """Store the current score when it beats the recorded highest."""
        self.load_highest()
        if self.highest < self.current:
            self.highest = self.current
            try:
                Path(self.path).write_text(str(self.current))
            except OSError:
                pass


@dataclass
class FuelTank:
    """The ship's fuel gauge."""

    level: int = FULL_TANK

    def fill(self) -> None:
        self.level += REFILL_AMOUNT

    def consume(self) -> bool:
        """Burn one unit; True when the tank is then empty."""
        self.level -= 1
        return self.level <= 0

    def restore(self) -> None:
        self.level = FULL_TANK


@dataclass
class ShieldCircle:
    """One shield indicator drawn at the top of the screen."""

    position: Vec2
    radius: float = SHIELD_RADIUS
    colour: Colour = SHIELD_READY


@dataclass
class Shields:
    """The stock of shields and the timing of the one in use."""

    circles: list[ShieldCircle] = field(default_factory=list)
    active: bool = False
    activated_at: float = 0.0
    duration: float = SHIELD_DURATION

    def create(self) -> None:
        for i in range(MAX_SHIELDS):
            x = 50 + i * (2 * SHIELD_RADIUS + 10)
            self.circles.append(ShieldCircle(Vec2(float(x), 75.0)))

    def remove_oldest(self) -> None:
        if self.circles:
            self.circles.pop(0)

    def activate(self, ship: SpaceShip, now: float) -> bool:
        """Use the oldest shield; False when none is left."""
        if not self.circles:
            self.active = False
            return False
        self.active = True
        self.circles[0].colour = SHIELD_IN_USE
        ship.set_invulnerable()
        self.activated_at = now
        return True

    def expired(self, now: float) -> bool:
        """True when a shield is in use and its time is up."""
        return self.active and now - self.activated_at >= self.duration

    def reset(self, now: float) -> None:
        self.circles.clear()
        self.active = False
        self.activated_at = now
        self.create()


class GasPump:
    """The fuel power-up that appears and disappears on the ground."""

    def __init__(self, texture_size: Vec2 = GAS_PUMP_TEXTURE) -> None:
        self.sprite = Sprite(GAS_PUMP_POSITION, texture_size, Vec2(0.25, 0.25))
        self.exists = False

    @property
    def position(self) -> Vec2:
        return self.sprite.position

    def bounds(self) -> Rect:
        return self.sprite.bounds()

    def toggle(self) -> None:
        self.exists = not self.exists


class World:
    """Everything that lives in one game: the objects and the state around them."""

    def __init__(
        self,
        rng: random.Random | None = None,
        score_path: Path = HIGHEST_SCORE_PATH,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.status = GameStatus()
        self.score = ScoreBoard(Path(score_path))
        self.fuel = FuelTank()
        self.shields = Shields()
        self.gas_pump = GasPump()
        self.ship = SpaceShip()
        self.lasers: list[Laser] = []
        self.missiles: list[Missile] = []
        self.landers: list[Lander] = []
        self.humanoids: list[Humanoid] = []
        self.number_of_landers = 0

    def spawn_humanoids(self) -> list[Humanoid]:
        """Replace the humanoids with a fresh row along the ground."""
        self.humanoids = [
            Humanoid(HUMANOID_START + Vec2(HUMANOID_SPACING * i, 0.0))
            for i in range(HUMANOID_COUNT)
        ]
        return self.humanoids

    def spawn_lander(self) -> Lander:
        """Create a lander, which fires at the ship straight away."""
        lander = Lander(self.rng)
        self.number_of_landers += 1
        self.landers.append(lander)
        self.missiles.append(lander.shoot_missile(self.ship.position))
        return lander

    def consume_fuel(self) -> None:
        if self.fuel.consume():
            self.ship.out_of_fuel = True

    def restart(self, now: float) -> None:
        """Put everything back for a new round."""
        self.spawn_humanoids()
        self.shields.reset(now)
        self.ship.reset()
        self.lasers.clear()
        self.landers.clear()
        self.number_of_landers = 0
        self.missiles.clear()
        self.status.start()
        self.score.update_highest()
        self.score.current = 0
        self.ship.out_of_fuel = False
        self.fuel.restore()