"""The texts shown on the splash screen, the end screen and the playfield."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Colour, Vec2

ORANGE: Colour = (255, 140, 0)
GREEN: Colour = (0, 255, 0)
PURPLE: Colour = (255, 0, 255)
YELLOW: Colour = (255, 255, 0)
BLUE: Colour = (0, 0, 255)
RED: Colour = (255, 0, 0)
CYAN: Colour = (0, 255, 255)
WHITE: Colour = (255, 255, 255)
MAGENTA: Colour = (255, 0, 255)

INSTRUCTION_SIZE = 20
HEADLINE_SIZE = 70
DEFAULT_SIZE = 30

GAME_NAME = "The Defender"
FUEL_LABEL = "Fuel: "
SCORE_LABEL = "Score: "
HIGHEST_SCORE_LABEL = "HighestScore: "
SHIELDS_LABEL = "Shields:"


@dataclass(frozen=True)
class TextItem:
    """A piece of text with its font, size, colour and top-left position."""

    text: str
    font: str
    size: int
    colour: Colour
    position: Vec2


def _instruction(text: str, colour: Colour, x: float, y: float) -> TextItem:
    return TextItem(text, "game_instructions", INSTRUCTION_SIZE, colour, Vec2(x, y))


def instruction_texts() -> list[TextItem]:
    """Everything on the splash screen except the Play button, in drawing order."""
    return [
        _instruction("Press UP key to move up", ORANGE, 150, 300),
        _instruction("Press DOWN key to move Down", ORANGE, 950, 300),
        _instruction("Press LEFT key to move to the Left", GREEN, 150, 400),
        _instruction("Press RIGHT key to move the Right", GREEN, 950, 400),
        _instruction("Press Spacebar to fire the Enemies", PURPLE, 500, 500),
        _instruction("Click Play To Start the game", BLUE, 550, 600),
        TextItem(GAME_NAME, "game_name", HEADLINE_SIZE, RED, Vec2(430, 30)),
        _instruction("Press S key to activate shield", CYAN, 550, 550),
        _instruction("Collide with the Humanoid to save it", RED, 470, 450),
    ]


def end_game_texts() -> list[TextItem]:
    """The fixed messages of the end screen."""
    return [
        TextItem("Game Over!", "game_over", HEADLINE_SIZE, GREEN, Vec2(350, 400)),
        TextItem(
            "Press R key to restart the game",
            "game_over",
            HEADLINE_SIZE,
            GREEN,
            Vec2(350, 600),
        ),
    ]


def play_text() -> TextItem:
    """The Play button of the splash screen."""
    return TextItem("Play", "game_instructions", 80, YELLOW, Vec2(650, 700))


def victory_text() -> TextItem:
    return TextItem("You Won!", "play_button", HEADLINE_SIZE, WHITE, Vec2(350, 500))


def loss_text() -> TextItem:
    return TextItem("You Lost!", "play_button", HEADLINE_SIZE, MAGENTA, Vec2(350, 500))


def fuel_text(level: int) -> TextItem:
    """The fuel gauge shown at the top of the playfield."""
    return TextItem(
        f"{FUEL_LABEL}{level}", "game_name", round(DEFAULT_SIZE * 1.2), WHITE, Vec2(780, 10)
    )


def shield_label() -> TextItem:
    return TextItem(SHIELDS_LABEL, "shields", 35, MAGENTA, Vec2(5, 20))


def score_text(score: int) -> TextItem:
    """The current score shown at the top of the playfield."""
    return TextItem(
        f"{SCORE_LABEL}{score}", "game_name", round(DEFAULT_SIZE * 1.5), YELLOW, Vec2(350, 10)
    )


def highest_score_text(score: int) -> TextItem:
    """The recorded highest score shown at the top right of the playfield."""
    return TextItem(
        f"{HIGHEST_SCORE_LABEL}{score}", "game_name", DEFAULT_SIZE, MAGENTA, Vec2(1100, 10)
    )