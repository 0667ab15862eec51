"""Loading of fonts and textures from the resources directory."""

from __future__ import annotations

from pathlib import Path

import pygame

from .entities import (
    HUMANOID_TEXTURE,
    LANDER_TEXTURE,
    LASER_TEXTURE,
    MISSILE_TEXTURE,
    SHIP_TEXTURE,
)
from .geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Colour, Vec2
from .world import GAS_PUMP_TEXTURE

RESOURCES = Path("resources")

FONT_FILES: dict[str, str] = {
    "game_name": "GameName.ttf",
    "game_over": "GameOver.ttf",
    "game_instructions": "GameInstructions.ttf",
    "loss": "YouLost.ttf",
    "highest_score": "HighestScore.otf",
    "play_button": "Play.ttf",
    "shields": "GameName.ttf",
}

TEXTURE_FILES: dict[str, str] = {
    "lander": "Lander.png",
    "spaceship": "Spaceship.png",
    "missile": "Missile.png",
    "bullet": "bullet1.png",
    "intro": "Splashbackground.jpg",
    "humanoid": "Humanoid.png",
    "gas_pump": "GasPump.png",
}

# Size and colour of the plain block used when a texture file cannot be read.
FALLBACK_TEXTURES: dict[str, tuple[Vec2, Colour]] = {
    "lander": (LANDER_TEXTURE, (0, 200, 0)),
    "spaceship": (SHIP_TEXTURE, (220, 220, 220)),
    "missile": (MISSILE_TEXTURE, (255, 120, 0)),
    "bullet": (LASER_TEXTURE, (255, 255, 0)),
    "intro": (Vec2(float(WINDOW_WIDTH), float(WINDOW_HEIGHT)), (10, 10, 40)),
    "humanoid": (HUMANOID_TEXTURE, (200, 160, 120)),
    "gas_pump": (GAS_PUMP_TEXTURE, (180, 40, 180)),
}


class Assets:
    """Fonts and textures, loaded on first use and kept for later."""

    def __init__(self, root: Path | str = RESOURCES) -> None:
        self.root = Path(root)
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}
        self._textures: dict[str, pygame.Surface] = {}

    def font(self, name: str, size: int) -> pygame.font.Font:
        """The named game font at the given size; the default font if the file is unusable."""
        if name not in FONT_FILES:
            raise KeyError(f"unknown font: {name}")
        key = (name, int(size))
        cached = self._fonts.get(key)
        if cached is not None:
            return cached
        if not pygame.font.get_init():
            pygame.font.init()
        path = self.root / FONT_FILES[name]
        try:
            loaded = pygame.font.Font(str(path), int(size)) if path.is_file() else None
        except (OSError, pygame.error):
            loaded = None
        if loaded is None:
            loaded = pygame.font.Font(None, int(size))
        self._fonts[key] = loaded
        return loaded

    def texture(self, name: str) -> pygame.Surface:
        """The named texture; a plain block of the expected size if the file is unusable."""
        if name not in TEXTURE_FILES:
            raise KeyError(f"unknown texture: {name}")
        cached = self._textures.get(name)
        if cached is not None:
            return cached
        path = self.root / TEXTURE_FILES[name]
        surface: pygame.Surface | None = None
        if path.is_file():
            try:
                surface = pygame.image.load(str(path))
            except (OSError, pygame.error):
                surface = None
        if surface is None:
            size, colour = FALLBACK_TEXTURES[name]
            surface = pygame.Surface((int(size.x), int(size.y)))
            surface.fill(colour)
        self._textures[name] = surface
        return surface