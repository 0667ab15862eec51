"""Drawing of the splash screen, the playfield and the end screen."""

from __future__ import annotations

import pygame

from .assets import Assets
from .entities import Humanoid, Lander, Laser, Missile, SpaceShip
from .geometry import PLAYFIELD_TOP, WHITE, WINDOW_HEIGHT, WINDOW_WIDTH, Colour, Sprite
from .stars import StarField
from .strings import (
    RED,
    TextItem,
    end_game_texts,
    fuel_text,
    highest_score_text,
    instruction_texts,
    loss_text,
    play_text,
    score_text,
    shield_label,
    victory_text,
    )
from .world import World

Point = tuple[float, float]


def dividing_line() -> tuple[Point, Point, Colour]:
    """The red line separating the status bar from the playfield."""
    return (0.0, float(PLAYFIELD_TOP)), (float(WINDOW_WIDTH), float(PLAYFIELD_TOP)), RED


_TEXTURE_FOR = (
    (SpaceShip, "spaceship"),
    (Laser, "bullet"),
    (Lander, "lander"),
    (Missile, "missile"),
    (Humanoid, "humanoid"),
)


class Renderer:
    """Draws the game onto a surface."""

    def __init__(self, surface: pygame.Surface, assets: Assets | None = None) -> None:
        self.surface = surface
        self.assets = assets if assets is not None else Assets()

    def draw(self, world: World, stars: StarField) -> None:
        """Draw whichever screen the game status calls for."""
        status = world.status
        if status.gameplay and not status.beginning and not status.game_end:
            self.draw_playfield(world, stars)
        elif not status.gameplay and status.beginning and not status.game_end:
            self.draw_splash()
        elif not status.gameplay and not status.beginning and status.game_end:
            self.draw_end_screen(world)

    def draw_playfield(self, world: World, stars: StarField) -> None:
        """Stars, every object, the status bar, shields and the dividing line."""
        self._draw_stars(stars)
        for obj in (world.ship, *world.lasers, *world.landers, *world.missiles, *world.humanoids):
            self._draw_sprite(self._texture_name(obj), obj.sprite)

        self.draw_text(score_text(world.score.current))
        self.draw_text(highest_score_text(world.score.load_highest()))
        if world.gas_pump.exists:
            self._draw_sprite("gas_pump", world.gas_pump.sprite)
        self.draw_text(fuel_text(world.fuel.level))

        for circle in world.shields.circles:
            centre = (
                round(circle.position.x + circle.radius),
                round(circle.position.y + circle.radius),
            )
            pygame.draw.circle(self.surface, circle.colour, centre, round(circle.radius))
        self.draw_text(shield_label())

        start, end, colour = dividing_line()
        pygame.draw.line(self.surface, colour, start, end)

    def draw_splash(self) -> list[TextItem]:
        """The background, the instructions and the Play button; returns the texts drawn."""
        self._draw_background()
        items = [*instruction_texts(), play_text()]
        for item in items:
            self.draw_text(item)
        return items

    def draw_end_screen(self, world: World) -> list[TextItem]:
        """The background and the end messages; returns the texts drawn."""
        self._draw_background()
        items = end_game_texts()
        if world.status.victory:
            items.append(victory_text())
        elif world.status.loss:
            items.append(loss_text())
        for item in items:
            self.draw_text(item)
        return items

    def draw_text(self, item: TextItem) -> pygame.Rect:
        """Render one text item; returns the area it covers."""
        font = self.assets.font(item.font, item.size)
        rendered = font.render(item.text, True, item.colour)
        return self.surface.blit(rendered, (round(item.position.x), round(item.position.y)))

    def _draw_background(self) -> None:
        background = self.assets.texture("intro")
        if background.get_size() != (WINDOW_WIDTH, WINDOW_HEIGHT):
            background = pygame.transform.scale(background, (WINDOW_WIDTH, WINDOW_HEIGHT))
        self.surface.blit(background, (0, 0))

    def _draw_stars(self, stars: StarField) -> None:
        width, height = self.surface.get_size()
        for star in stars.stars:
            x, y = int(star.x), int(star.y)
            if 0 <= x < width and 0 <= y < height:
                self.surface.set_at((x, y), stars.colour)

    @staticmethod
    def _texture_name(obj: object) -> str:
        for kind, name in _TEXTURE_FOR:
            if isinstance(obj, kind):
                return name
        raise TypeError(f"nothing to draw for {type(obj).__name__}")

    def _draw_sprite(self, texture_name: str, sprite: Sprite) -> None:
        bounds = sprite.bounds()
        size = (max(1, round(bounds.width)), max(1, round(bounds.height)))
        image = pygame.transform.scale(self.assets.texture(texture_name), size)
        if sprite.scale.x < 0 or sprite.scale.y < 0:
            image = pygame.transform.flip(image, sprite.scale.x < 0, sprite.scale.y < 0)
        if sprite.colour != WHITE:
            image = image.copy()
            image.fill(sprite.colour, special_flags=pygame.BLEND_RGB_MULT)
        self.surface.blit(image, (round(bounds.left), round(bounds.top)))