"""The game window, keyboard and mouse handling, and the main loop."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Sequence

import pygame

from .assets import Assets
from .director import Director
from .geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Direction, Rect
from .rendering import Renderer
from .stars import StarField
from .strings import GAME_NAME, play_text
from .world import World

FRAME_RATE = 60
BACKGROUND = (0, 0, 0)

_HEADINGS: dict[int, Direction] = {
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


class Game:
    """One running game: the world, its timed events, input handling and drawing."""

    def __init__(
        self,
        world: World | None = None,
        stars: StarField | None = None,
        assets: Assets | None = None,
        surface: pygame.Surface | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        now = clock()
        self.world = world if world is not None else World()
        self.stars = stars if stars is not None else StarField(self.world.rng)
        self.assets = assets if assets is not None else Assets()
        self.director = Director(self.world, now)
        self.renderer = Renderer(surface, self.assets) if surface is not None else None
        self.running = True
        button = play_text()
        width, height = self.assets.font(button.font, button.size).size(button.text)
        self.play_bounds = Rect(button.position.x, button.position.y, width, height)

    def handle_key(self, key: int, now: float) -> None:
        """React to a key press at time ``now``."""
        world = self.world
        status = world.status
        ship = world.ship
        if key == pygame.K_SPACE and status.gameplay:
            world.lasers.append(ship.shoot())
        elif key == pygame.K_ESCAPE:
            self.close()
        elif key in _HEADINGS and status.gameplay and not ship.out_of_fuel:
            heading = _HEADINGS[key]
            if heading is Direction.RIGHT:
                ship.turn_right()
            elif heading is Direction.LEFT:
                ship.turn_left()
            ship.heading = heading
            ship.moved = True
            ship.move()
            if heading is Direction.RIGHT:
                self.stars.move_left()
            elif heading is Direction.LEFT:
                self.stars.move_right()
        elif key == pygame.K_s and status.gameplay:
            world.shields.activate(ship, now)
        elif (
            key == pygame.K_r
            and not status.gameplay
            and status.game_end
            and not status.beginning
        ):
            world.restart(now)

    def handle_click(self, x: float, y: float) -> bool:
        """Start play when the Play button is clicked on the splash screen; True if started."""
        status = self.world.status
        if (
            self.play_bounds.contains(float(x), float(y))
            and not status.gameplay
            and not status.game_end
        ):
            status.gameplay = True
            status.beginning = False
            return True
        return False

    def close(self) -> None:
        """Record the highest score and stop the loop."""
        self.world.score.update_highest()
        self.running = False

    def step(self, now: float) -> None:
        """Advance one frame at time ``now`` and draw it if there is a surface."""
        if self.world.status.gameplay:
            self.director.update(now)
        if self.renderer is not None:
            self.renderer.surface.fill(BACKGROUND)
            self.renderer.draw(self.world, self.stars)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(GAME_NAME)
            self.renderer = Renderer(screen, self.assets)
            ticker = pygame.time.Clock()
            while self.running:
                now = self._clock()
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.close()
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(event.key, now)
                        # A key press also counts as a click where the mouse is.
                        self.handle_click(*pygame.mouse.get_pos())
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        self.handle_click(*event.pos)
                if not self.running:
                    break
                self.step(now)
                pygame.display.flip()
                ticker.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="defender", description=f"Play {GAME_NAME}.")
    parser.parse_args(argv)
    Game().run()
    return 0