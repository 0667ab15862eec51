"""Per-frame movement of everything the player does not steer."""

from __future__ import annotations

from .collisions import CollisionSystem
from .entities import Humanoid, Lander
from .geometry import Direction
from .world import World


class Mover:
    """Moves bullets, missiles, landers and humanoids, then runs the collision checks."""

    def __init__(self, world: World, collisions: CollisionSystem | None = None) -> None:
        self.world = world
        self.collisions = collisions if collisions is not None else CollisionSystem(world)

    def move_objects(self) -> None:
        """Advance one frame; a ship without fuel only falls."""
        ship = self.world.ship
        if ship.out_of_fuel:
            ship.move()
        else:
            self.move_ammunition()
            self.move_enemies()
        self.collisions.check()

    def move_ammunition(self) -> None:
        """Move every bullet and every missile one step."""
        for bullet in self.world.lasers:
            bullet.move()
        for missile in self.world.missiles:
            missile.move()

    def move_enemies(self) -> None:
        """Move every lander and every humanoid one step."""
        for lander in self.world.landers:
            self.move_lander(lander)
        for humanoid in self.world.humanoids:
            self.move_humanoid(humanoid)

    def move_lander(self, lander: Lander) -> None:
        """Wander, chase the target, or carry a captured humanoid upwards."""
        if lander.has_target and not lander.has_captured:
            lander.attack_humanoid()
        elif not lander.has_target and not lander.has_captured:
            lander.move()
        elif lander.has_target and lander.has_captured:
            lander.direction = Direction.UP
            lander.move()

    def move_humanoid(self, humanoid: Humanoid) -> None:
        """Rise with a lander, fall when freed, or follow the ship that caught it."""
        ship = self.world.ship
        if humanoid.picked_by_lander and humanoid.targeted and not humanoid.freed:
            humanoid.move_up()
        elif not humanoid.picked_by_lander and humanoid.targeted and humanoid.freed:
            if humanoid.following_ship and ship.moved:
                ship.moved = False
                humanoid.follow_ship(ship.position)
            elif not humanoid.following_ship:
                humanoid.move_down()