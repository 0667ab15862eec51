"""Collision detection between the ship, bullets, missiles, landers, humanoids and the screen."""

from __future__ import annotations

from .entities import Humanoid, Lander, Laser, Missile
from .geometry import PLAYFIELD_TOP, WINDOW_HEIGHT, WINDOW_WIDTH, MobileObject
from .world import World

GROUND_LEVEL = 832.0
MISSILE_POINTS = 10
LANDER_POINTS = 20
LANDERS_PER_ROUND = 5


def objects_collide(first: MobileObject, second: MobileObject) -> bool:
    """True when the on-screen bounding boxes of the two objects overlap."""
    return first.sprite.bounds().intersects(second.sprite.bounds())


def screen_collision(obj: MobileObject) -> bool:
    """True when the object's texture reaches past the playfield on any side."""
    pos, size = obj.position, obj.sprite.size
    vertical = pos.y + size.y > WINDOW_HEIGHT or pos.y < PLAYFIELD_TOP
    horizontal = pos.x + size.x > WINDOW_WIDTH or pos.x < 0
    return vertical or horizontal


def ship_screen_collision(obj: MobileObject) -> bool:
    """True when the object has reached the bottom of the window."""
    return obj.position.y + obj.sprite.size.y >= WINDOW_HEIGHT


def humanoid_screen_collision(humanoid: Humanoid) -> bool:
    """True when a humanoid has dropped below the ground or been carried off the top.

    A humanoid carried by the ship only collides with the ground.
    """
    y = humanoid.position.y
    if humanoid.following_ship:
        return y > GROUND_LEVEL
    return y > GROUND_LEVEL or y < PLAYFIELD_TOP


class CollisionSystem:
    """Applies every collision rule of the game to a world."""

    def __init__(self, world: World) -> None:
        self.world = world

    def check(self) -> None:
        """Run every collision check for one frame."""
        self.ship_collisions()
        self.lander_collisions()
        self.missile_collisions()
        self.laser_collisions()
        self.humanoid_collisions()

    # Ship -----------------------------------------------------------------

    def ship_collisions(self) -> None:
        world = self.world
        if world.ship.out_of_fuel:
            if ship_screen_collision(world.ship):
                world.status.declare_loss()
            return
        self.ship_fuel_collision()
        for humanoid in list(world.humanoids):
            self.ship_humanoid_collision(humanoid)
        for lander in list(world.landers):
            self.ship_lander_collision(lander)

    def ship_fuel_collision(self) -> bool:
        """Refuel when the ship touches a visible gas pump; True if it did."""
        world = self.world
        pump = world.gas_pump
        if not pump.exists:
            return False
        if not world.ship.sprite.bounds().intersects(pump.bounds()):
            return False
        pump.exists = False
        world.fuel.fill()
        return True

    def ship_humanoid_collision(self, humanoid: Humanoid) -> bool:
        """Pick up a freed humanoid when the ship touches it; True if picked up."""
        ship = self.world.ship
        if not humanoid.freed or not objects_collide(humanoid, ship):
            return False
        if humanoid.following_ship or ship.is_saving:
            return False
        ship.is_saving = True
        humanoid.following_ship = True
        return True

    def ship_lander_collision(self, lander: Lander) -> bool:
        """An unshielded ship touching a lander ends the game; True on a crash."""
        world = self.world
        if world.ship.invulnerable or not objects_collide(world.ship, lander):
            return False
        world.landers = [other for other in world.landers if other is not lander]
        world.status.declare_loss()
        world.score.update_highest()
        return True

    # Landers --------------------------------------------------------------

    def lander_collisions(self) -> None:
        for lander in list(self.world.landers):
            self.lander_screen_collision(lander)
            self.lander_humanoid_collision(lander)

    def lander_screen_collision(self, lander: Lander) -> None:
        """Turn a wandering lander away from the edge, or release one that escaped upwards."""
        if screen_collision(lander) and not lander.has_captured and not lander.has_target:
            lander.change_direction()
        elif (
            lander.position.y < PLAYFIELD_TOP
            and lander.has_captured
            and lander.has_target
        ):
            lander.has_captured = False
            lander.has_target = False
            lander.change_direction()

    def lander_humanoid_collision(self, lander: Lander) -> bool:
        """A lander reaching its target humanoid captures it; True on capture."""
        target = lander.target
        if not lander.has_target or target is None:
            return False
        if not objects_collide(target, lander):
            return False
        target.picked_by_lander = True
        lander.has_captured = True
        return True

    # Missiles -------------------------------------------------------------

    def missile_collisions(self) -> None:
        world = self.world
        for missile in list(world.missiles):
            if self.missile_ship_collision(missile):
                world.missiles.remove(missile)
                world.status.declare_loss()
                world.score.update_highest()
            elif screen_collision(missile):
                world.missiles.remove(missile)

    def missile_ship_collision(self, missile: Missile) -> bool:
        """True when a missile hits an unshielded ship."""
        ship = self.world.ship
        return not ship.invulnerable and objects_collide(missile, ship)

    # Lasers ---------------------------------------------------------------

    def laser_collisions(self) -> None:
        world = self.world
        for bullet in list(world.lasers):
            if screen_collision(bullet):
                world.lasers.remove(bullet)
                continue

            for missile in list(world.missiles):
                if objects_collide(missile, bullet):
                    world.missiles.remove(missile)
                    world.score.increment(MISSILE_POINTS)
                    world.lasers.clear()
                    return

            for lander in list(world.landers):
                if self.bullet_lander_collision(bullet, lander):
                    world.landers.remove(lander)
                    if (
                        not world.landers
                        and world.status.gameplay
                        and world.number_of_landers == LANDERS_PER_ROUND
                    ):
                        world.status.declare_victory()
                    world.score.increment(LANDER_POINTS)
                    world.lasers.clear()
                    return

            for lander in list(world.landers):
                if self.bullet_humanoid_collision(bullet, lander):
                    world.lasers.clear()
                    return

    def bullet_lander_collision(self, bullet: Laser, lander: Lander) -> bool:
        """True when the bullet hits the lander; frees whatever it had targeted."""
        if not objects_collide(bullet, lander):
            return False
        target = lander.target
        if lander.has_target and target is not None:
            if lander.has_captured:
                target.picked_by_lander = False
                target.freed = True
            else:
                target.targeted = False
        return True

    def bullet_humanoid_collision(self, bullet: Laser, lander: Lander) -> bool:
        """True when the bullet kills the humanoid this lander is carrying off."""
        target = lander.target
        if not lander.has_target or target is None:
            return False
        if not (
            objects_collide(bullet, target)
            and target.picked_by_lander
            and target.targeted
        ):
            return False
        lander.has_target = False
        lander.has_captured = False
        self.world.humanoids = [h for h in self.world.humanoids if h is not target]
        return True

    # Humanoids ------------------------------------------------------------

    def humanoid_collisions(self) -> None:
        world = self.world
        for humanoid in list(world.humanoids):
            if not humanoid_screen_collision(humanoid):
                continue
            if humanoid.following_ship:
                humanoid.reset_status()
            else:
                if len(world.humanoids) == 1:
                    world.status.declare_loss()
                world.humanoids.remove(humanoid)