"""Timed game events: spawning landers, firing missiles, fuel, the gas pump and shields."""

from __future__ import annotations

from dataclasses import dataclass

from .movement import Mover
from .world import World

LANDER_DELAY = 2.0
SHOOTING_DELAY = 1.5
GAS_PUMP_DELAY = 5.0
FUEL_DECAY_DELAY = 0.1
MAX_LANDER_COUNT = 6
SPAWN_LIMIT = 4
FULL_WAVE = 5


@dataclass
class Timer:
    """Measures time since it was last restarted."""

    duration: float
    started: float = 0.0

    def restart(self, now: float) -> None:
        self.started = now

    def elapsed(self, now: float) -> float:
        return now - self.started

    def due(self, now: float) -> bool:
        """True once the timer's duration has passed."""
        return self.elapsed(now) >= self.duration


class Director:
    """Drives everything in the world that happens on a timer, then moves it all."""

    def __init__(self, world: World, now: float = 0.0, mover: Mover | None = None) -> None:
        self.world = world
        self.mover = mover if mover is not None else Mover(world)
        world.spawn_humanoids()
        world.shields.create()
        self.finish = False
        self.shifter = 0
        self.lander_timer = Timer(LANDER_DELAY, now)
        self.shooting_timer = Timer(SHOOTING_DELAY, now)
        self.gas_pump_timer = Timer(GAS_PUMP_DELAY, now)
        self.fuel_timer = Timer(FUEL_DECAY_DELAY, now)

    def update(self, now: float) -> None:
        """Run one frame of timed events at time ``now`` (seconds)."""
        world = self.world
        ship = world.ship

        if world.shields.expired(now):
            world.shields.active = False
            ship.invulnerable = False
            world.shields.remove_oldest()
            ship.restore_colour()

        if self.gas_pump_timer.due(now):
            world.gas_pump.toggle()
            self.gas_pump_timer.restart(now)

        if self.fuel_timer.due(now) and not ship.out_of_fuel:
            world.consume_fuel()
            self.fuel_timer.restart(now)

        if self.lander_timer.due(now) and world.number_of_landers < MAX_LANDER_COUNT:
            if world.number_of_landers > 0 and not self.finish:
                if len(world.landers) == FULL_WAVE:
                    self.finish = True
                self.assign_targets()
            elif self.finish:
                self.finish = False
            if world.number_of_landers <= SPAWN_LIMIT:
                world.spawn_lander()
            self.lander_timer.restart(now)
        elif world.number_of_landers >= MAX_LANDER_COUNT:
            self.assign_targets()

        if world.number_of_landers > 0 and self.shooting_timer.due(now):
            shooter = self.shifter
            self.shifter += 1
            if self.shifter < len(world.landers):
                world.missiles.append(world.landers[shooter].shoot_missile(ship.position))
            else:
                self.shifter = 0
            self.shooting_timer.restart(now)

        self.mover.move_objects()

    def assign_targets(self) -> None:
        """Give every lander without a target the first humanoid nobody has targeted."""
        for lander in self.world.landers:
            if lander.has_target:
                continue
            humanoid = next((h for h in self.world.humanoids if not h.targeted), None)
            if humanoid is None:
                continue
            lander.target = humanoid
            lander.has_target = True
            humanoid.targeted = True