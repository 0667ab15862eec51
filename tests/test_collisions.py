import random

import pytest

from defender.collisions import (
    CollisionSystem,
    humanoid_screen_collision,
    objects_collide,
    screen_collision,
    ship_screen_collision,
)
from defender.entities import Humanoid, Lander, Laser, Missile
from defender.geometry import Direction, Vec2
from defender.world import REFILL_AMOUNT, World


@pytest.fixture
def world(tmp_path):
    return World(rng=random.Random(3), score_path=tmp_path / "HighestScore.txt")


@pytest.fixture
def system(world):
    return CollisionSystem(world)


def make_lander(x=500.0, y=400.0):
    lander = Lander(random.Random(7))
    lander.position = Vec2(x, y)
    return lander


def test_lander_collides_with_humanoid():
    lander = make_lander()
    humanoid = Humanoid()
    lander.position = humanoid.position
    assert objects_collide(lander, humanoid) is True


def test_distant_objects_do_not_collide():
    lander = make_lander(500.0, 400.0)
    humanoid = Humanoid(Vec2(20.0, 832.0))
    assert objects_collide(lander, humanoid) is False


def test_lander_screen_collision_at_origin():
    lander = make_lander(0.0, 0.0)
    assert screen_collision(lander) is True


def test_lander_in_middle_has_no_screen_collision():
    assert screen_collision(make_lander(500.0, 400.0)) is False


def test_ship_collides_with_lander(world):
    lander = make_lander()
    world.ship.position = lander.position
    assert objects_collide(lander, world.ship) is True


def test_ship_collides_with_humanoid(world):
    humanoid = Humanoid()
    world.ship.position = humanoid.position
    assert objects_collide(humanoid, world.ship) is True


def test_ship_screen_collision_at_bottom(world):
    world.ship.position = Vec2(0.0, 900.0)
    assert ship_screen_collision(world.ship) is True
    world.ship.position = Vec2(700.0, 400.0)
    assert ship_screen_collision(world.ship) is False


def test_ship_fuel_pump_collision_refuels(world, system):
    world.gas_pump.exists = True
    before = world.fuel.level
    world.ship.position = world.gas_pump.position
    assert system.ship_fuel_collision() is True
    assert world.fuel.level == before + REFILL_AMOUNT
    assert world.gas_pump.exists is False


def test_hidden_gas_pump_does_not_refuel(world, system):
    world.gas_pump.exists = False
    before = world.fuel.level
    world.ship.position = world.gas_pump.position
    assert system.ship_fuel_collision() is False
    assert world.fuel.level == before


def test_missile_hits_ship(world, system):
    missile = Missile()
    missile.position = world.ship.position
    assert system.missile_ship_collision(missile) is True


def test_shielded_ship_is_not_hit(world, system):
    world.shields.create()
    assert world.shields.activate(world.ship, 0.0) is True
    missile = Missile()
    missile.position = world.ship.position
    assert system.missile_ship_collision(missile) is False


def test_missile_screen_collision_at_origin():
    missile = Missile()
    missile.position = Vec2(0.0, 0.0)
    assert screen_collision(missile) is True


def test_bullet_hits_lander(system):
    lander = make_lander()
    bullet = Laser()
    bullet.position = lander.position
    assert system.bullet_lander_collision(bullet, lander) is True


def test_bullet_hits_humanoid():
    humanoid = Humanoid()
    bullet = Laser()
    bullet.position = humanoid.position
    assert objects_collide(bullet, humanoid) is True


def test_laser_screen_collision_at_origin():
    bullet = Laser()
    bullet.position = Vec2(0.0, 0.0)
    assert screen_collision(bullet) is True


def test_lander_captures_target_and_is_marked(system):
    humanoid = Humanoid()
    humanoid.targeted = True
    lander = make_lander()
    lander.target = humanoid
    lander.has_target = True
    lander.position = humanoid.position
    assert system.lander_humanoid_collision(lander) is True
    assert lander.has_captured is True
    assert humanoid.picked_by_lander is True


def test_lander_turns_away_from_top_edge(system):
    lander = make_lander(0.0, 0.0)
    system.lander_screen_collision(lander)
    assert 3 <= int(lander.direction) <= 7


def test_escaped_lander_releases_capture(system):
    lander = make_lander(500.0, 50.0)
    lander.has_target = True
    lander.has_captured = True
    system.lander_screen_collision(lander)
    assert lander.has_target is False
    assert lander.has_captured is False
    assert 3 <= int(lander.direction) <= 7


def test_ship_lander_crash_ends_game(world, system):
    lander = make_lander()
    world.landers.append(lander)
    world.ship.position = lander.position
    assert system.ship_lander_collision(lander) is True
    assert world.status.game_end is True
    assert world.status.loss is True
    assert world.landers == []


def test_shielded_ship_survives_lander(world, system):
    lander = make_lander()
    world.landers.append(lander)
    world.ship.set_invulnerable()
    world.ship.position = lander.position
    assert system.ship_lander_collision(lander) is False
    assert world.landers == [lander]
    assert world.status.game_end is False


def test_ship_picks_up_freed_humanoid(world, system):
    humanoid = Humanoid()
    humanoid.freed = True
    world.ship.position = humanoid.position
    assert system.ship_humanoid_collision(humanoid) is True
    assert humanoid.following_ship is True
    assert world.ship.is_saving is True


def test_missile_collisions_remove_missile_and_lose(world, system):
    missile = Missile()
    missile.position = world.ship.position
    world.missiles.append(missile)
    system.missile_collisions()
    assert world.missiles == []
    assert world.status.loss is True


def test_offscreen_missile_is_removed(world, system):
    missile = Missile()
    missile.position = Vec2(0.0, 0.0)
    world.missiles.append(missile)
    system.missile_collisions()
    assert world.missiles == []
    assert world.status.loss is False


def test_laser_kills_last_lander_for_victory(world, system):
    world.status.start()
    lander = make_lander()
    world.landers.append(lander)
    world.number_of_landers = 5
    bullet = Laser()
    bullet.position = lander.position
    world.lasers.append(bullet)
    system.laser_collisions()
    assert world.landers == []
    assert world.lasers == []
    assert world.score.current == 20
    assert world.status.victory is True


def test_laser_destroys_missile(world, system):
    missile = Missile(launch_position=Vec2(500.0, 400.0))
    world.missiles.append(missile)
    bullet = Laser()
    bullet.position = missile.position
    world.lasers.append(bullet)
    system.laser_collisions()
    assert world.missiles == []
    assert world.lasers == []
    assert world.score.current == 10


def test_shooting_captured_lander_frees_humanoid(system):
    humanoid = Humanoid()
    humanoid.picked_by_lander = True
    lander = make_lander()
    lander.target = humanoid
    lander.has_target = True
    lander.has_captured = True
    bullet = Laser()
    bullet.position = lander.position
    assert system.bullet_lander_collision(bullet, lander) is True
    assert humanoid.freed is True
    assert humanoid.picked_by_lander is False


def test_bullet_kills_carried_humanoid(world, system):
    humanoid = Humanoid(Vec2(300.0, 300.0))
    humanoid.targeted = True
    humanoid.picked_by_lander = True
    world.humanoids.append(humanoid)
    lander = make_lander()
    lander.target = humanoid
    lander.has_target = True
    lander.has_captured = True
    bullet = Laser()
    bullet.position = humanoid.position
    assert system.bullet_humanoid_collision(bullet, lander) is True
    assert world.humanoids == []
    assert lander.has_target is False


def test_humanoid_screen_collision_rules():
    humanoid = Humanoid(Vec2(20.0, 900.0))
    assert humanoid_screen_collision(humanoid) is True
    humanoid.position = Vec2(20.0, 50.0)
    assert humanoid_screen_collision(humanoid) is True
    humanoid.following_ship = True
    assert humanoid_screen_collision(humanoid) is False


def test_last_humanoid_lost_ends_game(world, system):
    world.humanoids.append(Humanoid(Vec2(20.0, 900.0)))
    system.humanoid_collisions()
    assert world.humanoids == []
    assert world.status.loss is True


def test_carried_humanoid_reset_on_landing(world, system):
    humanoid = Humanoid(Vec2(20.0, 832.0))
    humanoid.following_ship = True
    humanoid.freed = True
    humanoid.position = Vec2(400.0, 900.0)
    world.humanoids.append(humanoid)
    system.humanoid_collisions()
    assert world.humanoids == [humanoid]
    assert humanoid.position == Vec2(20.0, 832.0)
    assert humanoid.following_ship is False


def test_ship_without_fuel_crashes_at_bottom(world, system):
    world.ship.out_of_fuel = True
    world.ship.position = Vec2(700.0, 900.0)
    system.ship_collisions()
    assert world.status.loss is True


def test_check_runs_all_rules(world, system):
    lander = make_lander()
    lander.direction = Direction.RIGHT
    world.landers.append(lander)
    world.ship.position = lander.position
    system.check()
    assert world.status.loss is True
    assert lander not in world.landers