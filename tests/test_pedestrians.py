import random

import pytest

from streetchase.geometry import Vec2
from streetchase.pedestrians import Pedestrian, PedestrianManager


class _LowRandom(random.Random):
    def randrange(self, *args, **kwargs):
        return 0

    def random(self):
        return 0.5


def square(left, top, right, bottom):
    return [Vec2(left, top), Vec2(right, top), Vec2(right, bottom), Vec2(left, bottom)]


def test_initial_direction_is_unit_and_row_valid():
    for seed in range(20):
        ped = Pedestrian(Vec2(10.0, 10.0), random.Random(seed))
        assert ped.direction.length() == pytest.approx(1.0)
        assert 0 <= ped.character_row < 7
        assert ped.next_direction == ped.direction


def test_free_walk_moves_by_speed_times_dt():
    ped = Pedestrian(Vec2(500.0, 500.0), random.Random(1))
    direction = ped.direction
    ped.update(0.1, [])
    expected = Vec2(500.0, 500.0) + direction * (ped.speed * 0.1)
    assert ped.position.x == pytest.approx(expected.x)
    assert ped.position.y == pytest.approx(expected.y)


def test_blocked_step_starts_backing_up():
    ped = Pedestrian(Vec2(50.0, 50.0), random.Random(2))
    ped.update(0.01, [square(0.0, 0.0, 100.0, 100.0)])
    assert ped.is_backing_up is True
    assert ped.position == Vec2(50.0, 50.0)


def test_backing_up_moves_against_direction():
    ped = Pedestrian(Vec2(500.0, 500.0), random.Random(3))
    direction = ped.direction
    ped.start_backing_up()
    ped.update(0.1, [])
    expected = Vec2(500.0, 500.0) - direction * (ped.speed * 0.1)
    assert ped.position.x == pytest.approx(expected.x)
    assert ped.position.y == pytest.approx(expected.y)
    assert ped.backup_progress == pytest.approx(ped.speed * 0.1)


def test_backing_up_finishes_after_distance():
    ped = Pedestrian(Vec2(500.0, 500.0), random.Random(4))
    start = ped.position
    ped.start_backing_up()
    for _ in range(20):
        ped.update(0.1, [])
        if not ped.is_backing_up:
            break
    assert ped.is_backing_up is False
    assert ped.backup_progress == 0.0
    assert (ped.position - start).length() == pytest.approx(ped.backup_distance)


def test_idle_pause_and_resume():
    ped = Pedestrian(Vec2(500.0, 500.0), _LowRandom())
    ped.time_since_last_direction_change = ped.direction_change_interval
    ped.update(0.01, [])
    assert ped.is_idle is True
    assert ped.direction == Vec2()
    assert ped.idle_duration_min <= ped.idle_timer <= ped.idle_duration_max
    position = ped.position
    ped.update(ped.idle_timer + 0.1, [])
    assert ped.is_idle is False
    assert ped.direction.length() == pytest.approx(1.0)
    assert ped.position == position


def test_move_and_radius():
    ped = Pedestrian(Vec2(0.0, 0.0), random.Random(5))
    ped.move(Vec2(1.0, 0.0), 2.0)
    assert ped.position == Vec2(ped.speed * 2.0, 0.0)
    assert ped.collision_radius() == 10.0


def test_spawn_multiple_within_map():
    manager = PedestrianManager(random.Random(6))
    manager.spawn_multiple(5, [], 300, 200)
    assert len(manager.pedestrians) == 5
    for ped in manager.pedestrians:
        assert 0.0 <= ped.position.x < 300.0
        assert 0.0 <= ped.position.y < 200.0


def test_spawn_multiple_avoids_polygons():
    manager = PedestrianManager(random.Random(7))
    blocked = [square(0.0, 0.0, 150.0, 200.0)]
    manager.spawn_multiple(10, blocked, 300, 200)
    assert all(ped.position.x >= 150.0 for ped in manager.pedestrians)


def test_spawn_multiple_falls_back_when_all_blocked():
    manager = PedestrianManager(random.Random(8))
    blocked = [square(-10.0, -10.0, 5000.0, 5000.0)]
    manager.spawn_multiple(3, blocked, 300, 200)
    assert [p.position for p in manager.pedestrians] == [Vec2(100.0, 100.0)] * 3


def test_manager_update_moves_everyone():
    manager = PedestrianManager(random.Random(9))
    first = manager.spawn_pedestrian(Vec2(400.0, 400.0))
    second = manager.spawn_pedestrian(Vec2(800.0, 800.0))
    manager.update(0.1, [])
    assert (first.position - Vec2(400.0, 400.0)).length() == pytest.approx(first.speed * 0.1)
    assert (second.position - Vec2(800.0, 800.0)).length() == pytest.approx(second.speed * 0.1)