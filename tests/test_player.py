import pytest

from streetchase.geometry import MAX_HEALTH, Vec2
from streetchase.player import Player
from streetchase.presents import HealthPresent

SHEET = Vec2(400.0, 200.0)


def square(cx, cy, half):
    return [
        Vec2(cx - half, cy - half),
        Vec2(cx + half, cy - half),
        Vec2(cx + half, cy + half),
        Vec2(cx - half, cy + half),
    ]


def test_moves_right_by_speed_times_dt():
    player = Player(Vec2(100.0, 100.0), SHEET)
    player.update(0.1, [], Vec2(1.0, 0.0))
    assert player.position.x == pytest.approx(100.0 + player.speed * 0.1)
    assert player.position.y == pytest.approx(100.0)


def test_diagonal_movement_is_normalised():
    player = Player(Vec2(500.0, 500.0), SHEET)
    player.update(0.1, [], Vec2(1.0, 1.0))
    moved = (player.position - Vec2(500.0, 500.0)).length()
    assert moved == pytest.approx(player.speed * 0.1)


def test_blocked_step_keeps_position():
    player = Player(Vec2(100.0, 100.0), SHEET)
    target_x = 100.0 + player.speed * 0.1
    player.update(0.1, [square(target_x, 100.0, 5.0)], Vec2(1.0, 0.0))
    assert player.position == Vec2(100.0, 100.0)


def test_walking_frames_cycle_and_idle_resets():
    player = Player(Vec2(100.0, 100.0), SHEET)
    frames = []
    for _ in range(4):
        player.update(player.anim_delay, [], Vec2(0.0, 1.0))
        frames.append(player.current_frame)
    assert len(set(frames)) == 4
    assert frames[-1] == 0
    player.update(0.1, [], Vec2())
    assert player.current_frame == 0
    assert player.anim_timer == 0.0
    assert player.frame_rect == (0, player.frame_height, player.frame_width, player.frame_height)


def test_collision_bounds_centered_and_offset():
    player = Player(Vec2(200.0, 300.0), SHEET)
    bounds = player.collision_bounds()
    assert bounds.left + bounds.width / 2.0 == pytest.approx(200.0)
    assert bounds.top + bounds.height / 2.0 == pytest.approx(300.0)
    assert bounds.width == pytest.approx(player.frame_width * player.scale)
    shifted = player.collision_bounds(Vec2(10.0, -5.0))
    assert shifted.left == pytest.approx(bounds.left + 10.0)
    assert shifted.top == pytest.approx(bounds.top - 5.0)


def test_center_and_radius():
    player = Player(Vec2(50.0, 60.0), SHEET)
    assert player.center() - player.position == Vec2(-2.0, 4.0)
    assert player.collision_radius() == 6.0


def test_take_damage_leaves_health():
    player = Player()
    player.take_damage(40)
    assert player.health == MAX_HEALTH


def test_heal_adds_and_caps():
    player = Player()
    player.health = 50
    player.heal(25)
    assert player.health == 75
    player.heal(1000)
    assert player.health == MAX_HEALTH


def test_heal_at_full_health_stores_item():
    player = Player()
    before = player.inventory.count("Health")
    player.heal(25)
    assert player.health == MAX_HEALTH
    assert player.inventory.count("Health") == before + 1


def test_on_collision_with_present_applies_effect():
    player = Player()
    player.health = 50
    present = HealthPresent(Vec2(100.0, 100.0))
    player.on_collision(present)
    assert present.collected is True
    assert player.health == 75


def test_present_colliding_with_player_does_nothing():
    player = Player()
    player.health = 50
    present = HealthPresent(Vec2(100.0, 100.0))
    present.on_collision(player)
    assert present.collected is False
    assert player.health == 50