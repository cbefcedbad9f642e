import pytest

from streetchase.geometry import MAX_HEALTH, Vec2
from streetchase.objects import (
    Bullet,
    Character,
    DestructibleObject,
    Explosion,
    GameObject,
    MovingObject,
    StaticObject,
)


def test_abstract_bases_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GameObject()
    with pytest.raises(TypeError):
        MovingObject()


def test_character_starts_at_full_health():
    c = Character()
    assert c.health == MAX_HEALTH
    assert not c.is_dead()


def test_character_damage_reduces_health():
    c = Character()
    c.take_damage(30)
    assert c.health == MAX_HEALTH - 30
    assert not c.is_dead()


def test_character_health_clamps_at_zero():
    c = Character()
    c.take_damage(MAX_HEALTH * 5)
    assert c.health == 0
    assert c.is_dead()


def test_character_move_follows_direction():
    c = Character(Vec2(10, 10))
    c.move(Vec2(1, 0), 0.5)
    assert c.position.y == 10
    assert c.position.x > 10


def test_character_update_keeps_position():
    c = Character(Vec2(7, 8))
    c.update(1.0, [])
    assert c.position == Vec2(7, 8)


def test_static_object_position():
    s = StaticObject()
    assert s.position == Vec2()
    s.position = Vec2(3, 4)
    s.update(2.0, [])
    assert s.position == Vec2(3, 4)


def test_destructible_object_defaults_and_destruction():
    barrel = DestructibleObject()
    assert barrel.position == Vec2(400.0, 300.0)
    assert not barrel.is_destroyed()
    barrel.take_damage(60)
    assert not barrel.is_destroyed()
    barrel.take_damage(60)
    assert barrel.health == 0
    assert barrel.is_destroyed()


def test_explosion_finishes_after_duration():
    boom = Explosion(Vec2(1, 1))
    boom.update(0.25, [])
    assert not boom.is_finished()
    boom.update(0.25, [])
    assert boom.is_finished()
    assert boom.position == Vec2(1, 1)


def test_bullet_speed_and_linear_motion():
    one = Bullet(Vec2(0, 0), Vec2(0.6, 0.8))
    two = Bullet(Vec2(0, 0), Vec2(0.6, 0.8))
    assert one.speed == 600.0
    one.update(0.1, [])
    one.update(0.1, [])
    two.update(0.2, [])
    assert one.position.x == pytest.approx(two.position.x)
    assert one.position.y == pytest.approx(two.position.y)


def test_bullet_travels_speed_times_time_for_unit_direction():
    bullet = Bullet(Vec2(5, 5), Vec2(0.6, 0.8))
    bullet.update(0.5, [])
    travelled = (bullet.position - Vec2(5, 5)).length()
    assert travelled == pytest.approx(bullet.speed * 0.5)