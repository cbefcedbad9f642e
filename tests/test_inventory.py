import pytest

from streetchase.inventory import Inventory


def test_starts_with_one_of_each_item():
    inv = Inventory()
    assert dict(inv.items()) == {"Health": 1, "Pistol": 1, "Ammo": 1, "SpeedBoost": 1}


def test_add_item_increments():
    inv = Inventory()
    before = inv.count("Ammo")
    inv.add_item("Ammo")
    assert inv.count("Ammo") == before + 1


def test_add_new_item():
    inv = Inventory()
    inv.add_item("Grenade")
    assert inv.count("Grenade") == 1


def test_use_item_until_empty():
    inv = Inventory()
    assert inv.use_item("Pistol")
    assert inv.count("Pistol") == 0
    assert not inv.use_item("Pistol")
    assert inv.count("Pistol") == 0


def test_use_missing_item_lists_it_with_zero():
    inv = Inventory()
    assert not inv.use_item("Rocket")
    assert inv.items()["Rocket"] == 0


def test_count_of_unknown_item_is_zero():
    assert Inventory().count("Nothing") == 0


def test_items_view_is_read_only():
    inv = Inventory()
    with pytest.raises(TypeError):
        inv.items()["Health"] = 50