import pytest

from streetchase.resources import ResourceError, ResourceManager


def test_texture_round_trip(tmp_path):
    path = tmp_path / "car.png"
    path.write_bytes(b"\x89PNG image bytes")
    manager = ResourceManager()
    manager.load_texture("car", path)
    assert manager.texture("car") == b"\x89PNG image bytes"


def test_font_round_trip(tmp_path):
    path = tmp_path / "main.ttf"
    path.write_bytes(b"font data")
    manager = ResourceManager()
    manager.load_font("main", str(path))
    assert manager.font("main") == b"font data"


def test_reloading_replaces_texture(tmp_path):
    first, second = tmp_path / "a.png", tmp_path / "b.png"
    first.write_bytes(b"first")
    second.write_bytes(b"second")
    manager = ResourceManager()
    manager.load_texture("map", first)
    manager.load_texture("map", second)
    assert manager.texture("map") == b"second"


def test_missing_texture_file_raises(tmp_path):
    path = tmp_path / "missing.png"
    with pytest.raises(ResourceError, match="Failed to load texture"):
        ResourceManager().load_texture("x", path)


def test_empty_font_file_raises(tmp_path):
    path = tmp_path / "empty.ttf"
    path.write_bytes(b"")
    with pytest.raises(ResourceError, match="Failed to load font"):
        ResourceManager().load_font("x", path)


def test_unknown_names_raise():
    manager = ResourceManager()
    with pytest.raises(ResourceError, match="Texture not found: police"):
        manager.texture("police")
    with pytest.raises(ResourceError, match="Font not found: main"):
        manager.font("main")


def test_textures_and_fonts_are_separate(tmp_path):
    path = tmp_path / "shared.bin"
    path.write_bytes(b"data")
    manager = ResourceManager()
    manager.load_texture("shared", path)
    with pytest.raises(ResourceError):
        manager.font("shared")