"""Named texture and font data loaded from files."""

from __future__ import annotations

import os
from pathlib import Path


class ResourceError(RuntimeError):
    """A resource could not be loaded or is not known."""


def _read(filepath: str | os.PathLike[str], kind: str) -> bytes:
    try:
        data = Path(filepath).read_bytes()
    except OSError as exc:
        raise ResourceError(f"Failed to load {kind}: {filepath}") from exc
    if not data:
        raise ResourceError(f"Failed to load {kind}: {filepath}")
    return data


class ResourceManager:
    """Keeps loaded textures and fonts by name."""

    def __init__(self) -> None:
        self._textures: dict[str, bytes] = {}
        self._fonts: dict[str, bytes] = {}

    def load_texture(self, name: str, filepath: str | os.PathLike[str]) -> None:
        self._textures[name] = _read(filepath, "texture")

    def texture(self, name: str) -> bytes:
        try:
            return self._textures[name]
        except KeyError:
            raise ResourceError(f"Texture not found: {name}") from None

    def load_font(self, name: str, filepath: str | os.PathLike[str]) -> None:
        self._fonts[name] = _read(filepath, "font")

    def font(self, name: str) -> bytes:
        try:
            return self._fonts[name]
        except KeyError:
            raise ResourceError(f"Font not found: {name}") from None