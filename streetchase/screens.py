"""The settings screen's options and the typewriter story screen."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

SETTINGS_OPTIONS = (
    "Story",
    "Help",
    "Toggle Music",
    "Volume +",
    "Volume -",
    "Brightness +",
    "Brightness -",
    "Back",
)
LEVEL_STEP = 0.1
HELP_TEXT = "This is a game where you must survive and complete levels."

FULL_STORY = (
    "In a world shattered by conflict,\n"
    "a lone adventurer sets out to restore balance.\n\n"
    "Explore forgotten lands.\n"
    "Face deadly creatures.\n"
    "Uncover the secrets of the ancient world...\n"
)
TYPING_DELAY_MS = 30


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class StoryTyper:
    """Reveals the story one character at a time."""

    def __init__(self, story: str = FULL_STORY) -> None:
        self.full_story = story
        self.displayed_text = ""
        self.current_index = 0
        self.done = False

    @property
    def complete(self) -> bool:
        """True once every character is shown."""
        return self.current_index >= len(self.full_story)

    def advance(self, elapsed_ms: float) -> bool:
        """Show the next character if enough time has passed; True if one was added."""
        if self.complete or elapsed_ms <= TYPING_DELAY_MS:
            return False
        self.displayed_text += self.full_story[self.current_index]
        self.current_index += 1
        return True


class Settings:
    """Sound, volume and brightness choices and the options that change them."""

    def __init__(self) -> None:
        self.options: tuple[str, ...] = SETTINGS_OPTIONS
        self.sound_enabled = True
        self.volume_level = 1.0
        self.brightness_level = 1.0
        self.selected_option = -1
        self.should_close = False
        self.story: StoryTyper | None = None

    def select(self, index: int) -> str:
        """Activate the option at index and return its label."""
        if not 0 <= index < len(self.options):
            raise IndexError(f"no settings option at index {index}")
        self.selected_option = index
        label = self.options[index]
        if label == "Story":
            self.story = StoryTyper()
        elif label == "Help":
            logger.info(HELP_TEXT)
        elif label == "Toggle Music":
            self.toggle_sound()
        elif label == "Volume +":
            self.increase_volume()
        elif label == "Volume -":
            self.decrease_volume()
        elif label == "Brightness +":
            self.increase_brightness()
        elif label == "Brightness -":
            self.decrease_brightness()
        elif label == "Back":
            self.should_close = True
        return label

    def toggle_sound(self) -> None:
        self.sound_enabled = not self.sound_enabled

    def increase_volume(self) -> None:
        self.volume_level = _clamp(self.volume_level + LEVEL_STEP)

    def decrease_volume(self) -> None:
        self.volume_level = _clamp(self.volume_level - LEVEL_STEP)

    def increase_brightness(self) -> None:
        self.brightness_level = _clamp(self.brightness_level + LEVEL_STEP)

    def decrease_brightness(self) -> None:
        self.brightness_level = _clamp(self.brightness_level - LEVEL_STEP)