"""The main menu's options and the choice made in it."""

from __future__ import annotations

MENU_OPTIONS = ("Start Game", "Settings", "Exit")
SETTINGS_OPTION = "Settings"


class Menu:
    """Tracks which main menu option has been chosen."""

    def __init__(self) -> None:
        self.options: tuple[str, ...] = MENU_OPTIONS
        self.selected_index = 0
        self.option_chosen = False

    def choose(self, index: int) -> str:
        """Click the option at index and return its label.

        Choosing "Settings" opens the settings screen rather than ending the menu,
        so it leaves the current selection alone.
        """
        if not 0 <= index < len(self.options):
            raise IndexError(f"no menu option at index {index}")
        label = self.options[index]
        if label != SETTINGS_OPTION:
            self.selected_index = index
            self.option_chosen = True
        return label

    def selected_option(self) -> str:
        return self.options[self.selected_index]