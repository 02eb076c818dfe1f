"""Mode Manifest - Central registry for all available play modes.

The core manager builds its menu from this registry and instantiates the
chosen mode class without holding references to individual modes.
"""

from .library_combos import LibraryCombos
from .random_combos import RandomCombos
from .timed_combos import TimedCombos


def _entry(mode_class):
    meta = mode_class.METADATA
    return {
        "class": mode_class,
        "id": meta["id"],
        "name": meta["name"],
        "menu_label": meta["menu_label"],
    }


# Mode Registry
# Maps the menu key the player types to the mode class and its menu text
MODE_REGISTRY = {
    mode_class.METADATA["menu_key"]: _entry(mode_class)
    for mode_class in (LibraryCombos, RandomCombos, TimedCombos)
}

# Menu keys that leave the program instead of starting a mode
QUIT_KEYS = ("q", "Q")
