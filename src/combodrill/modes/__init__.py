"""Play modes for combodrill."""

from .base import BaseMode
from .game_mode import GameMode
from .library_combos import LibraryCombos
from .random_combos import RandomCombos
from .timed_combos import TimedCombos

__all__ = [
    'BaseMode',
    'GameMode',
    'LibraryCombos',
    'RandomCombos',
    'TimedCombos',
    ]
