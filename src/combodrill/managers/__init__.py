"""Top-level package for manager classes."""

from .combo_manager import ComboManager, BuiltinComboSource, FileComboSource
from .data_manager import DataManager
from .display_manager import DisplayManager
from .input_manager import InputManager
from .round_runner import UntimedRoundRunner, TimedRoundRunner

__all__ = [
    "ComboManager",
    "BuiltinComboSource",
    "FileComboSource",
    "DataManager",
    "DisplayManager",
    "InputManager",
    "UntimedRoundRunner",
    "TimedRoundRunner",
]
