"""Utility modules for combodrill."""

from .errors import ComboDrillError, ComboLoadError, InputTransportError
from .key_event import KeyEvent
from .logger import DrillLogger, LogLevel
from .matcher import SequenceMatcher, speed_bonus
from .results import RoundResult, SessionResult
from .symbols import Symbol, Symbols, sequence_from_code, sequence_to_code, random_sequence

__all__ = [
    'ComboDrillError',
    'ComboLoadError',
    'InputTransportError',
    'KeyEvent',
    'DrillLogger',
    'LogLevel',
    'SequenceMatcher',
    'speed_bonus',
    'RoundResult',
    'SessionResult',
    'Symbol',
    'Symbols',
    'sequence_from_code',
    'sequence_to_code',
    'random_sequence',
    ]
