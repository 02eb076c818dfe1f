# File: src/combodrill/managers/combo_manager.py
"""Combo sources: a user JSON file or the built-in stratagem list.

Both sources share one schema::

    [
        {"name": "Reinforce", "sequence": "UDRLU"},
        ...
    ]

After loading, modes only see Combo objects (name + tuple of Symbols).
"""

import json
import os

from combodrill.utilities.errors import ComboLoadError
from combodrill.utilities.logger import DrillLogger
from combodrill.utilities.stratagems import BUILTIN_COMBOS
from combodrill.utilities.symbols import sequence_from_code


class Combo:
    """A named, playable sequence."""

    __slots__ = ("name", "sequence")

    def __init__(self, name, sequence):
        self.name = name
        self.sequence = sequence

    def __repr__(self):
        return f"Combo({self.name!r}, {len(self.sequence)} symbols)"


def parse_combos(records, origin="combos"):
    """Validate raw records and translate them into Combo objects.

    Records with no recognisable symbols are skipped with a warning.
    Raises ComboLoadError for anything that does not match the schema.
    """
    if not isinstance(records, list):
        raise ComboLoadError(f"{origin}: expected a list of combos, got {type(records).__name__}")

    combos = []
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise ComboLoadError(f"{origin}: entry {i} is not an object")
        name = record.get("name")
        code = record.get("sequence")
        if not isinstance(name, str) or not isinstance(code, str):
            raise ComboLoadError(f"{origin}: entry {i} needs string 'name' and 'sequence'")

        sequence = sequence_from_code(code)
        if not sequence:
            DrillLogger.warning("CMBO", f"Skipping '{name}': no valid symbols in {code!r}")
            continue
        combos.append(Combo(name, sequence))

    DrillLogger.debug("CMBO", f"Parsed {len(combos)} combos from {origin}")
    return combos


class BuiltinComboSource:
    """Serves the combo list bundled with the package."""

    def __init__(self, records=None):
        self.records = BUILTIN_COMBOS if records is None else records

    def describe(self):
        return "built-in combos"

    def load(self):
        return parse_combos(self.records, origin=self.describe())


class FileComboSource:
    """Reads combos from a JSON file on disk."""

    def __init__(self, path):
        self.path = path

    def describe(self):
        return self.path

    def load(self):
        DrillLogger.info("CMBO", f"Loading combos from: {self.path}")
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except OSError as e:
            raise ComboLoadError(f"{self.path}: {e}") from e
        except ValueError as e:
            raise ComboLoadError(f"{self.path}: invalid JSON ({e})") from e
        return parse_combos(records, origin=self.path)


class ComboManager:
    """Picks the combo source for a session.

    The user file wins when it exists; otherwise the built-in list is used.
    """

    def __init__(self, combos_file):
        self.combos_file = combos_file

    def source(self):
        if self.combos_file and os.path.isfile(self.combos_file):
            return FileComboSource(self.combos_file)
        DrillLogger.info("CMBO", f"No combo file at {self.combos_file!r}, using built-in combos")
        return BuiltinComboSource()
