# File: src/combodrill/managers/data_manager.py
"""Manages game settings loaded from config.json."""

import json
import os

from combodrill.utilities.logger import DrillLogger

class DataManager:
    """Loads settings from a JSON file and merges them over the defaults."""

    CONFIG_ENV = "COMBODRILL_CONFIG"

    DEFAULTS = {
        "combos_file": "stratagems.json",  # User combo file, built-in list if missing
        "rounds": 10,  # Rounds per session
        "random_length": 6,  # Arrows per random combo
        "time_limit_s": 30,  # Timed mode session limit
        "tick_ms": 100,  # Timed mode display refresh period
        "log_level": "INFO",
        "log_console": False,  # Mirror log lines to stderr
        "log_file": "combodrill.log",  # Empty string disables file logging
        "seed": None,  # Optional RNG seed for repeatable sessions
    }

    def __init__(self, file_path=None):
        if file_path is None:
            file_path = os.environ.get(self.CONFIG_ENV, "config.json")
        DrillLogger.info("DATA", f"[INIT] DataManager - file_path: {file_path}")
        self.file_path = file_path
        self.data = dict(self.DEFAULTS)
        self.load()

    def load(self):
        """Load settings from disk; keep defaults for anything missing or unreadable."""
        self.data = dict(self.DEFAULTS)
        if not os.path.isfile(self.file_path):
            DrillLogger.debug("DATA", f"No config found at {self.file_path}, using defaults.")
            return
        try:
            DrillLogger.debug("DATA", f"Loading settings from: {self.file_path}")
            with open(self.file_path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            DrillLogger.warning("DATA", f"Could not read {self.file_path}: {e}. Using defaults.")
            return

        if not isinstance(loaded, dict):
            DrillLogger.warning("DATA", f"{self.file_path} is not a JSON object. Using defaults.")
            return

        for key, value in loaded.items():
            if key not in self.DEFAULTS:
                DrillLogger.warning("DATA", f"Ignoring unknown setting '{key}'")
                continue
            self.data[key] = value

    def get_setting(self, setting_key, default=None):
        """Retrieve a specific setting."""
        return self.data.get(setting_key, default)

    def get_int(self, setting_key):
        """Retrieve a setting as a positive int, falling back to the default."""
        value = self.data.get(setting_key)
        try:
            value = int(value)
        except (TypeError, ValueError):
            value = 0
        if value < 1:
            fallback = self.DEFAULTS[setting_key]
            DrillLogger.warning("DATA", f"Invalid '{setting_key}' value, using {fallback}")
            return fallback
        return value
