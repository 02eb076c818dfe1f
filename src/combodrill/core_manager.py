# File: src/combodrill/core_manager.py
"""
Core Manager for combodrill.

Owns the terminal, the managers and the mode registry, and runs the
username prompt and main menu around a single play session.
"""
import asyncio
import random
import sys
from contextlib import contextmanager

from adafruit_ticks import ticks_ms
from blessed import Terminal

from combodrill.managers import (
    ComboManager,
    DataManager,
    DisplayManager,
    InputManager,
)
from combodrill.modes.manifest import MODE_REGISTRY, QUIT_KEYS
from combodrill.utilities import (
    DrillLogger,
    InputTransportError,
    LogLevel,
)


def configure_logging(data):
    """Apply the logging settings from the DataManager."""
    DrillLogger.set_level(LogLevel.from_name(data.get_setting("log_level")))
    DrillLogger.enable_console(bool(data.get_setting("log_console")))
    log_file = data.get_setting("log_file")
    DrillLogger.enable_file_logging(bool(log_file), log_file or None)


class CoreManager:
    """Holds global state for one run of the program.

    Public Interface:
        modes: Dict[str, Type[GameMode]] - play modes keyed by menu option
        display, input, data, combo_source, rng, clock - the collaborators
            every mode reads from ``core`` (see BaseMode)

    Any collaborator can be injected; the defaults talk to the real terminal.
    """
    def __init__(self, data=None, term=None, display=None, input_source=None,
                 combo_source=None, rng=None, clock=ticks_ms):
        self.data = data if data is not None else DataManager()
        configure_logging(self.data)

        if term is None and (display is None or input_source is None):
            term = Terminal()
        self.term = term

        self.display = display if display is not None else DisplayManager(term)
        self.input = input_source if input_source is not None else InputManager(term)

        if combo_source is None:
            combo_source = ComboManager(self.data.get_setting("combos_file")).source()
        self.combo_source = combo_source

        if rng is None:
            rng = random.Random(self.data.get_setting("seed"))
        self.rng = rng
        self.clock = clock

        self.modes = {key: entry["class"] for key, entry in MODE_REGISTRY.items()}
        DrillLogger.info("CORE", f"[INIT] CoreManager - combos: {self.combo_source.describe()}")

    # --- Menu ---

    def menu_lines(self):
        lines = ["Choose an option:"]
        for key, entry in MODE_REGISTRY.items():
            lines.append(f"{key}: {entry['menu_label'].format(**self.data.data)}")
        lines.append("q: Quit")
        return lines

    def prompt_username(self):
        return input("Enter your username: ").strip()

    def prompt_choice(self):
        for line in self.menu_lines():
            print(line)
        return input().strip()

    # --- Play ---

    @contextmanager
    def game_screen(self):
        """Put the terminal in raw mode for the length of a session.

        ISIG is off in raw mode, so Ctrl-C arrives as a key and takes the
        round's quit path.
        """
        if self.term is None:
            yield
            return
        with self.term.raw(), self.term.hidden_cursor():
            yield

    async def play(self, mode_key):
        """Run one mode to the end and return its SessionResult."""
        mode_class = self.modes[mode_key]
        DrillLogger.info("CORE", f"Starting mode {mode_class.METADATA['id']}")
        mode = mode_class(self)
        return await mode.execute()

    def run_mode(self, mode_key):
        with self.game_screen():
            return asyncio.run(self.play(mode_key))


def wait_for_exit():
    print("Press 'Enter' to exit.")
    try:
        input()
    except EOFError:
        pass


def main(core=None):
    """Program entry point. Returns the process exit status."""
    try:
        if core is None:
            core = CoreManager()
        username = core.prompt_username()
        choice = core.prompt_choice()
    except (EOFError, KeyboardInterrupt):
        print("\nExiting...")
        return 0

    if choice in QUIT_KEYS:
        print("Exiting...")
        return 0
    if choice not in core.modes:
        print("Invalid option, please restart the program.")
        return 0

    try:
        result = core.run_mode(choice)
    except InputTransportError as e:
        # Nothing to resume once the keyboard is gone
        DrillLogger.error("CORE", f"Input failure, aborting: {e}")
        print(f"Fatal input error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        DrillLogger.info("CORE", "Interrupted")
        print("\nExiting...")
        return 130

    score, elapsed = result.as_tuple()
    print(f"Congratulations {username}! Final Score: {score} in {elapsed:.2f} seconds")
    wait_for_exit()
    return 0
