"""Base class for all play modes."""

from combodrill.utilities.errors import ComboLoadError
from combodrill.utilities.logger import DrillLogger
from combodrill.utilities.results import SessionResult


class BaseMode:
    """
    Base class for all play modes.

    All mode subclasses must define a METADATA class attribute describing the
    mode. The manifest uses it to build the menu.

    METADATA Structure:
        id (str): Unique identifier for the mode (e.g., "LIBRARY", "TIMED")
        name (str): Human-readable name shown in the menu
        menu_key (str): Option the player types to pick the mode
        menu_label (str): Menu text, formatted with the current settings
        banner (str): Line shown when the mode starts, formatted with the
            mode instance as ``mode``

    Access Pattern:
        Modes receive the CoreManager (or any object with the same
        attributes) as ``core``:
            core.display       display sink
            core.input         key event source
            core.data          settings (DataManager)
            core.combo_source  Sequence Source (file or built-in)
            core.rng           random.Random used for shuffles and random combos
            core.clock         millisecond clock (ticks_ms)
    """

    # Default Metadata
    METADATA = {
        "id": "UNKNOWN",
        "name": "Unknown Mode",
        "menu_key": None,
        "menu_label": "",
        "banner": "",
    }

    def __init__(self, core, name=None):
        self.core = core
        self.name = name if name else self.METADATA["name"]

    async def enter(self):
        """Standard setup routine."""
        # Input Flush (keys typed at the menu must not count)
        self.core.input.flush()
        self.core.display.clear()
        banner = self.METADATA.get("banner", "").format(mode=self)
        if banner:
            self.core.display.show_message(banner)
        DrillLogger.info("MODE", f"Entering {self.name}")

    async def exit(self):
        """Standard cleanup routine."""
        DrillLogger.info("MODE", f"Leaving {self.name}")

    async def run(self):
        """Override this method in subclasses."""
        raise NotImplementedError("Subclasses must implement the run() method.")

    async def execute(self):
        """The wrapper called by CoreManager. Returns a SessionResult."""
        try:
            await self.enter()
            return await self.run()
        except ComboLoadError as e:
            DrillLogger.error("MODE", f"Error loading combinations: {e}")
            self.core.display.show_message(f"Error loading combinations: {e}")
            return SessionResult(0, 0.0, SessionResult.LOAD_ERROR)
        finally:
            await self.exit()
