"""Exception types raised by combodrill."""


class ComboDrillError(Exception):
    """Base class for all combodrill errors."""


class ComboLoadError(ComboDrillError):
    """The combo source could not be read or parsed.

    Raised before any round starts; the play invocation reports a score of 0.
    """


class InputTransportError(ComboDrillError):
    """The keyboard input channel failed mid-session.

    There is nothing to recover to once input is gone, so this is never
    caught inside a round or a mode. The core manager logs it and exits.
    """
