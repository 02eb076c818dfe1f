"""Key event passed from the input source to the matcher."""

class KeyEvent:
    """A single keyboard event.

    Parameters:
        kind (str): ``KeyEvent.KEY`` for a key press, ``KeyEvent.ERROR`` when
            the input channel failed.
        key (str): Named key identifier (``KEY_UP``, ``KEY_ESCAPE``...) or
            ``None`` for a plain character.
        char (str): The typed character, empty for named keys.
        error (Exception): The underlying failure for ``ERROR`` events.
    """

    KEY = "KEY"
    ERROR = "ERROR"

    QUIT_KEYS = ("KEY_ESCAPE", "KEY_CTRL_C")
    QUIT_CHARS = ("q", "Q", "\x03")  # \x03 is Ctrl-C when ISIG is off

    __slots__ = ("kind", "key", "char", "error")

    def __init__(self, kind, key=None, char="", error=None):
        self.kind = kind
        self.key = key
        self.char = char
        self.error = error

    @classmethod
    def press(cls, key=None, char=""):
        return cls(cls.KEY, key=key, char=char)

    @classmethod
    def failure(cls, error):
        return cls(cls.ERROR, error=error)

    @property
    def is_error(self):
        return self.kind == self.ERROR

    @property
    def is_quit(self):
        """True for the explicit cancel keys: Escape, q or Ctrl-C."""
        if self.kind != self.KEY:
            return False
        return self.key in self.QUIT_KEYS or self.char in self.QUIT_CHARS

    def __repr__(self):
        if self.is_error:
            return f"KeyEvent(ERROR, {self.error!r})"
        return f"KeyEvent({self.key!r}, {self.char!r})"
