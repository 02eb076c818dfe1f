"""
Directional symbol table and sequence helpers for combodrill.

A combo is stored as a string of symbol codes ("UDLR") and played as a tuple
of Symbol objects. Unknown characters are dropped when translating, never
rejected.
"""

class Symbol:
    """One directional prompt: code, expected key identifier and glyph art."""

    __slots__ = ("code", "name", "key", "art")

    def __init__(self, code, name, key, art):
        self.code = code
        self.name = name
        self.key = key
        self.art = art

    def __repr__(self):
        return f"Symbol({self.code!r})"

class Symbols:
    """
    The fixed four-direction alphabet.
    Key identifiers match blessed keystroke names (``Keystroke.name``).
    """

    UP = Symbol(
        "U", "UP", "KEY_UP",
        "   ██   \n ██████ \n████████\n   ██   \n   ██   "
    )
    DOWN = Symbol(
        "D", "DOWN", "KEY_DOWN",
        "   ██   \n   ██   \n████████\n ██████ \n   ██   "
    )
    LEFT = Symbol(
        "L", "LEFT", "KEY_LEFT",
        "    ███   \n  █████   \n██████████\n  █████   \n    ███   "
    )
    RIGHT = Symbol(
        "R", "RIGHT", "KEY_RIGHT",
        "   ███    \n   █████  \n██████████\n   █████  \n   ███    "
    )

    ALL = (UP, DOWN, LEFT, RIGHT)

    BY_CODE = {s.code: s for s in ALL}
    BY_KEY = {s.key: s for s in ALL}

    # Height of every glyph in rows
    ART_ROWS = 5

    @classmethod
    def get(cls, code):
        """Return the Symbol for a code, or None if the code is unknown."""
        return cls.BY_CODE.get(code)

    @classmethod
    def key_for(cls, code):
        """Return the input key identifier for a symbol code."""
        symbol = cls.BY_CODE.get(code)
        return symbol.key if symbol else None

    @classmethod
    def glyph_for(cls, code):
        """Return the glyph art for a symbol code."""
        symbol = cls.BY_CODE.get(code)
        return symbol.art if symbol else None

    @classmethod
    def match_key(cls, key):
        """Return the Symbol bound to an input key identifier, or None."""
        return cls.BY_KEY.get(key)


def sequence_from_code(code):
    """Translate a combo string like "UDLR" into a tuple of Symbols.

    Unrecognised characters are skipped.
    """
    return tuple(Symbols.BY_CODE[ch] for ch in code if ch in Symbols.BY_CODE)


def sequence_to_code(sequence):
    """Translate a tuple of Symbols back to its code string."""
    return "".join(symbol.code for symbol in sequence)


def random_sequence(length, rng):
    """Return ``length`` symbols sampled uniformly from the alphabet."""
    if length < 1:
        raise ValueError(f"Sequence length must be at least 1, got {length}")
    return tuple(rng.choice(Symbols.ALL) for _ in range(length))
