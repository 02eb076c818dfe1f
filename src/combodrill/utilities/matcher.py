"""Sequence matcher and round scoring rules."""

from .errors import InputTransportError

# Score deltas applied while matching
CORRECT_POINTS = 20
WRONG_PENALTY = 5

# Speed bonus tiers for timed rounds: (max elapsed ms inclusive, bonus)
BONUS_TIERS = (
    (1000, 100),
    (2000, 50),
    (3000, 25),
)


def speed_bonus(elapsed_ms):
    """Return the completion bonus for a timed round.

    Tiers are inclusive at their upper bound and the first match wins.
    ``elapsed_ms`` is a whole-millisecond ticks_ms difference, so a finish
    at 1000.9 ms reads as 1000 and still earns the top tier. The first
    millisecond past a limit drops to the next tier.
    """
    for limit_ms, bonus in BONUS_TIERS:
        if elapsed_ms <= limit_ms:
            return bonus
    return 0


class SequenceMatcher:
    """Tracks progress through one sequence.

    Pure state machine: a cursor into the sequence and the round score.
    All waiting happens in the round runners.
    """

    ADVANCE = "ADVANCE"
    PENALIZE = "PENALIZE"
    QUIT = "QUIT"

    def __init__(self, sequence):
        if not sequence:
            raise ValueError("Cannot match an empty sequence")
        self.sequence = sequence
        self.cursor = 0
        self.score = 0

    @property
    def complete(self):
        return self.cursor == len(self.sequence)

    @property
    def expected(self):
        """The symbol waiting to be matched, or None once complete."""
        if self.complete:
            return None
        return self.sequence[self.cursor]

    def consume(self, event):
        """Apply one key event and report what happened."""
        if event.is_error:
            raise InputTransportError(f"Input source failed: {event.error}")

        if event.is_quit:
            return self.QUIT

        if self.complete:
            raise RuntimeError("consume() called on a completed sequence")

        if event.key == self.sequence[self.cursor].key:
            self.cursor += 1
            self.score += CORRECT_POINTS
            return self.ADVANCE

        self.score -= WRONG_PENALTY
        return self.PENALIZE
