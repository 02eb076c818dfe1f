"""Outcome objects returned by rounds and play sessions."""

class RoundResult:
    """Outcome of one round.

    ``score`` already includes any speed bonus. ``reason`` says why the
    round ended: COMPLETE, QUIT or TIMEOUT.
    """

    COMPLETE = "COMPLETE"
    QUIT = "QUIT"
    TIMEOUT = "TIMEOUT"

    __slots__ = ("completed", "score", "duration_ms", "bonus", "reason")

    def __init__(self, completed, score, duration_ms, bonus=0, reason=None):
        self.completed = completed
        self.score = score
        self.duration_ms = duration_ms
        self.bonus = bonus
        if reason is None:
            reason = self.COMPLETE if completed else self.QUIT
        self.reason = reason

    def __repr__(self):
        return (f"RoundResult(completed={self.completed}, score={self.score}, "
                f"duration_ms={self.duration_ms}, bonus={self.bonus}, reason={self.reason})")


class SessionResult:
    """Outcome of one play invocation: final score and wall time."""

    COMPLETE = "COMPLETE"
    QUIT = "QUIT"
    TIMEOUT = "TIMEOUT"
    LOAD_ERROR = "LOAD_ERROR"

    __slots__ = ("total_score", "elapsed_seconds", "reason", "rounds_played")

    def __init__(self, total_score, elapsed_seconds, reason=COMPLETE, rounds_played=0):
        self.total_score = total_score
        self.elapsed_seconds = elapsed_seconds
        self.reason = reason
        self.rounds_played = rounds_played

    def as_tuple(self):
        """The ``(total_score, elapsed_seconds)`` pair reported to the caller."""
        return self.total_score, self.elapsed_seconds

    def __repr__(self):
        return (f"SessionResult(total_score={self.total_score}, "
                f"elapsed_seconds={self.elapsed_seconds:.2f}, reason={self.reason}, "
                f"rounds_played={self.rounds_played})")
