"""Game Mode Base Class."""

from adafruit_ticks import ticks_diff

from combodrill.managers.round_runner import UntimedRoundRunner
from combodrill.utilities.logger import DrillLogger
from combodrill.utilities.results import SessionResult
from .base import BaseMode


class GameMode(BaseMode):
    """Base class for the combo play modes.

    Owns the session: the running total, the session clock and the rule that
    the first incomplete round ends the session.
    """

    def __init__(self, core, name=None):
        super().__init__(core, name)
        self.score = 0
        self.rounds_played = 0
        self.start_time = 0
        self.rounds = core.data.get_int("rounds")

    def start_session(self):
        self.score = 0
        self.rounds_played = 0
        self.start_time = self.core.clock()

    def elapsed_seconds(self):
        return ticks_diff(self.core.clock(), self.start_time) / 1000.0

    def select_combos(self, pool, count):
        """Random permutation of the pool, first ``count`` entries."""
        combos = list(pool)
        self.core.rng.shuffle(combos)
        return combos[:min(count, len(combos))]

    def add_round(self, result):
        """Fold a finished round into the session total."""
        self.score += result.score
        self.rounds_played += 1
        DrillLogger.debug("MODE", f"Round {self.rounds_played}: {result!r}, total {self.score}")

    def result(self, reason):
        session = SessionResult(self.score, self.elapsed_seconds(), reason, self.rounds_played)
        DrillLogger.note("MODE", f"{self.name} finished: {session!r}")
        return session

    async def early_exit(self, reason):
        """Session stopped before every round was played."""
        if reason == SessionResult.TIMEOUT:
            self.core.display.show_message(f"Time's up! Final Score: {self.score}")
        else:
            self.core.display.show_message(f"You exited early. Final Score: {self.score}")
        return self.result(reason)

    async def play_untimed(self, rounds):
        """Run ``(title, sequence)`` rounds in order with no time limit."""
        runner = UntimedRoundRunner(self.core.input, self.core.display, clock=self.core.clock)
        for title, sequence in rounds:
            round_result = await runner.run(sequence, title, self.score)
            self.add_round(round_result)
            if not round_result.completed:
                return await self.early_exit(SessionResult.QUIT)
        return self.result(SessionResult.COMPLETE)

    async def run(self):
        """Override this method in subclasses."""
        raise NotImplementedError("Subclasses must implement the run() method.")
