"""Timed Combos - race the clock through library combos.

The whole session shares one deadline. Each combo also earns a speed bonus
when finished quickly:

    <= 1.0s  +100
    <= 2.0s  +50
    <= 3.0s  +25
"""

from adafruit_ticks import ticks_add, ticks_diff

from combodrill.managers.round_runner import TimedRoundRunner
from combodrill.utilities.logger import DrillLogger
from combodrill.utilities.results import SessionResult
from .game_mode import GameMode


class TimedCombos(GameMode):
    """Solve as many library combos as possible before time runs out."""

    METADATA = {
        "id": "TIMED",
        "name": "Timed JSON Combos",
        "menu_key": "3",
        "menu_label": "Timed JSON Combos ({time_limit_s} seconds to finish {rounds} random combos)",
        "banner": "Timed JSON Combos Mode: You have {mode.time_limit_s} seconds to solve {mode.rounds} random combos!",
    }

    def __init__(self, core):
        super().__init__(core)
        self.time_limit_s = core.data.get_int("time_limit_s")
        self.tick_ms = core.data.get_int("tick_ms")
        self.deadline = None

    def time_remaining_ms(self):
        return ticks_diff(self.deadline, self.core.clock())

    async def run(self):
        self.start_session()
        # Fixed once here; rounds never move it
        self.deadline = ticks_add(self.start_time, self.time_limit_s * 1000)

        combos = self.select_combos(self.core.combo_source.load(), self.rounds)
        runner = TimedRoundRunner(
            self.core.input,
            self.core.display,
            tick_ms=self.tick_ms,
            clock=self.core.clock,
        )

        for combo in combos:
            if self.time_remaining_ms() <= 0:
                DrillLogger.info("MODE", f"Deadline passed before '{combo.name}'")
                return await self.early_exit(SessionResult.TIMEOUT)

            round_result = await runner.run(combo.sequence, combo.name, self.score, self.deadline)
            self.add_round(round_result)
            if not round_result.completed:
                return await self.early_exit(round_result.reason)

        return self.result(SessionResult.COMPLETE)
