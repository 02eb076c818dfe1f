# File: src/combodrill/managers/round_runner.py
"""Round runners: drive a SequenceMatcher from live key events.

The untimed runner simply awaits each key in turn. The timed runner has two
things to service at once, key presses and a fixed-period display tick, so
both are posted into a single mailbox queue by their own tasks and the round
loop reacts to whichever arrives first. The session deadline is checked on
entry to every iteration and again before any item is acted on, so a key
that arrives late never advances a round. Keys still queued in the mailbox
when a round ends are discarded with it, so the next round starts on fresh
input.
"""

import asyncio
from adafruit_ticks import ticks_ms, ticks_diff

from combodrill.utilities.key_event import KeyEvent
from combodrill.utilities.logger import DrillLogger
from combodrill.utilities.matcher import SequenceMatcher, speed_bonus
from combodrill.utilities.results import RoundResult


class UntimedRoundRunner:
    """Plays one sequence with no time limit."""

    def __init__(self, input_source, display, clock=ticks_ms):
        self.input = input_source
        self.display = display
        self.clock = clock

    async def run(self, sequence, title, total_score):
        """Play ``sequence`` to completion or until the player quits.

        ``total_score`` is only shown on screen; the caller adds the returned
        round score to the session.
        """
        matcher = SequenceMatcher(sequence)
        start = self.clock()
        self.display.show_round(title, total_score, sequence, matcher.cursor)

        while not matcher.complete:
            event = await self.input.next_event()
            outcome = matcher.consume(event)

            if outcome == SequenceMatcher.QUIT:
                self.display.show_feedback("Exiting...")
                duration = ticks_diff(self.clock(), start)
                DrillLogger.info("ROND", f"'{title}' quit at {matcher.cursor}/{len(sequence)}, score {matcher.score}")
                return RoundResult(False, matcher.score, duration, reason=RoundResult.QUIT)

            self.display.show_round(title, total_score + matcher.score, sequence, matcher.cursor)
            if outcome == SequenceMatcher.ADVANCE:
                self.display.show_feedback("Correct!")
            else:
                self.display.show_feedback("Wrong key, try again!")

        duration = ticks_diff(self.clock(), start)
        DrillLogger.info("ROND", f"'{title}' complete in {duration}ms, score {matcher.score}")
        return RoundResult(True, matcher.score, duration)


class TimedRoundRunner:
    """Plays one sequence against the session deadline, with a speed bonus."""

    TICK = object()
    DEFAULT_TICK_MS = 100

    def __init__(self, input_source, display, tick_ms=DEFAULT_TICK_MS, clock=ticks_ms):
        self.input = input_source
        self.display = display
        self.tick_ms = tick_ms
        self.clock = clock

    async def _produce_keys(self, mailbox):
        """Republish key events into the mailbox until cancelled."""
        try:
            while True:
                event = await self.input.next_event()
                mailbox.put_nowait(event)
                if event.is_error:
                    return
        except Exception as e:
            # Hand the failure to the round loop, which treats it as fatal
            mailbox.put_nowait(KeyEvent.failure(e))

    async def _tick(self, mailbox):
        """Post a tick into the mailbox every ``tick_ms``."""
        period = self.tick_ms / 1000
        while True:
            await asyncio.sleep(period)
            mailbox.put_nowait(self.TICK)

    def _expired(self, deadline):
        return ticks_diff(deadline, self.clock()) <= 0

    def _render(self, title, total_score, matcher, start, deadline):
        now = self.clock()
        self.display.show_timed(
            title,
            total_score + matcher.score,
            matcher.sequence,
            matcher.cursor,
            ticks_diff(deadline, now),
            ticks_diff(now, start),
        )

    async def run(self, sequence, title, total_score, deadline):
        """Play ``sequence`` until complete, quit, or ``deadline`` (a ticks_ms value)."""
        matcher = SequenceMatcher(sequence)
        start = self.clock()
        mailbox = asyncio.Queue()

        producer = asyncio.create_task(self._produce_keys(mailbox))
        ticker = asyncio.create_task(self._tick(mailbox))
        self._render(title, total_score, matcher, start, deadline)

        try:
            while True:
                if self._expired(deadline):
                    break

                item = await mailbox.get()

                # Deadline wins over anything already waiting in the mailbox
                if self._expired(deadline):
                    break

                if item is self.TICK:
                    self._render(title, total_score, matcher, start, deadline)
                    continue

                outcome = matcher.consume(item)

                if outcome == SequenceMatcher.QUIT:
                    self.display.show_feedback("Exiting...")
                    duration = ticks_diff(self.clock(), start)
                    DrillLogger.info("ROND", f"'{title}' quit at {matcher.cursor}/{len(sequence)}, score {matcher.score}")
                    return RoundResult(False, matcher.score, duration, reason=RoundResult.QUIT)

                if matcher.complete:
                    duration = ticks_diff(self.clock(), start)
                    bonus = speed_bonus(duration)
                    DrillLogger.info("ROND", f"'{title}' complete in {duration}ms, score {matcher.score} + bonus {bonus}")
                    return RoundResult(True, matcher.score + bonus, duration, bonus=bonus)

                if outcome == SequenceMatcher.ADVANCE:
                    self.display.show_feedback("Correct!")
                else:
                    self.display.show_feedback("Wrong key, try again!")

            duration = ticks_diff(self.clock(), start)
            DrillLogger.info("ROND", f"'{title}' out of time at {matcher.cursor}/{len(sequence)}, score {matcher.score}")
            return RoundResult(False, matcher.score, duration, reason=RoundResult.TIMEOUT)

        finally:
            for task in (ticker, producer):
                task.cancel()
            for task in (ticker, producer):
                try:
                    await task
                except asyncio.CancelledError:
                    pass
