#!/usr/bin/env python3
"""Unit tests for the untimed and timed round runners.

Tests verify:
- Untimed rounds score 20 per symbol, -5 per wrong key, keep partial score on quit
- Untimed rounds render before the first key and after each key
- Timed rounds add the speed bonus once, on completion only
- The session deadline is checked before a round starts and before any
  queued key is applied
- Ticks refresh the countdown while no keys arrive
- Producer and ticker tasks are gone after every exit path
- Input failures surface as InputTransportError
"""

import asyncio

import pytest
from adafruit_ticks import ticks_add, ticks_ms

from combodrill.managers.round_runner import TimedRoundRunner, UntimedRoundRunner
from combodrill.utilities.errors import InputTransportError
from combodrill.utilities.key_event import KeyEvent
from combodrill.utilities.results import RoundResult
from combodrill.utilities.symbols import sequence_from_code

from fakes import ESCAPE, QUIT, WRONG, Pause, ScriptedInput, presses, press


def _other_tasks():
    current = asyncio.current_task()
    return [t for t in asyncio.all_tasks() if t is not current and not t.done()]


# ---------------------------------------------------------------------------
# Untimed
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_untimed_all_correct(display, clock):
    """Every key correct: completed, 20 per symbol, no bonus."""
    source = ScriptedInput(presses("UUDD"), clock=clock)
    runner = UntimedRoundRunner(source, display, clock=clock)

    result = await runner.run(sequence_from_code("UUDD"), "Test", 0)

    assert result.completed
    assert result.score == 80
    assert result.bonus == 0
    assert result.reason == RoundResult.COMPLETE
    assert source.delivered == 4


@pytest.mark.asyncio
async def test_untimed_renders_before_and_after_each_key(display, clock):
    """One render up front, then one per key with the cursor moved on."""
    source = ScriptedInput([press("U"), WRONG, press("D")], clock=clock)
    runner = UntimedRoundRunner(source, display, clock=clock)

    await runner.run(sequence_from_code("UD"), "Reinforce", 100)

    assert display.rounds == [
        ("Reinforce", 100, 0),
        ("Reinforce", 120, 1),
        ("Reinforce", 115, 1),
        ("Reinforce", 135, 2),
    ]
    assert display.feedback == ["Correct!", "Wrong key, try again!", "Correct!"]


@pytest.mark.asyncio
async def test_untimed_wrong_key_must_be_retried(display, clock):
    """Two wrong keys cost 10; the symbol still has to be hit."""
    source = ScriptedInput([press("L"), press("R"), press("U")], clock=clock)
    runner = UntimedRoundRunner(source, display, clock=clock)

    result = await runner.run(sequence_from_code("U"), "Test", 0)

    assert result.completed
    assert result.score == 20 - 10


@pytest.mark.asyncio
@pytest.mark.parametrize("k", [0, 1, 3])
async def test_untimed_quit_keeps_partial_score(display, clock, k):
    """Quit at cursor k: not completed, score is what was earned so far."""
    code = "UDLR"
    script = presses(code[:k]) + [WRONG, QUIT]
    runner = UntimedRoundRunner(ScriptedInput(script, clock=clock), display, clock=clock)

    result = await runner.run(sequence_from_code(code), "Test", 0)

    assert not result.completed
    assert result.reason == RoundResult.QUIT
    assert result.score == 20 * k - 5
    assert display.feedback[-1] == "Exiting..."


@pytest.mark.asyncio
async def test_untimed_measures_duration(display, clock):
    source = ScriptedInput([(400, press("U")), (350, press("D"))], clock=clock)
    runner = UntimedRoundRunner(source, display, clock=clock)

    result = await runner.run(sequence_from_code("UD"), "Test", 0)

    assert result.duration_ms == 750
    assert result.score == 40


@pytest.mark.asyncio
async def test_untimed_error_event_is_fatal(display, clock):
    source = ScriptedInput([press("U"), KeyEvent.failure(OSError("tty closed"))], clock=clock)
    runner = UntimedRoundRunner(source, display, clock=clock)

    with pytest.raises(InputTransportError):
        await runner.run(sequence_from_code("UD"), "Test", 0)


# ---------------------------------------------------------------------------
# Timed
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_timed_fast_completion_gets_top_bonus(display, clock):
    """'UD' finished in 0.5s: 40 + 100."""
    source = ScriptedInput([(200, press("U")), (300, press("D"))], clock=clock)
    runner = TimedRoundRunner(source, display, clock=clock)
    deadline = clock() + 30000

    result = await runner.run(sequence_from_code("UD"), "Test", 0, deadline)

    assert result.completed
    assert result.bonus == 100
    assert result.score == 140
    assert result.duration_ms == 500


@pytest.mark.asyncio
@pytest.mark.parametrize("elapsed_ms, bonus", [
    (1000, 100),
    (1010, 50),
    (2000, 50),
    (3000, 25),
    (3010, 0),
])
async def test_timed_bonus_boundaries(display, clock, elapsed_ms, bonus):
    """The completion time alone decides the bonus."""
    source = ScriptedInput([(elapsed_ms, press("R"))], clock=clock)
    runner = TimedRoundRunner(source, display, clock=clock)

    result = await runner.run(sequence_from_code("R"), "Test", 0, clock() + 30000)

    assert result.completed
    assert result.bonus == bonus
    assert result.score == 20 + bonus


@pytest.mark.asyncio
async def test_timed_penalties_still_apply(display, clock):
    source = ScriptedInput([press("L"), press("L"), (1500, press("U"))], clock=clock)
    runner = TimedRoundRunner(source, display, clock=clock)

    result = await runner.run(sequence_from_code("U"), "Test", 0, clock() + 30000)

    assert result.score == 20 - 10 + 50


@pytest.mark.asyncio
async def test_timed_quit_gets_no_bonus(display, clock):
    """Quit after one correct key: partial 20, no bonus even though it was fast."""
    source = ScriptedInput([press("U"), ESCAPE], clock=clock)
    runner = TimedRoundRunner(source, display, clock=clock)

    result = await runner.run(sequence_from_code("UD"), "Test", 0, clock() + 30000)

    assert not result.completed
    assert result.reason == RoundResult.QUIT
    assert result.score == 20
    assert result.bonus == 0


@pytest.mark.asyncio
async def test_timed_deadline_already_passed(display, clock):
    """Nothing is read when the deadline has gone before the round starts."""
    source = ScriptedInput(presses("UD"), clock=clock)
    runner = TimedRoundRunner(source, display, clock=clock)

    result = await runner.run(sequence_from_code("UD"), "Test", 50, clock())

    assert not result.completed
    assert result.reason == RoundResult.TIMEOUT
    assert result.score == 0
    assert source.delivered == 0


@pytest.mark.asyncio
async def test_timed_late_key_does_not_count(display, clock):
    """A key delivered after the deadline is not applied, even to finish the round."""
    deadline = clock() + 1000
    source = ScriptedInput([(200, press("U")), (900, press("D"))], clock=clock)
    runner = TimedRoundRunner(source, display, clock=clock)

    result = await runner.run(sequence_from_code("UD"), "Test", 0, deadline)

    assert not result.completed
    assert result.reason == RoundResult.TIMEOUT
    assert result.score == 20
    assert result.bonus == 0


@pytest.mark.asyncio
async def test_timed_ticks_refresh_countdown(display, clock):
    """While no key arrives the tick keeps redrawing the timed status."""
    source = ScriptedInput([Pause(0.08), QUIT], clock=clock)
    runner = TimedRoundRunner(source, display, tick_ms=10, clock=clock)

    await runner.run(sequence_from_code("UD"), "Test", 0, clock() + 5000)

    assert len(display.timed) >= 3
    title, score, index, remaining_ms, elapsed_ms = display.timed[-1]
    assert (title, score, index) == ("Test", 0, 0)
    assert remaining_ms == 5000
    assert elapsed_ms == 0


@pytest.mark.asyncio
async def test_timed_deadline_detected_without_keys(display):
    """With an idle keyboard the round still ends within a tick of the deadline."""
    runner = TimedRoundRunner(ScriptedInput(), display, tick_ms=10)
    deadline = ticks_add(ticks_ms(), 50)

    result = await asyncio.wait_for(
        runner.run(sequence_from_code("UDLR"), "Test", 0, deadline),
        timeout=2.0,
    )

    assert not result.completed
    assert result.reason == RoundResult.TIMEOUT
    assert result.score == 0


@pytest.mark.asyncio
async def test_timed_tasks_torn_down_on_every_exit(display, clock):
    """Producer and ticker are cancelled after completion, quit and timeout."""
    runner = TimedRoundRunner(ScriptedInput(presses("U"), clock=clock), display, clock=clock)
    await runner.run(sequence_from_code("U"), "Done", 0, clock() + 5000)
    assert _other_tasks() == []

    runner = TimedRoundRunner(ScriptedInput([QUIT], clock=clock), display, clock=clock)
    await runner.run(sequence_from_code("U"), "Quit", 0, clock() + 5000)
    assert _other_tasks() == []

    runner = TimedRoundRunner(ScriptedInput(clock=clock), display, clock=clock)
    await runner.run(sequence_from_code("U"), "Late", 0, clock() - 1)
    assert _other_tasks() == []


@pytest.mark.asyncio
async def test_timed_input_failure_is_fatal(display, clock):
    """An exception from the input source reaches the caller as InputTransportError."""
    source = ScriptedInput([press("U"), OSError("tty closed")], clock=clock)
    runner = TimedRoundRunner(source, display, clock=clock)

    with pytest.raises(InputTransportError):
        await runner.run(sequence_from_code("UD"), "Test", 0, clock() + 5000)
    assert _other_tasks() == []


class BurstInput:
    """Hands out every scripted key at once, as a fast typist would."""

    def __init__(self, events):
        self.events = list(events)
        self.delivered = 0

    def add(self, events):
        self.events.extend(events)

    async def next_event(self):
        if not self.events:
            await asyncio.Event().wait()
        self.delivered += 1
        return self.events.pop(0)


@pytest.mark.asyncio
async def test_timed_leftover_keys_end_with_the_round(display, clock):
    """Keys queued behind the finishing key are discarded, not replayed next round."""
    source = BurstInput(presses("UDUD"))
    runner = TimedRoundRunner(source, display, clock=clock)

    first = await runner.run(sequence_from_code("UD"), "First", 0, clock() + 5000)
    assert first.completed
    assert first.score == 40 + 100
    assert source.delivered == 4

    source.add(presses("L"))
    second = await runner.run(sequence_from_code("L"), "Second", first.score, clock() + 5000)
    assert second.completed
    assert second.score == 20 + 100
    assert _other_tasks() == []
