"""Tests for starlaunch.core.countdown – the expiry countdown."""

from __future__ import annotations

from typing import List

import pytest

from starlaunch.core.countdown import COUNTDOWN_SECONDS, ExpiryTimer


class Recorder:
    def __init__(self) -> None:
        self.fired = 0
        self.updates: List[int] = []

    def expire(self) -> None:
        self.fired += 1

    def update(self, seconds: int) -> None:
        self.updates.append(seconds)


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture()
def timer(recorder: Recorder) -> ExpiryTimer:
    return ExpiryTimer(on_expire=recorder.expire, on_update=recorder.update)


# ---------------------------------------------------------------------------
# Initial state
# ---------------------------------------------------------------------------

class TestInitialState:
    def test_starts_active_at_sixty(self, timer: ExpiryTimer):
        assert COUNTDOWN_SECONDS == 60
        assert timer.remaining == 60
        assert not timer.expired
        assert timer.display_seconds == 60

    def test_rejects_non_positive_duration(self, recorder: Recorder):
        with pytest.raises(ValueError):
            ExpiryTimer(on_expire=recorder.expire, duration=0)

    def test_update_callback_optional(self, recorder: Recorder):
        t = ExpiryTimer(on_expire=recorder.expire)
        t.tick(60)
        assert recorder.fired == 1


# ---------------------------------------------------------------------------
# tick
# ---------------------------------------------------------------------------

class TestTick:
    def test_decrements(self, timer: ExpiryTimer):
        timer.tick(1.5)
        assert timer.remaining == pytest.approx(58.5)

    def test_display_rounds_up(self, timer: ExpiryTimer, recorder: Recorder):
        timer.tick(0.25)
        timer.tick(0.5)
        assert recorder.updates == [60, 60]
        timer.tick(0.25)
        assert recorder.updates[-1] == 59

    def test_fires_once_after_sixty_seconds(self, timer: ExpiryTimer, recorder: Recorder):
        for _ in range(60):
            timer.tick(1.0)
        assert timer.expired
        assert recorder.fired == 1
        assert recorder.updates[-1] == 0

    @pytest.mark.parametrize("fps", [30, 60, 144])
    def test_fires_on_last_frame_at_frame_rate(self, timer: ExpiryTimer, recorder: Recorder, fps: int):
        for _ in range(60 * fps - 1):
            timer.tick(1 / fps)
        assert not timer.expired
        assert recorder.fired == 0
        timer.tick(1 / fps)
        assert timer.expired
        assert timer.remaining == 0
        assert recorder.fired == 1
        assert recorder.updates[-1] == 0

    def test_large_delta_clamps_to_zero(self, timer: ExpiryTimer, recorder: Recorder):
        timer.tick(500)
        assert timer.remaining == 0
        assert recorder.updates == [0]
        assert recorder.fired == 1

    def test_ticks_after_expiry_are_ignored(self, timer: ExpiryTimer, recorder: Recorder):
        timer.tick(60)
        updates = len(recorder.updates)
        timer.tick(1)
        timer.tick(100)
        assert recorder.fired == 1
        assert len(recorder.updates) == updates

    def test_negative_delta_is_zero(self, timer: ExpiryTimer):
        timer.tick(-5)
        assert timer.remaining == 60

    def test_never_negative(self, timer: ExpiryTimer):
        timer.tick(59.9)
        timer.tick(0.2)
        assert timer.remaining == 0
        assert timer.display_seconds == 0


# ---------------------------------------------------------------------------
# reset / halt
# ---------------------------------------------------------------------------

class TestResetAndHalt:
    def test_reset_midway(self, timer: ExpiryTimer):
        timer.tick(30)
        timer.reset()
        assert timer.remaining == 60
        assert not timer.expired

    def test_reset_after_expiry_rearms(self, timer: ExpiryTimer, recorder: Recorder):
        timer.tick(60)
        timer.reset()
        assert timer.remaining == 60
        assert not timer.expired
        timer.tick(60)
        assert recorder.fired == 2

    def test_halt_prevents_firing(self, timer: ExpiryTimer, recorder: Recorder):
        timer.tick(59)
        timer.halt()
        timer.tick(10)
        assert timer.expired
        assert recorder.fired == 0

    def test_halt_then_reset_resumes(self, timer: ExpiryTimer, recorder: Recorder):
        timer.halt()
        timer.reset()
        timer.tick(1)
        assert timer.remaining == 59
        assert recorder.fired == 0

    def test_reset_is_idempotent(self, timer: ExpiryTimer):
        timer.reset()
        timer.reset()
        assert timer.remaining == 60
        assert not timer.expired


class TestRearmingAction:
    def test_action_that_resets_still_ends_period(self):
        fired: List[int] = []
        timer = ExpiryTimer(on_expire=lambda: (fired.append(1), timer.reset()))
        timer.tick(60)
        assert fired == [1]
        assert timer.expired
        timer.tick(60)
        assert fired == [1]
