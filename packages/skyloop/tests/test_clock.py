"""Tests for Clock."""

import math
import random

import pytest

from skyloop.clock import Clock


def test_dt_from_tps():
    assert math.isclose(Clock(20).dt, 0.05)


def test_invalid_tps():
    with pytest.raises(ValueError):
        Clock(0)
    with pytest.raises(ValueError):
        Clock(-5)


def test_advance_accumulates_elapsed():
    clock = Clock(10)
    clock.advance()
    clock.advance(0.3)
    assert clock.tick_number == 2
    assert math.isclose(clock.elapsed, 0.4)


def test_context_reports_last_dt():
    clock = Clock(10)
    clock.advance(0.02)
    ctx = clock.context(lambda: None, random.Random(1))
    assert ctx.tick_number == 1
    assert math.isclose(ctx.dt, 0.02)
