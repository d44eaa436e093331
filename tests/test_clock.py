import pytest

from neonsnake.core.clock import SimulationClock

class Recorder:
    def __init__(self, stop_after=None):
        self.deltas = []
        self.stop_after = stop_after

    def __call__(self, delta):
        self.deltas.append(delta)
        return self.stop_after is None or len(self.deltas) < self.stop_after

def test_first_frame_only_seeds():
    clk, rec = SimulationClock(), Recorder()
    assert clk.advance(5000, 200, rec) == 0
    assert clk.last_frame_time == 5000
    assert clk.accumulator == 0
    assert rec.deltas == []

def test_whole_intervals_drained():
    clk, rec = SimulationClock(), Recorder()
    clk.advance(0, 200, rec)
    assert clk.advance(450, 200, rec) == 2
    assert clk.accumulator == pytest.approx(50)
    assert rec.deltas == [450, 450]   # each tick sees the frame delta

def test_tick_rate_independent_of_frame_rate():
    fast, slow = SimulationClock(), SimulationClock()
    rf, rs = Recorder(), Recorder()
    for t in range(0, 1001, 10):
        fast.advance(t, 200, rf)
    for t in range(0, 1001, 250):
        slow.advance(t, 200, rs)
    assert len(rf.deltas) == len(rs.deltas) == 5
    assert fast.elapsed_ms == slow.elapsed_ms == 1000

def test_frozen_clock_holds_accumulator_and_avoids_burst():
    clk, rec = SimulationClock(), Recorder()
    clk.advance(0, 200, rec)
    clk.advance(100, 200, rec)
    assert clk.advance(5000, 200, rec, running=False) == 0
    assert clk.accumulator == pytest.approx(100)
    assert clk.elapsed_ms == pytest.approx(100)
    # resume: only the new 100 ms counts
    assert clk.advance(5100, 200, rec) == 1
    assert clk.accumulator == pytest.approx(0)

def test_tick_can_stop_the_drain():
    clk, rec = SimulationClock(), Recorder(stop_after=1)
    clk.advance(0, 100, rec)
    assert clk.advance(1000, 100, rec) == 1
    assert len(rec.deltas) == 1

def test_backwards_timestamp_rejected():
    clk = SimulationClock()
    clk.advance(100, 200, Recorder())
    with pytest.raises(ValueError):
        clk.advance(50, 200, Recorder())

def test_bad_interval_rejected():
    with pytest.raises(ValueError):
        SimulationClock().advance(0, 0, Recorder())

def test_reset_unseeds():
    clk = SimulationClock()
    clk.advance(0, 200, Recorder())
    clk.advance(300, 200, Recorder())
    clk.reset()
    assert clk.last_frame_time is None
    assert clk.accumulator == 0 and clk.elapsed_ms == 0 and clk.ticks == 0
