"""
Tests for the per-frame tick: eviction then draw, and loop resilience.
"""

from unittest.mock import MagicMock

from echocanvas.echoes import SimulationClock


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, snapshot):
        self.frames.append(list(snapshot))


class TestTick:

    def test_tick_draws_live_echoes(self, store, clock):
        renderer = RecordingRenderer()
        sim = SimulationClock(store, renderer, clock=clock)
        store.spawn(10, 10, life=1.0)

        sim.tick()
        assert len(renderer.frames) == 1
        (echo, progress), = renderer.frames[0]
        assert echo.x == 10
        assert progress == 0.0

    def test_tick_evicts_before_drawing(self, store, clock):
        renderer = RecordingRenderer()
        sim = SimulationClock(store, renderer, clock=clock)
        store.spawn(10, 10, life=0.5)
        store.spawn(20, 10, life=3.0)

        sim.tick(clock.now + 1000.0)
        assert [e.x for e, _ in renderer.frames[0]] == [20]
        assert len(store) == 1

    def test_empty_store_still_draws(self, store, clock):
        """Trail fade continues with no live echoes."""
        renderer = RecordingRenderer()
        sim = SimulationClock(store, renderer, clock=clock)
        sim.tick()
        assert renderer.frames == [[]]

    def test_spawn_between_ticks_visible_next_frame(self, store, clock):
        renderer = RecordingRenderer()
        sim = SimulationClock(store, renderer, clock=clock)
        sim.tick()
        store.spawn(5, 5)
        clock.advance(0.016)
        sim.tick()
        assert len(renderer.frames[1]) == 1

    def test_progress_advances_across_frames(self, store, clock):
        renderer = RecordingRenderer()
        sim = SimulationClock(store, renderer, clock=clock)
        store.spawn(0, 0, life=1.0)
        for _ in range(5):
            clock.advance(0.1)
            sim.tick()
        progress = [frame[0][1] for frame in renderer.frames]
        assert progress == sorted(progress)
        assert progress[-1] < 1.0

    def test_clear_between_ticks(self, store, clock):
        renderer = RecordingRenderer()
        sim = SimulationClock(store, renderer, clock=clock)
        store.spawn(0, 0)
        store.clear()
        sim.tick()
        assert renderer.frames == [[]]

    def test_draw_failure_does_not_stop_loop(self, store, clock):
        renderer = MagicMock()
        renderer.draw.side_effect = RuntimeError("boom")
        sim = SimulationClock(store, renderer, clock=clock)

        sim.tick()
        sim.tick()
        assert renderer.draw.call_count == 2
        assert sim.frame_count == 2

    def test_frame_drawn_reports_live_count(self, store, clock):
        sim = SimulationClock(store, RecordingRenderer(), clock=clock)
        counts = []
        sim.frame_drawn.connect(counts.append)
        store.spawn(0, 0)
        store.spawn(0, 0)
        sim.tick()
        assert counts == [2]

    def test_not_running_until_started(self, store, clock):
        sim = SimulationClock(store, RecordingRenderer(), clock=clock)
        assert not sim.running
