"""Renderer and interactive controls, on the non-interactive Agg backend."""

from types import SimpleNamespace

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

from swarmlink.briefing.client import BriefingTask
from swarmlink.core.state import DroneStatus
from swarmlink.viz.controls import InteractiveControls
from swarmlink.viz.render_2d import STATUS_COLORS, SwarmRenderer2D, segments

from conftest import BIG_BOUNDS, DETOUR, LINE, make_sim

pytestmark = pytest.mark.unit


def _click(x, y, button=1):
    return SimpleNamespace(xdata=x, ydata=y, button=button)


def _key(key):
    return SimpleNamespace(key=key)


class TestInteractiveControls:

    def test_left_click_jams(self):
        sim = make_sim(LINE)
        controls = InteractiveControls(sim)
        assert controls.on_click(_click(201, 1)) == 2
        assert sim.statuses()[2] is DroneStatus.JAMMED

    def test_right_click_hijacks(self):
        sim = make_sim(LINE)
        controls = InteractiveControls(sim)
        assert controls.on_click(_click(99, -2, button=3)) == 1
        assert sim.statuses()[1] is DroneStatus.HIJACKED

    def test_click_outside_axes(self):
        controls = InteractiveControls(make_sim(LINE))
        assert controls.on_click(_click(None, None)) is None

    def test_restore_key(self):
        sim = make_sim(LINE)
        sim.jam(1)
        sim.hijack(2)
        InteractiveControls(sim).on_key(_key("r"))
        assert set(sim.statuses().values()) == {DroneStatus.HEALTHY}

    def test_random_keys(self):
        sim = make_sim(LINE, protect_endpoints=False)
        controls = InteractiveControls(sim)
        jammed = controls.on_key(_key("j"))
        assert sim.statuses()[jammed] is DroneStatus.JAMMED
        controls.on_key(_key(None))

    def test_briefing_key(self):
        class Client:
            def request(self, summary):
                return f"{summary.healthy} healthy"

        sim = make_sim(LINE)
        task = BriefingTask(Client())
        controls = InteractiveControls(sim, task)
        assert controls.on_key(_key("b")) is True
        task.wait(5.0)
        assert task.text == "5 healthy"

    def test_attach_frees_home_keys(self):
        connected = []
        renderer = SimpleNamespace(connect=lambda name, handler: connected.append(name))
        with matplotlib.rc_context():
            InteractiveControls(make_sim(LINE)).attach(renderer)
            assert "h" not in plt.rcParams["keymap.home"]
            assert "r" not in plt.rcParams["keymap.home"]
            assert "home" in plt.rcParams["keymap.home"]
        assert connected == ["button_press_event", "key_press_event"]


class TestRenderer:

    def test_segments_once_per_edge(self):
        positions = {0: (0, 0), 1: (1, 0), 2: (2, 0)}
        graph = {0: [1], 1: [0, 2], 2: [1]}
        assert segments(graph, positions) == [[(0, 0), (1, 0)], [(1, 0), (2, 0)]]

    def test_status_palette_is_complete(self):
        assert set(STATUS_COLORS) == set(DroneStatus)

    def test_render_tick(self):
        sim = make_sim(DETOUR)
        sim.hijack(2)
        result = sim.step()
        renderer = SwarmRenderer2D(BIG_BOUNDS, start_id=sim.start_id, end_id=sim.end_id)
        try:
            renderer.render(result)
            renderer.render(sim.step())
            assert len(renderer.path_lines.get_segments()) == len(result.path) - 1
            assert len(renderer.link_lines.get_segments()) == 6
            assert "ACTIVE" in renderer.ax.get_title()
        finally:
            plt.close(renderer.fig)
