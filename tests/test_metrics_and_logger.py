"""Status metrics and the JSON tick log."""

import json

import pytest

from swarmlink.comms.network import build_link_graphs
from swarmlink.core.metrics import edge_count, graph_degree_stats, status_counts, summarize
from swarmlink.core.state import DroneStatus, SwarmState
from swarmlink.viz.logger import SwarmLogger

from conftest import LINE, make_sim, make_states

pytestmark = pytest.mark.unit


class TestMetrics:

    def test_status_counts_lists_every_status(self):
        states = make_states(LINE, {1: DroneStatus.JAMMED})
        counts = status_counts(SwarmState(drones={s.id: s for s in states}, t=0))
        assert counts == {DroneStatus.HEALTHY: 4, DroneStatus.JAMMED: 1, DroneStatus.HIJACKED: 0}

    def test_edge_count_and_degree(self):
        graph = build_link_graphs(make_states(LINE), 150.0).full
        assert edge_count(graph) == 4
        assert graph_degree_stats(graph) == {"mean": pytest.approx(1.6), "max": 2.0}

    def test_degree_of_empty_graph(self):
        assert graph_degree_stats({}) == {"mean": 0.0, "max": 0.0}

    def test_summarize(self):
        sim = make_sim(LINE)
        sim.hijack(2)
        summary = summarize(sim.step())
        assert summary.total == 5
        assert summary.hijacked == 1
        assert summary.link_active is False


class TestSwarmLogger:

    def test_round_trip(self, tmp_path):
        sim = make_sim(LINE, jam_duration=10)
        logger = SwarmLogger(tmp_path / "logs" / "run.json")
        logger.log_tick(sim.step())
        sim.jam(2)
        logger.log_tick(sim.step(), briefing="Hold.")
        logger.flush()

        records = json.loads((tmp_path / "logs" / "run.json").read_text())
        assert [r["t"] for r in records] == [1, 2]
        assert records[0]["path"] == [0, 1, 2, 3, 4]
        assert records[0]["links"]["full"] == 4
        assert records[0]["links"]["trusted"] == 4
        assert records[0]["links"]["trusted_degree"] == {"mean": pytest.approx(1.6), "max": 2.0}
        assert records[1]["links"]["trusted_degree"] == {"mean": 1.0, "max": 1.0}
        assert records[1]["path"] is None
        assert records[1]["drones"]["2"]["status"] == "jammed"
        assert records[1]["drones"]["2"]["recovery_timer"] == 9
        assert records[1]["counts"] == {"healthy": 4, "jammed": 1, "hijacked": 0}
        assert records[1]["briefing"] == "Hold."
        assert "obstacles" not in records[0]
