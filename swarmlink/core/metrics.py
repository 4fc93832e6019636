from dataclasses import dataclass
import numpy as np
from .state import SwarmState, DroneStatus


@dataclass
class SwarmSummary:
    total: int
    healthy: int
    jammed: int
    hijacked: int
    link_active: bool
    path_hops: int | None = None


def status_counts(state: SwarmState) -> dict[DroneStatus, int]:
    counts = {status: 0 for status in DroneStatus}
    for d in state.drones.values():
        counts[d.status] += 1
    return counts


def summarize(result) -> SwarmSummary:
    """
    Aggregate view of one TickResult, as sent with a briefing request.
    """
    counts = status_counts(result.state)
    path = result.path
    return SwarmSummary(
        total=len(result.state.drones),
        healthy=counts[DroneStatus.HEALTHY],
        jammed=counts[DroneStatus.JAMMED],
        hijacked=counts[DroneStatus.HIJACKED],
        link_active=path is not None,
        path_hops=len(path) - 1 if path is not None else None,
    )


def edge_count(graph: dict[int, list[int]]) -> int:
    return sum(len(nbrs) for nbrs in graph.values()) // 2


def graph_degree_stats(graph: dict[int, list[int]]) -> dict:
    """
    Mean/max node degree; both 0.0 for an empty graph.
    """
    degrees = np.array([len(nbrs) for nbrs in graph.values()], dtype=float)
    if degrees.size == 0:
        return {"mean": 0.0, "max": 0.0}
    return {"mean": float(degrees.mean()), "max": float(degrees.max())}
