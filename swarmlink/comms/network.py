from dataclasses import dataclass

from ..core.state import DroneState, DroneStatus


@dataclass
class LinkGraphs:
    full: dict[int, list[int]]      # radio reachability, jammed drones excluded
    trusted: dict[int, list[int]]   # healthy-to-healthy links only


def build_link_graphs(drones: list[DroneState], comm_range: float) -> LinkGraphs:
    """
    drones: list[DroneState] (any order)
    returns: fresh LinkGraphs; neighbour lists are in ascending id order.

    Every unordered pair is tested once. Positions are read as they are now,
    nothing is cached between calls.
    """
    ordered = sorted(drones, key=lambda s: s.id)
    full = {s.id: [] for s in ordered if s.status is not DroneStatus.JAMMED}
    trusted = {s.id: [] for s in ordered if s.status is DroneStatus.HEALTHY}
    for i, a in enumerate(ordered):
        if a.status is DroneStatus.JAMMED:
            continue
        for b in ordered[i + 1:]:
            if b.status is DroneStatus.JAMMED:
                continue
            if _dist(a, b) >= comm_range:
                continue
            full[a.id].append(b.id)
            full[b.id].append(a.id)
            if a.status is DroneStatus.HEALTHY and b.status is DroneStatus.HEALTHY:
                trusted[a.id].append(b.id)
                trusted[b.id].append(a.id)
    for neighbours in full.values():
        neighbours.sort()
    for neighbours in trusted.values():
        neighbours.sort()
    return LinkGraphs(full=full, trusted=trusted)


def edge_set(graph: dict[int, list[int]]) -> set[frozenset[int]]:
    return {frozenset((a, b)) for a, nbrs in graph.items() for b in nbrs}


def _dist(a: DroneState, b: DroneState) -> float:
    return float(((a.pos - b.pos) ** 2).sum()) ** 0.5
