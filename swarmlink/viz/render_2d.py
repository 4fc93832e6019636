import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from matplotlib.collections import LineCollection
import numpy as np
from ..core.state import DroneStatus
from ..comms.routing import path_edges


STATUS_COLORS = {
    DroneStatus.HEALTHY: "#28a745",
    DroneStatus.JAMMED: "#dc3545",
    DroneStatus.HIJACKED: "#6f42c1",
}
LINK_COLOR = (139 / 255, 148 / 255, 158 / 255, 0.2)
PATH_COLOR = "#28a745"
LABEL_COLOR = "#c9d1d9"


def segments(graph, positions):
    """
    Line segments for every undirected edge of `graph`, each edge once.
    """
    segs = []
    for a, nbrs in graph.items():
        for b in nbrs:
            if a < b:
                segs.append([positions[a], positions[b]])
    return segs


class SwarmRenderer2D:
    def __init__(self, bounds, start_id=None, end_id=None):
        self.bounds = bounds
        self.start_id = start_id
        self.end_id = end_id
        self.fig, self.ax = plt.subplots(figsize=(10, 6.5))
        backend = plt.get_backend().lower()
        self._interactive = backend not in {"agg", "pdf", "svg"}
        if self._interactive:
            plt.ion()
        self.fig.patch.set_facecolor("#0d1117")
        self.ax.set_facecolor("#161b22")
        self.ax.set_xlim(bounds[0], bounds[1])
        # canvas coordinates: y grows downward
        self.ax.set_ylim(bounds[3], bounds[2])
        self.ax.set_aspect("equal")
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        self.link_lines = LineCollection([], colors=[LINK_COLOR], linewidths=1, zorder=1)
        self.path_lines = LineCollection([], colors=[PATH_COLOR], linewidths=4, capstyle="round", zorder=2)
        self.ax.add_collection(self.link_lines)
        self.ax.add_collection(self.path_lines)
        self.drone_scat = None
        self.obstacle_patches = []
        self.start_label = self.ax.text(0, 0, "START", color=LABEL_COLOR, weight="bold", fontsize=10, zorder=5)
        self.end_label = self.ax.text(0, 0, "END", color=LABEL_COLOR, weight="bold", fontsize=10, zorder=5)
        self.briefing_text = self.fig.text(0.02, 0.02, "", color=LABEL_COLOR, fontsize=9, wrap=True)

    def _update_obstacles(self, obstacles):
        for patch in self.obstacle_patches:
            patch.remove()
        self.obstacle_patches = []
        for obs in obstacles:
            patch = mpatches.Circle(obs.center[:2], obs.radius, color="gray", alpha=0.5, zorder=1.5)
            self.ax.add_patch(patch)
            self.obstacle_patches.append(patch)

    def render(self, result, briefing=None):
        drones = result.state.drones
        positions = {i: d.pos[:2] for i, d in drones.items()}
        ids = sorted(drones)
        pts = np.array([positions[i] for i in ids])
        colors = [STATUS_COLORS[drones[i].status] for i in ids]
        sizes = [np.pi * drones[i].radius ** 2 / 4 for i in ids]
        if self.drone_scat is None:
            self.drone_scat = self.ax.scatter(pts[:, 0], pts[:, 1], c=colors, s=sizes, zorder=4)
        else:
            self.drone_scat.set_offsets(pts)
            self.drone_scat.set_color(colors)

        self.link_lines.set_segments(segments(result.graphs.full, positions))
        self.path_lines.set_segments([[positions[a], positions[b]] for a, b in path_edges(result.path)])
        self._update_obstacles(result.obstacles)

        if self.start_id in positions:
            x, y = positions[self.start_id]
            self.start_label.set_position((x - 20, y - 15))
        if self.end_id in positions:
            x, y = positions[self.end_id]
            self.end_label.set_position((x - 12, y + 22))

        link = "ACTIVE" if result.path is not None else "COMPROMISED"
        self.ax.set_title(f"tick={result.t} | primary link {link}", color=LABEL_COLOR)
        if briefing is not None:
            self.briefing_text.set_text(briefing.text)
        if self._interactive:
            plt.pause(0.001)

    def connect(self, event_name, handler):
        return self.fig.canvas.mpl_connect(event_name, handler)
