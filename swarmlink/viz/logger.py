import json
from pathlib import Path
from ..core.metrics import status_counts, edge_count, graph_degree_stats


class SwarmLogger:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.records = []

    def log_tick(self, result, briefing=None):
        counts = status_counts(result.state)
        snapshot = {
            "t": result.t,
            "drones": {
                str(did): {
                    "pos": st.pos.tolist(),
                    "status": st.status.value,
                    "recovery_timer": st.recovery_timer,
                    "battery": st.battery,
                }
                for did, st in result.state.drones.items()
            },
            "counts": {status.value: n for status, n in counts.items()},
            "links": {
                "full": edge_count(result.graphs.full),
                "trusted": edge_count(result.graphs.trusted),
                "trusted_degree": graph_degree_stats(result.graphs.trusted),
            },
            "path": result.path,
        }
        if result.obstacles:
            snapshot["obstacles"] = [{"center": o.center.tolist(), "radius": o.radius} for o in result.obstacles]
        if briefing is not None:
            snapshot["briefing"] = briefing
        self.records.append(snapshot)

    def flush(self):
        with self.path.open("w") as f:
            json.dump(self.records, f, indent=2)
