from dataclasses import dataclass, field

import numpy as np

from .state import SwarmState, DroneState, DroneStatus
from .drone import Drone
from .env import Obstacle, ObstacleField, random_positions
from .motion import MotionModel, MotionContext, make_motion
from .metrics import SwarmSummary, summarize
from .attacks import TARGETING_MODES, HIJACK_MODES, check_mode, parse_drone_id, pick_target
from ..comms.network import LinkGraphs, build_link_graphs
from ..comms.routing import find_shortest_path


@dataclass
class TickResult:
    t: int
    state: SwarmState
    graphs: LinkGraphs
    path: list[int] | None
    obstacles: list[Obstacle] = field(default_factory=list)


class Simulator:
    """
    Owns the swarm and everything derived from it. The tick loop is the only
    writer of motion and recovery state; attack controls are the only writers
    of status.
    """

    def __init__(
        self,
        drones: list[Drone],
        motion: MotionModel,
        bounds,
        comm_range: float = 150.0,
        obstacles: ObstacleField | None = None,
        jam_duration: int = 300,
        targeting: str = "random",
        hijack_mode: str = "toggle",
        protect_endpoints: bool = True,
        rng=None,
    ):
        if not drones:
            raise ValueError("swarm needs at least one drone")
        self.drones = {d.id: d for d in sorted(drones, key=lambda d: d.id)}
        if list(self.drones) != list(range(len(self.drones))):
            raise ValueError("drone ids must be dense 0..n-1")
        self.motion = motion
        self.bounds = bounds
        self.comm_range = comm_range
        self.obstacles = obstacles
        self.jam_duration = int(jam_duration)
        self.targeting = check_mode(targeting, TARGETING_MODES, "targeting mode")
        self.hijack_mode = check_mode(hijack_mode, HIJACK_MODES, "hijack mode")
        self.protect_endpoints = protect_endpoints
        self.rng = rng or np.random.default_rng()
        self.start_id = 0
        self.end_id = len(self.drones) - 1
        self.t = 0
        self.last_result: TickResult | None = None

    @classmethod
    def from_config(cls, cfg: dict, rng=None) -> "Simulator":
        rng = rng or np.random.default_rng(cfg.get("seed"))
        bounds = cfg["arena"]["bounds"]
        swarm_cfg = cfg["swarm"]
        n = swarm_cfg["count"]
        radius = swarm_cfg.get("radius", 10.0)
        speed = swarm_cfg.get("speed", 1.5)
        positions = random_positions(bounds, n, margin=radius, rng=rng)
        drones = []
        for i in range(n):
            st = DroneState(
                id=i,
                pos=positions[i].copy(),
                vel=(rng.random(2) - 0.5) * speed,
                radius=radius,
            )
            drones.append(Drone(st, battery_drain=swarm_cfg.get("battery_drain", 0.0)))
        obs_cfg = cfg.get("obstacles", {})
        obstacle_field = None
        if obs_cfg.get("count", 0) > 0:
            obstacle_field = ObstacleField(
                bounds,
                count=obs_cfg["count"],
                speed=obs_cfg.get("speed", 2.0),
                radius_range=obs_cfg.get("radius_range", (15.0, 40.0)),
                rng=rng,
            )
        attack_cfg = cfg.get("attacks", {})
        jam_duration = round(attack_cfg.get("jam_seconds", 5) * cfg.get("tick_rate", 60))
        return cls(
            drones,
            make_motion(cfg.get("motion", {})),
            bounds,
            comm_range=swarm_cfg.get("comm_range", 150.0),
            obstacles=obstacle_field,
            jam_duration=jam_duration,
            targeting=attack_cfg.get("targeting", "random"),
            hijack_mode=attack_cfg.get("hijack_mode", "toggle"),
            protect_endpoints=attack_cfg.get("protect_endpoints", True),
            rng=rng,
        )

    # ---- tick loop ----

    def step(self) -> TickResult:
        obstacles = self.obstacles.step() if self.obstacles is not None else []
        # neighbours are seen where they stood at the start of the tick
        others = [d.state.copy() for d in self.drones.values()]
        ctx = MotionContext(bounds=self.bounds, t=self.t, others=others, obstacles=obstacles)
        for drone in self.drones.values():
            drone.step(self.motion, ctx)
        self.t += 1
        self.last_result = self.snapshot()
        return self.last_result

    def snapshot(self) -> TickResult:
        """
        Graphs and route for the swarm as it is right now, without advancing.
        """
        states = [d.state for d in self.drones.values()]
        graphs = build_link_graphs(states, self.comm_range)
        path = find_shortest_path(graphs.trusted, self.start_id, self.end_id)
        obstacles = self.obstacles.obstacles if self.obstacles is not None else []
        return TickResult(
            t=self.t,
            state=SwarmState(drones={s.id: s.copy() for s in states}, t=self.t),
            graphs=graphs,
            path=path,
            obstacles=[Obstacle(o.center.copy(), o.radius) for o in obstacles],
        )

    def summary(self) -> SwarmSummary:
        return summarize(self.last_result or self.snapshot())

    # ---- attack controls ----

    def jam(self, drone_id=None) -> int | None:
        target = self._resolve_target(drone_id)
        if target is None:
            return None
        return target if self.drones[target].jam(self.jam_duration) else None

    def hijack(self, drone_id=None) -> int | None:
        target = self._resolve_target(drone_id)
        if target is None:
            return None
        toggle = self.hijack_mode == "toggle"
        return target if self.drones[target].hijack(toggle=toggle) else None

    def restore_all(self):
        for drone in self.drones.values():
            drone.restore()

    def drone_at(self, x: float, y: float) -> int | None:
        # highest id wins: it is drawn last, so it is the one on top
        hits = [i for i, d in self.drones.items() if d.contains(x, y)]
        return hits[-1] if hits else None

    def jam_at(self, x: float, y: float) -> int | None:
        drone_id = self.drone_at(x, y)
        return self.jam(drone_id) if drone_id is not None else None

    def hijack_at(self, x: float, y: float) -> int | None:
        drone_id = self.drone_at(x, y)
        return self.hijack(drone_id) if drone_id is not None else None

    def _resolve_target(self, drone_id) -> int | None:
        if drone_id is None:
            path = self.last_result.path if self.last_result is not None else None
            target = pick_target(self.targeting, len(self.drones), path, self.rng)
        else:
            target = parse_drone_id(drone_id, len(self.drones))
        if target is None:
            return None
        if self.protect_endpoints and target in (self.start_id, self.end_id):
            return None
        return target

    def statuses(self) -> dict[int, DroneStatus]:
        return {i: d.status for i, d in self.drones.items()}
