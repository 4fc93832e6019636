import numpy as np
import pytest

from swarmlink.core.state import DroneState, DroneStatus
from swarmlink.core.drone import Drone
from swarmlink.core.motion import MotionModel
from swarmlink.core.simulator import Simulator

BIG_BOUNDS = [-1000, 1000, -1000, 1000]

# five drones 100 apart on a line: with range 150 only neighbours link up
LINE = [(0, 0), (100, 0), (200, 0), (300, 0), (400, 0)]

# 0-1-2-4 is the shortest trusted route; 0-1-3-4 is the detour around 2
DETOUR = [(0, 0), (100, 0), (200, 0), (180, 80), (300, 0)]


class StillMotion(MotionModel):
    def step(self, state, ctx):
        pass


def make_states(points, statuses=None):
    statuses = statuses or {}
    return [
        DroneState(
            id=i,
            pos=np.array(p, dtype=float),
            vel=np.zeros(2),
            status=statuses.get(i, DroneStatus.HEALTHY),
        )
        for i, p in enumerate(points)
    ]


def make_sim(points, **kwargs) -> Simulator:
    drones = [Drone(st) for st in make_states(points)]
    kwargs.setdefault("comm_range", 150.0)
    kwargs.setdefault("rng", np.random.default_rng(0))
    return Simulator(drones, StillMotion(), BIG_BOUNDS, **kwargs)


@pytest.fixture
def line_sim():
    return make_sim(LINE, jam_duration=10)
