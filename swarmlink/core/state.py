from dataclasses import dataclass
from enum import Enum
import numpy as np


class DroneStatus(Enum):
    HEALTHY = "healthy"
    JAMMED = "jammed"
    HIJACKED = "hijacked"


@dataclass
class DroneState:
    id: int
    pos: np.ndarray      # shape (2,)
    vel: np.ndarray      # shape (2,)
    status: DroneStatus = DroneStatus.HEALTHY
    recovery_timer: int = 0   # ticks left, only meaningful while jammed
    battery: float = 1.0      # 0..1, telemetry only
    radius: float = 10.0

    def copy(self) -> "DroneState":
        return DroneState(
            id=self.id,
            pos=self.pos.copy(),
            vel=self.vel.copy(),
            status=self.status,
            recovery_timer=self.recovery_timer,
            battery=self.battery,
            radius=self.radius,
        )


@dataclass
class SwarmState:
    drones: dict[int, DroneState]
    t: int
