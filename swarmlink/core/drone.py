from .state import DroneState, DroneStatus
from .motion import MotionModel, MotionContext


class Drone:
    def __init__(self, state: DroneState, battery_drain: float = 0.0):
        self.state = state
        self.battery_drain = battery_drain

    @property
    def id(self) -> int:
        return self.state.id

    @property
    def status(self) -> DroneStatus:
        return self.state.status

    def jam(self, duration: int) -> bool:
        if self.state.status is not DroneStatus.HEALTHY:
            return False
        self.state.status = DroneStatus.JAMMED
        self.state.recovery_timer = int(duration)
        return True

    def hijack(self, toggle: bool = True) -> bool:
        if self.state.status is DroneStatus.HEALTHY:
            self.state.status = DroneStatus.HIJACKED
            return True
        if toggle and self.state.status is DroneStatus.HIJACKED:
            self.state.status = DroneStatus.HEALTHY
            return True
        return False

    def restore(self):
        self.state.status = DroneStatus.HEALTHY
        self.state.recovery_timer = 0

    def tick_recovery(self):
        if self.state.status is not DroneStatus.JAMMED:
            return
        self.state.recovery_timer -= 1
        if self.state.recovery_timer <= 0:
            self.restore()

    def step(self, motion: MotionModel, ctx: MotionContext):
        """
        Single-threaded, no locks. Recovery countdown, then motion, then telemetry.
        """
        self.tick_recovery()
        motion.step(self.state, ctx)
        if self.battery_drain:
            self.state.battery = max(0.0, self.state.battery - self.battery_drain)

    def contains(self, x: float, y: float) -> bool:
        dx = self.state.pos[0] - x
        dy = self.state.pos[1] - y
        return (dx * dx + dy * dy) ** 0.5 < self.state.radius
