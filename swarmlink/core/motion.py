from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np

from .state import DroneState


@dataclass
class MotionContext:
    bounds: list            # [xmin, xmax, ymin, ymax]
    t: int = 0
    others: list = field(default_factory=list)      # list[DroneState]
    obstacles: list = field(default_factory=list)   # list[Obstacle]


class MotionModel(ABC):
    @abstractmethod
    def step(self, state: DroneState, ctx: MotionContext):
        """Move `state` in place by one tick."""
        ...


class BounceMotion(MotionModel):
    """Constant per-tick velocity, reflected at the arena walls."""

    def step(self, state: DroneState, ctx: MotionContext):
        state.pos += state.vel
        xmin, xmax, ymin, ymax = ctx.bounds
        r = state.radius
        x, y = state.pos[:2]
        vx, vy = state.vel[:2]
        if x < xmin + r:
            state.pos[0] = xmin + r
            state.vel[0] = abs(vx)
        elif x > xmax - r:
            state.pos[0] = xmax - r
            state.vel[0] = -abs(vx)
        if y < ymin + r:
            state.pos[1] = ymin + r
            state.vel[1] = abs(vy)
        elif y > ymax - r:
            state.pos[1] = ymax - r
            state.vel[1] = -abs(vy)


class AvoidanceMotion(MotionModel):
    """
    Sinusoidal horizontal drift around a home column, plus reactive vertical
    steering away from nearby obstacles and nearby drones.
    """

    def __init__(self, amplitude=40.0, freq=0.02, gain=0.05, max_vy=3.0, damping=0.9,
                 avoid_radius=60.0, separation=30.0):
        self.amplitude = amplitude
        self.freq = freq
        self.gain = gain
        self.max_vy = max_vy
        self.damping = damping
        self.avoid_radius = avoid_radius
        self.separation = separation
        self._home: dict[int, tuple[float, float]] = {}

    def _home_of(self, state: DroneState):
        if state.id not in self._home:
            # phase spread by id keeps neighbours from drifting in lockstep
            self._home[state.id] = (float(state.pos[0]), 0.7 * state.id)
        return self._home[state.id]

    def steering(self, state: DroneState, ctx: MotionContext) -> float:
        y = state.pos[1]
        force = 0.0
        for obs in ctx.obstacles:
            gap = np.linalg.norm(obs.center - state.pos) - obs.radius
            if gap < self.avoid_radius:
                away = 1.0 if y >= obs.center[1] else -1.0
                force += away * (self.avoid_radius - gap)
        for other in ctx.others:
            if other.id == state.id:
                continue
            d = np.linalg.norm(other.pos - state.pos)
            if d < self.separation:
                away = 1.0 if y >= other.pos[1] else -1.0
                force += away * (self.separation - d)
        return self.gain * force

    def step(self, state: DroneState, ctx: MotionContext):
        home_x, phase = self._home_of(state)
        xmin, xmax, ymin, ymax = ctx.bounds
        r = state.radius
        x = home_x + self.amplitude * np.sin(self.freq * ctx.t + phase)
        vy = state.vel[1] * self.damping + self.steering(state, ctx)
        vy = float(np.clip(vy, -self.max_vy, self.max_vy))
        y = float(np.clip(state.pos[1] + vy, ymin + r, ymax - r))
        state.vel[0] = x - state.pos[0]
        state.vel[1] = vy
        state.pos[0] = float(np.clip(x, xmin + r, xmax - r))
        state.pos[1] = y


def make_motion(motion_cfg: dict) -> MotionModel:
    kind = motion_cfg.get("type", "bounce")
    if kind == "bounce":
        return BounceMotion()
    if kind == "avoidance":
        return AvoidanceMotion(
            amplitude=motion_cfg.get("amplitude", 40.0),
            freq=motion_cfg.get("freq", 0.02),
            gain=motion_cfg.get("gain", 0.05),
            max_vy=motion_cfg.get("max_vy", 3.0),
            damping=motion_cfg.get("damping", 0.9),
            avoid_radius=motion_cfg.get("avoid_radius", 60.0),
            separation=motion_cfg.get("separation", 30.0),
        )
    raise ValueError(f"unknown motion type: {kind!r}")
