import numpy as np


class Obstacle:
    def __init__(self, center, radius):
        self.center = np.array(center, dtype=float)
        self.radius = float(radius)


def random_positions(bounds, n: int, margin: float = 0.0, rng=None) -> np.ndarray:
    """
    Uniform positions inside bounds, kept `margin` away from every edge.
    """
    rng = rng or np.random.default_rng()
    xmin, xmax, ymin, ymax = bounds
    xs = rng.uniform(xmin + margin, xmax - margin, size=n)
    ys = rng.uniform(ymin + margin, ymax - margin, size=n)
    return np.stack([xs, ys], axis=1)


class ObstacleField:
    """
    Fixed-size set of obstacles scrolling right-to-left across the arena.
    Obstacles that leave the left edge are dropped and replaced at the right edge.
    """

    def __init__(self, bounds, count: int = 0, speed: float = 2.0, radius_range=(15.0, 40.0), rng=None):
        self.bounds = bounds  # [xmin, xmax, ymin, ymax]
        self.count = int(count)
        self.speed = float(speed)
        self.radius_range = tuple(radius_range)
        self.rng = rng or np.random.default_rng()
        self.obstacles: list[Obstacle] = []
        xmin, xmax = bounds[0], bounds[1]
        # spread the initial set over the arena so the first ticks are not empty
        for k in range(self.count):
            x = xmin + (k + 1) * (xmax - xmin) / (self.count + 1)
            self.obstacles.append(self._spawn(x))

    def _spawn(self, x: float) -> Obstacle:
        r = self.rng.uniform(*self.radius_range)
        y = self.rng.uniform(self.bounds[2] + r, self.bounds[3] - r)
        return Obstacle(center=[x, y], radius=r)

    def step(self):
        for obs in self.obstacles:
            obs.center[0] -= self.speed
        xmin, xmax = self.bounds[0], self.bounds[1]
        kept = [o for o in self.obstacles if o.center[0] + o.radius >= xmin]
        while len(kept) < self.count:
            r_max = self.radius_range[1]
            kept.append(self._spawn(xmax + r_max))
        self.obstacles = kept
        return self.obstacles
