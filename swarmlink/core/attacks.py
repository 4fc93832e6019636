"""
Target resolution for the jam / hijack controls.

A request names a drone id, or None to let the configured targeting mode pick
one. Anything that does not resolve to an existing drone resolves to None and
the control does nothing.
"""

TARGETING_MODES = ("random", "path")
HIJACK_MODES = ("toggle", "latch")


def parse_drone_id(raw, n_drones: int) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        drone_id = int(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    if isinstance(raw, float) and raw != drone_id:
        return None
    if not 0 <= drone_id < n_drones:
        return None
    return drone_id


def pick_target(mode: str, n_drones: int, path: list[int] | None, rng) -> int | None:
    """
    random: uniform over every drone.
    path:   uniform over the interior nodes of the current route.
    """
    if mode == "random":
        if n_drones == 0:
            return None
        return int(rng.integers(n_drones))
    if mode == "path":
        interior = (path or [])[1:-1]
        if not interior:
            return None
        return int(interior[rng.integers(len(interior))])
    raise ValueError(f"unknown targeting mode: {mode!r}")


def check_mode(value: str, allowed, what: str) -> str:
    if value not in allowed:
        raise ValueError(f"unknown {what}: {value!r} (expected one of {', '.join(allowed)})")
    return value
