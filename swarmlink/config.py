import copy
import pathlib

import yaml


DEFAULT_CONFIG = {
    "steps": 3600,
    "tick_rate": 60,
    "render_every": 1,
    "seed": None,
    "arena": {"bounds": [0, 1000, 0, 600]},
    "swarm": {
        "count": 25,
        "comm_range": 150.0,
        "radius": 10.0,
        "speed": 1.5,
        "battery_drain": 0.0,
    },
    "attacks": {
        "jam_seconds": 5,
        "targeting": "random",   # random | path
        "hijack_mode": "toggle",  # toggle | latch
        "protect_endpoints": True,
    },
    "motion": {"type": "bounce"},  # bounce | avoidance
    "obstacles": {"count": 0, "speed": 2.0, "radius_range": [15.0, 40.0]},
    "briefing": {
        "api_url": "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent",
        "model": "gemini-2.5-flash-preview-05-20",
        "api_key_env": "GEMINI_API_KEY",
        "timeout": 30.0,
    },
}


def deep_update(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: pathlib.Path | None) -> dict:
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    path = pathlib.Path(path)
    cfg = yaml.safe_load(path.read_text())
    if cfg is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    if "inherits" in cfg:
        base_path = path.parent / cfg["inherits"]
        base_cfg = load_config(base_path)
        cfg = {k: v for k, v in cfg.items() if k != "inherits"}
        return deep_update(base_cfg, cfg)
    return deep_update(copy.deepcopy(DEFAULT_CONFIG), cfg)
