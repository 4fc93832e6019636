import argparse
import logging
import pathlib
import sys
import time

import numpy as np

# Ensure repository root is on PYTHONPATH when running without installation.
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from swarmlink.config import load_config
from swarmlink.core.simulator import Simulator
from swarmlink.core.metrics import summarize
from swarmlink.briefing.client import BriefingClient, BriefingTask
from swarmlink.viz.logger import SwarmLogger


def main():
    parser = argparse.ArgumentParser(description="Run the drone swarm link simulation.")
    parser.add_argument("--config", type=pathlib.Path, help="Path to YAML config.")
    parser.add_argument("--no-render", action="store_true", help="Disable live rendering (headless).")
    parser.add_argument("--log", type=pathlib.Path, help="Optional path to write JSON log.")
    parser.add_argument("--steps", type=int, help="Override total simulation ticks.")
    parser.add_argument("--seed", type=int, help="Override random seed.")
    parser.add_argument("--render-every", type=int, dest="render_every", help="Render every N ticks.")
    parser.add_argument("--briefing", action="store_true", help="Request a tactical briefing after the run.")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    cfg = load_config(args.config)
    if args.steps is not None:
        cfg["steps"] = args.steps
    if args.seed is not None:
        cfg["seed"] = args.seed
    if args.render_every is not None:
        cfg["render_every"] = args.render_every

    sim = Simulator.from_config(cfg, rng=np.random.default_rng(cfg.get("seed")))
    briefing = BriefingTask(BriefingClient.from_config(cfg["briefing"]))
    renderer = None
    if not args.no_render:
        from swarmlink.viz.render_2d import SwarmRenderer2D
        from swarmlink.viz.controls import InteractiveControls, KEY_HELP

        renderer = SwarmRenderer2D(cfg["arena"]["bounds"], start_id=sim.start_id, end_id=sim.end_id)
        InteractiveControls(sim, briefing).attach(renderer)
        print(KEY_HELP)
    logger = SwarmLogger(args.log) if args.log else None

    frame = 1.0 / cfg.get("tick_rate", 60)
    link_up = None
    for step in range(cfg["steps"]):
        t0 = time.perf_counter()
        result = sim.step()
        if result.path is not None and link_up is not True:
            print(f"[tick {result.t}] primary link ACTIVE ({len(result.path) - 1} hops)")
        elif result.path is None and link_up is not False:
            print(f"[tick {result.t}] primary link COMPROMISED")
        link_up = result.path is not None
        if renderer and step % cfg["render_every"] == 0:
            renderer.render(result, briefing=briefing if briefing.state != briefing.IDLE else None)
            spare = frame - (time.perf_counter() - t0)
            if spare > 0:
                time.sleep(spare)
        if logger:
            logger.log_tick(result)

    if args.briefing and sim.last_result is not None:
        briefing.start(summarize(sim.last_result))
        briefing.wait(cfg["briefing"].get("timeout", 30.0) + 5.0)
        print(briefing.text)

    if logger:
        logger.flush()


if __name__ == "__main__":
    main()
