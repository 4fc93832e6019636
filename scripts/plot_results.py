import json
import sys
import matplotlib.pyplot as plt


def load_log(path):
    with open(path, "r") as f:
        return json.load(f)


def main(log_path="logs/sim.json"):
    data = load_log(log_path)
    ts = [entry["t"] for entry in data]
    fig, (ax_counts, ax_links) = plt.subplots(2, 1, sharex=True, figsize=(8, 6))
    for status, color in (("healthy", "#28a745"), ("jammed", "#dc3545"), ("hijacked", "#6f42c1")):
        ax_counts.plot(ts, [entry["counts"][status] for entry in data], color=color, label=status)
    ax_counts.set_ylabel("drones")
    ax_counts.legend()

    hops = [len(entry["path"]) - 1 if entry["path"] else float("nan") for entry in data]
    ax_links.plot(ts, [entry["links"]["full"] for entry in data], color="gray", label="full links")
    ax_links.plot(ts, [entry["links"]["trusted"] for entry in data], color="green", label="trusted links")
    ax_links.plot(ts, hops, color="black", label="route hops")
    ax_links.set_xlabel("tick")
    ax_links.legend()
    fig.suptitle("Swarm status over time")
    plt.show()


if __name__ == "__main__":
    log = sys.argv[1] if len(sys.argv) > 1 else "logs/sim.json"
    main(log)
