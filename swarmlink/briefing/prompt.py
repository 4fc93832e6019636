from ..core.metrics import SwarmSummary


SYSTEM_PROMPT = (
    "You are an AI military strategist named 'HYDRA Command'. Your mission is to "
    "analyze drone swarm data and provide a concise, tactical briefing in 2-3 "
    "sentences. Do not use markdown or lists. Be direct and authoritative."
)


def build_status_report(summary: SwarmSummary) -> str:
    link = "Active" if summary.link_active else "Compromised"
    if summary.path_hops is not None:
        link += f" ({summary.path_hops} hops)"
    return (
        "Current Swarm Status Report:\n"
        f"- Total Drones: {summary.total}\n"
        f"- Healthy: {summary.healthy}\n"
        f"- Jammed: {summary.jammed}\n"
        f"- Hijacked: {summary.hijacked}\n"
        f"- Primary Communication Link: {link}\n"
        "\n"
        "Provide your tactical assessment and one recommendation."
    )


def build_payload(summary: SwarmSummary) -> dict:
    return {
        "contents": [{"parts": [{"text": build_status_report(summary)}]}],
        "systemInstruction": {"parts": [{"text": SYSTEM_PROMPT}]},
    }
