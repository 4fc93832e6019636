import matplotlib.pyplot as plt

from ..core.simulator import Simulator
from ..briefing.client import BriefingTask


KEY_HELP = "left click: jam | right click: hijack | j/h: random jam/hijack | r: restore all | b: briefing"


class InteractiveControls:
    """
    Maps matplotlib mouse and key events onto the simulator's attack controls.
    Handlers only touch drone status; the tick loop keeps running regardless.
    """

    def __init__(self, sim: Simulator, briefing: BriefingTask | None = None):
        self.sim = sim
        self.briefing = briefing

    def attach(self, renderer):
        # h and r are matplotlib's default "home" keys
        plt.rcParams["keymap.home"] = [k for k in plt.rcParams["keymap.home"] if k not in ("h", "r")]
        renderer.connect("button_press_event", self.on_click)
        renderer.connect("key_press_event", self.on_key)

    def on_click(self, event):
        if event.xdata is None or event.ydata is None:
            return None
        # a matplotlib double click also fires two single presses
        if event.button == 3:
            return self.sim.hijack_at(event.xdata, event.ydata)
        return self.sim.jam_at(event.xdata, event.ydata)

    def on_key(self, event):
        key = (event.key or "").lower()
        if key == "j":
            return self.sim.jam()
        if key == "h":
            return self.sim.hijack()
        if key == "r":
            self.sim.restore_all()
            return None
        if key == "b" and self.briefing is not None:
            return self.briefing.start(self.sim.summary())
        return None
