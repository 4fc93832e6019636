"""Tactical briefing over a text-generation API.

BriefingClient makes one blocking generateContent call. BriefingTask runs
that call on its own thread so the tick loop never waits for it, and keeps a
single idle/pending/settled state the UI can poll to enable or disable its
trigger.
"""
from __future__ import annotations

import logging
import os
import threading

import requests

from ..core.metrics import SwarmSummary
from .prompt import build_payload

log = logging.getLogger(__name__)

EMPTY_MESSAGE = "Could not retrieve briefing from HYDRA Command. The response was empty."
FAILURE_MESSAGE = "Error: Communication with HYDRA Command failed. Check console for details."
PENDING_MESSAGE = "Analyzing swarm... Contacting HYDRA Command..."


class BriefingError(Exception):
    """The briefing request failed or came back without text."""


class EmptyBriefingError(BriefingError):
    pass


class BriefingClient:
    def __init__(self, api_url: str, api_key: str = "", model: str = "", timeout: float = 30.0):
        self.api_url = api_url.format(model=model)
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    @classmethod
    def from_config(cls, briefing_cfg: dict) -> "BriefingClient":
        return cls(
            api_url=briefing_cfg["api_url"],
            api_key=os.environ.get(briefing_cfg.get("api_key_env", "GEMINI_API_KEY"), ""),
            model=briefing_cfg.get("model", ""),
            timeout=briefing_cfg.get("timeout", 30.0),
        )

    def request(self, summary: SwarmSummary) -> str:
        """Send the status report and return the advisory text.

        Raises:
            EmptyBriefingError: the service answered but without any text.
            BriefingError: transport error, non-2xx status or unparseable body.
        """
        try:
            resp = requests.post(
                self.api_url,
                params={"key": self.api_key},
                json=build_payload(summary),
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise BriefingError(f"briefing request failed: {e}") from e

        text = _extract_text(data)
        if not text:
            raise EmptyBriefingError("briefing response contained no text")
        return text


def _extract_text(data) -> str:
    try:
        return (data["candidates"][0]["content"]["parts"][0].get("text") or "").strip()
    except (KeyError, IndexError, TypeError, AttributeError):
        return ""


class BriefingTask:
    IDLE = "idle"
    PENDING = "pending"
    SETTLED = "settled"

    def __init__(self, client: BriefingClient) -> None:
        self.client = client
        self.state = self.IDLE
        self.text: str = ""
        self.ok: bool = False
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        return self.state == self.PENDING

    def start(self, summary: SwarmSummary) -> bool:
        """Kick off a briefing. Returns False (and does nothing) while one is pending."""
        with self._lock:
            if self.state == self.PENDING:
                return False
            self.state = self.PENDING
            self.text = PENDING_MESSAGE
            self.ok = False
        self._thread = threading.Thread(target=self._run, args=(summary,), daemon=True)
        self._thread.start()
        return True

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the current request settles. True when settled."""
        if self._thread is not None:
            self._thread.join(timeout)
        return self.state != self.PENDING

    def _run(self, summary: SwarmSummary) -> None:
        ok = False
        text = FAILURE_MESSAGE
        try:
            text = self.client.request(summary)
            ok = True
        except EmptyBriefingError:
            log.warning("briefing response was empty")
            text = EMPTY_MESSAGE
        except BriefingError as e:
            log.error("briefing failed: %s", e)
        except Exception:
            log.exception("briefing failed unexpectedly")
        finally:
            with self._lock:
                self.text = text
                self.ok = ok
                self.state = self.SETTLED
