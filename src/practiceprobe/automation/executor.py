"""Generic executor turning a Check into an Observation.

The executor only observes: it locates, reads, applies the check's action and
records what it saw. Logging and asserting the result are left to the
report module.
"""
import logging
import time
from datetime import datetime
from typing import Optional, Dict, Any, Callable

from ..config import ProbeSettings, POLL_INTERVAL
from .engine import ProbeEngine
from .errors import CheckError
from .types import Action, Check, CheckStatus, Observation

logger = logging.getLogger("practiceprobe")


class CheckExecutor:
    def __init__(
        self,
        engine: ProbeEngine,
        settings: Optional[ProbeSettings] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.engine = engine
        self.settings = settings or ProbeSettings()
        self._sleep = sleep
        self._clock = clock
        self._actions = {
            Action.NONE: self._inspect,
            Action.CLICK_FIRST: self._click_first,
            Action.TYPE_AND_CLEAR: self._type_and_clear,
            Action.SELECT_BY_TEXT: self._select_by_text,
            Action.TOGGLE_EACH: self._toggle_each,
        }

    def observe(self, check: Check) -> Observation:
        """Run one check and return what was seen.

        A failure part way through is raised as CheckError carrying the
        partial observation, so values already read are not lost.
        """
        obs = Observation(check=check.name)
        logger.info(f"Accessing {check.title} ({check.locator})...")
        try:
            self._observe(check, obs)
        except Exception as e:
            obs.status = CheckStatus.ERROR
            obs.error = str(e) or type(e).__name__
            obs.finished_at = datetime.utcnow()
            raise CheckError(obs, e) from e
        return obs

    def _observe(self, check: Check, obs: Observation) -> None:
        obs.found = self.engine.count(check.locator)
        if obs.found == 0:
            obs.status = CheckStatus.NOT_FOUND
            obs.finished_at = datetime.utcnow()
            return

        inspected = obs.found if check.limit is None else min(check.limit, obs.found)
        if check.track_windows:
            obs.details["windows_before"] = len(self.engine.window_handles())

        for i in range(inspected):
            obs.before.append(self._read(check, i))
        self._actions[check.action](check, obs, inspected)

        if check.track_windows:
            obs.details["windows_after"] = len(self.engine.window_handles())
        obs.finished_at = datetime.utcnow()

    def _read(self, check: Check, index: int) -> Dict[str, Any]:
        return {name: self.engine.read(check.locator, name, index) for name in check.reads}

    def _inspect(self, check: Check, obs: Observation, inspected: int) -> None:
        logger.debug(f"{check.title} inspected only, not clicked")

    def _click_first(self, check: Check, obs: Observation, inspected: int) -> None:
        self.engine.click(check.locator, 0)
        logger.debug(f"Clicked first element of {check.title}")
        obs.after = [self._read(check, 0)]

    def _type_and_clear(self, check: Check, obs: Observation, inspected: int) -> None:
        text = check.input_text or ""
        self.engine.type(check.locator, text)
        obs.details["input_text"] = text
        logger.debug(f"Typed '{text}' in {check.title}")

        self.wait_for_suggestions(check, text)
        obs.details["typed_value"] = self.engine.read(check.locator, "value")

        self.engine.clear(check.locator)
        obs.details["cleared_value"] = self.engine.read(check.locator, "value")

    def wait_for_suggestions(self, check: Check, text: str) -> None:
        """Give the suggestion popup time to settle.

        "sleep" waits the full delay unconditionally; "poll" returns as soon as
        the field holds the typed text, bounded by the same delay.
        """
        delay = self.settings.suggestion_delay
        if self.settings.wait_strategy == "sleep":
            self._sleep(delay)
            return
        deadline = self._clock() + delay
        while self._clock() < deadline:
            if self.engine.read(check.locator, "value") == text:
                return
            self._sleep(POLL_INTERVAL)
        logger.debug(f"{check.title} did not settle within {delay}s")

    def _select_by_text(self, check: Check, obs: Observation, inspected: int) -> None:
        text = check.input_text or ""
        obs.details["options"] = self.engine.select_options(check.locator)
        obs.details["initial_option"] = self.engine.selected_option(check.locator)
        self.engine.select_by_visible_text(check.locator, text)
        logger.debug(f"Selected '{text}' from {check.title}")
        obs.details["selected_option"] = self.engine.selected_option(check.locator)

    def _toggle_each(self, check: Check, obs: Observation, inspected: int) -> None:
        for i in range(inspected):
            self.engine.click(check.locator, i)
            obs.after.append({"selected": self.engine.read(check.locator, "selected", i)})
