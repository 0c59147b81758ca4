"""Logging and assertion of check observations."""
import logging
from typing import List, Any

from .types import Check, CheckStatus, Observation

logger = logging.getLogger("practiceprobe")


def _format(values: dict) -> str:
    return ", ".join(f"{k} = {_quote(v)}" for k, v in values.items())


def _quote(value: Any) -> str:
    return f"'{value}'" if isinstance(value, str) else str(value)


def log_observation(check: Check, obs: Observation) -> None:
    if obs.status == CheckStatus.ERROR:
        logger.error(f"Error accessing {check.title}: {obs.error}")
        return
    if obs.status == CheckStatus.NOT_FOUND:
        logger.warning(f"{check.title} not found ({check.locator})")
        return

    logger.info(f"Before: Found {obs.found} element(s) for {check.title}")
    for i, values in enumerate(obs.before, start=1):
        logger.info(f"Before: {check.title} {i}: {_format(values)}")
    for key in ("options", "initial_option", "windows_before"):
        if key in obs.details:
            logger.info(f"Before: {key} = {_quote(obs.details[key])}")

    for i, values in enumerate(obs.after, start=1):
        logger.info(f"After: {check.title} {i}: {_format(values)}")
    for key in ("typed_value", "cleared_value", "selected_option", "windows_after"):
        if key in obs.details:
            logger.info(f"After: {key} = {_quote(obs.details[key])}")
    for failure in obs.failures:
        logger.error(f"After: {check.title} failed: {failure}")


def evaluate(check: Check, obs: Observation) -> List[str]:
    """Return the failure message of every unmet expectation."""
    if obs.status == CheckStatus.ERROR:
        return [obs.error or "check raised an error"]
    if obs.status == CheckStatus.NOT_FOUND:
        return [f"{check.title} should be present on the page"] if check.required else []
    return [e.message for e in check.expectations if not e.predicate(obs)]


def judge(check: Check, obs: Observation) -> Observation:
    """Record expectation results and the resulting status on the observation."""
    obs.failures = evaluate(check, obs)
    if obs.status == CheckStatus.ERROR:
        return obs
    if obs.failures:
        obs.status = CheckStatus.FAILED
    elif obs.status == CheckStatus.OBSERVED:
        obs.status = CheckStatus.PASSED
    return obs


def assert_observation(check: Check, obs: Observation) -> None:
    judge(check, obs)
    if obs.failures:
        raise AssertionError(f"{check.title}: " + "; ".join(obs.failures))
