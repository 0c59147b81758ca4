import logging
from typing import Callable, Iterable, List, Optional, Sequence

from ..config import ProbeSettings
from .checks import CHECKS
from .engine import ProbeEngine
from .errors import CheckError, LaunchError
from .executor import CheckExecutor
from .report import judge, log_observation
from .session import ProbeSession
from .types import Check, Observation, RunReport

logger = logging.getLogger("practiceprobe")


class ProbeRunner:
    def __init__(
        self,
        settings: Optional[ProbeSettings] = None,
        checks: Sequence[Check] = CHECKS,
        engine_factory: Optional[Callable[[], ProbeEngine]] = None,
        executor_factory: Callable[..., CheckExecutor] = CheckExecutor,
    ):
        self.settings = settings or ProbeSettings()
        self.checks = sorted(checks, key=lambda c: c.priority)
        self.engine_factory = engine_factory
        self.executor_factory = executor_factory

    def _select(self, only: Optional[Iterable[str]]) -> List[Check]:
        if not only:
            return list(self.checks)
        wanted = set(only)
        unknown = wanted - {c.name for c in self.checks}
        if unknown:
            raise ValueError(f"Unknown check(s): {', '.join(sorted(unknown))}")
        return [c for c in self.checks if c.name in wanted]

    def run(self, strict: bool = False, only: Optional[Iterable[str]] = None) -> RunReport:
        targets = self._select(only)
        report = RunReport(url=self.settings.base_url)
        engine = self.engine_factory() if self.engine_factory else None
        session = ProbeSession(self.settings, engine=engine)
        try:
            session.open()
            report.title = session.title
            if strict:
                try:
                    session.verify_title()
                except AssertionError as e:
                    report.setup_error = str(e)
                    logger.error(f"Probe setup failed: {e}")
                    return report
            executor = self.executor_factory(session.engine, self.settings)
            logger.info("Starting to access page elements...")
            for check in targets:
                report.observations.append(self._run_check(executor, check, strict))
            logger.info("Completed accessing all page elements")
        except LaunchError as e:
            report.launch_error = str(e)
            logger.error(f"Probe run aborted: {e}")
        finally:
            session.close()
        return report

    def _run_check(self, executor: CheckExecutor, check: Check, strict: bool) -> Observation:
        try:
            obs = executor.observe(check)
        except CheckError as e:
            obs = e.observation
        if strict:
            judge(check, obs)
        log_observation(check, obs)
        return obs
