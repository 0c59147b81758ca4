"""Browser session lifecycle for the practice page probe.

A session launches one browser, navigates once to the fixed base URL and is
torn down exactly once, whatever happens in between.
"""
import logging
import traceback
from types import TracebackType
from typing import Optional, List

from ..config import EXPECTED_TITLE, ProbeSettings
from .engine import ProbeEngine
from .errors import LaunchError

logger = logging.getLogger("practiceprobe")


def create_engine(name: str) -> ProbeEngine:
    if name == "selenium":
        from .selenium_engine import SeleniumEngine
        return SeleniumEngine()
    if name == "playwright":
        from .playwright_engine import PlaywrightEngine
        return PlaywrightEngine()
    raise ValueError(f"Unknown engine: {name}")


class ProbeSession:
    def __init__(self, settings: Optional[ProbeSettings] = None, engine: Optional[ProbeEngine] = None):
        self.settings = settings or ProbeSettings()
        self._engine = engine
        self._started = False
        self.is_open = False
        self.title: Optional[str] = None

    @property
    def engine(self) -> ProbeEngine:
        if not self.is_open or self._engine is None:
            raise RuntimeError("Session is not open")
        return self._engine

    @property
    def current_url(self) -> str:
        return self.engine.current_url()

    @property
    def window_handles(self) -> List[str]:
        return self.engine.window_handles()

    def open(self) -> "ProbeSession":
        """Launch the browser and load the practice page.

        One launch attempt and one navigation attempt; any driver failure is
        raised as LaunchError after the browser (if it came up) is released.
        """
        if self.is_open:
            return self
        settings = self.settings
        logger.info(f"Setting up {settings.engine} engine...")
        try:
            if self._engine is None:
                self._engine = create_engine(settings.engine)
            # A partially started engine is still released by close()
            self._started = True
            self._engine.start(
                headless=settings.headless,
                browser_args=settings.browser_args,
                implicit_timeout=settings.implicit_timeout,
            )
            logger.info("Engine setup completed successfully")

            logger.info(f"Navigating to practice page: {settings.base_url}")
            self._engine.goto(settings.base_url)
            self.title = self._engine.title()
        except Exception as e:
            logger.error(f"Could not open practice page session: {e}")
            self.close()
            raise LaunchError(str(e)) from e

        self.is_open = True
        logger.info("Successfully navigated to practice page")
        logger.info(f"Page title: {self.title}")
        return self

    def verify_title(self, substring: str = EXPECTED_TITLE) -> None:
        title = self.title or ""
        if substring not in title:
            raise AssertionError(f"Page title should contain '{substring}', got '{title}'")

    def close(self) -> None:
        """Quit the browser. Safe to call any number of times."""
        if not self._started or self._engine is None:
            return
        self._started = False
        self.is_open = False
        logger.info("Closing browser and cleaning up...")
        try:
            self._engine.stop()
        except Exception as e:
            logger.warning(f"Error while closing browser: {e}")
            return
        logger.info("Browser closed successfully")

    def __enter__(self) -> "ProbeSession":
        return self.open()

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_value: Optional[BaseException],
        traceback_obj: Optional[TracebackType],
    ) -> None:
        if exc_type is not None:
            logger.error(
                "Unhandled exception in probe session -> %s",
                "".join(traceback.format_exception(exc_type, exc_value, traceback_obj)),
            )
        self.close()
