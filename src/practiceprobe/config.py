"""Runtime settings for the practice page probe."""
from dataclasses import dataclass
from typing import Tuple

# The probe targets exactly one public demo page
BASE_URL = "https://rahulshettyacademy.com/AutomationPractice/"
EXPECTED_TITLE = "Practice"

DEFAULT_BROWSER_ARGS: Tuple[str, ...] = (
    "--disable-notifications",
    "--disable-popup-blocking",
    "--start-maximized",
)

ENGINES = ("selenium", "playwright")
WAIT_STRATEGIES = ("sleep", "poll")

DEFAULT_SUGGESTION_DELAY = 2.0
DEFAULT_IMPLICIT_TIMEOUT = 10.0
POLL_INTERVAL = 0.1


@dataclass(frozen=True)
class ProbeSettings:
    base_url: str = BASE_URL
    engine: str = "selenium"
    headless: bool = False
    suggestion_delay: float = DEFAULT_SUGGESTION_DELAY
    wait_strategy: str = "sleep"
    implicit_timeout: float = DEFAULT_IMPLICIT_TIMEOUT
    browser_args: Tuple[str, ...] = DEFAULT_BROWSER_ARGS

    def __post_init__(self):
        if self.engine not in ENGINES:
            raise ValueError(f"Unknown engine: {self.engine}")
        if self.wait_strategy not in WAIT_STRATEGIES:
            raise ValueError(f"Unknown wait strategy: {self.wait_strategy}")
        if self.suggestion_delay < 0:
            raise ValueError("suggestion_delay must not be negative")
        if self.implicit_timeout < 0:
            raise ValueError("implicit_timeout must not be negative")
