"""Automation layer for probing the practice page widgets.

This package provides the engine abstraction (Selenium/Playwright), the fixed
check definitions, a generic check executor, reporting helpers and the runner
that sequences checks over a single browser session.
"""

from .types import Check, CheckStatus, Observation, RunReport
from .engine import ProbeEngine
from .errors import LaunchError, LocateError, ProbeError
from .checks import CHECKS
from .session import ProbeSession
from .executor import CheckExecutor
from .runner import ProbeRunner

__all__ = [
    'CHECKS',
    'Check',
    'CheckExecutor',
    'CheckStatus',
    'LaunchError',
    'LocateError',
    'Observation',
    'ProbeEngine',
    'ProbeError',
    'ProbeRunner',
    'ProbeSession',
    'RunReport',
]
