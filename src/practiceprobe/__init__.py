# Avoid importing the browser engines at top-level
__all__ = ["ProbeRunner", "ProbeSettings"]

__version__ = "0.1.0"


def __getattr__(name):
    if name == "ProbeRunner":
        from .automation.runner import ProbeRunner
        return ProbeRunner
    if name == "ProbeSettings":
        from .config import ProbeSettings
        return ProbeSettings
    raise AttributeError(name)
