class ProbeError(Exception):
    """Base exception for practice page probe errors."""


class LaunchError(ProbeError):
    """The browser could not be started or the page failed to load."""


class LocateError(ProbeError):
    """No element matched a locator at the requested position."""

    def __init__(self, locator, index: int = 0):
        self.locator = locator
        self.index = index
        super().__init__(f"No element found for {locator} at index {index}")


class CheckError(ProbeError):
    """A check raised part way through; carries what was observed so far."""

    def __init__(self, observation, cause: BaseException):
        self.observation = observation
        self.cause = cause
        super().__init__(f"{observation.check}: {str(cause) or type(cause).__name__}")
