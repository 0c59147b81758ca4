from typing import Protocol, Optional, List, Any, Sequence

from .types import Locator


class ProbeEngine(Protocol):
    def start(self, headless: bool = False, browser_args: Sequence[str] = (), implicit_timeout: float = 10.0) -> None:
        ...

    def stop(self) -> None:
        ...

    def goto(self, url: str) -> None:
        ...

    def title(self) -> str:
        ...

    def current_url(self) -> str:
        ...

    def window_handles(self) -> List[str]:
        ...

    def count(self, locator: Locator) -> int:
        ...

    def read(self, locator: Locator, name: str, index: int = 0) -> Any:
        ...

    def click(self, locator: Locator, index: int = 0) -> None:
        ...

    def type(self, locator: Locator, value: str, index: int = 0) -> None:
        ...

    def clear(self, locator: Locator, index: int = 0) -> None:
        ...

    def select_options(self, locator: Locator) -> List[str]:
        ...

    def selected_option(self, locator: Locator) -> Optional[str]:
        ...

    def select_by_visible_text(self, locator: Locator, text: str) -> None:
        ...
