from typing import Optional, List, Any, Sequence

from playwright.sync_api import sync_playwright, Page, Browser, BrowserContext, Locator as PageLocator

from .errors import LocateError
from .types import Locator, LocatorStrategy


def to_selector(locator: Locator) -> str:
    if locator.strategy == LocatorStrategy.ID:
        return f'[id="{locator.value}"]'
    if locator.strategy == LocatorStrategy.NAME:
        return f'[name="{locator.value}"]'
    if locator.strategy == LocatorStrategy.XPATH:
        return f"xpath={locator.value}"
    return locator.value


class PlaywrightEngine:
    def __init__(self):
        self._pw = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    @property
    def page(self) -> Page:
        assert self._page is not None, "Playwright engine is not started"
        return self._page

    def start(self, headless: bool = False, browser_args: Sequence[str] = (), implicit_timeout: float = 10.0) -> None:
        self._pw = sync_playwright().start()
        self._browser = self._pw.chromium.launch(headless=headless, args=list(browser_args))
        # --start-maximized only takes effect without a fixed viewport
        self._context = self._browser.new_context(no_viewport=True)
        self._context.set_default_timeout(implicit_timeout * 1000)
        self._page = self._context.new_page()

    def stop(self) -> None:
        try:
            if self._context:
                self._context.close()
            if self._browser:
                self._browser.close()
        finally:
            if self._pw:
                self._pw.stop()
            self._page = None
            self._context = None
            self._browser = None
            self._pw = None

    def goto(self, url: str) -> None:
        self.page.goto(url, wait_until="load")

    def title(self) -> str:
        return self.page.title()

    def current_url(self) -> str:
        return self.page.url

    def window_handles(self) -> List[str]:
        # One entry per open page, the closest Playwright has to window handles
        assert self._context is not None
        return [p.url for p in self._context.pages]

    def _locator(self, locator: Locator) -> PageLocator:
        return self.page.locator(to_selector(locator))

    def _element(self, locator: Locator, index: int = 0) -> PageLocator:
        matches = self._locator(locator)
        if index >= matches.count():
            raise LocateError(locator, index)
        return matches.nth(index)

    def count(self, locator: Locator) -> int:
        return self._locator(locator).count()

    def read(self, locator: Locator, name: str, index: int = 0) -> Any:
        elem = self._element(locator, index)
        if name == "text":
            return elem.inner_text()
        if name == "selected":
            return elem.evaluate("el => !!(el.checked || el.selected)")
        if name == "enabled":
            return elem.is_enabled()
        if name == "displayed":
            return elem.is_visible()
        if name == "value":
            return elem.evaluate("el => el.value === undefined ? el.getAttribute('value') : el.value")
        return elem.get_attribute(name)

    def click(self, locator: Locator, index: int = 0) -> None:
        self._element(locator, index).click()

    def type(self, locator: Locator, value: str, index: int = 0) -> None:
        self._element(locator, index).press_sequentially(value)

    def clear(self, locator: Locator, index: int = 0) -> None:
        self._element(locator, index).fill("")

    def select_options(self, locator: Locator) -> List[str]:
        return [text.strip() for text in self._element(locator).locator("option").all_inner_texts()]

    def selected_option(self, locator: Locator) -> Optional[str]:
        text = self._element(locator).evaluate(
            "el => el.selectedIndex >= 0 ? el.options[el.selectedIndex].text : null"
        )
        return text.strip() if text is not None else None

    def select_by_visible_text(self, locator: Locator, text: str) -> None:
        self._element(locator).select_option(label=text)
