from typing import Optional, List, Any, Sequence

from selenium import webdriver
from selenium.webdriver.common.by import By
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import Select

from .errors import LocateError
from .types import Locator, LocatorStrategy


BY_STRATEGY = {
    LocatorStrategy.ID: By.ID,
    LocatorStrategy.NAME: By.NAME,
    LocatorStrategy.XPATH: By.XPATH,
    LocatorStrategy.CSS: By.CSS_SELECTOR,
}


class SeleniumEngine:
    def __init__(self):
        self._driver: Optional[webdriver.Chrome] = None

    @property
    def driver(self) -> webdriver.Chrome:
        assert self._driver is not None, "Selenium engine is not started"
        return self._driver

    def start(self, headless: bool = False, browser_args: Sequence[str] = (), implicit_timeout: float = 10.0) -> None:
        options = ChromeOptions()
        for arg in browser_args:
            options.add_argument(arg)
        if headless:
            options.add_argument("--headless=new")
        self._driver = webdriver.Chrome(options=options)
        self._driver.implicitly_wait(implicit_timeout)

    def stop(self) -> None:
        if self._driver:
            try:
                self._driver.quit()
            finally:
                self._driver = None

    def goto(self, url: str) -> None:
        self.driver.get(url)

    def title(self) -> str:
        return self.driver.title

    def current_url(self) -> str:
        return self.driver.current_url

    def window_handles(self) -> List[str]:
        return list(self.driver.window_handles)

    def _elements(self, locator: Locator) -> List[WebElement]:
        return self.driver.find_elements(BY_STRATEGY[locator.strategy], locator.value)

    def _element(self, locator: Locator, index: int = 0) -> WebElement:
        elements = self._elements(locator)
        if index >= len(elements):
            raise LocateError(locator, index)
        return elements[index]

    def count(self, locator: Locator) -> int:
        return len(self._elements(locator))

    def read(self, locator: Locator, name: str, index: int = 0) -> Any:
        elem = self._element(locator, index)
        if name == "text":
            return elem.text
        if name == "selected":
            return elem.is_selected()
        if name == "enabled":
            return elem.is_enabled()
        if name == "displayed":
            return elem.is_displayed()
        return elem.get_attribute(name)

    def click(self, locator: Locator, index: int = 0) -> None:
        self._element(locator, index).click()

    def type(self, locator: Locator, value: str, index: int = 0) -> None:
        self._element(locator, index).send_keys(value)

    def clear(self, locator: Locator, index: int = 0) -> None:
        self._element(locator, index).clear()

    def _select(self, locator: Locator) -> Select:
        return Select(self._element(locator))

    def select_options(self, locator: Locator) -> List[str]:
        return [option.text for option in self._select(locator).options]

    def selected_option(self, locator: Locator) -> Optional[str]:
        selected = self._select(locator).all_selected_options
        return selected[0].text if selected else None

    def select_by_visible_text(self, locator: Locator, text: str) -> None:
        self._select(locator).select_by_visible_text(text)
