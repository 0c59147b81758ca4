from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest

from practiceprobe.automation.checks import (
    AUTOCOMPLETE,
    CHECKBOXES,
    DROPDOWN,
    RADIO_BUTTONS,
    SWITCH_TAB,
    SWITCH_WINDOW,
)
from practiceprobe.automation.errors import LocateError
from practiceprobe.automation.types import Locator
from practiceprobe.config import ProbeSettings


def pytest_addoption(parser):
    parser.addoption("--run-e2e", action="store_true", default=False, help="Run live browser tests")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="needs --run-e2e")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@dataclass
class FakeElement:
    kind: str
    attrs: Dict[str, Any] = field(default_factory=dict)
    text: str = ""
    selected: bool = False
    enabled: bool = True
    displayed: bool = True
    options: List[str] = field(default_factory=list)
    opens_window: bool = False


class FakeEngine:
    """In-memory stand-in for a browser engine serving a fixed page."""

    def __init__(self, elements: Optional[Dict[Locator, List[FakeElement]]] = None, title: str = "Practice Page"):
        self.elements = elements if elements is not None else practice_page()
        self.page_title = title
        self.handles = ["main"]
        self.calls: List[tuple] = []
        self.started = 0
        self.stopped = 0
        self.url = ""
        self.fail_on_start: Optional[Exception] = None
        self.fail_on_goto: Optional[Exception] = None
        self.fail_on_stop: Optional[Exception] = None
        self.fail_on_count: Dict[Locator, Exception] = {}
        # Typed text only shows up in the value after this many reads
        self.value_lag = 0

    def start(self, headless=False, browser_args=(), implicit_timeout=10.0):
        self.calls.append(("start", headless, tuple(browser_args), implicit_timeout))
        if self.fail_on_start:
            raise self.fail_on_start
        self.started += 1

    def stop(self):
        self.calls.append(("stop",))
        self.stopped += 1
        if self.fail_on_stop:
            raise self.fail_on_stop

    def goto(self, url):
        self.calls.append(("goto", url))
        if self.fail_on_goto:
            raise self.fail_on_goto
        self.url = url

    def title(self):
        return self.page_title

    def current_url(self):
        return self.url

    def window_handles(self):
        return list(self.handles)

    def _element(self, locator, index=0):
        matches = self.elements.get(locator, [])
        if index >= len(matches):
            raise LocateError(locator, index)
        return matches[index]

    def count(self, locator):
        if locator in self.fail_on_count:
            raise self.fail_on_count[locator]
        return len(self.elements.get(locator, []))

    def read(self, locator, name, index=0):
        elem = self._element(locator, index)
        if name == "text":
            return elem.text
        if name in ("selected", "enabled", "displayed"):
            return getattr(elem, name)
        if name == "value" and self.value_lag:
            self.value_lag -= 1
            return ""
        return elem.attrs.get(name)

    def click(self, locator, index=0):
        self.calls.append(("click", locator, index))
        elem = self._element(locator, index)
        if elem.opens_window:
            self.handles.append(f"window-{len(self.handles)}")
        if elem.kind == "radio":
            for other in self.elements[locator]:
                other.selected = False
            elem.selected = True
        elif elem.kind == "checkbox":
            elem.selected = not elem.selected

    def type(self, locator, value, index=0):
        self.calls.append(("type", locator, value))
        elem = self._element(locator, index)
        elem.attrs["value"] = elem.attrs.get("value", "") + value

    def clear(self, locator, index=0):
        self.calls.append(("clear", locator))
        self._element(locator, index).attrs["value"] = ""

    def select_options(self, locator):
        return list(self._element(locator).options)

    def selected_option(self, locator):
        return self._element(locator).attrs.get("selected_option")

    def select_by_visible_text(self, locator, text):
        elem = self._element(locator)
        if text not in elem.options:
            raise LookupError(f"Cannot locate option with visible text: {text}")
        elem.attrs["selected_option"] = text


def practice_page() -> Dict[Locator, List[FakeElement]]:
    return {
        RADIO_BUTTONS.locator: [
            FakeElement("radio", {"value": f"radio{i}"}) for i in range(1, 4)
        ],
        AUTOCOMPLETE.locator: [
            FakeElement("input", {"placeholder": "Type to Select Countries", "value": ""}),
        ],
        DROPDOWN.locator: [
            FakeElement(
                "select",
                {"name": "dropdown-class-example", "selected_option": "Select"},
                options=["Select", "Option1", "Option2", "Option3"],
            ),
        ],
        CHECKBOXES.locator: [
            FakeElement("checkbox", {"name": f"checkBoxOption{i}", "value": f"option{i}"}) for i in range(1, 4)
        ],
        SWITCH_WINDOW.locator: [
            FakeElement("button", {"class": "btn-style class1"}, text="Open Window", opens_window=True),
        ],
        SWITCH_TAB.locator: [
            FakeElement("button", {"class": "btn-style class1 class2"}, text="Open Tab", opens_window=True),
        ],
    }


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def settings() -> ProbeSettings:
    return ProbeSettings(suggestion_delay=0.0)


@pytest.fixture
def fake_element():
    return FakeElement
