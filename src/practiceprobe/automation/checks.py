"""Fixed widget checks for the practice page, in execution order."""
from typing import Dict, Tuple

from .types import Action, Check, Expectation, Locator, LocatorStrategy, Observation


AUTOCOMPLETE_INPUT = "India"
DROPDOWN_OPTION = "Option2"
CHECKBOX_LIMIT = 3


def _first_after(obs: Observation, name: str):
    return obs.after[0].get(name) if obs.after else None


def _all_before(obs: Observation, name: str) -> bool:
    return bool(obs.before) and all(item.get(name) is True for item in obs.before)


def _toggled(obs: Observation) -> bool:
    if not obs.before or len(obs.before) != len(obs.after):
        return False
    return all(b.get("selected") != a.get("selected") for b, a in zip(obs.before, obs.after))


def _windows_unchanged(obs: Observation) -> bool:
    return obs.details.get("windows_before") == obs.details.get("windows_after")


def _button_expectations(label: str) -> Tuple[Expectation, ...]:
    return (
        Expectation(f"{label} button should be visible", lambda o: _all_before(o, "displayed")),
        Expectation(f"{label} button should be enabled", lambda o: _all_before(o, "enabled")),
        Expectation(f"{label} button should have text", lambda o: bool(o.before and o.before[0].get("text"))),
        Expectation(f"{label} button should not change the window count", _windows_unchanged),
    )


RADIO_BUTTONS = Check(
    name="radio_buttons",
    title="Radio buttons",
    priority=1,
    locator=Locator(LocatorStrategy.NAME, "radioButton"),
    reads=("value", "selected"),
    action=Action.CLICK_FIRST,
    expectations=(
        Expectation(
            "First radio button should be selected after clicking",
            lambda o: _first_after(o, "selected") is True,
        ),
    ),
)

AUTOCOMPLETE = Check(
    name="autocomplete",
    title="Autocomplete field",
    priority=2,
    locator=Locator(LocatorStrategy.ID, "autocomplete"),
    reads=("placeholder", "value", "displayed", "enabled"),
    action=Action.TYPE_AND_CLEAR,
    input_text=AUTOCOMPLETE_INPUT,
    limit=1,
    expectations=(
        Expectation("Autocomplete field should be visible", lambda o: _all_before(o, "displayed")),
        Expectation("Autocomplete field should be enabled", lambda o: _all_before(o, "enabled")),
        Expectation(
            "Field should contain the typed text",
            lambda o: o.details.get("typed_value") == AUTOCOMPLETE_INPUT,
        ),
        Expectation("Field should be empty after clearing", lambda o: o.details.get("cleared_value") == ""),
    ),
)

DROPDOWN = Check(
    name="dropdown",
    title="Dropdown",
    priority=3,
    locator=Locator(LocatorStrategy.ID, "dropdown-class-example"),
    reads=("name",),
    action=Action.SELECT_BY_TEXT,
    input_text=DROPDOWN_OPTION,
    limit=1,
    expectations=(
        Expectation("Dropdown should have options", lambda o: bool(o.details.get("options"))),
        Expectation(
            "Selected option should match the expected option",
            lambda o: o.details.get("selected_option") == DROPDOWN_OPTION,
        ),
    ),
)

CHECKBOXES = Check(
    name="checkboxes",
    title="Checkboxes",
    priority=4,
    locator=Locator(LocatorStrategy.XPATH, "//input[@type='checkbox']"),
    reads=("name", "value", "selected", "displayed", "enabled"),
    action=Action.TOGGLE_EACH,
    limit=CHECKBOX_LIMIT,
    expectations=(
        Expectation("Checkboxes should be visible", lambda o: _all_before(o, "displayed")),
        Expectation("Checkboxes should be enabled", lambda o: _all_before(o, "enabled")),
        Expectation("Checkbox state should have changed after click", _toggled),
    ),
)

SWITCH_WINDOW = Check(
    name="switch_window",
    title="Switch window button",
    priority=5,
    locator=Locator(LocatorStrategy.ID, "openwindow"),
    reads=("text", "enabled", "displayed", "class"),
    limit=1,
    track_windows=True,
    expectations=_button_expectations("Switch Window"),
)

SWITCH_TAB = Check(
    name="switch_tab",
    title="Switch tab button",
    priority=6,
    locator=Locator(LocatorStrategy.ID, "opentab"),
    reads=("text", "enabled", "displayed", "class"),
    limit=1,
    track_windows=True,
    expectations=_button_expectations("Switch Tab"),
)

CHECKS: Tuple[Check, ...] = tuple(
    sorted(
        (RADIO_BUTTONS, AUTOCOMPLETE, DROPDOWN, CHECKBOXES, SWITCH_WINDOW, SWITCH_TAB),
        key=lambda c: c.priority,
    )
)

CHECKS_BY_NAME: Dict[str, Check] = {c.name: c for c in CHECKS}
