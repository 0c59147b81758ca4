import pytest
from click.testing import CliRunner

from practiceprobe import cli as cli_module
from practiceprobe.automation.checks import RADIO_BUTTONS
from practiceprobe.automation.runner import ProbeRunner


@pytest.fixture
def captured(monkeypatch, engine):
    seen = {}

    def make_runner(settings):
        seen["settings"] = settings
        return ProbeRunner(settings, engine_factory=lambda: engine)

    monkeypatch.setattr(cli_module, "ProbeRunner", make_runner)
    return seen


def invoke(*args, env=None):
    return CliRunner().invoke(cli_module.cli, list(args), env=env)


def test_run_succeeds(captured, engine):
    result = invoke("run", "--headless", "--delay", "0")
    assert result.exit_code == 0, result.output
    assert "Probe run completed" in result.output
    assert captured["settings"].headless is True
    assert engine.stopped == 1


def test_run_reads_environment(captured):
    result = invoke("run", env={"PRACTICEPROBE_WAIT": "poll", "PRACTICEPROBE_DELAY": "0.5"})
    assert result.exit_code == 0, result.output
    assert captured["settings"].wait_strategy == "poll"
    assert captured["settings"].suggestion_delay == 0.5


def test_strict_failures_exit_nonzero(captured, engine):
    engine.elements[RADIO_BUTTONS.locator] = []
    result = invoke("run", "--strict", "--delay", "0")
    assert result.exit_code == 1
    assert "radio_buttons" in result.output


def test_launch_error_exit_code(captured, engine):
    engine.fail_on_start = RuntimeError("chromedriver missing")
    result = invoke("run", "--delay", "0")
    assert result.exit_code == 2
    assert "chromedriver" in result.output


def test_only_rejects_unknown_check(captured):
    result = invoke("run", "--only", "nope")
    assert result.exit_code == 2
    assert "settings" not in captured


def test_checks_lists_in_order():
    result = invoke("checks")
    assert result.exit_code == 0
    positions = [result.output.index(name) for name in ("radio_buttons", "autocomplete", "switch_tab")]
    assert positions == sorted(positions)


def test_no_command_prints_help():
    result = invoke()
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_strict_run_on_wrong_page_exits_nonzero(captured, engine):
    engine.page_title = "Checkout"
    result = invoke("run", "--strict", "--delay", "0")
    assert result.exit_code == 1
    assert "Setup failed" in result.output
