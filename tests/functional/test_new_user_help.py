"""Functional tests for a newcomer finding their way around the solid CLI.

This suite verifies:
- The long-form `HELP` prose is rendered on `--help` (compared after
  stripping ANSI and normalizing whitespace).
- The help frame appears (Usage/Options/Commands and the "See Also" link).
- The bare URL is shown when OSC-8 is not supported (CliRunner default).
- An OSC-8 BEL-terminated hyperlink is emitted when supported.
- The reading and demo commands chain into a sensible first session.
"""

from __future__ import annotations

import importlib
import re
from textwrap import dedent
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

import solid_principles
import solid_principles.entrypoints.cli.main as main  # pylint: disable=consider-using-from-import # reloaded below

if TYPE_CHECKING:
    from click.testing import Result
    from pytest import MonkeyPatch

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")  # strip SGR styling only
SOLID_URL = "https://en.wikipedia.org/wiki/SOLID"


def _normalize(s: str) -> str:
    """Return `s` with leading/trailing space trimmed and internal whitespace collapsed."""
    return re.sub(r"\s+", " ", s.strip())


def _assert_help_displayed(result: Result):
    """Assert that help output contains the HELP prose and the usual sections."""
    # pylint: disable=magic-value-comparison
    text = ANSI_RE.sub("", result.output)
    expected_message = _normalize(dedent(main.HELP))
    assert expected_message
    assert expected_message in _normalize(text), "HELP text not rendered."
    assert "Usage:" in text
    assert "Options:" in text
    assert "Commands:" in text
    for command in ("overview", "principles", "explain", "demo"):
        assert command in text
    assert "SOLID :" in text


@pytest.fixture
def reload_main():
    """Reload the CLI module after the test so its epilog is rebuilt.

    Request it before `monkeypatch` so the reload runs after the patch is undone.
    """
    yield
    importlib.reload(main)


# ============================================================================
#                           Tests
# ============================================================================


class TestNewUserAsksForHelp:
    """Someone who has never used solid tries to find out what it does."""

    @staticmethod
    @pytest.mark.parametrize("args", (["-h"], ["--help"]))
    def test_help_output(args: list[str]):
        """Given solid is installed, -h/--help shows the prose and the link."""
        runner = CliRunner()
        result = runner.invoke(main.solid, args)

        assert result.exit_code == 0
        _assert_help_displayed(result)
        ## CliRunner is not a terminal, so the link is a bare URL
        assert SOLID_URL in result.output
        assert "\x1b]8;;" not in result.output

    @staticmethod
    def test_version_output():
        runner = CliRunner()
        result = runner.invoke(main.solid, ["--version"])

        assert result.exit_code == 0
        assert solid_principles.__version__ in result.output

    @staticmethod
    def test_osc8_links(reload_main, monkeypatch: MonkeyPatch):
        """With OSC-8 support, the link is wrapped in BEL-terminated sequences."""
        # The user switches to a terminal that renders hyperlinks.
        ## (Simulated by patching `supports_osc8` and rebuilding the epilog.)
        monkeypatch.setattr(
            "solid_principles.entrypoints.cli.helpers.hyperlinks.supports_osc8",
            lambda stream=None: True,
        )
        importlib.reload(main)

        result = CliRunner().invoke(main.solid, ["--help"])

        assert f"\x1b]8;;{SOLID_URL}\x07{SOLID_URL}\x1b]8;;\x07" in result.output


class TestNewUserFirstSession:
    """A newcomer reads about SOLID, then runs the illustrations."""

    @staticmethod
    def test_reads_then_runs_the_examples():
        runner = CliRunner()
        env = {"COLUMNS": "200"}
        base = ["--no-color", "--no-flight-recorder"]

        # The user starts with the overview...
        result = runner.invoke(main.solid, [*base, "overview"], env=env)
        assert result.exit_code == 0
        assert "Overview of SOLID Principles" in result.output

        # ...skims the list of principles...
        result = runner.invoke(main.solid, [*base, "principles"], env=env)
        assert result.exit_code == 0
        assert "Liskov Substitution Principle" in result.output

        # ...reads up on Liskov substitution...
        result = runner.invoke(main.solid, [*base, "explain", "lsp"], env=env)
        assert result.exit_code == 0
        assert "Liskov Substitution Principle" in result.output
        assert "wikipedia.org" in result.output

        # ...and watches every payment method go through the same call site.
        result = runner.invoke(main.solid, [*base, "demo", "lsp"], env=env)
        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 4

    @staticmethod
    def test_compares_before_and_after():
        """The violating printer design fails where the segregated one works."""
        runner = CliRunner()
        base = ["--no-color", "--no-flight-recorder", "demo", "isp"]

        after = runner.invoke(main.solid, base)
        assert after.exit_code == 0
        assert "Scanning document..." in after.output

        # Now the same illustration with the fat printer contract.
        before = runner.invoke(main.solid, [*base, "--before"])
        assert before.exit_code == 1
        assert "Scan not supported by BasicPrinter." in before.output
