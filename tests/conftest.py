"""Shared test fixtures for oasvc.

Provides the representative ``activity.json`` document, config isolation,
output managers, and the Typer CLI runner.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from oasvc.output import OutputFormat, OutputManager, reset_output, set_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"
ACTIVITY_SPEC = FIXTURES_DIR / "activity.json"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The manager's consoles hold the ``sys.stdout``/``sys.stderr`` objects
    that were current when it was created; CliRunner swaps and closes
    those streams.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Document fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def activity_doc() -> dict[str, Any]:
    """The representative activity document as a plain dict."""
    with open(ACTIVITY_SPEC, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def activity_spec_path() -> Path:
    return ACTIVITY_SPEC


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory with ``OASVC_CONFIG`` unset.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.delenv("OASVC_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def json_output() -> OutputManager:
    """Install a JSON-format OutputManager."""
    output = OutputManager(format=OutputFormat.JSON)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
