"""
Shared pytest configuration for the quicknotes test suite.

This file centralizes reusable testing utilities so that:
    • CLI tests share a single Typer CliRunner setup
    • every test that touches the file system runs inside tmp_path
    • session tests can script user input deterministically
"""

from typing import Callable, List

import pytest
import typer
from typer.testing import CliRunner

# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================

_ENV_VARS = ("QUICKNOTES_DIR", "QUICKNOTES_VERBOSE", "QUICKNOTES_DEBUG")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def notes_workspace(tmp_path, monkeypatch):
    """
    Run the test from an empty temporary working directory.

    QUICKNOTES_* variables are cleared so a developer's environment or .env
    file cannot change where notes are written.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Fixture: scripted_prompt
# ---------------------------------------------------------------------------
@pytest.fixture
def scripted_prompt() -> Callable[..., Callable[[str], str]]:
    """
    Build a prompt callable that answers from a fixed script.

    Exposes:
        • scripted_prompt("2", "todo", "buy milk") → prompt(text) -> answer
        • prompt.asked → list of prompt texts seen so far

    When the script runs out the prompt raises typer.Abort, just like
    typer.prompt does at end of input.
    """

    def _make(*answers: str) -> Callable[[str], str]:
        queue: List[str] = list(answers)
        asked: List[str] = []

        def _prompt(text: str) -> str:
            asked.append(text)
            if not queue:
                raise typer.Abort()
            return queue.pop(0)

        _prompt.asked = asked  # type: ignore[attr-defined]
        return _prompt

    return _make
