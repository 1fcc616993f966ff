"""Shared fixtures for Library Manager tests."""

import io

import pytest
from rich.console import Console

from library_manager.core import AppContext, Catalog


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def context(catalog):
    return AppContext(catalog=catalog)


@pytest.fixture
def console():
    """Console that records plain text output."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed lines to ``input()``; raises EOFError once they run out."""

    def install(*lines):
        feed = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(feed)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return install
