"""Shared pytest fixtures for the Indigo test suite."""

import pytest


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed ``input()`` from a list of answers."""
    def feed(answers):
        remaining = iter(answers)
        monkeypatch.setattr("builtins.input", lambda *args: next(remaining))
    return feed
