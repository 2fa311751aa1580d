"""Shared fixtures for the datasize tests."""

import pytest


@pytest.fixture(autouse=True)
def us_numeric_locale(monkeypatch):
    """Pin the process default numeric locale to en_US for every test."""
    monkeypatch.setenv("LC_NUMERIC", "en_US.UTF-8")
