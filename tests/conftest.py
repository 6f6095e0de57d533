import pytest

from ropm.backends import default


@pytest.fixture(autouse=True)
def fedora(monkeypatch):
    """Pin the native backend to dnf regardless of the host distribution."""
    monkeypatch.setattr(default, "family", lambda: "fedora")
