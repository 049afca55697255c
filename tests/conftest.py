"""
Global test configuration for argguard.
"""

import logging
import os

import pytest


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_argguard_env(request, monkeypatch):
    """Ensure a clean ARGGUARD_* environment for each test.

    Escape hatch: mark a test with @pytest.mark.allow_env_pollution to keep
    the current environment unchanged.
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("ARGGUARD_"):
            monkeypatch.delenv(key, raising=False)


# --- Logging Fixtures ---
@pytest.fixture
def argguard_debug_logs(caplog):
    """Capture DEBUG records emitted by argguard loggers."""
    caplog.set_level(logging.DEBUG, logger="argguard")
    return caplog


# --- Test Environment Markers ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Behavioral invariants of the public API",
        "allow_env_pollution: Keep ARGGUARD_* environment variables",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)


# --- Core Fixtures ---


def _describe(kind, ret, obj):
    return {"type": kind, "ret": ret, "obj": obj}


@pytest.fixture
def describe_func():
    """A three-argument function returning its arguments as a dict."""
    return _describe


@pytest.fixture
def scope():
    """The scope used by most merge tests."""
    return {"user": 1, "project": 2}
