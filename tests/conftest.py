"""Pytest configuration and shared fixtures"""

import os

import pytest

from argumend.config import Config, get_config

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached Config so each test sees its own environment"""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def clean_env():
    """Fixture that temporarily clears ARGUMEND_* environment variables.

    This ensures Config tests see the true defaults without interference
    from environment variables that might be set in the user's shell.
    """
    argumend_vars = {
        key: value for key, value in os.environ.items() if key.startswith("ARGUMEND_")
    }

    for key in argumend_vars:
        os.environ.pop(key, None)

    try:
        yield
    finally:
        # Drop anything the test set, then restore the original state
        for key in [k for k in os.environ if k.startswith("ARGUMEND_")]:
            os.environ.pop(key, None)
        for key, value in argumend_vars.items():
            os.environ[key] = value


@pytest.fixture
def clean_config(clean_env):
    """Fixture that provides a Config instance with clean environment."""
    return Config()


@pytest.fixture
def solver_keywords():
    """Keyword names of a solver-style API with many similar options"""
    return [
        "niterations",
        "ncycles_per_iteration",
        "niterations_per_cycle",
        "populations",
        "population_size",
        "maxsize",
        "maxdepth",
    ]
