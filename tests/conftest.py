"""Shared pytest fixtures."""

import pytest
import structlog

from camp_schedule import config


@pytest.fixture(autouse=True)
def quiet_structlog():
    """Route structlog through a logger that prints nothing."""
    structlog.configure(
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Drop the config singleton so each test sees its own environment."""
    monkeypatch.setattr(config, "_config", None)
    yield
