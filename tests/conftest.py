"""pytest fixtures: isolate environment and the shared logger."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep tests independent of a developer's .env and log output."""
    for name in (
        "PLANNER_TIMEZONE",
        "PLANNER_DEFAULT_CURRENCY",
        "RATE_LIMIT_MAX",
        "RATE_LIMIT_WINDOW",
        "CORS_ORIGINS",
        "ENABLE_DOCS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PLANNER_LOG_JSON", "false")
    from museum_planner.infrastructure.logging import reset_logger

    reset_logger()
    yield
    reset_logger()
