import pytest


@pytest.fixture(autouse=True)
def _safe_test_config(monkeypatch):
    """Force deterministic, quiet config for tests.

    The repo loads .env on import; these overrides keep a developer's local
    settings from leaking into test runs.
    """
    from calls_assistant.config import config, Config

    monkeypatch.setattr(Config, "DEBUG", False, raising=False)
    monkeypatch.setattr(Config, "LOG_CHAT_MESSAGES", False, raising=False)
    monkeypatch.setattr(Config, "CORS_ALLOW_ORIGINS", "*", raising=False)

    # Keep the instance in sync for any code that reads instance attributes directly.
    monkeypatch.setattr(config, "DEBUG", False, raising=False)
    monkeypatch.setattr(config, "LOG_CHAT_MESSAGES", False, raising=False)
    monkeypatch.setattr(config, "CORS_ALLOW_ORIGINS", "*", raising=False)

    return config


@pytest.fixture
def now():
    """A fixed 'current time' (Monday morning) for rule and extraction tests."""
    from datetime import datetime

    return datetime(2026, 10, 19, 9, 30, 0)


@pytest.fixture
def make_call():
    """Factory for Call objects with sensible defaults."""
    from datetime import datetime
    from calls_assistant.models import Call

    counter = {"next": 1}

    def _make(**overrides):
        fields = {
            "id": str(counter["next"]),
            "client_name": "John Smith",
            "phone_number": "+1-555-0123",
            "scheduled_time": datetime(2026, 10, 19, 15, 0),
            "duration": 30,
            "status": "scheduled",
            "notes": "Discuss Q4 sales report",
            "priority": "medium",
            "category": "Sales",
        }
        fields.update(overrides)
        counter["next"] += 1
        return Call(**fields)

    return _make


@pytest.fixture
def india_local_time(monkeypatch):
    """Run with local time pinned to UTC+5:30 (no DST)."""
    import time

    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    monkeypatch.setenv("TZ", "IST-5:30")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
