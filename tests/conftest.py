"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
import structlog
from rest_framework.test import APIClient

from registry import signals
from registry.credentials import StaticCredentialOracle
from registry.services import EventRegistry
from registry.stores import InMemoryEventStore

ORGANIZER = "0xorganizer"
ALICE = "0xalice"
BOB = "0xbob"
CAROL = "0xcarol"
CREDENTIAL = "0xcredential"

START = datetime(2030, 5, 1, 18, 0, tzinfo=timezone.utc)
END = START + timedelta(hours=3)


@pytest.fixture(autouse=True, scope="session")
def uncached_loggers() -> None:
    """Let capture_logs swap processors under module-level loggers."""
    structlog.configure(cache_logger_on_first_use=False)


class FakeClock:
    """Deterministic clock advancing one second per reading."""

    def __init__(self) -> None:
        self.current = datetime(2030, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def oracle() -> StaticCredentialOracle:
    return StaticCredentialOracle({(CREDENTIAL, ALICE): 1, (CREDENTIAL, CAROL): 3})


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def registry(store, oracle, clock) -> EventRegistry:
    return EventRegistry(store=store, oracle=oracle, clock=clock)


@pytest.fixture
def create_event(registry):
    """Create an event with sensible defaults; keyword overrides win."""

    def _create(**overrides):
        fields = {
            "caller": ORGANIZER,
            "required_credential": CREDENTIAL,
            "name": "Launch party",
            "location": "Hall A",
            "details": "Bring your badge",
            "start_time": START,
            "end_time": END,
            "max_participants": 50,
        }
        fields.update(overrides)
        return registry.create_event(**fields)

    return _create


@pytest.fixture
def notifications():
    """Collect every registry notification as (signal name, kwargs)."""
    received: list[tuple[str, dict]] = []
    handlers = []
    for name in ("event_created", "user_registered", "user_checked_in", "event_cancelled"):

        def handler(sender, _name=name, **kwargs):
            kwargs.pop("signal", None)
            received.append((_name, kwargs))

        getattr(signals, name).connect(handler)
        handlers.append((name, handler))
    yield received
    for name, handler in handlers:
        getattr(signals, name).disconnect(handler)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def api_registry(registry, monkeypatch) -> EventRegistry:
    """Route the HTTP handlers to the in-memory registry fixture."""
    monkeypatch.setattr("registry.handlers.views.get_event_registry", lambda: registry)
    return registry
