"""Tests for the editing session registry."""

import pytest

from invoice_editor.controller import DocumentController
from invoice_editor.models.invoice import InvoiceDocument
from invoice_editor.services import LoggingExportService
from invoice_editor.sessions import SessionRegistry


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _factory() -> DocumentController:
    return DocumentController(InvoiceDocument(), export_service=LoggingExportService())


@pytest.fixture
def clock() -> _Clock:
    return _Clock()


@pytest.fixture
def registry(clock: _Clock) -> SessionRegistry:
    return SessionRegistry(max_sessions=3, ttl_seconds=60, factory=_factory, clock=clock)


class TestSessionRegistry:
    def test_same_token_same_controller(self, registry: SessionRegistry):
        assert registry.get("a") is registry.get("a")
        assert registry.get("a") is not registry.get("b")

    def test_capacity_evicts_least_recently_used(self, registry: SessionRegistry):
        first = registry.get("a")
        registry.get("b")
        registry.get("c")
        registry.get("a")
        registry.get("d")
        assert len(registry) == 3
        assert "b" not in registry
        assert registry.get("a") is first

    def test_many_sessions_stay_bounded(self, registry: SessionRegistry):
        for i in range(1000):
            registry.get(f"token-{i}")
        assert len(registry) == 3

    def test_idle_sessions_expire(self, registry: SessionRegistry, clock: _Clock):
        stale = registry.get("a")
        clock.now = 30
        registry.get("b")
        clock.now = 61
        registry.get("b")
        assert "a" not in registry
        assert "b" in registry
        assert registry.get("a") is not stale

    def test_access_refreshes_ttl(self, registry: SessionRegistry, clock: _Clock):
        kept = registry.get("a")
        for step in range(1, 5):
            clock.now = step * 50
            assert registry.get("a") is kept

    def test_release(self, registry: SessionRegistry):
        registry.get("a")
        assert registry.release("a") is True
        assert registry.release("a") is False
        assert len(registry) == 0

    def test_edits_survive_within_session(self, registry: SessionRegistry):
        registry.get("a").add_item()
        assert len(registry.get("a").document.items) == 1

    def test_rejects_zero_capacity(self):
        with pytest.raises(ValueError):
            SessionRegistry(max_sessions=0)
