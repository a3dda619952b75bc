"""Tests for event channels."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from diskfs.events import Emitter
from diskfs.types import FileChange, FileChangeType


class TestEmitter:
    """Tests for Emitter."""

    def test_fire_reaches_subscribers(self) -> None:
        """Test every listener receives the value in subscription order."""
        emitter: Emitter[list[FileChange]] = Emitter()
        calls: list[str] = []
        emitter.subscribe(lambda changes: calls.append("first"))
        emitter.subscribe(lambda changes: calls.append("second"))

        emitter.fire([FileChange(FileChangeType.ADDED, "/tmp/a")])

        assert calls == ["first", "second"]

    def test_subscription_dispose_unsubscribes(self) -> None:
        """Test disposing a subscription stops delivery."""
        emitter: Emitter[int] = Emitter()
        listener = MagicMock()
        subscription = emitter.subscribe(listener)

        subscription.dispose()
        emitter.fire(1)

        listener.assert_not_called()
        assert emitter.listener_count == 0

    def test_unsubscribe_unknown_listener(self) -> None:
        """Test unsubscribing a stranger is a no-op."""
        emitter: Emitter[int] = Emitter()

        emitter.unsubscribe(MagicMock())

        assert emitter.listener_count == 0

    def test_dispose_drops_listeners(self) -> None:
        """Test a disposed channel neither delivers nor accepts listeners."""
        emitter: Emitter[int] = Emitter()
        listener = MagicMock()
        emitter.subscribe(listener)

        emitter.dispose()
        emitter.subscribe(MagicMock())
        emitter.fire(1)

        listener.assert_not_called()
        assert emitter.disposed is True
        assert emitter.listener_count == 0

    def test_failing_listener_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test one failing listener does not starve the rest."""
        emitter: Emitter[int] = Emitter()
        emitter.subscribe(MagicMock(side_effect=RuntimeError("boom")))
        survivor = MagicMock()
        emitter.subscribe(survivor)

        with caplog.at_level(logging.ERROR, logger="diskfs.events"):
            emitter.fire(7)

        survivor.assert_called_once_with(7)
        assert "Event listener failed" in caplog.text
