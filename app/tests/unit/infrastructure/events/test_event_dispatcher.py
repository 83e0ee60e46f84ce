"""Unit tests for the in-process event dispatcher."""

import pytest
from unittest.mock import MagicMock

from infrastructure.events.dispatcher import (
    dispatch_event,
    get_handlers_for_event,
    get_registered_events,
    register_event_handler,
)

pytestmark = pytest.mark.unit


class TestEventRegistration:
    """Test event handler registration."""

    def test_register_returns_original_function(self, mock_event_handler):
        decorated = register_event_handler("test.event")(mock_event_handler)

        assert decorated is mock_event_handler
        assert get_registered_events() == ["test.event"]
        assert get_handlers_for_event("test.event") == [mock_event_handler]

    def test_handlers_kept_in_registration_order(self):
        handler1 = MagicMock()
        handler2 = MagicMock()

        register_event_handler("test.multi")(handler1)
        register_event_handler("test.multi")(handler2)

        assert get_handlers_for_event("test.multi") == [handler1, handler2]

    def test_unregistered_event_has_no_handlers(self):
        assert get_registered_events() == []
        assert get_handlers_for_event("nonexistent") == []


class TestEventDispatch:
    """Test synchronous event dispatch."""

    def test_dispatch_calls_handlers_and_returns_results(self, event_factory):
        @register_event_handler("test.event")
        def first(e):
            return "result1"

        @register_event_handler("test.event")
        def second(e):
            return "result2"

        assert dispatch_event(event_factory(event_type="test.event")) == [
            "result1",
            "result2",
        ]

    def test_dispatch_without_handlers(self, event_factory):
        assert dispatch_event(event_factory(event_type="unregistered.event")) == []

    def test_failing_handler_does_not_stop_others(self, event_factory):
        failing = MagicMock(side_effect=ValueError("Handler error"))
        working = MagicMock(return_value="success")
        event = event_factory(event_type="test.event")
        register_event_handler("test.event")(failing)
        register_event_handler("test.event")(working)

        results = dispatch_event(event)

        failing.assert_called_once_with(event)
        working.assert_called_once_with(event)
        assert results == ["success"]

    def test_dispatch_routes_by_event_type(self, event_factory):
        handler1 = MagicMock()
        handler2 = MagicMock()
        register_event_handler("event.type1")(handler1)
        register_event_handler("event.type2")(handler2)
        event1 = event_factory(event_type="event.type1")

        dispatch_event(event1)

        handler1.assert_called_once_with(event1)
        handler2.assert_not_called()
