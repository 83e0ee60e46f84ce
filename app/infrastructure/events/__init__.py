"""In-process event system.

Usage:

    from infrastructure.events import Event, register_event_handler, dispatch_event

    @register_event_handler("acadtermmanage.as.upd")
    def handle_session_updated(event: Event) -> None:
        ...

    dispatch_event(Event(event_type="acadtermmanage.as.upd"))
"""

from infrastructure.events.dispatcher import (
    clear_handlers,
    dispatch_event,
    get_handlers_for_event,
    get_registered_events,
    register_event_handler,
)
from infrastructure.events.models import Event

__all__ = [
    "Event",
    "clear_handlers",
    "dispatch_event",
    "get_handlers_for_event",
    "get_registered_events",
    "register_event_handler",
]
