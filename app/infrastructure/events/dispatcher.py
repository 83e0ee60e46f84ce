"""Event dispatcher for the in-process event system.

Handlers are registered per event type with a decorator and are called
synchronously, in registration order, when an event is dispatched.
"""

from typing import Any, Callable, Dict, List

from core.logging import get_module_logger
from infrastructure.events.models import Event

logger = get_module_logger()

# event_type -> list of handlers
EVENT_HANDLERS: Dict[str, List[Callable]] = {}


def register_event_handler(event_type: str):
    """Decorator to register an event handler for a specific event type.

    Args:
        event_type: The type of event to handle (e.g., 'acadtermmanage.as.upd').

    Returns:
        Decorator function that registers the handler.
    """

    def decorator(handler_func: Callable) -> Callable:
        EVENT_HANDLERS.setdefault(event_type, []).append(handler_func)
        logger.debug(
            "registered_event_handler",
            handler=getattr(handler_func, "__name__", "unknown"),
            event_type=event_type,
            total_handlers=len(EVENT_HANDLERS[event_type]),
        )
        return handler_func

    return decorator


def dispatch_event(event: Event) -> List[Any]:
    """Dispatch event synchronously to all registered handlers.

    A handler that raises is logged and skipped; the remaining handlers
    still run.

    Args:
        event: The event to dispatch.

    Returns:
        List of return values from the handlers that succeeded.
    """
    results = []
    handlers = EVENT_HANDLERS.get(event.event_type, [])

    logger.info(
        "dispatching_event",
        event_type=event.event_type,
        handler_count=len(handlers),
        correlation_id=str(event.correlation_id),
    )

    for handler in handlers:
        try:
            results.append(handler(event))
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "event_handler_failed",
                handler=getattr(handler, "__name__", "unknown"),
                event_type=event.event_type,
                error=str(e),
                correlation_id=str(event.correlation_id),
            )

    return results


def get_registered_events() -> List[str]:
    """Get list of all registered event types."""
    return list(EVENT_HANDLERS.keys())


def get_handlers_for_event(event_type: str) -> List[Callable]:
    """Get all handlers registered for a specific event type."""
    return EVENT_HANDLERS.get(event_type, [])


def clear_handlers() -> None:
    """Clear all registered handlers.

    WARNING: This is intended for testing only.
    """
    EVENT_HANDLERS.clear()
    logger.debug("cleared_all_event_handlers")
