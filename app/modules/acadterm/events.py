"""Academic session events.

Builds the events the term manager posts when an academic session is added
or updated, and dispatches them through the in-process event system.
"""

from dataclasses import dataclass

from core.config import settings
from core.logging import get_module_logger
from infrastructure.events import Event, dispatch_event
from modules.acadterm.constants import (
    EVENTSERVICE_EVENT_ACADEMICSESSION_ADD,
    EVENTSERVICE_EVENT_ACADEMICSESSION_UPDATE,
    EVENTSERVICE_EVENT_RESOURCE_PREFIX,
)

logger = get_module_logger()


def session_resource_reference(session_eid: str) -> str:
    """Resource reference for an academic session.

    Raises:
        ValueError: If the EID is empty.
    """
    if not session_eid or not session_eid.strip():
        raise ValueError("Academic session EID must be a non-empty string")
    return EVENTSERVICE_EVENT_RESOURCE_PREFIX + session_eid


@dataclass
class AcademicSessionEvent(Event):
    """Event about a single academic session."""

    session_eid: str = ""

    @property
    def resource(self) -> str:
        return session_resource_reference(self.session_eid)

    def to_dict(self):
        data = super().to_dict()
        data["resource"] = self.resource
        return data


def _post(event_type: str, session_eid: str, user_id: str) -> AcademicSessionEvent:
    event = AcademicSessionEvent(
        event_type=event_type, session_eid=session_eid, user_id=user_id
    )
    resource = event.resource
    if not settings.acadterm.events_enabled:
        logger.debug("acadterm_events_disabled", event_type=event_type, resource=resource)
        return event

    logger.info("posting_academic_session_event", event_type=event_type, resource=resource)
    dispatch_event(event)
    return event


def post_session_added(session_eid: str, user_id: str = "") -> AcademicSessionEvent:
    """Post the event for a newly added academic session."""
    return _post(EVENTSERVICE_EVENT_ACADEMICSESSION_ADD, session_eid, user_id)


def post_session_updated(session_eid: str, user_id: str = "") -> AcademicSessionEvent:
    """Post the event for an updated academic session."""
    return _post(EVENTSERVICE_EVENT_ACADEMICSESSION_UPDATE, session_eid, user_id)
