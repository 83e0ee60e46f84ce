"""Academic term manager event namespace."""

from modules.acadterm.events import (
    AcademicSessionEvent,
    post_session_added,
    post_session_updated,
    session_resource_reference,
)

__all__ = [
    "AcademicSessionEvent",
    "post_session_added",
    "post_session_updated",
    "session_resource_reference",
]
