"""Event models for the in-process event system."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict
from uuid import UUID, uuid4


@dataclass
class Event:
    """Base class for events posted by the tools.

    An event records something the host should hear about, such as an
    academic session being added. The event_type is the name the host
    event service knows the event by.
    """

    event_type: str
    """The type of event (e.g., 'acadtermmanage.as.upd')."""

    timestamp: datetime = field(default_factory=datetime.now)

    correlation_id: UUID = field(default_factory=uuid4)
    """Unique ID to track related events across the system."""

    user_id: str = ""
    """Host user who triggered the event, when known."""

    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to a JSON friendly dictionary."""
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        data["correlation_id"] = str(self.correlation_id)
        return data

    def __hash__(self) -> int:
        return hash((self.correlation_id, self.timestamp))
