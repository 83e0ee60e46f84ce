"""Host adapters for the group manager."""

from modules.group_manager.infrastructure.memory import (
    InMemorySakaiService,
    dev_sakai_service,
)

__all__ = ["InMemorySakaiService", "dev_sakai_service"]
