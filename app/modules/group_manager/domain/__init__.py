"""Domain layer - host entities, collaborator protocols, and errors."""

from modules.group_manager.domain.models import (
    GROUP_PROP_JOINABLE_SET,
    GROUP_PROP_JOINABLE_SET_MAX,
    GROUP_PROP_WSETUP_CREATED,
    Group,
    Member,
    RealmLockMode,
    Site,
    User,
)
from modules.group_manager.domain.errors import AuthzRealmLockError

__all__ = [
    "GROUP_PROP_JOINABLE_SET",
    "GROUP_PROP_JOINABLE_SET_MAX",
    "GROUP_PROP_WSETUP_CREATED",
    "Group",
    "Member",
    "RealmLockMode",
    "Site",
    "User",
    "AuthzRealmLockError",
]
