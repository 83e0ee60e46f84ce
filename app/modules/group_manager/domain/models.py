"""Host platform entities read by the group manager.

These dataclasses mirror the parts of the host's site, group and user model
that the group manager reads. They are snapshots handed over by the host;
the group manager never creates or persists them itself.

Group properties are kept exactly as the host persists them: a flat
``str -> str`` bag where flags are the strings "true"/"false". Values are
converted to Python types only when read (see ``parse_bool_property``).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

# Property names as persisted by the host
GROUP_PROP_WSETUP_CREATED = "group_prop_wsetup_created"
GROUP_PROP_JOINABLE_SET = "joinable_set"
GROUP_PROP_JOINABLE_SET_MAX = "joinable_set_max"


class RealmLockMode(str, Enum):
    """Restriction a realm lock places on a group."""

    NONE = "NONE"
    MODIFY = "MODIFY"
    DELETE = "DELETE"
    ALL = "ALL"


@dataclass
class User:
    """Host user as returned by the user directory.

    Attributes:
        id: internal user id
        display_name: name shown in member lists
    """

    id: str
    display_name: str


@dataclass
class Member:
    """Reference from a group to a user."""

    user_id: str


@dataclass
class Group:
    """Named subset of a site's members.

    Attributes:
        id: group id, unique within its site
        title: group title
        properties: host property bag
        members: member references, in host order
        realm_lock: current lock mode of the group's realm
        description: optional description
    """

    id: str
    title: str
    properties: Dict[str, str] = field(default_factory=dict)
    members: List[Member] = field(default_factory=list)
    realm_lock: RealmLockMode = RealmLockMode.NONE
    description: Optional[str] = None

    def get_property(self, name: str) -> Optional[str]:
        return self.properties.get(name)


@dataclass
class Site:
    """Course or project workspace holding groups."""

    id: str
    title: Optional[str] = None
    groups: List[Group] = field(default_factory=list)

    def get_group(self, group_id: str) -> Optional[Group]:
        for group in self.groups:
            if group.id == group_id:
                return group
        return None


def parse_bool_property(value: Optional[str]) -> bool:
    """Read a host boolean property.

    The host writes flags as "true"/"false". Only "true", compared without
    regard to case, reads as True; a missing value or anything else is False.
    """
    return value is not None and value.lower() == "true"


def is_wsetup_created(group: Group) -> bool:
    """True if the group was created through the site setup tools."""
    return parse_bool_property(group.get_property(GROUP_PROP_WSETUP_CREATED))
