"""Group view builder.

Turns a snapshot of a site's groups into the lists and maps the group
manager's index page shows:

  - the visible groups (created through site setup), sorted by title
  - the groups locked against modification
  - the groups locked against deletion
  - per visible group: a member summary and the joinable set fields

Nothing here mutates the site or talks to the host beyond user lookups.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional

from modules.group_manager.constants import MEMBER_SEPARATOR
from modules.group_manager.domain.models import (
    GROUP_PROP_JOINABLE_SET,
    GROUP_PROP_JOINABLE_SET_MAX,
    Group,
    RealmLockMode,
    Site,
    User,
    is_wsetup_created,
)
from modules.group_manager.domain.types import UserLookup

MODIFY_LOCK_MODES: FrozenSet[RealmLockMode] = frozenset(
    {RealmLockMode.ALL, RealmLockMode.MODIFY}
)
DELETE_LOCK_MODES: FrozenSet[RealmLockMode] = frozenset(
    {RealmLockMode.ALL, RealmLockMode.DELETE}
)


@dataclass
class GroupView:
    """Presentation-ready view of a site's groups.

    The three maps are keyed by group id and hold an entry for every group
    in ``group_list``. Joinable set values are None when the group carries
    no such property.
    """

    site_id: str
    group_list: List[Group] = field(default_factory=list)
    locked_group_list: List[Group] = field(default_factory=list)
    locked_for_deletion_group_list: List[Group] = field(default_factory=list)
    group_member_map: Dict[str, str] = field(default_factory=dict)
    group_joinable_set_map: Dict[str, Optional[str]] = field(default_factory=dict)
    group_joinable_set_size_map: Dict[str, Optional[str]] = field(
        default_factory=dict
    )


def collation_key(text: Optional[str]) -> str:
    """Case-insensitive sort key shared by group titles and member names."""
    return (text or "").casefold()


def visible_groups(groups: Iterable[Group]) -> List[Group]:
    """Groups created through site setup, sorted by title.

    ``sorted`` is stable, so groups with equal titles keep site order.
    """
    return sorted(
        (g for g in groups if is_wsetup_created(g)),
        key=lambda g: collation_key(g.title),
    )


def groups_locked_for(
    groups: Iterable[Group], lock_modes: FrozenSet[RealmLockMode]
) -> List[Group]:
    """Groups whose lock mode is one of ``lock_modes``, in site order."""
    return [g for g in groups if g.realm_lock in lock_modes]


def resolve_members(group: Group, user_lookup: UserLookup) -> List[User]:
    """Resolve a group's members to users, sorted by display name.

    Members the lookup cannot resolve are left out.
    """
    users = []
    for member in group.members:
        user = user_lookup.get_user(member.user_id)
        if user is not None:
            users.append(user)
    return sorted(users, key=lambda u: collation_key(u.display_name))


def member_summary(group: Group, user_lookup: UserLookup) -> str:
    """Comma separated display names of a group's resolvable members."""
    return MEMBER_SEPARATOR.join(
        u.display_name for u in resolve_members(group, user_lookup)
    )


def build_group_view(site: Site, user_lookup: UserLookup) -> GroupView:
    """Build the group manager view for a site snapshot.

    Args:
        site: Site whose groups are listed
        user_lookup: Collaborator resolving member user ids

    Returns:
        GroupView with the visible, locked and locked-for-deletion lists and
        the member, joinable set and joinable set size maps
    """
    groups = list(site.groups)
    view = GroupView(
        site_id=site.id,
        group_list=visible_groups(groups),
        locked_group_list=groups_locked_for(groups, MODIFY_LOCK_MODES),
        locked_for_deletion_group_list=groups_locked_for(groups, DELETE_LOCK_MODES),
    )

    for group in view.group_list:
        view.group_member_map[group.id] = member_summary(group, user_lookup)
        view.group_joinable_set_map[group.id] = group.get_property(
            GROUP_PROP_JOINABLE_SET
        )
        view.group_joinable_set_size_map[group.id] = group.get_property(
            GROUP_PROP_JOINABLE_SET_MAX
        )

    return view
