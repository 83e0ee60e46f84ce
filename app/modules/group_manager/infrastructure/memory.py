"""In-memory host adapter.

Implements every group manager collaborator against plain dicts. Used for
local development and as the host double in tests.
"""

from typing import Dict, Iterable, List, Optional

from core.logging import get_module_logger
from modules.group_manager.domain.errors import AuthzRealmLockError
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

logger = get_module_logger()

_DELETE_FORBIDDEN = (RealmLockMode.DELETE, RealmLockMode.ALL)


class InMemorySakaiService:
    """Dict backed implementation of the SakaiService facade.

    Args:
        sites: Sites known to the host
        users: Users known to the host
        current_site_id: Id of the site the current request works in
    """

    def __init__(
        self,
        sites: Optional[Iterable[Site]] = None,
        users: Optional[Iterable[User]] = None,
        current_site_id: Optional[str] = None,
    ):
        self.sites: Dict[str, Site] = {s.id: s for s in sites or []}
        self.users: Dict[str, User] = {u.id: u for u in users or []}
        self.current_site_id = current_site_id
        self.saved_sites: List[str] = []

    def get_current_site(self) -> Optional[Site]:
        if self.current_site_id is None:
            return None
        return self.sites.get(self.current_site_id)

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def find_group_by_id(self, group_id: str) -> Optional[Group]:
        """Find a group in any site, the current site first."""
        current = self.get_current_site()
        if current is not None:
            group = current.get_group(group_id)
            if group is not None:
                return group
        for site in self.sites.values():
            group = site.get_group(group_id)
            if group is not None:
                return group
        return None

    def delete_group(self, site: Site, group: Group) -> None:
        if group.realm_lock in _DELETE_FORBIDDEN:
            raise AuthzRealmLockError(group.id, group.realm_lock.value)
        # A group from another site is left alone, as the host does
        site.groups = [g for g in site.groups if g.id != group.id]

    def save_site(self, site: Site) -> None:
        self.sites[site.id] = site
        self.saved_sites.append(site.id)
        logger.debug("site_saved", site_id=site.id, group_count=len(site.groups))


def dev_sakai_service() -> InMemorySakaiService:
    """Host with one current site for running the tool locally.

    The site has a plain group, a joinable one, a group locked against
    modification, one locked against deletion and one the site setup tool
    did not create, so every list of the page has something in it.
    """
    users = [
        User(id="dev-user-1", display_name="Ada Lovelace"),
        User(id="dev-user-2", display_name="alan Turing"),
        User(id="dev-user-3", display_name="Grace Hopper"),
    ]

    def _group(group_id, title, lock=RealmLockMode.NONE, wsetup="true", **props):
        properties = {GROUP_PROP_WSETUP_CREATED: wsetup}
        properties.update(props)
        return Group(
            id=group_id,
            title=title,
            properties=properties,
            members=[Member(user_id=u.id) for u in users],
            realm_lock=lock,
        )

    site = Site(
        id="dev-site",
        title="Development Site",
        groups=[
            _group("dev-group-1", "Seminar A"),
            _group(
                "dev-group-2",
                "lab B",
                **{GROUP_PROP_JOINABLE_SET: "Labs", GROUP_PROP_JOINABLE_SET_MAX: "10"},
            ),
            _group("dev-group-3", "Graded section", lock=RealmLockMode.MODIFY),
            _group("dev-group-4", "Registrar roster", lock=RealmLockMode.DELETE),
            _group("dev-group-5", "Ad hoc", wsetup="false"),
        ],
    )
    return InMemorySakaiService(sites=[site], users=users, current_site_id=site.id)
