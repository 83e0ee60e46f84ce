"""Collaborator protocols for the group manager.

The group manager reaches the host platform only through these protocols.
They are passed in explicitly, so the core functions can be driven by the
real host adapter, the in-memory adapter, or a test double.
"""

from typing import Optional, Protocol

from modules.group_manager.domain.models import Group, Site, User


class CurrentSiteProvider(Protocol):
    """Resolves the site the current request is working in."""

    def get_current_site(self) -> Optional[Site]: ...


class UserLookup(Protocol):
    """Resolves a user id to a user, or None if the user is unknown."""

    def get_user(self, user_id: str) -> Optional[User]: ...


class GroupLookup(Protocol):
    """Resolves a group id to a group, or None if no such group exists."""

    def find_group_by_id(self, group_id: str) -> Optional[Group]: ...


class SiteMutator(Protocol):
    """Removes groups from a site.

    ``delete_group`` raises ``AuthzRealmLockError`` when the group's lock
    mode forbids deletion. Other failures are the host's own and propagate.
    """

    def delete_group(self, site: Site, group: Group) -> None: ...


class SitePersister(Protocol):
    """Saves a mutated site back to the host."""

    def save_site(self, site: Site) -> None: ...


class SakaiService(
    CurrentSiteProvider, UserLookup, GroupLookup, SiteMutator, SitePersister, Protocol
):
    """Host facade combining every collaborator the tool needs."""
