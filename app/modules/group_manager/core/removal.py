"""Group removal coordinator.

Deletes a batch of requested groups from a site. Each deletion attempt
yields an OperationResult, so a lock-protected group is recorded and the
batch moves on to the next id. The site is saved once, at the end, and
only if something was actually deleted.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from core.logging import get_module_logger
from infrastructure.operations import OperationResult, OperationStatus
from modules.group_manager.domain.errors import AuthzRealmLockError
from modules.group_manager.domain.models import Group, Site
from modules.group_manager.domain.types import (
    GroupLookup,
    SiteMutator,
    SitePersister,
)

logger = get_module_logger()


@dataclass
class RemovalResult:
    """Outcome of a removal batch.

    Attributes:
        any_deleted: True if at least one group was deleted
        results: one OperationResult per requested id, in request order.
            Each carries ``{"group_id": ...}`` as data.
    """

    any_deleted: bool = False
    results: List[OperationResult] = field(default_factory=list)

    def _ids_with(self, status: OperationStatus) -> List[str]:
        return [r.data["group_id"] for r in self.results if r.status == status]

    @property
    def deleted_ids(self) -> List[str]:
        return self._ids_with(OperationStatus.SUCCESS)

    @property
    def locked_ids(self) -> List[str]:
        return self._ids_with(OperationStatus.LOCKED)

    @property
    def missing_ids(self) -> List[str]:
        return self._ids_with(OperationStatus.NOT_FOUND)


def delete_group(site: Site, group: Group, site_mutator: SiteMutator) -> OperationResult:
    """Attempt to delete one group from a site.

    A realm lock refusal is returned as a LOCKED result. Any other error
    raised by the mutator propagates.
    """
    try:
        site_mutator.delete_group(site, group)
    except AuthzRealmLockError as e:
        logger.error(
            "group_locked_cannot_delete",
            group_id=group.id,
            site_id=site.id,
            lock_mode=e.lock_mode,
        )
        return OperationResult.locked(
            f"The group {group.id} is locked and cannot be deleted.",
            data={"group_id": group.id},
        )
    return OperationResult.success(data={"group_id": group.id}, message="deleted")


def remove_groups(
    site: Site,
    requested_ids: Optional[Sequence[str]],
    group_lookup: GroupLookup,
    site_mutator: SiteMutator,
    site_persister: SitePersister,
) -> RemovalResult:
    """Delete the requested groups from a site.

    Ids are processed in the order given. Ids that resolve to no group are
    skipped. The site is saved exactly once if any deletion succeeded, and
    not at all otherwise.

    Args:
        site: Site to delete the groups from
        requested_ids: Group ids to delete; None or empty does nothing
        group_lookup: Collaborator resolving group ids
        site_mutator: Collaborator performing the deletion
        site_persister: Collaborator saving the site

    Returns:
        RemovalResult with per-id outcomes
    """
    result = RemovalResult()
    if not requested_ids:
        return result

    for group_id in requested_ids:
        logger.debug("deleting_group", group_id=group_id, site_id=site.id)
        group = group_lookup.find_group_by_id(group_id)
        if group is None:
            logger.debug("group_not_found", group_id=group_id, site_id=site.id)
            result.results.append(
                OperationResult.not_found(
                    f"Group {group_id} not found", data={"group_id": group_id}
                )
            )
            continue

        outcome = delete_group(site, group, site_mutator)
        result.results.append(outcome)
        if outcome.is_success:
            result.any_deleted = True

    if result.any_deleted:
        site_persister.save_site(site)
        logger.info(
            "groups_removed",
            site_id=site.id,
            deleted=result.deleted_ids,
            locked=result.locked_ids,
        )

    return result
