"""Service layer for the group manager.

Application boundary between the HTTP controllers and the core. Resolves
the current site through the host facade, hands the snapshot to the core,
and reports None when there is nothing to show or do, which the
controllers answer with a redirect to the main page.

The host facade is registered once at startup with ``set_sakai_service``
and handed to route handlers through the ``get_sakai_service`` dependency.
"""

from typing import Optional

from fastapi import HTTPException

from core.logging import get_module_logger
from modules.group_manager.api.schemas import MainForm
from modules.group_manager.core import removal, view
from modules.group_manager.domain.types import SakaiService

logger = get_module_logger()

_sakai_service: Optional[SakaiService] = None

__all__ = [
    "show_index",
    "remove_groups",
    "set_sakai_service",
    "get_sakai_service",
    "has_sakai_service",
    "reset_sakai_service",
]


def set_sakai_service(service: SakaiService) -> None:
    """Register the host facade used by the group manager routes."""
    # pylint: disable=global-statement
    global _sakai_service
    _sakai_service = service
    logger.info("sakai_service_registered", service=type(service).__name__)


def reset_sakai_service() -> None:
    """Forget the registered host facade. Intended for tests."""
    # pylint: disable=global-statement
    global _sakai_service
    _sakai_service = None


def has_sakai_service() -> bool:
    return _sakai_service is not None


def get_sakai_service() -> SakaiService:
    """FastAPI dependency returning the registered host facade.

    Raises:
        HTTPException: 503 if no host facade has been registered.
    """
    if _sakai_service is None:
        logger.error("sakai_service_not_registered")
        raise HTTPException(
            status_code=503, detail="Group manager host service is not configured"
        )
    return _sakai_service


def show_index(sakai_service: SakaiService) -> Optional[view.GroupView]:
    """Build the index view for the current site.

    Returns:
        GroupView, or None if there is no current site.
    """
    logger.debug("show_index")
    site = sakai_service.get_current_site()
    if site is None:
        return None

    group_view = view.build_group_view(site, sakai_service)
    logger.debug(
        "listing_groups",
        group_count=len(group_view.group_list),
        site_id=site.id,
    )
    return group_view


def remove_groups(
    sakai_service: SakaiService, form: MainForm
) -> Optional[removal.RemovalResult]:
    """Delete the groups selected in a removal form from the current site.

    Returns:
        RemovalResult, or None if there is no current site or the form
        carried no group list.
    """
    logger.debug("remove_groups_called", deleted_group_list=form.deleted_group_list)
    site = sakai_service.get_current_site()
    if site is None or form.deleted_group_list is None:
        return None

    return removal.remove_groups(
        site,
        form.deleted_group_list,
        group_lookup=sakai_service,
        site_mutator=sakai_service,
        site_persister=sakai_service,
    )
