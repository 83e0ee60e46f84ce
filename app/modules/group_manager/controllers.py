from typing import Union

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from core.config import settings
from core.logging import get_module_logger
from modules.group_manager import service
from modules.group_manager.api import schemas
from modules.group_manager.constants import INDEX_ROUTE, MAIN_ROUTE, REMOVE_GROUPS_ROUTE
from modules.group_manager.domain.types import SakaiService

logger = get_module_logger()

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

# Controllers are thin adapters: they resolve the host facade, call the
# service boundary, and either return the page model or send the browser
# back to the main page.
router = APIRouter(prefix=settings.group_manager.path, tags=["group-manager"])


def _redirect_to_main(request: Request) -> RedirectResponse:
    return RedirectResponse(
        url=request.url_for("show_index_main").path,
        status_code=settings.group_manager.redirect_status,
    )


async def read_main_form(request: Request) -> schemas.MainForm:
    """Read the removal form from an HTML form post or a JSON body.

    A form post carries one ``deletedGroupList`` field per checked group;
    no checked group means no list. An empty body is an empty form.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form = await request.form()
        return schemas.MainForm(deleted_group_list=form.getlist("deletedGroupList") or None)

    body = await request.body()
    if not body.strip():
        return schemas.MainForm()
    try:
        return schemas.MainForm.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e


@router.get(MAIN_ROUTE, name="show_index_main", response_model=schemas.GroupViewResponse)
@router.get(INDEX_ROUTE, name="show_index", response_model=schemas.GroupViewResponse)
def show_index(
    request: Request,
    sakai_service: SakaiService = Depends(service.get_sakai_service),
) -> Union[schemas.GroupViewResponse, RedirectResponse]:
    """List the groups of the current site.

    Returns the page model with the visible, locked and locked-for-deletion
    groups and the per-group member and joinable set maps. Redirects to the
    main page when there is no current site.
    """
    group_view = service.show_index(sakai_service)
    if group_view is None:
        return _redirect_to_main(request)
    return schemas.GroupViewResponse.from_view(group_view)


@router.post(REMOVE_GROUPS_ROUTE)
def remove_groups(
    request: Request,
    form: schemas.MainForm = Depends(read_main_form),
    sakai_service: SakaiService = Depends(service.get_sakai_service),
) -> RedirectResponse:
    """Delete the selected groups, then return to the list of groups.

    Lock-protected groups are skipped and logged; the remaining groups are
    still deleted.
    """
    result = service.remove_groups(sakai_service, form)
    if result is not None and result.locked_ids:
        logger.warning("locked_groups_not_deleted", group_ids=result.locked_ids)
    return _redirect_to_main(request)
