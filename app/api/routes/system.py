from fastapi import APIRouter, Request
from core.config import settings
from api.dependencies.rate_limits import get_limiter
from modules.group_manager.service import has_sakai_service

router = APIRouter(tags=["System"])
limiter = get_limiter()


@router.get("/version")
@limiter.limit(settings.server.SYSTEM_RATE_LIMIT)
def get_version(request: Request):  # pylint: disable=unused-argument
    """Return the deployed git sha."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit(settings.server.SYSTEM_RATE_LIMIT)
def get_health(request: Request):  # pylint: disable=unused-argument
    """Healthcheck endpoint.

    The process is healthy even before a host is attached; ``host`` only
    reports whether the group manager routes can serve requests yet.
    """
    return {"status": "ok", "host": has_sakai_service()}
