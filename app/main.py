from dotenv import load_dotenv

from core.config import settings
from core.logging import get_module_logger
from modules.group_manager import service as group_manager_service
from modules.group_manager.infrastructure import dev_sakai_service
from server import server

load_dotenv()

logger = get_module_logger()

server_app = server.handler


def register_dev_host():
    """Attach a seeded in-memory host unless one is already registered.

    The seeded host has a current site, so the index page renders instead of
    redirecting to itself.
    """
    if group_manager_service.has_sakai_service():
        return
    host = dev_sakai_service()
    group_manager_service.set_sakai_service(host)
    logger.info(
        "in_memory_host_registered",
        prefix=settings.PREFIX,
        site_id=host.current_site_id,
    )


# Production hosts register their own facade; without one the routes answer 503
if not settings.is_production:
    register_dev_host()
