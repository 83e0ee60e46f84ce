from fastapi import APIRouter

from api.routes.system import router as system_router
from modules.group_manager.controllers import router as group_manager_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(group_manager_router)
