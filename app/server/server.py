from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from core.config import settings
from core.logging import get_module_logger
from server.lifespan import lifespan

logger = get_module_logger()


handler = FastAPI(title="Site Group Manager", lifespan=lifespan)
setup_rate_limiter(handler)

allow_origins = ["*"] if settings.is_production else settings.server.cors_origins
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

handler.include_router(api_router)
