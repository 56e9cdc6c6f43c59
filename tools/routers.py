import logging
from fastapi import FastAPI, APIRouter

logger = logging.getLogger(__name__)


def gather_routers(app: FastAPI, routers: list[APIRouter]) -> FastAPI:
    for router in routers:
        app.include_router(router)
        logger.debug("Registered router %s", router.prefix)
    return app
