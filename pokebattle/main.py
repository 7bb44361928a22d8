from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokebattle.api import battle_router, health_router
from pokebattle.config import settings

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("pokebattle"),
    debug=settings.debug,
)

app.include_router(battle_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)
