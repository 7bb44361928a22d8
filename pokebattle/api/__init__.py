from pokebattle.api.battle import router as battle_router
from pokebattle.api.health import router as health_router

__all__ = [
    "battle_router",
    "health_router",
]
