from stockmetrics.routers.dashboard import router as dashboard_router
from stockmetrics.routers.health import router as health_router
from stockmetrics.routers.inventory import router as inventory_router

__all__ = [
    "dashboard_router",
    "health_router",
    "inventory_router",
]
