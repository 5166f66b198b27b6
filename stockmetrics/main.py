from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from stockmetrics.config import Settings, get_settings
from stockmetrics.core.logging import setup_logging
from stockmetrics.database import Base, engine
from stockmetrics.models import import_all_models
from stockmetrics.routers import dashboard_router, health_router, inventory_router

setup_logging()
settings: Settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    import_all_models()
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.include_router(health_router)
app.include_router(dashboard_router)
app.include_router(inventory_router)


@app.get("/")
def root():
    return RedirectResponse(url="/dashboard/overview", status_code=302)


__all__ = ["app", "root"]
