import logging

from fastapi import FastAPI

from contextlib import asynccontextmanager
from explore_api.db.mongo import close_client, get_client

from explore_api.core.logger import setup_json_logging, shutdown_logging
from explore_api.core.sentry import init_sentry
from explore_api.core.config import settings
from explore_api.core.middleware import RequestContextMiddleware

from explore_api.api.v1.tour_ratings import router as tour_ratings_router
from explore_api.api.v1.debug import include_debug_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    # logging first, everything else reports through it
    setup_json_logging(service=settings.app_name)
    init_sentry(settings.sentry_dsn, environment=settings.env)

    # warm the Motor client; an unreachable server only logs a warning
    await get_client()

    try:
        yield
    finally:
        await close_client()
        shutdown_logging()


app = FastAPI(title="Explore California Tour Ratings", lifespan=lifespan)

app.add_middleware(RequestContextMiddleware)

# the access record comes from RequestContextMiddleware
logging.getLogger("uvicorn.access").setLevel("WARNING")

include_debug_routes(app)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(tour_ratings_router)
