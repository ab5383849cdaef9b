import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from country_mapper import __version__
from country_mapper.config import settings
from country_mapper.routers import health, countries
from country_mapper.services.loader import load

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

app = FastAPI(title="country-mapper", version=__version__)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)


@app.get("/")
async def root():
    return {
        "name": "country-mapper API",
        "version": __version__,
        "endpoints": ["/health", "/countries"],
    }


@app.on_event("startup")
async def startup():
    if settings.source_url:
        app.state.client = load(settings.source_url)
    else:
        app.state.client = load()
    logger.info("country-mapper API is running with %d countries", len(app.state.client))
