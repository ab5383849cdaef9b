import time
from fastapi import APIRouter, Request

from country_mapper import __version__

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check(request: Request):
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": __version__,
        "countries": len(request.app.state.client),
    }
