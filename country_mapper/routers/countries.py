from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from country_mapper.config import settings
from country_mapper.models.country import CountryInfo
from country_mapper.services.country_service import CountryInfoClient

router = APIRouter(prefix="/countries", tags=["countries"])

limiter = Limiter(key_func=get_remote_address)


def _client(request: Request) -> CountryInfoClient:
    return request.app.state.client


def _one(country: CountryInfo | None) -> CountryInfo:
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country


@router.get("", response_model=list[CountryInfo])
async def list_countries(request: Request):
    return list(_client(request).countries)


@router.get("/name/{name}", response_model=CountryInfo)
@limiter.limit(settings.rate_limit)
async def get_by_name(request: Request, name: str):
    return _one(_client(request).by_name(name))


@router.get("/alpha2/{code}", response_model=CountryInfo)
@limiter.limit(settings.rate_limit)
async def get_by_alpha2(request: Request, code: str):
    return _one(_client(request).by_alpha2(code))


@router.get("/alpha3/{code}", response_model=CountryInfo)
@limiter.limit(settings.rate_limit)
async def get_by_alpha3(request: Request, code: str):
    return _one(_client(request).by_alpha3(code))


@router.get("/currency/{code}", response_model=list[CountryInfo])
@limiter.limit(settings.rate_limit)
async def get_by_currency(request: Request, code: str):
    return _client(request).by_currency(code)


@router.get("/calling-code/{code}", response_model=list[CountryInfo])
@limiter.limit(settings.rate_limit)
async def get_by_calling_code(request: Request, code: str):
    return _client(request).by_calling_code(code)


@router.get("/region/{region}", response_model=list[CountryInfo])
@limiter.limit(settings.rate_limit)
async def get_by_region(request: Request, region: str):
    return _client(request).by_region(region)


@router.get("/subregion/{subregion}", response_model=list[CountryInfo])
@limiter.limit(settings.rate_limit)
async def get_by_subregion(request: Request, subregion: str):
    return _client(request).by_subregion(subregion)
