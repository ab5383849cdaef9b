from country_mapper.errors import CountryMapperError, InvalidArgumentError, ParseError, TransportError
from country_mapper.models.country import CountryInfo
from country_mapper.services.country_service import CountryInfoClient
from country_mapper.services.loader import load, parse_country_info

__version__ = "0.1.0"

__all__ = [
    "CountryInfo",
    "CountryInfoClient",
    "CountryMapperError",
    "InvalidArgumentError",
    "ParseError",
    "TransportError",
    "load",
    "parse_country_info",
]
