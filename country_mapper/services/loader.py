"""Load country reference data from the bundled table or a remote URL."""

import csv
import io
import logging
from pathlib import Path

import httpx

from country_mapper.config import settings
from country_mapper.errors import InvalidArgumentError, ParseError, TransportError
from country_mapper.models.country import CountryInfo
from country_mapper.services.country_service import CountryInfoClient

logger = logging.getLogger(__name__)

_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "country_info.csv"
_default_text: str | None = None

_DELIMITER = ";"
_MIN_FIELDS = 12

# Column positions in the source table
_NAMES = 0
_ALPHA2 = 2
_ALPHA3 = 4
_CURRENCY = 5
_CALLING_CODE = 6
_CAPITAL = 7
_ALT_SPELLINGS = 8
_REGION = 10
_SUBREGION = 11


def _bundled_text() -> str:
    global _default_text
    if _default_text is None:
        _default_text = _DATA_PATH.read_text(encoding="utf-8")
    return _default_text


def _fetch_text(url: str) -> str:
    """GET the dataset at `url` and return the decoded body.

    Raises TransportError for anything that prevents a 2xx response, and
    ParseError when the body is not valid UTF-8.
    """
    try:
        response = httpx.get(url, timeout=settings.request_timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error("Country data fetch failed %s: HTTP %s", url, e.response.status_code)
        raise TransportError(
            f"GET {url} returned HTTP {e.response.status_code}",
            url=url,
            status_code=e.response.status_code,
        ) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("Country data fetch failed %s: %s", url, e)
        raise TransportError(f"GET {url} failed: {e}", url=url) from e

    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"response from {url} is not valid UTF-8: {e}") from e


def _split(field: str) -> list[str]:
    return field.split(",")


def parse_country_info(text: str) -> tuple[CountryInfo, ...]:
    """Parse semicolon-delimited country data into records.

    Blank lines are ignored and the first remaining row is a header. Every other row must carry at
    least twelve fields; a single short row fails the whole parse.
    """
    reader = csv.reader(io.StringIO(text), delimiter=_DELIMITER, strict=True)
    records: list[CountryInfo] = []
    header_seen = False
    try:
        for row in reader:
            if not row:
                continue
            # Header is the first non-blank row
            if not header_seen:
                header_seen = True
                continue
            if len(row) < _MIN_FIELDS:
                raise ParseError(
                    f"line {reader.line_num}: expected at least {_MIN_FIELDS} fields, got {len(row)}",
                    line=reader.line_num,
                )

            names = _split(row[_NAMES])
            # Capital tokens join the alternate-name pool alongside alt spellings
            alternate_names = names[1:] + _split(row[_CAPITAL]) + _split(row[_ALT_SPELLINGS])

            records.append(CountryInfo(
                name=names[0],
                alternate_names=alternate_names,
                alpha2=row[_ALPHA2],
                alpha3=row[_ALPHA3],
                capital=row[_CAPITAL],
                currencies=_split(row[_CURRENCY]),
                calling_codes=_split(row[_CALLING_CODE]),
                region=row[_REGION],
                subregion=row[_SUBREGION],
            ))
    except csv.Error as e:
        raise ParseError(f"line {reader.line_num}: {e}", line=reader.line_num) from e

    return tuple(records)


def load(*urls: str) -> CountryInfoClient:
    """Load country data and return a lookup client.

    With no argument the bundled dataset is used. Pass a single URL to use
    your own hosted copy of the table instead, e.g. one where some fields
    were edited for a specific use case.
    """
    if len(urls) > 1:
        raise InvalidArgumentError("only one source may be specified")

    if urls:
        source = urls[0]
        text = _fetch_text(source)
    else:
        source = "bundled dataset"
        text = _bundled_text()

    countries = parse_country_info(text)
    logger.info("Loaded %d countries from %s", len(countries), source)
    return CountryInfoClient(countries)
