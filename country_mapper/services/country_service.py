from collections.abc import Iterable, Iterator

from country_mapper.models.country import CountryInfo


class CountryInfoClient:
    """Read-only lookups over a loaded country catalog.

    Every query is a linear scan in catalog order, so single-result lookups
    return the first matching row. The catalog is never modified after
    construction and the client can be shared between threads.
    """

    def __init__(self, countries: Iterable[CountryInfo]):
        self._countries: tuple[CountryInfo, ...] = tuple(countries)

    @property
    def countries(self) -> tuple[CountryInfo, ...]:
        return self._countries

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[CountryInfo]:
        return iter(self._countries)

    def by_name(self, name: str) -> CountryInfo | None:
        """Match the canonical name or any alternate name."""
        name = name.lower()
        return next((c for c in self._countries if c.matches_name(name)), None)

    def by_alpha2(self, alpha2: str) -> CountryInfo | None:
        alpha2 = alpha2.lower()
        return next((c for c in self._countries if c.matches_alpha2(alpha2)), None)

    def by_alpha3(self, alpha3: str) -> CountryInfo | None:
        alpha3 = alpha3.lower()
        return next((c for c in self._countries if c.matches_alpha3(alpha3)), None)

    def by_currency(self, currency: str) -> list[CountryInfo]:
        currency = currency.lower()
        return [c for c in self._countries if c.uses_currency(currency)]

    def by_calling_code(self, calling_code: str) -> list[CountryInfo]:
        calling_code = calling_code.lower()
        return [c for c in self._countries if c.has_calling_code(calling_code)]

    def by_region(self, region: str) -> list[CountryInfo]:
        region = region.lower()
        return [c for c in self._countries if c.in_region(region)]

    def by_subregion(self, subregion: str) -> list[CountryInfo]:
        subregion = subregion.lower()
        return [c for c in self._countries if c.in_subregion(subregion)]
