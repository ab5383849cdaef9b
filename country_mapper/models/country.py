from typing import Any

from pydantic import BaseModel, PrivateAttr


class CountryInfo(BaseModel):
    model_config = {"frozen": True}

    name: str
    alternate_names: tuple[str, ...] = ()
    alpha2: str
    alpha3: str
    capital: str = ""
    currencies: tuple[str, ...] = ()
    calling_codes: tuple[str, ...] = ()
    region: str = ""
    subregion: str = ""

    # Lower-cased match keys, filled once at construction
    _name_lower: str = PrivateAttr("")
    _alternate_names_lower: tuple[str, ...] = PrivateAttr(())
    _alpha2_lower: str = PrivateAttr("")
    _alpha3_lower: str = PrivateAttr("")
    _currencies_lower: tuple[str, ...] = PrivateAttr(())
    _calling_codes_lower: tuple[str, ...] = PrivateAttr(())
    _region_lower: str = PrivateAttr("")
    _subregion_lower: str = PrivateAttr("")

    def model_post_init(self, __context: Any) -> None:
        self._name_lower = self.name.lower()
        self._alternate_names_lower = tuple(n.lower() for n in self.alternate_names)
        self._alpha2_lower = self.alpha2.lower()
        self._alpha3_lower = self.alpha3.lower()
        self._currencies_lower = tuple(c.lower() for c in self.currencies)
        self._calling_codes_lower = tuple(c.lower() for c in self.calling_codes)
        self._region_lower = self.region.lower()
        self._subregion_lower = self.subregion.lower()

    def matches_name(self, name_lower: str) -> bool:
        return name_lower == self._name_lower or name_lower in self._alternate_names_lower

    def matches_alpha2(self, alpha2_lower: str) -> bool:
        return alpha2_lower == self._alpha2_lower

    def matches_alpha3(self, alpha3_lower: str) -> bool:
        return alpha3_lower == self._alpha3_lower

    def uses_currency(self, currency_lower: str) -> bool:
        return currency_lower in self._currencies_lower

    def has_calling_code(self, calling_code_lower: str) -> bool:
        return calling_code_lower in self._calling_codes_lower

    def in_region(self, region_lower: str) -> bool:
        return region_lower == self._region_lower

    def in_subregion(self, subregion_lower: str) -> bool:
        return subregion_lower == self._subregion_lower
