"""
Модель данных стран из cty.dat
"""

from dataclasses import dataclass, field, replace
from typing import Tuple, Union


@dataclass(frozen=True)
class CqZoneOverride:
    """(#) - замена CQ зоны"""
    value: int

    def apply(self, country):
        return replace(country, cq_zone=self.value)


@dataclass(frozen=True)
class ItuZoneOverride:
    """[#] - замена ITU зоны"""
    value: int

    def apply(self, country):
        return replace(country, itu_zone=self.value)


@dataclass(frozen=True)
class CoordinatesOverride:
    """<#/#> - замена широты и долготы"""
    latitude: float
    longitude: float

    def apply(self, country):
        return replace(country, latitude=self.latitude, longitude=self.longitude)


@dataclass(frozen=True)
class ContinentOverride:
    """{aa} - замена континента"""
    continent: str

    def apply(self, country):
        return replace(country, continent=self.continent)


@dataclass(frozen=True)
class TimeOffsetOverride:
    """~#~ - замена смещения от UTC"""
    time_offset: float

    def apply(self, country):
        return replace(country, time_offset=self.time_offset)


Override = Union[CqZoneOverride, ItuZoneOverride, CoordinatesOverride,
                 ContinentOverride, TimeOffsetOverride]


@dataclass(frozen=True)
class ExactCallsign:
    """Алиас с '=' - должен совпасть с позывным полностью"""
    token: str
    overrides: Tuple[Override, ...] = ()


@dataclass(frozen=True)
class PrefixToken:
    """Обычный префикс - совпадает с любым позывным, который с него начинается"""
    token: str
    overrides: Tuple[Override, ...] = ()


AliasEntry = Union[ExactCallsign, PrefixToken]


@dataclass(frozen=True)
class CountryRecord:
    """Одна страна (запись) из cty.dat"""
    country_name: str
    cq_zone: int
    itu_zone: int
    continent: str  # 2 буквы
    latitude: float  # + для севера
    longitude: float  # + для запада
    time_offset: float  # часы от UTC
    primary_prefix: str
    # Заполняется парсером, в индексе хранится запись уже без алиасов
    alias_list: Tuple[AliasEntry, ...] = field(default=(), compare=False, repr=False)


@dataclass(frozen=True)
class ResolvedCountry:
    """Результат поиска по позывному: запись страны с примененными заменами"""
    country_name: str
    cq_zone: int
    itu_zone: int
    continent: str
    latitude: float
    longitude: float
    time_offset: float
    primary_prefix: str
    matched_alias: str
    exact_match: bool = False

    @classmethod
    def from_template(cls, country: CountryRecord, matched_alias: str,
                      exact_match: bool) -> 'ResolvedCountry':
        """Создает копию шаблона страны для конкретного совпадения"""
        return cls(
            country_name=country.country_name,
            cq_zone=country.cq_zone,
            itu_zone=country.itu_zone,
            continent=country.continent,
            latitude=country.latitude,
            longitude=country.longitude,
            time_offset=country.time_offset,
            primary_prefix=country.primary_prefix,
            matched_alias=matched_alias,
            exact_match=exact_match
        )

    def to_dict(self) -> dict:
        """Преобразует результат в словарь"""
        return {
            'country': self.country_name,
            'cq_zone': self.cq_zone,
            'itu_zone': self.itu_zone,
            'continent': self.continent,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'time_offset': self.time_offset,
            'primary_prefix': self.primary_prefix,
            'matched_alias': self.matched_alias,
            'is_exact_match': self.exact_match
        }
