"""
Индекс позывных и префиксов, построенный по разобранному cty.dat
"""

import logging
import re
import time
from collections import namedtuple
from dataclasses import replace
from typing import Iterable, List, Optional

from ctydat.parser import parse_cty
from ctydat.prefix_map import PrefixMap
from models.country import CountryRecord, ExactCallsign, ResolvedCountry

# Версия базы записана в файле как псевдо-позывной, например =VER20240801
VERSION_RE = re.compile(r'^VER(\d{8})$', re.IGNORECASE)

_ASCII_LOWER = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ',
    'abcdefghijklmnopqrstuvwxyz'
)

IndexEntry = namedtuple('IndexEntry', ('country', 'overrides', 'token'))


def ascii_lower(value: str) -> str:
    """Переводит в нижний регистр только ASCII буквы"""
    return value.translate(_ASCII_LOWER)


class CtyIndex:
    """
    Индекс стран cty.dat.

    Два словаря с поиском по префиксу: точные позывные (=CALL) и префиксы.
    Ключи хранятся в нижнем регистре. Каждый элемент ссылается на общую
    запись страны и цепочку замен своего алиаса. После построения индекс
    не изменяется, поэтому его можно читать из нескольких потоков.
    """

    def __init__(self, records: Iterable[CountryRecord], logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self.callsign_index = PrefixMap()
        self.prefix_index = PrefixMap()
        self.countries: List[CountryRecord] = []
        self.version: Optional[str] = None
        self.duplicates = 0

        for record in records:
            self._add_country(record)

        if self.duplicates:
            # При повторе ключа побеждает последняя запись в файле
            self.logger.debug(f"Заменено {self.duplicates} повторяющихся алиасов")

    def _add_country(self, record: CountryRecord):
        """Добавляет страну и все ее алиасы в индекс"""
        aliases = record.alias_list
        country = replace(record, alias_list=())
        self.countries.append(country)

        for alias in aliases:
            entry = IndexEntry(country, alias.overrides, alias.token)
            if isinstance(alias, ExactCallsign):
                target = self.callsign_index
                match = VERSION_RE.match(alias.token)
                if match:
                    self.version = match.group(1)
            else:
                target = self.prefix_index

            if target.insert(ascii_lower(alias.token), entry):
                self.duplicates += 1

    def resolve(self, callsign: str) -> Optional[ResolvedCountry]:
        """
        Находит страну по позывному.

        Сначала точное совпадение среди =позывных, затем самый длинный префикс.

        Returns:
            ResolvedCountry с примененными заменами или None
        """
        key = ascii_lower(callsign)

        entry = self.callsign_index.get(key)
        exact = entry is not None
        if entry is None:
            entry = self.prefix_index.longest_prefix(key)
        if entry is None:
            return None

        result = ResolvedCountry.from_template(entry.country, entry.token, exact)
        for override in entry.overrides:
            result = override.apply(result)
        return result

    def __len__(self) -> int:
        return len(self.countries)


def build(raw_text: str, logger=None) -> CtyIndex:
    """
    Разбирает текст cty.dat и строит индекс.

    Raises:
        ParseError: если текст не соответствует формату
    """
    logger = logger or logging.getLogger(__name__)
    started = time.perf_counter()

    records = parse_cty(raw_text, logger)
    index = CtyIndex(records, logger)

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.debug(f"Разобрано {len(records)} записей за {elapsed_ms:.0f} мс "
                 f"(префиксов: {len(index.prefix_index)}, позывных: {len(index.callsign_index)})")
    return index


def resolve(index: CtyIndex, callsign: str) -> Optional[ResolvedCountry]:
    """Возвращает страну для позывного или None"""
    return index.resolve(callsign)
