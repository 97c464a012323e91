"""
Утилита для определения DXCC страны по позывному с использованием базы cty.dat
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from config import CTY_FILE
from ctydat.index import build
from models.country import CountryRecord, ResolvedCountry
from utils.stats import Statistics


class CTYLoadError(Exception):
    """Файл cty.dat не удалось прочитать как текст"""
    pass


class CTYDatabase:
    """База данных CTY (cty.dat)"""

    def __init__(self, filename: str = None, logger=None):
        self.logger = logger or logging.getLogger('ctydat.lookup')
        self.filename = str(filename or CTY_FILE)
        self.stats = Statistics()
        self.index = self._load_file(self.filename)
        self.stats.update_database(self.index, self.filename)

    def _load_file(self, filename: str):
        """Загружает файл cty.dat и строит индекс"""
        try:
            raw = Path(filename).read_bytes()
        except OSError as e:
            self.logger.error(f"Ошибка чтения {filename}: {e}")
            raise

        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            self.logger.error(f"Файл {filename} не является текстом UTF-8: {e}")
            raise CTYLoadError(f"{filename}: {e}") from e

        index = build(text, self.logger)
        self.logger.info(f"Загружено {len(index.countries)} стран из {filename}")
        return index

    @property
    def entries(self) -> List[CountryRecord]:
        return self.index.countries

    @property
    def version(self) -> Optional[str]:
        return self.index.version

    def find_by_callsign(self, callsign: str) -> Optional[ResolvedCountry]:
        """Находит страну по позывному"""
        result = self.index.resolve(callsign.strip())
        self.stats.increment_lookup(result)
        return result

    def get_dxcc_prefix(self, callsign: str) -> Optional[str]:
        """Возвращает DXCC префикс для позывного"""
        entry = self.find_by_callsign(callsign)
        return entry.primary_prefix if entry else None

    def get_country_name(self, callsign: str) -> Optional[str]:
        """Возвращает название страны"""
        entry = self.find_by_callsign(callsign)
        return entry.country_name if entry else None

    def get_dxcc_info(self, callsign: str) -> Optional[Dict]:
        """Возвращает полную информацию о стране для позывного"""
        entry = self.find_by_callsign(callsign)
        if not entry:
            return None

        info = {'callsign': callsign}
        info.update(entry.to_dict())
        return info


# Глобальный экземпляр
_cty_db = None

def get_cty_database() -> CTYDatabase:
    """Возвращает глобальный экземпляр базы"""
    global _cty_db
    if _cty_db is None:
        _cty_db = CTYDatabase()
    return _cty_db

def get_dxcc_from_cty(callsign: str) -> Optional[str]:
    """Возвращает DXCC префикс по позывному из cty.dat"""
    db = get_cty_database()
    return db.get_dxcc_prefix(callsign)


def get_dxcc_info(callsign: str) -> Optional[Dict]:
    """Возвращает полную информацию о стране DXCC для позывного"""
    db = get_cty_database()
    return db.get_dxcc_info(callsign)


def print_dxcc_info(callsign: str, db: CTYDatabase = None):
    """Выводит информацию о стране DXCC в читаемом формате"""
    db = db or get_cty_database()
    info = db.get_dxcc_info(callsign)

    if not info:
        print(f"Страна DXCC для позывного '{callsign}' не найдена")
        return

    print(f"Позывной: {info['callsign']}")
    print(f"Страна: {info['country']}")
    print(f"Континент: {info['continent']}")
    print(f"CQ зона: {info['cq_zone']}")
    print(f"ITU зона: {info['itu_zone']}")
    print(f"Широта: {info['latitude']:.2f}")
    print(f"Долгота: {info['longitude']:.2f}")
    print(f"Часовой пояс: UTC{info['time_offset']:+.1f}")
    print(f"Основной префикс: {info['primary_prefix']}")
    print(f"Сопоставленный алиас: {info['matched_alias']}")
    if info['is_exact_match']:
        print("Тип совпадения: Точное")
