"""
Словарь с поиском по самому длинному префиксу
"""

from typing import Any, Dict, Optional


class PrefixMap:
    """Отображение строка -> значение с поиском самого длинного совпадающего префикса"""

    def __init__(self):
        self._entries: Dict[str, Any] = {}
        self._max_length = 0

    def insert(self, key: str, value: Any) -> bool:
        """Добавляет ключ. Возвращает True, если ключ уже был и значение заменено"""
        replaced = key in self._entries
        self._entries[key] = value
        if len(key) > self._max_length:
            self._max_length = len(key)
        return replaced

    def get(self, key: str, default: Any = None) -> Any:
        """Точное совпадение ключа"""
        return self._entries.get(key, default)

    def longest_prefix(self, key: str) -> Optional[Any]:
        """Значение самого длинного ключа, с которого начинается key"""
        # Проверяем префиксы от длинных к коротким
        for length in range(min(len(key), self._max_length), 0, -1):
            prefix = key[:length]
            if prefix in self._entries:
                return self._entries[prefix]
        return None

    def keys(self):
        return self._entries.keys()

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
