"""
Модуль для работы со статистикой поиска
"""

from datetime import datetime


class Statistics:
    """Класс для сбора и отображения статистики"""

    def __init__(self):
        self.stats = {
            'lookups': 0,
            'found': 0,
            'not_found': 0,
            'exact_matches': 0,
            'loaded_at': None,
            'source': None,
            'version': None,
            'records': 0,
            'prefixes': 0,
            'callsigns': 0,
            'duplicates': 0,
            'by_country': {}
        }

    def update_database(self, index, source: str = None):
        """Сохраняет сведения о загруженной базе"""
        self.stats['loaded_at'] = datetime.now().isoformat()
        self.stats['source'] = source
        self.stats['version'] = index.version
        self.stats['records'] = len(index.countries)
        self.stats['prefixes'] = len(index.prefix_index)
        self.stats['callsigns'] = len(index.callsign_index)
        self.stats['duplicates'] = index.duplicates

    def increment_lookup(self, result):
        """Учитывает один поиск по позывному"""
        self.stats['lookups'] += 1

        if result is None:
            self.stats['not_found'] += 1
            return

        self.stats['found'] += 1
        if result.exact_match:
            self.stats['exact_matches'] += 1

        country = result.country_name
        if country not in self.stats['by_country']:
            self.stats['by_country'][country] = 0
        self.stats['by_country'][country] += 1

    def print_stats(self, detailed: bool = False):
        """Вывод статистики"""
        print("\n" + "="*60)
        print("📊 СТАТИСТИКА CTY LOOKUP")
        print("="*60)
        print(f"Файл базы: {self.stats['source']}")
        print(f"Версия базы: {self.stats['version'] or 'неизвестна'}")
        print(f"Стран: {self.stats['records']}")
        print(f"Префиксов: {self.stats['prefixes']}")
        print(f"Точных позывных: {self.stats['callsigns']}")
        print(f"Поисков: {self.stats['lookups']}")
        print(f"Найдено: {self.stats['found']}")
        print(f"Не найдено: {self.stats['not_found']}")
        print(f"Точных совпадений: {self.stats['exact_matches']}")
        print(f"Время загрузки: {self.stats['loaded_at'][11:19] if self.stats['loaded_at'] else 'Нет'}")

        if self.stats['by_country']:
            print(f"\n📈 Найдено стран: {len(self.stats['by_country'])}")
            top_countries = sorted(self.stats['by_country'].items(), key=lambda x: x[1], reverse=True)[:5]
            print("Топ стран:")
            for country, count in top_countries:
                print(f"  {country}: {count}")

        if detailed:
            print(f"\n⚙️ Повторяющихся алиасов (заменено): {self.stats['duplicates']}")
        print("="*60)
