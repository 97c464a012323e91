#!/usr/bin/env python3
"""
Главный файл запуска CTY Lookup
"""

import argparse
import json
import sys

from config import CTY_FILE, CTY_URL
from cty_lookup import CTYDatabase, CTYLoadError, print_dxcc_info
from ctydat.parser import ParseError
from download_cty import download_cty_dat
from utils.logger import setup_logging


def main(argv=None) -> int:
    """Основная функция запуска"""
    parser = argparse.ArgumentParser(
        description='CTY Lookup - определение страны DXCC по позывному',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  %(prog)s OH2ET                # Поиск одного позывного
  %(prog)s OH2ET K1ABC --json   # Вывод в JSON
  %(prog)s --download K1ABC     # Скачать свежий cty.dat и искать
  %(prog)s --stats              # Показать сведения о базе
        """
    )

    parser.add_argument('callsigns', nargs='*', metavar='CALLSIGN',
                        help='Позывные для поиска')
    parser.add_argument('--file', default=CTY_FILE,
                        help=f'Путь к cty.dat (по умолчанию: {CTY_FILE})')
    parser.add_argument('--download', action='store_true',
                        help=f'Скачать cty.dat с {CTY_URL} перед поиском')
    parser.add_argument('--json', action='store_true',
                        help='Вывод результата в JSON')
    parser.add_argument('--stats', action='store_true',
                        help='Показать статистику базы и поиска')

    args = parser.parse_args(argv)
    logger = setup_logging()

    if args.download and not download_cty_dat(filepath=args.file, logger=logger):
        return 1

    try:
        db = CTYDatabase(args.file, logger=logger)
    except ParseError as e:
        logger.error(f"Ошибка разбора {args.file}: {e}")
        return 1
    except (OSError, CTYLoadError) as e:
        logger.error(f"Не удалось загрузить {args.file}: {e}")
        return 1

    if args.json:
        results = {callsign: db.get_dxcc_info(callsign) for callsign in args.callsigns}
        print(json.dumps(results, indent=2, ensure_ascii=False))
    else:
        for callsign in args.callsigns:
            print_dxcc_info(callsign, db)
            print()

    if args.stats:
        db.stats.print_stats(detailed=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
