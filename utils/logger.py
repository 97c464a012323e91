"""
Модуль для настройки логирования
"""

import logging
import sys
from config import LOG_LEVEL, LOG_FILE

LOGGER_NAME = 'ctydat'


def setup_logging(level: str = None, log_file: str = None):
    """Настройка логирования из конфига"""
    level = level or LOG_LEVEL
    log_file = log_file or LOG_FILE
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Логгеры модулей ctydat.* передают записи этому логгеру
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Удаляем существующие обработчики
    logger.handlers.clear()

    # Форматтер
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # Файловый обработчик, если задан в конфиге
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            print(f"Не удалось настроить файловое логирование: {e}", file=sys.stderr)

    # Консольный обработчик, stdout только для результатов поиска
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        logger.debug(f"Логирование в файл: {log_file}")
    logger.debug(f"Логирование настроено. Уровень: {level}")
    return logger
