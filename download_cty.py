"""
Скрипт для загрузки файла cty.dat с официального источника
"""

import logging
from pathlib import Path

import requests

from config import CTY_URL, CTY_FILE, CTY_DOWNLOAD_TIMEOUT


def download_cty_dat(url: str = None, filepath: str = None, logger=None) -> bool:
    """
    Загружает файл cty.dat

    Args:
        url: URL для загрузки (по умолчанию - country-files.com)
        filepath: путь для сохранения файла
        logger: логгер (по умолчанию ctydat.download)

    Returns:
        True если файл сохранен
    """
    logger = logger or logging.getLogger('ctydat.download')
    url = url or CTY_URL
    filepath = Path(filepath or CTY_FILE)

    logger.info(f"Загрузка cty.dat из {url}...")

    try:
        response = requests.get(url, timeout=CTY_DOWNLOAD_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Ошибка загрузки cty.dat: {e}")
        return False

    try:
        filepath.write_bytes(response.content)
    except OSError as e:
        logger.error(f"Не удалось сохранить {filepath}: {e}")
        return False

    logger.info(f"[OK] Файл сохранен: {filepath} ({len(response.content)} байт)")
    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    download_cty_dat()
