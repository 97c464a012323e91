# config.py
"""
Конфигурационный файл для CTY Lookup
"""

import os
from dotenv import load_dotenv

# Загружаем переменные окружения из .env файла рядом с этим файлом
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
dotenv_path = os.path.join(BASE_DIR, '.env')
load_dotenv(dotenv_path)

# Файл базы стран
CTY_FILE = os.getenv('CTY_FILE') or os.path.join(BASE_DIR, 'cty.dat')

# Загрузка свежей базы с country-files.com
CTY_URL = os.getenv('CTY_URL') or 'https://www.country-files.com/cty/cty.dat'
CTY_DOWNLOAD_TIMEOUT = float(os.getenv('CTY_DOWNLOAD_TIMEOUT') or '30')  # секунды

# Логирование
LOG_LEVEL = os.getenv('LOG_LEVEL') or 'INFO'
LOG_FILE = os.getenv('LOG_FILE')
