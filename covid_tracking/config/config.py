"""
Настройки приложения COVID Tracking.

Значения берутся из переменных окружения. Если рядом с модулем лежит файл
covid_tracking.env, он загружается через python-dotenv.
"""
import os
from pathlib import Path
from dotenv import load_dotenv
from loguru import logger

ENV_FILE_PATH = Path(__file__).parent / "covid_tracking.env"

# Загрузка переменных окружения из файла .env (если он есть)
try:
    load_dotenv(dotenv_path=str(ENV_FILE_PATH))
except Exception as e:
    logger.error(f"Ошибка при загрузке переменных окружения: {e}")


def _env_int(name: str, default: int) -> int:
    """Читает целое число из окружения, при ошибке возвращает default."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Некорректное значение {name}={raw!r}, используем {default}")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Некорректное значение {name}={raw!r}, используем {default}")
        return default


CONFIG = {
    'API': {
        'BASE_URL': os.getenv('COVID_API_URL', 'https://api.covidtracking.com'),
        'TIMEOUT': _env_float('COVID_API_TIMEOUT', 15.0),  # секунды
        'USER_AGENT': os.getenv('COVID_API_USER_AGENT', 'covid-tracking-desktop/1.0'),
    },
    'CHART': {
        'MARGIN': 75.0,  # отступ области графика со всех сторон, px
        'VERTICAL_TICKS': 10,  # желаемое число делений по оси значений
        'HORIZONTAL_TICKS': 8,  # число промежуточных делений по оси дат
        'LABEL_MIN_DISTANCE': 30.0,  # минимальное расстояние между подписями дат, px
        'AVERAGE_WINDOW': 7,
    },
    'APP': {
        'DEFAULT_STATE': os.getenv('COVID_DEFAULT_STATE', 'AZ'),
        'LOG_LEVEL': os.getenv('COVID_LOG_LEVEL', 'INFO'),
        'LOG_FILE': os.getenv('COVID_LOG_FILE'),  # None - только консоль
        'LOG_ROTATION': os.getenv('COVID_LOG_ROTATION', '10 MB'),
        'WORKERS': _env_int('COVID_FETCH_WORKERS', 2),
    }
}
