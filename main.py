"""
Главная точка входа в приложение COVID Tracking.

Настраивает логирование, выводит в консоль список штатов,
полученный из COVID Tracking API, и запускает GUI приложение.
"""

import sys

from loguru import logger
from prettytable import PrettyTable

from covid_tracking.api.errors import CovidApiError
from covid_tracking.config.config import CONFIG
from gui.data_fetcher import DataFetcher


def setup_logging():
    """
    Настраивает вывод loguru: консоль на уровне LOG_LEVEL
    и, если задан LOG_FILE, файл с ротацией.
    """
    logger.remove()
    logger.add(sys.stderr, level=CONFIG['APP']['LOG_LEVEL'])
    log_file = CONFIG['APP']['LOG_FILE']
    if log_file:
        logger.add(log_file, level="DEBUG", rotation=CONFIG['APP']['LOG_ROTATION'], encoding="utf-8")


def print_states(states):
    """
    Выводит список штатов в консоль.

    Параметры:
        states: Список объектов StateInfo.
    """
    if not states:
        logger.warning("API не вернул ни одного штата")
        return

    table = PrettyTable()
    table.field_names = ["Код", "Штат"]
    table.align["Штат"] = "l"
    for state in states:
        table.add_row([state.state, state.name])

    print("\n" + "=" * 60)
    print("СПИСОК ШТАТОВ")
    print("=" * 60)
    print(table)
    print(f"Всего штатов: {len(states)}")
    print("=" * 60 + "\n")


def main():
    """
    Главная функция приложения.

    Ошибка получения списка штатов не мешает запуску GUI:
    окно само повторит запрос при старте.
    """
    setup_logging()
    logger.info("Запуск приложения COVID Tracking")
    print("\n" + "=" * 60)
    print("COVID TRACKING")
    print("=" * 60)
    print(f"API: {CONFIG['API']['BASE_URL']}")
    print(f"Штат по умолчанию: {CONFIG['APP']['DEFAULT_STATE']}")
    print("=" * 60 + "\n")

    try:
        states = DataFetcher().get_states()
        print_states(states)
    except CovidApiError as e:
        logger.error(f"Не удалось получить список штатов: {e}")

    from gui.covid_tracking_app import main as gui_main
    gui_main()


if __name__ == "__main__":
    main()
