"""
Модуль для получения данных для окна приложения.

Содержит класс DataFetcher для удобного доступа к списку штатов,
историческим записям и рядам выбранного показателя.
"""
from covid_tracking.analytics.subjects import Subject, gather_subject_data
from covid_tracking.api.covid_api_client import CovidTrackingClient


class DataFetcher:
    """
    Класс для получения данных из COVID Tracking API.

    Предоставляет удобные методы для доступа к списку штатов,
    историческим записям по региону и рядам показателей.
    """

    def __init__(self, client=None):
        """
        Инициализация объекта DataFetcher.

        Параметры:
            client (CovidTrackingClient, optional): Клиент API.
                Если не указан, создается клиент с настройками из CONFIG.
        """
        self.client = client or CovidTrackingClient()

    def get_states(self):
        """
        Получает список штатов.

        Возвращает:
            list[StateInfo]: Штаты в порядке ответа API.
        """
        return self.client.get_states_info()

    def get_daily_records(self, region_code: str):
        """
        Получает исторические записи для региона.

        Параметры:
            region_code (str): Код штата или пустая строка для США в целом.

        Возвращает:
            list[CovidDaily] или list[CovidUSDaily]: Записи от новых к старым.
        """
        if not region_code:
            return self.client.get_us_daily()
        return self.client.get_state_daily(region_code)

    def get_series(self, records, subject: Subject):
        """
        Строит ряд показателя по возрастанию даты.

        Параметры:
            records: Записи, полученные через get_daily_records.
            subject (Subject): Выбранный показатель.

        Возвращает:
            list[TimeSeriesPoint]: Ряд по возрастанию даты.
        """
        return gather_subject_data(records, subject)
