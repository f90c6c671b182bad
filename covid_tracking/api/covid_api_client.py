"""
Модуль для получения данных COVID-19 через COVID Tracking API.

Поддерживаемые запросы:
- /v1/states/{state}/daily.json - история по штату
- /v1/us/daily.json - история по США
- /v1/states/info.json - список штатов
"""

from typing import List, Optional

import requests
from loguru import logger

from covid_tracking.api.errors import CovidApiError, DecodeError, HttpStatusError
from covid_tracking.config.config import CONFIG
from covid_tracking.data.daily_decoder import DailyDecoder
from covid_tracking.data.models import CovidDaily, CovidUSDaily, StateInfo


class CovidTrackingClient:
    """
    Класс для получения исторических данных через COVID Tracking API.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        """
        Инициализация клиента API.

        Параметры:
            base_url: Адрес API (по умолчанию из CONFIG['API']['BASE_URL']).
            timeout: Таймаут запроса в секундах.
            session: Готовая сессия requests (используется в тестах).
        """
        self.base_url = (base_url or CONFIG['API']['BASE_URL']).rstrip('/')
        self.timeout = timeout if timeout is not None else CONFIG['API']['TIMEOUT']
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': CONFIG['API']['USER_AGENT'],
            'Accept': 'application/json'
        })
        self.decoder = DailyDecoder()

    def _get_json(self, path: str):
        """
        Выполняет GET-запрос и возвращает разобранный JSON.

        Исключения:
            HttpStatusError: Код ответа вне 2xx.
            DecodeError: Тело ответа не является JSON.
            CovidApiError: Сетевая ошибка.
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Ошибка запроса {url}: {e}")
            raise CovidApiError(str(e)) from e

        if not 200 <= response.status_code <= 299:
            logger.error(f"Код ответа {response.status_code} для {url}")
            raise HttpStatusError(response.status_code, url)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Не удалось разобрать JSON из {url}: {e}")
            raise DecodeError(f"Некорректный JSON в ответе {url}") from e

    def get_state_daily(self, state_code: str) -> List[CovidDaily]:
        """
        Получает исторические данные по штату.

        Параметры:
            state_code (str): Код штата (например, 'AZ').

        Возвращает:
            list[CovidDaily]: Записи в порядке ответа API (новые первыми).
        """
        if not state_code:
            raise ValueError("Не указан код штата")
        payload = self._get_json(f"/v1/states/{state_code.lower()}/daily.json")
        values = self.decoder.decode_state_daily(payload)
        logger.info(f"Штат {state_code}: получено {len(values)} записей")
        return values

    def get_us_daily(self) -> List[CovidUSDaily]:
        """
        Получает исторические данные по США в целом.
        """
        payload = self._get_json("/v1/us/daily.json")
        values = self.decoder.decode_us_daily(payload)
        logger.info(f"США: получено {len(values)} записей")
        return values

    def get_states_info(self) -> List[StateInfo]:
        """
        Получает список штатов с названиями.
        """
        payload = self._get_json("/v1/states/info.json")
        states = self.decoder.decode_states_info(payload)
        logger.info(f"Получено {len(states)} штатов")
        return states
