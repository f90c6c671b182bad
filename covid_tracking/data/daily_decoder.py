"""
Разбор JSON-ответов COVID Tracking API.

Преобразует массивы словарей из ответа сервера в объекты моделей.
Дата в API кодируется целым числом вида yyyyMMdd (например, 20201029).
"""

from datetime import date, datetime
from typing import List, Optional

from loguru import logger

from covid_tracking.api.errors import DecodeError
from covid_tracking.data.models import CovidDaily, CovidUSDaily, StateInfo

DATE_FORMAT = "%Y%m%d"


def parse_api_date(raw) -> date:
    """
    Преобразует дату из формата API (целое yyyyMMdd) в datetime.date.

    Исключения:
        ValueError: Если значение не является корректной датой.
    """
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise ValueError(f"Неподдерживаемый тип даты: {raw!r}")
    return datetime.strptime(str(raw), DATE_FORMAT).date()


def _optional_int(record: dict, key: str) -> Optional[int]:
    value = record.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Поле {key} содержит нечисловое значение {value!r}, пропускаем")
        return None


class DailyDecoder:
    """
    Класс для разбора ответов API в объекты моделей.

    Записи с некорректной датой пропускаются с предупреждением в логе,
    ответ, не являющийся JSON-массивом, приводит к DecodeError.
    """

    def _ensure_list(self, payload, source: str) -> list:
        if not isinstance(payload, list):
            raise DecodeError(f"Ожидался JSON-массив в ответе {source}, получено: {type(payload).__name__}")
        return payload

    def _record_date(self, record, source: str) -> Optional[date]:
        if not isinstance(record, dict):
            logger.warning(f"Пропущена запись {source}: ожидался объект, получено {type(record).__name__}")
            return None
        try:
            return parse_api_date(record.get("date"))
        except ValueError as e:
            logger.warning(f"Пропущена запись {source} с некорректной датой: {e}")
            return None

    def decode_state_daily(self, payload) -> List[CovidDaily]:
        """
        Разбирает ответ /v1/states/{state}/daily.json.

        Возвращает:
            list[CovidDaily]: Записи в порядке ответа сервера (новые первыми).
        """
        records = []
        for record in self._ensure_list(payload, "states daily"):
            record_date = self._record_date(record, "states daily")
            if record_date is None:
                continue
            records.append(CovidDaily(
                date=record_date,
                state=record.get("state", ""),
                death=_optional_int(record, "death"),
                positive_increase=_optional_int(record, "positiveIncrease"),
                total_test_results=_optional_int(record, "totalTestResults"),
                total_test_results_increase=_optional_int(record, "totalTestResultsIncrease"),
                death_increase=_optional_int(record, "deathIncrease"),
                hospitalized_currently=_optional_int(record, "hospitalizedCurrently"),
                data_quality_grade=record.get("dataQualityGrade"),
            ))
        logger.debug(f"Разобрано {len(records)} записей по штату")
        return records

    def decode_us_daily(self, payload) -> List[CovidUSDaily]:
        """
        Разбирает ответ /v1/us/daily.json.

        Возвращает:
            list[CovidUSDaily]: Записи в порядке ответа сервера (новые первыми).
        """
        records = []
        for record in self._ensure_list(payload, "us daily"):
            record_date = self._record_date(record, "us daily")
            if record_date is None:
                continue
            records.append(CovidUSDaily(
                date=record_date,
                states=_optional_int(record, "states"),
                death=_optional_int(record, "death"),
                death_increase=_optional_int(record, "deathIncrease"),
                hospitalized_currently=_optional_int(record, "hospitalizedCurrently"),
                hospitalized_increase=_optional_int(record, "hospitalizedIncrease"),
                in_icu_currently=_optional_int(record, "inIcuCurrently"),
                negative_increase=_optional_int(record, "negativeIncrease"),
                on_ventilator_currently=_optional_int(record, "onVentilatorCurrently"),
                positive_increase=_optional_int(record, "positiveIncrease"),
                recovered=_optional_int(record, "recovered"),
                total_test_results=_optional_int(record, "totalTestResults"),
                total_test_results_increase=_optional_int(record, "totalTestResultsIncrease"),
            ))
        logger.debug(f"Разобрано {len(records)} записей по США")
        return records

    def decode_states_info(self, payload) -> List[StateInfo]:
        """
        Разбирает ответ /v1/states/info.json.

        Записи без кода или названия штата пропускаются.
        """
        states = []
        for record in self._ensure_list(payload, "states info"):
            if not isinstance(record, dict) or not record.get("state") or not record.get("name"):
                logger.warning(f"Пропущена запись states info без кода или названия: {record!r}")
                continue
            states.append(StateInfo(record["state"], record["name"], record.get("notes")))
        logger.debug(f"Разобрано {len(states)} штатов")
        return states
