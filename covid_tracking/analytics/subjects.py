"""
Показатели (subjects), которые можно отобразить на графике.

Таблица SUBJECT_FIELDS связывает каждый показатель с полем записи API,
а gather_subject_data строит из записей ряд, упорядоченный по возрастанию даты.
"""

from enum import Enum
from typing import Iterable, List

from loguru import logger

from covid_tracking.data.models import TimeSeriesPoint


class Subject(Enum):
    NEW_TESTS = "new_tests"
    NEW_CASES = "new_cases"
    CURRENT_HOSPITALIZATIONS = "current_hospitalizations"
    NEW_DEATHS = "new_deaths"


DEFAULT_SUBJECT = Subject.NEW_CASES

# Показатель -> атрибут модели CovidDaily / CovidUSDaily
SUBJECT_FIELDS = {
    Subject.NEW_TESTS: "total_test_results_increase",
    Subject.NEW_CASES: "positive_increase",
    Subject.CURRENT_HOSPITALIZATIONS: "hospitalized_currently",
    Subject.NEW_DEATHS: "death_increase",
}

# Порядок кнопок на панели и их подписи
SUBJECT_TITLES = {
    Subject.NEW_TESTS: "New tests",
    Subject.NEW_CASES: "New cases",
    Subject.CURRENT_HOSPITALIZATIONS: "Current hospitalizations",
    Subject.NEW_DEATHS: "New deaths",
}

# Заголовок колонки значений в таблице
SUBJECT_COLUMN_TITLES = {
    Subject.NEW_TESTS: "Results Increase",
    Subject.NEW_CASES: "Positive Increase",
    Subject.CURRENT_HOSPITALIZATIONS: "Hospitalizations",
    Subject.NEW_DEATHS: "Death Increase",
}


def extract_value(record, subject: Subject) -> int:
    """
    Возвращает значение показателя из записи API, отсутствующее значение дает 0.
    """
    value = getattr(record, SUBJECT_FIELDS[subject], None)
    return int(value) if value is not None else 0


def gather_subject_data(records: Iterable, subject: Subject) -> List[TimeSeriesPoint]:
    """
    Строит ряд для выбранного показателя.

    API отдает записи от новых к старым; ряд всегда нормализуется
    по возрастанию даты: series[0] - самая ранняя дата, series[-1] - последняя.

    Параметры:
        records: Записи CovidDaily или CovidUSDaily.
        subject: Выбранный показатель.

    Возвращает:
        list[TimeSeriesPoint]: Ряд по возрастанию даты.
    """
    series = [TimeSeriesPoint(record.date, extract_value(record, subject)) for record in records]
    series.sort(key=lambda point: point.date)
    logger.debug(f"Ряд {subject.value}: {len(series)} точек")
    return series
