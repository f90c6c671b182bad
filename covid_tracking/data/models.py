from datetime import date
from typing import NamedTuple, Optional


class TimeSeriesPoint(NamedTuple):
    """Одна точка ряда: дата и целое значение выбранного показателя."""
    date: date
    value: int


class CovidDaily:
    """
    Запись исторических данных по одному штату.

    Соответствует элементу ответа /v1/states/{state}/daily.json.
    Отсутствующие числовые поля хранятся как None.
    """

    def __init__(self, date, state, death=None, positive_increase=None,
                 total_test_results=None, total_test_results_increase=None,
                 death_increase=None, hospitalized_currently=None,
                 data_quality_grade=None):
        self.date = date
        self.state = state
        self.death = death
        self.positive_increase = positive_increase
        self.total_test_results = total_test_results
        self.total_test_results_increase = total_test_results_increase
        self.death_increase = death_increase
        self.hospitalized_currently = hospitalized_currently
        self.data_quality_grade = data_quality_grade


class CovidUSDaily:
    """
    Запись исторических данных по США в целом (/v1/us/daily.json).
    """

    def __init__(self, date, states=None, death=None, death_increase=None,
                 hospitalized_currently=None, hospitalized_increase=None,
                 in_icu_currently=None, negative_increase=None,
                 on_ventilator_currently=None, positive_increase=None,
                 recovered=None, total_test_results=None,
                 total_test_results_increase=None):
        self.date = date
        self.states = states
        self.death = death
        self.death_increase = death_increase
        self.hospitalized_currently = hospitalized_currently
        self.hospitalized_increase = hospitalized_increase
        self.in_icu_currently = in_icu_currently
        self.negative_increase = negative_increase
        self.on_ventilator_currently = on_ventilator_currently
        self.positive_increase = positive_increase
        self.recovered = recovered
        self.total_test_results = total_test_results
        self.total_test_results_increase = total_test_results_increase


class StateInfo:
    def __init__(self, state, name, notes: Optional[str] = None):
        """
        Инициализация объекта StateInfo.

        Параметры:
            state (str): Двухбуквенный код штата (например, 'AZ').
            name (str): Полное название штата (например, 'Arizona').
            notes (str, optional): Примечания источника данных.
        """
        self.state = state
        self.name = name
        self.notes = notes
