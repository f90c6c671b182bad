"""
Скользящее среднее для рядов COVID-данных.
"""

from datetime import date
from typing import List, Sequence, Tuple

import pandas as pd
from loguru import logger

from covid_tracking.data.models import TimeSeriesPoint

AVERAGE_WINDOW = 7


def moving_average(series: Sequence[TimeSeriesPoint], window: int) -> List[Tuple[date, float]]:
    """
    Рассчитывает простое скользящее среднее по окну из window точек.

    Ряд должен быть упорядочен по возрастанию даты. Значение относится
    к последней (самой новой) дате окна:
    SMA(t) = среднее от V_t, V_{t-1}, ..., V_{t-window+1}.

    Неполные окна отбрасываются, поэтому результат короче входа
    на window - 1 точку, а для ряда короче window он пуст.

    Параметры:
        series: Ряд точек по возрастанию даты.
        window: Размер окна.

    Возвращает:
        list[tuple[date, float]]: Пары (дата, среднее) без округления.
    """
    if window < 1:
        raise ValueError(f"Размер окна должен быть положительным, получено {window}")
    if len(series) < window:
        logger.debug(f"Недостаточно данных для SMA({window}): получено {len(series)}")
        return []

    values = pd.Series([float(point.value) for point in series],
                       index=[point.date for point in series])
    sma = values.rolling(window=window).mean().dropna()
    return [(day, float(value)) for day, value in sma.items()]


def average7(series: Sequence[TimeSeriesPoint]) -> List[Tuple[date, float]]:
    """Скользящее среднее за 7 дней."""
    return moving_average(series, AVERAGE_WINDOW)
