"""
Перевод точек ряда (дата, значение) в пиксельные координаты.

Начало координат - левый нижний угол, ось y направлена вверх:
большее значение дает большую координату y.
"""

from datetime import date
from typing import List, NamedTuple, Optional, Sequence, Tuple


class DrawingRect(NamedTuple):
    """Прямоугольник области рисования в пикселях."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height


class PixelPoint(NamedTuple):
    x: float
    y: float


def project_date(day: date, earliest: date, latest: date, rect: DrawingRect) -> float:
    """
    Координата x для даты.

    Если ряд занимает один день (нулевой интервал), точка ставится
    в центр области по горизонтали.
    """
    date_span = (latest - earliest).days
    if date_span == 0:
        return rect.x + rect.width / 2.0
    return rect.x + (day - earliest).days / date_span * rect.width


def project_value(value: float, value_range: Tuple[float, float], rect: DrawingRect) -> float:
    """
    Координата y для значения; при нулевом диапазоне значений - центр области.
    """
    low, high = value_range
    if high - low == 0:
        return rect.y + rect.height / 2.0
    return rect.y + (value - low) / (high - low) * rect.height


def project(series: Sequence, rect: DrawingRect, value_range: Tuple[float, float],
            date_range: Optional[Tuple[date, date]] = None) -> List[PixelPoint]:
    """
    Переводит ряд в пиксельные координаты.

    Параметры:
        series: Точки (дата, значение) по возрастанию даты; подходят
            TimeSeriesPoint и пары из moving_average.
        rect: Область рисования.
        value_range: Диапазон значений (min, max), соответствующий высоте области.
        date_range: Диапазон дат (earliest, latest), соответствующий ширине области;
            по умолчанию первая и последняя дата самого ряда.

    Возвращает:
        list[PixelPoint]: Точки в том же порядке, что и ряд.
    """
    if not series:
        return []
    if date_range is None:
        date_range = (series[0][0], series[-1][0])
    earliest, latest = date_range
    return [
        PixelPoint(project_date(day, earliest, latest, rect), project_value(value, value_range, rect))
        for day, value in series
    ]
