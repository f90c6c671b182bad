"""
Расчеты для графика.

Функция layout по ряду и размеру области вычисляет всю геометрию графика:
деления осей, подписи, линии сетки, точки и линию среднего.
Результат не зависит от предыдущих вызовов и передается в ChartRenderer.
"""

from datetime import date
from typing import List, NamedTuple, Optional, Sequence, Tuple

from loguru import logger

from covid_tracking.analytics.moving_average import moving_average
from covid_tracking.analytics.nice_numbers import value_ticks
from covid_tracking.analytics.series_projector import (
    DrawingRect, PixelPoint, project, project_date, project_value
)
from covid_tracking.config.config import CONFIG
from covid_tracking.data.models import TimeSeriesPoint
from gui.chart_formatters import format_axis_date, format_axis_value


class DateLabel(NamedTuple):
    x: float
    day: date
    text: str


class ValueLabel(NamedTuple):
    y: float
    value: float
    text: str


class ChartLayout(NamedTuple):
    """
    Геометрия одного кадра графика.

    Атрибуты:
        bounds: Вся область виджета.
        plot_rect: Область графика внутри отступов.
        ticks: Деления оси значений по возрастанию.
        value_range: (min, max) оси значений или None для пустого ряда.
        date_labels: Подписи дат: первая, последняя, затем промежуточные от новых к старым.
        date_gridlines: Координаты x промежуточных делений оси дат.
        value_labels: Подписи всех делений оси значений.
        value_gridlines: Координаты y промежуточных делений оси значений.
        points: Исходные точки ряда.
        average_line: Вершины линии скользящего среднего.
    """
    bounds: DrawingRect
    plot_rect: DrawingRect
    ticks: List[float]
    value_range: Optional[Tuple[float, float]]
    date_labels: List[DateLabel]
    date_gridlines: List[float]
    value_labels: List[ValueLabel]
    value_gridlines: List[float]
    points: List[PixelPoint]
    average_line: List[PixelPoint]

    @property
    def is_empty(self) -> bool:
        return not self.points


def calculate_plot_rect(bounds: DrawingRect, margin: float) -> DrawingRect:
    """
    Область графика внутри фиксированного отступа со всех сторон.
    """
    return DrawingRect(
        bounds.x + margin,
        bounds.y + margin,
        max(bounds.width - margin * 2.0, 0.0),
        max(bounds.height - margin * 2.0, 0.0),
    )


def calculate_date_labels(series: Sequence[TimeSeriesPoint], plot_rect: DrawingRect,
                          horizontal_ticks: int, min_distance: float):
    """
    Подписи оси дат и вертикальные линии сетки.

    Первая и последняя даты подписываются у краев области. Промежуточные
    деления берутся через каждые (n - 1) // horizontal_ticks точек, начиная
    с самой новой даты и двигаясь назад. Деление пропускается, если оно ближе
    min_distance пикселей к уже нарисованной подписи.

    Возвращает:
        tuple: (список DateLabel, список x линий сетки)
    """
    if not series:
        return [], []

    earliest = series[0].date
    latest = series[-1].date
    if earliest == latest:
        center = project_date(earliest, earliest, latest, plot_rect)
        return [DateLabel(center, earliest, format_axis_date(earliest))], []

    labels = [
        DateLabel(plot_rect.x, earliest, format_axis_date(earliest)),
        DateLabel(plot_rect.right, latest, format_axis_date(latest)),
    ]
    gridlines = []
    drawn = [plot_rect.x, plot_rect.right]

    last_index = len(series) - 1
    dx = last_index // horizontal_ticks
    if dx == 0:
        return labels, gridlines

    i = last_index - dx
    while i > 0:
        day = series[i].date
        x = project_date(day, earliest, latest, plot_rect)
        if all(abs(x - position) >= min_distance for position in drawn):
            labels.append(DateLabel(x, day, format_axis_date(day)))
            gridlines.append(x)
            drawn.append(x)
        i -= dx

    return labels, gridlines


def calculate_value_labels(ticks: Sequence[float], value_range: Tuple[float, float],
                           plot_rect: DrawingRect):
    """
    Подписи оси значений и горизонтальные линии сетки.

    Линии сетки рисуются только для промежуточных делений: первое и последнее
    совпадают с рамкой области.
    """
    labels = [
        ValueLabel(project_value(tick, value_range, plot_rect), tick, format_axis_value(tick))
        for tick in ticks
    ]
    gridlines = [label.y for label in labels[1:-1]]
    return labels, gridlines


def layout(series: Sequence[TimeSeriesPoint], bounds: DrawingRect, chart_config: Optional[dict] = None) -> ChartLayout:
    """
    Вычисляет геометрию графика для ряда.

    Параметры:
        series: Ряд по возрастанию даты.
        bounds: Размер области виджета в пикселях.
        chart_config: Настройки графика (по умолчанию CONFIG['CHART']).

    Возвращает:
        ChartLayout: Для пустого ряда заполнены только bounds и plot_rect.

    Исключения:
        ValueError: Если ряд не упорядочен по возрастанию даты.
    """
    settings = chart_config or CONFIG['CHART']
    plot_rect = calculate_plot_rect(bounds, settings['MARGIN'])

    if not series:
        return ChartLayout(bounds, plot_rect, [], None, [], [], [], [], [], [])

    if any(earlier.date > later.date for earlier, later in zip(series, series[1:])):
        raise ValueError("Ряд должен быть упорядочен по возрастанию даты")

    values = [point.value for point in series]
    ticks = value_ticks(min(values), max(values), settings['VERTICAL_TICKS'])
    value_range = (ticks[0], ticks[-1])
    date_range = (series[0].date, series[-1].date)

    points = project(series, plot_rect, value_range, date_range)
    average = moving_average(series, settings['AVERAGE_WINDOW'])
    average_line = project(average, plot_rect, value_range, date_range)

    date_labels, date_gridlines = calculate_date_labels(
        series, plot_rect, settings['HORIZONTAL_TICKS'], settings['LABEL_MIN_DISTANCE']
    )
    value_labels, value_gridlines = calculate_value_labels(ticks, value_range, plot_rect)

    logger.debug(
        f"Layout: {len(points)} точек, {len(average_line)} точек среднего, "
        f"деления {ticks[0]}..{ticks[-1]}, {len(date_labels)} подписей дат"
    )

    return ChartLayout(
        bounds=bounds,
        plot_rect=plot_rect,
        ticks=ticks,
        value_range=value_range,
        date_labels=date_labels,
        date_gridlines=date_gridlines,
        value_labels=value_labels,
        value_gridlines=value_gridlines,
        points=points,
        average_line=average_line,
    )
