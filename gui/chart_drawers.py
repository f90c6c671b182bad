"""
Отрисовка графика.

Содержит функции для отрисовки рамки, осей, сетки, точек ряда
и линии скользящего среднего на поверхности DrawingSurface.
"""

from typing import Optional, Sequence

from loguru import logger

from covid_tracking.analytics.series_projector import DrawingRect
from covid_tracking.data.models import TimeSeriesPoint
from gui.chart_calculators import ChartLayout, layout
from gui.chart_surface import DrawingSurface
from gui.ui_config import UIConfig


def clip_area(chart: ChartLayout, padding: float) -> DrawingRect:
    """
    Область отсечения для данных: область графика с запасом padding пикселей,
    чтобы точки на рамке не обрезались наполовину.

    Значения ниже оси (отрицательные поправки в данных) за нее не выходят.
    """
    plot = chart.plot_rect
    return DrawingRect(plot.x - padding, plot.y - padding, plot.width + padding * 2.0, plot.height + padding * 2.0)


def draw_frame(surface: DrawingSurface, chart: ChartLayout):
    """
    Заливает фон и рисует рамку области графика.
    """
    surface.fill_rect(chart.bounds, UIConfig.CHART_BACKGROUND_COLOR)
    surface.stroke_rect(chart.plot_rect, UIConfig.CHART_FRAME_COLOR)


def draw_legend(surface: DrawingSurface, chart: ChartLayout):
    surface.draw_text(
        chart.plot_rect.x + UIConfig.LEGEND_X_OFFSET, chart.bounds.y + UIConfig.LEGEND_Y,
        UIConfig.LEGEND_TEXT, h_align="left", v_align="bottom",
        color=UIConfig.AVERAGE_LINE_COLOR, size=UIConfig.FONT_SIZE_LEGEND,
        family=UIConfig.FONT_FAMILY
    )


def draw_date_axis(surface: DrawingSurface, chart: ChartLayout):
    """
    Отрисовывает засечки и подписи дат под областью графика,
    а для промежуточных дат - светлые вертикальные линии сетки.
    """
    plot = chart.plot_rect
    ticks = [((label.x, plot.y), (label.x, plot.y - UIConfig.TICK_LENGTH)) for label in chart.date_labels]
    surface.stroke_segments(ticks, UIConfig.CHART_TICK_COLOR, UIConfig.TICK_LINE_WIDTH)

    for label in chart.date_labels:
        surface.draw_text(label.x, plot.y - UIConfig.LABEL_OFFSET, label.text, h_align="center", v_align="top")

    grid = [((x, plot.y), (x, plot.top)) for x in chart.date_gridlines]
    surface.stroke_segments(grid, UIConfig.CHART_GRID_COLOR, UIConfig.GRID_LINE_WIDTH)


def draw_value_axis(surface: DrawingSurface, chart: ChartLayout):
    """
    Отрисовывает засечки и подписи значений слева от области графика
    и горизонтальные линии сетки для промежуточных делений.
    """
    plot = chart.plot_rect
    ticks = [((plot.x, label.y), (plot.x - UIConfig.TICK_LENGTH, label.y)) for label in chart.value_labels]
    surface.stroke_segments(ticks, UIConfig.CHART_TICK_COLOR, UIConfig.TICK_LINE_WIDTH)

    for label in chart.value_labels:
        surface.draw_text(plot.x - UIConfig.LABEL_OFFSET, label.y, label.text, h_align="right", v_align="center")

    grid = [((plot.x, y), (plot.right, y)) for y in chart.value_gridlines]
    surface.stroke_segments(grid, UIConfig.CHART_GRID_COLOR, UIConfig.GRID_LINE_WIDTH)


def draw_points(surface: DrawingSurface, chart: ChartLayout):
    """
    Отрисовывает исходные значения небольшими закрашенными кругами.
    """
    size = UIConfig.RAW_POINT_SIZE
    rects = [DrawingRect(point.x - size / 2.0, point.y - size / 2.0, size, size) for point in chart.points]
    surface.fill_ellipses(rects, UIConfig.RAW_POINT_COLOR, clip_area(chart, size / 2.0))


def draw_average_line(surface: DrawingSurface, chart: ChartLayout):
    surface.stroke_polyline(
        [(point.x, point.y) for point in chart.average_line],
        UIConfig.AVERAGE_LINE_COLOR, UIConfig.AVERAGE_LINE_WIDTH,
        clip_area(chart, UIConfig.AVERAGE_LINE_WIDTH)
    )


class ChartRenderer:
    """
    Рисует график ряда: рамку, оси с подписями, сетку, точки и среднее за 7 дней.

    Не хранит состояния между вызовами: каждый вызов render заново
    рассчитывает геометрию через layout.
    """

    def __init__(self, chart_config: Optional[dict] = None):
        self.chart_config = chart_config

    def render(self, surface: DrawingSurface, series: Sequence[TimeSeriesPoint], bounds: DrawingRect) -> ChartLayout:
        """
        Отрисовывает ряд на поверхности.

        Параметры:
            surface: Поверхность рисования.
            series: Ряд по возрастанию даты (может быть пустым).
            bounds: Размер области в пикселях.

        Возвращает:
            ChartLayout: Рассчитанная геометрия кадра.
        """
        chart = layout(series, bounds, self.chart_config)
        draw_frame(surface, chart)

        if chart.is_empty:
            logger.debug("Пустой ряд: отрисована только рамка")
            return chart

        draw_legend(surface, chart)
        draw_date_axis(surface, chart)
        draw_value_axis(surface, chart)
        draw_points(surface, chart)
        draw_average_line(surface, chart)
        return chart
