"""
Виджет для отображения графика COVID-данных.

Использует ChartRenderer и MatplotlibSurface: график перерисовывается
целиком при смене данных и при изменении размера виджета.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from loguru import logger

from covid_tracking.analytics.series_projector import DrawingRect
from gui.chart_drawers import ChartRenderer
from gui.chart_surface import MatplotlibSurface
from gui.ui_config import UIConfig


class CovidChartWidget(QWidget):
    """
    Виджет графика: точки исходных значений и линия среднего за 7 дней.
    """

    def __init__(self, parent=None):
        """Инициализация виджета графика."""
        super().__init__(parent)
        self.renderer = ChartRenderer()
        self.series = []
        self.last_layout = None

        self.figure = Figure(facecolor=UIConfig.CHART_BACKGROUND_COLOR)
        self.canvas = FigureCanvas(self.figure)
        self.canvas.mpl_connect('resize_event', self.on_canvas_resized)

        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.canvas)
        self.setLayout(layout)

    def set_series(self, series):
        """
        Заменяет отображаемый ряд и перерисовывает график.

        Параметры:
            series: Ряд TimeSeriesPoint по возрастанию даты.
        """
        self.series = list(series)
        logger.debug(f"График получил ряд из {len(self.series)} точек")
        self.redraw()

    def on_canvas_resized(self, _event):
        """Обработчик изменения размера холста."""
        self.redraw()

    def redraw(self):
        """Пересчитывает и отрисовывает график для текущего размера холста."""
        width = self.canvas.width()
        height = self.canvas.height()
        if width <= 0 or height <= 0:
            return
        try:
            surface = MatplotlibSurface(self.figure, width, height)
            self.last_layout = self.renderer.render(surface, self.series, DrawingRect(0.0, 0.0, width, height))
            self.canvas.draw_idle()
        except Exception as e:
            logger.error(f"Ошибка при отрисовке графика: {e}")
            import traceback
            logger.error(traceback.format_exc())
