"""
Поверхность рисования для графика.

DrawingSurface описывает набор примитивов, которыми пользуется ChartRenderer.
Координаты задаются в пикселях, начало - левый нижний угол, ось y вверх.
MatplotlibSurface рисует эти примитивы на осях matplotlib,
растянутых на всю фигуру.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.lines import Line2D
from matplotlib.patches import Ellipse, Rectangle

from covid_tracking.analytics.series_projector import DrawingRect
from gui.ui_config import UIConfig

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


class DrawingSurface(ABC):
    """
    Абстрактная поверхность рисования.
    """

    @abstractmethod
    def fill_rect(self, rect: DrawingRect, color):
        """Закрашивает прямоугольник."""

    @abstractmethod
    def stroke_rect(self, rect: DrawingRect, color, line_width: float = 1.0):
        """Рисует рамку прямоугольника."""

    @abstractmethod
    def fill_ellipse(self, rect: DrawingRect, color, clip: Optional[DrawingRect] = None):
        """
        Закрашивает эллипс, вписанный в прямоугольник.

        Параметры:
            clip: Область, за пределами которой ничего не рисуется.
        """

    def fill_ellipses(self, rects: Sequence[DrawingRect], color, clip: Optional[DrawingRect] = None):
        for rect in rects:
            self.fill_ellipse(rect, color, clip)

    @abstractmethod
    def stroke_polyline(self, points: Sequence[Point], color, line_width: float = 1.0,
                        clip: Optional[DrawingRect] = None):
        """Рисует ломаную через точки, обрезая ее по clip."""

    @abstractmethod
    def stroke_segments(self, segments: Sequence[Segment], color, line_width: float = 1.0):
        """Рисует набор отдельных отрезков."""

    @abstractmethod
    def draw_text(self, x: float, y: float, text: str, h_align: str = "left", v_align: str = "bottom",
                  color=None, size: float = None, family: str = None):
        """
        Выводит текст в точке (x, y).

        Параметры:
            h_align: 'left', 'center' или 'right'.
            v_align: 'top', 'center' или 'bottom'.
        """


class MatplotlibSurface(DrawingSurface):
    """
    Поверхность поверх осей matplotlib в пиксельных координатах.
    """

    def __init__(self, figure, width: float, height: float):
        """
        Параметры:
            figure: matplotlib.figure.Figure, которая будет очищена.
            width: Ширина области в пикселях.
            height: Высота области в пикселях.
        """
        self.figure = figure
        self.width = width
        self.height = height

        self.figure.clear()
        self.axes = self.figure.add_axes([0.0, 0.0, 1.0, 1.0])
        self.axes.set_axis_off()
        self.axes.set_xlim(0, max(width, 1))
        self.axes.set_ylim(0, max(height, 1))
        self.axes.set_autoscale_on(False)

    def fill_rect(self, rect: DrawingRect, color):
        self.axes.add_patch(Rectangle(
            (rect.x, rect.y), rect.width, rect.height,
            facecolor=color, edgecolor='none', linewidth=0
        ))

    def stroke_rect(self, rect: DrawingRect, color, line_width: float = 1.0):
        self.axes.add_patch(Rectangle(
            (rect.x, rect.y), rect.width, rect.height,
            fill=False, edgecolor=color, linewidth=line_width
        ))

    def _clip_to(self, artist, clip: Optional[DrawingRect]):
        if clip is None:
            return
        artist.set_clip_path(Rectangle(
            (clip.x, clip.y), clip.width, clip.height, transform=self.axes.transData
        ))

    def fill_ellipse(self, rect: DrawingRect, color, clip: Optional[DrawingRect] = None):
        self.fill_ellipses([rect], color, clip)

    def fill_ellipses(self, rects: Sequence[DrawingRect], color, clip: Optional[DrawingRect] = None):
        if not rects:
            return
        ellipses = [
            Ellipse((rect.x + rect.width / 2.0, rect.y + rect.height / 2.0), rect.width, rect.height)
            for rect in rects
        ]
        collection = PatchCollection(ellipses, facecolor=color, edgecolor='none', linewidth=0)
        self.axes.add_collection(collection)
        self._clip_to(collection, clip)

    def stroke_polyline(self, points: Sequence[Point], color, line_width: float = 1.0,
                        clip: Optional[DrawingRect] = None):
        if len(points) < 2:
            return
        xs = [point[0] for point in points]
        ys = [point[1] for point in points]
        line = Line2D(xs, ys, color=color, linewidth=line_width)
        self.axes.add_line(line)
        self._clip_to(line, clip)

    def stroke_segments(self, segments: Sequence[Segment], color, line_width: float = 1.0):
        if not segments:
            return
        self.axes.add_collection(LineCollection(list(segments), colors=[color], linewidths=line_width))

    def draw_text(self, x: float, y: float, text: str, h_align: str = "left", v_align: str = "bottom",
                  color=None, size: float = None, family: str = None):
        self.axes.text(
            x, y, text,
            ha=h_align, va=v_align,
            color=color or UIConfig.CHART_TEXT_COLOR,
            fontsize=size or UIConfig.FONT_SIZE_LABEL,
            family=family or UIConfig.LABEL_FONT_FAMILY,
            clip_on=False
        )
