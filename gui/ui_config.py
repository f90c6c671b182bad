"""
Модуль для хранения всех настроек UI PyQt5.

Этот модуль содержит все настройки, касающиеся:
- Размеров окон и виджетов
- Цветов окна и графика
- Шрифтов и отступов

ВСЕ настройки UI должны быть определены здесь, а не в коде виджетов.
Геометрия графика (отступ, число делений) задается в CONFIG['CHART'].
"""


class UIConfig:
    """
    Класс для хранения всех настроек UI PyQt5.
    """

    # ==================== РАЗМЕРЫ ОКОН ====================
    MAIN_WINDOW_TITLE = "COVID Tracking"
    MAIN_WINDOW_WIDTH = 1280
    MAIN_WINDOW_HEIGHT = 800
    MAIN_WINDOW_MIN_WIDTH = 900
    MAIN_WINDOW_MIN_HEIGHT = 600

    # Таблица (левая панель)
    TABLE_PANEL_WIDTH = 320
    TABLE_PANEL_MIN_WIDTH = 240

    # Панель выбора (сверху)
    CONTROL_PANEL_HEIGHT = 56

    # ==================== ЦВЕТА ОКНА ====================
    BACKGROUND_COLOR = "#f4f4f6"
    SECONDARY_BACKGROUND_COLOR = "#ffffff"
    BORDER_COLOR = "#d0d0d6"
    TEXT_COLOR_PRIMARY = "#1a1a1a"
    TEXT_COLOR_SECONDARY = "#6b6b73"
    ACCENT_COLOR = "#1a1ae6"
    ACCENT_COLOR_HOVER = "#3d3df0"

    # ==================== ЦВЕТА ГРАФИКА (RGBA, 0..1) ====================
    CHART_BACKGROUND_COLOR = (0.985, 0.985, 0.985, 1.0)
    CHART_FRAME_COLOR = (0.0, 0.0, 0.0, 1.0)
    CHART_TICK_COLOR = (0.0, 0.0, 0.0, 0.75)  # Засечки на осях
    CHART_GRID_COLOR = (0.0, 0.0, 0.0, 0.1)  # Светлые линии сетки
    CHART_TEXT_COLOR = (0.1, 0.1, 0.1, 1.0)
    RAW_POINT_COLOR = (0.1, 0.1, 0.1, 0.2)  # Точки исходных значений
    AVERAGE_LINE_COLOR = (0.1, 0.1, 0.9, 0.8)  # Линия среднего за 7 дней

    # ==================== ГЕОМЕТРИЯ ЭЛЕМЕНТОВ ГРАФИКА ====================
    TICK_LENGTH = 10.0  # Длина засечки, px
    LABEL_OFFSET = 14.0  # Расстояние от оси до подписи, px
    RAW_POINT_SIZE = 6.0  # Диаметр точки, px
    AVERAGE_LINE_WIDTH = 2.0
    TICK_LINE_WIDTH = 2.0
    GRID_LINE_WIDTH = 1.0
    LEGEND_X_OFFSET = 0.0  # Смещение легенды от левого края области графика
    LEGEND_Y = 10.0  # Высота легенды от нижнего края окна
    LEGEND_TEXT = "Blue line is 7-day average"

    # ==================== ШРИФТЫ ====================
    FONT_FAMILY = "Segoe UI"
    LABEL_FONT_FAMILY = "monospace"
    FONT_SIZE_NORMAL = 12
    FONT_SIZE_LABEL = 9  # Подписи осей (pt)
    FONT_SIZE_LEGEND = 10

    # ==================== ОТСТУПЫ И ПРОМЕЖУТКИ ====================
    MARGIN_SMALL = 5
    MARGIN_MEDIUM = 10
    SPACING_SMALL = 5
    SPACING_MEDIUM = 10

    # ==================== СТИЛИ QSS ====================
    MAIN_WINDOW_STYLE = f"""
        QMainWindow {{
            background-color: {BACKGROUND_COLOR};
            color: {TEXT_COLOR_PRIMARY};
        }}
    """

    COMBO_BOX_STYLE = f"""
        QComboBox {{
            background-color: {SECONDARY_BACKGROUND_COLOR};
            color: {TEXT_COLOR_PRIMARY};
            border: 1px solid {BORDER_COLOR};
            border-radius: 4px;
            padding: 4px 10px;
            font-size: {FONT_SIZE_NORMAL}px;
            min-width: 180px;
        }}
        QComboBox:hover {{
            border-color: {ACCENT_COLOR};
        }}
    """

    SUBJECT_BUTTON_STYLE = f"""
        QPushButton {{
            background-color: {SECONDARY_BACKGROUND_COLOR};
            color: {TEXT_COLOR_PRIMARY};
            border: 1px solid {BORDER_COLOR};
            border-radius: 4px;
            font-size: {FONT_SIZE_NORMAL}px;
            padding: 6px 14px;
        }}
        QPushButton:hover {{
            border-color: {ACCENT_COLOR_HOVER};
        }}
        QPushButton:checked {{
            background-color: {ACCENT_COLOR};
            color: white;
            border-color: {ACCENT_COLOR};
        }}
    """

    TABLE_STYLE = f"""
        QTableWidget {{
            background-color: {SECONDARY_BACKGROUND_COLOR};
            color: {TEXT_COLOR_PRIMARY};
            border: 1px solid {BORDER_COLOR};
            gridline-color: {BORDER_COLOR};
            font-size: {FONT_SIZE_NORMAL}px;
        }}
        QHeaderView::section {{
            background-color: {BACKGROUND_COLOR};
            color: {TEXT_COLOR_PRIMARY};
            padding: 4px;
            border: 1px solid {BORDER_COLOR};
            font-weight: bold;
        }}
    """

    LABEL_STYLE = f"""
        QLabel {{
            color: {TEXT_COLOR_SECONDARY};
            font-size: {FONT_SIZE_NORMAL}px;
        }}
    """
