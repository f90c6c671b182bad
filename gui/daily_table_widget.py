"""
Таблица значений выбранного показателя по дням.
"""

from PyQt5.QtWidgets import QTableWidget, QTableWidgetItem, QAbstractItemView
from PyQt5.QtCore import Qt
from loguru import logger

from covid_tracking.analytics.subjects import DEFAULT_SUBJECT, SUBJECT_COLUMN_TITLES
from gui.chart_formatters import format_table_date, format_table_value
from gui.ui_config import UIConfig


class DailyTableWidget(QTableWidget):
    """
    Таблица из двух колонок: дата и значение показателя.

    Строки выводятся от новых дат к старым, как в ответе API.
    """

    def __init__(self, parent=None):
        """
        Инициализация таблицы.

        Параметры:
            parent: Родительский виджет.
        """
        super().__init__(parent)
        self.setColumnCount(2)
        self.set_value_title(SUBJECT_COLUMN_TITLES[DEFAULT_SUBJECT])
        self.setStyleSheet(UIConfig.TABLE_STYLE)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.verticalHeader().setVisible(False)
        self.horizontalHeader().setStretchLastSection(True)

    def set_value_title(self, title: str):
        """Меняет заголовок колонки значений."""
        self.setHorizontalHeaderLabels(["Date", title])

    def load_series(self, series):
        """
        Заполняет таблицу значениями ряда.

        Параметры:
            series: Ряд TimeSeriesPoint по возрастанию даты.
        """
        rows = list(reversed(series))
        self.setRowCount(len(rows))
        for row, point in enumerate(rows):
            date_item = QTableWidgetItem(format_table_date(point.date))
            value_item = QTableWidgetItem(format_table_value(point.value))
            value_item.setTextAlignment(int(Qt.AlignRight | Qt.AlignVCenter))
            self.setItem(row, 0, date_item)
            self.setItem(row, 1, value_item)
        logger.debug(f"Загружено {len(rows)} строк в таблицу")
