"""
Главное приложение COVID Tracking.

Использует модули:
- chart_widget: Виджет графика
- daily_table_widget: Таблица значений
- region_selector_widget: Выбор региона
- subject_panel_widget: Выбор показателя
"""

import sys
from PyQt5.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QMessageBox
)
from PyQt5.QtCore import Qt, QObject, pyqtSignal
from PyQt5.QtGui import QFont
from loguru import logger

from covid_tracking.analytics.subjects import DEFAULT_SUBJECT, SUBJECT_COLUMN_TITLES, Subject
from covid_tracking.api.errors import HttpStatusError
from covid_tracking.api.request_slots import RequestSlots
from covid_tracking.config.config import CONFIG
from gui.chart_widget import CovidChartWidget
from gui.daily_table_widget import DailyTableWidget
from gui.data_fetcher import DataFetcher
from gui.region_selector_widget import RegionSelectorWidget
from gui.subject_panel_widget import SubjectPanelWidget
from gui.ui_config import UIConfig

DAILY_SLOT = "daily"
STATES_SLOT = "states"


class FetchSignals(QObject):
    """
    Сигналы для передачи результатов фоновых запросов в главный поток.

    Сигналы испускаются из рабочих потоков; слоты, подключенные к ним
    в главном окне, выполняются в главном потоке (queued connection).
    """

    daily_loaded = pyqtSignal(int, str, object)  # id запроса, код региона, записи
    states_loaded = pyqtSignal(int, object)  # id запроса, список StateInfo
    request_failed = pyqtSignal(str, int, object)  # слот, id запроса, исключение


class CovidTrackingApp(QMainWindow):
    """
    Главное окно: таблица значений слева, график справа,
    выбор региона и показателя сверху.
    """

    def __init__(self, data_fetcher=None, request_slots=None):
        """Инициализация главного окна."""
        super().__init__()
        self.data_fetcher = data_fetcher or DataFetcher()
        self.request_slots = request_slots or RequestSlots(max_workers=CONFIG['APP']['WORKERS'])
        self.signals = FetchSignals()
        self.signals.daily_loaded.connect(self.on_daily_loaded)
        self.signals.states_loaded.connect(self.on_states_loaded)
        self.signals.request_failed.connect(self.on_request_failed)

        self.current_region = CONFIG['APP']['DEFAULT_STATE']
        self.current_subject = DEFAULT_SUBJECT
        self.records = []
        self.request_counter = 0
        self.current_requests = {}  # слот -> id последнего запроса

        self.init_ui()

    def init_ui(self):
        """Инициализация пользовательского интерфейса."""
        self.setWindowTitle(UIConfig.MAIN_WINDOW_TITLE)
        self.setStyleSheet(UIConfig.MAIN_WINDOW_STYLE)
        self.resize(UIConfig.MAIN_WINDOW_WIDTH, UIConfig.MAIN_WINDOW_HEIGHT)
        self.setMinimumSize(UIConfig.MAIN_WINDOW_MIN_WIDTH, UIConfig.MAIN_WINDOW_MIN_HEIGHT)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        central_widget.setLayout(main_layout)

        control_panel = QWidget()
        control_panel.setFixedHeight(UIConfig.CONTROL_PANEL_HEIGHT)
        control_layout = QHBoxLayout()
        control_layout.setContentsMargins(UIConfig.MARGIN_MEDIUM, 0, UIConfig.MARGIN_MEDIUM, 0)
        control_layout.setSpacing(UIConfig.SPACING_MEDIUM)

        self.region_selector = RegionSelectorWidget()
        self.region_selector.region_selected.connect(self.on_region_selected)
        control_layout.addWidget(self.region_selector)

        self.subject_panel = SubjectPanelWidget()
        self.subject_panel.subject_changed.connect(self.on_subject_changed)
        control_layout.addWidget(self.subject_panel)
        control_layout.addStretch()
        control_panel.setLayout(control_layout)
        main_layout.addWidget(control_panel)

        splitter = QSplitter(Qt.Horizontal)

        self.table = DailyTableWidget()
        self.table.setMinimumWidth(UIConfig.TABLE_PANEL_MIN_WIDTH)
        splitter.addWidget(self.table)

        self.chart_widget = CovidChartWidget()
        splitter.addWidget(self.chart_widget)

        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 4)
        splitter.setSizes([UIConfig.TABLE_PANEL_WIDTH, UIConfig.MAIN_WINDOW_WIDTH - UIConfig.TABLE_PANEL_WIDTH])
        main_layout.addWidget(splitter)

    def start(self):
        """Запускает загрузку списка штатов и данных по региону по умолчанию."""
        self.request_states()
        self.request_daily(self.current_region)

    # ==================== ЗАПРОСЫ ====================

    def next_request_id(self, slot: str) -> int:
        """Выдает id нового запроса и делает его текущим для слота."""
        self.request_counter += 1
        self.current_requests[slot] = self.request_counter
        return self.request_counter

    def is_current_request(self, slot: str, request_id: int) -> bool:
        """
        Проверяет, что ответ относится к последнему запросу слота.

        Результат, выпущенный рабочим потоком до отмены, может прийти
        в главный поток уже после нового запроса.
        """
        if self.current_requests.get(slot) != request_id:
            logger.debug(f"Ответ устаревшего запроса {slot}#{request_id} отброшен")
            return False
        return True

    def request_states(self):
        """Запрашивает список штатов в фоне."""
        logger.info("Запрос списка штатов")
        request_id = self.next_request_id(STATES_SLOT)
        self.request_slots.submit(
            STATES_SLOT, self.data_fetcher.get_states,
            lambda states: self.signals.states_loaded.emit(request_id, states),
            lambda error: self.signals.request_failed.emit(STATES_SLOT, request_id, error)
        )

    def request_daily(self, region_code: str):
        """
        Запрашивает исторические данные для региона в фоне.

        Предыдущий незавершенный запрос данных отменяется.
        """
        logger.info(f"Запрос данных для региона {region_code or 'US'}")
        request_id = self.next_request_id(DAILY_SLOT)
        self.request_slots.submit(
            DAILY_SLOT, self.data_fetcher.get_daily_records,
            lambda records: self.signals.daily_loaded.emit(request_id, region_code, records),
            lambda error: self.signals.request_failed.emit(DAILY_SLOT, request_id, error),
            region_code
        )

    # ==================== ОБРАБОТЧИКИ ====================

    def on_states_loaded(self, request_id: int, states):
        """Обработчик получения списка штатов (главный поток)."""
        if not self.is_current_request(STATES_SLOT, request_id):
            return
        self.region_selector.load_states(states, self.current_region)
        logger.info(f"Загружено {len(states)} штатов")

    def on_daily_loaded(self, request_id: int, region_code: str, records):
        """Обработчик получения исторических данных (главный поток)."""
        if not self.is_current_request(DAILY_SLOT, request_id):
            return
        self.current_region = region_code
        self.records = records
        self.refresh_views()

    def on_request_failed(self, slot: str, request_id: int, error):
        """Обработчик ошибки фонового запроса (главный поток)."""
        if not self.is_current_request(slot, request_id):
            return
        if isinstance(error, HttpStatusError):
            logger.error(f"Ошибка HTTP: {error.status_code}")
            self.report_status(error.status_code)
        else:
            logger.error(f"Ошибка запроса: {error}")
            self.report_error(error)

    def on_region_selected(self, region_code: str):
        """Обработчик выбора региона."""
        self.request_daily(region_code)

    def on_subject_changed(self, subject: Subject):
        """Обработчик смены показателя: данные не запрашиваются заново."""
        self.current_subject = subject
        self.refresh_views()

    def refresh_views(self):
        """Пересобирает ряд текущего показателя и обновляет таблицу и график."""
        series = self.data_fetcher.get_series(self.records, self.current_subject)
        self.table.set_value_title(SUBJECT_COLUMN_TITLES[self.current_subject])
        self.table.load_series(series)
        self.chart_widget.set_series(series)

    # ==================== СООБЩЕНИЯ ====================

    def report_status(self, code: int):
        """Сообщает пользователю код ошибки HTTP."""
        alert = QMessageBox(self)
        alert.setIcon(QMessageBox.Critical)
        alert.setWindowTitle(UIConfig.MAIN_WINDOW_TITLE)
        alert.setText(f"HTTP Status Code {code}")
        alert.setInformativeText("The HTTP server returned an error status code.")
        alert.setStandardButtons(QMessageBox.Ok)
        alert.exec_()

    def report_error(self, error):
        """Сообщает пользователю текст ошибки."""
        QMessageBox.critical(self, UIConfig.MAIN_WINDOW_TITLE, str(error))

    def closeEvent(self, event):
        """Обработчик закрытия окна."""
        logger.info("Закрытие приложения, отмена фоновых запросов...")
        self.request_slots.shutdown()
        super().closeEvent(event)


def main():
    """Точка входа в приложение."""
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication(sys.argv)
    app.setFont(QFont(UIConfig.FONT_FAMILY, UIConfig.FONT_SIZE_NORMAL))

    window = CovidTrackingApp()
    window.show()
    window.start()

    logger.info("Приложение запущено")
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
