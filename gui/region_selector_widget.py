"""
Виджет выбора региона: США целиком или отдельный штат.
"""

from PyQt5.QtWidgets import QComboBox
from PyQt5.QtCore import pyqtSignal
from loguru import logger

from gui.ui_config import UIConfig

US_REGION = ""  # Код региона для данных по США
US_TITLE = "United States"


class RegionSelectorWidget(QComboBox):
    """
    Выпадающий список регионов.

    Первый пункт всегда "United States", далее штаты из /v1/states/info.json.
    """

    region_selected = pyqtSignal(str)  # Код штата или US_REGION

    def __init__(self, parent=None):
        """Инициализация списка регионов."""
        super().__init__(parent)
        self.setStyleSheet(UIConfig.COMBO_BOX_STYLE)
        self.addItem(US_TITLE, US_REGION)
        self.activated.connect(self.on_item_activated)

    def load_states(self, states, selected_code: str = None):
        """
        Загружает список штатов.

        Параметры:
            states: Список объектов StateInfo.
            selected_code: Код штата, который нужно выбрать (например, 'AZ').
        """
        self.blockSignals(True)
        self.clear()
        self.addItem(US_TITLE, US_REGION)
        for state in states:
            self.addItem(state.name, state.state)
        if selected_code:
            index = self.findData(selected_code)
            if index >= 0:
                self.setCurrentIndex(index)
        self.blockSignals(False)
        logger.debug(f"Загружено {len(states)} штатов в список")

    def current_region(self) -> str:
        """Код выбранного региона."""
        code = self.currentData()
        return code if code is not None else US_REGION

    def on_item_activated(self, index: int):
        """Обработчик выбора пункта пользователем."""
        code = self.itemData(index)
        if code is None:
            return
        logger.info(f"Выбран регион: {self.itemText(index)}")
        self.region_selected.emit(code)
