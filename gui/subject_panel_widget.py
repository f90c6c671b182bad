"""
Виджет панели выбора показателя.

Отображает кнопки для выбора показателя, который выводится на графике.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton
from PyQt5.QtCore import pyqtSignal
from loguru import logger

from covid_tracking.analytics.subjects import DEFAULT_SUBJECT, SUBJECT_TITLES, Subject
from gui.ui_config import UIConfig


class SubjectPanelWidget(QWidget):
    """
    Панель выбора показателя.
    """

    subject_changed = pyqtSignal(object)  # Сигнал с выбранным Subject

    def __init__(self, parent=None):
        """Инициализация панели показателей."""
        super().__init__(parent)
        self.current_subject = DEFAULT_SUBJECT
        self.buttons = {}
        self.setup_ui()

    def setup_ui(self):
        """Настройка UI панели."""
        layout = QHBoxLayout()
        layout.setContentsMargins(UIConfig.MARGIN_MEDIUM, UIConfig.MARGIN_SMALL,
                                  UIConfig.MARGIN_MEDIUM, UIConfig.MARGIN_SMALL)
        layout.setSpacing(UIConfig.SPACING_SMALL)

        label = QLabel("Show:")
        label.setStyleSheet(UIConfig.LABEL_STYLE)
        layout.addWidget(label)

        for subject in Subject:
            btn = QPushButton(SUBJECT_TITLES[subject])
            btn.setCheckable(True)
            btn.clicked.connect(lambda checked, s=subject: self.on_subject_clicked(s))
            btn.setStyleSheet(UIConfig.SUBJECT_BUTTON_STYLE)
            layout.addWidget(btn)
            self.buttons[subject] = btn

        layout.addStretch()
        self.setLayout(layout)
        self.set_subject(DEFAULT_SUBJECT)

    def set_subject(self, subject: Subject):
        """
        Устанавливает активный показатель.

        Параметры:
            subject: Показатель.
        """
        for btn_subject, btn in self.buttons.items():
            btn.setChecked(btn_subject == subject)
        self.current_subject = subject

    def on_subject_clicked(self, subject: Subject):
        """Обработчик клика по кнопке показателя."""
        self.set_subject(subject)
        logger.info(f"Выбран показатель: {SUBJECT_TITLES[subject]}")
        self.subject_changed.emit(subject)
