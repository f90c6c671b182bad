"""Headless tests for the Qt widgets and the main window wiring."""

from __future__ import annotations

from datetime import date

import pytest

QtWidgets = pytest.importorskip("PyQt5.QtWidgets")
QtGui = pytest.importorskip("PyQt5.QtGui")

from covid_tracking.analytics.subjects import Subject  # noqa: E402
from covid_tracking.api.errors import HttpStatusError  # noqa: E402
from covid_tracking.data.models import CovidDaily, StateInfo  # noqa: E402
from gui.chart_widget import CovidChartWidget  # noqa: E402
from gui.covid_tracking_app import CovidTrackingApp  # noqa: E402
from gui.daily_table_widget import DailyTableWidget  # noqa: E402
from gui.data_fetcher import DataFetcher  # noqa: E402
from gui.region_selector_widget import US_REGION, US_TITLE, RegionSelectorWidget  # noqa: E402
from gui.subject_panel_widget import SubjectPanelWidget  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


class RecordingSlots:
    """Request slots that only remember what was submitted."""

    def __init__(self) -> None:
        self.submitted = []
        self.callbacks = []
        self.closed = False

    def submit(self, slot, func, on_success, on_error, *args, **kwargs):
        self.submitted.append((slot, args))
        self.callbacks.append((on_success, on_error))

    def shutdown(self) -> None:
        self.closed = True


class StaticClient:
    def get_states_info(self):
        return [StateInfo("AK", "Alaska"), StateInfo("AZ", "Arizona")]

    def get_us_daily(self):
        return []

    def get_state_daily(self, code):
        return []


def make_records():
    return [
        CovidDaily(date(2020, 10, 3), "AZ", positive_increase=30, death_increase=3),
        CovidDaily(date(2020, 10, 2), "AZ", positive_increase=20, death_increase=None),
        CovidDaily(date(2020, 10, 1), "AZ", positive_increase=10, death_increase=1),
    ]


def test_table_lists_newest_first(qapp, make_series) -> None:
    table = DailyTableWidget()

    table.load_series(make_series([5, 6, 7]))

    assert table.rowCount() == 3
    assert table.item(0, 0).text() == "10/3/20"
    assert table.item(0, 1).text() == "7"
    assert table.item(2, 1).text() == "5"


def test_table_value_title(qapp) -> None:
    table = DailyTableWidget()

    table.set_value_title("Death Increase")

    assert table.horizontalHeaderItem(0).text() == "Date"
    assert table.horizontalHeaderItem(1).text() == "Death Increase"


def test_region_selector_puts_united_states_first(qapp) -> None:
    selector = RegionSelectorWidget()
    emitted = []
    selector.region_selected.connect(emitted.append)

    selector.load_states([StateInfo("AK", "Alaska"), StateInfo("AZ", "Arizona")], "AZ")

    assert selector.itemText(0) == US_TITLE
    assert selector.itemData(0) == US_REGION
    assert selector.current_region() == "AZ"
    assert emitted == []


def test_region_selector_emits_on_activation(qapp) -> None:
    selector = RegionSelectorWidget()
    selector.load_states([StateInfo("AK", "Alaska")])
    emitted = []
    selector.region_selected.connect(emitted.append)

    selector.on_item_activated(1)
    selector.on_item_activated(0)

    assert emitted == ["AK", US_REGION]


def test_subject_panel_is_exclusive(qapp) -> None:
    panel = SubjectPanelWidget()
    emitted = []
    panel.subject_changed.connect(emitted.append)

    panel.buttons[Subject.NEW_DEATHS].click()

    assert emitted == [Subject.NEW_DEATHS]
    assert panel.current_subject is Subject.NEW_DEATHS
    assert [s for s, btn in panel.buttons.items() if btn.isChecked()] == [Subject.NEW_DEATHS]


def test_chart_widget_keeps_layout(qapp, make_series) -> None:
    widget = CovidChartWidget()
    widget.resize(800, 500)

    widget.set_series(make_series(range(20)))

    assert widget.last_layout is not None
    assert len(widget.last_layout.points) == 20


def test_app_start_requests_states_and_default_region(qapp) -> None:
    slots = RecordingSlots()
    window = CovidTrackingApp(DataFetcher(StaticClient()), slots)

    window.start()

    assert slots.submitted == [("states", ()), ("daily", ("AZ",))]


def test_app_subject_change_does_not_refetch(qapp) -> None:
    slots = RecordingSlots()
    window = CovidTrackingApp(DataFetcher(StaticClient()), slots)
    window.request_daily("AZ")
    on_success, _ = slots.callbacks[-1]
    on_success(make_records())

    window.on_subject_changed(Subject.NEW_DEATHS)

    assert len(slots.submitted) == 1
    assert window.table.horizontalHeaderItem(1).text() == "Death Increase"
    assert [window.table.item(row, 1).text() for row in range(3)] == ["3", "0", "1"]


def test_app_region_selection_requests_daily(qapp) -> None:
    slots = RecordingSlots()
    window = CovidTrackingApp(DataFetcher(StaticClient()), slots)

    window.on_region_selected(US_REGION)

    assert slots.submitted == [("daily", (US_REGION,))]


def test_app_reports_http_status(qapp, monkeypatch) -> None:
    slots = RecordingSlots()
    window = CovidTrackingApp(DataFetcher(StaticClient()), slots)
    reported = []
    monkeypatch.setattr(window, "report_status", reported.append)
    monkeypatch.setattr(window, "report_error", lambda error: pytest.fail(f"unexpected {error}"))

    window.request_daily("AZ")
    _, on_error = slots.callbacks[-1]
    on_error(HttpStatusError(503))

    assert reported == [503]


def test_app_close_shuts_down_requests(qapp) -> None:
    slots = RecordingSlots()
    window = CovidTrackingApp(DataFetcher(StaticClient()), slots)

    window.closeEvent(QtGui.QCloseEvent())

    assert slots.closed


def test_app_drops_result_of_superseded_request(qapp, monkeypatch) -> None:
    """A result emitted just before a newer request must not overwrite the view."""
    slots = RecordingSlots()
    window = CovidTrackingApp(DataFetcher(StaticClient()), slots)
    monkeypatch.setattr(window, "report_status", lambda code: None)
    window.request_daily("AZ")
    window.request_daily(US_REGION)
    (old_success, _), (_, new_error) = slots.callbacks

    old_success(make_records())
    new_error(HttpStatusError(500))

    assert window.records == []
    assert window.table.rowCount() == 0
    assert window.current_region == "AZ"


def test_app_drops_error_of_superseded_request(qapp, monkeypatch) -> None:
    slots = RecordingSlots()
    window = CovidTrackingApp(DataFetcher(StaticClient()), slots)
    reported = []
    monkeypatch.setattr(window, "report_status", reported.append)
    window.request_daily("AZ")
    window.request_daily("AK")
    (_, old_error), (new_success, _) = slots.callbacks

    old_error(HttpStatusError(404))
    new_success(make_records())

    assert reported == []
    assert window.current_region == "AK"
    assert window.table.rowCount() == 3


def test_app_ignores_stale_state_list(qapp) -> None:
    slots = RecordingSlots()
    window = CovidTrackingApp(DataFetcher(StaticClient()), slots)
    window.request_states()
    window.request_states()
    (old_success, _), (new_success, _) = slots.callbacks

    old_success([StateInfo("AK", "Alaska")])
    assert window.region_selector.count() == 1

    new_success([StateInfo("AK", "Alaska"), StateInfo("AZ", "Arizona")])
    assert window.region_selector.count() == 3
