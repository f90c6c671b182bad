"""Shared fixtures for the COVID Tracking test suite."""

from __future__ import annotations

import os
from datetime import date, timedelta
from typing import Callable, List, Sequence

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

from covid_tracking.data.models import TimeSeriesPoint  # noqa: E402

START_DAY = date(2020, 10, 1)


def build_series(values: Sequence[int], start: date = START_DAY) -> List[TimeSeriesPoint]:
    """Ascending daily series starting at ``start``."""
    return [TimeSeriesPoint(start + timedelta(days=offset), value) for offset, value in enumerate(values)]


@pytest.fixture
def make_series() -> Callable[..., List[TimeSeriesPoint]]:
    return build_series


class RecordingSurface:
    """Drawing surface that stores every primitive call for assertions."""

    def __init__(self) -> None:
        self.calls: list = []
        self.clips: list = []

    def fill_rect(self, rect, color) -> None:
        self.calls.append(("fill_rect", rect))

    def stroke_rect(self, rect, color, line_width: float = 1.0) -> None:
        self.calls.append(("stroke_rect", rect))

    def fill_ellipse(self, rect, color, clip=None) -> None:
        self.calls.append(("fill_ellipse", rect))
        self.clips.append(("fill_ellipse", clip))

    def fill_ellipses(self, rects, color, clip=None) -> None:
        for rect in rects:
            self.fill_ellipse(rect, color, clip)

    def stroke_polyline(self, points, color, line_width: float = 1.0, clip=None) -> None:
        self.calls.append(("stroke_polyline", list(points)))
        self.clips.append(("stroke_polyline", clip))

    def stroke_segments(self, segments, color, line_width: float = 1.0) -> None:
        self.calls.append(("stroke_segments", list(segments)))

    def draw_text(self, x, y, text, h_align="left", v_align="bottom", color=None, size=None, family=None) -> None:
        self.calls.append(("draw_text", (x, y, text, h_align, v_align)))

    def of_kind(self, kind: str) -> list:
        return [payload for name, payload in self.calls if name == kind]


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()
