"""Tests for mapping (date, value) points onto a pixel rectangle."""

from __future__ import annotations

from datetime import date

import pytest

from covid_tracking.analytics.series_projector import (
    DrawingRect, PixelPoint, project, project_date, project_value
)


def test_project_three_points(make_series) -> None:
    series = make_series([10, 20, 15])
    rect = DrawingRect(0, 0, 100, 100)

    points = project(series, rect, (10, 20))

    assert points == [PixelPoint(0, 0), PixelPoint(50, 100), PixelPoint(100, 50)]


def test_project_maps_extremes_to_rect_edges(make_series) -> None:
    series = make_series([0, 5, 3, 50])
    rect = DrawingRect(75, 75, 400, 200)

    points = project(series, rect, (0, 50))

    assert points[0].x == pytest.approx(rect.x)
    assert points[-1].x == pytest.approx(rect.right)
    assert points[0].y == pytest.approx(rect.y)
    assert points[-1].y == pytest.approx(rect.top)


def test_project_larger_values_are_higher(make_series) -> None:
    points = project(make_series([1, 9]), DrawingRect(0, 0, 10, 10), (0, 10))

    assert points[1].y > points[0].y


def test_project_single_date_is_centered(make_series) -> None:
    rect = DrawingRect(10, 20, 200, 100)

    (point,) = project(make_series([5]), rect, (0, 10))

    assert point.x == pytest.approx(110)
    assert point.y == pytest.approx(70)


def test_project_flat_value_range_is_centered() -> None:
    rect = DrawingRect(0, 0, 100, 40)

    assert project_value(3, (3, 3), rect) == pytest.approx(20)


def test_project_with_explicit_date_range(make_series) -> None:
    """A shorter series can be projected against a wider date range."""
    series = make_series([1, 2, 3, 4, 5])
    rect = DrawingRect(0, 0, 40, 10)

    points = project(series[2:], rect, (0, 10), (series[0].date, series[-1].date))

    assert [point.x for point in points] == pytest.approx([20, 30, 40])


def test_project_empty_series() -> None:
    assert project([], DrawingRect(0, 0, 10, 10), (0, 1)) == []


def test_project_date_zero_span() -> None:
    day = date(2020, 3, 1)

    assert project_date(day, day, day, DrawingRect(0, 0, 50, 50)) == pytest.approx(25)
