"""Tests for ChartRenderer drawing through a recording surface."""

from __future__ import annotations

from covid_tracking.analytics.series_projector import DrawingRect
from gui.chart_drawers import ChartRenderer
from gui.ui_config import UIConfig

BOUNDS = DrawingRect(0, 0, 800, 500)


def test_render_empty_series_draws_only_frame(recording_surface) -> None:
    chart = ChartRenderer().render(recording_surface, [], BOUNDS)

    assert chart.is_empty
    assert [name for name, _ in recording_surface.calls] == ["fill_rect", "stroke_rect"]
    assert recording_surface.of_kind("fill_rect") == [BOUNDS]
    assert recording_surface.of_kind("stroke_rect") == [chart.plot_rect]


def test_render_draws_one_dot_per_point(recording_surface, make_series) -> None:
    series = make_series([3, 8, 2, 9, 4, 7, 6, 5, 1, 10])

    ChartRenderer().render(recording_surface, series, BOUNDS)

    dots = recording_surface.of_kind("fill_ellipse")
    assert len(dots) == len(series)
    assert all(dot.width == UIConfig.RAW_POINT_SIZE for dot in dots)


def test_render_average_line_has_window_offset(recording_surface, make_series) -> None:
    series = make_series(range(1, 21))

    chart = ChartRenderer().render(recording_surface, series, BOUNDS)

    (polyline,) = recording_surface.of_kind("stroke_polyline")
    assert len(polyline) == len(series) - 6
    assert polyline == [(point.x, point.y) for point in chart.average_line]


def test_render_writes_legend_and_axis_labels(recording_surface, make_series) -> None:
    series = make_series([10, 20, 15])

    chart = ChartRenderer().render(recording_surface, series, BOUNDS)

    texts = [text for _, _, text, _, _ in recording_surface.of_kind("draw_text")]
    assert UIConfig.LEGEND_TEXT in texts
    assert "10/01" in texts
    assert "10/03" in texts
    for label in chart.value_labels:
        assert label.text in texts


def test_render_labels_sit_outside_plot(recording_surface, make_series) -> None:
    chart = ChartRenderer().render(recording_surface, make_series(range(30)), BOUNDS)

    for x, y, text, h_align, _ in recording_surface.of_kind("draw_text"):
        if h_align == "center":
            assert y < chart.plot_rect.y
        elif h_align == "right":
            assert x < chart.plot_rect.x


def test_render_gridlines_only_for_interior_ticks(recording_surface, make_series) -> None:
    chart = ChartRenderer().render(recording_surface, make_series(range(30)), BOUNDS)

    segments = [segment for batch in recording_surface.of_kind("stroke_segments") for segment in batch]
    vertical_grid = [s for s in segments if s[0][1] == chart.plot_rect.y and s[1][1] == chart.plot_rect.top]
    horizontal_grid = [s for s in segments if s[0][0] == chart.plot_rect.x and s[1][0] == chart.plot_rect.right]

    assert len(vertical_grid) == len(chart.date_gridlines)
    assert len(horizontal_grid) == len(chart.value_gridlines)


def test_render_keeps_negative_values_inside_plot(recording_surface, make_series) -> None:
    """Dots and the average line are clipped to the plot so they never cover the axis labels."""
    chart = ChartRenderer().render(recording_surface, make_series([-10, -5] * 5), BOUNDS)

    assert any(point.y < chart.plot_rect.y for point in chart.points)
    clips = [clip for _, clip in recording_surface.clips]
    assert clips
    for clip in clips:
        assert clip is not None
        assert clip.x < chart.plot_rect.x and clip.right > chart.plot_rect.right
        assert chart.plot_rect.y - clip.y <= UIConfig.RAW_POINT_SIZE
        assert clip.top - chart.plot_rect.top <= UIConfig.RAW_POINT_SIZE
