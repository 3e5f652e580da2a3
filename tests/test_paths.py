from __future__ import annotations

import math

import pytest

from models.records import PlotPoint
from services.animation import dash_offset
from services.mapper import CategoricalMapper
from services.paths import (
    build_area_path,
    build_line_path,
    build_smooth_path,
    catmull_rom_segments,
    format_number,
    smooth_path_length,
)
from services.projection import build_geometry
from storage.seed_data import ENERGY_READINGS


def _points(*ys: float) -> list[dict]:
    return [{"x": index, "y": y} for index, y in enumerate(ys)]


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1.0, "1"), (2.5, "2.5"), (1 / 3, "0.333"), (-0.0001, "0"), (-12.25, "-12.25")],
)
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_build_line_path_empty_points() -> None:
    assert build_line_path([], 300, 200) == ""


@pytest.mark.parametrize(("width", "height"), [(0, 200), (300, 0), (-5, 200), (300, -1)])
def test_build_line_path_invalid_dimensions(width: float, height: float) -> None:
    assert build_line_path(_points(1), width, height) == ""


def test_build_line_path_single_point_is_move_only() -> None:
    path = build_line_path(_points(1), 300, 200)

    assert path == "M0,200"
    assert "L" not in path and "C" not in path


def test_build_line_path_two_points_is_straight_line() -> None:
    assert build_line_path(_points(0, 2), 100, 50) == "M0,50L100,0"


def test_build_line_path_basis_spline() -> None:
    path = build_line_path(_points(1, 2, 0), 300, 200)

    assert path == (
        "M0,100"
        "L25,83.333"
        "C50,66.667,100,33.333,150,50"
        "C200,66.667,250,133.333,275,166.667"
        "L300,200"
    )


def test_build_line_path_ignores_input_x() -> None:
    spaced = [PlotPoint(x=0, y=1, color=""), PlotPoint(x=40, y=2, color=""), PlotPoint(x=41, y=0, color="")]

    assert build_line_path(spaced, 300, 200) == build_line_path(_points(1, 2, 0), 300, 200)


def test_build_line_path_high_to_low_runs_top_left_to_bottom_right() -> None:
    path = build_line_path(_points(2, 1, 0), 300, 200)

    assert path.startswith("M0,0")
    assert path.endswith("L300,200")


def test_build_line_path_normalized_series_keeps_unit_domain() -> None:
    normalized = build_line_path(_points(0.2, 0.5, 0.8), 300, 200)
    raw = build_line_path(_points(2, 5, 8), 300, 200)

    # 0.8 sits three quarters up a [0.2, 1] domain, not at the very top.
    assert normalized.endswith("L300,50")
    assert raw.endswith("L300,0")


def test_build_line_path_flat_series_does_not_divide_by_zero() -> None:
    path = build_line_path(_points(2, 2, 2), 300, 200)

    assert path.startswith("M0,200")
    assert path.endswith("L300,200")


def test_build_line_path_is_pure() -> None:
    points = _points(0, 2, 1, 1, 0)

    assert build_line_path(points, 320, 110) == build_line_path(points, 320, 110)


def test_build_smooth_path_degenerate_inputs() -> None:
    assert build_smooth_path([]) == ""
    assert build_smooth_path([(1, 2)]) == "M 1 2"


def test_build_smooth_path_two_points() -> None:
    assert build_smooth_path([(0, 0), (10, 10)]) == "M 0 0 C 2.5 2.5 7.5 7.5 10 10"


def test_build_smooth_path_emits_one_segment_per_pair() -> None:
    path = build_smooth_path([(0, 0), (10, 5), (20, 0), (30, 5)])

    assert path.startswith("M 0 0")
    assert path.count(" C ") == 3
    assert path.endswith(" 30 5")


def test_build_area_path_closes_to_baseline() -> None:
    points = [(0, 0), (10, 10)]

    area = build_area_path(points, baseline=20)

    assert area == "M 0 0 C 2.5 2.5 7.5 7.5 10 10 L 10 20 L 0 20 Z"
    assert area.startswith(build_smooth_path(points))


def test_build_area_path_degenerate_inputs() -> None:
    assert build_area_path([], baseline=20) == ""
    assert build_area_path([(5, 5)], baseline=20) == "M 5 5 L 5 20 L 5 20 Z"


def test_smooth_path_length_of_straight_segment() -> None:
    assert smooth_path_length([(0, 0), (10, 10)]) == pytest.approx(math.hypot(10, 10))


def test_smooth_path_length_degenerate_inputs() -> None:
    assert smooth_path_length([]) == 0.0
    assert smooth_path_length([(3, 4)]) == 0.0


def test_smooth_path_length_covers_at_least_the_chord() -> None:
    points = [(0, 0), (10, 5), (20, 0), (30, 5)]

    length = smooth_path_length(points)

    chord = sum(math.dist(a, b) for a, b in zip(points, points[1:]))
    assert length >= chord - 1e-6


def _sampled_length(points, samples: int = 4000) -> float:
    total = 0.0
    for p0, p1, p2, p3 in catmull_rom_segments(points):
        previous = p0
        for step in range(1, samples + 1):
            t = step / samples
            mt = 1 - t
            current = tuple(
                mt**3 * a + 3 * mt * mt * t * b + 3 * mt * t * t * c + t**3 * d
                for a, b, c, d in zip(p0, p1, p2, p3)
            )
            total += math.dist(previous, current)
            previous = current
    return total


def test_smooth_path_length_hides_whole_line_at_zero_progress() -> None:
    mapper = CategoricalMapper()
    geometry = build_geometry(mapper.to_plot_points(ENERGY_READINGS))

    converged = _sampled_length([(point.x, point.y) for point in geometry.points])

    assert dash_offset(geometry.path_length, 0) >= converged
    assert geometry.path_length - converged < 5e-2
