"""SVG path synthesis for the energy line chart.

Two builders live here:

* ``build_line_path`` scales raw points into a ``width`` x ``height`` box and
  smooths them with a uniform cubic B-spline (the ``curveBasis`` command
  sequence familiar from d3).
* ``build_smooth_path`` / ``build_area_path`` take already projected pixel
  points and run a Catmull-Rom spline through them, emitted as cubic Bezier
  segments. ``smooth_path_length`` measures that same curve so a renderer can
  animate ``stroke-dashoffset``.

None of the builders raise for degenerate input: they return ``""`` or a
move-only path instead.
"""

from __future__ import annotations

import math
from typing import Iterator, List, Sequence, Tuple

Point = Tuple[float, float]
Segment = Tuple[Point, Point, Point, Point]

DEFAULT_TENSION = 0.5
_MIN_RANGE = 1e-6
_LENGTH_TOLERANCE = 1e-3
_MAX_SPLIT_DEPTH = 12


def format_number(value: float) -> str:
    """Render a coordinate compactly and deterministically."""
    rounded = round(float(value), 3)
    if rounded == 0:
        return "0"
    text = f"{rounded:.3f}".rstrip("0").rstrip(".")
    return text


def _xy(point) -> Point:
    if isinstance(point, (tuple, list)):
        return float(point[0]), float(point[1])
    if isinstance(point, dict):
        return float(point["x"]), float(point["y"])
    return float(point.x), float(point.y)


def _y(point) -> float:
    return _xy(point)[1]


def _fmt_pair(x: float, y: float) -> str:
    return f"{format_number(x)},{format_number(y)}"


def build_line_path(points: Sequence, width: float, height: float) -> str:
    """Scale ``points`` into the box and return a basis-spline path string.

    Only the order and ``y`` of each point matter; x positions are spread
    evenly across ``[0, width]`` by index. When every ``y`` is at most 1 the
    series is treated as normalized and the domain top is pinned to 1.
    """
    if not points or not width or not height or width <= 0 or height <= 0:
        return ""

    ys = [_y(point) for point in points]
    observed_max = max(ys)
    y_max = 1.0 if observed_max <= 1 else observed_max
    y_min = min(ys)
    y_range = max(_MIN_RANGE, y_max - y_min)
    last_index = max(1, len(ys) - 1)

    scaled = [
        (index / last_index * width, height - (y - y_min) / y_range * height)
        for index, y in enumerate(ys)
    ]
    return _basis_path(scaled)


def _basis_path(points: Sequence[Point]) -> str:
    (x0, y0) = points[0]
    commands: List[str] = [f"M{_fmt_pair(x0, y0)}"]
    if len(points) == 1:
        return commands[0]
    if len(points) == 2:
        commands.append(f"L{_fmt_pair(*points[1])}")
        return "".join(commands)

    (x1, y1) = points[1]
    commands.append(f"L{_fmt_pair((5 * x0 + x1) / 6, (5 * y0 + y1) / 6)}")
    for x, y in list(points[2:]) + [points[-1]]:
        commands.append(
            "C"
            + ",".join(
                (
                    _fmt_pair((2 * x0 + x1) / 3, (2 * y0 + y1) / 3),
                    _fmt_pair((x0 + 2 * x1) / 3, (y0 + 2 * y1) / 3),
                    _fmt_pair((x0 + 4 * x1 + x) / 6, (y0 + 4 * y1 + y) / 6),
                )
            )
        )
        x0, y0, x1, y1 = x1, y1, x, y
    commands.append(f"L{_fmt_pair(x1, y1)}")
    return "".join(commands)


def catmull_rom_segments(points: Sequence, tension: float = DEFAULT_TENSION) -> Iterator[Segment]:
    """Yield ``(start, control1, control2, end)`` for each consecutive pair.

    Missing neighbours at either end are replaced by the endpoint itself.
    """
    pts = [_xy(point) for point in points]
    factor = tension * 3 / 6
    for index in range(len(pts) - 1):
        p0 = pts[index - 1] if index > 0 else pts[index]
        p1 = pts[index]
        p2 = pts[index + 1]
        p3 = pts[index + 2] if index + 2 < len(pts) else pts[index + 1]
        cp1 = (p1[0] + (p2[0] - p0[0]) * factor, p1[1] + (p2[1] - p0[1]) * factor)
        cp2 = (p2[0] - (p3[0] - p1[0]) * factor, p2[1] - (p3[1] - p1[1]) * factor)
        yield p1, cp1, cp2, p2


def build_smooth_path(points: Sequence, tension: float = DEFAULT_TENSION) -> str:
    if not points:
        return ""
    x, y = _xy(points[0])
    path = f"M {format_number(x)} {format_number(y)}"
    for _start, cp1, cp2, end in catmull_rom_segments(points, tension):
        coords = " ".join(format_number(value) for value in (*cp1, *cp2, *end))
        path += f" C {coords}"
    return path


def build_area_path(points: Sequence, baseline: float, tension: float = DEFAULT_TENSION) -> str:
    """Close the smooth curve down to ``baseline`` so it can be filled."""
    if not points:
        return ""
    first_x, _ = _xy(points[0])
    last_x, _ = _xy(points[-1])
    base = format_number(baseline)
    return (
        f"{build_smooth_path(points, tension)}"
        f" L {format_number(last_x)} {base}"
        f" L {format_number(first_x)} {base} Z"
    )


def _distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def _midpoint(a: Point, b: Point) -> Point:
    return (a[0] + b[0]) / 2, (a[1] + b[1]) / 2


def _split(segment: Segment) -> Tuple[Segment, Segment]:
    """de Casteljau split at t = 0.5."""
    p0, p1, p2, p3 = segment
    p01, p12, p23 = _midpoint(p0, p1), _midpoint(p1, p2), _midpoint(p2, p3)
    p012, p123 = _midpoint(p01, p12), _midpoint(p12, p23)
    middle = _midpoint(p012, p123)
    return (p0, p01, p012, middle), (middle, p123, p23, p3)


def _segment_length(segment: Segment, tolerance: float, depth: int = 0) -> float:
    # The control polygon is never shorter than the curve, so this never undershoots.
    p0, p1, p2, p3 = segment
    polygon = _distance(p0, p1) + _distance(p1, p2) + _distance(p2, p3)
    if polygon - _distance(p0, p3) <= tolerance or depth >= _MAX_SPLIT_DEPTH:
        return polygon
    left, right = _split(segment)
    return _segment_length(left, tolerance / 2, depth + 1) + _segment_length(right, tolerance / 2, depth + 1)


def smooth_path_length(
    points: Sequence,
    tension: float = DEFAULT_TENSION,
    tolerance: float = _LENGTH_TOLERANCE,
) -> float:
    """Arc length of ``build_smooth_path(points)``, rounded up within ``tolerance`` per segment.

    Used as the dash length of the draw animation, where an undershoot would
    leave the tail of the line visible before drawing starts.
    """
    return sum(
        _segment_length(segment, tolerance)
        for segment in catmull_rom_segments(points, tension)
    )
