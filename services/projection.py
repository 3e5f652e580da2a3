"""Projection of chart-space points into pixel space and per-render geometry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from models.records import GradientStop, GridLine, GridRow, PlotPoint, ProjectedPoint
from services.paths import (
    DEFAULT_TENSION,
    build_area_path,
    build_smooth_path,
    smooth_path_length,
)

logger = logging.getLogger(__name__)

DEFAULT_LABELS: Tuple[str, ...] = ("High", "Medium", "Low")


@dataclass(frozen=True)
class ChartLayout:
    """Pixel layout of the chart card."""

    width: float = 343
    height: float = 178
    padding: float = 34
    label_gutter: float = 72
    right_gutter: float = 20
    y_max: Optional[float] = None
    grid_rows: int = 3
    labels: Tuple[str, ...] = DEFAULT_LABELS
    tension: float = DEFAULT_TENSION
    stroke_width: float = 3
    dot_radius: float = 8

    @property
    def inner_width(self) -> float:
        return self.width - self.padding - self.label_gutter - self.right_gutter

    @property
    def inner_height(self) -> float:
        return self.height - self.padding * 2

    @property
    def plot_left(self) -> float:
        return self.padding + self.label_gutter

    @property
    def plot_right(self) -> float:
        return self.width - self.padding - self.right_gutter

    @property
    def baseline(self) -> float:
        return self.padding + self.inner_height


@dataclass(frozen=True)
class Domain:
    min: float
    max: float

    @property
    def span(self) -> float:
        # Zero span falls back to 1 so a single distinct value never divides by zero.
        return (self.max - self.min) or 1


@dataclass(frozen=True)
class ChartGeometry:
    """Everything needed to draw one frame-independent render of the chart."""

    layout: ChartLayout
    points: List[ProjectedPoint] = field(default_factory=list)
    line_path: str = ""
    area_path: str = ""
    stroke_stops: List[GradientStop] = field(default_factory=list)
    rows: List[GridRow] = field(default_factory=list)
    path_length: float = 0.0

    @property
    def last_point(self) -> Optional[ProjectedPoint]:
        return self.points[-1] if self.points else None

    @property
    def is_empty(self) -> bool:
        return not self.points


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def sort_points(points: Sequence[PlotPoint]) -> List[PlotPoint]:
    return sorted(points or (), key=lambda point: point.x)


def x_domain(points: Sequence[PlotPoint]) -> Domain:
    if not points:
        return Domain(min=0, max=1)
    return Domain(min=points[0].x, max=points[-1].x)


def y_domain(points: Sequence[PlotPoint], y_max: Optional[float] = None) -> Domain:
    if y_max is None:
        y_max = max([1.0, *(point.y for point in points)])
    return Domain(min=0, max=y_max)


def scale_x(x: float, layout: ChartLayout, domain_x: Domain) -> float:
    return layout.plot_left + (x - domain_x.min) / domain_x.span * layout.inner_width


def scale_y(y: float, layout: ChartLayout, domain_y: Domain) -> float:
    clamped = _clamp(y, domain_y.min, domain_y.max)
    return layout.padding + layout.inner_height - clamped / domain_y.span * layout.inner_height


def project_points(points: Sequence[PlotPoint], layout: ChartLayout) -> List[ProjectedPoint]:
    """Sort by ``x`` and map every point into pixel space for ``layout``."""
    ordered = sort_points(points)
    domain_x = x_domain(ordered)
    domain_y = y_domain(ordered, layout.y_max)
    return [
        ProjectedPoint(
            x=scale_x(point.x, layout, domain_x),
            y=scale_y(point.y, layout, domain_y),
            color=point.color,
        )
        for point in ordered
    ]


def stroke_stops(points: Sequence[PlotPoint]) -> List[GradientStop]:
    """Left-to-right gradient: one stop per reading at its relative x position."""
    ordered = sort_points(points)
    domain_x = x_domain(ordered)
    return [
        GradientStop(offset=(point.x - domain_x.min) / domain_x.span * 100, color=point.color)
        for point in ordered
    ]


def grid_rows(points: Sequence[PlotPoint], layout: ChartLayout) -> List[GridRow]:
    """Evenly spaced labelled guides from the domain top down to zero."""
    domain_y = y_domain(points, layout.y_max)
    rows: List[GridRow] = []
    for index in range(max(0, layout.grid_rows)):
        fraction = index / (layout.grid_rows - 1) if layout.grid_rows > 1 else 0
        value = domain_y.max - fraction * (domain_y.max - domain_y.min)
        label = layout.labels[index] if index < len(layout.labels) else ""
        rows.append(GridRow(label=label, y=scale_y(value, layout, domain_y)))
    return rows


def place_grid_lines(
    lines: Sequence[GridLine],
    points: Sequence[PlotPoint],
    layout: ChartLayout,
    ordinates: dict,
) -> List[GridLine]:
    """Attach a projected y to each grid line whose label has a known ordinate."""
    domain_y = y_domain(points, layout.y_max)
    placed: List[GridLine] = []
    for line in lines:
        ordinate = ordinates.get(line.label) if isinstance(line.label, str) else None
        y = scale_y(ordinate, layout, domain_y) if ordinate is not None else None
        placed.append(GridLine(label=line.label, y=y))
    return placed


def build_geometry(points: Sequence[PlotPoint], layout: ChartLayout | None = None) -> ChartGeometry:
    layout = layout or ChartLayout()
    projected = project_points(points, layout)
    geometry = ChartGeometry(
        layout=layout,
        points=projected,
        line_path=build_smooth_path(projected, layout.tension),
        area_path=build_area_path(projected, layout.baseline, layout.tension),
        stroke_stops=stroke_stops(points),
        rows=grid_rows(points, layout),
        path_length=smooth_path_length(projected, layout.tension),
    )
    logger.debug(
        "Built chart geometry",
        extra={
            "point_count": len(projected),
            "path_length": round(geometry.path_length, 2),
            "width": layout.width,
            "height": layout.height,
        },
    )
    return geometry
