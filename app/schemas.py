"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _FromDomain(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class DateItemSchema(_FromDomain):
    """One selectable day in the date selector."""

    id: str = Field(..., description="Day identifier in DD-MM-YYYY format.")
    label: str
    value: str
    date: str


class EnergyReadingSchema(_FromDomain):
    timestamp: str
    level: str


class EnergyLevelDataSchema(_FromDomain):
    """Readings for a single day."""

    id: str
    date: str
    timestamp: int = Field(..., description="Fetch time in epoch milliseconds.")
    raw_data: List[EnergyReadingSchema] = Field(default_factory=list)


class PlotPointSchema(_FromDomain):
    x: int = Field(..., ge=0)
    y: float
    color: str


class ProjectedPointSchema(_FromDomain):
    x: float
    y: float
    color: str


class GridLineSchema(_FromDomain):
    label: Optional[str] = None
    y: Optional[float] = None


class GridRowSchema(_FromDomain):
    label: str
    y: float


class GradientStopSchema(_FromDomain):
    offset: float = Field(..., ge=0, le=100)
    color: str


class ChartGeometrySchema(BaseModel):
    """Pixel-space geometry for the animated renderer."""

    width: float
    height: float
    points: List[ProjectedPointSchema] = Field(default_factory=list)
    line_path: str
    area_path: str
    stroke_stops: List[GradientStopSchema] = Field(default_factory=list)
    rows: List[GridRowSchema] = Field(default_factory=list)
    path_length: float = Field(..., ge=0)


class ChartResponse(BaseModel):
    day_id: str
    plot_points: List[PlotPointSchema] = Field(default_factory=list)
    grid_lines: List[GridLineSchema] = Field(default_factory=list)
    basis_path: str = Field(..., description="Auto-ranged basis spline over the inner plot box.")
    geometry: ChartGeometrySchema
