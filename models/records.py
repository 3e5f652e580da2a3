"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class EnergyReading:
    """A single categorical energy-level observation."""

    timestamp: str
    level: str


@dataclass(frozen=True, slots=True)
class PlotPoint:
    """Chart-space point: ordinal ``x`` index, numeric ordinate and level color."""

    x: int
    y: float
    color: str


@dataclass(frozen=True, slots=True)
class ProjectedPoint:
    x: float
    y: float
    color: str


@dataclass(frozen=True, slots=True)
class GridLine:
    """A distinct level present in the readings, optionally placed on the chart."""

    label: str
    y: Optional[float] = None


@dataclass(frozen=True, slots=True)
class GridRow:
    label: str
    y: float


@dataclass(frozen=True, slots=True)
class GradientStop:
    offset: float
    color: str


@dataclass(frozen=True, slots=True)
class DateItem:
    """One selectable day; ``id`` uses the ``DD-MM-YYYY`` form."""

    id: str
    label: str
    value: str
    date: str


@dataclass(slots=True)
class EnergyLevelData:
    """Readings for one day as returned by the energy-level accessor."""

    id: str
    date: str
    timestamp: int
    raw_data: List[EnergyReading] = field(default_factory=list)
