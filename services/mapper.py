"""Categorical mapping of energy readings into chart points and grid labels."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from models.records import GridLine, PlotPoint

HIGH = "High"
MEDIUM = "Medium"
LOW = "Low"

LEVEL_ORDINATES: Dict[str, int] = {HIGH: 2, MEDIUM: 1, LOW: 0}
LEVEL_COLORS: Dict[str, str] = {
    HIGH: "#31E1FD",
    MEDIUM: "#9666FF",
    LOW: "#FF5395",
}
SEVERITY_RANK: Dict[str, int] = {LOW: 1, MEDIUM: 2, HIGH: 3}

UNKNOWN_ORDINATE = 0
UNKNOWN_COLOR = LEVEL_COLORS[MEDIUM]
# Unrecognized labels sort after every known level.
UNKNOWN_RANK = max(SEVERITY_RANK.values()) + 1


def reading_level(reading: Any) -> Any:
    """Return the level carried by a reading object or mapping.

    Mappings may use either ``level`` or ``value``; anything else yields ``None``.
    """
    if isinstance(reading, Mapping):
        if "level" in reading:
            return reading["level"]
        return reading.get("value")
    return getattr(reading, "level", getattr(reading, "value", None))


def level_ordinate(level: Any) -> int:
    return LEVEL_ORDINATES.get(level, UNKNOWN_ORDINATE) if isinstance(level, str) else UNKNOWN_ORDINATE


def level_color(level: Any) -> str:
    return LEVEL_COLORS.get(level, UNKNOWN_COLOR) if isinstance(level, str) else UNKNOWN_COLOR


class CategoricalMapper:
    """Pure mapping component; never raises for unexpected levels."""

    def to_plot_points(self, readings: Iterable[Any]) -> List[PlotPoint]:
        points: List[PlotPoint] = []
        for index, reading in enumerate(readings or ()):
            level = reading_level(reading)
            points.append(
                PlotPoint(x=index, y=level_ordinate(level), color=level_color(level))
            )
        return points

    def to_grid_lines(self, readings: Iterable[Any]) -> List[GridLine]:
        seen: Dict[Any, None] = {}
        for reading in readings or ():
            level = reading_level(reading)
            seen.setdefault(level if isinstance(level, str) else None, None)

        # sorted() is stable, so unknown labels keep first-occurrence order.
        ordered = sorted(seen, key=lambda level: SEVERITY_RANK.get(level, UNKNOWN_RANK))
        return [GridLine(label=level) for level in ordered]

    def grid_labels(self, readings: Iterable[Any]) -> List[Any]:
        return [line.label for line in self.to_grid_lines(readings)]
