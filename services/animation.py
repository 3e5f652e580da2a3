"""Draw-progress helpers for the animated line.

The scheduler (browser CSS, a frame loop, a test) owns time; these functions
only turn elapsed time or a progress value into what should be painted.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DrawTimings:
    ui_ms: float = 400
    line_ms: float = 1200
    delay_between_ms: float = 120

    @property
    def line_start_ms(self) -> float:
        return self.ui_ms + self.delay_between_ms

    @property
    def total_ms(self) -> float:
        return self.line_start_ms + self.line_ms


@dataclass(frozen=True)
class DrawFrame:
    ui_opacity: float
    progress: float
    dash_offset: float
    dash_length: float

    @property
    def fill_opacity(self) -> float:
        return self.progress


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def ease_out_cubic(t: float) -> float:
    t = _unit(t)
    return 1 - (1 - t) ** 3


def dash_offset(path_length: float, progress: float) -> float:
    """Offset that reveals ``progress`` of a path drawn with dasharray ``L L``."""
    length = path_length or 1
    return length * (1 - _unit(progress))


def frame_for_progress(progress: float, path_length: float, ui_opacity: float = 1.0) -> DrawFrame:
    progress = _unit(progress)
    return DrawFrame(
        ui_opacity=_unit(ui_opacity),
        progress=progress,
        dash_offset=dash_offset(path_length, progress),
        dash_length=path_length or 1,
    )


def frame_at(elapsed_ms: float, path_length: float, timings: DrawTimings | None = None) -> DrawFrame:
    """UI fades in first, then the line draws after a short pause."""
    timings = timings or DrawTimings()
    ui_t = elapsed_ms / timings.ui_ms if timings.ui_ms > 0 else 1.0
    line_t = (
        (elapsed_ms - timings.line_start_ms) / timings.line_ms
        if timings.line_ms > 0
        else float(elapsed_ms >= timings.line_start_ms)
    )
    return frame_for_progress(
        ease_out_cubic(line_t),
        path_length,
        ui_opacity=ease_out_cubic(ui_t),
    )
