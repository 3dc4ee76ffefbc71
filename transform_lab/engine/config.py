"""Engine configuration — viewport fitting, grid and shape constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Constants shared by the pipeline, viewport fitter and grid generator."""

    # Viewport padding = max extent * ratio + minimum
    padding_ratio: float = 0.2
    padding_min: float = 2.0

    # Fallback viewport is [-half, half] on both axes
    default_half_extent: float = 5.0

    # Side of the square presentation space
    presentation_size: float = 100.0

    # Grid step aims for roughly this many divisions per axis
    grid_divisions: int = 10

    # Polygon approximation of the circle preset
    circle_segments: int = 36

    # Memoized (shape, operations) evaluations kept by TransformEngine
    cache_size: int = 128
