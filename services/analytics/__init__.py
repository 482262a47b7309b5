"""Derived analytics over simplified workouts: activity heatmap and volume trend."""

from services.analytics.heatmap import (
    Heatmap,
    HeatmapDay,
    HeatmapInsights,
    MonthLabel,
    build_heatmap,
    build_insights,
    intensity_level,
)
from services.analytics.volume import (
    VolumePoint,
    build_volume_series,
    parse_set_volume,
    workout_volume,
)

__all__ = [
    "Heatmap",
    "HeatmapDay",
    "HeatmapInsights",
    "MonthLabel",
    "VolumePoint",
    "build_heatmap",
    "build_insights",
    "build_volume_series",
    "intensity_level",
    "parse_set_volume",
    "workout_volume",
]
