"""Conductor, timing helpers and chart data model for rhythm games."""

__version__ = "0.1.0"

__all__ = ["chart", "conductor", "note_data", "row_data", "sv_change", "time_change", "timing"]