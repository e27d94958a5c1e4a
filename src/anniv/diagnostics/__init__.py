"""Diagnostics package: command-line checks of the conversion backend."""

__all__ = ["round_trip", "leap_months"]
