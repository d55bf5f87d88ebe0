"""Maple ranking dashboard: ranking snapshot aggregation and static web UI."""

__version__ = "1.0.0"
