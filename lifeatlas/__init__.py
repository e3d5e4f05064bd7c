"""Temporal simulation and scoring engine for life-phase planning."""

__version__ = "0.1.0"
