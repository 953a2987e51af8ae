"""Hike Log Analytics — hiking log ingestion, normalization and derived stats."""

__version__ = "1.0.0"
