"""Signage Admin - media ingestion console for a digital-signage network."""

__version__ = "0.1.0"
