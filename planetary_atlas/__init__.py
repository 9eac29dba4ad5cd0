"""Planetary Atlas.

Aggregates named surface features of celestial bodies from the USGS
nomenclature archives and a curated catalog, assigns each feature to its
containing region, and resolves best-effort geological timelines for
notable features.
"""

__version__ = "0.1.0"
