"""Data-driven production definitions."""

from .loader import PERFORMERS, ProductionLoader, ProductionSpec, parse_margins, parse_stage

__all__ = ["PERFORMERS", "ProductionLoader", "ProductionSpec", "parse_margins", "parse_stage"]
