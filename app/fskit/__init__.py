"""fskit - a thin convenience layer over host filesystem primitives."""

__version__ = "0.1.0"
