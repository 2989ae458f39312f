"""Nested rectangular frame layout: rectangles, number kinds and frames that hand out child areas."""

__version__ = "0.3.3"
__all__ = ["frame", "num", "rect"]