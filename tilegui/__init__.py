"""Immediate-mode pygame GUI drawn on a grid of fixed-size cells: geometry, styles, layout, canvas, widgets and a demo."""

__version__ = "0.1.0"
__all__ = ["canvas", "classic", "demo", "geometry", "gui", "layout", "style"]