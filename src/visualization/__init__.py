"""
Diagnostic visualizations. Nothing here affects crop output.
"""

from .heatmap import render, APEX_COLOR, DEFAULT_DISPLAY_SIZE

__all__ = [
    "render",
    "APEX_COLOR",
    "DEFAULT_DISPLAY_SIZE",
]
