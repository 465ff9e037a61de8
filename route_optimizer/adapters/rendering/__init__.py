"""Rendering adapters - Implementations of the rendering port.

Available implementations:
- TextRouteRenderer: Plain-text console report
"""

from .text_renderer import TextRouteRenderer

__all__ = ["TextRouteRenderer"]
