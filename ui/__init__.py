"""UI components for the terminal interface."""

from ui.base import ColorPair, setup_colors
from ui.render import render
from ui.screen import Screen, translate_key
from ui.debug_panel import DebugPanel, DebugPanelHandler

__all__ = [
    "ColorPair",
    "setup_colors",
    "render",
    "Screen",
    "translate_key",
    "DebugPanel",
    "DebugPanelHandler",
]
