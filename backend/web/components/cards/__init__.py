"""
Card components for the AI Toolkit.

This module exposes the ToolCard used on the landing page grid.
"""

from .tool import ToolCard, CARD_THEMES

__all__ = ["ToolCard", "CARD_THEMES"]
