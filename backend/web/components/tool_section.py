"""
ToolSection component.

Groups tool cards under a themed heading. The section theme decides both the
heading icon and the colour of every card in the group.
"""

from typing import Dict, Iterable, List

from .base import Component
from .cards import ToolCard

SECTION_THEMES: Dict[str, Dict[str, str]] = {
    "data": {"icon": "📊", "card_theme": "blue"},
    "generate": {"icon": "✨", "card_theme": "green"},
    "analyze": {"icon": "🔍", "card_theme": "purple"},
    "automate": {"icon": "🤖", "card_theme": "orange"},
}


class ToolSection(Component):
    def __init__(self, title: str, tools: Iterable, *, theme: str = "data") -> None:
        self.title = title
        self.tools: List = list(tools)
        self.theme = theme if theme in SECTION_THEMES else "data"

    def render(self) -> str:
        config = SECTION_THEMES[self.theme]
        cards = "".join(
            ToolCard(
                tool.title,
                tool.description,
                tool.href,
                coming_soon=tool.coming_soon,
                is_active=tool.is_active,
                theme=config["card_theme"],
            ).render()
            for tool in self.tools
        )
        return (
            f'<section class="tool-section tool-section--{self.theme}">'
            '<div class="tool-section__header">'
            f'<h2><span class="tool-section__icon" aria-hidden="true">{config["icon"]}</span>'
            f"{self.escape(self.title)}</h2>"
            "</div>"
            f'<div class="tool-section__grid">{cards}</div>'
            "</section>"
        )
