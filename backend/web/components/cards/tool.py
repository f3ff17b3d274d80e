"""
ToolCard component.

One entry of the landing page grid. Live tools render as a link with a
"Launch Tool" call to action; unfinished tools render as a muted card with a
"Coming Soon" marker and a disabled "In Development" badge.
"""

from typing import Optional

from ..base import Component

CARD_THEMES = ("blue", "green", "purple", "orange")


class ToolCard(Component):
    """
    Renders a single tool card.

    Args:
        title: Tool name.
        description: Optional one-line description.
        href: Target URL for live tools.
        coming_soon: Render the placeholder variant instead of a link.
        is_active: Show the pulsing "active" indicator next to the title.
        theme: Colour theme, one of CARD_THEMES (unknown values fall back to blue).
    """

    def __init__(
        self,
        title: str,
        description: Optional[str] = None,
        href: Optional[str] = None,
        *,
        coming_soon: bool = False,
        is_active: bool = False,
        theme: str = "blue",
    ) -> None:
        self.title = title
        self.description = description
        self.href = href
        self.coming_soon = coming_soon
        self.is_active = is_active
        self.theme = theme if theme in CARD_THEMES else "blue"

    def render(self) -> str:
        if self.coming_soon:
            return self._render_placeholder()
        return self._render_link()

    def _render_description(self) -> str:
        if not self.description:
            return ""
        return f'<p class="tool-card__description">{self.escape(self.description)}</p>'

    def _render_placeholder(self) -> str:
        css = self.classes("tool-card", f"tool-card--{self.theme}", "tool-card--soon")
        return (
            f'<div class="{css}" aria-disabled="true">'
            '<div class="tool-card__header">'
            f'<h3 class="tool-card__title">{self.escape(self.title)}</h3>'
            '<span class="tool-card__soon">Coming Soon</span>'
            "</div>"
            f"{self._render_description()}"
            '<div class="tool-card__footer"><span class="badge badge-disabled">In Development</span></div>'
            "</div>"
        )

    def _render_link(self) -> str:
        css = self.classes("tool-card", f"tool-card--{self.theme}", "tool-card--live")
        indicator = '<span class="tool-card__active" aria-label="Active"></span>' if self.is_active else ""
        attrs = self.attributes(href=self.href or "#", class_=css)
        return (
            f"<a {attrs}>"
            '<div class="tool-card__header">'
            f'<h3 class="tool-card__title">{self.escape(self.title)}</h3>'
            f"{indicator}"
            "</div>"
            f"{self._render_description()}"
            '<div class="tool-card__footer"><span class="tool-card__cta">Launch Tool</span>'
            '<span class="tool-card__arrow" aria-hidden="true">→</span></div>'
            "</a>"
        )
