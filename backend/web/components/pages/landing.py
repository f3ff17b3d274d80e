"""
Landing page shown after the password gate.
"""

from typing import Iterable, Optional

from ..base import Component
from ..tool_section import ToolSection


class ToolkitHomePage(Component):
    """Hero banner followed by one ToolSection per catalog group."""

    def __init__(self, groups: Iterable, *, tagline: Optional[str] = None):
        self.groups = list(groups)
        self.tagline = tagline or "AI-powered tools for modern applications"

    def render(self) -> str:
        sections = "".join(ToolSection(g.title, g.tools, theme=g.theme).render() for g in self.groups)
        return f"""
        <div class="container">
            <div class="hero">
                <h1><span aria-hidden="true">✨</span> AI Toolkit</h1>
                <p>{self.escape(self.tagline)}</p>
            </div>
            {sections}
        </div>
        """
