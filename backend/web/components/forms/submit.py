"""
Submit button component.
"""

from typing import Optional

from ..base import Component


class SubmitButton(Component):
    """Primary full-width form action; `icon` is decorative and hidden from screen readers."""

    def __init__(self, label: str, *, icon: Optional[str] = None) -> None:
        self.label = label
        self.icon = icon

    def render(self) -> str:
        attrs = self.attributes(type="submit", class_="btn btn-primary btn-block")
        icon_html = f'<span class="btn-icon" aria-hidden="true">{self.escape(self.icon)}</span>' if self.icon else ""
        return f"<button {attrs}>{icon_html}{self.escape(self.label)}</button>"
