"""
Base component class for AI Toolkit UI components.

Pages are assembled from small Python classes that return HTML strings.
No template engine: every value that reaches markup goes through `escape()`
or `attributes()`.
"""

from typing import Any, Optional
import html


class Component:
    """Base class for all server-rendered UI components."""

    def render(self) -> str:
        raise NotImplementedError("Subclasses must implement render()")

    def __str__(self) -> str:
        return self.render()

    @staticmethod
    def escape(text: Optional[Any]) -> str:
        """HTML-escape `text`; None renders as an empty string."""
        return html.escape(str(text)) if text is not None else ""

    @staticmethod
    def classes(*args: str, **conditionals: bool) -> str:
        """Join CSS classes, adding each keyword class only when its flag is true.

        Example:
            >>> Component.classes("tool-card", "tool-card--blue", is_disabled=True)
            'tool-card tool-card--blue is-disabled'
        """
        names = [name for name in args if name]
        names.extend(key.replace("_", "-") for key, value in conditionals.items() if value)
        return " ".join(names)

    @staticmethod
    def attributes(**attrs: Any) -> str:
        """Build an HTML attribute string.

        `class_`/`for_` lose their trailing underscore, other underscores become
        hyphens (`aria_label` -> `aria-label`). True renders a bare boolean
        attribute; False and None are dropped.

        Example:
            >>> Component.attributes(id="pw", aria_invalid="false", required=True)
            'id="pw" aria-invalid="false" required'
        """
        parts = []
        for key, value in attrs.items():
            name = key[:-1] if key.endswith("_") else key.replace("_", "-")
            if value is True:
                parts.append(name)
            elif value is not False and value is not None:
                parts.append(f'{name}="{html.escape(str(value))}"')
        return " ".join(parts)
