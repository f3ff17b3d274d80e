# AI Toolkit Component System
# Pure Python Components for type-safe HTML generation

from .base import Component
from .layout import Layout
from .header import Header
from .cards import ToolCard
from .tool_section import ToolSection
from .forms import FormField, TextInputField, SelectField, SubmitButton, LoginForm

__all__ = [
    "Component",
    "Layout",
    "Header",
    "ToolCard",
    "ToolSection",
    "FormField",
    "TextInputField",
    "SelectField",
    "SubmitButton",
    "LoginForm",
]
