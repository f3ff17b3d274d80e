"""
Form field components.

Small wrappers that keep label, input, help and error markup consistent
across the toolkit's forms.
"""

from typing import Optional, Sequence, Tuple

from ..base import Component


class FormField(Component):
    """Wrapper that renders label, input slot, help, and error text."""

    def __init__(
        self,
        field_id: str,
        label: str,
        *,
        required: bool = False,
        help_text: Optional[str] = None,
        error_text: Optional[str] = None,
    ) -> None:
        self.field_id = field_id
        self.label = label
        self.required = required
        self.help_text = help_text
        self.error_text = error_text

    def _described_by(self) -> Optional[str]:
        return f"{self.field_id}-help" if self.help_text else None

    def render(self, input_html: str) -> str:
        required_marker = (
            '<span class="form-required" aria-hidden="true">*</span>'
            if self.required
            else ""
        )
        help_html = (
            f'<p class="form-help" id="{self.field_id}-help">{self.escape(self.help_text)}</p>'
            if self.help_text
            else ""
        )
        error_html = (
            f'<p class="form-error" role="alert" id="{self.field_id}-error">{self.escape(self.error_text)}</p>'
            if self.error_text
            else ""
        )
        label_attrs = self.attributes(for_=self.field_id, class_="form-label")
        return (
            '<div class="form-field">'
            f"<label {label_attrs}>{self.escape(self.label)}{required_marker}</label>"
            f"{input_html}"
            f"{help_html}"
            f"{error_html}"
            "</div>"
        )


class TextInputField(FormField):
    """Single-line input ('text' or 'password') with consistent labeling."""

    def render(
        self,
        *,
        value: str = "",
        input_type: str = "text",
        autocomplete: Optional[str] = None,
        placeholder: Optional[str] = None,
        **attrs: str,
    ) -> str:
        input_attrs = self.attributes(
            id=self.field_id,
            name=self.field_id,
            type=input_type,
            value=value,
            autocomplete=autocomplete,
            placeholder=placeholder,
            required=self.required,
            aria_describedby=self._described_by(),
            aria_invalid="true" if self.error_text else "false",
            **attrs,
        )
        return super().render(f"<input {input_attrs}>")


class SelectField(FormField):
    """Dropdown with (value, label) options; `selected` marks the current value."""

    def render(self, options: Sequence[Tuple[str, str]], *, selected: Optional[str] = None, **attrs: str) -> str:
        select_attrs = self.attributes(
            id=self.field_id,
            name=self.field_id,
            aria_describedby=self._described_by(),
            **attrs,
        )
        option_html = "".join(
            f'<option {self.attributes(value=value, selected=(value == selected))}>{self.escape(label)}</option>'
            for value, label in options
        )
        return super().render(f"<select {select_attrs}>{option_html}</select>")
