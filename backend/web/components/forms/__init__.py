"""
Form components for the AI Toolkit.

Provides basic building blocks such as FormField and SubmitButton plus the
login form of the password gate.
"""

from .fields import FormField, TextInputField, SelectField
from .submit import SubmitButton
from .login_form import LoginForm, ROLE_OPTIONS

__all__ = [
    "FormField",
    "TextInputField",
    "SelectField",
    "SubmitButton",
    "LoginForm",
    "ROLE_OPTIONS",
]
