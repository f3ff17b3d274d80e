"""
Login form component (password gate).
"""
from typing import Optional

from ..base import Component
from identity_access.domain import DEFAULT_ROLE, ROLE_ADMIN, ROLE_USER
from .fields import SelectField, TextInputField
from .submit import SubmitButton

ROLE_OPTIONS = [
    (ROLE_USER, "👤 User Access"),
    (ROLE_ADMIN, "🔧 Admin Access"),
]


class LoginForm(Component):
    """
    Renders the access-level select, the password input and the submit button.

    The password value is never echoed back: after a failed attempt the field
    is rendered empty and only the selected role is preserved.
    """

    def __init__(self, *, role: Optional[str] = None, error: Optional[str] = None, action: str = "/auth/login"):
        self.role = role or DEFAULT_ROLE
        self.error = error
        self.action = action

    def render(self) -> str:
        role_html = SelectField("role", "Access Level").render(ROLE_OPTIONS, selected=self.role, class_="form-input")
        password_html = TextInputField("password", "Password", required=True).render(
            input_type="password",
            autocomplete="current-password",
            placeholder="Enter your password",
            class_="form-input",
        )
        error_html = (
            f'<div class="alert alert-error" role="alert">{self.escape(self.error)}</div>'
            if self.error
            else ""
        )
        submit_html = SubmitButton("Access Toolkit", icon="✔").render()
        return f"""
        <section class="login-card" aria-labelledby="login-heading">
            <div class="login-card__header">
                <span class="login-card__lock" aria-hidden="true">🔒</span>
                <h1 id="login-heading">AI Toolkit</h1>
                <p class="login-card__subtitle">Secure Access Portal</p>
            </div>
            <div class="login-card__body">
                <p class="text-muted">Please authenticate to access the toolkit</p>
                <form method="post" action="{self.escape(self.action)}" class="login-form">
                    {role_html}
                    {password_html}
                    {error_html}
                    <div class="form-actions">
                        {submit_html}
                    </div>
                </form>
                <p class="login-card__footnote text-muted">Secure authentication required</p>
            </div>
        </section>
        """
