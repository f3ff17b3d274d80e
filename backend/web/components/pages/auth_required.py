"""
Prompt shown by protected views when no session is present.
"""

from ..base import Component


class AuthRequiredPage(Component):
    def __init__(self, login_href: str = "/"):
        self.login_href = login_href

    def render(self) -> str:
        return f"""
        <div class="container container--narrow text-center">
            <h1>Authentication Required</h1>
            <p class="text-muted">Please log in to access this tool.</p>
            <a href="{self.escape(self.login_href)}" class="btn btn-primary">Go to Login</a>
        </div>
        """
