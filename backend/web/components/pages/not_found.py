"""
404 page whose call to action depends on the session.
"""

from typing import Iterable

from ..base import Component


class NotFoundPage(Component):
    """
    Renders the not-found message.

    Args:
        authenticated: Whether the viewer holds a session. Authenticated
            viewers get "Return to Dashboard" plus links to live tools;
            everybody else gets "Go to Login".
        tools: Live tool entries (objects with `title` and `href`).
    """

    def __init__(self, *, authenticated: bool, tools: Iterable = ()):
        self.authenticated = authenticated
        self.tools = list(tools)

    def render(self) -> str:
        if self.authenticated:
            cta = '<a href="/" class="btn btn-primary">Return to Dashboard</a>'
            links = "".join(
                f'<li><a href="{self.escape(t.href)}">{self.escape(t.title)}</a></li>' for t in self.tools
            )
            helpful = f'<ul class="link-list">{links}</ul>' if links else ""
        else:
            cta = '<a href="/" class="btn btn-primary">Go to Login</a>'
            helpful = '<p class="text-muted">Please log in to access the AI Toolkit</p>'
        return f"""
        <div class="container container--narrow text-center">
            <p class="not-found__code" aria-hidden="true">404</p>
            <h1>Page Not Found</h1>
            <p>The page you're looking for doesn't exist or has been moved.</p>
            <div class="not-found__actions">{cta}</div>
            <div class="card not-found__tools">
                <h2>Popular Tools</h2>
                {helpful}
            </div>
        </div>
        """
