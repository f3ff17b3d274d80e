"""
Layout Component for the AI Toolkit

Main layout wrapper that combines header, page content and footer into a
complete HTML document.
"""

from typing import Optional
from .base import Component
from .header import Header


class Layout(Component):
    """Main layout component that assembles the complete page"""

    def __init__(
        self,
        title: str,
        content: str,
        role: Optional[str] = None,
        show_header: bool = True,
        show_footer: bool = True,
        current_path: str = "/",
    ):
        """
        Args:
            title: Page title (will be escaped)
            content: Main content HTML (pre-rendered components)
            role: Session role of the viewer, None when not authenticated
            show_header: Whether to show the header bar (default: True)
            show_footer: Whether to show the footer (default: True)
            current_path: Current URL path, exposed as data attribute for styling
        """
        self.title = title
        self.content = content
        self.role = role
        self.show_header = show_header
        self.show_footer = show_footer
        self.current_path = current_path

    def render(self) -> str:
        """Render the complete HTML document."""
        header_html = Header(self.role).render() if self.show_header else ""
        footer_html = self._render_footer() if self.show_footer else ""
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    {self._render_head()}
</head>
<body data-path="{self.escape(self.current_path)}">
    <a href="#main-content" class="skip-link">Skip to main content</a>

    {header_html}

    <main id="main-content" class="main-content" role="main">
        {self.content}
    </main>

    {footer_html}
</body>
</html>"""

    def _render_head(self) -> str:
        """Render the HTML head section"""
        return f"""
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="description" content="AI-powered application toolkit">

    <title>{self.escape(self.title)} - AI Toolkit</title>

    <link rel="icon" href="/static/favicon.svg" type="image/svg+xml">
    <link rel="stylesheet" href="/static/css/toolkit.css?v=1">
    """

    def _render_footer(self) -> str:
        return """
    <footer class="site-footer" role="contentinfo">
        <div class="site-footer__inner">
            <div class="site-footer__grid">
                <div class="site-footer__brand-block">
                    <p class="site-footer__brand"><span aria-hidden="true">✨</span> AI Toolkit</p>
                    <p class="text-muted">Empowering teams with intelligent automation and analysis tools.</p>
                </div>
                <div class="site-footer__status">
                    <h2 class="site-footer__heading">Platform Status</h2>
                    <ul class="status-list">
                        <li><span class="status-dot status-dot--green" aria-hidden="true"></span>All Systems Operational</li>
                        <li><span class="status-dot status-dot--blue" aria-hidden="true"></span>AI Services Active</li>
                    </ul>
                </div>
            </div>
            <p class="site-footer__bottom">&copy; 2025 AI Toolkit &bull; Powered by FastAPI and server-rendered Python components</p>
        </div>
    </footer>"""
