"""
Header component for the AI Toolkit.

Role-aware top bar: brand link, admin-only settings link, and a logout
button whose label reflects the role.
"""

from typing import Optional

from .base import Component

ADMIN_SETTINGS_PATH = "/admin"
LOGOUT_PATH = "/auth/logout"


class Header(Component):
    """Top bar rendered on every authenticated page."""

    def __init__(
        self,
        role: Optional[str] = None,
        *,
        show_logout: bool = True,
        brand: str = "Your Brand",
        product: str = "AI Toolkit",
    ):
        """
        Args:
            role: Session role ("user" or "admin"); None for anonymous pages.
            show_logout: Whether to render the logout button (requires a role).
            brand: Brand label shown on the left. Replace with your branding.
            product: Product name shown next to the brand.
        """
        self.role = role
        self.show_logout = show_logout
        self.brand = brand
        self.product = product

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def render(self) -> str:
        return f"""
    <header class="site-header" role="banner">
        <div class="site-header__inner">
            <a href="/" class="site-header__brand" aria-label="{self.escape(self.product)} home">
                <span class="site-header__brand-name">{self.escape(self.brand)}</span>
                <span class="site-header__product">{self.escape(self.product)}</span>
            </a>
            <div class="site-header__actions">
                {self._render_admin_link()}
                {self._render_logout()}
            </div>
        </div>
    </header>"""

    def _render_admin_link(self) -> str:
        if not self.is_admin:
            return ""
        attrs = self.attributes(
            href=ADMIN_SETTINGS_PATH,
            class_="site-header__settings",
            title="Admin Settings",
            aria_label="Admin Settings",
        )
        return f'<a {attrs}><span aria-hidden="true">⚙</span></a>'

    def _render_logout(self) -> str:
        if not (self.show_logout and self.role):
            return ""
        label = "Admin Logout" if self.is_admin else "Logout"
        return (
            f'<form method="post" action="{LOGOUT_PATH}" class="site-header__logout">'
            f'<button type="submit" class="btn btn-primary">{self.escape(label)}</button>'
            "</form>"
        )
