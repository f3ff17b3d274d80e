"""
Page Components for the AI Toolkit

Each page has its own component class that encapsulates its content
structure. Access control happens in the route before a page is rendered.
"""

from .landing import ToolkitHomePage
from .data_analysis import DataAnalysisPage
from .auth_required import AuthRequiredPage
from .not_found import NotFoundPage

__all__ = ["ToolkitHomePage", "DataAnalysisPage", "AuthRequiredPage", "NotFoundPage"]
