"""
Tool catalog shown on the landing page.

Customize these entries for your application. Only tools with an `href` and
`coming_soon=False` are clickable; everything else renders as a placeholder.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ToolEntry:
    title: str
    description: str = ""
    href: Optional[str] = None
    coming_soon: bool = True
    is_active: bool = False


@dataclass(frozen=True)
class ToolGroup:
    title: str
    theme: str
    tools: List[ToolEntry] = field(default_factory=list)


TOOL_GROUPS: List[ToolGroup] = [
    ToolGroup(
        title="Data Tools",
        theme="data",
        tools=[
            ToolEntry(
                "Data Analysis",
                "Analyze and visualize your data with AI-powered insights",
                href="/data-analysis",
                coming_soon=False,
            ),
            ToolEntry("Data Import", "Import and process data from various sources"),
            ToolEntry("Data Export", "Export processed data in multiple formats"),
        ],
    ),
    ToolGroup(
        title="Generate",
        theme="generate",
        tools=[
            ToolEntry("Content Generator", "Generate content using AI language models"),
            ToolEntry("Report Builder", "Create automated reports from your data"),
            ToolEntry("Document Templates", "Generate documents from predefined templates"),
        ],
    ),
    ToolGroup(
        title="Analyze",
        theme="analyze",
        tools=[
            ToolEntry("Text Analysis", "Analyze text for sentiment, topics, and insights"),
            ToolEntry("Image Recognition", "Analyze and categorize images using AI"),
            ToolEntry("Pattern Detection", "Detect patterns and anomalies in your data"),
        ],
    ),
    ToolGroup(
        title="Automate",
        theme="automate",
        tools=[
            ToolEntry("Workflow Automation", "Automate repetitive tasks and workflows"),
            ToolEntry("Email Processing", "Automatically process and categorize emails"),
            ToolEntry("Scheduled Tasks", "Set up automated recurring tasks"),
        ],
    ),
]


def live_tools() -> List[ToolEntry]:
    return [tool for group in TOOL_GROUPS for tool in group.tools if tool.href and not tool.coming_soon]
