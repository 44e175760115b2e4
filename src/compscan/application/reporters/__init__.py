"""Reporters for change detection results.

PlainTextReporter and JsonReporter use stdlib only;
ConsoleReporter renders with rich.
"""

from compscan.application.reporters.console import ConsoleConfig, ConsoleReporter
from compscan.application.reporters.json import JsonReporter
from compscan.application.reporters.plain_text import NO_CHANGES, PlainTextReporter

__all__ = [
    "NO_CHANGES",
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
]
