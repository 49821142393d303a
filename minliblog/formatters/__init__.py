"""
Log formatters module

Formatters turn LogEvent snapshots into text for the bundled writers.
"""

from minliblog.formatters.base_formatter import BaseFormatter
from minliblog.formatters.text_formatter import TextFormatter
from minliblog.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
]
