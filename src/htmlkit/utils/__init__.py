"""Utility modules for htmlkit.

Provides:
- text: escape_html for text content and attribute values
- logger: get_logger for logging
"""

from htmlkit.utils.logger import get_logger
from htmlkit.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
