"""Text processing utilities for htmlkit.

Example:
    >>> from htmlkit.utils.text import escape_html
    >>> escape_html("a < b")
    'a &lt; b'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters for text content and attribute values.

    Delegates to ``html.escape(text, quote=True)``:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text

    Examples:
        >>> escape_html("<script>alert('xss')</script>")
        '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)
