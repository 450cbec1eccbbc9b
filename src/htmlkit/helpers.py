"""Convenience constructors for attributes and leaf content.

Example:
    >>> from htmlkit import td, class_, text
    >>> td(class_("total"), text("5 < 6")).render()
    b'<td class="total">5 &lt; 6</td>'
"""

from __future__ import annotations

from htmlkit.nodes import Attr, Raw, Text


def attr(key: str, value: str) -> Attr:
    """Build an arbitrary attribute."""
    return Attr(key=key, value=value)


def class_(name: str) -> Attr:
    """Build a ``class`` attribute."""
    return Attr(key="class", value=name)


def id_(value: str) -> Attr:
    """Build an ``id`` attribute."""
    return Attr(key="id", value=value)


def text(content: str) -> Text:
    """Build an escaping text node."""
    return Text(content)


def raw(content: str) -> Raw:
    """Build a non-escaping raw node. The content must already be safe markup."""
    return Raw(content)


__all__ = ["attr", "class_", "id_", "raw", "text"]
