"""
htmlkit: minimal markup-tree builder

Build a tree of elements in memory and render it to escaped markup bytes.
Each tag knows which attributes and child tags it permits; violations are
reported through a diagnostics sink instead of raising. Zero runtime
dependencies.

Quick Start:
    >>> from htmlkit import table, tr, td, text, class_
    >>> doc = table(tr(td(class_("num"), text("1 < 2"))))
    >>> doc.render()
    b'<table><tr><td class="num">1 &lt; 2</td></tr></table>'

Capturing diagnostics:
    >>> from htmlkit import BuildConfig, CollectingSink, build_config_context
    >>> sink = CollectingSink()
    >>> with build_config_context(BuildConfig(sink=sink)):
    ...     cell = td(tr())
    >>> cell.render()
    b'<td></td>'
    >>> sink.diagnostics[0].message
    "Child tag 'tr' is not allowed for tag 'td'"

Strict validation:
    >>> with build_config_context(BuildConfig(strict=True)):
    ...     td(tr())
    Traceback (most recent call last):
    ...
    htmlkit.errors.ContractError: Tag 'td': Child tag 'tr' is not allowed for tag 'td'
"""

from htmlkit.config import (
    BuildConfig,
    build_config_context,
    get_build_config,
    reset_build_config,
    set_build_config,
)
from htmlkit.diagnostics import CollectingSink, Diagnostic, DiagnosticSink, LoggingSink
from htmlkit.errors import ContractError, HtmlkitError
from htmlkit.helpers import attr, class_, id_, raw, text
from htmlkit.nodes import Arg, Attr, Element, Node, Raw, Renderable, Text
from htmlkit.tags import (
    TagRegistry,
    TagRegistryBuilder,
    TagSpec,
    create_default_registry,
    create_registry_with_defaults,
    tag,
    table,
    td,
    tr,
)

__version__ = "0.1.0"


def render(node: Renderable) -> bytes:
    """Render any node to UTF-8 markup bytes.

    Example:
        >>> render(text("a & b"))
        b'a &amp; b'
    """
    return node.render()


__all__ = [  # noqa: RUF022: grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "render",
    # Nodes
    "Arg",
    "Attr",
    "Element",
    "Node",
    "Raw",
    "Renderable",
    "Text",
    # Helpers
    "attr",
    "class_",
    "id_",
    "raw",
    "text",
    # Tags
    "tag",
    "table",
    "td",
    "tr",
    "TagSpec",
    "TagRegistry",
    "TagRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    # Diagnostics
    "Diagnostic",
    "DiagnosticSink",
    "LoggingSink",
    "CollectingSink",
    # Configuration (ContextVar-based)
    "BuildConfig",
    "get_build_config",
    "set_build_config",
    "reset_build_config",
    "build_config_context",
    # Errors
    "HtmlkitError",
    "ContractError",
]
