"""Markup tree nodes for htmlkit.

Three node classes share one capability, rendering to bytes:

Node
├── Element (named tag with attributes, allow-lists and ordered children)
├── Text    (escaped content)
└── Raw     (verbatim content)

``Attr`` is not a node; it is the value applied to an element's attribute
map. Leaf nodes and attributes are frozen. Elements are mutable only through
``add_attribute`` and ``add_child``; rendering never writes to a node, so a
fully built tree can be rendered concurrently from several threads.

Allow-list semantics:
- A child Element whose name is outside ``allowed_children`` is reported and
  dropped. Text and Raw children are never checked.
- An attribute key outside ``allowed_attrs`` is reported and still applied,
  unless the active BuildConfig has ``enforce_attributes`` set.
- With ``BuildConfig.strict`` every violation raises ContractError instead.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from htmlkit.config import get_build_config
from htmlkit.diagnostics import Diagnostic
from htmlkit.errors import ContractError
from htmlkit.stringbuilder import StringBuilder
from htmlkit.utils.text import escape_html


class Renderable(Protocol):
    """Capability shared by every node: serialize to markup."""

    def render(self) -> bytes:
        """Render this node (and its descendants) as UTF-8 bytes."""
        ...

    def render_into(self, sb: StringBuilder) -> None:
        """Append this node's markup to an existing builder."""
        ...


@dataclass(frozen=True, slots=True)
class Attr:
    """A single key/value markup attribute.

    No uniqueness is enforced here; when several attributes with the same
    key are applied to one element, the last one wins.

    """

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class Text:
    """Text content, escaped on render.

    HTML: a < b  ->  a &lt; b

    """

    content: str

    def render(self) -> bytes:
        sb = StringBuilder()
        self.render_into(sb)
        return sb.build_bytes()

    def render_into(self, sb: StringBuilder) -> None:
        sb.append(escape_html(self.content))


@dataclass(frozen=True, slots=True)
class Raw:
    """Pre-escaped or trusted markup, rendered verbatim.

    The caller is responsible for the safety of ``content``.

    """

    content: str

    def render(self) -> bytes:
        sb = StringBuilder()
        self.render_into(sb)
        return sb.build_bytes()

    def render_into(self, sb: StringBuilder) -> None:
        sb.append(self.content)


@dataclass(slots=True)
class Element:
    """A named markup tag with constrained attributes and children.

    HTML: <name key="value">children</name>

    Every element renders an explicit closing tag; void elements are not
    special-cased.

    """

    name: str
    allowed_attrs: frozenset[str] = frozenset()
    allowed_children: frozenset[str] = frozenset()
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def add_child(self, child: Node) -> None:
        """Append a child node.

        Element children must be named in ``allowed_children``; a rejected
        child is reported and left out of the tree. Text and Raw children
        are appended without a check.

        Raises:
            ContractError: If the child is rejected and strict mode is active
        """
        if isinstance(child, Element) and child.name not in self.allowed_children:
            self._violation(
                Diagnostic.disallowed_child(self.name, child.name, self.allowed_children)
            )
            return
        self.children.append(child)

    def add_attribute(self, attr: Attr) -> None:
        """Set an attribute, overwriting any existing value for its key.

        Keys outside ``allowed_attrs`` are reported but still applied,
        unless the active config enforces the attribute allow-list.

        Only the value is escaped on render. The key is emitted verbatim, so
        like Raw content it must come from a trusted source.

        Raises:
            ContractError: If the key is not allowed and strict mode is active
        """
        if attr.key not in self.allowed_attrs:
            self._violation(
                Diagnostic.disallowed_attribute(self.name, attr.key, self.allowed_attrs)
            )
            if get_build_config().enforce_attributes:
                return
        self.attributes[attr.key] = attr.value

    def render(self) -> bytes:
        """Render the element and its descendants as UTF-8 bytes.

        Attributes are emitted in insertion order, but callers should not
        rely on attribute order.
        """
        sb = StringBuilder()
        self.render_into(sb)
        return sb.build_bytes()

    def render_into(self, sb: StringBuilder) -> None:
        sb.append("<").append(self.name)
        for key, value in self.attributes.items():
            sb.append(f' {key}="{escape_html(value)}"')
        sb.append(">")
        for child in self.children:
            child.render_into(sb)
        sb.append("</").append(self.name).append(">")

    def _violation(self, diagnostic: Diagnostic) -> None:
        config = get_build_config()
        if config.strict:
            raise ContractError(self.name, diagnostic.message, diagnostic.violation_type)
        config.active_sink.report(diagnostic)


# Closed set of renderable nodes
type Node = Element | Text | Raw

# Anything a tag constructor accepts
type Arg = Attr | Element | Text | Raw
