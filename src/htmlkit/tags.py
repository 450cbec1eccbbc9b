"""Tag constructors and the tag registry.

Each tag is described by a :class:`TagSpec`: its name, the attribute keys it
permits and the child tag names it permits. Calling a spec (or the module
level function for that tag) builds an :class:`~htmlkit.nodes.Element` and
applies the given arguments to it:

- ``Attr`` arguments go through ``Element.add_attribute``
- ``Element`` arguments go through ``Element.add_child`` (allow-list checked)
- ``Text`` / ``Raw`` arguments are appended to ``children`` unchecked

Thread Safety:
TagSpec and TagRegistry are immutable after creation. Safe to share.
Use TagRegistryBuilder for mutable construction.

Example:
    >>> from htmlkit import table, tr, td, text
    >>> table(tr(td(text("X")))).render()
    b'<table><tr><td>X</td></tr></table>'

    >>> builder = create_registry_with_defaults()
    >>> builder.register(TagSpec.of("caption", ("class", "id")))
    >>> registry = builder.build()
    >>> registry["caption"](text("Totals")).render()
    b'<caption>Totals</caption>'
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from htmlkit.nodes import Arg, Attr, Element, Raw, Text


def tag(
    name: str,
    allowed_attrs: Iterable[str],
    allowed_children: Iterable[str] | None,
    *args: Arg,
) -> Element:
    """Build an element and apply a mixed list of attributes and children.

    Args:
        name: Tag name
        allowed_attrs: Attribute keys this tag permits
        allowed_children: Child tag names this tag permits (None = no element children)
        *args: Attributes and child nodes, applied in order

    Returns:
        The new Element

    Raises:
        TypeError: If an argument is neither an attribute nor a node
    """
    element = Element(
        name=name,
        allowed_attrs=frozenset(allowed_attrs),
        allowed_children=frozenset(allowed_children or ()),
    )
    for arg in args:
        match arg:
            case Attr():
                element.add_attribute(arg)
            case Element():
                element.add_child(arg)
            case Text() | Raw():
                element.children.append(arg)
            case _:
                msg = f"Cannot apply {type(arg).__name__} to <{name}>: expected Attr, Element, Text or Raw"
                raise TypeError(msg)
    return element


@dataclass(frozen=True, slots=True)
class TagSpec:
    """Allow-lists for one tag name.

    Attributes:
        name: Tag name
        allowed_attrs: Attribute keys the tag permits
        allowed_children: Child tag names the tag permits

    """

    name: str
    allowed_attrs: frozenset[str] = frozenset()
    allowed_children: frozenset[str] = frozenset()

    @classmethod
    def of(
        cls,
        name: str,
        allowed_attrs: Iterable[str] = (),
        allowed_children: Iterable[str] = (),
    ) -> TagSpec:
        """Create a spec from any iterables of names."""
        return cls(name, frozenset(allowed_attrs), frozenset(allowed_children))

    def __call__(self, *args: Arg) -> Element:
        """Build an element of this tag."""
        return tag(self.name, self.allowed_attrs, self.allowed_children, *args)


class TagRegistry:
    """Immutable mapping of tag names to their specs.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_by_name",)

    def __init__(self, by_name: dict[str, TagSpec]) -> None:
        """Initialize registry with a pre-built mapping.

        Use TagRegistryBuilder to create instances.
        """
        self._by_name = by_name

    def get(self, name: str) -> TagSpec | None:
        """Get the TagSpec for a tag name, or None if unregistered."""
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        """Check if tag name is registered."""
        return name in self._by_name

    @property
    def names(self) -> frozenset[str]:
        """Get all registered tag names."""
        return frozenset(self._by_name.keys())

    def __getitem__(self, name: str) -> TagSpec:
        return self._by_name[name]

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __len__(self) -> int:
        return len(self._by_name)


class TagRegistryBuilder:
    """Mutable builder for TagRegistry.

    Example:
        >>> builder = TagRegistryBuilder()
        >>> builder.register(TagSpec.of("ul", ("class",), ("li",)))
        >>> builder.register(TagSpec.of("li", ("class",)))
        >>> registry = builder.build()
    """

    __slots__ = ("_by_name",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._by_name: dict[str, TagSpec] = {}

    def register(self, spec: TagSpec) -> TagRegistryBuilder:
        """Register a tag spec.

        Args:
            spec: Spec to register

        Returns:
            Self for chaining

        Raises:
            ValueError: If the tag name is already registered
        """
        if spec.name in self._by_name:
            msg = f"Tag '{spec.name}' already registered"
            raise ValueError(msg)
        self._by_name[spec.name] = spec
        return self

    def register_all(self, specs: Iterable[TagSpec]) -> TagRegistryBuilder:
        """Register multiple specs."""
        for spec in specs:
            self.register(spec)
        return self

    def build(self) -> TagRegistry:
        """Build immutable registry from registered specs."""
        return TagRegistry(dict(self._by_name))

    def __len__(self) -> int:
        return len(self._by_name)


# =============================================================================
# Built-in tags
# =============================================================================

TABLE = TagSpec.of("table", ("class", "id"), ("tr",))
TR = TagSpec.of("tr", ("class", "id"), ("td",))
TD = TagSpec.of("td", ("class", "id"))

BUILTIN_TAGS: tuple[TagSpec, ...] = (TABLE, TR, TD)


def table(*args: Arg) -> Element:
    """Build a ``<table>`` element. Allows class/id and ``tr`` children."""
    return TABLE(*args)


def tr(*args: Arg) -> Element:
    """Build a ``<tr>`` element. Allows class/id and ``td`` children."""
    return TR(*args)


def td(*args: Arg) -> Element:
    """Build a ``<td>`` element. Allows class/id and no element children."""
    return TD(*args)


# Cached singleton, shared freely since TagRegistry is immutable
_DEFAULT_REGISTRY: TagRegistry | None = None


def create_default_registry() -> TagRegistry:
    """Get the default tag registry (cached singleton) with table, tr and td."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY


def create_registry_with_defaults() -> TagRegistryBuilder:
    """Create a builder pre-populated with the built-in tags.

    Use this to extend the default set with additional tags:

        >>> builder = create_registry_with_defaults()
        >>> builder.register(TagSpec.of("thead", ("class",), ("tr",)))
        >>> registry = builder.build()
    """
    return TagRegistryBuilder().register_all(BUILTIN_TAGS)
