"""StringBuilder for O(n) markup accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation while an element tree is walked.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

# Error handler for every str -> bytes conversion in rendering
ENCODE_ERRORS = "surrogatepass"


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<td>")
            >>> sb.append("Hello")
            >>> sb.append("</td>")
            >>> sb.build()
            '<td>Hello</td>'
            >>> sb.build_bytes()
            b'<td>Hello</td>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def build_bytes(self, encoding: str = "utf-8") -> bytes:
        """Join all parts and encode the result.

        Lone surrogates (e.g. from ``os.fsdecode`` or ``surrogateescape``
        input) are passed through as their raw code units rather than
        raising, so rendering never fails on content.

        Args:
            encoding: Codec used for the byte output

        Returns:
            Encoded concatenation of all appended parts
        """
        return self.build().encode(encoding, errors=ENCODE_ERRORS)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)
