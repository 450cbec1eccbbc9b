"""Diagnostics reporting for allow-list violations.

Elements never return errors from ``add_child`` or ``add_attribute``.
Violations are described as :class:`Diagnostic` records and handed to the
active :class:`DiagnosticSink`. The default sink logs a warning; tests can
install a :class:`CollectingSink` through the build config to inspect them.

Example:
    >>> from htmlkit import build_config_context, BuildConfig, td, tr
    >>> sink = CollectingSink()
    >>> with build_config_context(BuildConfig(sink=sink)):
    ...     cell = td(tr())
    >>> sink.diagnostics[0].violation_type
    'disallowed_child'

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, Protocol

from htmlkit.utils.logger import get_logger

type ViolationType = Literal["disallowed_attribute", "disallowed_child"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Record of a rejected (or advisory-only) attribute or child."""

    tag: str
    """Name of the element the input was applied to."""

    violation_type: ViolationType
    """Which allow-list was violated."""

    message: str
    """Human-readable description."""

    expected: tuple[str, ...]
    """Sorted contents of the allow-list that was checked."""

    actual: str
    """Offending attribute key or child tag name."""

    @classmethod
    def disallowed_attribute(cls, tag: str, key: str, allowed: Iterable[str]) -> Diagnostic:
        return cls(
            tag=tag,
            violation_type="disallowed_attribute",
            message=f"Attribute '{key}' is not allowed for tag '{tag}'",
            expected=tuple(sorted(allowed)),
            actual=key,
        )

    @classmethod
    def disallowed_child(cls, tag: str, child: str, allowed: Iterable[str]) -> Diagnostic:
        return cls(
            tag=tag,
            violation_type="disallowed_child",
            message=f"Child tag '{child}' is not allowed for tag '{tag}'",
            expected=tuple(sorted(allowed)),
            actual=child,
        )


class DiagnosticSink(Protocol):
    """Protocol for diagnostic receivers.

    Implementations must not raise; strict handling is done by the element
    before the sink is consulted.

    """

    def report(self, diagnostic: Diagnostic) -> None:
        """Receive one diagnostic."""
        ...


class LoggingSink:
    """Sink that emits each diagnostic as a warning log record."""

    __slots__ = ("_logger",)

    def __init__(self, name: str = "diagnostics") -> None:
        self._logger = get_logger(name)

    def report(self, diagnostic: Diagnostic) -> None:
        self._logger.warning(
            "%s (allowed: %s)",
            diagnostic.message,
            ", ".join(diagnostic.expected) or "none",
        )


class CollectingSink:
    """Sink that keeps every diagnostic in memory.

    Usage:
        >>> sink = CollectingSink()
        >>> sink.report(Diagnostic.disallowed_child("td", "tr", ()))
        >>> len(sink)
        1

    """

    __slots__ = ("diagnostics",)

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def of_type(self, violation_type: ViolationType) -> list[Diagnostic]:
        """Return collected diagnostics of one violation type."""
        return [d for d in self.diagnostics if d.violation_type == violation_type]

    def clear(self) -> None:
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)


# Default sink used when the active config does not name one
DEFAULT_SINK: DiagnosticSink = LoggingSink()
