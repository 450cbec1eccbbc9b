"""ContextVar-based build configuration for htmlkit.

Elements read the active configuration when ``add_child`` or
``add_attribute`` runs, so the same tag functions can be permissive in
production code and strict (or captured) in tests.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from htmlkit.config import BuildConfig, build_config_context

    with build_config_context(BuildConfig(strict=True)):
        table(tr(td(text("X"))))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from htmlkit.diagnostics import DEFAULT_SINK, DiagnosticSink


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable build configuration.

    Attributes:
        sink: Receiver for allow-list diagnostics (None = log warnings)
        strict: Raise ContractError on any allow-list violation instead of
            reporting it
        enforce_attributes: Drop attributes outside the allow-list instead of
            applying them after the diagnostic

    """

    sink: DiagnosticSink | None = None
    strict: bool = False
    enforce_attributes: bool = False

    @property
    def active_sink(self) -> DiagnosticSink:
        """Configured sink, falling back to the logging sink."""
        return self.sink if self.sink is not None else DEFAULT_SINK

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BuildConfig":
        """Create BuildConfig from dictionary.

        Only includes keys that are valid BuildConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = BuildConfig.from_dict({"strict": True, "unknown_key": 1})
            >>> config.strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BuildConfig = BuildConfig()

_build_config: ContextVar[BuildConfig] = ContextVar(
    "build_config",
    default=_DEFAULT_CONFIG,
)


def get_build_config() -> BuildConfig:
    """Get current build configuration (thread-local)."""
    return _build_config.get()


def set_build_config(config: BuildConfig) -> None:
    """Set build configuration for current context.

    Args:
        config: BuildConfig instance to use for this context.

    """
    _build_config.set(config)


def reset_build_config() -> None:
    """Reset to the default (permissive, logging) configuration."""
    _build_config.set(_DEFAULT_CONFIG)


@contextmanager
def build_config_context(config: BuildConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> from htmlkit import CollectingSink, td, tr
        >>> sink = CollectingSink()
        >>> with build_config_context(BuildConfig(sink=sink)):
        ...     td(tr())
        >>> # Previous config is active again here

    """
    previous = _build_config.get()
    _build_config.set(config)
    try:
        yield
    finally:
        _build_config.set(previous)


__all__ = [
    "BuildConfig",
    "build_config_context",
    "get_build_config",
    "reset_build_config",
    "set_build_config",
]
