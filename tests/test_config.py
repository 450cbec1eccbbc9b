"""Tests for ContextVar-based build configuration.

Validates defaults, context manager restore behavior, and thread isolation.
"""

from threading import Thread

import pytest

from htmlkit import (
    BuildConfig,
    CollectingSink,
    build_config_context,
    get_build_config,
    reset_build_config,
    set_build_config,
    td,
    tr,
)
from htmlkit.diagnostics import DEFAULT_SINK, LoggingSink


class TestBuildConfigDataclass:
    """Test BuildConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = BuildConfig()
        assert config.sink is None
        assert config.strict is False
        assert config.enforce_attributes is False

    def test_immutability(self) -> None:
        config = BuildConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_active_sink_defaults_to_logging(self) -> None:
        assert BuildConfig().active_sink is DEFAULT_SINK
        assert isinstance(DEFAULT_SINK, LoggingSink)

    def test_active_sink_override(self) -> None:
        sink = CollectingSink()
        assert BuildConfig(sink=sink).active_sink is sink

    def test_from_dict_ignores_unknown(self) -> None:
        config = BuildConfig.from_dict({"strict": True, "unknown_key": "ignored"})
        assert config.strict is True
        assert config.enforce_attributes is False


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_build_config()

    def test_default_config(self) -> None:
        assert get_build_config() == BuildConfig()

    def test_set_and_get(self) -> None:
        custom = BuildConfig(strict=True)
        set_build_config(custom)
        assert get_build_config() is custom

    def test_reset(self) -> None:
        set_build_config(BuildConfig(strict=True))
        reset_build_config()
        assert get_build_config().strict is False


class TestBuildConfigContext:
    """Test the context manager."""

    def test_restores_previous(self) -> None:
        outer = BuildConfig(enforce_attributes=True)
        with build_config_context(outer):
            with build_config_context(BuildConfig(strict=True)):
                assert get_build_config().strict is True
            assert get_build_config() is outer
        assert get_build_config() == BuildConfig()

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with build_config_context(BuildConfig(strict=True)):
                raise RuntimeError("boom")
        assert get_build_config().strict is False

    def test_config_read_at_build_time(self) -> None:
        """Diagnostics go to the sink active when the child is added."""
        sink = CollectingSink()
        with build_config_context(BuildConfig(sink=sink)):
            cell = td(tr())
        cell.render()
        assert len(sink) == 1


class TestThreadIsolation:
    """Config set in one thread does not leak into another."""

    def test_worker_config_does_not_leak(self) -> None:
        seen: list[BuildConfig] = []

        def worker() -> None:
            set_build_config(BuildConfig(strict=True))
            seen.append(get_build_config())

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen[0].strict is True
        assert get_build_config().strict is False

    def test_per_thread_sinks(self) -> None:
        sinks = [CollectingSink() for _ in range(4)]

        def worker(sink: CollectingSink, n: int) -> None:
            with build_config_context(BuildConfig(sink=sink)):
                for _ in range(n):
                    td(tr())

        threads = [Thread(target=worker, args=(sink, i + 1)) for i, sink in enumerate(sinks)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert [len(sink) for sink in sinks] == [1, 2, 3, 4]
