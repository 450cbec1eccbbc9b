"""Tests for diagnostic records and sinks."""

import logging

from htmlkit import BuildConfig, CollectingSink, Diagnostic, attr, build_config_context, td, tr
from htmlkit.diagnostics import LoggingSink


class TestDiagnostic:
    """Diagnostic construction."""

    def test_disallowed_child(self) -> None:
        d = Diagnostic.disallowed_child("td", "tr", frozenset())
        assert d.violation_type == "disallowed_child"
        assert d.message == "Child tag 'tr' is not allowed for tag 'td'"
        assert d.expected == ()
        assert d.actual == "tr"

    def test_disallowed_attribute_sorted_expected(self) -> None:
        d = Diagnostic.disallowed_attribute("tr", "style", frozenset({"id", "class"}))
        assert d.message == "Attribute 'style' is not allowed for tag 'tr'"
        assert d.expected == ("class", "id")


class TestCollectingSink:
    """In-memory sink."""

    def test_filters_by_type(self) -> None:
        sink = CollectingSink()
        with build_config_context(BuildConfig(sink=sink)):
            td(tr())
            tr(attr("style", "x"))

        assert len(sink.of_type("disallowed_child")) == 1
        assert len(sink.of_type("disallowed_attribute")) == 1

    def test_clear(self) -> None:
        sink = CollectingSink()
        sink.report(Diagnostic.disallowed_child("td", "tr", ()))
        sink.clear()
        assert len(sink) == 0


class TestLoggingSink:
    """Default sink writes warnings to the htmlkit logger."""

    def test_default_config_logs_warning(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="htmlkit"):
            cell = td(tr())

        assert cell.render() == b"<td></td>"
        records = [r for r in caplog.records if r.name == "htmlkit.diagnostics"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert "Child tag 'tr' is not allowed for tag 'td'" in records[0].getMessage()
        assert "(allowed: none)" in records[0].getMessage()

    def test_lists_allowed_names(self, caplog) -> None:
        sink = LoggingSink("tests")
        with caplog.at_level(logging.WARNING, logger="htmlkit"):
            sink.report(Diagnostic.disallowed_attribute("td", "style", {"class", "id"}))

        assert caplog.records[0].name == "htmlkit.tests"
        assert caplog.records[0].getMessage().endswith("(allowed: class, id)")
