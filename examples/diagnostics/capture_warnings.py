"""Capture allow-list diagnostics instead of logging them, then go strict."""

from htmlkit import (
    BuildConfig,
    CollectingSink,
    ContractError,
    attr,
    build_config_context,
    td,
    text,
    tr,
)

sink = CollectingSink()
with build_config_context(BuildConfig(sink=sink)):
    # tr is not a legal child of td: dropped. data-x is not allow-listed: kept.
    row = tr(attr("data-x", "1"), td(tr(), text("cell")))

print(row.render().decode())
for diagnostic in sink.diagnostics:
    print(f"{diagnostic.violation_type}: {diagnostic.message}")

with build_config_context(BuildConfig(strict=True)):
    try:
        td(tr())
    except ContractError as exc:
        print(f"strict: {exc}")
