"""Build and render a table in a few lines: zero config, zero deps."""

from htmlkit import class_, table, td, text, tr

doc = table(
    class_("scores"),
    tr(td(text("Alice")), td(text("9 < 10"))),
    tr(td(text("Bob")), td(text("R&D"))),
)
print(doc.render().decode())
