"""Extend the built-in tags with your own allow-lists."""

from htmlkit import TagSpec, create_registry_with_defaults, text

builder = create_registry_with_defaults()
builder.register(TagSpec.of("ul", ("class", "id"), ("li",)))
builder.register(TagSpec.of("li", ("class",)))
tags = builder.build()

ul, li = tags["ul"], tags["li"]
print(ul(li(text("one")), li(text("two"))).render().decode())
