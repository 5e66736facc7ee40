"""Built-in default document used when no file exists yet."""

from __future__ import annotations

__all__ = ["DEFAULT_DOCUMENT_TEXT", "render_default_document"]

DEFAULT_DOCUMENT_TEXT = """
[Section1]
; Example section with a comment line
var1 = 5
var2 = Привет, мир!

[Section2]
var1 = 42
var2 = Тестовая строка
"""


def render_default_document() -> str:
    """Return the scaffold text, to be written to disk verbatim."""
    return DEFAULT_DOCUMENT_TEXT
