"""Escape mode implementations for interpolated values."""

from tache.template.enums import EscapeMode

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
    }
)

_HTML_UNESCAPES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&quot;", '"'),
)


def escape_html(s: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` in a single pass.

    Apostrophes are left alone.
    """
    return s.translate(_HTML_ESCAPES)


def unescape_html(s: str) -> str:
    """Replace the four HTML entities produced by ``escape_html``.

    Replacements run over the whole string in a fixed order, so this is not
    an exact inverse of ``escape_html`` for input that already holds entities.
    """
    for entity, char in _HTML_UNESCAPES:
        s = s.replace(entity, char)
    return s


def apply_escape(value: str, mode: EscapeMode) -> str:
    """Apply an escape mode to an interpolated value."""
    match mode:
        case EscapeMode.ESCAPE:
            return escape_html(value)
        case EscapeMode.UNESCAPE:
            return unescape_html(value)
        case EscapeMode.RAW:
            return value
    msg = f"Unsupported escape mode: {mode!s}"
    raise ValueError(msg)
