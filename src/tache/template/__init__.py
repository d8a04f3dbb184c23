"""Mustache template engine: scanner, section matcher and renderer."""

from tache.template.enums import ErrorKind
from tache.template.enums import EscapeMode
from tache.template.enums import TagType
from tache.template.escaping import escape_html
from tache.template.escaping import unescape_html
from tache.template.matcher import find_end_tag
from tache.template.renderer import Renderer
from tache.template.renderer import render_template
from tache.template.scanner import TagScanner
from tache.template.session import RenderErrorRecord
from tache.template.session import RenderSession
from tache.template.tags import Delimiters
from tache.template.tags import Tag
from tache.template.validation import collect_keys

__all__ = [
    "Delimiters",
    "ErrorKind",
    "EscapeMode",
    "RenderErrorRecord",
    "RenderSession",
    "Renderer",
    "Tag",
    "TagScanner",
    "TagType",
    "collect_keys",
    "escape_html",
    "find_end_tag",
    "render_template",
    "unescape_html",
]
