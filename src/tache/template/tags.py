"""Tag and delimiter value types produced by the scanner."""

from dataclasses import dataclass

from tache.core.config import DEFAULT_END_MARKER
from tache.core.config import DEFAULT_START_MARKER
from tache.template.enums import EscapeMode
from tache.template.enums import TagType


@dataclass(frozen=True)
class Tag:
    """A tag found in a template.

    ``start`` and ``end`` are half-open offsets into the scanned text. For
    triple-brace values ``end`` also covers the closing third brace.
    """

    type: TagType
    key: str = ""
    start: int = 0
    end: int = 0
    escape_mode: EscapeMode = EscapeMode.ESCAPE


NULL_TAG = Tag(TagType.NULL)


@dataclass(frozen=True)
class Delimiters:
    """The active start/end tag markers."""

    start: str = DEFAULT_START_MARKER
    end: str = DEFAULT_END_MARKER
