"""Section matching."""

from tache.template.enums import ErrorKind
from tache.template.enums import TagType
from tache.template.scanner import TagScanner
from tache.template.tags import NULL_TAG
from tache.template.tags import Tag

KEY_MISMATCH_MESSAGE = "Tag start/end key mismatch"

_OPENING = (TagType.SECTION_START, TagType.INVERTED_SECTION_START)


def find_end_tag(scanner: TagScanner, text: str, start_tag: Tag, end_pos: int) -> Tag:
    """Find the end tag closing ``start_tag``.

    Nested sections of any key are skipped by depth counting. When the end
    tag at depth zero has a different key a mismatch error is recorded on
    the scanner's session, but that tag is still returned so the caller can
    resume after it.

    Args:
        scanner: Scanner to read tags with
        text: Template text
        start_tag: The section or inverted section start tag
        end_pos: Offset the search may not pass

    Returns:
        The matching end tag, or NULL_TAG when the range ends first

    """
    depth = 1
    pos = start_tag.end
    while True:
        tag = scanner.find_tag(text, pos, end_pos)
        if tag.type is TagType.NULL:
            return NULL_TAG
        if tag.type in _OPENING:
            depth += 1
        elif tag.type is TagType.SECTION_END:
            depth -= 1
            if depth == 0:
                if tag.key != start_tag.key:
                    scanner.session.record_error(
                        ErrorKind.SECTION_KEY_MISMATCH, KEY_MISMATCH_MESSAGE, tag.start
                    )
                return tag
        pos = tag.end
