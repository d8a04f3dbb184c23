"""Tag scanner.

Finds the next tag in a range of template text and classifies it by the
sigil character that follows the start marker. Delimiter redefinition tags
take effect as a side effect of scanning them.
"""

from tache.template.enums import ErrorKind
from tache.template.enums import EscapeMode
from tache.template.enums import TagType
from tache.template.session import RenderSession
from tache.template.tags import NULL_TAG
from tache.template.tags import Delimiters
from tache.template.tags import Tag

INVALID_DELIMITER_MESSAGE = "Custom delimiters may not contain '=' or spaces."

_SIGILS = {
    "#": TagType.SECTION_START,
    "^": TagType.INVERTED_SECTION_START,
    "/": TagType.SECTION_END,
    ">": TagType.PARTIAL,
}


def read_tag_name(text: str, pos: int, end_pos: int) -> str:
    """Read the first whitespace-delimited token in ``text[pos:end_pos]``."""
    while pos < end_pos and text[pos].isspace():
        pos += 1
    start = pos
    while pos < end_pos and not text[pos].isspace():
        pos += 1
    return text[start:pos]


class TagScanner:
    """Scan template text for tags using the markers of a render session."""

    def __init__(self, session: RenderSession) -> None:
        """Initialize the scanner.

        Args:
            session: Session providing the active delimiters and receiving
                delimiter changes and errors

        """
        self.session = session

    def find_tag(self, text: str, pos: int, end_pos: int) -> Tag:
        """Find the next tag starting in ``text[pos:end_pos]``.

        Args:
            text: Template text
            pos: Offset to start searching from
            end_pos: Tags must start before this offset

        Returns:
            The tag found, or NULL_TAG when there is none. A start marker
            without a matching end marker is not a tag.

        """
        start_marker = self.session.delimiters.start
        end_marker = self.session.delimiters.end

        tag_start = text.find(start_marker, pos)
        if tag_start == -1 or tag_start >= end_pos:
            return NULL_TAG

        body_start = tag_start + len(start_marker)
        body_end = text.find(end_marker, body_start)
        if body_end == -1:
            return NULL_TAG
        tag_end = body_end + len(end_marker)

        sigil = text[body_start] if body_start < body_end else ""

        if sigil in _SIGILS:
            return Tag(
                _SIGILS[sigil],
                key=read_tag_name(text, body_start + 1, body_end),
                start=tag_start,
                end=tag_end,
            )
        if sigil == "!":
            return Tag(TagType.COMMENT, start=tag_start, end=tag_end)
        if sigil == "=":
            self.read_set_delimiter(text, body_start + 1, body_end)
            return Tag(TagType.SET_DELIMITER, start=tag_start, end=tag_end)

        escape_mode = EscapeMode.ESCAPE
        name_start = body_start
        name_end = body_end
        if sigil == "&":
            escape_mode = EscapeMode.UNESCAPE
            name_start += 1
        elif sigil == "{":
            escape_mode = EscapeMode.RAW
            name_start += 1
            brace = text.find("}", name_start)
            if brace == body_end:
                # {{{key}}}: the third brace follows the end marker
                if tag_end < len(text) and text[tag_end] == "}":
                    tag_end += 1
            elif brace != -1 and brace < body_end:
                name_end = brace

        return Tag(
            TagType.VALUE,
            key=read_tag_name(text, name_start, name_end),
            start=tag_start,
            end=tag_end,
            escape_mode=escape_mode,
        )

    def read_set_delimiter(self, text: str, pos: int, end_pos: int) -> None:
        """Parse a ``{{=START END=}}`` body and switch the session markers.

        ``pos`` is the offset just after the opening ``=`` and ``end_pos`` the
        offset of the end marker. The final character before ``end_pos`` is
        the closing ``=``. Invalid markers record an error and leave the
        active markers unchanged.
        """
        token_start = pos
        while pos < end_pos and not text[pos].isspace():
            if text[pos] == "=":
                self._invalid_delimiter(pos)
                return
            pos += 1
        start_marker = text[token_start:pos]

        while pos < end_pos and text[pos].isspace():
            pos += 1

        token_start = pos
        while pos < end_pos - 1:
            if text[pos] == "=" or text[pos].isspace():
                self._invalid_delimiter(pos)
                return
            pos += 1
        end_marker = text[token_start:pos]

        if not start_marker or not end_marker:
            self._invalid_delimiter(pos)
            return

        self.session.delimiters = Delimiters(start_marker, end_marker)

    def _invalid_delimiter(self, pos: int) -> None:
        self.session.record_error(
            ErrorKind.INVALID_DELIMITER, INVALID_DELIMITER_MESSAGE, pos
        )
