"""Tests for section end matching."""

from tache.template.enums import ErrorKind
from tache.template.enums import TagType
from tache.template.matcher import KEY_MISMATCH_MESSAGE
from tache.template.matcher import find_end_tag
from tache.template.scanner import TagScanner
from tache.template.session import RenderSession


def match(text: str) -> tuple:
    """Match the section opened by the first tag of ``text``."""
    session = RenderSession()
    scanner = TagScanner(session)
    start = scanner.find_tag(text, 0, len(text))
    return find_end_tag(scanner, text, start, len(text)), session


class TestFindEndTag:
    """Test matching of section start and end tags."""

    def test_simple(self) -> None:
        """Test a flat section."""
        end, session = match("{{#a}}body{{/a}}tail")
        assert end.type is TagType.SECTION_END
        assert (end.start, end.end) == (10, 16)
        assert session.error is None

    def test_nested_same_key(self) -> None:
        """Test nested sections with the same key are skipped."""
        text = "{{#a}}{{#a}}x{{/a}}{{/a}}"
        end, _ = match(text)
        assert end.start == 19

    def test_nested_inverted(self) -> None:
        """Test inverted sections count towards depth."""
        text = "{{#a}}{{^b}}x{{/b}}y{{/a}}"
        end, _ = match(text)
        assert end.key == "a"
        assert end.end == len(text)

    def test_missing_end(self) -> None:
        """Test an unclosed section yields a null tag."""
        end, session = match("{{#a}}{{#b}}{{/b}}")
        assert end.type is TagType.NULL
        assert session.error is None

    def test_key_mismatch(self) -> None:
        """Test a mismatched end key is reported but still returned."""
        end, session = match("{{#one}} {{/two}}")
        assert end.type is TagType.SECTION_END
        assert end.key == "two"
        assert session.error is not None
        assert session.error.kind is ErrorKind.SECTION_KEY_MISMATCH
        assert session.error.message == KEY_MISMATCH_MESSAGE
        assert session.error.position == 9
