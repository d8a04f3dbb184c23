"""Tests for key collection from templates."""

import pytest

from tache.core.config import RenderConfig
from tache.template.enums import TagType
from tache.template.validation import collect_keys


class TestCollectKeys:
    """Test key extraction without rendering."""

    def test_values_and_sections(self) -> None:
        """Test value and section keys are collected."""
        template = "{{a}} {{{b}}} {{&c}} {{#d}}{{e}}{{/d}}{{^f}}{{/f}}"
        assert collect_keys(template) == {"a", "b", "c", "d", "e", "f"}

    def test_ignores_comments_and_partials(self) -> None:
        """Test comments, partials and end tags are skipped."""
        assert collect_keys("{{! note }}{{>p}}{{x}}") == {"x"}

    def test_partial_names(self) -> None:
        """Test collecting partial names instead of keys."""
        names = collect_keys("{{>header}}{{x}}{{>footer}}", tag_types={TagType.PARTIAL})
        assert names == {"header", "footer"}

    def test_follows_delimiter_changes(self) -> None:
        """Test keys after a delimiter change are found."""
        assert collect_keys("{{a}}{{=<% %>=}}<%b%>{{c}}") == {"a", "b"}

    def test_custom_markers(self) -> None:
        """Test collecting with configured default markers."""
        config = RenderConfig(start_marker="[[", end_marker="]]")
        assert collect_keys("[[x]] {{y}}", config=config) == {"x"}

    def test_stops_at_invalid_delimiter(self) -> None:
        """Test scanning stops at an invalid delimiter tag."""
        assert collect_keys("{{a}}{{== ==}}{{b}}") == {"a"}

    def test_invalid_type(self) -> None:
        """Test error on non-string template."""
        with pytest.raises(TypeError):
            collect_keys(None)
