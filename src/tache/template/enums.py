"""Type-safe enumerations for the template engine."""

from enum import StrEnum


class TagType(StrEnum):
    """Kinds of tag recognised by the scanner."""

    NULL = "null"
    VALUE = "value"
    SECTION_START = "section_start"
    INVERTED_SECTION_START = "inverted_section_start"
    SECTION_END = "section_end"
    PARTIAL = "partial"
    COMMENT = "comment"
    SET_DELIMITER = "set_delimiter"


class EscapeMode(StrEnum):
    """How an interpolated value is written to the output."""

    ESCAPE = "escape"
    UNESCAPE = "unescape"
    RAW = "raw"


class ErrorKind(StrEnum):
    """Categories of error recorded while rendering."""

    UNMATCHED_SECTION_END = "unmatched_section_end"
    MISSING_SECTION_END = "missing_section_end"
    SECTION_KEY_MISMATCH = "section_key_mismatch"
    INVALID_DELIMITER = "invalid_delimiter"
    RECURSION_LIMIT = "recursion_limit"
