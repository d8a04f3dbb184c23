"""Render configuration.

This module provides the options shared by every render performed through a
``Renderer``: the default tag markers, the nesting depth limit and strict mode.
"""

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

DEFAULT_START_MARKER = "{{"
DEFAULT_END_MARKER = "}}"


class RenderConfig(BaseModel):
    """Configuration for template rendering.

    Attributes:
        start_marker: Tag start marker in effect when a render begins.
        end_marker: Tag end marker in effect when a render begins.
        max_depth: Maximum section/partial nesting depth. Exceeding it records
            a recursion limit error instead of overflowing the stack. None
            disables the limit.
        strict: Raise TemplateRenderError when a render records an error.

    """

    start_marker: str = Field(default=DEFAULT_START_MARKER, min_length=1)
    end_marker: str = Field(default=DEFAULT_END_MARKER, min_length=1)
    max_depth: int | None = Field(default=256, ge=1)
    strict: bool = Field(default=False)

    @field_validator("start_marker", "end_marker")
    @classmethod
    def _check_marker(cls, value: str) -> str:
        if "=" in value or any(ch.isspace() for ch in value):
            msg = "Tag markers may not contain '=' or spaces"
            raise ValueError(msg)
        return value
