"""Custom exceptions for tache.

Rendering itself never raises for malformed templates; it records a
``RenderErrorRecord`` instead. These exceptions cover API misuse and the
opt-in strict mode.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tache.template.session import RenderErrorRecord


class TacheError(Exception):
    """Base exception for tache errors."""


class TemplateRenderError(TacheError):
    """Raised in strict mode when a render recorded an error.

    The partially rendered output is kept on the exception so callers can
    still inspect what was produced before the failing tag.
    """

    def __init__(self, record: "RenderErrorRecord", output: str) -> None:
        """Initialize with the recorded error and the partial output."""
        self.record = record
        self.output = output
        location = f"position {record.position}"
        if record.partial:
            location += f" in partial '{record.partial}'"
        super().__init__(f"{record.message} ({location})")
