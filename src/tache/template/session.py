"""Per-render mutable state.

A ``RenderSession`` is created for every top-level render and passed through
the recursive render chain. It owns everything that changes while a template
is being walked, so a ``Renderer`` can be reused and shared freely.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from dataclasses import field

from pydantic import BaseModel

from tache.template.enums import ErrorKind
from tache.template.tags import Delimiters


class RenderErrorRecord(BaseModel):
    """The first error recorded during a render.

    Attributes:
        kind: Error category.
        message: Human readable description.
        position: Offset of the offending tag in the text being rendered.
            For errors inside a partial this is an offset into the partial.
        partial: Name of the partial being expanded, or "" for the main
            template.

    """

    kind: ErrorKind
    message: str
    position: int
    partial: str = ""


@dataclass
class RenderSession:
    """Mutable state for one top-level render.

    Attributes:
        delimiters: Tag markers currently in effect.
        partial_stack: Names of the partials currently being expanded.
        depth: Current section/partial nesting depth.
        error: First error recorded, if any.

    """

    delimiters: Delimiters = field(default_factory=Delimiters)
    partial_stack: list[str] = field(default_factory=list)
    depth: int = 0
    error: RenderErrorRecord | None = None

    @property
    def failed(self) -> bool:
        """Whether an error has been recorded."""
        return self.error is not None

    def record_error(self, kind: ErrorKind, message: str, position: int) -> None:
        """Record an error unless one is already set.

        The active partial is captured from the top of the partial stack.
        """
        if self.error is not None:
            return
        self.error = RenderErrorRecord(
            kind=kind,
            message=message,
            position=position,
            partial=self.partial_stack[-1] if self.partial_stack else "",
        )

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Track one level of section nesting."""
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    @contextmanager
    def expanding(self, name: str) -> Iterator[None]:
        """Track expansion of the partial ``name``."""
        self.partial_stack.append(name)
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1
            self.partial_stack.pop()
