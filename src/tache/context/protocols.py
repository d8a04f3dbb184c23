"""Capability protocols for render contexts and partial resolvers.

The renderer only ever talks to data through these protocols. A context must
provide the lookup and scope operations of ``Context``; the lambda hook of
``EvaluatingContext`` is optional and defaults to "never evaluate".
"""

from typing import TYPE_CHECKING
from typing import Protocol
from typing import TypeGuard
from typing import runtime_checkable

if TYPE_CHECKING:
    from tache.template.renderer import Renderer


@runtime_checkable
class PartialResolver(Protocol):
    """Protocol for fetching partial templates by name."""

    def get_partial(self, name: str) -> str:
        """Return the template text for ``name``, or "" when unknown."""
        ...


@runtime_checkable
class Context(Protocol):
    """Protocol for the data a template is rendered against.

    Contexts keep a stack of scopes. ``push`` and ``pop`` are always called
    in pairs by the renderer, once per truthy section and once per list item.
    """

    partials: PartialResolver | None

    def string_value(self, key: str) -> str:
        """Return the text used to replace a value tag for ``key``."""
        ...

    def is_false(self, key: str) -> bool:
        """Return True if ``key`` is missing, false or an empty list."""
        ...

    def list_count(self, key: str) -> int:
        """Return the length of the list value for ``key``, or 0."""
        ...

    def push(self, key: str, index: int | None = None) -> None:
        """Enter the value of ``key``, or its ``index``th item."""
        ...

    def pop(self) -> None:
        """Leave the scope entered by the last ``push``."""
        ...


@runtime_checkable
class EvaluatingContext(Protocol):
    """Optional protocol for contexts that handle sections themselves."""

    def can_eval(self, key: str) -> bool:
        """Return True if the section ``key`` should be passed to ``eval``."""
        ...

    def eval(self, key: str, template: str, renderer: "Renderer") -> str:
        """Return the output for section ``key`` given its unrendered body."""
        ...


def is_evaluating(context: object) -> TypeGuard[EvaluatingContext]:
    """Type guard for contexts implementing the lambda hook.

    Args:
        context: Context to check.

    Returns:
        True if the context provides can_eval and eval.

    """
    return isinstance(context, EvaluatingContext)


def can_eval(context: Context, key: str) -> bool:
    """Return ``context.can_eval(key)``, or False if the hook is absent."""
    return is_evaluating(context) and context.can_eval(key)


def eval_section(
    context: Context, key: str, template: str, renderer: "Renderer"
) -> str:
    """Return ``context.eval(...)``, or "" if the hook is absent."""
    if not is_evaluating(context):
        return ""
    return context.eval(key, template, renderer)


def partial_value(context: Context, name: str) -> str:
    """Return the partial ``name`` from the context's resolver.

    Contexts without a resolver expand every partial to "".
    """
    resolver = getattr(context, "partials", None)
    if resolver is None:
        return ""
    return resolver.get_partial(name)
