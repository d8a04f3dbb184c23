"""Reference context over plain Python data.

``VariantContext`` renders templates against nested mappings, sequences and
pydantic models, with callables acting as section lambdas.
"""

from collections.abc import Callable
from collections.abc import Mapping
from typing import TYPE_CHECKING
from typing import Any
from typing import TypeAlias

from pydantic import BaseModel

from tache.context.protocols import PartialResolver

if TYPE_CHECKING:
    from tache.template.renderer import Renderer

SectionLambda: TypeAlias = Callable[[str, "Renderer", "VariantContext"], object]

IMPLICIT_ITERATOR = "."

_MISSING = object()


def _member(scope: object, name: str) -> object:
    """Look up ``name`` directly in one scope value."""
    if isinstance(scope, Mapping):
        value = scope.get(name, _MISSING)
    elif isinstance(scope, BaseModel) and name in type(scope).model_fields:
        value = getattr(scope, name)
    else:
        return _MISSING
    return _MISSING if value is None else value


def _is_list(value: object) -> bool:
    return isinstance(value, (list, tuple))


def to_text(value: object) -> str:
    """Convert a context value to the text written for it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_list(value) or isinstance(value, Mapping):
        return ""
    return str(value)


class VariantContext:
    """Context backed by a stack of scope values.

    The root value sits at the bottom of the stack. Lookups walk the stack
    from the innermost scope outwards and return the first non-None match,
    so sections see the fields of every enclosing scope. Dotted names resolve
    their first segment that way and descend into the result for the rest.
    """

    def __init__(
        self, root: object = None, partials: PartialResolver | None = None
    ) -> None:
        """Initialize the context.

        Args:
            root: Root scope, typically a mapping or pydantic model
            partials: Resolver used for {{>partial}} tags

        """
        self.partials = partials
        self._stack: list[object] = [{} if root is None else root]

    @property
    def depth(self) -> int:
        """Number of scopes pushed on top of the root."""
        return len(self._stack) - 1

    def value(self, key: str) -> Any:
        """Resolve ``key`` against the scope stack, or None if missing."""
        if key == IMPLICIT_ITERATOR:
            return self._stack[-1]

        head, _, rest = key.partition(".")
        for scope in reversed(self._stack):
            value = _member(scope, head)
            if value is not _MISSING:
                break
        else:
            return None

        if rest:
            for part in rest.split("."):
                value = _member(value, part)
                if value is _MISSING:
                    return None
        return value

    def is_false(self, key: str) -> bool:
        value = self.value(key)
        if value is None:
            return True
        if isinstance(value, bool):
            return not value
        if _is_list(value) or isinstance(value, Mapping):
            return len(value) == 0
        if isinstance(value, BaseModel) or callable(value):
            return False
        return to_text(value) == ""

    def string_value(self, key: str) -> str:
        if self.is_false(key):
            return ""
        return to_text(self.value(key))

    def list_count(self, key: str) -> int:
        value = self.value(key)
        if _is_list(value):
            return len(value)
        return 0

    def push(self, key: str, index: int | None = None) -> None:
        value = self.value(key)
        if index is not None:
            items = value if _is_list(value) else ()
            value = items[index] if 0 <= index < len(items) else None
        self._stack.append(value)

    def pop(self) -> None:
        self._stack.pop()

    def can_eval(self, key: str) -> bool:
        return callable(self.value(key))

    def eval(self, key: str, template: str, renderer: "Renderer") -> str:
        """Call the lambda stored under ``key`` with the raw section body.

        The lambda receives the body text, the renderer and this context, and
        may render the body (or any other text) itself. Such a render
        continues the one in progress.
        """
        fn: SectionLambda = self.value(key)
        return to_text(fn(template, renderer, self))
