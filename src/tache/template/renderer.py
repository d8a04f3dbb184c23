"""Mustache renderer.

The renderer walks a range of template text tag by tag. Literal text is
copied to the output, value tags are looked up in the context, and sections
and partials are rendered by recursing over their body text. Malformed
templates never raise: the first problem is recorded and rendering of the
current range stops after the text preceding the offending tag.
"""

from collections.abc import Mapping
import hashlib
import time

from opentelemetry import trace

from tache.context.partials import PartialMap
from tache.context.protocols import Context
from tache.context.protocols import PartialResolver
from tache.context.protocols import can_eval
from tache.context.protocols import eval_section
from tache.context.protocols import partial_value
from tache.context.variant import VariantContext
from tache.core.config import RenderConfig
from tache.core.errors import TemplateRenderError
from tache.template.enums import ErrorKind
from tache.template.enums import TagType
from tache.template.escaping import apply_escape
from tache.template.matcher import find_end_tag
from tache.template.scanner import TagScanner
from tache.template.session import RenderErrorRecord
from tache.template.session import RenderSession
from tache.template.tags import Delimiters
from tache.template.tags import Tag

tracer = trace.get_tracer(__name__)

UNEXPECTED_END_MESSAGE = "Unexpected end tag"
MISSING_SECTION_END_MESSAGE = "No matching end tag found for section"
MISSING_INVERTED_END_MESSAGE = "No matching end tag found for inverted section"
RECURSION_LIMIT_MESSAGE = "Recursion limit exceeded"


class Renderer:
    """Render Mustache templates against a ``Context``.

    All state that changes during a render lives in a ``RenderSession``
    created per call, so one renderer can serve any number of renders. The
    renderer only remembers the error of the most recently finished render.

    Calling ``render`` from inside a lambda while a render is in progress
    continues that render: the body is walked with the same session, so its
    errors and nesting depth count towards the outer render.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize the renderer.

        Args:
            config: Render configuration (default markers, depth limit,
                strict mode)

        """
        self.config = config or RenderConfig()
        self._last_error: RenderErrorRecord | None = None
        self._session: RenderSession | None = None

    def set_tag_markers(self, start_marker: str, end_marker: str) -> None:
        """Change the tag markers in effect at the start of each render.

        Raises:
            pydantic.ValidationError: When a marker is empty or contains '='
                or whitespace

        """
        self.config = RenderConfig.model_validate(
            {
                **self.config.model_dump(),
                "start_marker": start_marker,
                "end_marker": end_marker,
            }
        )

    def error(self) -> str:
        """Return the message of the last render's error, or ""."""
        return self._last_error.message if self._last_error else ""

    def error_pos(self) -> int:
        """Return the offset of the last render's error, or -1.

        For errors inside a partial the offset is relative to the partial.
        """
        return self._last_error.position if self._last_error else -1

    def error_partial(self) -> str:
        """Return the partial the last render's error occurred in, or ""."""
        return self._last_error.partial if self._last_error else ""

    def last_error(self) -> RenderErrorRecord | None:
        """Return the full error record of the last render."""
        return self._last_error

    def render(self, template: object, context: Context) -> str:
        """Render a template.

        Args:
            template: Template text
            context: Context supplying values, scopes and partials

        Returns:
            Rendered text. When the template is malformed this is the output
            produced up to the offending tag; see error() and error_pos().

        Raises:
            TypeError: When template is not a string
            TemplateRenderError: In strict mode, when an error was recorded

        """
        if not isinstance(template, str):
            msg = f"Mustache template must be str, got {type(template).__name__}"
            raise TypeError(msg)
        if self._session is not None:
            return self._render_nested(self._session, template, context)

        with tracer.start_as_current_span("tache.render") as span:
            start_time = time.perf_counter()
            span.set_attribute("tache.template_hash", _hash_template(template))
            span.set_attribute("tache.template_length", len(template))

            session = RenderSession(delimiters=self._default_delimiters())
            self._session = session
            try:
                output = self._render(session, template, 0, len(template), context)
            finally:
                self._session = None
            self._last_error = session.error

            render_ms = (time.perf_counter() - start_time) * 1000
            span.set_attribute("tache.render_ms", render_ms)
            span.set_attribute("tache.result_length", len(output))
            if session.error is not None:
                span.set_attribute("tache.error_kind", session.error.kind.value)
                span.set_attribute("tache.error_pos", session.error.position)

        if session.error is not None and self.config.strict:
            raise TemplateRenderError(session.error, output)
        return output

    def _default_delimiters(self) -> Delimiters:
        return Delimiters(self.config.start_marker, self.config.end_marker)

    def _render_nested(
        self, session: RenderSession, template: str, context: Context
    ) -> str:
        """Render text handed back by a lambda within the active session.

        The text starts from the default markers; the caller's markers are
        restored afterwards.
        """
        if session.failed:
            return ""
        outer = session.delimiters
        session.delimiters = self._default_delimiters()
        try:
            with session.nested():
                return self._render(session, template, 0, len(template), context)
        finally:
            session.delimiters = outer

    def _render(
        self,
        session: RenderSession,
        text: str,
        start_pos: int,
        end_pos: int,
        context: Context,
    ) -> str:
        scanner = TagScanner(session)
        output: list[str] = []
        last_tag_end = start_pos

        while not session.failed:
            tag = scanner.find_tag(text, last_tag_end, end_pos)
            if tag.type is TagType.NULL:
                output.append(text[last_tag_end:end_pos])
                break
            output.append(text[last_tag_end : tag.start])

            match tag.type:
                case TagType.VALUE:
                    value = context.string_value(tag.key)
                    output.append(apply_escape(value, tag.escape_mode))
                    last_tag_end = tag.end
                case TagType.SECTION_START | TagType.INVERTED_SECTION_START:
                    rendered, last_tag_end = self._render_section(
                        session, scanner, text, tag, end_pos, context
                    )
                    output.append(rendered)
                case TagType.SECTION_END:
                    session.record_error(
                        ErrorKind.UNMATCHED_SECTION_END,
                        UNEXPECTED_END_MESSAGE,
                        tag.start,
                    )
                    last_tag_end = tag.end
                case TagType.PARTIAL:
                    if self._can_descend(session, tag):
                        with session.expanding(tag.key):
                            partial = partial_value(context, tag.key)
                            output.append(
                                self._render(session, partial, 0, len(partial), context)
                            )
                    last_tag_end = tag.end
                case TagType.SET_DELIMITER | TagType.COMMENT:
                    last_tag_end = tag.end

        return "".join(output)

    def _render_section(
        self,
        session: RenderSession,
        scanner: TagScanner,
        text: str,
        tag: Tag,
        end_pos: int,
        context: Context,
    ) -> tuple[str, int]:
        """Render a section or inverted section.

        Returns:
            The section output and the offset to resume scanning from

        """
        opening = session.delimiters
        end_tag = find_end_tag(scanner, text, tag, end_pos)
        if end_tag.type is TagType.NULL:
            if tag.type is TagType.SECTION_START:
                message = MISSING_SECTION_END_MESSAGE
            else:
                message = MISSING_INVERTED_END_MESSAGE
            session.record_error(ErrorKind.MISSING_SECTION_END, message, tag.start)
            return "", tag.end
        if session.failed:
            return "", end_tag.end

        # Delimiter changes inside the body were applied while matching; the
        # body is rendered from the markers in effect at its start.
        closing = session.delimiters
        key = tag.key

        if tag.type is TagType.INVERTED_SECTION_START:
            rendered = ""
            if context.is_false(key):
                rendered = self._render_body(
                    session, text, tag, end_tag, context, opening
                )
        elif (count := context.list_count(key)) > 0:
            parts = []
            for index in range(count):
                context.push(key, index)
                parts.append(
                    self._render_body(session, text, tag, end_tag, context, opening)
                )
                context.pop()
            rendered = "".join(parts)
        elif can_eval(context, key):
            rendered = ""
            if self._can_descend(session, tag):
                body = text[tag.end : end_tag.start]
                with session.nested():
                    rendered = eval_section(context, key, body, self)
        elif not context.is_false(key):
            context.push(key)
            rendered = self._render_body(session, text, tag, end_tag, context, opening)
            context.pop()
        else:
            rendered = ""

        session.delimiters = closing
        return rendered, end_tag.end

    def _render_body(
        self,
        session: RenderSession,
        text: str,
        tag: Tag,
        end_tag: Tag,
        context: Context,
        delimiters: Delimiters,
    ) -> str:
        if not self._can_descend(session, tag):
            return ""
        session.delimiters = delimiters
        with session.nested():
            return self._render(session, text, tag.end, end_tag.start, context)

    def _can_descend(self, session: RenderSession, tag: Tag) -> bool:
        max_depth = self.config.max_depth
        if max_depth is not None and session.depth >= max_depth:
            session.record_error(
                ErrorKind.RECURSION_LIMIT, RECURSION_LIMIT_MESSAGE, tag.start
            )
            return False
        return True


def render_template(
    template: str,
    args: Mapping[str, object],
    *,
    partials: Mapping[str, str] | PartialResolver | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render a template against a mapping of arguments in one call.

    Args:
        template: Template text
        args: Root scope values
        partials: Partial templates by name, or a resolver
        config: Optional render configuration

    Returns:
        Rendered text

    """
    if isinstance(partials, Mapping):
        partials = PartialMap(partials)
    context = VariantContext(dict(args), partials)
    return Renderer(config).render(template, context)


def _hash_template(template: str) -> str:
    """Generate hash of template for telemetry."""
    return hashlib.sha256(template[:500].encode()).hexdigest()[:16]
