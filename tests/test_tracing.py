"""Tests for OpenTelemetry spans emitted while rendering."""

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
import pytest

from tache.context.variant import VariantContext
from tache.template import renderer as renderer_module
from tache.template.renderer import Renderer

HASH_LENGTH = 16


@pytest.fixture
def exporter(monkeypatch: pytest.MonkeyPatch) -> InMemorySpanExporter:
    """Route renderer spans to an in-memory exporter."""
    span_exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    monkeypatch.setattr(renderer_module, "tracer", provider.get_tracer("test"))
    return span_exporter


class TestRenderSpans:
    """Test render span attributes."""

    def test_span_attributes(self, exporter: InMemorySpanExporter) -> None:
        """Test a successful render records sizes and timing."""
        Renderer().render("Hello {{name}}", VariantContext({"name": "Bo"}))

        spans = exporter.get_finished_spans()
        assert len(spans) == 1
        span = spans[0]
        assert span.name == "tache.render"
        assert span.attributes is not None
        assert len(span.attributes["tache.template_hash"]) == HASH_LENGTH
        assert span.attributes["tache.template_length"] == len("Hello {{name}}")
        assert span.attributes["tache.result_length"] == len("Hello Bo")
        assert span.attributes["tache.render_ms"] >= 0
        assert "tache.error_kind" not in span.attributes

    def test_error_attributes(self, exporter: InMemorySpanExporter) -> None:
        """Test a failed render records the error kind and position."""
        Renderer().render("ab{{/x}}", VariantContext())

        span = exporter.get_finished_spans()[0]
        assert span.attributes is not None
        assert span.attributes["tache.error_kind"] == "unmatched_section_end"
        assert span.attributes["tache.error_pos"] == 2
