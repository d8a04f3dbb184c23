"""tache - logic-less Mustache templates for Python.

Templates are rendered against a context through a small capability
protocol, so any data source can back a render. The bundled
``VariantContext`` covers mappings, sequences, pydantic models and
callables used as section lambdas.
"""

from tache.context import Context
from tache.context import EvaluatingContext
from tache.context import PartialFileLoader
from tache.context import PartialMap
from tache.context import PartialResolver
from tache.context import VariantContext
from tache.core import RenderConfig
from tache.core import TacheError
from tache.core import TemplateRenderError
from tache.project_info import ProjectInfo
from tache.project_info import get_project_info
from tache.template import ErrorKind
from tache.template import EscapeMode
from tache.template import RenderErrorRecord
from tache.template import Renderer
from tache.template import Tag
from tache.template import TagType
from tache.template import collect_keys
from tache.template import render_template

# Public API - supports both direct and module imports
__all__ = [
    "Context",
    "ErrorKind",
    "EscapeMode",
    "EvaluatingContext",
    "PartialFileLoader",
    "PartialMap",
    "PartialResolver",
    "ProjectInfo",
    "RenderConfig",
    "RenderErrorRecord",
    "Renderer",
    "TacheError",
    "Tag",
    "TagType",
    "TemplateRenderError",
    "VariantContext",
    "collect_keys",
    "get_project_info",
    "render_template",
]
__version__ = get_project_info().version
