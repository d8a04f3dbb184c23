"""Core functionality for tache.

This module contains the configuration model and the exception hierarchy.
"""

from tache.core.config import DEFAULT_END_MARKER
from tache.core.config import DEFAULT_START_MARKER
from tache.core.config import RenderConfig
from tache.core.errors import TacheError
from tache.core.errors import TemplateRenderError

__all__ = [
    "DEFAULT_END_MARKER",
    "DEFAULT_START_MARKER",
    "RenderConfig",
    "TacheError",
    "TemplateRenderError",
]
