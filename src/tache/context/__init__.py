"""Render contexts and partial resolvers."""

from tache.context.partials import PartialFileLoader
from tache.context.partials import PartialMap
from tache.context.protocols import Context
from tache.context.protocols import EvaluatingContext
from tache.context.protocols import PartialResolver
from tache.context.protocols import partial_value
from tache.context.variant import VariantContext

__all__ = [
    "Context",
    "EvaluatingContext",
    "PartialFileLoader",
    "PartialMap",
    "PartialResolver",
    "VariantContext",
    "partial_value",
]
