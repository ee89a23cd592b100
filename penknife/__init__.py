"""Penknife: small nested templates expanded through a caller-supplied resolver."""

from penknife.lib.errors import (
    ConfigurationError,
    LoopTargetError,
    PenknifeError,
    StructuralError,
    UnresolvedError,
)
from penknife.lib.parser import (
    CallableResolver,
    MappingResolver,
    Penknife,
    TemplateResolver,
    format,
)
from penknife.models.dataModel import TokenConfig

__all__ = [
    "Penknife",
    "TemplateResolver",
    "format",
    "CallableResolver",
    "MappingResolver",
    "TokenConfig",
    "PenknifeError",
    "StructuralError",
    "ConfigurationError",
    "LoopTargetError",
    "UnresolvedError",
]
