"""
Parser package for Penknife template expansion.

Provides the tokenizer, the recursive block executor and the engine
facade, plus resolvers for common data sources.
"""

from .base import Penknife, TemplateResolver, format
from .resolvers import CallableResolver, MappingResolver
from .tokenizer import reconstruct, tokenize

__all__ = [
    "Penknife",
    "TemplateResolver",
    "format",
    "CallableResolver",
    "MappingResolver",
    "reconstruct",
    "tokenize",
]
