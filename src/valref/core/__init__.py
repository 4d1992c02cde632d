"""Core functionalities: declared binding semantics and pure operations.

Architecture Note:
    core/ holds the stateless building blocks plus the process-local registry.
    Concrete demonstration types live in models/, driver routines in demos/.
"""

from valref.core.models import DeepCopyable, Semantics, SemanticsMeta
from valref.core.operations import (
    alias_on_bind,
    copy_on_bind,
    duplicate_using_protocol,
    fields_equal,
)
from valref.core.registry import (
    SemanticsRegistry,
    bind,
    duplicate,
    get_registry,
    reference_type,
    value_type,
)
from valref.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Models
    "Semantics",
    "SemanticsMeta",
    "DeepCopyable",
    # Registry
    "SemanticsRegistry",
    "get_registry",
    "value_type",
    "reference_type",
    "bind",
    "duplicate",
    # Operations
    "copy_on_bind",
    "alias_on_bind",
    "duplicate_using_protocol",
    "fields_equal",
]
