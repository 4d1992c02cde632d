"""Document: a reference type with explicit duplication.

Usage:
    original = Document(title="Original", content="...")
    alias = bind(original)          # same instance
    copy = original.deep_copy()     # independent instance
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from valref.core import reference_type


@reference_type
@dataclass(slots=True, eq=False)
class Document:
    """Text document shared by reference unless explicitly deep-copied.

    Attributes:
        title: Document title.
        content: Document body.
    """

    title: str
    content: str

    def deep_copy(self) -> Self:
        """Create a fully independent duplicate.

        Returns:
            New instance of the same class with this document's title and
            content as of the call. The receiver is left untouched and is never returned.
        """
        return type(self)(title=self.title, content=self.content)
