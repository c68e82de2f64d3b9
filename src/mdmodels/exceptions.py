"""Exceptions raised while extracting and validating data models."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdmodels.validation import ValidationIssue


class MDModelsError(Exception):
    """Base class for all mdmodels errors."""


class FrontMatterError(MDModelsError):
    """Raised when the front matter block cannot be deserialized.

    A malformed configuration block means the source document is corrupt,
    so there is no recovery path.
    """

    def __init__(self, message: str, content_preview: str | None = None) -> None:
        self.message = message
        self.content_preview = content_preview

        parts = [message]
        if content_preview:
            parts.append(f"Content: {content_preview[:100]}")
        super().__init__(" ".join(parts))


class MarkdownStructureError(MDModelsError):
    """Raised when a heading, list item or option line breaks the dialect."""


class NotPrimitiveError(MDModelsError, ValueError):
    """Raised when a non-primitive type is converted to a JSON type."""

    def __init__(self, dtype: str) -> None:
        self.dtype = dtype
        super().__init__(f"The data type {dtype} is not a primitive type")


class ValidationError(MDModelsError):
    """Raised when a data model fails semantic validation."""

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = issues
        lines = [f"Data model is invalid ({len(issues)} issue(s)):"]
        lines.extend(f"  - {issue}" for issue in issues)
        super().__init__("\n".join(lines))
