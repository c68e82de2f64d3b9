"""Semantic validation of extracted data models."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from mdmodels.datamodel import DataModel
from mdmodels.exceptions import ValidationError
from mdmodels.primitives import PRIMITIVE_TYPES, PrimitiveTypes


class IssueKind(Enum):
    """Kind of validation issue."""

    DUPLICATE_OBJECT = "duplicate_object"
    DUPLICATE_ENUM = "duplicate_enum"
    DUPLICATE_ATTRIBUTE = "duplicate_attribute"
    UNKNOWN_TYPE = "unknown_type"


@dataclass
class ValidationIssue:
    """A single problem found in a data model."""

    kind: IssueKind
    message: str
    object_name: str | None = None
    attribute_name: str | None = None

    @property
    def location(self) -> str:
        """Dotted location of the issue, e.g. ``Person.name``."""
        parts = [p for p in (self.object_name, self.attribute_name) if p]
        return ".".join(parts) or "<model>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "object": self.object_name,
            "attribute": self.attribute_name,
        }

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"[{self.kind.value}] {self.location}: {self.message}"


class Validator:
    """Check cross-references and uniqueness within a data model.

    The extractor only reports structural problems; everything that needs
    the whole model, such as an attribute referring to a type that is never
    declared, is checked here.
    """

    def __init__(self, primitives: PrimitiveTypes | None = None) -> None:
        """Initialize the validator.

        Args:
            primitives: Registry of primitive type names.
        """
        self.primitives = primitives or PRIMITIVE_TYPES
        self.checks: list[Callable[[DataModel], list[ValidationIssue]]] = [
            self._check_duplicate_objects,
            self._check_duplicate_enums,
            self._check_duplicate_attributes,
            self._check_types,
        ]

    def check(self, model: DataModel) -> list[ValidationIssue]:
        """Run all checks and return the issues found."""
        issues: list[ValidationIssue] = []
        for check_fn in self.checks:
            issues.extend(check_fn(model))
        return issues

    def validate(self, model: DataModel) -> None:
        """Run all checks.

        Raises:
            ValidationError: If any issue is found.
        """
        issues = self.check(model)
        if issues:
            raise ValidationError(issues)

    def _check_duplicate_objects(self, model: DataModel) -> list[ValidationIssue]:
        counts = Counter(model.object_names())
        return [
            ValidationIssue(
                kind=IssueKind.DUPLICATE_OBJECT,
                message=f"Object '{name}' is defined {count} times",
                object_name=name,
            )
            for name, count in counts.items()
            if count > 1
        ]

    def _check_duplicate_enums(self, model: DataModel) -> list[ValidationIssue]:
        counts = Counter(model.enum_names())
        return [
            ValidationIssue(
                kind=IssueKind.DUPLICATE_ENUM,
                message=f"Enumeration '{name}' is defined {count} times",
            )
            for name, count in counts.items()
            if count > 1
        ]

    def _check_duplicate_attributes(self, model: DataModel) -> list[ValidationIssue]:
        issues = []
        for obj in model.objects:
            counts = Counter(attr.name for attr in obj.attributes)
            for name, count in counts.items():
                if count > 1:
                    issues.append(
                        ValidationIssue(
                            kind=IssueKind.DUPLICATE_ATTRIBUTE,
                            message=f"Attribute '{name}' is defined {count} times",
                            object_name=obj.name,
                            attribute_name=name,
                        )
                    )
        return issues

    def _check_types(self, model: DataModel) -> list[ValidationIssue]:
        known = set(model.object_names()) | set(model.enum_names())
        issues = []
        for obj in model.objects:
            for attr in obj.attributes:
                for dtype in self.primitives.filter_non_primitives(attr.dtypes):
                    if dtype not in known:
                        issues.append(
                            ValidationIssue(
                                kind=IssueKind.UNKNOWN_TYPE,
                                message=(
                                    f"Type '{dtype}' is neither a primitive, "
                                    "an object nor an enumeration"
                                ),
                                object_name=obj.name,
                                attribute_name=attr.name,
                            )
                        )
        return issues
