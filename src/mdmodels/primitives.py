"""Primitive type names and their JSON-Schema equivalents."""

from __future__ import annotations

from typing import Iterable

from mdmodels.exceptions import NotPrimitiveError

JSON_MAPPINGS: dict[str, str] = {
    "string": "string",
    "float": "number",
    "integer": "integer",
    "boolean": "boolean",
    "bool": "boolean",
    "null": "null",
}


class PrimitiveTypes:
    """Registry of scalar type names.

    Schema consumers use it to decide between an inline JSON-Schema type and
    a reference to another object.
    """

    def __init__(self) -> None:
        """Initialize the registry with the built-in primitive types."""
        self.types: list[str] = list(JSON_MAPPINGS)
        self.json_mappings: dict[str, str] = dict(JSON_MAPPINGS)

    def is_primitive(self, dtype: str) -> bool:
        """Check if the given data type is a primitive type."""
        return dtype in self.types

    def filter_primitives(self, dtypes: Iterable[str]) -> list[str]:
        """Return the primitive types of ``dtypes``, keeping their order."""
        return [dtype for dtype in dtypes if self.is_primitive(dtype)]

    def filter_non_primitives(self, dtypes: Iterable[str]) -> list[str]:
        """Return the non-primitive types of ``dtypes``, keeping their order."""
        return [dtype for dtype in dtypes if not self.is_primitive(dtype)]

    def dtype_to_json(self, dtype: str) -> str:
        """Convert a primitive data type to its JSON-Schema type name.

        Args:
            dtype: Name of a primitive type.

        Returns:
            The JSON-Schema type name.

        Raises:
            NotPrimitiveError: If ``dtype`` is not a primitive type. Callers
                are expected to filter with ``filter_primitives`` first.
        """
        if dtype not in self.json_mappings:
            raise NotPrimitiveError(dtype)
        return self.json_mappings[dtype]


PRIMITIVE_TYPES = PrimitiveTypes()
