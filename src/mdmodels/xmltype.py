"""XML serialization tags for data model members."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class XMLKind(Enum):
    """Whether a member is serialized as an XML attribute or element."""

    ATTRIBUTE = "attribute"
    ELEMENT = "element"


@dataclass(frozen=True)
class XMLType:
    """XML tag of a member, either an attribute or an element.

    On the wire the tag is ``{"is_attr": bool, "name": str}``. ``is_attr``
    duplicates ``kind`` but downstream tooling reads it literally.
    """

    kind: XMLKind
    name: str

    @classmethod
    def attribute(cls, name: str) -> XMLType:
        """Create an attribute tag."""
        return cls(kind=XMLKind.ATTRIBUTE, name=name)

    @classmethod
    def element(cls, name: str) -> XMLType:
        """Create an element tag."""
        return cls(kind=XMLKind.ELEMENT, name=name)

    @classmethod
    def from_str(cls, value: str) -> XMLType:
        """Parse a raw type annotation.

        A leading ``@`` marks an attribute and is not part of the name;
        anything else is an element named by the whole token.

        Example:
            >>> XMLType.from_str("@id")
            XMLType(kind=<XMLKind.ATTRIBUTE: 'attribute'>, name='id')
        """
        if value.startswith("@"):
            return cls.attribute(value[1:])
        return cls.element(value)

    @property
    def is_attr(self) -> bool:
        """Check if this tag is an XML attribute."""
        return self.kind == XMLKind.ATTRIBUTE

    def to_dict(self) -> dict[str, Any]:
        """Convert to the two-field wire shape."""
        return {
            "is_attr": self.is_attr,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XMLType:
        """Create from the two-field wire shape."""
        try:
            is_attr = data["is_attr"]
            name = data["name"]
        except KeyError as e:
            raise ValueError(f"XML type is missing field {e.args[0]!r}") from e

        if not isinstance(is_attr, bool) or not isinstance(name, str):
            raise ValueError(f"Invalid XML type: {data!r}")

        return cls.attribute(name) if is_attr else cls.element(name)

    def __str__(self) -> str:
        """Render back to the raw annotation form."""
        return f"@{self.name}" if self.is_attr else self.name
