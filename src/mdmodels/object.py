"""Object and enumeration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mdmodels.attribute import Attribute


@dataclass
class Object:
    """A schema entity extracted from a level-3 heading and its lists."""

    name: str
    term: str | None = None
    attributes: list[Attribute] = field(default_factory=list)

    def has_attributes(self) -> bool:
        """Check if the object has at least one attribute."""
        return len(self.attributes) > 0

    def add_attribute(self, attribute: Attribute) -> None:
        """Append an attribute."""
        self.attributes.append(attribute)

    def create_new_attribute(self, name: str, required: bool) -> Attribute:
        """Create an attribute, append it and return it."""
        attribute = Attribute(name=name, required=required)
        self.add_attribute(attribute)
        return attribute

    def last_attribute(self) -> Attribute:
        """Get the most recently added attribute.

        Raises:
            IndexError: If the object has no attributes.
        """
        if not self.attributes:
            raise IndexError(f"Object '{self.name}' has no attributes")
        return self.attributes[-1]

    def get_attribute(self, name: str) -> Attribute | None:
        """Find an attribute by name."""
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "term": self.term,
            "attributes": [a.to_dict() for a in self.attributes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Object:
        """Create from dictionary."""
        return cls(
            name=data.get("name", ""),
            term=data.get("term"),
            attributes=[Attribute.from_dict(a) for a in data.get("attributes", [])],
        )


@dataclass
class Enumeration:
    """A named set of key/value mappings, kept sorted by key."""

    name: str
    mappings: dict[str, str] = field(default_factory=dict)

    def has_values(self) -> bool:
        """Check if the enumeration has at least one mapping."""
        return len(self.mappings) > 0

    def add_mapping(self, key: str, value: str) -> None:
        """Insert or overwrite a mapping."""
        self.mappings[key] = value
        self.mappings = dict(sorted(self.mappings.items()))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "mappings": dict(self.mappings),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Enumeration:
        """Create from dictionary."""
        return cls(
            name=data.get("name", ""),
            mappings=dict(sorted(data.get("mappings", {}).items())),
        )
