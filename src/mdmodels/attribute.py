"""Attribute data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mdmodels.xmltype import XMLType

ARRAY_MARKER = "[]"


@dataclass
class AttrOption:
    """A ``key: value`` option attached to an attribute."""

    key: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"key": self.key, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AttrOption:
        """Create from dictionary."""
        return cls(key=data.get("key", ""), value=data.get("value", ""))


@dataclass
class Attribute:
    """A named member of an object.

    The options are kept exactly as written. Well-known option keys
    (``type``, ``description``, ``term``, ``default``, ``xml``) are exposed
    as read-only properties; keys are matched case-insensitively.
    """

    name: str
    required: bool = False
    options: list[AttrOption] = field(default_factory=list)

    def add_option(self, option: AttrOption) -> None:
        """Append an option."""
        self.options.append(option)

    def get_option(self, key: str) -> str | None:
        """Get the value of the last option with the given key."""
        value = None
        for option in self.options:
            if option.key.lower() == key.lower():
                value = option.value
        return value

    @property
    def dtypes(self) -> list[str]:
        """Declared types, without array markers."""
        raw = self.get_option("type")
        if not raw:
            return []
        dtypes = []
        for dtype in raw.split(","):
            dtype = dtype.strip()
            if dtype.endswith(ARRAY_MARKER):
                dtype = dtype[: -len(ARRAY_MARKER)].strip()
            if dtype:
                dtypes.append(dtype)
        return dtypes

    @property
    def is_array(self) -> bool:
        """Check if the attribute holds multiple values."""
        if self.name.endswith(ARRAY_MARKER):
            return True
        raw = self.get_option("type") or ""
        return any(dtype.strip().endswith(ARRAY_MARKER) for dtype in raw.split(","))

    @property
    def docstring(self) -> str:
        """Description of the attribute."""
        return self.get_option("description") or ""

    @property
    def term(self) -> str | None:
        """Semantic term of the attribute."""
        return self.get_option("term")

    @property
    def default(self) -> str | None:
        """Default value as written in the document."""
        return self.get_option("default")

    @property
    def xml(self) -> XMLType | None:
        """XML serialization tag, if one is declared."""
        raw = self.get_option("xml")
        if raw is None:
            return None
        return XMLType.from_str(raw)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        xml = self.xml
        return {
            "name": self.name,
            "required": self.required,
            "is_array": self.is_array,
            "dtypes": self.dtypes,
            "docstring": self.docstring,
            "term": self.term,
            "default": self.default,
            "xml": xml.to_dict() if xml else None,
            "options": [option.to_dict() for option in self.options],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Attribute:
        """Create from dictionary.

        Derived fields are ignored; they are recomputed from the options.
        """
        return cls(
            name=data.get("name", ""),
            required=data.get("required", False),
            options=[AttrOption.from_dict(o) for o in data.get("options", [])],
        )
