"""The data model aggregate."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from mdmodels.markdown.frontmatter import FrontMatter
from mdmodels.object import Enumeration, Object


@dataclass
class DataModel:
    """Complete data model extracted from one document.

    Objects and enumerations are appended during extraction; the parser
    drops objects without attributes and enumerations without mappings
    before handing the model out.
    """

    name: str | None = None
    config: FrontMatter | None = None
    objects: list[Object] = field(default_factory=list)
    enums: list[Enumeration] = field(default_factory=list)

    def get_object(self, name: str) -> Object | None:
        """Find an object by name."""
        for obj in self.objects:
            if obj.name == name:
                return obj
        return None

    def get_enum(self, name: str) -> Enumeration | None:
        """Find an enumeration by name."""
        for enum in self.enums:
            if enum.name == name:
                return enum
        return None

    def object_names(self) -> list[str]:
        """Names of all objects, in document order."""
        return [obj.name for obj in self.objects]

    def enum_names(self) -> list[str]:
        """Names of all enumerations, in document order."""
        return [enum.name for enum in self.enums]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "config": self.config.to_dict() if self.config else None,
            "objects": [obj.to_dict() for obj in self.objects],
            "enums": [enum.to_dict() for enum in self.enums],
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DataModel:
        """Create from dictionary."""
        config = data.get("config")
        return cls(
            name=data.get("name"),
            config=FrontMatter.from_dict(config) if config is not None else None,
            objects=[Object.from_dict(o) for o in data.get("objects", [])],
            enums=[Enumeration.from_dict(e) for e in data.get("enums", [])],
        )
