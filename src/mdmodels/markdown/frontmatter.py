"""Front matter configuration of a data model document."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

import yaml

from mdmodels.exceptions import FrontMatterError

logger = logging.getLogger(__name__)

DEFAULT_REPO = "http://mdmodel.net/"
DEFAULT_PREFIX = "md"

FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)


@dataclass(frozen=True)
class FrontMatter:
    """Configuration read from the YAML block at the top of a document.

    ``id_field`` is spelled ``id-field`` in the document.
    """

    id_field: bool = True
    prefixes: dict[str, str] | None = None
    nsmap: dict[str, str] | None = None
    repo: str = DEFAULT_REPO
    prefix: str = DEFAULT_PREFIX

    def prefix_items(self) -> list[tuple[str, str]] | None:
        """Get the prefixes as ``(prefix, uri)`` pairs."""
        if self.prefixes is None:
            return None
        return list(self.prefixes.items())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the document's key names."""
        return {
            "id-field": self.id_field,
            "prefixes": dict(self.prefixes) if self.prefixes is not None else None,
            "nsmap": dict(self.nsmap) if self.nsmap is not None else None,
            "repo": self.repo,
            "prefix": self.prefix,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FrontMatter:
        """Create from a deserialized front matter mapping.

        Omitted keys take their defaults and unknown keys are ignored.

        Raises:
            FrontMatterError: If a field has the wrong type.
        """
        unknown = set(data) - {"id-field", "prefixes", "nsmap", "repo", "prefix"}
        if unknown:
            logger.debug(f"Ignoring unknown front matter keys: {sorted(unknown)}")

        id_field = data.get("id-field", True)
        if not isinstance(id_field, bool):
            raise FrontMatterError(f"'id-field' must be a boolean, got {id_field!r}")

        return cls(
            id_field=id_field,
            prefixes=_string_mapping(data, "prefixes"),
            nsmap=_string_mapping(data, "nsmap"),
            repo=_string_field(data, "repo", DEFAULT_REPO),
            prefix=_string_field(data, "prefix", DEFAULT_PREFIX),
        )


def _string_field(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise FrontMatterError(f"'{key}' must be a string, got {value!r}")
    return value


def _string_mapping(data: dict[str, Any], key: str) -> dict[str, str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise FrontMatterError(f"'{key}' must be a mapping, got {value!r}")
    for k, v in value.items():
        if not isinstance(k, str) or not isinstance(v, str):
            raise FrontMatterError(f"'{key}' must map strings to strings, got {k!r}: {v!r}")
    return dict(value)


def split_frontmatter(content: str) -> tuple[str | None, str]:
    """Separate the front matter block from the document body.

    Args:
        content: Full document text.

    Returns:
        Tuple of the raw YAML text (None if the document has no front
        matter) and the remaining body.
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return None, content
    return match.group(1), content[match.end():]


def parse_frontmatter(content: str) -> FrontMatter | None:
    """Parse the front matter of a document.

    Args:
        content: Full document text.

    Returns:
        The parsed FrontMatter, or None if the document has no front matter
        or the block is empty.

    Raises:
        FrontMatterError: If the block is not valid YAML or does not
            deserialize into a FrontMatter.
    """
    raw, _ = split_frontmatter(content)
    if raw is None:
        return None

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise FrontMatterError(
            f"Could not deserialize front matter: {e}", content_preview=raw
        ) from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}",
            content_preview=raw,
        )

    config = FrontMatter.from_dict(data)
    logger.debug(f"Parsed front matter: {config}")
    return config
