"""Extract data models from structured Markdown documents."""

from mdmodels.attribute import Attribute, AttrOption
from mdmodels.datamodel import DataModel
from mdmodels.exceptions import (
    FrontMatterError,
    MarkdownStructureError,
    MDModelsError,
    NotPrimitiveError,
    ValidationError,
)
from mdmodels.markdown.frontmatter import FrontMatter, parse_frontmatter
from mdmodels.markdown.parser import parse_markdown, parse_markdown_content
from mdmodels.object import Enumeration, Object
from mdmodels.primitives import PRIMITIVE_TYPES, PrimitiveTypes
from mdmodels.validation import IssueKind, ValidationIssue, Validator
from mdmodels.xmltype import XMLKind, XMLType

__version__ = "0.1.0"

__all__ = [
    "AttrOption",
    "Attribute",
    "DataModel",
    "Enumeration",
    "FrontMatter",
    "FrontMatterError",
    "IssueKind",
    "MarkdownStructureError",
    "MDModelsError",
    "NotPrimitiveError",
    "Object",
    "PRIMITIVE_TYPES",
    "PrimitiveTypes",
    "ValidationError",
    "ValidationIssue",
    "Validator",
    "XMLKind",
    "XMLType",
    "parse_frontmatter",
    "parse_markdown",
    "parse_markdown_content",
]
