"""Extraction of data models from Markdown documents.

A document is scanned twice. The first pass turns level-3 headings and the
lists that follow them into objects and attributes; the second pass turns
level-3 headings and the fenced code blocks that follow them into
enumerations. Both kinds of heading look the same, so each pass keeps its
own state and ignores what the other one is interested in.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

from mdmodels.attribute import Attribute, AttrOption
from mdmodels.datamodel import DataModel
from mdmodels.exceptions import MarkdownStructureError
from mdmodels.markdown.events import Event, Tag, iter_events
from mdmodels.markdown.frontmatter import parse_frontmatter, split_frontmatter
from mdmodels.object import Enumeration, Object
from mdmodels.validation import Validator

logger = logging.getLogger(__name__)

HTML_TAG_PATTERN = re.compile(r"<[^>]*>")
TERM_PATTERN = re.compile(r"\(([^)]+)\)")

OBJECT_HEADING_LEVEL = 3
NAME_HEADING_LEVEL = 1


def parse_markdown(path: Path | str, validate: bool = True) -> DataModel:
    """Parse a Markdown file into a data model.

    Args:
        path: Path to the Markdown file.
        validate: Run the semantic validator on the result.

    Returns:
        The extracted DataModel.

    Raises:
        FileNotFoundError: If the file does not exist.
        FrontMatterError: If the front matter is malformed.
        MarkdownStructureError: If the document breaks the dialect.
        ValidationError: If validation is enabled and fails.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File does not exist: {path}")

    logger.debug(f"Parsing data model from {path}")
    content = path.read_text(encoding="utf-8")
    return parse_markdown_content(content, validate=validate)


def parse_markdown_content(content: str, validate: bool = True) -> DataModel:
    """Parse Markdown text into a data model.

    Args:
        content: Full document text, optionally starting with front matter.
        validate: Run the semantic validator on the result.

    Returns:
        The extracted DataModel.
    """
    content = strip_html(content)
    config = parse_frontmatter(content)
    _, body = split_frontmatter(content)

    model = DataModel(name=None, config=config)

    objects = extract_objects(iter_events(body), model)
    enums = extract_enums(iter_events(body))

    model.objects = [obj for obj in objects if obj.has_attributes()]
    model.enums = [enum for enum in enums if enum.has_values()]

    logger.debug(
        f"Extracted {len(model.objects)} object(s) and {len(model.enums)} enumeration(s) "
        f"(dropped {len(objects) - len(model.objects)} empty object(s), "
        f"{len(enums) - len(model.enums)} empty enumeration(s))"
    )

    if validate:
        Validator().validate(model)

    return model


def strip_html(content: str) -> str:
    """Remove all HTML tags from the content."""
    return HTML_TAG_PATTERN.sub("", content)


# Pass 1: objects and attributes


def extract_objects(events: Iterable[Event], model: DataModel) -> list[Object]:
    """Collect objects and their attributes from an event stream.

    Sets ``model.name`` from the first level-1 heading. Objects without
    attributes are returned as well; the caller filters them.

    Args:
        events: Structural events of the document.
        model: Model under construction.

    Returns:
        Objects in document order.
    """
    iterator = iter(events)
    objects: list[Object] = []

    for event in iterator:
        _process_object_event(iterator, objects, event, model)

    return objects


def _process_object_event(
    iterator: Iterator[Event],
    objects: list[Object],
    event: Event,
    model: DataModel,
) -> None:
    if event.is_start(Tag.HEADING):
        if event.level == NAME_HEADING_LEVEL:
            name = _extract_name(iterator)
            if model.name is None:
                model.name = name
        elif event.level == OBJECT_HEADING_LEVEL:
            objects.append(_process_object_heading(iterator))
        return

    if event.is_start(Tag.LIST) and not event.ordered:
        if not objects:
            logger.debug("Skipping list that precedes the first object heading")
            return

        current = objects[-1]
        if not current.has_attributes():
            # Consume the start of the first item
            next(iterator, None)
            required, name = _extract_attr_name_required(iterator)
            current.add_attribute(Attribute(name=name, required=required))
        else:
            for attr_string in _extract_attribute_options(iterator):
                _distribute_attribute_option(current, attr_string)
        return

    if event.is_start(Tag.ITEM):
        if not objects:
            logger.debug("Skipping list item that precedes the first object heading")
            return

        required, name = _extract_attr_name_required(iterator)
        objects[-1].add_attribute(Attribute(name=name, required=required))


def _process_object_heading(iterator: Iterator[Event]) -> Object:
    heading = _extract_name(iterator)
    tokens = heading.split()
    if not tokens:
        raise MarkdownStructureError(f"Object heading is empty: {heading!r}")

    obj = Object(name=tokens[0], term=extract_object_term(heading))
    logger.debug(f"Found object heading '{obj.name}' (term: {obj.term})")
    return obj


def extract_object_term(heading: str) -> str | None:
    """Get the text of the first parenthesized group in a heading."""
    match = TERM_PATTERN.search(heading)
    return match.group(1) if match else None


def _extract_name(iterator: Iterator[Event]) -> str:
    event = next(iterator, None)
    if event is not None and event.is_text:
        return event.text

    raise MarkdownStructureError(f"Could not extract name: got {event}")


def _extract_attr_name_required(iterator: Iterator[Event]) -> tuple[bool, str]:
    """Read an attribute name and whether it is required.

    Plain text right after the item start is an optional attribute. If the
    name sits behind one more token (such as an emphasis wrapper), the
    attribute is required.
    """
    event = next(iterator, None)
    if event is not None and event.is_text:
        return False, event.text

    for _ in range(2):
        event = next(iterator, None)
        if event is not None and event.is_text:
            return True, event.text

    raise MarkdownStructureError(
        "Could not extract attribute name. Please check the markdown file."
    )


def _extract_attribute_options(iterator: Iterator[Event]) -> list[str]:
    """Collect the raw text of every item up to the end of the list.

    A ``[`` run right after an item marks it as an array and is folded into
    the previous string as ``[]``.
    """
    options: list[str] = []
    for event in iterator:
        if event.is_start(Tag.ITEM):
            options.append(_extract_name(iterator))
        elif event.is_end(Tag.LIST) and not event.ordered:
            break
        elif event.is_text and event.text == "[" and options:
            options[-1] = f"{options[-1]}[]"

    return options


def _distribute_attribute_option(obj: Object, attr_string: str) -> None:
    if ":" in attr_string:
        key, value = process_option(attr_string)
        obj.last_attribute().add_option(AttrOption(key=key, value=value))
        return

    obj.create_new_attribute(attr_string, False)


def process_option(option: str) -> tuple[str, str]:
    """Split an option line into key and value.

    The value keeps any further colons, so ``Term: schema:name`` yields
    ``("Term", "schema:name")``.

    Raises:
        MarkdownStructureError: If the line has no value segment.
    """
    parts = option.split(":")
    if len(parts) < 2:
        raise MarkdownStructureError(f"Attribute {option} does not have a valid option")

    key = parts[0].strip()
    value = ":".join(parts[1:]).strip()
    return key, value


# Pass 2: enumerations


def extract_enums(events: Iterable[Event]) -> list[Enumeration]:
    """Collect enumerations from an event stream.

    Enumerations without mappings are returned as well; the caller filters
    them.

    Args:
        events: Structural events of the document.

    Returns:
        Enumerations in document order.
    """
    iterator = iter(events)
    enums: list[Enumeration] = []

    for event in iterator:
        if event.is_start(Tag.HEADING) and event.level == OBJECT_HEADING_LEVEL:
            enums.append(Enumeration(name=_extract_name(iterator)))
        elif event.is_start(Tag.CODE_BLOCK) and event.fenced:
            content = next(iterator, None)
            if content is None or not content.is_text:
                continue
            if not enums:
                logger.debug("Skipping code block that precedes the first heading")
                continue
            process_enum_mappings(enums[-1], content.text)

    return enums


def process_enum_mappings(enum: Enumeration, mappings: str) -> None:
    """Add the ``KEY = VALUE`` lines of a code block to an enumeration.

    Lines that do not split into exactly two parts on ``=`` are skipped.
    """
    for line in mappings.split("\n"):
        parts = line.split("=")
        if len(parts) != 2:
            continue

        key = parts[0].strip().replace('"', "")
        value = parts[1].strip().replace('"', "")
        enum.add_mapping(key, value)
