"""Tests for data model extraction."""

from pathlib import Path

import pytest

from mdmodels.datamodel import DataModel
from mdmodels.exceptions import MarkdownStructureError, ValidationError
from mdmodels.markdown.events import iter_events
from mdmodels.markdown.parser import (
    extract_enums,
    extract_object_term,
    extract_objects,
    parse_markdown,
    parse_markdown_content,
    process_option,
    strip_html,
)
from mdmodels.object import Enumeration


def parse(content: str) -> DataModel:
    """Parse content without semantic validation."""
    return parse_markdown_content(content, validate=False)


class TestModelName:
    """Tests for the level-1 heading."""

    def test_name_from_heading(self) -> None:
        """Test that the level-1 heading names the model."""
        assert parse("# My Model\n").name == "My Model"

    def test_first_heading_wins(self) -> None:
        """Test that later level-1 headings do not rename the model."""
        assert parse("# First\n\n# Second\n").name == "First"

    def test_no_heading(self) -> None:
        """Test a document without a level-1 heading."""
        assert parse("Some text\n").name is None

    def test_heading_without_text(self) -> None:
        """Test that a heading must start with literal text."""
        with pytest.raises(MarkdownStructureError, match="Could not extract name"):
            parse("# `code`\n")


class TestObjectHeadings:
    """Tests for level-3 headings."""

    def test_name_and_term(self) -> None:
        """Test that the term is taken from the parentheses."""
        model = parse("### Foo (bar)\n\n- a\n")

        assert model.objects[0].name == "Foo"
        assert model.objects[0].term == "bar"

    def test_no_term(self) -> None:
        """Test a heading without parentheses."""
        model = parse("### Foo\n\n- a\n")

        assert model.objects[0].name == "Foo"
        assert model.objects[0].term is None

    def test_name_is_first_token(self) -> None:
        """Test that only the first word names the object."""
        model = parse("### Foo is a thing\n\n- a\n")
        assert model.objects[0].name == "Foo"

    def test_extract_object_term(self) -> None:
        """Test that the first parenthesized group is used."""
        assert extract_object_term("Foo (schema:Thing) (other)") == "schema:Thing"
        assert extract_object_term("Foo ()") is None
        assert extract_object_term("Foo") is None

    def test_heading_without_list_is_dropped(self) -> None:
        """Test that section headings without attributes are not objects."""
        model = parse("### Intro\n\nJust some prose.\n\n### Foo\n\n- a\n")
        assert model.object_names() == ["Foo"]

    def test_other_heading_levels_ignored(self) -> None:
        """Test that level-2 headings do not start objects."""
        model = parse("### Foo\n\n- a\n\n## Section\n\n- b\n")

        assert model.object_names() == ["Foo"]
        assert [a.name for a in model.objects[0].attributes] == ["a", "b"]

    def test_bold_heading_is_fatal(self) -> None:
        """Test that an object heading must start with literal text."""
        with pytest.raises(MarkdownStructureError):
            parse("### __Foo__\n\n- a\n")


class TestAttributes:
    """Tests for attribute declarations."""

    def test_plain_name_is_optional(self) -> None:
        """Test that an unwrapped name is optional."""
        attr = parse("### Foo\n\n- name\n").objects[0].attributes[0]

        assert attr.name == "name"
        assert attr.required is False

    def test_bold_name_is_required(self) -> None:
        """Test that a bold name is required."""
        attr = parse("### Foo\n\n- __name__\n").objects[0].attributes[0]

        assert attr.name == "name"
        assert attr.required is True

    def test_emphasized_name_is_required(self) -> None:
        """Test that an emphasized name is required."""
        attr = parse("### Foo\n\n- _name_\n").objects[0].attributes[0]

        assert attr.name == "name"
        assert attr.required is True

    def test_attribute_order(self) -> None:
        """Test that attributes keep document order."""
        model = parse("### Foo\n\n- __a__\n- b\n- __c__\n")
        attrs = model.objects[0].attributes

        assert [a.name for a in attrs] == ["a", "b", "c"]
        assert [a.required for a in attrs] == [True, False, True]

    def test_item_without_name_is_fatal(self) -> None:
        """Test that an item must carry text."""
        with pytest.raises(MarkdownStructureError, match="attribute name"):
            parse("### Foo\n\n- `code`\n")

    def test_list_before_first_object_is_skipped(self) -> None:
        """Test that lists outside any object are ignored."""
        model = parse("# Model\n\n- intro\n- more\n\n### Foo\n\n- a\n")

        assert model.object_names() == ["Foo"]
        assert [a.name for a in model.objects[0].attributes] == ["a"]


class TestAttributeOptions:
    """Tests for nested option lists."""

    def test_option_attached_to_attribute(self) -> None:
        """Test that options belong to the attribute above them."""
        model = parse("### Foo\n\n- value\n  - type: float\n")
        obj = model.objects[0]

        assert len(obj.attributes) == 1
        option = obj.attributes[0].options[0]
        assert option.key == "type"
        assert option.value == "float"

    def test_options_of_several_attributes(self) -> None:
        """Test that each option list attaches to its own attribute."""
        model = parse(
            "### Foo\n"
            "\n"
            "- __a__\n"
            "  - Type: string\n"
            "  - Description: First\n"
            "- b\n"
            "  - Type: integer\n"
        )
        a, b = model.objects[0].attributes

        assert [(o.key, o.value) for o in a.options] == [
            ("Type", "string"),
            ("Description", "First"),
        ]
        assert [(o.key, o.value) for o in b.options] == [("Type", "integer")]

    def test_value_keeps_colons(self) -> None:
        """Test that the value may contain colons."""
        model = parse("### Foo\n\n- a\n  - Term: schema:name\n")
        option = model.objects[0].attributes[0].options[0]

        assert option.key == "Term"
        assert option.value == "schema:name"

    def test_array_marker_on_option(self) -> None:
        """Test that a bracket after an option marks it as a list."""
        model = parse("### Foo\n\n- a\n  - Type: string[]\n")
        attr = model.objects[0].attributes[0]

        assert attr.options[0].value == "string[]"
        assert attr.is_array
        assert attr.dtypes == ["string"]

    def test_nested_item_without_colon_is_attribute(self) -> None:
        """Test that a nested item without a colon declares an attribute."""
        model = parse("### Foo\n\n- a\n  - Type: string\n  - b\n  - Type: integer\n")
        attrs = model.objects[0].attributes

        assert [a.name for a in attrs] == ["a", "b"]
        assert attrs[1].required is False
        assert attrs[1].options[0].value == "integer"

    def test_array_marker_on_attribute(self) -> None:
        """Test that a bracket after a name is kept on the attribute."""
        model = parse("### Foo\n\n- a\n  - Type: string\n  - tags[]\n")
        assert model.objects[0].attributes[1].name == "tags[]"

    def test_process_option(self) -> None:
        """Test splitting an option line."""
        assert process_option("  Type :  string ") == ("Type", "string")
        assert process_option("Default: a:b:c") == ("Default", "a:b:c")
        assert process_option("Empty:") == ("Empty", "")

    def test_process_option_without_value(self) -> None:
        """Test that a line without a colon is rejected."""
        with pytest.raises(MarkdownStructureError, match="valid option"):
            process_option("novalue")


class TestEnumerations:
    """Tests for enumeration extraction."""

    def test_mappings_from_code_block(self) -> None:
        """Test that quoted key/value lines become mappings."""
        model = parse('### Numbers\n\n```python\nONE = "1"\n\nTWO = "2"\n```\n')

        assert model.enum_names() == ["Numbers"]
        assert model.enums[0].mappings == {"ONE": "1", "TWO": "2"}

    def test_malformed_lines_skipped(self) -> None:
        """Test that lines without exactly one '=' are ignored."""
        model = parse("### Mixed\n\n```\n# comment\nA = 1\nB = 2 = 3\nC = 3\n```\n")
        assert model.enums[0].mappings == {"A": "1", "C": "3"}

    def test_mappings_sorted(self) -> None:
        """Test that mappings are ordered by key."""
        model = parse("### Order\n\n```\nZ = z\nA = a\nM = m\n```\n")
        assert list(model.enums[0].mappings) == ["A", "M", "Z"]

    def test_duplicate_key_keeps_last(self) -> None:
        """Test that a repeated key overwrites the earlier value."""
        model = parse("### Dup\n\n```\nA = 1\nA = 2\n```\n")
        assert model.enums[0].mappings == {"A": "2"}

    def test_enum_name_is_full_heading(self) -> None:
        """Test that the enumeration keeps the whole heading text."""
        model = parse("### Unit Kind\n\n```\nM = meter\n```\n")
        assert model.enum_names() == ["Unit Kind"]

    def test_heading_without_code_block_dropped(self) -> None:
        """Test that enumerations without mappings are dropped."""
        model = parse("### Foo\n\n- a\n\n### Bar\n\n```\nA = 1\n```\n")

        assert model.enum_names() == ["Bar"]
        assert model.object_names() == ["Foo"]

    def test_indented_code_block_ignored(self) -> None:
        """Test that only fenced blocks hold mappings."""
        model = parse("### Foo\n\nText\n\n    A = 1\n")
        assert model.enums == []

    def test_code_block_before_heading_skipped(self) -> None:
        """Test that a block without a heading is ignored."""
        model = parse("```\nA = 1\n```\n\n### E\n\n```\nB = 2\n```\n")

        assert model.enum_names() == ["E"]
        assert model.enums[0].mappings == {"B": "2"}


class TestPasses:
    """Tests for the individual extraction passes."""

    def test_object_pass_keeps_empty_objects(self) -> None:
        """Test that filtering happens outside the pass."""
        model = DataModel()
        objects = extract_objects(iter_events("# M\n\n### A\n\n### B\n\n- x\n"), model)

        assert [o.name for o in objects] == ["A", "B"]
        assert model.name == "M"

    def test_enum_pass_keeps_empty_enums(self) -> None:
        """Test that the enum pass returns every level-3 heading."""
        enums = extract_enums(iter_events("### A\n\n### B\n\n```\nX = 1\n```\n"))

        assert enums == [Enumeration(name="A"), Enumeration(name="B", mappings={"X": "1"})]


class TestParseMarkdownContent:
    """Tests for the full extraction pipeline."""

    def test_simple_model(self, simple_markdown: str) -> None:
        """Test extracting objects and enumerations together."""
        model = parse_markdown_content(simple_markdown)

        assert model.name == "Library"
        assert model.config is None
        assert model.object_names() == ["Book", "Author"]
        assert model.enum_names() == ["Genre"]

        book = model.get_object("Book")
        assert book.term == "schema:Book"
        assert [a.name for a in book.attributes] == ["title", "isbn", "authors"]
        assert book.attributes[0].required
        assert book.get_attribute("authors").is_array
        assert book.get_attribute("isbn").term == "schema:isbn"

    def test_frontmatter_not_in_structure(self) -> None:
        """Test that the front matter block is not scanned as Markdown."""
        model = parse("---\nrepo: x\nprefixes:\n  schema: http://schema.org/\n---\n# Name\n")

        assert model.name == "Name"
        assert model.config.repo == "x"
        assert model.config.id_field is True
        assert model.config.prefix == "md"

    def test_html_stripped(self) -> None:
        """Test that HTML tags are removed before extraction."""
        model = parse("<div>\n\n### Foo\n\n- <b>name</b></div>\n")
        attr = model.objects[0].attributes[0]

        assert attr.name == "name"
        assert attr.required is False

    def test_strip_html(self) -> None:
        """Test the tag substitution."""
        assert strip_html("a <b>bold</b> <!-- note --> c") == "a bold  c"

    def test_idempotent(self, simple_markdown: str) -> None:
        """Test that parsing twice gives the same model."""
        assert parse(simple_markdown) == parse(simple_markdown)

    def test_validation_error(self) -> None:
        """Test that unknown types fail validation."""
        with pytest.raises(ValidationError, match="Missing"):
            parse_markdown_content("### Foo\n\n- a\n  - Type: Missing\n")

    def test_validation_disabled(self) -> None:
        """Test that validation can be skipped."""
        model = parse_markdown_content("### Foo\n\n- a\n  - Type: Missing\n", validate=False)
        assert model.objects[0].attributes[0].dtypes == ["Missing"]


class TestParseMarkdownFile:
    """Tests for parsing files."""

    def test_parse_sample_model(self, model_path: Path) -> None:
        """Test parsing the sample model with front matter."""
        model = parse_markdown(model_path)

        assert model.name == "Test"
        assert model.config.prefix == "tst"
        assert model.object_names() == ["Test", "Test2"]
        assert model.enum_names() == ["Ordered"]
        assert model.enums[0].mappings == {
            "VALUE1": "value1",
            "VALUE2": "value2",
            "VALUE3": "value3",
        }

        test = model.get_object("Test")
        assert test.term == "schema:Test"
        name = test.get_attribute("name")
        assert name.required
        assert name.xml.is_attr
        assert name.docstring == "The name of the test."
        assert test.get_attribute("number").default == "1.0"
        assert test.get_attribute("test2").dtypes == ["Test2"]
        assert test.get_attribute("test2").is_array

        test2 = model.get_object("Test2")
        assert test2.get_attribute("names").is_array
        assert test2.get_attribute("number").get_option("minimum") == "0"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file is reported."""
        with pytest.raises(FileNotFoundError, match="File does not exist"):
            parse_markdown(tmp_path / "missing.md")

    def test_accepts_string_path(self, simple_model_file: Path) -> None:
        """Test passing the path as a string."""
        assert parse_markdown(str(simple_model_file)).name == "Library"
