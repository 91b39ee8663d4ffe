"""
Tests for list-item and code-block extraction helpers
"""

from fusionkit_docs.models import DocSection
from fusionkit_docs.retrieval.extraction import (
    extract_code_blocks,
    extract_list_items,
    first_match,
    title_contains,
)


def make_section(title, content="", level=1, file_path="doc.md"):
    return DocSection(id=title.lower(), title=title, content=content, file_path=file_path, level=level)


class TestExtractListItems:
    def test_dash_and_star_items(self):
        content = "Intro line\n- First\n  * Second\nnot an item\n-no space"
        assert extract_list_items(content) == ["First", "Second"]

    def test_bold_markers_are_removed(self):
        assert extract_list_items("- **Fast** builds\n- Very **simple**") == [
            "Fast builds",
            "Very simple",
        ]

    def test_no_items_returns_empty_list(self):
        assert extract_list_items("Just a paragraph.\n1. numbered") == []
        assert extract_list_items("") == []


class TestExtractCodeBlocks:
    def test_blocks_in_order_without_fences(self):
        content = "text\n```js\nconst a = 1;\n```\nmiddle\n```\nb()\nc()\n```"
        assert extract_code_blocks(content) == ["const a = 1;", "b()\nc()"]

    def test_unterminated_block_is_returned(self):
        content = "```python\nprint('a')\n```\n```bash\necho open"
        assert extract_code_blocks(content) == ["print('a')", "echo open"]

    def test_no_fences(self):
        assert extract_code_blocks("no code here") == []

    def test_empty_block(self):
        assert extract_code_blocks("```\n```") == [""]


class TestFirstMatch:
    def test_predicates_are_tried_in_order(self):
        sections = [make_section("Usage", level=2), make_section("API Reference", level=1)]
        found = first_match(sections, title_contains("api"), lambda s: True)
        assert found.title == "API Reference"

    def test_falls_through_to_later_predicates(self):
        sections = [make_section("Intro", level=2), make_section("Top", level=1)]
        found = first_match(sections, title_contains("purpose"), lambda s: s.level == 1)
        assert found.title == "Top"

    def test_none_when_nothing_matches(self):
        assert first_match([make_section("Intro")], title_contains("missing")) is None
        assert first_match([], lambda s: True) is None
