"""Markdown parsers."""

from fusionkit_docs.parsers.markdown_parser import MarkdownSectionParser, generate_section_id

__all__ = ["MarkdownSectionParser", "generate_section_id"]
