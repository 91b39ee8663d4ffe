"""Data models for FusionKit docs."""

from fusionkit_docs.models.document import Category, DocSection, IndexedDocs, MarkdownFile

__all__ = ["Category", "DocSection", "IndexedDocs", "MarkdownFile"]
