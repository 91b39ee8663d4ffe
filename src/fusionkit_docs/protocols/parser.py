"""Protocol for markdown section parsers."""

from typing import Protocol, runtime_checkable

from fusionkit_docs.models import DocSection


@runtime_checkable
class SectionParser(Protocol):
    """Protocol for turning markdown text into sections."""

    def parse(self, text: str, file_path: str) -> list[DocSection]:
        """Split text into heading-delimited sections in document order."""
        ...
