"""Protocol for documentation source handlers."""

from pathlib import Path
from typing import Hashable, Iterator, Protocol, runtime_checkable

from fusionkit_docs.models import MarkdownFile


@runtime_checkable
class Ingester(Protocol):
    """Protocol for documentation source handlers.

    Implementations handle different source formats (folder, zip).
    Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'zip', 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this ingester can process the given source."""
        ...

    def ingest(self, source: Path) -> Iterator[MarkdownFile]:
        """Yield markdown files from the source in listing order.

        Unreadable entries are logged and skipped, never raised.
        """
        ...

    def fingerprint(self, source: Path) -> Hashable:
        """Return a value that changes whenever the source's markdown changes."""
        ...
