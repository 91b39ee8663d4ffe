"""Build a categorized section index from a documentation tree."""

import logging
from pathlib import Path
from typing import Hashable, Optional

from fusionkit_docs.indexing.categorizer import categorize_path
from fusionkit_docs.ingesters import get_ingester
from fusionkit_docs.models import Category, DocSection, IndexedDocs
from fusionkit_docs.parsers import MarkdownSectionParser
from fusionkit_docs.protocols import SectionParser

logger = logging.getLogger(__name__)

# resolved source path -> (fingerprint, index)
_INDEX_CACHE: dict[str, tuple[Hashable, IndexedDocs]] = {}


def clear_index_cache() -> None:
    """Forget every cached index."""
    _INDEX_CACHE.clear()


class DocIndexer:
    """Index the markdown files of a documentation folder or zip.

    By default every call to :meth:`index_docs` walks and parses the whole
    source again, so edits on disk show up on the next call. With
    ``use_cache`` the previous index is reused while the source's
    fingerprint (paths, mtimes and sizes) is unchanged.
    """

    def __init__(
        self,
        docs_path: Path | str,
        use_cache: bool = False,
        parser: Optional[SectionParser] = None,
    ):
        self.docs_path = Path(docs_path)
        self.use_cache = use_cache
        self.parser = parser or MarkdownSectionParser()
        self._indexed: Optional[IndexedDocs] = None

    def index_docs(self) -> IndexedDocs:
        """Process every markdown file in the source and build the index."""
        ingester = get_ingester(self.docs_path)
        if ingester is None:
            logger.warning(f"Could not process directory {self.docs_path}: not a folder or .zip")
            self._indexed = IndexedDocs()
            return self._indexed

        cache_key = str(self.docs_path.resolve())
        fingerprint = None
        if self.use_cache:
            fingerprint = ingester.fingerprint(self.docs_path)
            cached = _INDEX_CACHE.get(cache_key)
            if cached is not None and cached[0] == fingerprint:
                logger.debug(f"Reusing cached index for {self.docs_path}")
                self._indexed = cached[1]
                return self._indexed

        indexed = IndexedDocs()
        file_count = 0
        for markdown in ingester.ingest(self.docs_path):
            category = categorize_path(markdown.path)
            for section in self.parser.parse(markdown.content, markdown.path):
                indexed.add(section, category)
            file_count += 1

        logger.debug(
            f"Indexed {file_count} files, {len(indexed.all)} sections from {self.docs_path}"
        )

        if self.use_cache:
            _INDEX_CACHE[cache_key] = (fingerprint, indexed)

        self._indexed = indexed
        return indexed

    def find_content(self, query: str) -> list[DocSection]:
        """Sections whose title, content or file path contain query (case-insensitive)."""
        query_lower = query.lower()
        return [
            section
            for section in self._ensure_indexed().all
            if query_lower in section.title.lower()
            or query_lower in section.content.lower()
            or query_lower in section.file_path.lower()
        ]

    def get_by_category(self, category: Category | str) -> list[DocSection]:
        """Return all sections of one category (or ``"all"``)."""
        return self._ensure_indexed().by_category(category)

    def _ensure_indexed(self) -> IndexedDocs:
        if self._indexed is None:
            return self.index_docs()
        return self._indexed
