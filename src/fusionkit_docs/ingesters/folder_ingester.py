"""Ingester for local documentation folders."""

import logging
import os
from pathlib import Path
from typing import Iterator

from fusionkit_docs.models import MarkdownFile

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSION = ".md"


class FolderIngester:
    """Ingester for local filesystem folders."""

    source_type = "folder"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def ingest(self, source: Path) -> Iterator[MarkdownFile]:
        """Yield markdown files from a folder recursively.

        Entries are visited in filesystem-listing order; a subdirectory is
        descended into as soon as it is encountered.

        Args:
            source: Path to the documentation root

        Yields:
            MarkdownFile objects with paths relative to ``source``
        """
        for full_path in self._walk(source):
            rel_path = full_path.relative_to(source).as_posix()
            try:
                content = full_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Could not process file {full_path}: {e}")
                continue

            yield MarkdownFile(path=rel_path, content=content)

    def fingerprint(self, source: Path) -> tuple[tuple[str, int, int], ...]:
        """Relative path, mtime and size of every markdown file under source."""
        entries = []
        for full_path in self._walk(source):
            try:
                stat = full_path.stat()
            except OSError:
                continue
            entries.append(
                (full_path.relative_to(source).as_posix(), stat.st_mtime_ns, stat.st_size)
            )
        return tuple(entries)

    def _walk(self, directory: Path) -> Iterator[Path]:
        """Yield every ``.md`` regular file below directory."""
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.warning(f"Could not process directory {directory}: {e}")
            return

        for entry in entries:
            full_path = Path(entry.path)
            try:
                is_dir = entry.is_dir()
                is_file = entry.is_file()
            except OSError as e:
                logger.warning(f"Could not process file {full_path}: {e}")
                continue

            if is_dir:
                yield from self._walk(full_path)
            elif is_file and full_path.suffix == MARKDOWN_EXTENSION:
                yield full_path
