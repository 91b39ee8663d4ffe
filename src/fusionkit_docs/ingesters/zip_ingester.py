"""Ingester for ZIP archives of documentation."""

import logging
import zipfile
from pathlib import Path, PurePosixPath
from typing import Iterator

from fusionkit_docs.models import MarkdownFile

logger = logging.getLogger(__name__)


class ZipIngester:
    """Ingester for ZIP archive files."""

    source_type = "zip"

    def can_handle(self, source: Path) -> bool:
        """Check if this is a zip file."""
        return source.suffix.lower() == ".zip" and source.exists()

    def ingest(self, source: Path) -> Iterator[MarkdownFile]:
        """Yield markdown files from a ZIP archive in archive order.

        Args:
            source: Path to the ZIP file

        Yields:
            MarkdownFile objects with paths relative to the archive root
        """
        try:
            zf = zipfile.ZipFile(source, "r")
        except (OSError, zipfile.BadZipFile) as e:
            logger.warning(f"Could not open archive {source}: {e}")
            return

        with zf:
            for info in zf.infolist():
                if info.is_dir() or PurePosixPath(info.filename).suffix != ".md":
                    continue

                try:
                    content = zf.read(info.filename).decode("utf-8")
                except (OSError, zipfile.BadZipFile, UnicodeDecodeError) as e:
                    logger.warning(f"Could not process file {source}/{info.filename}: {e}")
                    continue

                yield MarkdownFile(path=info.filename, content=content)

    def fingerprint(self, source: Path) -> tuple[int, int]:
        """Modification time and size of the archive."""
        stat = source.stat()
        return (stat.st_mtime_ns, stat.st_size)
