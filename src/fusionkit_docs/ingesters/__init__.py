"""Documentation source handlers (ingesters)."""

from pathlib import Path
from typing import Optional

from fusionkit_docs.ingesters.folder_ingester import FolderIngester
from fusionkit_docs.ingesters.zip_ingester import ZipIngester
from fusionkit_docs.protocols import Ingester

# Checked in order, first match wins
_INGESTERS: list[Ingester] = [
    ZipIngester(),
    FolderIngester(),
]


def get_ingester(source: Path | str) -> Optional[Ingester]:
    """Find an ingester that can handle the given source.

    Args:
        source: Path to the documentation source (folder or zip file)

    Returns:
        An Ingester instance that can handle the source, or None
    """
    source_path = Path(source)
    for ingester in _INGESTERS:
        if ingester.can_handle(source_path):
            return ingester
    return None


__all__ = ["get_ingester", "ZipIngester", "FolderIngester"]
