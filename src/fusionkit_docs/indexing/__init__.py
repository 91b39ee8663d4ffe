"""Documentation indexing."""

from fusionkit_docs.indexing.categorizer import categorize_path, normalize_path
from fusionkit_docs.indexing.doc_indexer import DocIndexer, clear_index_cache

__all__ = ["DocIndexer", "categorize_path", "clear_index_cache", "normalize_path"]
