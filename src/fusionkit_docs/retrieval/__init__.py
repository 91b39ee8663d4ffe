"""Heuristic retrieval over the documentation index."""

from fusionkit_docs.retrieval.documentation import (
    DEFAULT_FRAMEWORK,
    OverviewSection,
    PackageSection,
    get_code_examples,
    get_fusionkit_overview,
    get_fusionkit_packages,
    get_migration_guide,
    get_package_documentation,
)
from fusionkit_docs.retrieval.extraction import extract_code_blocks, extract_list_items

__all__ = [
    "DEFAULT_FRAMEWORK",
    "OverviewSection",
    "PackageSection",
    "extract_code_blocks",
    "extract_list_items",
    "get_code_examples",
    "get_fusionkit_overview",
    "get_fusionkit_packages",
    "get_migration_guide",
    "get_package_documentation",
]
