"""Path-based categorization of documentation files."""

from fusionkit_docs.models import Category

# Checked in order, first match wins
_PATH_RULES: list[tuple[str, Category]] = [
    ("overview", Category.OVERVIEW),
    ("package", Category.PACKAGES),
    ("migration", Category.MIGRATION),
]


def normalize_path(file_path: str) -> str:
    """Lowercase a path and use forward slashes."""
    return file_path.lower().replace("\\", "/")


def categorize_path(file_path: str) -> Category:
    """Map a relative file path to the category its sections belong to.

    Anything that is not an overview, package or migration document
    (tutorials, guides, ...) lands in ``examples``.
    """
    normalized = normalize_path(file_path)
    if normalized == "index.md":
        return Category.OVERVIEW

    for needle, category in _PATH_RULES:
        if needle in normalized:
            return category
    return Category.EXAMPLES
