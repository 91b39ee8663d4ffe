"""Core data models for markdown files, sections and the section index."""

from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    """Content bucket a documentation file is filed under."""

    OVERVIEW = "overview"
    PACKAGES = "packages"
    MIGRATION = "migration"
    EXAMPLES = "examples"


@dataclass(frozen=True)
class MarkdownFile:
    """A markdown file read from a documentation source."""

    path: str  # relative to the docs root, forward slashes
    content: str


@dataclass(frozen=True)
class DocSection:
    """A heading-delimited unit of markdown content."""

    id: str
    title: str
    content: str
    file_path: str
    level: int


@dataclass
class IndexedDocs:
    """Sections of a documentation tree, grouped by category.

    ``all`` holds every section in discovery order; the four category lists
    are disjoint and each section appears in exactly one of them.
    """

    overview: list[DocSection] = field(default_factory=list)
    packages: list[DocSection] = field(default_factory=list)
    migration: list[DocSection] = field(default_factory=list)
    examples: list[DocSection] = field(default_factory=list)
    all: list[DocSection] = field(default_factory=list)

    def add(self, section: DocSection, category: Category) -> None:
        """File a section under ``all`` and its category."""
        self.all.append(section)
        self.by_category(category).append(section)

    def by_category(self, category: Category | str) -> list[DocSection]:
        """Return the collection for a category (or ``"all"``)."""
        if category == "all":
            return self.all
        return getattr(self, Category(category).value)

    @property
    def file_count(self) -> int:
        return len({section.file_path for section in self.all})
