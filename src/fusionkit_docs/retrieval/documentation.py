"""FusionKit documentation lookups over the section index.

Each function rebuilds the index from the docs source (unless the index
cache is enabled) and answers with a plain dict. Primary keys that do not
resolve raise ``LookupError``; bad arguments raise ``ValueError``. Sub-fields
that the heuristics cannot find, or find empty, are filled with a placeholder
string so the result always has the same shape.
"""

import logging
import re
from enum import Enum
from pathlib import Path
from typing import Optional

from fusionkit_docs.config import get_settings
from fusionkit_docs.indexing import DocIndexer, normalize_path
from fusionkit_docs.models import DocSection, IndexedDocs
from fusionkit_docs.retrieval.extraction import (
    extract_code_blocks,
    extract_list_items,
    first_line,
    first_match,
    has_code_block,
    title_contains,
)

logger = logging.getLogger(__name__)

DEFAULT_FRAMEWORK = "react"
PACKAGE_PREFIX = "@inform-appshell/"
# Checked in order; the first keyword found in a title names the package
PACKAGE_KEYWORDS: list[tuple[str, str]] = [
    ("cli", "cli"),
    ("module federation", "module-federation"),
    ("contracts", "contracts"),
    ("keycloak", "keycloak"),
    ("core", "core"),
]
PACKAGE_OVERVIEW_MIN_LENGTH = 100
MIGRATION_OVERVIEW_MIN_LENGTH = 50
INSTALL_COMMAND_PATTERN = re.compile(
    r"(?:npm\s+(?:install|i)|yarn\s+add|pnpm\s+(?:add|install))\s+[^\s`][^\n`]*"
)


class OverviewSection(str, Enum):
    INTRODUCTION = "introduction"
    KEY_BENEFITS = "keyBenefits"
    QUICK_START = "quickStart"
    DEPLOYMENT_SCENARIOS = "deploymentScenarios"


class PackageSection(str, Enum):
    OVERVIEW = "overview"
    INSTALLATION = "installation"
    API = "api"
    EXAMPLES = "examples"


def _load_index(docs_path: Optional[Path | str]) -> IndexedDocs:
    settings = get_settings()
    indexer = DocIndexer(docs_path or settings.docs_path, use_cache=settings.cache_index)
    return indexer.index_docs()


def _require_string(value: object, label: str) -> str:
    if not isinstance(value, str):
        raise ValueError(
            f"{label} is required and must be a string, got: {type(value).__name__}"
        )
    if not value.strip():
        raise ValueError(f"{label} is required and must not be empty")
    return value


def _wants_all(section: Optional[str]) -> bool:
    return not section or section == "all"


# -- overview ---------------------------------------------------------------


def _overview_field(field: OverviewSection, sections: list[DocSection]) -> str | list[str]:
    match field:
        case OverviewSection.INTRODUCTION:
            found = first_match(sections, title_contains("what is fusionkit"))
            return (found and found.content) or "Introduction not found in documentation"
        case OverviewSection.KEY_BENEFITS:
            found = first_match(sections, title_contains("key benefits"))
            items = extract_list_items(found.content) if found else []
            return items or ["Key benefits not found in documentation"]
        case OverviewSection.QUICK_START:
            found = first_match(sections, title_contains("quick start"))
            return (found and found.content) or "Quick start guide not found in documentation"
        case OverviewSection.DEPLOYMENT_SCENARIOS:
            scenarios = []
            for keyword in ("standalone applications", "microfrontends in a shell"):
                found = first_match(sections, title_contains(keyword))
                if found is not None:
                    scenarios.append(f"{found.title}: {first_line(found.content)}")
            return scenarios or ["Deployment scenarios not found in documentation"]


async def get_fusionkit_overview(
    section: Optional[str] = None, docs_path: Optional[Path | str] = None
) -> dict[str, str | list[str]]:
    """Introduction, key benefits, quick start and deployment scenarios.

    Args:
        section: One of the ``OverviewSection`` values, or ``None``/``"all"``
        docs_path: Documentation source; defaults to the configured path

    Raises:
        LookupError: If ``section`` is not a known overview section
    """
    requested = None
    if not _wants_all(section):
        try:
            requested = OverviewSection(section)
        except ValueError:
            raise LookupError(f'Section "{section}" not found') from None

    sections = _load_index(docs_path).overview
    if requested is not None:
        return {requested.value: _overview_field(requested, sections)}
    return {field.value: _overview_field(field, sections) for field in OverviewSection}


# -- packages ---------------------------------------------------------------


def _package_key(title: str) -> Optional[str]:
    """Canonical ``fusion-kit-*`` key for a package heading, if it names one."""
    lowered = title.lower().strip()
    words = lowered.replace("-", " ")
    for keyword, suffix in PACKAGE_KEYWORDS:
        if keyword in words:
            return f"fusion-kit-{suffix}"
    if lowered.startswith(PACKAGE_PREFIX):
        return lowered[len(PACKAGE_PREFIX):].strip() or None
    return None


async def get_fusionkit_packages(
    package_name: Optional[str] = None, docs_path: Optional[Path | str] = None
) -> dict[str, str]:
    """Map of package key to one-line description.

    Args:
        package_name: Short (``core``) or full (``fusion-kit-core``) name to
            filter by; ``None`` lists every package
        docs_path: Documentation source; defaults to the configured path

    Raises:
        LookupError: If no package docs exist or ``package_name`` is unknown
    """
    if package_name is not None and not isinstance(package_name, str):
        raise ValueError(f"Package name must be a string, got: {type(package_name).__name__}")

    packages: dict[str, str] = {}
    for section in _load_index(docs_path).packages:
        if section.level != 1:
            continue
        key = _package_key(section.title)
        if key is None or key in packages:
            continue
        packages[key] = first_line(section.content) or "No description available"

    if not packages:
        raise LookupError("No package documentation found")

    if not package_name:
        return packages

    description = packages.get(f"fusion-kit-{package_name}") or packages.get(package_name)
    if description is None:
        raise LookupError(f'Package "{package_name}" not found')
    return {package_name: description}


def _find_install_command(sections: list[DocSection]) -> Optional[str]:
    for section in sections:
        match = INSTALL_COMMAND_PATTERN.search(section.content)
        if match:
            return match.group(0).strip()
    return None


def _package_field(field: PackageSection, sections: list[DocSection]) -> str:
    match field:
        case PackageSection.OVERVIEW:
            found = first_match(
                sections,
                title_contains("purpose"),
                lambda s: s.level == 1,
                lambda s: len(s.content) > PACKAGE_OVERVIEW_MIN_LENGTH,
            )
            return (found and found.content) or "Overview not found in documentation"
        case PackageSection.INSTALLATION:
            return (
                _find_install_command(sections)
                or "Installation instructions not found in documentation"
            )
        case PackageSection.API:
            found = first_match(sections, title_contains("api", "interface", "features", "commands"))
            return (found and found.content) or "API documentation not found"
        case PackageSection.EXAMPLES:
            found = first_match(sections, title_contains("example", "usage"), has_code_block)
            return (found and found.content) or "Examples not found in documentation"


async def get_package_documentation(
    package_name: str,
    section: Optional[str] = None,
    docs_path: Optional[Path | str] = None,
) -> dict[str, str]:
    """Overview, installation, API and examples for one package.

    Sections are picked from package documents whose path contains the
    package name.

    Raises:
        ValueError: If ``package_name`` is not a non-empty string
        LookupError: If no document matches the package, or ``section``
            is unknown
    """
    package_name = _require_string(package_name, "Package name")
    requested = None
    if not _wants_all(section):
        try:
            requested = PackageSection(section)
        except ValueError:
            raise LookupError(
                f'Section "{section}" not found for package "{package_name}"'
            ) from None

    needle = package_name.strip().lower()
    sections = [
        s for s in _load_index(docs_path).packages if needle in normalize_path(s.file_path)
    ]
    if not sections:
        raise LookupError(f'Documentation for package "{package_name}" not found')

    if requested is not None:
        return {requested.value: _package_field(requested, sections)}
    return {field.value: _package_field(field, sections) for field in PackageSection}


# -- code examples ----------------------------------------------------------


async def get_code_examples(
    use_case: str,
    framework: Optional[str] = None,
    docs_path: Optional[Path | str] = None,
) -> dict[str, str]:
    """Code for a use case, preferring the requested framework.

    Every indexed section is searched. Sections with fenced code win over
    prose-only ones; within that, a section mentioning the framework wins.

    Raises:
        ValueError: If ``use_case`` is not a non-empty string
        LookupError: If nothing mentions the use case
    """
    use_case = _require_string(use_case, "Use case")
    if framework is not None and not isinstance(framework, str):
        raise ValueError(f"Framework must be a string, got: {type(framework).__name__}")
    framework = framework or DEFAULT_FRAMEWORK

    query = use_case.lower()
    matches = [
        s
        for s in _load_index(docs_path).all
        if query in s.title.lower() or query in s.content.lower() or query in s.file_path.lower()
    ]
    if not matches:
        raise LookupError(f'No examples found for use case "{use_case}"')

    framework_lower = framework.lower()

    def mentions_framework(s: DocSection) -> bool:
        return framework_lower in s.title.lower() or framework_lower in s.content.lower()

    best = first_match(
        matches,
        lambda s: has_code_block(s) and mentions_framework(s),
        has_code_block,
        mentions_framework,
        lambda s: True,
    )
    logger.debug(f"Code example for {use_case!r}/{framework!r} taken from {best.id}")

    blocks = extract_code_blocks(best.content)
    code = "\n\n".join(blocks) if blocks else best.content.strip()
    return {
        "useCase": use_case,
        "framework": framework,
        "code": code or "No code example available",
    }


# -- migration --------------------------------------------------------------


async def get_migration_guide(
    from_version: str,
    to_version: Optional[str] = None,
    docs_path: Optional[Path | str] = None,
) -> dict[str, str | list[str]]:
    """Title, overview, breaking changes, steps and code changes.

    The generated title is only used when no migration section mentions
    the version or the word "migration".

    Raises:
        ValueError: If ``from_version`` is not a non-empty string
    """
    from_version = _require_string(from_version, "From version")
    sections = _load_index(docs_path).migration
    version = from_version.lower()

    title = first_match(
        sections, lambda s: version in s.title.lower() or "migration" in s.title.lower()
    )
    overview = first_match(
        sections,
        lambda s: "overview" in s.title.lower()
        or len(s.content) > MIGRATION_OVERVIEW_MIN_LENGTH,
    )
    breaking = first_match(sections, title_contains("breaking", "changes"))
    steps = first_match(sections, title_contains("steps", "migration guide"))
    code_changes = first_match(
        sections,
        lambda s: has_code_block(s) or "Before:" in s.content or "After:" in s.content,
    )

    return {
        "title": title.title
        if title
        else f"Migration from {from_version} to {to_version or 'latest'}",
        "overview": (overview and overview.content)
        or "Migration overview not found in documentation",
        "breakingChanges": (breaking and extract_list_items(breaking.content))
        or ["Breaking changes not found in documentation"],
        "steps": (steps and extract_list_items(steps.content))
        or ["Migration steps not found in documentation"],
        "codeChanges": (code_changes and code_changes.content)
        or "Code changes not found in documentation",
    }
