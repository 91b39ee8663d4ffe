"""Helpers for pulling structured bits out of section content."""

from typing import Callable, Iterable, Optional

from fusionkit_docs.models import DocSection

FENCE = "```"
LIST_MARKERS = ("- ", "* ")

SectionPredicate = Callable[[DocSection], bool]


def extract_list_items(content: str) -> list[str]:
    """Return the text of every ``-``/``*`` bullet line, emphasis stripped."""
    items = []
    for line in content.split("\n"):
        stripped = line.strip()
        if stripped.startswith(LIST_MARKERS):
            items.append(stripped[2:].replace("**", "").strip())
    return items


def extract_code_blocks(content: str) -> list[str]:
    """Return the bodies of fenced code blocks in order.

    Fence lines (and their language tags) are not part of the body. A block
    left open at the end of the content is still returned.
    """
    blocks = []
    buffer: list[str] = []
    in_block = False

    for line in content.split("\n"):
        if line.strip().startswith(FENCE):
            if in_block:
                blocks.append("\n".join(buffer))
                buffer = []
            in_block = not in_block
            continue
        if in_block:
            buffer.append(line)

    if in_block:
        blocks.append("\n".join(buffer))

    return blocks


def has_code_block(section: DocSection) -> bool:
    return FENCE in section.content


def first_line(content: str) -> str:
    return content.split("\n", 1)[0].strip()


def first_match(
    sections: Iterable[DocSection], *predicates: SectionPredicate
) -> Optional[DocSection]:
    """Try each predicate in turn and return the first section it accepts."""
    sections = list(sections)
    for predicate in predicates:
        for section in sections:
            if predicate(section):
                return section
    return None


def title_contains(*needles: str) -> SectionPredicate:
    """Predicate: lowercased title contains any of needles."""
    lowered = [needle.lower() for needle in needles]
    return lambda section: any(needle in section.title.lower() for needle in lowered)
