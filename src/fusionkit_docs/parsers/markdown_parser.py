"""Heading-based markdown section parser."""

import re

from fusionkit_docs.models import DocSection

HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.+)$")
FENCE_MARKER = "```"


def generate_section_id(title: str, file_path: str) -> str:
    """Build a section id from its file path and a slug of its title.

    ``guides/setup.md`` + ``Getting Started!`` -> ``guides_setup_getting-started``
    """
    file_prefix = re.sub(r"[/\\]", "_", file_path)
    file_prefix = re.sub(r"\.md$", "", file_prefix)

    title_slug = re.sub(r"[^\w\s-]", "", title.lower(), flags=re.ASCII)
    title_slug = re.sub(r"\s+", "-", title_slug)

    return f"{file_prefix}_{title_slug}"


class MarkdownSectionParser:
    """Split markdown into one section per ATX heading.

    Every heading starts a new section regardless of its level, so a
    section's content never holds text from a later heading. Headings
    inside fenced code blocks are ignored and fence lines are kept in the
    content verbatim. Text before the first heading is dropped.
    """

    def parse(self, text: str, file_path: str) -> list[DocSection]:
        """Split text into sections.

        Args:
            text: The markdown content to parse
            file_path: Path label of the source file (relative to the docs root)

        Returns:
            List of DocSection objects in document order
        """
        sections: list[DocSection] = []
        title = ""
        level = 0
        content_lines: list[str] = []
        in_code_block = False

        for line in text.split("\n"):
            stripped = line.strip()

            if stripped.startswith(FENCE_MARKER):
                in_code_block = not in_code_block
                content_lines.append(line)
                continue

            match = None if in_code_block else HEADING_PATTERN.match(stripped)
            if match is None:
                content_lines.append(line)
                continue

            if title:
                sections.append(self._build(title, level, content_lines, file_path))

            level = len(match.group(1))
            title = match.group(2).strip()
            content_lines = []

        # Close the last open section (an unterminated fence ends here too)
        if title:
            sections.append(self._build(title, level, content_lines, file_path))

        return sections

    @staticmethod
    def _build(title: str, level: int, lines: list[str], file_path: str) -> DocSection:
        return DocSection(
            id=generate_section_id(title, file_path),
            title=title,
            content="\n".join(lines).strip(),
            file_path=file_path,
            level=level,
        )
