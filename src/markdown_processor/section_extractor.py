"""Section extractor for splitting markdown content at headings."""

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .code_extractor import CodeBlockExtractor, is_fence, strip_fenced_blocks
from .data_classes import Link, Section

# Fence state of a scanned line
FENCE_OPEN = "open"
FENCE_CLOSE = "close"
FENCE_BODY = "body"


@dataclass
class Header:
    """Represents a markdown header with position information."""

    level: int  # 1-6 (number of # symbols)
    text: str  # Header text without # symbols
    line_number: int  # Line number (1-based)


def slugify(text: str) -> str:
    """Convert heading text to a URL-friendly anchor id."""
    slug = re.sub(r"[^\w\s-]", "", text.lower())
    return re.sub(r"\s+", "-", slug)


def strip_markdown(text: str) -> str:
    """Render markdown as plain text by removing formatting syntax."""
    text = strip_fenced_blocks(text)
    text = re.sub(r"`([^`]+)`", r"\1", text)
    text = re.sub(r"\[([^\]]+)\]\([^)]+\)", r"\1", text)
    text = re.sub(r"[*_~]{1,2}([^*_~]+)[*_~]{1,2}", r"\1", text)
    text = re.sub(r"^#{1,6}\s+", "", text, flags=re.MULTILINE)
    return text.strip()


class _SectionBuilder:
    """Accumulates the lines and extracted items of the section being read."""

    def __init__(self, header: Header):
        self.header = header
        self.lines: List[str] = []
        self.code_blocks = []
        self.lists: List[str] = []
        self.links: List[Link] = []

    def build(self) -> Section:
        content = "\n".join(self.lines).strip()
        return Section(
            id=slugify(self.header.text),
            level=self.header.level,
            heading=self.header.text,
            content=content,
            content_plain=strip_markdown(content),
            line_number=self.header.line_number,
            code_blocks=self.code_blocks,
            lists=self.lists,
            links=self.links,
        )


class SectionExtractor:
    """Splits markdown content into heading-delimited sections."""

    def __init__(self, code_extractor: CodeBlockExtractor = None):
        self.header_pattern = re.compile(r"^(#{1,6})\s+(.+)$")
        self.list_item_pattern = re.compile(r"^\s*(?:[-*+]|\d+\.)\s+")
        self.link_pattern = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
        self.code_extractor = code_extractor or CodeBlockExtractor()

    def match_header(self, line: str, line_number: int) -> Optional[Header]:
        match = self.header_pattern.match(line)
        if not match:
            return None
        return Header(
            level=len(match.group(1)),
            text=match.group(2).strip(),
            line_number=line_number,
        )

    def extract_headers(self, content: str) -> List[Header]:
        """
        Extract all headers from markdown content, ignoring lines inside fences.

        Args:
            content: Markdown content string

        Returns:
            List of Header objects in document order
        """
        return [header for _, header, _ in self._scan(content.split("\n")) if header]

    def extract_sections(self, content: str) -> List[Section]:
        """
        Split content into sections in a single pass over its lines.

        Lines before the first heading belong to no section. A section's
        content runs until the next heading of any level.

        Args:
            content: Markdown body (frontmatter already removed)

        Returns:
            List of Section objects in document order
        """
        lines = content.split("\n")
        sections = []
        current: Optional[_SectionBuilder] = None

        for index, header, fence_state in self._scan(lines):
            if header:
                if current:
                    sections.append(current.build())
                current = _SectionBuilder(header)
                continue

            if current is None:
                continue

            line = lines[index]
            current.lines.append(line)

            if fence_state == FENCE_OPEN:
                extracted = self.code_extractor.extract_block_at(lines, index)
                if extracted:
                    current.code_blocks.append(extracted[0])
            elif fence_state is None:
                self._collect_items(current, line)

        if current:
            sections.append(current.build())

        return sections

    def _scan(self, lines: List[str]) -> Iterator[Tuple[int, Optional[Header], Optional[str]]]:
        """Yield (index, Header or None, fence state) for every line."""
        in_fence = False
        for index, line in enumerate(lines):
            if is_fence(line):
                yield index, None, FENCE_CLOSE if in_fence else FENCE_OPEN
                in_fence = not in_fence
            elif in_fence:
                yield index, None, FENCE_BODY
            else:
                yield index, self.match_header(line, index + 1), None

    def _collect_items(self, current: _SectionBuilder, line: str) -> None:
        if self.list_item_pattern.match(line):
            current.lists.append(line.strip())

        for match in self.link_pattern.finditer(line):
            current.links.append(Link(text=match.group(1), url=match.group(2)))
