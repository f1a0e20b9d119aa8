"""Code block extractor for fenced code in markdown content."""

import re
from typing import List, Optional, Tuple

from .data_classes import CodeBlock

FENCE_MARKER = "```"

# Remove complete fenced blocks from a body of text
FENCED_BLOCK_PATTERN = re.compile(r"```[\s\S]*?```")

# Checked in order, first match wins. A block containing both an assertion
# and an interface declaration is a test.
PURPOSE_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("test", ("test", "expect", "assert")),
    ("example", ("example", "const")),
    ("type-definition", ("interface", "type")),
)
DEFAULT_PURPOSE = "implementation"


def is_fence(line: str) -> bool:
    return line.startswith(FENCE_MARKER)


def strip_fenced_blocks(text: str) -> str:
    return FENCED_BLOCK_PATTERN.sub("", text)


def detect_code_purpose(code: str) -> str:
    """Classify a code body as test, example, type-definition or implementation."""
    lower_code = code.lower()
    for purpose, markers in PURPOSE_RULES:
        if any(marker in lower_code for marker in markers):
            return purpose
    return DEFAULT_PURPOSE


class CodeBlockExtractor:
    """Extracts fenced code blocks, either from one fence or from a whole document."""

    def extract_block_at(self, lines: List[str], start_index: int) -> Optional[Tuple[CodeBlock, int]]:
        """
        Read the fenced block opening at ``lines[start_index]``.

        An unterminated fence runs to the end of ``lines``.

        Returns:
            (CodeBlock, index of the closing fence line or len(lines)), or None
            when the line is not a fence
        """
        if not is_fence(lines[start_index]):
            return None

        language = lines[start_index][len(FENCE_MARKER):].strip() or "plaintext"
        code_lines = []
        i = start_index + 1

        while i < len(lines) and not is_fence(lines[i]):
            code_lines.append(lines[i])
            i += 1

        code = "\n".join(code_lines)
        block = CodeBlock(
            language=language,
            code=code,
            line_count=len(code_lines),
            purpose=detect_code_purpose(code),
            line_number=start_index + 1,
        )
        return block, i

    def extract_code_blocks(self, content: str) -> List[CodeBlock]:
        """
        Extract every fenced code block in document order.

        Args:
            content: Markdown body (frontmatter already removed)

        Returns:
            Flat list of CodeBlock objects, independent of section structure
        """
        lines = content.split("\n")
        blocks = []
        i = 0

        while i < len(lines):
            extracted = self.extract_block_at(lines, i)
            if extracted:
                block, i = extracted
                blocks.append(block)
            i += 1

        return blocks
