"""Markdown Parser for files with frontmatter and content."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import frontmatter
import yaml

from .data_classes import FrontMatter
from .errors import DocumentReadError

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Result of parsing a Markdown file."""

    frontmatter: FrontMatter = field(default_factory=FrontMatter)
    content: str = ""
    has_frontmatter: bool = False
    frontmatter_error: str = None


class MarkdownParser:
    """Parses Markdown files with optional YAML frontmatter."""

    def __init__(self):
        self.handler = frontmatter.YAMLHandler()

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        """
        Parse a Markdown file with optional frontmatter.

        Args:
            file_path: Path to the Markdown file

        Returns:
            ParseResult with typed frontmatter and body content

        Raises:
            DocumentReadError: If the file cannot be read as UTF-8 text
        """
        file_path = Path(file_path)

        try:
            text = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentReadError(f"Unable to read file as UTF-8: {file_path}: {e}", file_path) from e
        except OSError as e:
            raise DocumentReadError(f"Unable to read file {file_path}: {e}", file_path) from e

        result = self.parse_content(text)
        if result.frontmatter_error:
            logger.debug(f"Ignoring invalid frontmatter in {file_path}: {result.frontmatter_error}")
        return result

    def parse_content(self, content_text: str) -> ParseResult:
        """
        Parse markdown content string with optional frontmatter.

        A header block that is not valid YAML, or that does not hold a mapping,
        is dropped from the body and treated as empty frontmatter.

        Args:
            content_text: Markdown content as string

        Returns:
            ParseResult with typed frontmatter and body content
        """
        try:
            # Header keys stay dict keys, never Post keyword arguments
            metadata, body = frontmatter.parse(content_text)
        except (yaml.YAMLError, ValueError) as e:
            return ParseResult(content=self._strip_header(content_text), frontmatter_error=str(e))

        metadata = metadata if isinstance(metadata, dict) else {}
        return ParseResult(
            frontmatter=FrontMatter.from_mapping(metadata),
            content=body or "",
            has_frontmatter=bool(metadata),
        )

    def _strip_header(self, content_text: str) -> str:
        """Remove the delimited header block without interpreting it."""
        text = content_text.strip()
        if not self.handler.detect(text):
            return text
        try:
            _, body = self.handler.split(text)
        except ValueError:
            return text
        return body.strip()
