"""Main orchestration for the markdown processor component."""

import logging
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath
from typing import List, Optional, Union

from .code_extractor import CodeBlockExtractor
from .content_analyzer import ContentAnalyzer
from .data_classes import DocumentRecord, FrontMatter
from .errors import DocsApiError, DocumentProcessingError, FilesystemError
from .parser import MarkdownParser
from .scanner import DirectoryScanner, MarkdownFile, ScannerConfig
from .section_extractor import SectionExtractor
from .toc_builder import TocBuilder

logger = logging.getLogger(__name__)


def slug_from_path(relative_path: str) -> str:
    """Derive a document slug: extension stripped, ``/`` separators, no leading slash."""
    path = PurePosixPath(relative_path.replace("\\", "/"))
    return str(path.with_suffix("")).lstrip("/")


def format_timestamp(timestamp: float) -> str:
    """ISO 8601 UTC with millisecond precision, e.g. 2024-05-01T10:00:00.000Z."""
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MarkdownProcessor:
    """Builds one DocumentRecord per markdown file."""

    def __init__(self, scanner_config: ScannerConfig = None):
        """
        Initialize the markdown processor.

        Args:
            scanner_config: Directory scanning options (extensions, excluded dirs)
        """
        self.scanner = DirectoryScanner(scanner_config)
        self.parser = MarkdownParser()
        self.code_extractor = CodeBlockExtractor()
        self.section_extractor = SectionExtractor(self.code_extractor)
        self.content_analyzer = ContentAnalyzer()
        self.toc_builder = TocBuilder()

    def process_directory(self, docs_dir: Union[str, Path]) -> List[DocumentRecord]:
        """
        Build records for every markdown file under a directory.

        The first document that fails aborts the whole run.

        Args:
            docs_dir: Directory containing markdown files to process

        Returns:
            Document records in scan order

        Raises:
            FilesystemError: If the directory or a document cannot be read
            DocumentProcessingError: If a document cannot be turned into a record
        """
        logger.info(f"Starting markdown processing for directory: {docs_dir}")

        records = []
        seen_slugs = {}
        for markdown_file in self.scanner.scan_for_markdown_files(str(docs_dir)):
            record = self.process_file(markdown_file)
            if record.slug in seen_slugs:
                raise DocumentProcessingError(
                    f"Slug '{record.slug}' already used by {seen_slugs[record.slug]}",
                    markdown_file.full_path,
                )
            seen_slugs[record.slug] = markdown_file.relative_path
            records.append(record)

            if len(records) % 10 == 0:
                logger.info(f"Processed {len(records)} files...")

        logger.info(f"Processing complete: {len(records)} documents")
        return records

    def process_file(self, markdown_file: MarkdownFile) -> DocumentRecord:
        """
        Process a single discovered markdown file.

        Args:
            markdown_file: File entry produced by the scanner

        Returns:
            DocumentRecord for the file
        """
        file_path = markdown_file.full_path
        logger.debug(f"Processing file: {file_path}")

        try:
            last_modified = format_timestamp(file_path.stat().st_mtime)
        except OSError as e:
            raise FilesystemError(f"Cannot stat {file_path}: {e}", file_path) from e

        try:
            parse_result = self.parser.parse_file(file_path)
            return self.build_record(
                parse_result.content,
                parse_result.frontmatter,
                markdown_file.relative_path,
                last_modified,
            )
        except DocsApiError:
            raise
        except Exception as e:
            raise DocumentProcessingError(f"Failed to process document: {e}", file_path) from e

    def process_content(
        self,
        content: str,
        relative_path: str = "content.md",
        last_modified: Optional[str] = None,
    ) -> DocumentRecord:
        """
        Process markdown text directly (without file I/O).

        Args:
            content: Raw markdown, optionally starting with frontmatter
            relative_path: Path used to derive the slug and category
            last_modified: ISO 8601 timestamp to record, defaults to the epoch

        Returns:
            DocumentRecord for the content
        """
        parse_result = self.parser.parse_content(content)
        return self.build_record(
            parse_result.content,
            parse_result.frontmatter,
            relative_path,
            last_modified or format_timestamp(0),
        )

    def build_record(
        self,
        body: str,
        frontmatter: FrontMatter,
        relative_path: str,
        last_modified: str,
    ) -> DocumentRecord:
        """Compose sections, code examples, TOC and classification into one record."""
        slug = slug_from_path(relative_path)

        sections = self.section_extractor.extract_sections(body)
        code_examples = self.code_extractor.extract_code_blocks(body)
        table_of_contents = self.toc_builder.build_table_of_contents(sections)
        headings = [header.text for header in self.section_extractor.extract_headers(body)]
        metadata = self.content_analyzer.analyze_content(
            body, frontmatter, slug, code_examples, headings
        )

        logger.debug(
            f"{slug}: {len(sections)} sections, {len(code_examples)} code blocks, "
            f"{metadata.word_count} words"
        )

        title = frontmatter.title or (sections[0].heading if sections else "") or slug
        return DocumentRecord(
            slug=slug,
            path=relative_path,
            title=title,
            description=frontmatter.description or metadata.summary,
            frontmatter=frontmatter,
            sections=sections,
            code_examples=code_examples,
            table_of_contents=table_of_contents,
            metadata=metadata,
            full_content=body,
            last_modified=last_modified,
        )
