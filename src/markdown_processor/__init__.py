"""Markdown processor for converting markdown documents into structured document records."""

from .code_extractor import CodeBlockExtractor, detect_code_purpose
from .content_analyzer import ContentAnalyzer
from .data_classes import (CodeBlock, ContentMetadata, DocumentRecord,
                           FrontMatter, Link, Section, TocNode)
from .errors import (DocsApiError, DocumentProcessingError,
                     DocumentReadError, FilesystemError)
from .parser import MarkdownParser, ParseResult
from .processor import MarkdownProcessor
from .scanner import DirectoryScanner, MarkdownFile, ScannerConfig
from .section_extractor import Header, SectionExtractor
from .toc_builder import TocBuilder

__all__ = [
    "CodeBlock",
    "CodeBlockExtractor",
    "ContentAnalyzer",
    "ContentMetadata",
    "DirectoryScanner",
    "DocsApiError",
    "DocumentProcessingError",
    "DocumentReadError",
    "DocumentRecord",
    "FilesystemError",
    "FrontMatter",
    "Header",
    "Link",
    "MarkdownFile",
    "MarkdownParser",
    "MarkdownProcessor",
    "ParseResult",
    "ScannerConfig",
    "Section",
    "SectionExtractor",
    "TocBuilder",
    "TocNode",
    "detect_code_purpose",
]
