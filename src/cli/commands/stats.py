"""Stats command - prints corpus statistics without writing any files."""

import json
import logging
import sys

from src.api_generator.artifacts import build_metadata
from src.cli.config import Config
from src.markdown_processor.errors import DocsApiError
from src.markdown_processor.processor import MarkdownProcessor, format_timestamp

logger = logging.getLogger(__name__)


def stats_command(config: Config, source_dir: str = None):
    """Print the metadata artifact for the source tree to stdout."""
    source_dir = source_dir or config.docs_source_dir

    try:
        records = MarkdownProcessor(config.scanner_config()).process_directory(source_dir)
    except DocsApiError as e:
        logger.error(f"❌ Processing failed: {e}")
        sys.exit(1)

    metadata = build_metadata(records, format_timestamp(0))
    metadata.pop("generated")
    print(json.dumps(metadata, indent=2, ensure_ascii=False))
