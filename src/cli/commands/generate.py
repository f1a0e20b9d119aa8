"""Generate command - builds the static JSON documentation API."""

import logging
import sys

from src.api_generator.generator import ApiGenerator
from src.cli.config import Config
from src.markdown_processor.errors import DocsApiError
from src.markdown_processor.processor import MarkdownProcessor

logger = logging.getLogger(__name__)


def generate_command(config: Config, source_dir: str = None, output_dir: str = None):
    """Process every markdown document and write the JSON artifacts."""
    source_dir = source_dir or config.docs_source_dir
    output_dir = output_dir or config.docs_output_dir

    logger.info("🤖 Generating LLM-optimized documentation API...")
    logger.info(f"📁 Source directory: {source_dir}")
    logger.info(f"💾 Output directory: {output_dir}")

    try:
        # Step 1: build every record before any artifact is written
        processor = MarkdownProcessor(config.scanner_config())
        records = processor.process_directory(source_dir)
        logger.info(f"✅ Parsed {len(records)} documents")

        # Step 2: write per-document files and shared artifacts
        generator = ApiGenerator(output_dir, base_url=config.api_base_url)
        result = generator.generate(records)

        logger.info(f"📡 Generated {result.total_files} total files")
        logger.info(f"   - {len(result.document_files)} document files")
        logger.info(f"   - {len(result.artifact_files)} index/metadata files")

    except DocsApiError as e:
        logger.error(f"❌ Generation failed: {e}")
        sys.exit(1)
