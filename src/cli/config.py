"""Configuration management for the docs API generator CLI."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from src.markdown_processor.scanner import ScannerConfig


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from project root .env
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Directories
        self.docs_source_dir = os.getenv("DOCS_SOURCE_DIR", "./docs")
        self.docs_output_dir = os.getenv("DOCS_OUTPUT_DIR", "./docs/public/api")
        self.api_base_url = os.getenv("DOCS_API_BASE_URL", "/api")

        # Markdown discovery
        self.file_extensions = _split_list(os.getenv("DOCS_FILE_EXTENSIONS", ".md"))
        self.excluded_dirs = _split_list(os.getenv("DOCS_EXCLUDED_DIRS", "node_modules,public"))
        self.skip_hidden_dirs = os.getenv("DOCS_SKIP_HIDDEN_DIRS", "true").lower() == "true"

    def scanner_config(self) -> ScannerConfig:
        return ScannerConfig(
            skip_hidden_dirs=self.skip_hidden_dirs,
            supported_extensions=self.file_extensions,
            excluded_dirs=self.excluded_dirs,
        )


def _split_list(value: str) -> list:
    return [item.strip() for item in value.split(",") if item.strip()]
