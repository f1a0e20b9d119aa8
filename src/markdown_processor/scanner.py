"""Directory Scanner for Markdown files."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

from .errors import FilesystemError


@dataclass
class ScannerConfig:
    """Configuration for the directory scanner."""

    skip_hidden_dirs: bool = True
    supported_extensions: List[str] = None
    excluded_dirs: List[str] = None

    def __post_init__(self):
        if self.supported_extensions is None:
            self.supported_extensions = [".md"]
        if self.excluded_dirs is None:
            self.excluded_dirs = ["node_modules", "public"]


@dataclass(frozen=True)
class MarkdownFile:
    """A discovered document: absolute path for reading, relative path for the slug."""

    full_path: Path
    relative_path: str


class DirectoryScanner:
    """Scans directories for Markdown files."""

    def __init__(self, config: ScannerConfig = None):
        self.config = config or ScannerConfig()

    def scan_for_markdown_files(self, root_dir: str) -> Iterator[MarkdownFile]:
        """
        Recursively scan for Markdown files.

        Args:
            root_dir: Root directory path to scan

        Yields:
            MarkdownFile entries in sorted path order

        Raises:
            FilesystemError: If the root is missing, is not a directory, or a
                directory under it cannot be listed
        """
        root_path = Path(root_dir)

        if not root_path.exists():
            raise FilesystemError(f"Directory not found: {root_dir}", root_dir)

        if not root_path.is_dir():
            raise FilesystemError(f"Path is not a directory: {root_dir}", root_dir)

        root_path = root_path.resolve()
        for file_path in self._walk_directory(root_path):
            relative_path = file_path.relative_to(root_path)
            yield MarkdownFile(full_path=file_path, relative_path=relative_path.as_posix())

    def _walk_directory(self, path: Path) -> Iterator[Path]:
        """Recursively walk directory tree and yield matching files."""
        try:
            items = sorted(path.iterdir(), key=lambda item: item.name)
        except OSError as e:
            raise FilesystemError(f"Cannot list directory {path}: {e}", path) from e

        for item in items:
            if item.is_file():
                if self._is_markdown_file(item):
                    yield item
            elif item.is_dir() and not self._is_excluded_dir(item):
                yield from self._walk_directory(item)

    def _is_excluded_dir(self, dir_path: Path) -> bool:
        if self.config.skip_hidden_dirs and dir_path.name.startswith("."):
            return True
        return dir_path.name in self.config.excluded_dirs

    def _is_markdown_file(self, file_path: Path) -> bool:
        """Check if file has a supported Markdown extension."""
        return file_path.suffix.lower() in self.config.supported_extensions
