"""Error types raised by the markdown processing pipeline."""

from pathlib import Path
from typing import Optional, Union


class DocsApiError(Exception):
    """Base class for all pipeline errors."""


class FilesystemError(DocsApiError):
    """A directory or file could not be found, listed, read or written."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class DocumentReadError(FilesystemError):
    """A document exists but could not be read as UTF-8 text."""


class DocumentProcessingError(DocsApiError):
    """Building a document record failed for a reason other than I/O."""

    def __init__(self, message: str, path: Union[str, Path]):
        super().__init__(f"{message} ({path})")
        self.path = str(path)
