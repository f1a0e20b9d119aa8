"""Write document records and the shared JSON artifacts to an output directory."""

import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from src.markdown_processor.data_classes import DocumentRecord
from src.markdown_processor.errors import (DocumentProcessingError,
                                           FilesystemError)
from src.markdown_processor.processor import format_timestamp

from .artifacts import (SHARED_ARTIFACTS, build_category_index, build_index,
                        build_metadata, build_routes, build_search_index,
                        document_file)

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Files written by one generation run."""

    document_files: List[Path] = field(default_factory=list)
    artifact_files: Dict[str, Path] = field(default_factory=dict)
    relocated_slugs: List[str] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.document_files) + len(self.artifact_files)


class ApiGenerator:
    """Fans the complete record list out into per-document and shared JSON files."""

    def __init__(self, output_dir: Union[str, Path], base_url: str = "/api"):
        self.output_dir = Path(output_dir)
        self.base_url = base_url.rstrip("/")

    def generate(self, records: List[DocumentRecord], generated_at: Optional[str] = None) -> GenerationResult:
        """
        Write every artifact for a complete set of records.

        Files already written are left in place if a later write fails.
        Output paths are checked for collisions before anything is written.

        Args:
            records: All document records of the run
            generated_at: Timestamp recorded in the artifacts (defaults to now)

        Returns:
            GenerationResult listing the written files

        Raises:
            FilesystemError: If a directory cannot be created or a file written
            DocumentProcessingError: If two records map to the same output file
        """
        self._check_output_paths(records)
        generated_at = generated_at or format_timestamp(time.time())
        self._ensure_dir(self.output_dir)
        result = GenerationResult()

        for record in records:
            if record.slug in SHARED_ARTIFACTS:
                logger.warning(
                    f"Document '{record.path}' has reserved slug '{record.slug}', "
                    f"writing it to {document_file(record.slug)}"
                )
                result.relocated_slugs.append(record.slug)
            result.document_files.append(self.write_document(record))
        logger.info(f"Generated {len(result.document_files)} individual document files")

        artifacts = {
            "index": build_index(records, generated_at),
            "search": build_search_index(records),
            "categories": build_category_index(records),
            "routes": build_routes(records, generated_at, self.base_url),
            "metadata": build_metadata(records, generated_at),
        }
        for name in SHARED_ARTIFACTS:
            path = self.output_dir / f"{name}.json"
            self._write_json(path, artifacts[name])
            result.artifact_files[name] = path
            logger.info(f"Generated {name}.json")

        self._log_statistics(artifacts["metadata"], result)
        return result

    def write_document(self, record: DocumentRecord) -> Path:
        """Write the full record to its ``document_file`` under the output directory."""
        path = self.output_dir / document_file(record.slug)
        self._ensure_dir(path.parent)
        self._write_json(path, record.to_dict())
        return path

    def _check_output_paths(self, records: List[DocumentRecord]) -> None:
        owners = {f"{name}.json": f"the shared {name} artifact" for name in SHARED_ARTIFACTS}
        for record in records:
            target = document_file(record.slug)
            if target in owners:
                raise DocumentProcessingError(
                    f"Output file {target} is already used by {owners[target]}", record.path
                )
            owners[target] = record.path

    def _ensure_dir(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"Cannot create directory {path}: {e}", path) from e

    def _write_json(self, path: Path, data: Any) -> None:
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise FilesystemError(f"Cannot write {path}: {e}", path) from e

    def _log_statistics(self, metadata: Dict[str, Any], result: GenerationResult) -> None:
        stats = metadata["stats"]
        logger.info("Statistics:")
        logger.info(f"   Total documents: {stats['totalDocs']}")
        logger.info(f"   Total words: {stats['totalWords']:,}")
        logger.info(f"   Code examples: {stats['totalCodeExamples']}")
        logger.info(f"   Categories: {', '.join(metadata['categories'])}")
        logger.info(f"   Content types: {', '.join(metadata['contentTypes'])}")
        logger.info(f"Generated {result.total_files} total files")
