"""Tests for writing the JSON API to disk."""

import json
from pathlib import Path

import pytest

from src.api_generator.artifacts import SHARED_ARTIFACTS
from src.api_generator.generator import ApiGenerator
from src.markdown_processor.errors import (DocumentProcessingError,
                                           FilesystemError)
from src.markdown_processor.processor import MarkdownProcessor

SAMPLES_DIR = Path(__file__).parent.parent.parent / "samples"
GENERATED_AT = "2024-05-01T10:00:00.000Z"


def _load(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class TestApiGenerator:
    """Test the ApiGenerator component."""

    def test_generate_samples(self, tmp_path):
        """Test the full output tree for the samples directory."""
        records = MarkdownProcessor().process_directory(SAMPLES_DIR)

        result = ApiGenerator(tmp_path).generate(records, GENERATED_AT)

        assert result.total_files == 8
        assert (tmp_path / "getting-started.json").is_file()
        assert (tmp_path / "guide" / "configuration.json").is_file()
        assert (tmp_path / "reference" / "api.json").is_file()
        for name in SHARED_ARTIFACTS:
            assert (tmp_path / f"{name}.json").is_file()

        assert _load(tmp_path / "guide" / "configuration.json") == records[1].to_dict()
        assert list(_load(tmp_path / "categories.json")) == ["general", "guide", "reference"]
        assert _load(tmp_path / "metadata.json")["generated"] == GENERATED_AT

    def test_empty_corpus(self, tmp_path):
        """Test that no documents still produce the five shared artifacts."""
        output_dir = tmp_path / "public" / "api"

        result = ApiGenerator(output_dir).generate([], GENERATED_AT)

        assert result.document_files == []
        assert sorted(p.name for p in output_dir.iterdir()) == sorted(
            f"{name}.json" for name in SHARED_ARTIFACTS
        )
        assert _load(output_dir / "index.json")["total"] == 0
        assert _load(output_dir / "search.json") == []
        assert _load(output_dir / "metadata.json")["stats"]["avgWordsPerDoc"] == 0

    def test_reserved_slug_is_relocated(self, tmp_path):
        """Test that index.md does not overwrite or lose to the shared index."""
        record = MarkdownProcessor().process_content("# Home\n\nWelcome.", "index.md")

        result = ApiGenerator(tmp_path).generate([record], GENERATED_AT)

        assert result.relocated_slugs == ["index"]
        assert result.document_files == [tmp_path / "index.document.json"]
        assert _load(tmp_path / "index.document.json") == record.to_dict()
        index = _load(tmp_path / "index.json")
        assert index["total"] == 1
        assert index["docs"][0]["slug"] == "index"

    def test_every_route_resolves_to_its_record(self, tmp_path):
        processor = MarkdownProcessor()
        records = processor.process_directory(SAMPLES_DIR) + [
            processor.process_content("# Home", "index.md"),
            processor.process_content("# Search tips", "search.md"),
        ]

        ApiGenerator(tmp_path, base_url="/api").generate(records, GENERATED_AT)

        routes = _load(tmp_path / "routes.json")
        assert len(routes["documents"]) == 5
        for doc in routes["documents"]:
            target = _load(tmp_path / doc["route"][len("/api/"):])
            assert target["slug"] == doc["slug"]

    def test_output_file_collision_is_rejected(self, tmp_path):
        processor = MarkdownProcessor()
        records = [
            processor.process_content("# Home", "index.md"),
            processor.process_content("# Clash", "index.document.md"),
        ]

        with pytest.raises(DocumentProcessingError) as exc_info:
            ApiGenerator(tmp_path).generate(records, GENERATED_AT)

        assert "index.document.json" in str(exc_info.value)
        assert list(tmp_path.iterdir()) == []

    def test_non_ascii_is_written_verbatim(self, tmp_path):
        record = MarkdownProcessor().process_content("# Café\n\nNaïve résumé.", "cafe.md")

        ApiGenerator(tmp_path).generate([record], GENERATED_AT)

        text = (tmp_path / "cafe.json").read_text(encoding="utf-8")
        assert "Café" in text
        assert "\\u" not in text

    def test_generated_at_defaults_to_now(self, tmp_path):
        ApiGenerator(tmp_path).generate([])

        generated = _load(tmp_path / "metadata.json")["generated"]
        assert generated.endswith("Z")
        assert len(generated) == len(GENERATED_AT)

    def test_output_dir_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(FilesystemError):
            ApiGenerator(blocker).generate([], GENERATED_AT)
