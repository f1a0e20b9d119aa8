"""Tests for document-level content analysis."""

import pytest

from src.markdown_processor.code_extractor import CodeBlockExtractor
from src.markdown_processor.content_analyzer import ContentAnalyzer
from src.markdown_processor.data_classes import FrontMatter


class TestSummary:
    """Test summary generation."""

    def test_first_paragraph_after_code_and_headings(self):
        analyzer = ContentAnalyzer()

        content = "# Title\n\n```js\nx\n```\n\nFirst paragraph here.\n\nSecond."

        assert analyzer.generate_summary(content) == "First paragraph here."

    def test_long_paragraph_is_truncated(self):
        analyzer = ContentAnalyzer()

        summary = analyzer.generate_summary("a" * 250)

        assert len(summary) == 200
        assert summary == "a" * 197 + "..."

    def test_exactly_200_characters_is_kept(self):
        analyzer = ContentAnalyzer()

        assert analyzer.generate_summary("b" * 200) == "b" * 200

    def test_no_paragraph(self):
        analyzer = ContentAnalyzer()

        assert analyzer.generate_summary("# Only heading") == ""
        assert analyzer.generate_summary("") == ""


class TestKeywords:
    """Test keyword extraction."""

    def test_sources_and_order(self):
        """Test tags, heading words, technical terms and declarations, first found wins."""
        analyzer = ContentAnalyzer()

        content = (
            "# Setup Guide\n\nCall parseFile then MarkdownParser.\n\n"
            "```js\nconst siteConfig = {}\nfunction loadPage() {}\n```"
        )
        frontmatter = FrontMatter(tags=["Setup", "docs"])

        keywords = analyzer.extract_keywords(content, frontmatter, ["Setup Guide"])

        assert keywords == [
            "setup",
            "docs",
            "guide",
            "parseFile",
            "MarkdownParser",
            "siteConfig",
            "loadPage",
        ]

    def test_short_heading_words_are_skipped(self):
        analyzer = ContentAnalyzer()

        keywords = analyzer.extract_keywords("", FrontMatter(), ["How to use the API today"])

        assert keywords == ["today"]

    def test_case_insensitive_dedup(self):
        analyzer = ContentAnalyzer()

        keywords = analyzer.extract_keywords(
            "uses fooBar and FooBar", FrontMatter(tags=["Config"]), ["Config"]
        )

        assert keywords == ["config", "fooBar"]

    def test_declared_identifiers(self):
        analyzer = ContentAnalyzer()

        keywords = analyzer.extract_keywords("let counter = 0\nvar total = 1", FrontMatter(), [])

        assert keywords == ["counter", "total"]

    def test_capped_at_twenty(self):
        analyzer = ContentAnalyzer()

        tags = [f"tag{i}" for i in range(25)]
        keywords = analyzer.extract_keywords("", FrontMatter(tags=tags), [])

        assert keywords == tags[:20]


class TestClassification:
    """Test category, content type and complexity."""

    def test_category(self):
        analyzer = ContentAnalyzer()

        assert analyzer.determine_category(FrontMatter(category="howto"), "guide/intro") == "howto"
        assert analyzer.determine_category(FrontMatter(), "guide/intro") == "guide"
        assert analyzer.determine_category(FrontMatter(), "intro") == "general"

    @pytest.mark.parametrize(
        "content,expected",
        [
            ("This guide is an API reference", "api-reference"),
            ("Read the reference", "api-reference"),
            ("A short tutorial", "tutorial"),
            ("Follow this guide", "tutorial"),
            ("For example", "example"),
            ("Installation steps", "setup-guide"),
            ("Local setup", "setup-guide"),
            ("Hello world.", "documentation"),
        ],
    )
    def test_content_type_rules(self, content, expected):
        analyzer = ContentAnalyzer()

        assert analyzer.determine_content_type(content, FrontMatter()) == expected

    def test_content_type_falls_back_to_category(self):
        analyzer = ContentAnalyzer()

        assert analyzer.determine_content_type("Hello world.", FrontMatter(category="faq")) == "faq"
        assert analyzer.determine_content_type("A tutorial", FrontMatter(category="faq")) == "tutorial"

    def test_complexity_tiers(self):
        analyzer = ContentAnalyzer()

        assert analyzer.complexity_tier(0) == "beginner"
        assert analyzer.complexity_tier(9.99) == "beginner"
        assert analyzer.complexity_tier(10) == "intermediate"
        assert analyzer.complexity_tier(24.9) == "intermediate"
        assert analyzer.complexity_tier(25) == "advanced"

    def test_technical_terms_are_capped(self):
        analyzer = ContentAnalyzer()

        content = " ".join(["someTerm"] * 100)

        # 100 terms / 5 = 20 -> capped at 10; 100 words / 200 = 0.5
        assert analyzer.complexity_score(content, 0, 100) == pytest.approx(10.5)

    def test_three_blocks_and_250_words_is_beginner(self):
        """Test the worked example: 2*3 + 0 + 250/200 = 7.25."""
        analyzer = ContentAnalyzer()

        content = " ".join(["word"] * 250) + "\n\n```\nx\n```\n\n```\ny\n```\n\n```\nz\n```"
        code_examples = CodeBlockExtractor().extract_code_blocks(content)

        metadata = analyzer.analyze_content(content, FrontMatter(), "intro", code_examples, [])

        assert len(code_examples) == 3
        assert metadata.word_count == 250
        assert metadata.complexity_score == pytest.approx(7.25)
        assert metadata.complexity == "beginner"
        assert metadata.estimated_reading_time == 2

    def test_word_count_ignores_code(self):
        analyzer = ContentAnalyzer()

        assert analyzer.count_words("one two\n\n```py\nthree four five\n```\nsix") == 3
        assert analyzer.count_words("   ") == 0
