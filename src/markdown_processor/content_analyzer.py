"""Content analyzer for deriving summaries, keywords and classifications."""

import math
import re
from typing import List, Tuple

from .code_extractor import strip_fenced_blocks
from .data_classes import CodeBlock, ContentMetadata, FrontMatter

SUMMARY_MAX_CHARS = 200
MAX_KEYWORDS = 20
MIN_HEADING_KEYWORD_LENGTH = 4
WORDS_PER_MINUTE = 200

# Checked in order against the lower-cased body, first match wins
CONTENT_TYPE_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("api-reference", ("api", "reference")),
    ("tutorial", ("tutorial", "guide")),
    ("example", ("example",)),
    ("setup-guide", ("installation", "setup")),
)
DEFAULT_CONTENT_TYPE = "documentation"

# Upper bounds (exclusive) of each complexity tier
COMPLEXITY_TIERS: Tuple[Tuple[str, float], ...] = (
    ("beginner", 10),
    ("intermediate", 25),
)
TOP_COMPLEXITY_TIER = "advanced"


class ContentAnalyzer:
    """Analyzes a markdown body to extract document-level metadata."""

    def __init__(self):
        # camelCase and PascalCase identifiers such as parseFile or MarkdownParser
        self.technical_term_pattern = re.compile(r"\b(?:[a-z]+|[A-Z][a-z]+)[A-Z][a-zA-Z]*\b")
        self.declaration_pattern = re.compile(r"\b(?:function|const|let|var)\s+(\w+)")

    def analyze_content(
        self,
        content: str,
        frontmatter: FrontMatter,
        slug: str,
        code_examples: List[CodeBlock],
        headings: List[str],
    ) -> ContentMetadata:
        """
        Derive summary, keywords and classification for one document.

        Args:
            content: Markdown body without frontmatter
            frontmatter: Parsed document frontmatter
            slug: Document slug, used for the path-based category
            code_examples: Flat list of the document's code blocks
            headings: Heading texts in document order

        Returns:
            ContentMetadata with analysis results
        """
        word_count = self.count_words(content)
        score = self.complexity_score(content, len(code_examples), word_count)

        return ContentMetadata(
            summary=self.generate_summary(content),
            keywords=self.extract_keywords(content, frontmatter, headings),
            category=self.determine_category(frontmatter, slug),
            content_type=self.determine_content_type(content, frontmatter),
            complexity=self.complexity_tier(score),
            complexity_score=score,
            word_count=word_count,
            estimated_reading_time=math.ceil(word_count / WORDS_PER_MINUTE),
        )

    def generate_summary(self, content: str) -> str:
        """First non-heading paragraph outside code, cut to 200 characters."""
        paragraphs = [p.strip() for p in strip_fenced_blocks(content).split("\n\n")]
        paragraphs = [p for p in paragraphs if p and not p.startswith("#")]

        first_paragraph = paragraphs[0] if paragraphs else ""
        if len(first_paragraph) > SUMMARY_MAX_CHARS:
            return first_paragraph[: SUMMARY_MAX_CHARS - 3] + "..."
        return first_paragraph

    def extract_keywords(self, content: str, frontmatter: FrontMatter, headings: List[str]) -> List[str]:
        """Collect up to 20 keywords, first found wins, case-insensitive dedup."""
        keywords = {}

        def add(keyword: str) -> None:
            if keyword and keyword.lower() not in keywords:
                keywords[keyword.lower()] = keyword

        for tag in frontmatter.tags:
            add(tag.lower())

        for heading in headings:
            for word in heading.split():
                cleaned = re.sub(r"[^\w]", "", word.lower())
                if len(cleaned) >= MIN_HEADING_KEYWORD_LENGTH:
                    add(cleaned)

        for term in self.technical_term_pattern.findall(content):
            add(term)

        for name in self.declaration_pattern.findall(content):
            add(name)

        return list(keywords.values())[:MAX_KEYWORDS]

    def determine_category(self, frontmatter: FrontMatter, slug: str) -> str:
        if frontmatter.category:
            return frontmatter.category
        parts = slug.split("/")
        return parts[0] if len(parts) > 1 else "general"

    def determine_content_type(self, content: str, frontmatter: FrontMatter) -> str:
        lower_content = content.lower()
        for content_type, markers in CONTENT_TYPE_RULES:
            if any(marker in lower_content for marker in markers):
                return content_type
        if frontmatter.category:
            return frontmatter.category
        return DEFAULT_CONTENT_TYPE

    def count_technical_terms(self, content: str) -> int:
        return len(self.technical_term_pattern.findall(content))

    def complexity_score(self, content: str, code_block_count: int, word_count: int) -> float:
        """More code, more technical terms and longer text all raise the score."""
        score = code_block_count * 2
        score += min(self.count_technical_terms(content) / 5, 10)
        score += min(word_count / 200, 10)
        return score

    def complexity_tier(self, score: float) -> str:
        for tier, upper_bound in COMPLEXITY_TIERS:
            if score < upper_bound:
                return tier
        return TOP_COMPLEXITY_TIER

    def count_words(self, content: str) -> int:
        """Whitespace-delimited tokens outside fenced code."""
        return len(strip_fenced_blocks(content).split())
