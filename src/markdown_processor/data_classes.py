"""Data classes for the document model built by the markdown processor."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

RECOGNIZED_FRONTMATTER_KEYS = ("title", "description", "tags", "category")


def ensure_json_serializable(obj: Any) -> Any:
    """Recursively convert values that json cannot encode (dates, sets, ...) to strings."""
    if isinstance(obj, dict):
        return {str(key): ensure_json_serializable(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [ensure_json_serializable(item) for item in obj]
    else:
        try:
            json.dumps(obj)
            return obj
        except (TypeError, ValueError):
            return str(obj)


@dataclass
class FrontMatter:
    """Document header metadata with the recognized keys pulled out."""

    title: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    category: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Optional[Dict[str, Any]]) -> "FrontMatter":
        """Build from a raw parsed header; unknown keys land in ``extra``."""
        if not data:
            return cls()

        tags = data.get("tags") or []
        if isinstance(tags, str):
            tags = [tags]
        elif isinstance(tags, (list, tuple)):
            tags = [str(tag) for tag in tags if tag is not None]
        else:
            tags = [str(tags)]

        return cls(
            title=_optional_str(data.get("title")),
            description=_optional_str(data.get("description")),
            tags=tags,
            category=_optional_str(data.get("category")),
            extra={
                key: value
                for key, value in data.items()
                if key not in RECOGNIZED_FRONTMATTER_KEYS
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        """Flatten back into a single mapping, omitting unset recognized keys."""
        data: Dict[str, Any] = {}
        if self.title is not None:
            data["title"] = self.title
        if self.description is not None:
            data["description"] = self.description
        if self.tags:
            data["tags"] = list(self.tags)
        if self.category is not None:
            data["category"] = self.category
        data.update(self.extra)
        return ensure_json_serializable(data)


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass
class CodeBlock:
    """A fenced code block."""

    language: str
    code: str
    line_count: int
    purpose: str
    line_number: int  # 1-based line of the opening fence

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language,
            "code": self.code,
            "lineCount": self.line_count,
            "purpose": self.purpose,
            "lineNumber": self.line_number,
        }


@dataclass
class Link:
    """An inline ``[text](url)`` link."""

    text: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "url": self.url}


@dataclass
class Section:
    """A heading-delimited span of a document."""

    id: str
    level: int  # 1-6 (number of # symbols)
    heading: str
    content: str
    content_plain: str
    line_number: int  # Line number of the heading (1-based)
    code_blocks: List[CodeBlock] = field(default_factory=list)
    lists: List[str] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "level": self.level,
            "heading": self.heading,
            "content": self.content,
            "contentPlain": self.content_plain,
            "lineNumber": self.line_number,
            "codeBlocks": [block.to_dict() for block in self.code_blocks],
            "lists": list(self.lists),
            "links": [link.to_dict() for link in self.links],
        }


@dataclass
class TocNode:
    """One entry of a table of contents."""

    id: str
    heading: str
    level: int
    children: List["TocNode"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "heading": self.heading,
            "level": self.level,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass
class ContentMetadata:
    """Document-level classification results."""

    summary: str = ""
    keywords: List[str] = field(default_factory=list)
    category: str = "general"
    content_type: str = "documentation"
    complexity: str = "beginner"
    complexity_score: float = 0.0
    word_count: int = 0
    estimated_reading_time: int = 0


@dataclass
class DocumentRecord:
    """Fully assembled structured representation of one source file."""

    slug: str
    path: str
    title: str
    description: str
    frontmatter: FrontMatter
    sections: List[Section]
    code_examples: List[CodeBlock]
    table_of_contents: List[TocNode]
    metadata: ContentMetadata
    full_content: str
    last_modified: str

    @property
    def summary(self) -> str:
        return self.metadata.summary

    @property
    def keywords(self) -> List[str]:
        return self.metadata.keywords

    @property
    def tags(self) -> List[str]:
        return self.frontmatter.tags

    @property
    def category(self) -> str:
        return self.metadata.category

    @property
    def content_type(self) -> str:
        return self.metadata.content_type

    @property
    def complexity(self) -> str:
        return self.metadata.complexity

    @property
    def word_count(self) -> int:
        return self.metadata.word_count

    @property
    def estimated_reading_time(self) -> int:
        return self.metadata.estimated_reading_time

    def to_dict(self) -> Dict[str, Any]:
        """Full JSON form, as written to ``<slug>.json``."""
        return {
            "slug": self.slug,
            "path": self.path,
            "title": self.title,
            "description": self.description,
            "summary": self.summary,
            "keywords": list(self.keywords),
            "tags": list(self.tags),
            "category": self.category,
            "sections": [section.to_dict() for section in self.sections],
            "codeExamples": [block.to_dict() for block in self.code_examples],
            "tableOfContents": [node.to_dict() for node in self.table_of_contents],
            "fullContent": self.full_content,
            "frontmatter": self.frontmatter.to_dict(),
            "lastModified": self.last_modified,
            "wordCount": self.word_count,
            "estimatedReadingTime": self.estimated_reading_time,
            "contentType": self.content_type,
            "complexity": self.complexity,
        }
