"""Pure projections from document records to the shared JSON artifacts.

Every builder takes the complete record list and returns plain JSON data;
none of them reads another artifact's output.
"""

import json
from collections import Counter
from typing import Any, Dict, List

from src.markdown_processor.data_classes import DocumentRecord

API_VERSION = "1.0.0"
COMPLEXITY_LEVELS = ["beginner", "intermediate", "advanced"]
ROUTE_SUMMARY_CHARS = 120
ROUTE_KEYWORD_LIMIT = 8

SHARED_ARTIFACTS = ("index", "search", "categories", "routes", "metadata")
RESERVED_SLUG_SUFFIX = ".document"


def _unique(values) -> List[Any]:
    """Distinct values in first-seen order."""
    return list(dict.fromkeys(values))


def _totals(records: List[DocumentRecord]) -> Dict[str, int]:
    return {
        "totalWords": sum(record.word_count for record in records),
        "totalCodeExamples": sum(len(record.code_examples) for record in records),
    }


def _languages(records: List[DocumentRecord]) -> List[str]:
    return [block.language for record in records for block in record.code_examples]


def approximate_size(data: Any) -> str:
    """Serialized size rounded to kilobytes, e.g. ``~12KB``."""
    return f"~{round(len(json.dumps(data)) / 1024)}KB"


def truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def document_file(slug: str) -> str:
    """Output file of a record, relative to the API root.

    A slug equal to a shared artifact name (e.g. ``index`` from ``index.md``)
    is written to ``<slug>.document.json`` so both files survive.
    """
    if slug in SHARED_ARTIFACTS:
        return f"{slug}{RESERVED_SLUG_SUFFIX}.json"
    return f"{slug}.json"


def build_index(records: List[DocumentRecord], generated_at: str) -> Dict[str, Any]:
    """Corpus index: per-document metadata without content, plus aggregates."""
    return {
        "total": len(records),
        "metadata": {
            "generatedAt": generated_at,
            **_totals(records),
            "categories": _unique(record.category for record in records),
            "contentTypes": _unique(record.content_type for record in records),
        },
        "docs": [
            {
                "slug": record.slug,
                "path": record.path,
                "title": record.title,
                "summary": record.summary,
                "category": record.category,
                "contentType": record.content_type,
                "complexity": record.complexity,
                "keywords": list(record.keywords),
                "tags": list(record.tags),
                "sections": [
                    {"id": section.id, "heading": section.heading, "level": section.level}
                    for section in record.sections
                ],
                "codeExampleCount": len(record.code_examples),
                "wordCount": record.word_count,
                "estimatedReadingTime": record.estimated_reading_time,
                "lastModified": record.last_modified,
            }
            for record in records
        ],
    }


def build_search_index(records: List[DocumentRecord]) -> List[Dict[str, Any]]:
    """Search projection: no raw content, no code."""
    return [
        {
            "slug": record.slug,
            "title": record.title,
            "summary": record.summary,
            "keywords": list(record.keywords),
            "category": record.category,
            "contentType": record.content_type,
            "sections": [
                {"heading": section.heading, "contentPlain": section.content_plain}
                for section in record.sections
            ],
        }
        for record in records
    ]


def build_category_index(records: List[DocumentRecord]) -> Dict[str, List[Dict[str, str]]]:
    """Category name -> document summaries, categories in first-seen order."""
    categories: Dict[str, List[Dict[str, str]]] = {}
    for record in records:
        categories.setdefault(record.category, []).append(
            {"slug": record.slug, "title": record.title, "summary": record.summary}
        )
    return categories


def build_metadata(records: List[DocumentRecord], generated_at: str) -> Dict[str, Any]:
    """Corpus-wide statistics."""
    totals = _totals(records)
    total_docs = len(records)
    total_reading_time = sum(record.estimated_reading_time for record in records)
    complexity_counts = Counter(record.complexity for record in records)

    return {
        "version": API_VERSION,
        "generated": generated_at,
        "stats": {
            "totalDocs": total_docs,
            **totals,
            "avgWordsPerDoc": round(totals["totalWords"] / total_docs) if total_docs else 0,
            "avgReadingTime": round(total_reading_time / total_docs) if total_docs else 0,
        },
        "categories": _unique(record.category for record in records),
        "contentTypes": _unique(record.content_type for record in records),
        "complexityDistribution": {
            level: complexity_counts.get(level, 0) for level in COMPLEXITY_LEVELS
        },
        "languageDistribution": dict(Counter(_languages(records))),
    }


def build_routes(records: List[DocumentRecord], generated_at: str, base_url: str = "/api") -> Dict[str, Any]:
    """Discovery manifest: every endpoint, every document, and how to use them."""
    index = build_index(records, generated_at)
    categories = index["metadata"]["categories"]
    content_types = index["metadata"]["contentTypes"]
    category_counts = Counter(record.category for record in records)

    return {
        "version": API_VERSION,
        "generated": generated_at,
        "baseUrl": base_url,
        "stats": {
            "totalDocuments": len(records),
            **_totals(records),
            "categories": len(categories),
            "contentTypes": len(content_types),
        },
        "endpoints": {
            "routes": {
                "path": f"{base_url}/routes.json",
                "description": "This file - complete API route listing and documentation discovery",
                "size": "varies",
                "usage": "Fetch this first to discover all available routes",
            },
            "index": {
                "path": f"{base_url}/index.json",
                "description": "Complete list of all documents with metadata (titles, summaries, keywords)",
                "size": approximate_size(index),
                "usage": "Browse all documents or search by metadata",
            },
            "search": {
                "path": f"{base_url}/search.json",
                "description": "Lightweight search index with document summaries and keywords",
                "size": approximate_size(build_search_index(records)),
                "usage": "Quick keyword-based search across all documents",
            },
            "categories": {
                "path": f"{base_url}/categories.json",
                "description": "Documents organized by category",
                "size": approximate_size(build_category_index(records)),
                "usage": "Browse documents by category",
            },
            "metadata": {
                "path": f"{base_url}/metadata.json",
                "description": "Overall documentation statistics and metadata",
                "size": approximate_size(build_metadata(records, generated_at)),
                "usage": "Get overview statistics about the documentation",
            },
            "document": {
                "path": f"{base_url}/{{slug}}.json",
                "description": (
                    "Full document record: sections, code examples, table of contents, content. "
                    "Slugs named like a shared artifact use {slug}.document.json, "
                    "so prefer each document's route"
                ),
                "size": "varies",
                "usage": "Fetch when the complete content of one document is needed",
            },
        },
        "categories": [
            {
                "name": category,
                "count": category_counts[category],
                "description": f"All {category} documents",
            }
            for category in categories
        ],
        "documents": [
            {
                "slug": record.slug,
                "route": f"{base_url}/{document_file(record.slug)}",
                "title": record.title,
                "category": record.category,
                "contentType": record.content_type,
                "complexity": record.complexity,
                "keywords": record.keywords[:ROUTE_KEYWORD_LIMIT],
                "summary": truncate(record.summary, ROUTE_SUMMARY_CHARS),
                "wordCount": record.word_count,
                "codeExamples": len(record.code_examples),
                "sections": len(record.sections),
                "estimatedReadingTime": record.estimated_reading_time,
            }
            for record in records
        ],
        "capabilities": {
            "search": {
                "fields": ["title", "summary", "keywords", "category", "contentPlain"],
                "description": "Search across these fields in documents",
            },
            "filter": {
                "fields": ["category", "complexity", "contentType"],
                "values": {
                    "category": categories,
                    "complexity": COMPLEXITY_LEVELS,
                    "contentType": content_types,
                },
                "description": "Filter documents by these criteria",
            },
            "languages": {
                "available": _unique(_languages(records)),
                "description": "Programming languages available in code examples",
            },
        },
        "usage": {
            "quickStart": {
                "step1": f"Fetch {base_url}/routes.json (this file) to discover all available routes",
                "step2": f"Use {base_url}/index.json to browse all documents with metadata",
                "step3": f"Use {base_url}/search.json for keyword-based searching",
                "step4": f"Fetch {base_url}/{{slug}}.json to get complete document content",
            },
            "examples": {
                "findByKeyword": {
                    "description": "Find documents containing specific keyword",
                    "steps": [
                        f"Fetch {base_url}/search.json",
                        "Filter by keyword in title, summary, or keywords array",
                        f"Use the slug to fetch full document from {base_url}/{{slug}}.json",
                    ],
                },
                "findByCategory": {
                    "description": "Get all documents in a category",
                    "steps": [
                        f"Fetch {base_url}/categories.json",
                        "Look up the category name",
                        "Use slugs to fetch full documents",
                    ],
                },
                "getSpecificSection": {
                    "description": "Get a specific section from a document",
                    "steps": [
                        f"Fetch {base_url}/{{slug}}.json",
                        "Navigate to sections array",
                        "Find section by id or heading",
                        "Access section.content or section.contentPlain",
                    ],
                },
                "getCodeExamples": {
                    "description": "Get code examples from a document",
                    "steps": [
                        f"Fetch {base_url}/{{slug}}.json",
                        "Access codeExamples array",
                        "Filter by language if needed",
                        "Each example includes code, language, and purpose",
                    ],
                },
            },
            "tips": [
                f"Use {base_url}/index.json for browsing - it includes all metadata without full content",
                f"Use {base_url}/search.json for searching - it's optimized for keyword matching",
                "Fetch specific documents only when you need full content",
                "Check complexity field to recommend appropriate content for user level",
                "Use keywords array for content discovery",
                "Sections array provides document structure for navigation",
                "codeExamples are pre-extracted with language and purpose metadata",
            ],
        },
        "quickReference": {
            "List all documents": f"GET {base_url}/index.json",
            "Search documents": f"GET {base_url}/search.json",
            "Get specific document": f"GET {base_url}/{{slug}}.json",
            "Browse by category": f"GET {base_url}/categories.json",
            "Corpus statistics": f"GET {base_url}/metadata.json",
            "View all routes": f"GET {base_url}/routes.json (this file)",
        },
    }
