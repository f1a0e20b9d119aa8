"""Static JSON documentation API generated from document records."""

from .artifacts import (build_category_index, build_index, build_metadata,
                        build_routes, build_search_index)
from .generator import ApiGenerator, GenerationResult

__all__ = [
    "ApiGenerator",
    "GenerationResult",
    "build_category_index",
    "build_index",
    "build_metadata",
    "build_routes",
    "build_search_index",
]
