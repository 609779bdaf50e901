# ABOUTME: Intelligence extraction from the design knowledge-base documents
# ABOUTME: Pipeline Stage 1: source JSON documents -> canonical intelligence entries

"""
Extraction Layer: Get normalized entries out of loosely structured source documents

This layer handles:
- Read-only, absence-tolerant access to source JSON documents
- One extractor per target domain, sharing the EntryBuilder fallbacks
- The immutable domain -> extractor registry

Data Flow: Source documents → Domain extractors → IntelligenceEntry lists → Core pipeline
"""

from .base import BaseDomainExtractor, DomainExtractor, EntryBuilder
from .documents import SourceDocument, read_document
from .errors import ExtractionError, RegistryError, SourceDocumentError
from .registry import ExtractorRegistry, build_registry, resolve_extractor, source_mapping

__all__ = [
    "BaseDomainExtractor",
    "DomainExtractor",
    "EntryBuilder",
    "ExtractionError",
    "ExtractorRegistry",
    "RegistryError",
    "SourceDocument",
    "SourceDocumentError",
    "build_registry",
    "read_document",
    "resolve_extractor",
    "source_mapping",
]
