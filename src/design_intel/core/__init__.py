# ABOUTME: Core layer: canonical schema, normalizers and the bundle pipeline driver
# ABOUTME: Pipeline Stage 2: wrap extracted entries into versioned per-domain bundles

"""
Core Layer: Schema and orchestration

This layer handles:
- The IntelligenceEntry / IntelligenceBundle schema
- Identifier and severity normalization
- Running every domain extractor and persisting one bundle per domain

Data Flow: Extraction layer → entries → bundles on disk → Validation layer
"""

from .models import (
    TARGET_DOMAINS,
    EntryType,
    IntelligenceBundle,
    IntelligenceEntry,
    Severity,
    TargetDomain,
)
from .normalize import map_severity, slugify

__all__ = [
    "TARGET_DOMAINS",
    "EntryType",
    "IntelligenceBundle",
    "IntelligenceEntry",
    "Severity",
    "TargetDomain",
    "map_severity",
    "slugify",
]
