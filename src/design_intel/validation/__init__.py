# ABOUTME: Validation of persisted intelligence bundles
# ABOUTME: Pipeline Stage 3: re-read bundles and audit schema and identifier invariants

from .models import BundleReport, ValidationReport
from .validator import BundleValidator, check_entry

__all__ = [
    "BundleReport",
    "BundleValidator",
    "ValidationReport",
    "check_entry",
]
