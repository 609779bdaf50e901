# ABOUTME: Exceptions raised by the extraction layer
# ABOUTME: Only a missing/corrupt required document or a broken registry is fatal

from pathlib import Path


class ExtractionError(Exception):
    """Raised when intelligence extraction cannot proceed."""

    pass


class SourceDocumentError(ExtractionError):
    """Raised when a required source document is missing or is not parseable JSON."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class RegistryError(ExtractionError):
    """Raised when the extractor registry does not match the target domains."""

    pass
