# ABOUTME: Extractor contract shared by all domain extractors plus the entry builder they use
# ABOUTME: Turns matched source substructures into canonical IntelligenceEntry records

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, ClassVar, Protocol

from design_intel.core.models import EntryType, IntelligenceEntry, Severity
from design_intel.core.normalize import slugify
from design_intel.extraction.documents import SourceDocument, read_document, render_text
from design_intel.utils.logging import get_logger, log_extraction_step


class DomainExtractor(Protocol):
    """Protocol for producing the entries of one target domain."""

    documents: tuple[str, ...]

    def extract(self, domain: str, source_dir: Path) -> list[IntelligenceEntry]:
        """Extract the entries for ``domain`` from the corpus in ``source_dir``.

        Args:
            domain: Target domain every produced entry is stamped with
            source_dir: Directory holding the source JSON documents

        Returns:
            Entries in source order

        Raises:
            SourceDocumentError: If a required document is missing or not valid JSON
        """
        ...


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return render_text(value).strip()


class EntryBuilder:
    """Collects entries for one domain, applying best-effort fallbacks.

    Blank titles fall back to the distinguishing key, blank descriptions to
    the title. Blank tags are dropped and blank optional fields are omitted.
    """

    def __init__(self, domain: str):
        self.domain = domain
        self.entries: list[IntelligenceEntry] = []

    def add(
        self,
        key: Any,
        *,
        type: EntryType,
        title: Any,
        severity: Severity,
        description: Any,
        tags: Iterable[Any],
        context: Any = None,
        example: Any = None,
        counter_example: Any = None,
        why: Any = None,
        applies_to: Iterable[Any] | None = None,
    ) -> IntelligenceEntry:
        key_text = _clean(key)
        entry_id = slugify(f"{self.domain}-{key_text}")
        title_text = _clean(title) or key_text or entry_id
        description_text = _clean(description) or title_text
        applies = [_clean(item) for item in applies_to or []]

        entry = IntelligenceEntry(
            id=entry_id,
            type=type,
            domain=self.domain,
            title=title_text,
            severity=severity,
            description=description_text,
            context=_clean(context) or None,
            example=_clean(example) or None,
            counter_example=_clean(counter_example) or None,
            why=_clean(why) or None,
            tags=[tag for tag in (_clean(t) for t in tags) if tag],
            applies_to=[item for item in applies if item] or None,
        )
        self.entries.append(entry)
        return entry

    def __len__(self) -> int:
        return len(self.entries)


class BaseDomainExtractor(ABC):
    """Base class for extractors that read a fixed set of source documents.

    Subclasses declare the documents they need and implement ``collect``;
    every declared document is required.
    """

    domain: ClassVar[str]
    documents: ClassVar[tuple[str, ...]]

    def __init__(self):
        self.logger = get_logger(__name__)

    @log_extraction_step("extract_domain")
    def extract(self, domain: str, source_dir: Path) -> list[IntelligenceEntry]:
        source_dir = Path(source_dir)
        docs = {}
        for name in self.documents:
            self.logger.debug("Reading source document", domain=domain, document=name)
            docs[name] = read_document(source_dir / name)

        entries = EntryBuilder(domain)
        self.collect(entries, docs)
        return entries.entries

    @abstractmethod
    def collect(self, entries: EntryBuilder, docs: Mapping[str, SourceDocument]) -> None:
        """Add one entry per matched substructure of ``docs``, in source order."""
        pass
