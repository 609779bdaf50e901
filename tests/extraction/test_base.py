# ABOUTME: Tests for the entry builder fallbacks and the base extractor's document loading
# ABOUTME: Entries produced with missing source fields must still satisfy the schema

import pytest

from design_intel.core.models import EntryType, Severity
from design_intel.extraction import BaseDomainExtractor, EntryBuilder, SourceDocumentError


class TestEntryBuilder:
    def test_id_is_slug_of_domain_and_key(self):
        entries = EntryBuilder("components")
        entry = entries.add(
            "Button inside Button",
            type=EntryType.ANTI_PATTERN,
            title="Forbidden",
            severity=Severity.CRITICAL,
            description="Invalid HTML",
            tags=["components"],
        )
        assert entry.id == "components-button-inside-button"
        assert entry.domain == "components"
        assert len(entries) == 1

    def test_blank_title_falls_back_to_key(self):
        entry = EntryBuilder("spacing").add(
            "token-space-2", type=EntryType.PATTERN, title="  ", severity=Severity.SUGGESTION, description="", tags=[]
        )
        assert entry.title == "token-space-2"
        assert entry.description == "token-space-2"

    def test_blank_title_and_key_fall_back_to_id(self):
        entry = EntryBuilder("spacing").add(
            "", type=EntryType.RULE, title=None, severity=Severity.WARNING, description=None, tags=[]
        )
        assert entry.id == "spacing"
        assert entry.title == "spacing"
        assert entry.description == "spacing"

    def test_blank_optionals_and_tags_are_dropped(self):
        entry = EntryBuilder("typography").add(
            "rule",
            type=EntryType.RULE,
            title="Rule",
            severity=Severity.WARNING,
            description="Text",
            tags=["typography", "", "  ", None, 400],
            context="",
            example="   ",
            counter_example=None,
            why="Because",
            applies_to=["", None],
        )
        assert entry.tags == ["typography", "400"]
        assert entry.context is None
        assert entry.example is None
        assert entry.counter_example is None
        assert entry.applies_to is None
        assert entry.to_json_dict()["why"] == "Because"


class _TwoDocumentExtractor(BaseDomainExtractor):
    domain = "spacing"
    documents = ("first.json", "second.json")

    def collect(self, entries, docs):
        for name in self.documents:
            for item in docs[name].strings("rules"):
                entries.add(
                    f"{name}-{item}",
                    type=EntryType.RULE,
                    title=item,
                    severity=Severity.WARNING,
                    description=item,
                    tags=["spacing"],
                )


class TestBaseDomainExtractor:
    def test_reads_every_declared_document(self, tmp_path):
        (tmp_path / "first.json").write_text('{"rules": ["a", "b"]}', encoding="utf-8")
        (tmp_path / "second.json").write_text('{"rules": ["c"]}', encoding="utf-8")

        entries = _TwoDocumentExtractor().extract("spacing", tmp_path)

        assert [entry.title for entry in entries] == ["a", "b", "c"]

    def test_any_missing_document_is_fatal(self, tmp_path):
        (tmp_path / "first.json").write_text("{}", encoding="utf-8")

        with pytest.raises(SourceDocumentError) as exc_info:
            _TwoDocumentExtractor().extract("spacing", tmp_path)
        assert exc_info.value.path.name == "second.json"
