# ABOUTME: Tests for typography extraction from the type system, font requirements and iconography
# ABOUTME: Font requirement entries share their source section with other domains

from conftest import write_document
from design_intel.extraction.domains import TypographyExtractor


def _entries(source_dir):
    return {entry.id: entry for entry in TypographyExtractor().extract("typography", source_dir)}


class TestTypographyExtractor:
    def test_fixture_ids(self, corpus_dir):
        assert list(_entries(corpus_dir)) == [
            "typography-scale-body-large",
            "typography-golden-rule-max-two-font-families",
            "typography-forbidden-justified-text",
            "typography-font-formats",
            "typography-font-minimum-weights",
            "typography-icon-size-sm",
            "typography-icon-forbidden-emojis",
        ]

    def test_scale(self, corpus_dir):
        entry = _entries(corpus_dir)["typography-scale-body-large"]
        assert entry.description == "Long-form text. Size: 18px, weight: 400"
        assert entry.example == "Tailwind: text-lg"
        assert entry.tags == ["typography", "scale", "body-large"]

    def test_font_requirements(self, corpus_dir):
        entries = _entries(corpus_dir)
        assert entries["typography-font-formats"].description == (
            "Required formats: woff2: priority 1 (required), woff: priority 2. Preference: woff2 > woff"
        )
        weights = entries["typography-font-minimum-weights"]
        assert weights.title == "Font minimum weights: 400, 700"
        assert weights.description == "Minimum weights: 400, 700. Recommended: 400, 500, 700"

    def test_iconography(self, corpus_dir):
        entries = _entries(corpus_dir)
        assert entries["typography-icon-size-sm"].title == "Icon size: sm (16px)"
        forbidden = entries["typography-icon-forbidden-emojis"]
        assert forbidden.title == "Icons forbidden: emojis"
        assert forbidden.description == "Icons come from one library. Use lucide-react instead."

    def test_empty_font_requirements_still_emit_rules(self, empty_corpus):
        write_document(empty_corpus, "design-foundations.json", {"fontRequirements": {}})
        entries = _entries(empty_corpus)
        assert list(entries) == ["typography-font-formats", "typography-font-minimum-weights"]
        assert entries["typography-font-minimum-weights"].title == "Font minimum weights:"
