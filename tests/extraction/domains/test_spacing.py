# ABOUTME: Tests for spacing extraction from the two-layer system and border radius guidance
# ABOUTME: Layout anti-patterns without a severity default to warning

from design_intel.extraction.domains import SpacingExtractor


def _entries(source_dir):
    return {entry.id: entry for entry in SpacingExtractor().extract("spacing", source_dir)}


class TestSpacingExtractor:
    def test_fixture_ids(self, corpus_dir):
        assert list(_entries(corpus_dir)) == [
            "spacing-two-layer-system",
            "spacing-token-space-2",
            "spacing-forbidden-arbitrary-pixel-values",
            "spacing-layout-antipattern-double-padding",
            "spacing-layout-antipattern-cramped",
            "spacing-principle-group-related-items",
            "spacing-border-radius-md",
            "spacing-nested-radius-formula",
        ]

    def test_two_layer_system(self, corpus_dir):
        entry = _entries(corpus_dir)["spacing-two-layer-system"]
        assert entry.severity == "critical"
        assert entry.example == "Precision: Component internals. Rhythm: Layout"

    def test_layout_anti_pattern_severity(self, corpus_dir):
        entries = _entries(corpus_dir)
        double = entries["spacing-layout-antipattern-double-padding"]
        assert double.severity == "critical"
        assert double.why == "Only one owner of padding"
        assert double.counter_example == "Remove inner padding"

        cramped = entries["spacing-layout-antipattern-cramped"]
        assert cramped.severity == "warning"
        assert cramped.why is None

    def test_principle_context(self, corpus_dir):
        entry = _entries(corpus_dir)["spacing-principle-group-related-items"]
        assert entry.context == "White space is structure"

    def test_nested_radius_formula(self, corpus_dir):
        entry = _entries(corpus_dir)["spacing-nested-radius-formula"]
        assert entry.title == "Nested border radius: outer = inner + padding"
        assert entry.description == "outer = inner + padding. inner 4 + padding 4 = outer 8"
