# ABOUTME: Tests for Storybook extraction from the workflow patterns document
# ABOUTME: Covers story lists, real state mechanisms, the master story protocol and test-id layers

from conftest import write_document
from design_intel.extraction.domains import StorybookExtractor


def _entries(source_dir):
    return {entry.id: entry for entry in StorybookExtractor().extract("storybook", source_dir)}


class TestStorybookExtractor:
    def test_fixture_ids(self, corpus_dir):
        assert list(_entries(corpus_dir)) == [
            "storybook-required-story-default",
            "storybook-optional-story-loading",
            "storybook-forbidden-stories-without-args",
            "storybook-state-real-mechanisms",
            "storybook-mobile-device-frames",
            "storybook-master-story-protocol",
            "storybook-master-api-simulation",
            "storybook-test-must-have-buttons",
            "storybook-test-forbidden-index-based-test-ids",
            "storybook-testid-layer-page",
            "storybook-testid-layer-component",
        ]

    def test_state_mechanisms(self, corpus_dir):
        entry = _entries(corpus_dir)["storybook-state-real-mechanisms"]
        assert entry.description == (
            "States must be real. autoFocus: Use autoFocus for focus; disabled: Use the disabled attribute"
        )
        assert entry.counter_example == "className='hover'"

    def test_mobile_frames(self, corpus_dir):
        entry = _entries(corpus_dir)["storybook-mobile-device-frames"]
        assert entry.description == "Test on device frames. iPhone models: iPhone 15: 393x852. Scale: 1x"

    def test_master_protocol(self, corpus_dir):
        entries = _entries(corpus_dir)
        protocol = entries["storybook-master-story-protocol"]
        assert protocol.example == "Naming: Master/<Page>. Examples: Master/Dashboard"
        assert protocol.why == "Single source of truth"

        api = entries["storybook-master-api-simulation"]
        assert api.example == "useQuery + msw handlers"
        assert api.counter_example == "inline mock arrays"

    def test_test_id_layers(self, corpus_dir):
        entries = _entries(corpus_dir)
        assert entries["storybook-testid-layer-page"].description == "page-<name>"
        assert entries["storybook-testid-layer-page"].example is None
        component = entries["storybook-testid-layer-component"]
        assert component.description == "Format: <component>-<element>"
        assert component.example == "card-title"
        assert "storybook-testid-layer-description" not in entries

    def test_empty_master_protocol_still_emits_entry(self, empty_corpus):
        write_document(empty_corpus, "workflow-patterns.json", {"masterStoryProtocol": {}})
        entries = _entries(empty_corpus)
        assert list(entries) == ["storybook-master-story-protocol"]
        assert entries["storybook-master-story-protocol"].why is None

    def test_missing_master_protocol_is_skipped(self, empty_corpus):
        write_document(empty_corpus, "workflow-patterns.json", {"masterStoryProtocol": None})
        assert _entries(empty_corpus) == {}

    def test_list_values_render_comma_joined(self, empty_corpus):
        story = {"name": "default", "purpose": "Base", "shows": ["a", "b"]}
        write_document(empty_corpus, "workflow-patterns.json", {"storybook": {"requiredStories": [story]}})
        entry = _entries(empty_corpus)["storybook-required-story-default"]
        assert entry.description == "Base. Shows: a,b"
