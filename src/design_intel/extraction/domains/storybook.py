# ABOUTME: Storybook intelligence: required stories, state mechanics, master story protocol and test ids
# ABOUTME: Reads workflow-patterns.json

from collections.abc import Mapping

from design_intel.core.models import EntryType, Severity, TargetDomain
from design_intel.extraction.base import BaseDomainExtractor, EntryBuilder
from design_intel.extraction.documents import SourceDocument

# Real HTML/React mechanisms surfaced from stateRealMechanisms, in display order
STATE_MECHANISMS = ("autoFocus", "defaultChecked", "disabled", "ariaInvalid")


class StorybookExtractor(BaseDomainExtractor):
    domain = TargetDomain.STORYBOOK.value
    documents = ("workflow-patterns.json",)

    def collect(self, entries: EntryBuilder, docs: Mapping[str, SourceDocument]) -> None:
        workflow = docs["workflow-patterns.json"]
        self._stories(entries, workflow.section("storybook"))
        if workflow.has("masterStoryProtocol"):
            self._master_protocol(entries, workflow.section("masterStoryProtocol"))
        self._testing(entries, workflow.section("testing"))

    def _stories(self, entries: EntryBuilder, storybook: SourceDocument) -> None:
        for story in storybook.items("requiredStories"):
            name = story.text("name")
            entries.add(
                f"required-story-{name}",
                type=EntryType.PATTERN,
                title=f"Required story: {name}",
                severity=Severity.CRITICAL,
                description=f"{story.text('purpose')}. Shows: {story.text('shows')}",
                tags=["storybook", "required", "stories"],
            )

        for story in storybook.items("optionalStories"):
            name = story.text("name")
            entries.add(
                f"optional-story-{name}",
                type=EntryType.PATTERN,
                title=f"Optional story: {name}",
                severity=Severity.SUGGESTION,
                description=f"When: {story.text('when')}. Shows: {story.text('shows')}",
                tags=["storybook", "optional", "stories"],
            )

        for forbidden in storybook.strings("forbidden"):
            entries.add(
                f"forbidden-{forbidden}",
                type=EntryType.ANTI_PATTERN,
                title=f"Storybook forbidden: {forbidden}",
                severity=Severity.CRITICAL,
                description=forbidden,
                tags=["storybook", "forbidden"],
            )

        if storybook.has("stateRealMechanisms"):
            states = storybook.section("stateRealMechanisms")
            mechanisms = "; ".join(f"{key}: {states.text(key)}" for key in STATE_MECHANISMS if states.has(key))
            entries.add(
                "state-real-mechanisms",
                type=EntryType.RULE,
                title="Use real HTML/React mechanisms for states",
                severity=Severity.CRITICAL,
                description=f"{states.text('description')}. {mechanisms}",
                counter_example=states.joined("forbidden", sep="; "),
                tags=["storybook", "states", "accessibility"],
            )

        if storybook.has("mobileDeviceFrames"):
            frames = storybook.section("mobileDeviceFrames")
            iphones = ", ".join(
                f"{model}: {dims.text('width')}x{dims.text('height')}" for model, dims in frames.mapping("iPhoneModels")
            )
            entries.add(
                "mobile-device-frames",
                type=EntryType.PATTERN,
                title="Mobile device frames for story testing",
                severity=Severity.SUGGESTION,
                description=(
                    f"{frames.text('description')}. iPhone models: {iphones}. "
                    f"Scale: {frames.text('scaleRequirement')}"
                ),
                tags=["storybook", "mobile", "responsive", "testing"],
            )

    def _master_protocol(self, entries: EntryBuilder, protocol: SourceDocument) -> None:
        entries.add(
            "master-story-protocol",
            type=EntryType.PATTERN,
            title="Master story protocol: source of truth for page compositions",
            severity=Severity.CRITICAL,
            description=protocol.text("purpose"),
            example=(
                f"Naming: {protocol.text('naming', 'pattern')}. "
                f"Examples: {protocol.joined('naming', 'examples')}"
            ),
            why=protocol.joined("benefits", sep="; "),
            tags=["storybook", "master", "protocol", "api-contract"],
        )

        if protocol.has("requirements", "apiSimulation"):
            api = protocol.section("requirements", "apiSimulation")
            entries.add(
                "master-api-simulation",
                type=EntryType.RULE,
                title="Master stories: use API hooks, never inline mocks",
                severity=Severity.CRITICAL,
                description=api.text("rule"),
                why=api.text("why"),
                example=api.joined("correct", sep="; "),
                counter_example=api.joined("forbidden", sep="; "),
                tags=["storybook", "master", "api", "mocking"],
            )

    def _testing(self, entries: EntryBuilder, testing: SourceDocument) -> None:
        for item in testing.strings("mustHave"):
            entries.add(
                f"test-must-have-{item}",
                type=EntryType.RULE,
                title=f"Must have data-testid: {item}",
                severity=Severity.WARNING,
                description=f"Elements that must have data-testid attributes: {item}",
                tags=["storybook", "testing", "data-testid"],
            )

        for forbidden in testing.strings("forbidden"):
            entries.add(
                f"test-forbidden-{forbidden}",
                type=EntryType.ANTI_PATTERN,
                title=f"Test ID anti-pattern: {forbidden}",
                severity=Severity.WARNING,
                description=forbidden,
                tags=["storybook", "testing", "data-testid", "anti-pattern"],
            )

        for layer, data in testing.mapping("dataTestIdByLayer"):
            if layer == "description":
                continue
            # A layer is either a plain description or {format, examples}
            if isinstance(data.value, str):
                description, example = data.text(), None
            else:
                description, example = f"Format: {data.text('format')}", data.joined("examples")
            entries.add(
                f"testid-layer-{layer}",
                type=EntryType.PATTERN,
                title=f"Test ID layer: {layer}",
                severity=Severity.SUGGESTION,
                description=description,
                example=example,
                tags=["storybook", "testing", "data-testid", layer],
            )
