# ABOUTME: Accessibility intelligence: a11y violations, required patterns, keyboard/screen-reader/contrast rules
# ABOUTME: Reads design-foundations.json, component-usage-patterns.json and ux-laws.json

from collections.abc import Mapping

from design_intel.core.models import EntryType, Severity, TargetDomain
from design_intel.core.normalize import map_severity
from design_intel.extraction.base import BaseDomainExtractor, EntryBuilder
from design_intel.extraction.documents import SourceDocument


def find_law(ux_laws: SourceDocument, name: str) -> SourceDocument | None:
    """First core law called ``name``, if the document lists one."""
    return next((law for law in ux_laws.items("coreLaws") if law.get("name") == name), None)


class AccessibilityExtractor(BaseDomainExtractor):
    domain = TargetDomain.ACCESSIBILITY.value
    documents = ("design-foundations.json", "component-usage-patterns.json", "ux-laws.json")

    def collect(self, entries: EntryBuilder, docs: Mapping[str, SourceDocument]) -> None:
        self._validation(entries, docs["design-foundations.json"].section("validation"))
        self._usage(entries, docs["component-usage-patterns.json"].section("accessibility"))
        self._ux_laws(entries, docs["ux-laws.json"])

    def _validation(self, entries: EntryBuilder, validation: SourceDocument) -> None:
        for violation in validation.items("accessibilityViolations"):
            issue = violation.text("issue")
            entries.add(
                f"violation-{issue}",
                type=EntryType.RULE,
                title=issue,
                severity=map_severity(violation.get("severity")),
                description=violation.text("fix"),
                context=f"Pattern: {violation.text('pattern')}",
                tags=["accessibility", "validation", "violation"],
            )

        for required in validation.items("requiredPatterns"):
            context = required.text("context")
            entries.add(
                f"required-{context}-{required.text('pattern')}",
                type=EntryType.RULE,
                title=f"Required: {required.text('issue')}",
                severity=map_severity(required.get("severity")),
                description=required.text("fix"),
                context=f"Context: {context}",
                applies_to=required.strings("appliesTo"),
                tags=["accessibility", "required-patterns", context],
            )

    def _usage(self, entries: EntryBuilder, usage: SourceDocument) -> None:
        # Keyboard and screen-reader support is never optional
        for rule in usage.strings("keyboardNavigation"):
            entries.add(
                f"keyboard-{rule}",
                type=EntryType.PATTERN,
                title=f"Keyboard: {rule}",
                severity=Severity.CRITICAL,
                description=rule,
                tags=["accessibility", "keyboard", "navigation"],
            )

        for rule in usage.strings("screenReaders"):
            entries.add(
                f"screenreader-{rule}",
                type=EntryType.PATTERN,
                title=f"Screen reader: {rule}",
                severity=Severity.CRITICAL,
                description=rule,
                tags=["accessibility", "screen-reader", "aria"],
            )

        for rule in usage.strings("colorContrast"):
            entries.add(
                f"contrast-{rule}",
                type=EntryType.RULE,
                title=f"Color contrast: {rule}",
                severity=Severity.CRITICAL,
                description=rule,
                tags=["accessibility", "color", "contrast", "wcag"],
            )

    def _ux_laws(self, entries: EntryBuilder, ux_laws: SourceDocument) -> None:
        fitts = find_law(ux_laws, "Fitts's Law")
        if fitts is not None:
            entries.add(
                "fitts-law-touch-targets",
                type=EntryType.RULE,
                title="Fitts's Law: minimum touch target size",
                severity=Severity.CRITICAL,
                description=f"{fitts.text('rule')}. Application: {fitts.text('application')}",
                example=fitts.joined("tokens"),
                counter_example=fitts.joined("violations"),
                tags=["accessibility", "touch-target", "fitts-law", "mobile"],
            )

        cognitive_load = find_law(ux_laws, "Cognitive Load")
        if cognitive_load is not None:
            entries.add(
                "cognitive-load",
                type=EntryType.RULE,
                title="Cognitive Load: reduce unnecessary mental burden",
                severity=Severity.WARNING,
                description=f"{cognitive_load.text('rule')}. Application: {cognitive_load.text('application')}",
                counter_example=cognitive_load.joined("violations"),
                tags=["accessibility", "cognitive-load", "usability"],
            )
