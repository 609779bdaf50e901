# ABOUTME: Spacing intelligence: the 4pt/8pt two-layer system, spacing tokens, layout anti-patterns and radii
# ABOUTME: Reads design-foundations.json and design-advanced.json

from collections.abc import Mapping

from design_intel.core.models import EntryType, Severity, TargetDomain
from design_intel.core.normalize import map_severity
from design_intel.extraction.base import BaseDomainExtractor, EntryBuilder
from design_intel.extraction.documents import SourceDocument


class SpacingExtractor(BaseDomainExtractor):
    domain = TargetDomain.SPACING.value
    documents = ("design-foundations.json", "design-advanced.json")

    def collect(self, entries: EntryBuilder, docs: Mapping[str, SourceDocument]) -> None:
        self._spacing(entries, docs["design-foundations.json"].section("spacing"))
        self._border_radius(entries, docs["design-advanced.json"].section("borderRadius"))

    def _spacing(self, entries: EntryBuilder, spacing: SourceDocument) -> None:
        if spacing.has("layers"):
            layers = spacing.section("layers")
            entries.add(
                "two-layer-system",
                type=EntryType.PATTERN,
                title="Two-layer spacing system: precision (4pt) + rhythm (8pt)",
                severity=Severity.CRITICAL,
                description=layers.text("description"),
                example=f"Precision: {layers.text('precision', 'role')}. Rhythm: {layers.text('rhythm', 'role')}",
                tags=["spacing", "layers", "system", "4pt", "8pt"],
            )

        for token in spacing.items("tokens"):
            name = token.text("name")
            entries.add(
                f"token-{name}",
                type=EntryType.PATTERN,
                title=f"Spacing token: {name} ({token.text('px')}px)",
                severity=Severity.SUGGESTION,
                description=f"Use: {token.text('use')}. Layer: {token.text('layer')}",
                example=f"Tailwind: {token.text('tailwind')}",
                tags=["spacing", "tokens", token.text("layer")],
            )

        for forbidden in spacing.strings("forbidden"):
            entries.add(
                f"forbidden-{forbidden}",
                type=EntryType.ANTI_PATTERN,
                title=f"Spacing forbidden: {forbidden}",
                severity=Severity.CRITICAL,
                description=forbidden,
                tags=["spacing", "forbidden"],
            )

        for name, anti in spacing.mapping("layoutAntiPatterns"):
            entries.add(
                f"layout-antipattern-{name}",
                type=EntryType.ANTI_PATTERN,
                title=f"Layout anti-pattern: {name}",
                severity=map_severity(anti.get("severity") or "warning"),
                description=anti.text("description"),
                why=anti.text("rule"),
                counter_example=anti.text("fix"),
                tags=["spacing", "layout", "anti-pattern"],
            )

        principles = spacing.section("principles")
        for rule in principles.strings("rules"):
            entries.add(
                f"principle-{rule}",
                type=EntryType.RULE,
                title=f"Spacing principle: {rule}",
                severity=Severity.WARNING,
                description=rule,
                context=principles.text("corePhilosophy"),
                tags=["spacing", "principles", "white-space"],
            )

    def _border_radius(self, entries: EntryBuilder, radius: SourceDocument) -> None:
        for token in radius.items("tokens"):
            name = token.text("name")
            entries.add(
                f"border-radius-{name}",
                type=EntryType.PATTERN,
                title=f"Border radius: {name} ({token.text('px')}px)",
                severity=Severity.SUGGESTION,
                description=f"Use: {token.text('use')}",
                example=f"Tailwind: {token.text('tailwind')}",
                tags=["spacing", "border-radius", "tokens"],
            )

        if radius.has("nestedFormula"):
            formula = radius.section("nestedFormula")
            examples = "; ".join(
                f"inner {e.text('inner')} + padding {e.text('padding')} = outer {e.text('outer')}"
                for e in formula.items("examples")
            )
            entries.add(
                "nested-radius-formula",
                type=EntryType.RULE,
                title=f"Nested border radius: {formula.text('rule')}",
                severity=Severity.WARNING,
                description=f"{formula.text('rule')}. {examples}",
                tags=["spacing", "border-radius", "nested", "formula"],
            )
