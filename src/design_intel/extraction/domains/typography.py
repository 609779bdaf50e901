# ABOUTME: Typography intelligence: type scale, golden rules, font requirements and iconography sizing
# ABOUTME: Reads design-foundations.json and design-enhancements.json

import re
from collections.abc import Mapping

from design_intel.core.models import EntryType, Severity, TargetDomain
from design_intel.extraction.base import BaseDomainExtractor, EntryBuilder
from design_intel.extraction.documents import SourceDocument

_WHITESPACE = re.compile(r"\s+")


class TypographyExtractor(BaseDomainExtractor):
    domain = TargetDomain.TYPOGRAPHY.value
    documents = ("design-foundations.json", "design-enhancements.json")

    def collect(self, entries: EntryBuilder, docs: Mapping[str, SourceDocument]) -> None:
        foundations = docs["design-foundations.json"]
        self._type_system(entries, foundations.section("typography"))
        self._font_requirements(entries, foundations)
        self._iconography(entries, docs["design-enhancements.json"].section("iconography"))

    def _type_system(self, entries: EntryBuilder, typography: SourceDocument) -> None:
        for step in typography.items("scale"):
            role = step.text("role")
            entries.add(
                f"scale-{role}",
                type=EntryType.PATTERN,
                title=f"Type scale: {role}",
                severity=Severity.SUGGESTION,
                description=f"{step.text('use')}. Size: {step.text('size')}, weight: {step.text('weight')}",
                example=f"Tailwind: {step.text('tailwind')}",
                tags=["typography", "scale", _WHITESPACE.sub("-", role.lower())],
            )

        for rule in typography.strings("goldenRules"):
            entries.add(
                f"golden-rule-{rule}",
                type=EntryType.RULE,
                title=f"Typography rule: {rule}",
                severity=Severity.WARNING,
                description=rule,
                tags=["typography", "golden-rules"],
            )

        for forbidden in typography.strings("forbidden"):
            entries.add(
                f"forbidden-{forbidden}",
                type=EntryType.ANTI_PATTERN,
                title=f"Typography forbidden: {forbidden}",
                severity=Severity.CRITICAL,
                description=forbidden,
                tags=["typography", "forbidden"],
            )

    def _font_requirements(self, entries: EntryBuilder, foundations: SourceDocument) -> None:
        if not foundations.has("fontRequirements"):
            return
        fonts = foundations.section("fontRequirements")

        formats = ", ".join(
            f"{name}: priority {spec.text('priority')}" + (" (required)" if spec.get("required") else "")
            for name, spec in fonts.mapping("formats")
        )
        entries.add(
            "font-formats",
            type=EntryType.RULE,
            title="Font format requirements",
            severity=Severity.WARNING,
            description=f"Required formats: {formats}. Preference: {fonts.joined('formatPreference', sep=' > ')}",
            tags=["typography", "fonts", "formats"],
        )

        minimum = fonts.joined("minimumWeights")
        entries.add(
            "font-minimum-weights",
            type=EntryType.RULE,
            title=f"Font minimum weights: {minimum}",
            severity=Severity.WARNING,
            description=f"Minimum weights: {minimum}. Recommended: {fonts.joined('recommendedWeights')}",
            tags=["typography", "fonts", "weights"],
        )

    def _iconography(self, entries: EntryBuilder, icons: SourceDocument) -> None:
        for size in icons.items("sizes"):
            name = size.text("name")
            entries.add(
                f"icon-size-{name}",
                type=EntryType.PATTERN,
                title=f"Icon size: {name} ({size.text('px')}px)",
                severity=Severity.SUGGESTION,
                description=f"Use: {size.text('use')}",
                tags=["typography", "iconography", "sizes"],
            )

        if icons.has("forbidden"):
            entries.add(
                "icon-forbidden-emojis",
                type=EntryType.ANTI_PATTERN,
                title=f"Icons forbidden: {icons.text('forbidden')}",
                severity=Severity.CRITICAL,
                description=f"{icons.text('rule')}. Use {icons.text('library')} instead.",
                tags=["typography", "iconography", "forbidden", "emojis"],
            )
