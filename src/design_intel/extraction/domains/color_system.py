# ABOUTME: Color-system intelligence: color contexts, harmony principles, depth layering and dark mode
# ABOUTME: Reads color-intelligence.json, design-advanced.json and design-enhancements.json

from collections.abc import Mapping

from design_intel.core.models import EntryType, Severity, TargetDomain
from design_intel.extraction.base import BaseDomainExtractor, EntryBuilder
from design_intel.extraction.documents import SourceDocument


def describe_context(context: SourceDocument) -> str:
    """Summarize one color context: description, light/dark backgrounds and variant names."""
    details = []
    if context.has("description"):
        details.append(context.text("description"))
    if context.has("solid"):
        light = context.text("solid", "light", "bg", default="") or context.text("light", "bg", default="N/A")
        dark = context.text("solid", "dark", "bg", default="") or context.text("dark", "bg", default="N/A")
        details.append(f"Light: {light}, Dark: {dark}")
    elif context.has("light"):
        details.append(f"Light: {context.text('light', 'bg')}")
    if context.has("variants"):
        details.append(f"Variants: {', '.join(context.keys('variants'))}")
    return ". ".join(details)


class ColorSystemExtractor(BaseDomainExtractor):
    domain = TargetDomain.COLOR_SYSTEM.value
    documents = ("color-intelligence.json", "design-advanced.json", "design-enhancements.json")

    def collect(self, entries: EntryBuilder, docs: Mapping[str, SourceDocument]) -> None:
        self._colors(entries, docs["color-intelligence.json"])
        self._depth(entries, docs["design-advanced.json"].section("depthLayering"))
        self._dark_mode(entries, docs["design-enhancements.json"].section("darkMode"))

    def _colors(self, entries: EntryBuilder, colors: SourceDocument) -> None:
        for name, context in colors.mapping("contexts"):
            entries.add(
                f"context-{name}",
                type=EntryType.PATTERN,
                title=f"Color context: {name}",
                severity=Severity.SUGGESTION,
                description=describe_context(context),
                tags=["color-system", "context", name],
            )

        for key, principle in colors.mapping("harmony_principles"):
            if key == "_note":
                continue
            good, bad = principle.text("example", "good"), principle.text("example", "bad")
            entries.add(
                f"harmony-{key}",
                type=EntryType.RULE,
                title=f"Color harmony: {principle.text('rule')}",
                severity=Severity.CRITICAL,
                description=principle.text("formula") or principle.text("rule"),
                why=principle.text("why"),
                example=f"Good: {good}" if good else principle.text("use"),
                counter_example=f"Bad: {bad}" if bad else None,
                tags=["color-system", "harmony", "contrast"],
            )

        for forbidden in colors.items("forbidden"):
            pattern = forbidden.text("pattern")
            entries.add(
                f"forbidden-{pattern}",
                type=EntryType.ANTI_PATTERN,
                title=f"Color forbidden: {pattern}",
                severity=Severity.CRITICAL,
                description=forbidden.text("reason"),
                example=forbidden.joined("examples"),
                tags=["color-system", "forbidden"],
            )

    def _depth(self, entries: EntryBuilder, depth: SourceDocument) -> None:
        for layer in depth.items("layers"):
            name = layer.text("name")
            light = layer.text("light", "name") or layer.text("light", "color", default="N/A")
            entries.add(
                f"depth-layer-{name}",
                type=EntryType.PATTERN,
                title=f"Depth layer: {name} (depth {layer.text('depth')})",
                severity=Severity.SUGGESTION,
                description=f"Use: {layer.text('use')}. Token: {layer.text('token')}",
                example=f"Shadow: {layer.text('shadow', default='none')}. Light: {light}",
                tags=["color-system", "depth", "layering"],
            )

        for anti in depth.items("antiPatterns"):
            pattern = anti.text("pattern")
            entries.add(
                f"depth-antipattern-{pattern}",
                type=EntryType.ANTI_PATTERN,
                title=f"Depth anti-pattern: {pattern}",
                severity=Severity.WARNING,
                description=f"{anti.text('why')}. Fix: {anti.text('fix')}",
                tags=["color-system", "depth", "anti-pattern"],
            )

    def _dark_mode(self, entries: EntryBuilder, dark_mode: SourceDocument) -> None:
        if dark_mode.has("formula"):
            mapping = ", ".join(f"{light} ↔ {dark.text()}" for light, dark in dark_mode.mapping("mapping"))
            entries.add(
                "dark-mode-formula",
                type=EntryType.RULE,
                title=f"Dark mode formula: {dark_mode.text('formula')}",
                severity=Severity.CRITICAL,
                description=f"Shade mapping: {mapping}",
                tags=["color-system", "dark-mode", "formula"],
            )

        if dark_mode.has("semanticTokens"):
            summary = " | ".join(
                f"{category}: "
                + "; ".join(
                    f"{name}: light={values.text('light')}, dark={values.text('dark')}"
                    for name, values in tokens.mapping()
                )
                for category, tokens in dark_mode.mapping("semanticTokens")
            )
            entries.add(
                "dark-mode-semantic-tokens",
                type=EntryType.PATTERN,
                title="Dark mode semantic tokens",
                severity=Severity.SUGGESTION,
                description=summary,
                tags=["color-system", "dark-mode", "semantic-tokens"],
            )

        if dark_mode.has("antiPattern"):
            anti = dark_mode.text("antiPattern")
            entries.add(
                "dark-mode-antipattern",
                type=EntryType.ANTI_PATTERN,
                title=f"Dark mode anti-pattern: {anti}",
                severity=Severity.CRITICAL,
                description=anti,
                tags=["color-system", "dark-mode", "anti-pattern"],
            )
