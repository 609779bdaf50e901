# ABOUTME: UX pattern intelligence: UX laws, defensive design, badges, dialogs, UX writing and response times
# ABOUTME: Reads ux-laws.json, defensive-design.json, ui-patterns.json, dialog-patterns.json, ux-writing.json,
# ABOUTME: design-advanced.json and performance-constraints.json

from collections.abc import Mapping

from design_intel.core.models import EntryType, Severity, TargetDomain
from design_intel.core.normalize import slugify
from design_intel.extraction.base import BaseDomainExtractor, EntryBuilder
from design_intel.extraction.documents import SourceDocument


def response_time_severity(duration: str) -> Severity:
    """Delays from 400ms up need visible feedback; faster ones are advisory."""
    if "400" in duration or "> 1" in duration:
        return Severity.WARNING
    return Severity.SUGGESTION


class UxPatternsExtractor(BaseDomainExtractor):
    domain = TargetDomain.UX_PATTERNS.value
    documents = (
        "ux-laws.json",
        "defensive-design.json",
        "ui-patterns.json",
        "dialog-patterns.json",
        "ux-writing.json",
        "design-advanced.json",
        "performance-constraints.json",
    )

    def collect(self, entries: EntryBuilder, docs: Mapping[str, SourceDocument]) -> None:
        self._ux_laws(entries, docs["ux-laws.json"])
        self._defensive_design(entries, docs["defensive-design.json"])
        self._badges(entries, docs["ui-patterns.json"])
        self._dialogs(entries, docs["dialog-patterns.json"])
        self._ux_writing(entries, docs["ux-writing.json"])
        self._advanced(entries, docs["design-advanced.json"])
        self._performance(entries, docs["performance-constraints.json"])

    def _ux_laws(self, entries: EntryBuilder, ux_laws: SourceDocument) -> None:
        for law in ux_laws.items("coreLaws"):
            name = law.text("name")
            entries.add(
                f"law-{name}",
                type=EntryType.PATTERN,
                title=f"UX Law: {name}",
                severity=Severity.WARNING,
                description=f"{law.text('rule')}. Application: {law.text('application')}",
                example=law.joined("tokens"),
                counter_example=law.joined("violations"),
                tags=["ux-patterns", "ux-laws", slugify(name)],
            )

        for principle in ux_laws.items("gestaltPrinciples"):
            name = principle.text("name")
            entries.add(
                f"gestalt-{name}",
                type=EntryType.PATTERN,
                title=f"Gestalt: {name}",
                severity=Severity.SUGGESTION,
                description=principle.text("meaning"),
                example=principle.joined("tokens"),
                tags=["ux-patterns", "gestalt", name.lower()],
            )

        if ux_laws.has("buttonColorSemantics"):
            semantics = ux_laws.section("buttonColorSemantics")
            rules = "; ".join(
                f"{variant}: {data.text('use')} (not for: {data.text('notFor')})"
                for variant, data in semantics.mapping("rules")
            )
            entries.add(
                "button-color-semantics",
                type=EntryType.RULE,
                title="Button color semantics",
                severity=Severity.CRITICAL,
                description=f"{semantics.text('critical')}. {rules}",
                why=semantics.joined("rationale", sep="; "),
                tags=["ux-patterns", "buttons", "color", "semantics"],
            )

        if ux_laws.has("actionOverflow"):
            overflow = ux_laws.section("actionOverflow")
            entries.add(
                "action-overflow",
                type=EntryType.RULE,
                title="Action overflow rule",
                severity=Severity.WARNING,
                description=overflow.text("critical"),
                counter_example=overflow.joined("violations", sep="; "),
                tags=["ux-patterns", "actions", "overflow", "hicks-law"],
            )

    def _defensive_design(self, entries: EntryBuilder, defensive: SourceDocument) -> None:
        for layer in defensive.items("validationLevel", "architecture", "layers"):
            name = layer.text("layer")
            entries.add(
                f"validation-layer-{name}",
                type=EntryType.PATTERN,
                title=f"Validation layer: {name}",
                severity=Severity.SUGGESTION,
                description=(
                    f"{layer.text('role')}. Has validation: {layer.text('hasValidation')}. "
                    f"Action: {layer.text('action')}"
                ),
                context=f"Analogy: {layer.text('analogy')}",
                tags=["ux-patterns", "defensive-design", "validation"],
            )

        for level in defensive.items("dataError", "gracefulDegradationLevels"):
            name = level.text("level")
            entries.add(
                f"degradation-{name}",
                type=EntryType.PATTERN,
                title=f"Graceful degradation: {name}",
                severity=Severity.SUGGESTION,
                description=f"{level.text('behavior')}. When: {level.text('when')}",
                tags=["ux-patterns", "defensive-design", "error-handling", "degradation"],
            )

    def _badges(self, entries: EntryBuilder, ui_patterns: SourceDocument) -> None:
        for status, badge in ui_patterns.mapping("statusBadges", "statuses"):
            entries.add(
                f"status-badge-{status}",
                type=EntryType.PATTERN,
                title=f"Status badge: {badge.text('name')}",
                severity=Severity.SUGGESTION,
                description=(
                    f"{badge.text('meaning')}. Color: {badge.text('semanticColor')}. Icon: {badge.text('icon')}"
                ),
                tags=["ux-patterns", "status", "badges", status],
            )

        for priority, badge in ui_patterns.mapping("priorityBadges", "priorities"):
            animation = f". Animation: {badge.text('animation')}" if badge.has("animation") else ""
            entries.add(
                f"priority-badge-{priority}",
                type=EntryType.PATTERN,
                title=f"Priority badge: {badge.text('name')}",
                severity=Severity.SUGGESTION,
                description=f"Color: {badge.text('semanticColor')}. Icon: {badge.text('icon')}{animation}",
                tags=["ux-patterns", "priority", "badges", priority],
            )

    def _dialogs(self, entries: EntryBuilder, dialogs: SourceDocument) -> None:
        for selection in dialogs.items("selectionByFieldCount"):
            field_range, pattern = selection.text("range"), selection.text("recommendedPattern")
            entries.add(
                f"container-selection-{field_range}-fields",
                type=EntryType.RULE,
                title=f"Container selection: {field_range} fields → {pattern}",
                severity=Severity.WARNING,
                description=f"Complexity: {selection.text('complexity')}. Examples: {selection.joined('examples')}",
                tags=["ux-patterns", "dialog", "container-selection", pattern],
            )

        for anti in dialogs.items("antiPatterns"):
            practice = anti.text("badPractice")
            entries.add(
                f"dialog-antipattern-{practice}",
                type=EntryType.ANTI_PATTERN,
                title=f"Dialog anti-pattern: {practice}",
                severity=Severity.WARNING,
                description=f"Problem: {anti.text('problem')}. Solution: {anti.text('solution')}",
                tags=["ux-patterns", "dialog", "anti-pattern"],
            )

    def _ux_writing(self, entries: EntryBuilder, writing: SourceDocument) -> None:
        for name, pattern in writing.mapping("patterns"):
            # Only patterns carrying both guidance and examples become entries
            if not (pattern.has("do") and pattern.has("examples")):
                continue
            entries.add(
                f"ux-writing-{name}",
                type=EntryType.PATTERN,
                title=f"UX writing: {pattern.text('title') or name}",
                severity=Severity.SUGGESTION,
                description=pattern.joined("do", sep=". "),
                example=pattern.joined("examples", "good", sep="; "),
                counter_example=pattern.joined("examples", "bad", sep="; "),
                tags=["ux-patterns", "ux-writing", name],
            )

        for rule in writing.items("goldenRules", "values"):
            text = rule.text("rule")
            entries.add(
                f"writing-rule-{text}",
                type=EntryType.RULE,
                title=f"UX writing rule: {text}",
                severity=Severity.WARNING,
                description=rule.text("description"),
                tags=["ux-patterns", "ux-writing", "golden-rules"],
            )

    def _advanced(self, entries: EntryBuilder, advanced: SourceDocument) -> None:
        for name, container in advanced.mapping("containerPatterns", "patterns"):
            entries.add(
                f"container-{name}",
                type=EntryType.PATTERN,
                title=f"Container pattern: {name}",
                severity=Severity.SUGGESTION,
                description=(
                    f"Use for: {container.joined('useFor')}. Fields: {container.text('fields') or 'Variable'}. "
                    f"Complexity: {container.text('complexity')}"
                ),
                tags=["ux-patterns", "containers", name],
            )

        for name, handling in advanced.mapping("errorHandling", "patterns"):
            entries.add(
                f"error-handling-{name}",
                type=EntryType.PATTERN,
                title=f"Error handling: {name}",
                severity=Severity.SUGGESTION,
                description=f"Use: {handling.text('use')}. {handling.text('rule')}",
                tags=["ux-patterns", "error-handling", name],
            )

    def _performance(self, entries: EntryBuilder, performance: SourceDocument) -> None:
        for threshold in performance.items("responseTime", "thresholds"):
            duration = threshold.text("duration")
            entries.add(
                f"response-time-{duration}",
                type=EntryType.RULE,
                title=f"Response time {duration}: {threshold.text('perception')}",
                severity=response_time_severity(duration),
                description=f"Required feedback: {threshold.text('requiredFeedback')}",
                tags=["ux-patterns", "performance", "response-time"],
            )
