# ABOUTME: Design-token intelligence: forbidden token usages, selection priority and per-component guidance
# ABOUTME: Reads token-rules.json, design-foundations.json and guidance.json

import re
from collections.abc import Mapping

from design_intel.core.models import EntryType, Severity, TargetDomain
from design_intel.core.normalize import map_severity
from design_intel.extraction.base import BaseDomainExtractor, EntryBuilder
from design_intel.extraction.documents import SourceDocument

# Violations that concern raw colour/spacing values rather than tokens
TOKEN_RELATED = re.compile(r"color|hex|rgb|hsl|bg-|text-|#[0-9]", re.IGNORECASE)


class DesignTokensExtractor(BaseDomainExtractor):
    domain = TargetDomain.DESIGN_TOKENS.value
    documents = ("token-rules.json", "design-foundations.json", "guidance.json")

    def collect(self, entries: EntryBuilder, docs: Mapping[str, SourceDocument]) -> None:
        self._token_rules(entries, docs["token-rules.json"])
        self._foundation_violations(entries, docs["design-foundations.json"])
        self._component_guidance(entries, docs["guidance.json"])

    def _token_rules(self, entries: EntryBuilder, rules: SourceDocument) -> None:
        for forbidden in rules.items("forbidden"):
            pattern = forbidden.text("pattern")
            entries.add(
                f"forbidden-{pattern}",
                type=EntryType.RULE,
                title=f"Forbidden: {pattern}",
                severity=map_severity(forbidden.get("severity")),
                description=forbidden.text("reason"),
                context="Token usage validation",
                tags=["tokens", "forbidden", "validation"],
            )

        priority = rules.section("tokenSelectionPriority")
        for rank in priority.items("priority"):
            level, kind = rank.text("rank"), rank.text("type")
            entries.add(
                f"priority-rank-{level}-{kind}",
                type=EntryType.PATTERN,
                title=f"Token Priority {level}: {kind}",
                severity=Severity.CRITICAL,
                description=f"{rank.text('when')}. Examples: {rank.joined('examples')}",
                context=priority.text("rule"),
                why=priority.joined("whySemantic", sep="; "),
                tags=["tokens", "priority", "semantic", kind.lower()],
            )

        if rules.has("stylingRules"):
            styling = rules.section("stylingRules")
            entries.add(
                "styling-prefer-tailwind",
                type=EntryType.RULE,
                title="Prefer Tailwind classes over inline styles",
                severity=Severity.WARNING,
                description=styling.text("prefer"),
                context=f"Avoid !important: {styling.text('avoidImportant')}",
                tags=["tokens", "styling", "tailwind"],
            )

        if rules.has("recommendations"):
            mappings = ", ".join(f"{raw} → {token.text()}" for raw, token in rules.mapping("recommendations"))
            entries.add(
                "recommendations-map",
                type=EntryType.PATTERN,
                title="Token replacement recommendations",
                severity=Severity.SUGGESTION,
                description=f"Common color-to-token mappings: {mappings}",
                tags=["tokens", "migration", "recommendations"],
            )

    def _foundation_violations(self, entries: EntryBuilder, foundations: SourceDocument) -> None:
        for violation in foundations.items("validation", "commonViolations"):
            pattern, issue = violation.text("pattern"), violation.text("issue")
            if not (TOKEN_RELATED.search(pattern) or TOKEN_RELATED.search(issue)):
                continue
            auto_fix = violation.section("autoFix")
            fix_example = None
            if violation.has("autoFix"):
                fix_example = f"Auto-fix: {auto_fix.text('find')} → {auto_fix.text('replace')}"
            entries.add(
                f"violation-{pattern}",
                type=EntryType.RULE,
                title=issue,
                severity=map_severity(violation.get("severity")),
                description=violation.text("fix"),
                example=fix_example,
                tags=["tokens", "validation", "violation"],
            )

    def _component_guidance(self, entries: EntryBuilder, guidance: SourceDocument) -> None:
        for component, variants in guidance.mapping():
            token_list = "; ".join(
                f"{variant}: " + ", ".join(f"{name}: {value.text()}" for name, value in tokens.mapping())
                for variant, tokens in variants.mapping()
            )
            entries.add(
                f"guidance-{component}",
                type=EntryType.PATTERN,
                title=f"Token guidance: {component}",
                severity=Severity.SUGGESTION,
                description=f"Recommended tokens for {component} component: {token_list}",
                tags=["tokens", "guidance", component],
            )
