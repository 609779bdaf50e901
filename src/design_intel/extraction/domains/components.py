# ABOUTME: Component intelligence: variant philosophy, API limits, architecture, shadcn catalogue and clean code
# ABOUTME: Reads the eight component-oriented source documents

from collections.abc import Mapping

from design_intel.core.models import EntryType, Severity, TargetDomain
from design_intel.extraction.base import BaseDomainExtractor, EntryBuilder
from design_intel.extraction.documents import SourceDocument


class ComponentsExtractor(BaseDomainExtractor):
    domain = TargetDomain.COMPONENTS.value
    documents = (
        "variant-philosophy.json",
        "component-dev-intelligence.json",
        "component-usage-patterns.json",
        "api-constraints.json",
        "architecture-patterns.json",
        "shadcn-intelligence.json",
        "stabilization-patterns.json",
        "clean-code-rules.json",
    )

    def collect(self, entries: EntryBuilder, docs: Mapping[str, SourceDocument]) -> None:
        self._variants(entries, docs["variant-philosophy.json"])
        self._dev_intelligence(entries, docs["component-dev-intelligence.json"])
        self._usage(entries, docs["component-usage-patterns.json"])
        self._api_constraints(entries, docs["api-constraints.json"])
        self._architecture(entries, docs["architecture-patterns.json"])
        self._shadcn(entries, docs["shadcn-intelligence.json"])
        self._stabilization(entries, docs["stabilization-patterns.json"])
        self._clean_code(entries, docs["clean-code-rules.json"])

    def _variants(self, entries: EntryBuilder, variants: SourceDocument) -> None:
        for criterion in variants.items("whenToReject", "autoRejectCriteria"):
            signal = criterion.text("signal")
            entries.add(
                f"variant-reject-{signal}",
                type=EntryType.ANTI_PATTERN,
                title=f"Variant rejection: {signal}",
                severity=Severity.WARNING,
                description=criterion.text("reason"),
                example=f"Bad: {criterion.text('example')}",
                tags=["components", "variants", "anti-pattern"],
            )

        semantic = variants.section("semanticVsCosmetic")
        if semantic.has("statusVariants"):
            status = semantic.section("statusVariants")
            listing = "; ".join(f"{v.text('name')}: {v.text('meaning')}" for v in status.items("variants"))
            entries.add(
                "semantic-status-variants",
                type=EntryType.PATTERN,
                title="Semantic status variants",
                severity=Severity.CRITICAL,
                description=f"{status.text('description')}. {listing}",
                tags=["components", "variants", "semantic"],
            )

        if semantic.has("actionVariants"):
            action = semantic.section("actionVariants")
            listing = "; ".join(f"{v.text('name')}: {v.text('use')}" for v in action.items("variants"))
            entries.add(
                "semantic-action-variants",
                type=EntryType.PATTERN,
                title="Semantic action variants",
                severity=Severity.CRITICAL,
                description=f"{action.text('description')}. {listing}",
                tags=["components", "variants", "semantic", "actions"],
            )

        for signal in variants.items("antiPatterns", "signals"):
            name = signal.text("signal")
            entries.add(
                f"variant-antipattern-{name}",
                type=EntryType.ANTI_PATTERN,
                title=f"Variant anti-pattern: {name}",
                severity=Severity.WARNING,
                description=signal.text("fix"),
                example=f"Bad: {signal.text('example')}",
                tags=["components", "variants", "anti-pattern"],
            )

    def _dev_intelligence(self, entries: EntryBuilder, intel: SourceDocument) -> None:
        for question in intel.items("preBuild", "gate", "questions"):
            text = question.text("question")
            entries.add(
                f"prebuild-{text}",
                type=EntryType.RULE,
                title=f"Pre-build gate: {text}",
                severity=Severity.CRITICAL,
                description=f"If yes: {question.text('ifYes')}. If no: {question.text('ifNo')}",
                tags=["components", "pre-build", "gate"],
            )

        for flag in intel.items("redFlags", "signals"):
            signal = flag.text("signal")
            entries.add(
                f"redflag-{signal}",
                type=EntryType.ANTI_PATTERN,
                title=f"Red flag: {signal}",
                severity=Severity.WARNING,
                description=flag.text("action"),
                tags=["components", "red-flags"],
            )

        if intel.has("apiDesign", "the333Rule"):
            entries.add(
                "api-333-rule",
                type=EntryType.PATTERN,
                title="The 3-3-3 Rule for component APIs",
                severity=Severity.CRITICAL,
                description=intel.joined("apiDesign", "the333Rule", "rules", sep=". "),
                tags=["components", "api-design", "rule"],
            )

    def _usage(self, entries: EntryBuilder, usage: SourceDocument) -> None:
        for forbidden in usage.items("composition", "forbidden"):
            pattern = forbidden.text("pattern")
            entries.add(
                f"composition-forbidden-{pattern}",
                type=EntryType.ANTI_PATTERN,
                title=f"Forbidden composition: {pattern}",
                severity=Severity.CRITICAL,
                description=forbidden.text("why"),
                counter_example=forbidden.text("fix"),
                tags=["components", "composition", "forbidden"],
            )

    def _api_constraints(self, entries: EntryBuilder, constraints: SourceDocument) -> None:
        for constraint in constraints.items("propLimits", "constraints"):
            name = constraint.text("name")
            entries.add(
                f"api-constraint-{name}",
                type=EntryType.RULE,
                title=f"API constraint: {name} (limit: {constraint.text('limit')})",
                severity=Severity.CRITICAL,
                description=f"{constraint.text('rationale')}. Action: {constraint.text('action')}",
                tags=["components", "api-constraints", "props"],
            )

        for anti in constraints.items("antiPatterns"):
            pattern = anti.text("pattern")
            entries.add(
                f"api-antipattern-{pattern}",
                type=EntryType.ANTI_PATTERN,
                title=f"API anti-pattern: {pattern}",
                severity=Severity.WARNING,
                description=f"Issue: {anti.text('issue')}. Fix: {anti.text('fix')}",
                tags=["components", "api-constraints", "anti-pattern"],
            )

    def _architecture(self, entries: EntryBuilder, architecture: SourceDocument) -> None:
        for level, data in architecture.mapping("atomicLevels"):
            entries.add(
                f"atomic-{level}",
                type=EntryType.PATTERN,
                title=f"Atomic level: {level} — {data.text('definition')}",
                severity=Severity.SUGGESTION,
                description=data.text("description"),
                example=f"Examples: {data.joined('examples')}",
                context=f"State: {data.text('stateManagement', 'approach', default='N/A')}",
                tags=["components", "architecture", "atomic-design", level.lower()],
            )

        for anti in architecture.items("antiPatterns"):
            pattern = anti.text("pattern")
            entries.add(
                f"arch-antipattern-{pattern}",
                type=EntryType.ANTI_PATTERN,
                title=f"Architecture anti-pattern: {pattern}",
                severity=Severity.WARNING,
                description=f"Problem: {anti.text('problem')}. Fix: {anti.text('fix')}",
                tags=["components", "architecture", "anti-pattern"],
            )

    def _shadcn(self, entries: EntryBuilder, shadcn: SourceDocument) -> None:
        for component in shadcn.items("components"):
            primitive = component.text("radixPrimitive")
            entries.add(
                f"shadcn-{component.text('slug')}",
                type=EntryType.PATTERN,
                title=f"shadcn/ui: {component.text('name')}",
                severity=Severity.SUGGESTION,
                description=component.text("description"),
                example=component.text("installCmd"),
                context=f"Radix primitive: {primitive}" if primitive else None,
                tags=["components", "shadcn", component.text("category"), *component.strings("features")],
                applies_to=component.strings("subComponents"),
            )

    def _stabilization(self, entries: EntryBuilder, stabilization: SourceDocument) -> None:
        for safe in stabilization.items("safeChanges", "patterns"):
            pattern = safe.text("pattern")
            entries.add(
                f"safe-change-{pattern}",
                type=EntryType.PATTERN,
                title=f"Safe change: {pattern}",
                severity=Severity.SUGGESTION,
                description=safe.text("implementationNotes"),
                example=safe.joined("examples", sep="; "),
                tags=["components", "stabilization", "safe-changes", safe.text("riskLevel").lower()],
            )

        for breaking in stabilization.items("breakingChanges", "highRisk"):
            change = breaking.text("changeType")
            entries.add(
                f"breaking-change-{change}",
                type=EntryType.RULE,
                title=f"Breaking change risk: {change}",
                severity=Severity.CRITICAL,
                description=f"Mitigation: {breaking.text('mitigationStrategy')}",
                example=breaking.joined("examples", sep="; "),
                tags=["components", "stabilization", "breaking-changes"],
            )

    def _clean_code(self, entries: EntryBuilder, clean_code: SourceDocument) -> None:
        for anti in clean_code.items("anti-patterns"):
            pattern = anti.text("pattern")
            entries.add(
                f"clean-code-{pattern}",
                type=EntryType.ANTI_PATTERN,
                title=f"Clean code: {pattern}",
                severity=Severity.WARNING,
                description=f"Problem: {anti.text('problem')}. Fix: {anti.text('fix')}",
                tags=["components", "clean-code", "anti-pattern"],
            )

        # Only the Critical and Warning size targets are actionable
        for target in clean_code.items("functions", "sizeTargets"):
            status = target.text("status")
            if status not in ("Critical", "Warning"):
                continue
            entries.add(
                f"function-size-{status}",
                type=EntryType.RULE,
                title=f"Function size {status}: {target.text('lines')} lines",
                severity=Severity.CRITICAL if status == "Critical" else Severity.WARNING,
                description=target.text("action"),
                tags=["components", "clean-code", "function-size"],
            )

        for limit in clean_code.items("file-limits", "limits"):
            file_type = limit.text("fileType")
            entries.add(
                f"file-limit-{file_type}",
                type=EntryType.RULE,
                title=f"File limit: {file_type} max {limit.text('maxLines')} lines",
                severity=Severity.WARNING,
                description=limit.text("actionWhenExceeded"),
                tags=["components", "clean-code", "file-limits"],
            )
