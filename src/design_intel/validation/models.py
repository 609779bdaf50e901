# ABOUTME: Validation report models: one verdict per bundle file plus the corpus-wide summary
# ABOUTME: Issues are collected, never raised, so a single pass audits the whole output directory

from pydantic import BaseModel, Field


class BundleReport(BaseModel):
    """Verdict for one bundle file."""

    file: str
    domain: str | None = None
    entry_count: int = 0
    issues: list[str] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.issues

    @property
    def status(self) -> str:
        return "PASS" if self.passed else "FAIL"


class ValidationReport(BaseModel):
    """Summary over every bundle in the output directory."""

    directory: str
    bundles: list[BundleReport] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list, description="Problems with the directory itself")
    unique_ids: int = 0
    cross_bundle_duplicates: list[str] = Field(default_factory=list)

    @property
    def total_entries(self) -> int:
        return sum(bundle.entry_count for bundle in self.bundles)

    @property
    def total_issues(self) -> int:
        return len(self.errors) + sum(len(bundle.issues) for bundle in self.bundles)

    @property
    def passed(self) -> bool:
        return self.total_issues == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def lines(self) -> list[str]:
        """Deterministic plain-text rendering: per-bundle verdicts, issues, then the summary."""
        output = [f"ERROR  {error}" for error in self.errors]
        for bundle in self.bundles:
            output.append(f"{bundle.status}  {bundle.file}: {bundle.entry_count} entries, {len(bundle.issues)} issues")
            output.extend(f"  {issue}" for issue in bundle.issues)

        output += [
            "",
            "--- Summary ---",
            f"Bundles: {len(self.bundles)}",
            f"Total entries: {self.total_entries}",
            f"Total issues: {self.total_issues}",
            f"Unique IDs: {self.unique_ids}",
        ]
        if self.cross_bundle_duplicates:
            output.append(f"Cross-bundle duplicate IDs: {', '.join(self.cross_bundle_duplicates)}")
        output += ["", f"Result: {'ALL PASS' if self.passed else 'ISSUES FOUND'}"]
        return output
