# ABOUTME: Bundle validator: re-reads persisted bundles and checks schema and id uniqueness invariants
# ABOUTME: Reports every defect (by entry index and id) instead of stopping at the first one

import json
from pathlib import Path
from typing import Any

from design_intel.core.models import REQUIRED_FIELDS, VALID_SEVERITIES, VALID_TYPES
from design_intel.utils.logging import get_logger, with_operation_context
from design_intel.validation.models import BundleReport, ValidationReport

OPTIONAL_TEXT_FIELDS = ("context", "example", "counterExample", "why")


def _is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def check_entry(entry: Any, bundle_domain: Any) -> list[str]:
    """Schema problems of a single entry, without the index/id prefix."""
    if not isinstance(entry, dict):
        return ["entry must be a JSON object"]

    problems = []
    for field in REQUIRED_FIELDS:
        value = entry.get(field)
        if value is None:
            problems.append(f"missing required field '{field}'")
        elif _is_blank(value):
            problems.append(f"empty required field '{field}'")

    tags = entry.get("tags")
    if tags is not None and not isinstance(tags, list):
        problems.append("'tags' must be an array")
    elif isinstance(tags, list) and not _is_string_list(tags):
        problems.append("'tags' must contain only strings")

    entry_type = entry.get("type")
    if entry_type not in (None, "") and (not isinstance(entry_type, str) or entry_type not in VALID_TYPES):
        problems.append(f"invalid type '{entry_type}'")

    severity = entry.get("severity")
    if severity not in (None, "") and (not isinstance(severity, str) or severity not in VALID_SEVERITIES):
        problems.append(f"invalid severity '{severity}'")

    domain = entry.get("domain")
    if isinstance(domain, str) and domain.strip() and isinstance(bundle_domain, str) and domain != bundle_domain:
        problems.append(f"domain '{domain}' does not match bundle domain '{bundle_domain}'")

    for field in OPTIONAL_TEXT_FIELDS:
        if field in entry and not isinstance(entry[field], str):
            problems.append(f"'{field}' must be a string")
    if "appliesTo" in entry and not _is_string_list(entry["appliesTo"]):
        problems.append("'appliesTo' must be an array of strings")

    return problems


class BundleValidator:
    """Validate every ``*.json`` bundle of an output directory.

    Ids are tracked across bundles in the order files are read (sorted by
    filename); an id already owned by another bundle is a cross-bundle
    duplicate and counts as an issue of the bundle where it reappears.
    """

    def __init__(self):
        self.logger = get_logger(__name__)
        self._id_owner: dict[str, str] = {}
        self._cross_duplicates: list[str] = []

    @with_operation_context("bundle_validation")
    def validate_directory(self, directory: Path) -> ValidationReport:
        directory = Path(directory)
        self._id_owner = {}
        self._cross_duplicates = []
        report = ValidationReport(directory=str(directory))

        if not directory.is_dir():
            report.errors.append(f"bundle directory not found: {directory}")
            return report

        for path in sorted(directory.glob("*.json")):
            bundle_report = self.validate_file(path)
            if bundle_report.issues:
                self.logger.warning("Bundle failed validation", file=path.name, issues=len(bundle_report.issues))
            report.bundles.append(bundle_report)

        report.unique_ids = len(self._id_owner)
        report.cross_bundle_duplicates = list(self._cross_duplicates)
        return report

    def validate_file(self, path: Path) -> BundleReport:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            return BundleReport(file=path.name, issues=[f"[bundle] unreadable bundle: {e}"])
        return self.validate_bundle(path.name, data)

    def validate_bundle(self, file: str, data: Any) -> BundleReport:
        """Check one parsed bundle, accumulating ids into the cross-bundle index."""
        if not isinstance(data, dict):
            return BundleReport(file=file, issues=["[bundle] bundle must be a JSON object"])

        domain = data.get("domain")
        report = BundleReport(file=file, domain=domain if isinstance(domain, str) else None)
        for field in ("domain", "version"):
            value = data.get(field)
            if value is None:
                report.issues.append(f"[bundle] missing bundle field '{field}'")
            elif not isinstance(value, str) or not value.strip():
                report.issues.append(f"[bundle] invalid bundle field '{field}'")

        entries = data.get("entries")
        if not isinstance(entries, list):
            report.issues.append("[bundle] 'entries' must be an array")
            return report

        report.entry_count = len(entries)
        local_ids: set[str] = set()
        for index, entry in enumerate(entries):
            entry_id = entry.get("id") if isinstance(entry, dict) else None
            label = entry_id if isinstance(entry_id, str) and entry_id else "(no id)"
            prefix = f"[{index}] {label}"

            report.issues.extend(f"{prefix}: {problem}" for problem in check_entry(entry, domain))

            if not isinstance(entry_id, str) or not entry_id.strip():
                continue
            if entry_id in local_ids:
                report.issues.append(f"{prefix}: duplicate ID within bundle")
                continue
            local_ids.add(entry_id)

            owner = self._id_owner.setdefault(entry_id, file)
            if owner != file:
                report.issues.append(f"{prefix}: duplicate ID across bundles (first seen in {owner})")
                if entry_id not in self._cross_duplicates:
                    self._cross_duplicates.append(entry_id)

        return report
