# ABOUTME: Pure normalizers shared by every extractor
# ABOUTME: Derives stable id fragments from free text and canonicalizes source severity labels

import re
from typing import Any

from design_intel.core.models import Severity

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

_SEVERITY_LABELS: dict[str, Severity] = {
    "error": Severity.CRITICAL,
    "critical": Severity.CRITICAL,
    "warning": Severity.WARNING,
}


def slugify(text: str) -> str:
    """Lowercase ``text`` and collapse every non ``[a-z0-9]`` run into one hyphen.

    Distinct inputs can produce the same slug; the bundle validator reports
    the resulting id collisions.
    """
    return _NON_ALNUM.sub("-", text.lower()).strip("-")


def map_severity(label: Any) -> Severity:
    """Map an arbitrary source severity label onto the closed taxonomy.

    ``error``/``critical`` become critical, ``warning`` stays warning and
    anything else, including ``None``, is a suggestion.
    """
    if isinstance(label, Severity):
        return label
    if not isinstance(label, str):
        return Severity.SUGGESTION
    return _SEVERITY_LABELS.get(label, Severity.SUGGESTION)
