# ABOUTME: Immutable domain -> extractor mapping built once at process start
# ABOUTME: Passed explicitly to the pipeline; also derives which domains each source document feeds

from collections.abc import Mapping
from types import MappingProxyType

from design_intel.core.models import TARGET_DOMAINS
from design_intel.extraction.base import DomainExtractor
from design_intel.extraction.domains import (
    AccessibilityExtractor,
    ColorSystemExtractor,
    ComponentsExtractor,
    DesignTokensExtractor,
    SpacingExtractor,
    StorybookExtractor,
    TypographyExtractor,
    UxPatternsExtractor,
)
from design_intel.extraction.errors import RegistryError

ExtractorRegistry = Mapping[str, DomainExtractor]


def build_registry() -> ExtractorRegistry:
    """Create the read-only registry covering every target domain."""
    extractors: tuple[DomainExtractor, ...] = (
        DesignTokensExtractor(),
        ComponentsExtractor(),
        StorybookExtractor(),
        AccessibilityExtractor(),
        TypographyExtractor(),
        SpacingExtractor(),
        ColorSystemExtractor(),
        UxPatternsExtractor(),
    )
    registry = MappingProxyType({extractor.domain: extractor for extractor in extractors})
    check_registry(registry)
    return registry


def check_registry(registry: ExtractorRegistry) -> None:
    """Ensure the registry maps exactly the target domains.

    Raises:
        RegistryError: If a target domain has no extractor or an unknown domain is registered
    """
    missing = [domain for domain in TARGET_DOMAINS if domain not in registry]
    unknown = sorted(set(registry) - set(TARGET_DOMAINS))
    if missing or unknown:
        details = []
        if missing:
            details.append(f"missing extractors for: {', '.join(missing)}")
        if unknown:
            details.append(f"unknown domains: {', '.join(unknown)}")
        raise RegistryError("; ".join(details))


def resolve_extractor(registry: ExtractorRegistry, domain: str) -> DomainExtractor:
    """Look up the extractor for ``domain``.

    Raises:
        RegistryError: If no extractor is registered for the domain
    """
    try:
        return registry[domain]
    except KeyError:
        raise RegistryError(f"no extractor registered for domain '{domain}'") from None


def source_mapping(registry: ExtractorRegistry) -> dict[str, list[str]]:
    """Document filename -> domains reading it, in first-use order."""
    mapping: dict[str, list[str]] = {}
    for domain in TARGET_DOMAINS:
        extractor = registry.get(domain)
        if extractor is None:
            continue
        for document in extractor.documents:
            mapping.setdefault(document, []).append(domain)
    return mapping
