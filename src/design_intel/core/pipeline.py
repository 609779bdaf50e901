# ABOUTME: Pipeline driver: runs every domain extractor in fixed order and persists one bundle per domain
# ABOUTME: Fails fast on a fatal extraction error; bundles written for earlier domains stay on disk

from collections.abc import Callable, Sequence
from pathlib import Path

from pydantic import BaseModel, Field

from design_intel.core.models import TARGET_DOMAINS, IntelligenceBundle
from design_intel.extraction.registry import ExtractorRegistry, check_registry, resolve_extractor
from design_intel.utils.logging import get_logger, with_domain_context, with_operation_context

logger = get_logger(__name__)


class DomainResult(BaseModel):
    """Outcome of extracting and persisting one domain."""

    domain: str
    entry_count: int = Field(ge=0)
    path: Path


class PipelineReport(BaseModel):
    """Counts reported after a complete pipeline run."""

    version: str
    output_dir: Path
    domains: list[DomainResult] = Field(default_factory=list)

    @property
    def total_entries(self) -> int:
        return sum(result.entry_count for result in self.domains)

    @property
    def counts(self) -> dict[str, int]:
        return {result.domain: result.entry_count for result in self.domains}


def bundle_path(output_dir: Path, domain: str) -> Path:
    """Bundle file for ``domain`` inside ``output_dir``."""
    return Path(output_dir) / f"{domain}.json"


class BundlePipeline:
    """Extract, wrap and persist one bundle per target domain.

    The registry is passed in explicitly and must cover every target domain;
    domains are processed strictly in ``TARGET_DOMAINS`` order.
    """

    def __init__(self, registry: ExtractorRegistry, version: str = "1.0.0", domains: Sequence[str] = TARGET_DOMAINS):
        check_registry(registry)
        self.registry = registry
        self.version = version
        self.domains = tuple(domains)

    def build_bundle(self, domain: str, source_dir: Path) -> IntelligenceBundle:
        """Run the domain's extractor and wrap its entries; nothing is written."""
        extractor = resolve_extractor(self.registry, domain)
        entries = extractor.extract(domain, Path(source_dir))
        return IntelligenceBundle(domain=domain, version=self.version, entries=entries)

    @staticmethod
    def write_bundle(bundle: IntelligenceBundle, output_dir: Path) -> Path:
        """Persist ``bundle`` as pretty-printed UTF-8 JSON, replacing any previous file."""
        path = bundle_path(output_dir, bundle.domain)
        path.write_text(bundle.to_json() + "\n", encoding="utf-8")
        return path

    @with_operation_context("bundle_conversion")
    def run(
        self,
        source_dir: Path,
        output_dir: Path,
        on_bundle: Callable[[DomainResult], None] | None = None,
    ) -> PipelineReport:
        """Convert the corpus in ``source_dir`` into bundles under ``output_dir``.

        Args:
            source_dir: Directory holding the source JSON documents
            output_dir: Directory bundles are written to, created if absent
            on_bundle: Called after each bundle is written

        Returns:
            Per-domain counts and paths

        Raises:
            SourceDocumentError: If a required document is missing or not valid JSON
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        report = PipelineReport(version=self.version, output_dir=output_dir)

        for domain in self.domains:
            with with_domain_context(domain) as log:
                bundle = self.build_bundle(domain, source_dir)
                path = self.write_bundle(bundle, output_dir)
                result = DomainResult(domain=domain, entry_count=len(bundle.entries), path=path)
                log.info("Wrote bundle", entries=result.entry_count, path=str(path))

            report.domains.append(result)
            if on_bundle is not None:
                on_bundle(result)

        logger.info("Conversion complete", total_entries=report.total_entries, domains=len(report.domains))
        return report
