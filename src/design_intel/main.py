# ABOUTME: Main CLI application entry point using asyncclick
# ABOUTME: Provides commands to convert the knowledge base into bundles and to validate written bundles

from pathlib import Path

import asyncclick as click
from rich.console import Console

from design_intel.config import get_config
from design_intel.core.pipeline import BundlePipeline, DomainResult
from design_intel.extraction import ExtractionError, build_registry, source_mapping
from design_intel.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_pipeline_context,
)
from design_intel.utils.rich_tables import (
    create_domain_sources_table,
    create_logging_status_table,
    create_source_mapping_table,
    print_rich_table,
)
from design_intel.validation import BundleValidator

console = Console()

DirectoryPath = click.Path(path_type=Path, file_okay=False)


def _print_line(line: str, style: str | None = None) -> None:
    """Print report text verbatim: no markup, highlighting or wrapping."""
    console.print(line, style=style, markup=False, highlight=False, soft_wrap=True)


@click.command()
@click.option("--source-dir", type=DirectoryPath, default=None, help="Source documents directory (overrides config)")
@click.option("--output-dir", type=DirectoryPath, default=None, help="Bundle output directory (overrides config)")
@click.option("--bundle-version", default=None, help="Version stamped on every bundle")
def convert(source_dir: Path | None, output_dir: Path | None, bundle_version: str | None):
    """
    🏗️ Convert the design knowledge base into one intelligence bundle per domain.
    """
    config = get_config()
    source_dir = source_dir or config.source_dir
    output_dir = output_dir or config.output_dir
    version = bundle_version or config.bundle_version

    def announce(result: DomainResult) -> None:
        _print_line(f"{result.domain}: {result.entry_count} entries → {result.path}")

    try:
        with with_pipeline_context("convert", source_dir=str(source_dir), output_dir=str(output_dir)) as logger:
            logger.info("Starting conversion", version=version)
            pipeline = BundlePipeline(build_registry(), version=version)
            report = pipeline.run(source_dir, output_dir, on_bundle=announce)
    except ExtractionError as e:
        _print_line(f"❌ {e}", style="red")
        raise click.exceptions.Exit(1)

    _print_line("")
    _print_line(f"Total: {report.total_entries} entries across {len(report.domains)} domains")


@click.command()
@click.option("--output-dir", type=DirectoryPath, default=None, help="Bundle directory to validate (overrides config)")
def validate(output_dir: Path | None):
    """
    🔎 Validate every bundle: required fields, enumerations and id uniqueness.

    Exits with status 1 when any issue is found.
    """
    directory = output_dir or get_config().output_dir

    with with_pipeline_context("validate", output_dir=str(directory)) as logger:
        report = BundleValidator().validate_directory(directory)
        logger.info("Validation complete", total_issues=report.total_issues, bundles=len(report.bundles))

    for line in report.lines():
        if line.startswith("PASS") or line == "Result: ALL PASS":
            style = "green"
        elif line.startswith(("FAIL", "ERROR")) or line == "Result: ISSUES FOUND":
            style = "red"
        else:
            style = None
        _print_line(line, style=style)

    if report.exit_code:
        raise click.exceptions.Exit(report.exit_code)


@click.command()
def domains():
    """
    🗂️ List target domains and the source documents they read.
    """
    registry = build_registry()
    documents = {domain: tuple(extractor.documents) for domain, extractor in registry.items()}
    print_rich_table(console, create_domain_sources_table(documents))
    print_rich_table(console, create_source_mapping_table(source_mapping(registry)))


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else config.log_mode

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Write structured JSON logs to stderr instead of log files")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🎨 Design Intel - normalized design/UX intelligence bundles

    Turn the design knowledge base into versioned per-domain bundles of
    patterns, anti-patterns and rules, and audit the result.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(convert)
app.add_command(validate)
app.add_command(domains)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
