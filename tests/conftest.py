# ABOUTME: Shared pytest fixtures: a realistic knowledge-base corpus and empty/partial corpora built on the fly
# ABOUTME: The fixture corpus under tests/fixtures/corpus feeds every target domain with a handful of records

import json
import shutil
from pathlib import Path

import pytest

from design_intel.extraction import build_registry, source_mapping

FIXTURE_CORPUS = Path(__file__).parent / "fixtures" / "corpus"

# Entry counts produced from the fixture corpus, in processing order
EXPECTED_COUNTS = {
    "design-tokens": 6,
    "components": 19,
    "storybook": 11,
    "accessibility": 7,
    "typography": 7,
    "spacing": 8,
    "color-system": 8,
    "ux-patterns": 18,
}


def all_documents() -> list[str]:
    """Every source document some extractor reads."""
    return list(source_mapping(build_registry()))


def write_document(directory: Path, name: str, content) -> Path:
    path = directory / name
    path.write_text(json.dumps(content), encoding="utf-8")
    return path


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """A writable copy of the fixture corpus."""
    target = tmp_path / "corpus"
    shutil.copytree(FIXTURE_CORPUS, target)
    return target


@pytest.fixture
def empty_corpus(tmp_path: Path) -> Path:
    """Every required document present, each an empty object."""
    target = tmp_path / "empty"
    target.mkdir()
    for name in all_documents():
        write_document(target, name, {})
    return target


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "bundles"
