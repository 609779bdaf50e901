# ABOUTME: Tests for logger utilities: operation and extraction-step decorators and context managers
# ABOUTME: Decorators must return results unchanged and re-raise failures after logging them

import pytest

from design_intel.utils.logging import (
    LogContext,
    get_logger,
    log_extraction_step,
    with_domain_context,
    with_operation_context,
    with_pipeline_context,
)
from design_intel.utils.logging.utils import generate_operation_id


class TestOperationContext:
    def test_returns_result(self):
        @with_operation_context("unit_operation")
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"

    def test_reraises(self):
        @with_operation_context("unit_operation")
        def explode():
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            explode()


class TestExtractionStep:
    def test_returns_result(self):
        class Extractor:
            @log_extraction_step("extract_domain")
            def extract(self, domain, source_dir):
                return [domain, source_dir]

        assert Extractor().extract("spacing", "/tmp") == ["spacing", "/tmp"]

    def test_reraises(self):
        @log_extraction_step("extract_domain")
        def extract(domain):
            raise KeyError(domain)

        with pytest.raises(KeyError):
            extract(domain="typography")


class TestContexts:
    def test_domain_context_binds_domain(self):
        with with_domain_context("storybook") as log:
            assert log._context["domain"] == "storybook"

    def test_pipeline_context_binds_operation(self):
        with with_pipeline_context("convert", output_dir="bundles") as log:
            assert log._context["pipeline"] == "convert"
            assert log._context["output_dir"] == "bundles"
            assert len(log._context["operation_id"]) == 8

    def test_context_does_not_swallow_exceptions(self):
        with pytest.raises(RuntimeError):
            with LogContext(get_logger(), step="x"):
                raise RuntimeError("fail")


def test_operation_ids_are_unique():
    assert len({generate_operation_id() for _ in range(50)}) == 50
