import logging

import pytest

from magical_miles.core.correlation import (
    CorrelationFilter,
    current_correlation_id,
    with_correlation,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "quote", None, None)


@pytest.mark.unit
class TestCorrelation:
    def test_no_correlation_by_default(self):
        assert current_correlation_id.get() is None

    def test_context_sets_and_resets(self):
        with with_correlation("req-123"):
            assert current_correlation_id.get() == "req-123"
        assert current_correlation_id.get() is None

    def test_nested_contexts_restore_outer(self):
        with with_correlation("outer"):
            with with_correlation("inner"):
                assert current_correlation_id.get() == "inner"
            assert current_correlation_id.get() == "outer"

    def test_filter_adds_correlation_id(self):
        record = _record()
        with with_correlation("req-abc"):
            assert CorrelationFilter().filter(record)
        assert record.correlation_id == "req-abc"

    def test_filter_placeholder_outside_context(self):
        record = _record()
        CorrelationFilter().filter(record)
        assert record.correlation_id == "-"
