"""Benchmarks for Option type.

Run with: pytest benchmarks/bench_option.py --benchmark-only -v
"""

from fnkit import Nothing, Some, optional

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation, including the None check."""
        benchmark(Some, 42)

    def test_optional_none(self, benchmark):
        """Benchmark optional() on None."""
        benchmark(optional, None)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_some_map(self, benchmark):
        some = Some(5)
        benchmark(some.map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        benchmark(Nothing.map, lambda x: x * 2)

    def test_some_if_none(self, benchmark):
        some = Some(5)
        benchmark(some.if_none, 0)

    def test_nothing_if_none(self, benchmark):
        benchmark(Nothing.if_none, 0)

    def test_some_match(self, benchmark):
        some = Some(5)
        benchmark(some.match, lambda x: x + 1, lambda: 0)

    def test_some_equals_bare_value(self, benchmark):
        some = Some(5)
        benchmark(some.__eq__, 5)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionChaining:
    """Benchmark chained Option operations."""

    def test_some_chain_3(self, benchmark):
        def chain():
            return Some(5).map(lambda x: x + 1).map(lambda x: x * 2).bind(lambda x: Some(x - 1))

        benchmark(chain)

    def test_nothing_chain_3(self, benchmark):
        """Benchmark 3-step chain on Nothing (should short-circuit)."""

        def chain():
            return Nothing.map(lambda x: x + 1).map(lambda x: x * 2).bind(lambda x: Some(x - 1))

        benchmark(chain)

    def test_alternative_chain(self, benchmark):
        def chain():
            return Nothing | Nothing | Some(3)

        benchmark(chain)


# =============================================================================
# Conversion benchmarks
# =============================================================================


class TestOptionConversion:
    """Benchmark Option conversions."""

    def test_some_to_result(self, benchmark):
        some = Some(42)
        benchmark(some.to_result, "error")

    def test_nothing_to_result(self, benchmark):
        benchmark(Nothing.to_result, "error")
