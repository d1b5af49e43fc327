"""Benchmarks for Result type and combinators.

Run with: pytest benchmarks/bench_result.py --benchmark-only -v
"""

from fnkit import Error, Fail, Ok, collect, safe, traverse

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark Result creation."""

    def test_ok_creation(self, benchmark):
        benchmark(Ok, 42)

    def test_fail_creation(self, benchmark):
        error = Error("error")
        benchmark(Fail, error)

    def test_fail_from_exception(self, benchmark):
        exc = ValueError("error")
        benchmark(Fail.from_exception, exc)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestMethodCalls:
    """Benchmark Result method calls."""

    def test_ok_map(self, benchmark):
        ok = Ok(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_ok_bind(self, benchmark):
        ok = Ok(5)
        benchmark(ok.bind, lambda x: Ok(x * 2))

    def test_fail_bind(self, benchmark):
        fail = Fail(Error("error"))
        benchmark(fail.bind, lambda x: Ok(x * 2))

    def test_ok_match(self, benchmark):
        ok = Ok(5)
        benchmark(ok.match, lambda x: x, lambda e: 0)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestChaining:
    """Benchmark chained operations."""

    def test_ok_chain_10(self, benchmark):
        def chain():
            result = Ok(0)
            for _ in range(10):
                result = result.bind(lambda x: Ok(x + 1))
            return result

        benchmark(chain)

    def test_fail_chain_10(self, benchmark):
        """Benchmark 10-step chain on Fail (should short-circuit)."""

        def chain():
            result = Fail(Error("error"))
            for _ in range(10):
                result = result.bind(lambda x: Ok(x + 1))
            return result

        benchmark(chain)


# =============================================================================
# Safe decorator benchmarks
# =============================================================================


class TestSafeDecorator:
    """Benchmark @safe decorator overhead."""

    def test_safe_success(self, benchmark):
        @safe
        def succeed() -> int:
            return 42

        benchmark(succeed)

    def test_safe_failure(self, benchmark):
        @safe
        def fail() -> int:
            raise ValueError("error")

        benchmark(fail)


# =============================================================================
# Traverse benchmarks
# =============================================================================


class TestTraverse:
    """Benchmark traverse and collect."""

    def test_traverse_100(self, benchmark):
        values = list(range(100))
        benchmark(traverse, values, Ok)

    def test_collect_100(self, benchmark):
        results = [Ok(i) for i in range(100)]
        benchmark(collect, results)

    def test_collect_with_early_fail(self, benchmark):
        results = [Ok(1), Fail(Error("error")), *[Ok(i) for i in range(98)]]
        benchmark(collect, results)
