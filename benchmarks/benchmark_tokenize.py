"""Benchmark calclex tokenization.

Run with:
    pytest benchmarks/benchmark_tokenize.py -v --benchmark-only

Or for a quick timing:
    python benchmarks/benchmark_tokenize.py
"""

import time


def build_large_expression(n: int = 4000) -> str:
    terms = [f"({i} + x{'y' * (i % 5)}) * {i * 7}" for i in range(n)]
    return " - ".join(terms)


def benchmark_calclex(source: str, iterations: int = 20) -> float:
    """Average seconds per tokenize() call."""
    from calclex import tokenize

    # Warmup
    tokenize(source)

    start = time.perf_counter()
    for _ in range(iterations):
        tokenize(source)
    elapsed = time.perf_counter() - start

    return elapsed / iterations


def main() -> None:
    source = build_large_expression()
    avg = benchmark_calclex(source)
    print(f"Input: {len(source):,} chars")
    print(f"calclex: {avg * 1000:.2f} ms/run ({len(source) / avg / 1e6:.2f} M chars/s)")


# pytest-benchmark integration
try:
    import pytest

    @pytest.mark.benchmark(group="tokenize-small")
    def test_benchmark_small_expressions(benchmark, small_expressions):
        """Benchmark a batch of short expressions."""
        from calclex import tokenize

        def run_all():
            for source in small_expressions:
                tokenize(source)

        benchmark(run_all)

    @pytest.mark.benchmark(group="tokenize-large")
    def test_benchmark_large_expression(benchmark, large_expression):
        """Benchmark a ~100KB expression."""
        from calclex import tokenize

        result = benchmark(tokenize, large_expression)
        assert result.ok

    @pytest.mark.benchmark(group="tokenize-large")
    def test_benchmark_late_failure(benchmark, large_expression):
        """Benchmark an input that fails on its last character."""
        from calclex import tokenize

        result = benchmark(tokenize, large_expression + " @")
        assert not result.ok

except ImportError:
    pass  # pytest not available


if __name__ == "__main__":
    main()
