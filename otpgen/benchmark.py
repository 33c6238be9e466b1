"""Benchmark harness for token generation."""

import logging
import time
import uuid
from collections.abc import Callable, Iterable

from otpgen.entropy import EntropySource, default_source
from otpgen.generator import generate, generate_default
from shared.config import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH, get_settings
from shared.logging import benchmark_run_id_ctx, setup_logging
from shared.types import BenchmarkResult, InvalidLengthError

logger = logging.getLogger(__name__)


class CountingEntropySource(EntropySource):
    """Wraps a source and counts the bytes drawn through it."""

    def __init__(self, inner: EntropySource) -> None:
        self.inner = inner
        self.bytes_read = 0

    def read(self, size: int) -> bytes:
        data = self.inner.read(size)
        self.bytes_read += len(data)
        return data


def _time_runs(
    name: str, length: int, iterations: int, call: Callable[[EntropySource], str], source: EntropySource
) -> BenchmarkResult:
    counter = CountingEntropySource(source)

    start = time.perf_counter()
    for _ in range(iterations):
        call(counter)
    elapsed = time.perf_counter() - start

    return BenchmarkResult(
        benchmark=name,
        length=length,
        iterations=iterations,
        total_seconds=elapsed,
        ns_per_token=elapsed * 1e9 / iterations,
        bytes_per_digit=counter.bytes_read / (length * iterations),
    )


def run_benchmark(
    lengths: Iterable[int], iterations: int, source: EntropySource | None = None
) -> list[BenchmarkResult]:
    """Time token generation for each length, plus the default-length wrapper.

    Args:
        lengths: Token lengths to benchmark
        iterations: Tokens generated per benchmark
        source: Byte source to draw from (defaults to the OS CSPRNG)

    Returns:
        One result per length, followed by the generate_default result
    """
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")

    lengths = list(lengths)
    for length in lengths:
        if length < MIN_LENGTH or length > MAX_LENGTH:
            raise InvalidLengthError(length)

    if source is None:
        source = default_source()

    results = []
    for length in lengths:
        result = _time_runs(
            f"generate_{length}", length, iterations, lambda src, n=length: generate(n, src), source
        )
        results.append(result)

    results.append(_time_runs("generate_default", DEFAULT_LENGTH, iterations, generate_default, source))
    return results


def main() -> None:
    """Run the benchmark with settings from the environment and log the results."""
    settings = get_settings()
    setup_logging(settings.log_level)

    run_token = benchmark_run_id_ctx.set(str(uuid.uuid4()))
    try:
        logger.info(
            "Starting benchmark",
            extra={"lengths": settings.benchmark_lengths, "iterations": settings.benchmark_iterations},
        )

        for result in run_benchmark(settings.benchmark_lengths, settings.benchmark_iterations):
            logger.info("Benchmark result", extra=result.model_dump())
    finally:
        benchmark_run_id_ctx.reset(run_token)


if __name__ == "__main__":
    main()
