"""Benchmark: tag resolution latency (p50/p95/mean).

Measures per-call latency of method and class resolution on a five-level
hierarchy, once the interface index is warm.
"""
from __future__ import annotations

import json
import sys
import time
from dataclasses import dataclass
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import metatag
from metatag import Inherited, MethodRef, Tag, interface

_WARMUP: int = 100
_ITERATIONS: int = 3_000


@Inherited()
@dataclass(frozen=True)
class Component(Tag):
    value: str = ""


@dataclass(frozen=True)
class Timed(Tag):
    value: float = 1.0


@interface
class Handler:
    @Timed(0.25)
    def handle(self, request): ...


@Component("root")
class Level0(Handler):
    def handle(self, request):
        return request


class Level1(Level0):
    def handle(self, request):
        return request


class Level2(Level1):
    def handle(self, request):
        return request


class Level3(Level2):
    def handle(self, request):
        return request


class Level4(Level3):
    def handle(self, request):
        return request


def _measure(operation: str, call) -> dict[str, object]:
    for _ in range(_WARMUP):
        call()

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        call()
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": operation,
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def bench_method_latency() -> dict[str, object]:
    """Benchmark resolving a tag found on an interface five levels up.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    method = MethodRef.of(Level4, "handle")
    return _measure(
        "resolve_on_method_depth5",
        lambda: metatag.resolve_on_method(method, Timed),
    )


def bench_type_latency() -> dict[str, object]:
    """Benchmark resolving an inherited class tag five levels up."""
    return _measure(
        "resolve_on_type_depth5",
        lambda: metatag.resolve_on_type(Level4, Component),
    )


if __name__ == "__main__":
    results = [bench_method_latency(), bench_type_latency()]
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(results, fh, indent=2)
    print(f"Results saved to {output_path}")
