"""Time the overpunch codec entry points.

Usage:
    python scripts/benchmark.py --iterations 100000 --picture "s9(7)v99"
"""

from __future__ import annotations

import argparse
import timeit
from decimal import Decimal
from typing import Callable

from overpunch import decode, decode_with_picture, encode, encode_with_picture
from overpunch.core.config import AppSettings, BenchmarkConfig
from overpunch.core.log import configure_logging


def _cases(config: BenchmarkConfig) -> dict[str, Callable[[], object]]:
    value = Decimal(config.encode_value)
    return {
        "decode_with_picture": lambda: decode_with_picture(config.decode_raw, config.picture),
        "encode_with_picture": lambda: encode_with_picture(value, config.picture),
        "decode": lambda: decode(config.decode_raw, config.decimals),
        "encode": lambda: encode(value, config.decimals),
    }


def run_benchmarks(config: BenchmarkConfig) -> dict[str, float]:
    """Return total seconds spent per entry point over ``config.iterations`` calls."""
    return {
        name: timeit.timeit(case, number=config.iterations)
        for name, case in _cases(config).items()
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--iterations", type=int, default=None)
    parser.add_argument("--picture", default=None)
    args = parser.parse_args(argv)

    settings = AppSettings()
    configure_logging(settings)

    overrides = {k: v for k, v in (("iterations", args.iterations), ("picture", args.picture)) if v is not None}
    config = settings.bench.model_copy(update=overrides)

    print(f"Benchmarking {config.iterations} calls (picture={config.picture!r})")
    for name, elapsed in run_benchmarks(config).items():
        print(f"  {name:<22} {elapsed / config.iterations * 1e9:10.0f} ns/call")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
