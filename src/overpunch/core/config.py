"""Settings for the overpunch tooling using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class BenchmarkConfig(BaseSettings):
    """Inputs for scripts/benchmark.py."""

    model_config = {"env_prefix": "OVERPUNCH_BENCH_"}

    iterations: int = 10000
    picture: str = "s9(7)v99"
    decimals: int = 2
    encode_value: str = "225.8"
    decode_raw: str = "123{"


class AppSettings(BaseSettings):
    """Root settings aggregating all sub-configs."""

    model_config = {"env_prefix": "OVERPUNCH_"}

    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    bench: BenchmarkConfig = BenchmarkConfig()
