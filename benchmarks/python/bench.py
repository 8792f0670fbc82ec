# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
mindful-spend micro-benchmark.

Times the pure scheduling and validation core and writes a JSON results
object to stdout. Uses time.perf_counter_ns and statistics from the
standard library.

Usage::

    python bench.py > results/python.json
"""

from __future__ import annotations

import json
import platform
import statistics
import sys
import time
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable

from mindful_spend import (
    Period,
    RecurringSpend,
    Wallet,
    WalletSetup,
    build_period_budget,
    calculate_occurrences_in_period,
    plan_recurring_spends,
    validate_complete_wallet_setup,
    validate_period,
)

# ─── Types ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ScenarioResult:
    name: str
    iterations: int
    ops_per_sec: int
    mean_ns: int
    stdev_ns: int

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "iterations": self.iterations,
            "ops_per_sec": self.ops_per_sec,
            "mean_ns": self.mean_ns,
            "stdev_ns": self.stdev_ns,
        }


@dataclass(frozen=True)
class BenchmarkReport:
    version: str
    runtime: str
    timestamp: str
    scenarios: list[ScenarioResult]

    def to_dict(self) -> dict[str, object]:
        return {
            "version": self.version,
            "runtime": self.runtime,
            "timestamp": self.timestamp,
            "scenarios": [s.to_dict() for s in self.scenarios],
        }


# ─── Timing helpers ───────────────────────────────────────────────────────────


def measure_iterations(fn: Callable[[], None], iterations: int) -> tuple[int, int]:
    """
    Run fn for `iterations` cycles and return (mean_ns, stdev_ns).
    """
    # Warm-up, not included in results
    warmup_count = min(1000, iterations // 10)
    for _ in range(warmup_count):
        fn()

    samples: list[float] = []
    for _ in range(iterations):
        start = time.perf_counter_ns()
        fn()
        end = time.perf_counter_ns()
        samples.append(float(end - start))

    mean_ns = round(statistics.mean(samples))
    stdev_ns = round(statistics.stdev(samples)) if len(samples) > 1 else 0
    return mean_ns, stdev_ns


def to_scenario_result(
    name: str,
    iterations: int,
    fn: Callable[[], None],
) -> ScenarioResult:
    mean_ns, stdev_ns = measure_iterations(fn, iterations)
    ops_per_sec = round(1_000_000_000 / mean_ns) if mean_ns > 0 else 0
    return ScenarioResult(
        name=name,
        iterations=iterations,
        ops_per_sec=ops_per_sec,
        mean_ns=mean_ns,
        stdev_ns=stdev_ns,
    )


# ─── Fixtures ─────────────────────────────────────────────────────────────────

YEAR_START = datetime(2026, 1, 1)
YEAR_END = datetime(2026, 12, 31, 23, 59)

WALLET_SETUP = [
    WalletSetup(name=f"Wallet {n}", spending_limit=100.0 * (n + 1), is_default=(n == 0))
    for n in range(10)
]

PERIOD = Period(
    id="period-bench",
    name="Jan 1 - Dec 31, 2026",
    goals="Benchmark",
    target_spend=5_500.0,
    start_at=YEAR_START,
    end_at=YEAR_END,
    wallet_setup=WALLET_SETUP,
)

WALLETS = [
    Wallet(
        id=f"wallet-{n}",
        account_id="acct-bench",
        period_id="period-bench",
        name=setup.name,
        spending_limit=setup.spending_limit,
        current_balance=setup.spending_limit * 0.75,
        is_default=setup.is_default,
    )
    for n, setup in enumerate(WALLET_SETUP)
]

RECURRING = [
    RecurringSpend(
        id=f"rs-{n}",
        wallet_id=f"wallet-{n % 10}",
        start_date=date(2025, 6, 1),
        description=f"Recurring {n}",
        amount=9.99,
        schedule_frequency=("weekly", "fortnightly", "monthly")[n % 3],
        day_of_week=n % 7,
        day_of_month=(n % 31) + 1,
    )
    for n in range(20)
]

# ─── Standard scenarios ───────────────────────────────────────────────────────

ITERATIONS = 10_000


def bench_weekly_year() -> ScenarioResult:
    recurring = RECURRING[0]

    def run() -> None:
        calculate_occurrences_in_period(recurring, YEAR_START, YEAR_END)

    return to_scenario_result("weekly_occurrences_year", ITERATIONS, run)


def bench_monthly_year() -> ScenarioResult:
    recurring = RECURRING[2]

    def run() -> None:
        calculate_occurrences_in_period(recurring, YEAR_START, YEAR_END)

    return to_scenario_result("monthly_occurrences_year", ITERATIONS, run)


def bench_wallet_setup_validation() -> ScenarioResult:
    def run() -> None:
        validate_complete_wallet_setup(WALLET_SETUP)

    return to_scenario_result("wallet_setup_validation", ITERATIONS, run)


def bench_period_validation() -> ScenarioResult:
    def run() -> None:
        validate_period(PERIOD)

    return to_scenario_result("period_validation", ITERATIONS, run)


def bench_period_budget() -> ScenarioResult:
    def run() -> None:
        build_period_budget(PERIOD, WALLETS)

    return to_scenario_result("period_budget", ITERATIONS, run)


def bench_plan_recurring() -> ScenarioResult:
    def run() -> None:
        planned = plan_recurring_spends(RECURRING, PERIOD, WALLETS, account_id="acct-bench")
        if not planned:
            raise AssertionError("Expected recurring spends to be planned")

    return to_scenario_result("plan_recurring_spends", 200, run)


# ─── Entry point ─────────────────────────────────────────────────────────────


def main() -> None:
    scenarios = [
        bench_weekly_year(),
        bench_monthly_year(),
        bench_wallet_setup_validation(),
        bench_period_validation(),
        bench_period_budget(),
        bench_plan_recurring(),
    ]

    python_version = (
        f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    )
    runtime = f"cpython-{python_version}-{platform.machine()}"

    report = BenchmarkReport(
        version=python_version,
        runtime=runtime,
        timestamp=time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        scenarios=scenarios,
    )

    json.dump(report.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
