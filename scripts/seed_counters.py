#!/usr/bin/env python3
"""
CaseTrend Counter Seeder

Writes synthetic daily case/death counters for one series into Redis using the
same key layout as the ingestion job, with random gaps, then optionally prints
the reconstructed report.

Usage:
    python scripts/seed_counters.py --series france
    python scripts/seed_counters.py --series united-kingdom --days 60 --gap-rate 0.2 --show
    python scripts/seed_counters.py --series france --no-today --seed 7
"""

import argparse
import logging
import random
import sys
from datetime import datetime, timezone
from pathlib import Path

import redis
import structlog

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from casetrend.config import get_settings
from casetrend.engine.countries import country_name
from casetrend.engine.errors import InvalidSeriesKeyError
from casetrend.engine.key_parser import daily_key, key_prefix, normalize_series_key
from casetrend.models.enums import Metric
from casetrend.services.report_service import SeriesReportService
from casetrend.storage.redis_storage import RedisCounterStore
from casetrend.utils.clock import MS_PER_DAY, utc_now_ms

logger = structlog.get_logger()


def generate_counters(
    series_key: str,
    days: int,
    gap_rate: float,
    include_today: bool,
    rng: random.Random,
) -> dict[str, str]:
    """
    Build the key/value pairs for `days` days ending today (UTC midnight grid).

    Returns:
        Mapping of store key to decimal string value
    """
    today = utc_now_ms() // MS_PER_DAY * MS_PER_DAY
    first = today - (days - 1) * MS_PER_DAY

    counters: dict[str, str] = {}
    total_cases = 0
    total_deaths = 0
    level = rng.randint(50, 500)

    for i in range(days):
        day = first + i * MS_PER_DAY
        if day == today and not include_today:
            continue
        if 0 < i < days - 1 and rng.random() < gap_rate:
            continue
        level = max(0, int(level * rng.uniform(0.85, 1.2)))
        deaths = int(level * rng.uniform(0.005, 0.03))
        counters[daily_key(Metric.CASES, series_key, day)] = str(level)
        counters[daily_key(Metric.DEATHS, series_key, day)] = str(deaths)
        total_cases += level
        total_deaths += deaths

    counters[key_prefix(Metric.CASES, series_key)] = str(total_cases)
    counters[key_prefix(Metric.DEATHS, series_key)] = str(total_deaths)
    return counters


def main():
    """Main entry point for the counter seeding script."""
    parser = argparse.ArgumentParser(
        description="Seed Redis with synthetic daily counters for CaseTrend"
    )
    parser.add_argument("--series", type=str, required=True, help="Series key, e.g. france")
    parser.add_argument(
        "--days", type=int, default=30, help="Number of days to generate (default: 30)"
    )
    parser.add_argument(
        "--gap-rate",
        type=float,
        default=0.1,
        help="Probability that a day has no entry (default: 0.1)",
    )
    parser.add_argument(
        "--no-today",
        action="store_true",
        default=False,
        help="Leave today without an entry, as before the daily ingestion run",
    )
    parser.add_argument(
        "--travel", type=str, default=None, help="Free-text travel restriction note"
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Random seed for reproducibility (default: 42)"
    )
    parser.add_argument(
        "--show", action="store_true", default=False, help="Print the reconstructed report"
    )
    args = parser.parse_args()

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    settings = get_settings()
    try:
        series_key = normalize_series_key(args.series)
        country_name(series_key)
    except InvalidSeriesKeyError as e:
        print(f"\n{e}\n")
        sys.exit(1)

    counters = generate_counters(
        series_key,
        days=args.days,
        gap_rate=args.gap_rate,
        include_today=not args.no_today,
        rng=random.Random(args.seed),
    )
    if args.travel:
        counters[key_prefix(Metric.TRAVEL, series_key)] = args.travel

    try:
        client = redis.Redis.from_url(settings.redis_url, decode_responses=True)
        client.mset(counters)
    except redis.RedisError as e:
        logger.error("counter_seeding_failed", error=str(e))
        print(f"\nSeeding failed: {e}\n")
        sys.exit(1)

    logger.info("counters_seeded", series_key=series_key, keys=len(counters))

    if args.show:
        service = SeriesReportService(
            store=RedisCounterStore(url=settings.redis_url, client=client),
            policy=settings.parse_policy,
            trend_basis=settings.trend_basis,
        )
        report = service.build_report(series_key)
        generated = datetime.fromtimestamp(report.generated_at / 1000, tz=timezone.utc)

        print("\n" + "=" * 60)
        print(f"{report.display_name} as of {generated:%Y-%m-%d %H:%M} UTC")
        print("=" * 60)
        print(f"  Total cases:   {report.totals.total_cases}")
        print(f"  Total deaths:  {report.totals.total_deaths}")
        if report.series is not None:
            for label, cases, deaths in zip(
                report.series.labels, report.series.case_values, report.series.death_values
            ):
                print(f"  {label:>10}  {cases:>8}  {deaths:>6}")
        print(f"\n  {report.trend_summary or 'Not enough history for a trend comparison.'}")
        if report.travel_restrictions:
            print(f"\n  Travel restrictions: {report.travel_restrictions}")
        print("=" * 60)


if __name__ == "__main__":
    main()
