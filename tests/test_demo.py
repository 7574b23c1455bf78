"""Tests for demo data generation."""

import random
from datetime import date

from ecommerce_insights.services.comparison import compare_periods
from ecommerce_insights.services.demo import DEMO_HEADER, generate_demo_csv
from ecommerce_insights.services.ingestion import parse_csv


def test_generate_demo_csv_covers_two_periods_ending_today() -> None:
    text = generate_demo_csv(today=date(2024, 3, 14), rng=random.Random(7))

    lines = text.split("\n")
    assert lines[0] == DEMO_HEADER
    assert len(lines) == 15
    assert lines[1].startswith("2024-03-01,")
    assert lines[-1].startswith("2024-03-14,")


def test_generate_demo_csv_shows_ad_spend_cut() -> None:
    text = generate_demo_csv(today=date(2024, 3, 14), rng=random.Random(7))

    result = compare_periods(parse_csv(text))

    assert 40 * 7 <= result.previous_period.total_orders <= 49 * 7
    assert 15 * 7 <= result.current_period.total_orders <= 19 * 7
    assert result.delta.revenue_pct < 0
    assert result.delta.ad_spend_pct < -50
    assert 60 <= result.previous_period.aov <= 70
    assert 62 <= result.current_period.aov <= 70


def test_generate_demo_csv_is_reproducible_with_seed() -> None:
    first = generate_demo_csv(today=date(2024, 3, 14), rng=random.Random(1))
    second = generate_demo_csv(today=date(2024, 3, 14), rng=random.Random(1))

    assert first == second


def test_generate_demo_csv_respects_period_length() -> None:
    text = generate_demo_csv(
        today=date(2024, 3, 14), rng=random.Random(3), period_length=3
    )

    records = parse_csv(text)

    assert len(records) == 6
    assert compare_periods(records, period_length=3).period_length == 3
