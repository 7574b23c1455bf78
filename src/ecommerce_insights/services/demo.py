"""Synthetic demo data for trying the analysis without a real export."""

import random
from datetime import date, timedelta

from ecommerce_insights.services.comparison import DEFAULT_PERIOD_LENGTH

DEMO_HEADER = "date,revenue,orders,ad_spend"


def generate_demo_csv(
    today: date | None = None,
    rng: random.Random | None = None,
    period_length: int = DEFAULT_PERIOD_LENGTH,
) -> str:
    """Return CSV text for two periods ending today.

    The earlier period is healthy. In the latest period ad spend is cut
    sharply, orders fall with it and AOV stays roughly flat.
    """
    end = today or date.today()
    generator = rng or random.Random()
    days = period_length * 2
    rows = [DEMO_HEADER]
    for offset in range(days - 1, -1, -1):
        day = end - timedelta(days=offset)
        if offset >= period_length:
            ad_spend = 500 + generator.random() * 50
            orders = 40 + generator.randrange(10)
            revenue = orders * (60 + generator.random() * 10)
        else:
            ad_spend = 200 + generator.random() * 20
            orders = 15 + generator.randrange(5)
            revenue = orders * (62 + generator.random() * 8)
        rows.append(f"{day.isoformat()},{revenue:.2f},{orders},{ad_spend:.2f}")
    return "\n".join(rows)
