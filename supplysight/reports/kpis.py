"""
Daily stock/demand KPI series.

There is no stored inventory history yet, so each point is drawn at random
on every call. Only the series length is fixed by the requested range.
"""
from dataclasses import dataclass
import logging
import random

logger = logging.getLogger(__name__)

RANGE_DAYS = {
    '7d': 7,
    '14d': 14,
    '30d': 30,
}
DEFAULT_RANGE = '7d'

KPI_MIN_VALUE = 100
KPI_MAX_VALUE = 299


@dataclass
class KpiPoint:
    stock: int
    demand: int


def kpi_days(range_token) -> int:
    """Number of daily points for a range token; unknown tokens mean 7 days"""
    return RANGE_DAYS.get(range_token, RANGE_DAYS[DEFAULT_RANGE])


def generate_kpis(range_token, rng=None):
    """
    Build the KPI series for a range.

    Args:
        range_token: '7d', '14d' or '30d'
        rng: optional random.Random, for reproducible series

    Returns:
        list of KpiPoint, one per day
    """
    rng = rng or random
    days = kpi_days(range_token)
    points = [
        KpiPoint(
            stock=rng.randint(KPI_MIN_VALUE, KPI_MAX_VALUE),
            demand=rng.randint(KPI_MIN_VALUE, KPI_MAX_VALUE),
        )
        for _ in range(days)
    ]
    logger.debug(f"Generated {days} KPI points for range {range_token!r}")
    return points
