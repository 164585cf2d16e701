"""Bucket range parsing and shared numeric helpers.

Questionnaire answers arrive as categorical bucket labels ("50-100",
"1m-3m", ...). The tables here turn them into dollar intervals so the
financial scorer can do interval arithmetic.
"""

import math
from typing import Mapping, NamedTuple, Optional


class BucketRange(NamedTuple):
    """A closed dollar interval [min, max]."""
    min: float
    max: float

    @property
    def mid(self) -> float:
        return (self.min + self.max) / 2

    @property
    def width(self) -> float:
        return self.max - self.min


# Fallback for unknown labels: wide enough that nothing downstream
# divides by zero or rejects the input.
DEFAULT_RANGE = BucketRange(0, 2_000_000)

BUDGET_RANGES: Mapping[str, BucketRange] = {
    "50-100": BucketRange(50_000, 100_000),
    "100-200": BucketRange(100_000, 200_000),
    "200-350": BucketRange(200_000, 350_000),
    "350-500": BucketRange(350_000, 500_000),
    "500+": BucketRange(500_000, 2_000_000),
}

NET_WORTH_RANGES: Mapping[str, BucketRange] = {
    "under-250": BucketRange(0, 250_000),
    "250-500": BucketRange(250_000, 500_000),
    "500-1m": BucketRange(500_000, 1_000_000),
    "1m-3m": BucketRange(1_000_000, 3_000_000),
    "3m+": BucketRange(3_000_000, 10_000_000),
}

LIQUID_CAPITAL_RANGES: Mapping[str, BucketRange] = {
    "under-50": BucketRange(0, 50_000),
    "50-100": BucketRange(50_000, 100_000),
    "100-250": BucketRange(100_000, 250_000),
    "250-500": BucketRange(250_000, 500_000),
    "500+": BucketRange(500_000, 2_000_000),
}

# Catalog browser filter buckets ("min-max" in whole dollars)
INVESTMENT_FILTERS: Mapping[str, BucketRange] = {
    "0-100000": BucketRange(0, 100_000),
    "100000-250000": BucketRange(100_000, 250_000),
    "250000-500000": BucketRange(250_000, 500_000),
    "500000-99999999": BucketRange(500_000, 99_999_999),
}


def parse_range(
    bucket: Optional[str],
    table: Mapping[str, BucketRange],
    default: BucketRange = DEFAULT_RANGE,
) -> BucketRange:
    """Resolve a bucket label against a range table.

    Unknown labels, including the empty string and None, resolve to
    ``default``.
    """
    if not bucket:
        return default
    return table.get(bucket.strip().lower(), default)


def parse_budget(bucket: Optional[str]) -> BucketRange:
    return parse_range(bucket, BUDGET_RANGES)


def parse_net_worth(bucket: Optional[str]) -> BucketRange:
    return parse_range(bucket, NET_WORTH_RANGES)


def parse_liquid_capital(bucket: Optional[str]) -> BucketRange:
    return parse_range(bucket, LIQUID_CAPITAL_RANGES)


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Constrain value to [lo, hi]."""
    return max(lo, min(hi, value))


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, substituting 1 for a zero denominator."""
    return numerator / (denominator or 1)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 always going up.

    Python's round() uses banker's rounding; scores must round the same
    way regardless of parity.
    """
    return int(math.floor(value + 0.5))


def to_score(fraction: float) -> int:
    """Convert a 0-1 fraction to a clamped integer score in [0, 100]."""
    return round_half_up(clamp(fraction * 100, 0, 100))


def blend(signals: list[tuple[float, float]]) -> float:
    """Weighted average of (value, weight) pairs.

    Weights are normalized over the pairs given, so optional signals
    can simply be left out. An empty list blends to 0.

    The full-model scorers rely on this: an unanswered secondary question
    drops out of its dimension instead of contributing a fixed default
    (an unknown credit score is not counted as 0.7, for example), and
    the remaining weights are rescaled to sum to 1.
    """
    total_weight = sum(weight for _, weight in signals)
    if total_weight <= 0:
        return 0.0
    return sum(value * weight for value, weight in signals) / total_weight


def parse_investment_filter(value: Optional[str]) -> Optional[BucketRange]:
    """Parse a "min-max" dollar filter such as "100000-250000".

    Any pair of numbers is accepted, not just the INVESTMENT_FILTERS
    buckets. Returns None when the value is empty or malformed, which
    callers treat as "no filter".
    """
    if not value:
        return None
    parts = value.strip().split("-")
    if len(parts) != 2:
        return None
    try:
        low, high = float(parts[0]), float(parts[1])
    except ValueError:
        return None
    if low > high:
        return None
    return BucketRange(low, high)
