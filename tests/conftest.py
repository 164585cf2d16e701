"""Shared fixtures for the franchise fit test suite."""

from pathlib import Path

import pytest

from franchise_fit.catalog import load_catalog
from franchise_fit.config import reset_config
from franchise_fit.schema import FranchiseRecord

FIXTURES_DIR = Path(__file__).parent / "fixtures"
CATALOG_PATH = FIXTURES_DIR / "catalog.json"
FULL_PROFILE_PATH = FIXTURES_DIR / "profile_full.json"
CLASSIC_PROFILE_PATH = FIXTURES_DIR / "profile_classic.json"

# Pin the year used for franchise age so risk scores are reproducible
CURRENT_YEAR = 2024


def make_franchise(**overrides) -> FranchiseRecord:
    """Build a franchise record with sensible defaults."""
    data = {
        "slug": "test-franchise",
        "name": "Test Franchise",
        "category": "Home Services",
        "description": "A franchise for tests.",
        "investment_min": 100_000,
        "investment_max": 200_000,
        "franchise_fee": 40_000,
        "royalty_pct": 6,
        "ad_fund_pct": 2,
        "avg_revenue": 500_000,
        "unit_count": 100,
        "units_opened": 10,
        "units_closed": 2,
        "year_founded": 2010,
        "headquarters": "Dallas, TX",
        "tags": [],
    }
    data.update(overrides)
    return FranchiseRecord(**data)


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def catalog() -> list[FranchiseRecord]:
    return load_catalog(CATALOG_PATH)
