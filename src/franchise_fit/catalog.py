"""Catalog and profile loading, validation and browsing.

The scoring core only ever sees in-memory records. This module is the
boundary where JSON from the catalog source and the questionnaire is
validated into those records:

- JSON structure checks (array of records, or an object with "franchises")
- Per-record schema validation via Pydantic
- Duplicate slug detection
- Record count ceiling to reject implausibly large payloads
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from pydantic import ValidationError

from .ranges import parse_investment_filter
from .schema import FranchiseRecord, UserProfile

logger = logging.getLogger(__name__)

MAX_CATALOG_RECORDS = 10_000


class FranchiseFitError(Exception):
    """Base error for franchise fit data problems."""


class CatalogLoadError(FranchiseFitError):
    """Raised when a catalog cannot be loaded or validated."""


class ProfileLoadError(FranchiseFitError):
    """Raised when a buyer profile cannot be loaded or validated."""


def _read_json(path: Union[str, Path], error_cls: type[FranchiseFitError]) -> Any:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise error_cls(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        raise error_cls(f"Invalid JSON in {path}: {e}") from e


def parse_catalog(data: Any) -> list[FranchiseRecord]:
    """Validate raw catalog data into franchise records.

    Args:
        data: A list of record dicts, or a dict with a "franchises" list.

    Returns:
        Records in catalog order.

    Raises:
        CatalogLoadError: On any structural or record validation failure.
    """
    if isinstance(data, dict):
        if "franchises" not in data:
            raise CatalogLoadError("Catalog object is missing the 'franchises' field")
        data = data["franchises"]

    if not isinstance(data, list):
        raise CatalogLoadError("Catalog must be a JSON array of franchise records")

    if len(data) > MAX_CATALOG_RECORDS:
        raise CatalogLoadError(
            f"Catalog has {len(data)} records, which exceeds the maximum "
            f"of {MAX_CATALOG_RECORDS}"
        )

    records = []
    seen: set[str] = set()
    for index, raw in enumerate(data):
        try:
            record = FranchiseRecord.model_validate(raw)
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid franchise record at index {index}: {e}") from e
        if record.slug in seen:
            raise CatalogLoadError(f"Duplicate franchise slug: {record.slug}")
        seen.add(record.slug)
        records.append(record)

    return records


def load_catalog(path: Union[str, Path]) -> list[FranchiseRecord]:
    """Load and validate a catalog JSON file."""
    records = parse_catalog(_read_json(path, CatalogLoadError))
    logger.info("Loaded %d franchises from %s", len(records), path)
    return records


def parse_profile(data: Any) -> UserProfile:
    """Validate raw questionnaire answers into a profile."""
    if not isinstance(data, dict):
        raise ProfileLoadError("Profile must be a JSON object")
    try:
        return UserProfile.model_validate(data)
    except ValidationError as e:
        raise ProfileLoadError(f"Invalid profile: {e}") from e


def load_profile(path: Union[str, Path]) -> UserProfile:
    """Load and validate a profile JSON file."""
    profile = parse_profile(_read_json(path, ProfileLoadError))
    logger.info("Loaded profile from %s (%d answers)", path, len(profile.answered_fields()))
    return profile


def validate_catalog(path: Union[str, Path]) -> tuple[bool, list[str]]:
    """Check a catalog file, returning (is_valid, issues)."""
    try:
        records = load_catalog(path)
    except CatalogLoadError as e:
        return False, [str(e)]
    if not records:
        return False, ["Catalog contains no franchises"]
    return True, []


def validate_profile(path: Union[str, Path]) -> tuple[bool, list[str]]:
    """Check a profile file, returning (is_valid, issues)."""
    try:
        load_profile(path)
    except ProfileLoadError as e:
        return False, [str(e)]
    return True, []


# =============================================================================
# Browsing
# =============================================================================


def filter_catalog(
    catalog: Iterable[FranchiseRecord],
    search: Optional[str] = None,
    category: Optional[str] = None,
    investment: Optional[str] = None,
) -> list[FranchiseRecord]:
    """Filter records the way the directory page does.

    Args:
        catalog: Records to filter
        search: Case-insensitive substring of the franchise name
        category: Exact category label
        investment: "min-max" dollar filter, e.g. "100000-250000"; records
            whose investment range overlaps it are kept. A malformed value
            applies no filter

    Returns:
        Matching records in catalog order
    """
    needle = (search or "").strip().lower()
    bounds = parse_investment_filter(investment)

    results = []
    for record in catalog:
        if needle and needle not in record.name.lower():
            continue
        if category and record.category != category:
            continue
        if bounds is not None and (record.investment_min > bounds.max or record.investment_max < bounds.min):
            continue
        results.append(record)
    return results


def find_franchise(catalog: Iterable[FranchiseRecord], slug: str) -> Optional[FranchiseRecord]:
    """Look up a record by slug."""
    return next((record for record in catalog if record.slug == slug), None)


def list_categories(catalog: Iterable[FranchiseRecord]) -> list[str]:
    """Distinct categories, sorted."""
    return sorted({record.category for record in catalog})
