"""
Deadline warning engine.

Scans vehicles, PCs and general assets for date-based obligations and
returns one list of warnings, most urgent first.

Vehicle upkeep deadlines (inspection, maintenance, insurance, tire change)
use a 60-day window with a binary critical/warning split. Lease ends and
warranties use a 90-day window with a third "info" tier.
"""

from dataclasses import dataclass
from datetime import date, datetime
from itertools import chain
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

from .asset import Asset, GeneralAsset, PCAsset
from .calculations import (
    CRITICAL_DAYS,
    INFO_DAYS,
    WARNING_DAYS,
    as_today,
    classify_level,
    days_remaining,
    parse_date,
)
from .deadline_warning import DeadlineWarning
from .enums import AssetCategory, DeadlineType, TireType
from .level import WarningLevel
from .logger import get_logger
from .vehicle import Vehicle

logger = get_logger(__name__)

TIRE_LABELS = {
    TireType.SUMMER: "summer tires",
    TireType.WINTER: "winter tires",
}


@dataclass(frozen=True)
class DeadlineRule:
    """Lookback window and severity tiers for one deadline type."""

    lookback_days: int
    three_tier: bool

    def level_for(self, days: int) -> Optional[WarningLevel]:
        if days > self.lookback_days:
            return None
        return classify_level(
            days,
            CRITICAL_DAYS,
            WARNING_DAYS,
            INFO_DAYS if self.three_tier else None,
        )


UPKEEP_RULE = DeadlineRule(lookback_days=WARNING_DAYS, three_tier=False)
CONTRACT_RULE = DeadlineRule(lookback_days=INFO_DAYS, three_tier=True)

RULES: Dict[DeadlineType, DeadlineRule] = {
    DeadlineType.INSPECTION: UPKEEP_RULE,
    DeadlineType.MAINTENANCE: UPKEEP_RULE,
    DeadlineType.INSURANCE: UPKEEP_RULE,
    DeadlineType.TIRE_CHANGE: UPKEEP_RULE,
    DeadlineType.LEASE: CONTRACT_RULE,
    DeadlineType.WARRANTY: CONTRACT_RULE,
}


def _asset_label(asset: Asset, deadline_type: DeadlineType) -> str:
    if deadline_type == DeadlineType.TIRE_CHANGE and isinstance(asset, Vehicle):
        return f"{asset.name} → {TIRE_LABELS[asset.next_tire_type]}"
    return asset.name


def _asset_warnings(asset: Asset, today: date) -> List[DeadlineWarning]:
    warnings = []
    for deadline_type, raw_date in asset.deadline_dates():
        deadline = parse_date(raw_date)
        if deadline is None:
            logger.debug(
                "Skipping unparseable %s date %r on %s",
                deadline_type.value,
                raw_date,
                asset.id,
            )
            continue
        days = days_remaining(deadline, today)
        level = RULES[deadline_type].level_for(days)
        if level is None:
            continue
        warnings.append(
            DeadlineWarning(
                id=f"{asset.id}-{deadline_type.value}",
                asset_id=asset.id,
                asset_name=_asset_label(asset, deadline_type),
                asset_category=asset.category,
                deadline_type=deadline_type,
                deadline_date=deadline.isoformat(),
                days_remaining=days,
                level=level,
            )
        )
    return warnings


def compute_warnings(
    vehicles: Iterable[Vehicle],
    pcs: Iterable[PCAsset],
    general_assets: Iterable[GeneralAsset],
    now: Union[date, datetime],
) -> List[DeadlineWarning]:
    """
    Compute the unified deadline warning feed.

    Vehicles come first, then PCs, then general assets; the result is
    stable-sorted by days remaining so ties keep that order. Each
    (asset, deadline type) pair appears at most once.
    """
    today = as_today(now)
    seen: Set[Tuple[str, DeadlineType]] = set()
    warnings = []
    for asset in chain(vehicles, pcs, general_assets):
        for warning in _asset_warnings(asset, today):
            key = (warning.asset_id, warning.deadline_type)
            if key in seen:
                continue
            seen.add(key)
            warnings.append(warning)

    warnings.sort(key=lambda w: w.days_remaining)
    logger.debug("Computed %d deadline warnings as of %s", len(warnings), today)
    return warnings


def filter_warnings(
    warnings: Sequence[DeadlineWarning],
    category: Optional[Union[AssetCategory, str]] = None,
) -> List[DeadlineWarning]:
    """Subset an already-sorted warning list by asset category."""
    if category is None or category == "all":
        return list(warnings)
    category = AssetCategory(category)
    return [w for w in warnings if w.asset_category == category]


def count_by_level(warnings: Iterable[DeadlineWarning]) -> Dict[WarningLevel, int]:
    """Warning counts per level, with every level present."""
    counts = {level: 0 for level in WarningLevel}
    for warning in warnings:
        counts[warning.level] += 1
    return counts
