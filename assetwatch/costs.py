"""
Cost aggregation engine.

Buckets lease cost (a monthly charge for each month a contract covers) and
maintenance cost (point-in-time, by record date) into calendar months.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .asset import Asset, GeneralAsset, PCAsset
from .calculations import (
    lease_months,
    month_key,
    month_range,
    next_month,
    parse_date,
    parse_month,
)
from .cost_summary import CostSummary, VehicleCost
from .logger import get_logger
from .maintenance_record import MaintenanceRecord
from .vehicle import Vehicle

logger = get_logger(__name__)


def all_maintenance_records(vehicles: Iterable[Vehicle]) -> List[MaintenanceRecord]:
    """Flatten the records embedded in each vehicle."""
    return [r for v in vehicles for r in v.maintenance_records]


def _lease_cost(asset: Asset, range_start, range_end) -> float:
    if not asset.is_leased:
        return 0
    months = lease_months(
        asset.lease.contract_start, asset.lease.contract_end, range_start, range_end
    )
    return (asset.lease.monthly_cost or 0) * months


def _records_by_vehicle(
    vehicles: Sequence[Vehicle], maintenance_records: Optional[Iterable[MaintenanceRecord]]
) -> Dict[str, List[MaintenanceRecord]]:
    if maintenance_records is None:
        maintenance_records = all_maintenance_records(vehicles)
    vehicle_ids = {v.id for v in vehicles}
    grouped: Dict[str, List[MaintenanceRecord]] = defaultdict(list)
    for record in maintenance_records:
        if record.vehicle_id in vehicle_ids:
            grouped[record.vehicle_id].append(record)
    return grouped


def compute_cost_summary(
    vehicles: Iterable[Vehicle],
    maintenance_records: Optional[Iterable[MaintenanceRecord]],
    start_month: str,
    end_month: str,
    pcs: Iterable[PCAsset] = (),
    general_assets: Iterable[GeneralAsset] = (),
) -> List[CostSummary]:
    """
    Monthly cost rollup for the inclusive month range.

    Returns one CostSummary per month, zeroed when nothing applies, or an
    empty list when the range is reversed or a boundary is not 'YYYY-MM'.
    Records count only when they belong to one of the given vehicles; pass
    None to use the records embedded in the vehicles.
    """
    vehicles = list(vehicles)
    pcs = list(pcs)
    general_assets = list(general_assets)

    months = month_range(start_month, end_month)
    if not months:
        logger.debug("Empty cost range %r..%r", start_month, end_month)
        return []

    summaries = {month: CostSummary(month=month) for month in months}

    for month, summary in summaries.items():
        month_start = parse_month(month)
        month_end = next_month(month_start)
        summary.vehicle_lease_cost = sum(
            _lease_cost(v, month_start, month_end) for v in vehicles
        )
        summary.pc_lease_cost = sum(
            _lease_cost(p, month_start, month_end) for p in pcs
        )
        summary.other_lease_cost = sum(
            _lease_cost(a, month_start, month_end) for a in general_assets
        )

    for records in _records_by_vehicle(vehicles, maintenance_records).values():
        for record in records:
            record_date = parse_date(record.date)
            if record_date is None:
                logger.debug("Skipping record %s with bad date %r", record.id, record.date)
                continue
            summary = summaries.get(month_key(record_date))
            if summary is not None:
                summary.maintenance_cost += record.cost or 0

    return [summaries[month] for month in months]


def compute_vehicle_costs(
    vehicles: Iterable[Vehicle],
    maintenance_records: Optional[Iterable[MaintenanceRecord]],
    start_month: str,
    end_month: str,
) -> List[VehicleCost]:
    """
    Per-vehicle lease and maintenance cost over the inclusive month range.

    Vehicles with no lease cost and no maintenance cost in the range are
    left out entirely.
    """
    vehicles = list(vehicles)
    start = parse_month(start_month)
    end = parse_month(end_month)
    if start is None or end is None or end < start:
        return []
    range_end = next_month(end)

    records_by_vehicle = _records_by_vehicle(vehicles, maintenance_records)

    results = []
    for vehicle in vehicles:
        maintenance_cost = 0
        for record in records_by_vehicle.get(vehicle.id, []):
            record_date = parse_date(record.date)
            if record_date is None or record_date < start:
                continue
            if range_end is None or record_date < range_end:
                maintenance_cost += record.cost or 0

        lease_cost = _lease_cost(vehicle, start, range_end)
        if lease_cost > 0 or maintenance_cost > 0:
            results.append(
                VehicleCost(
                    vehicle_id=vehicle.id,
                    vehicle_name=vehicle.name,
                    ownership_type=vehicle.ownership_type,
                    lease_cost=lease_cost,
                    maintenance_cost=maintenance_cost,
                )
            )
    return results


def grand_total(rows: Iterable[Union[CostSummary, VehicleCost]]) -> float:
    """Sum of row totals."""
    return sum(row.total for row in rows)
