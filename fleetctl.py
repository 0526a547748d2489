#!/usr/bin/env python3
"""
Unified CLI for asset deadline and cost tracking.

Commands:
  warnings       - Show upcoming and overdue deadlines across all assets
  costs          - Monthly lease and maintenance cost summary
  vehicle-costs  - Per-vehicle cost breakdown for a month range
  history        - View a vehicle's maintenance records
  vendors        - List vendors with their work counts
  log            - Add a maintenance record to a vehicle
  add-mileage    - Record distance driven in a month
"""

import argparse
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from assetwatch import (
    CostSummary,
    DeadlineWarning,
    Fleet,
    MaintenanceRecord,
    MaintenanceType,
    MonthlyMileage,
    VehicleCost,
    WarningLevel,
    AssetNotFoundError,
    add_maintenance_record,
    add_monthly_mileage,
    count_by_level,
    filter_warnings,
    grand_total,
    load_fleet,
    parse_date,
    parse_month,
)
from assetwatch.config import settings

# =============================================================================
# Formatting helpers
# =============================================================================


def format_cost(cost: Optional[float]) -> str:
    """Format yen amount for display."""
    return f"¥{cost:,.0f}" if cost is not None else "-"


def format_days(days: Optional[int]) -> str:
    """Format days remaining (e.g., 'in 12d', 'today', '3d overdue')."""
    if days is None:
        return "-"
    if days < 0:
        return f"{abs(days)}d overdue"
    if days == 0:
        return "today"
    return f"in {days}d"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def resolve_as_of(as_of: Optional[str]) -> Optional[date]:
    """Pick the reference date: CLI flag, then AS_OF_DATE, then today."""
    value = as_of or settings.AS_OF_DATE
    if value is None:
        return date.today()
    return parse_date(value)


# =============================================================================
# Warnings command
# =============================================================================


def make_warning_table(warnings: List[DeadlineWarning]) -> List[List[str]]:
    """Convert deadline warnings to table rows."""
    rows = []
    for warning in warnings:
        rows.append(
            [
                warning.level.label.upper(),
                warning.asset_category.value,
                warning.asset_name,
                warning.deadline_type.value,
                warning.deadline_date,
                format_days(warning.days_remaining),
            ]
        )
    return rows


def cmd_warnings(args, fleet: Fleet):
    """Show upcoming and overdue deadlines."""
    today = resolve_as_of(args.as_of)
    if today is None:
        print(f"Error: Invalid date: {args.as_of or settings.AS_OF_DATE}")
        return 1

    all_warnings = fleet.warnings(today)
    warnings = filter_warnings(all_warnings, args.category)
    counts = count_by_level(all_warnings)

    print(f"Assets: {fleet.asset_count} (as of {today.isoformat()})")
    print(
        f"Critical: {counts[WarningLevel.CRITICAL]}  "
        f"Warning: {counts[WarningLevel.WARNING]}  "
        f"Info: {counts[WarningLevel.INFO]}  "
        f"Overdue: {sum(1 for w in all_warnings if w.is_overdue)}"
    )
    if args.category != "all":
        print(f"Filter: {args.category.upper()} ({len(warnings)} shown)")
    print()

    if not warnings:
        print("No deadlines within the warning window.")
        return 0

    headers = ["Level", "Category", "Asset", "Deadline", "Date", "Remaining"]
    print(tabulate(make_warning_table(warnings), headers=headers, tablefmt="simple"))
    return 0


# =============================================================================
# Cost commands
# =============================================================================


def make_cost_table(summaries: List[CostSummary]) -> List[List[str]]:
    """Convert monthly cost summaries to table rows."""
    return [
        [
            s.month,
            format_cost(s.vehicle_lease_cost),
            format_cost(s.pc_lease_cost),
            format_cost(s.other_lease_cost),
            format_cost(s.maintenance_cost),
            format_cost(s.total),
        ]
        for s in summaries
    ]


def make_vehicle_cost_table(costs: List[VehicleCost]) -> List[List[str]]:
    """Convert per-vehicle costs to table rows."""
    return [
        [
            c.vehicle_name,
            c.ownership_type.value,
            format_cost(c.lease_cost),
            format_cost(c.maintenance_cost),
            format_cost(c.total),
        ]
        for c in costs
    ]


def _check_months(args) -> bool:
    for value in (args.start, args.end):
        if parse_month(value) is None:
            print(f"Error: Invalid month '{value}' (expected YYYY-MM)")
            return False
    return True


def cmd_costs(args, fleet: Fleet):
    """Monthly lease and maintenance cost summary."""
    if not _check_months(args):
        return 1

    summaries = fleet.cost_summary(args.start, args.end)

    print(f"Cost summary: {args.start} to {args.end}")
    print(f"Grand total: {format_cost(grand_total(summaries))}")
    print()

    if not summaries:
        print("No months in range.")
        return 0

    headers = ["Month", "Vehicle lease", "PC lease", "Other lease", "Maintenance", "Total"]
    print(tabulate(make_cost_table(summaries), headers=headers, tablefmt="simple"))
    return 0


def cmd_vehicle_costs(args, fleet: Fleet):
    """Per-vehicle cost breakdown."""
    if not _check_months(args):
        return 1

    costs = fleet.vehicle_costs(args.start, args.end)
    lease_total = sum(c.lease_cost for c in costs)
    maintenance_total = sum(c.maintenance_cost for c in costs)

    print(f"Vehicle costs: {args.start} to {args.end}")
    print(f"Total: {format_cost(grand_total(costs))}")
    print(f"  Lease: {format_cost(lease_total)}")
    print(f"  Maintenance: {format_cost(maintenance_total)}")
    print()

    if not costs:
        print("No cost data for this period.")
        return 0

    headers = ["Vehicle", "Ownership", "Lease", "Maintenance", "Total"]
    print(tabulate(make_vehicle_cost_table(costs), headers=headers, tablefmt="simple"))
    return 0


# =============================================================================
# History and vendors commands
# =============================================================================


def make_history_table(records: List[MaintenanceRecord], fleet: Fleet) -> List[List[str]]:
    """Convert maintenance records to table rows."""
    rows = []
    for record in records:
        rows.append(
            [
                str(record.date),
                record.type,
                fleet.vendor_name(record.vendor_id),
                record.performed_by or "-",
                format_cost(record.cost),
                truncate(record.description),
            ]
        )
    return rows


def cmd_history(args, fleet: Fleet):
    """View a vehicle's maintenance records."""
    vehicle = fleet.get_vehicle(args.vehicle_id)
    if vehicle is None:
        print(f"Error: Unknown vehicle '{args.vehicle_id}'")
        return 1

    records = vehicle.get_records_sorted(sort_by=args.sort, reverse=not args.asc)
    if args.month:
        if parse_month(args.month) is None:
            print(f"Error: Invalid month '{args.month}' (expected YYYY-MM)")
            return 1
        in_month = vehicle.get_records_in_month(args.month)
        records = [r for r in records if r in in_month]
    total_cost = sum(r.cost for r in records if r.cost)

    print(f"Vehicle: {vehicle.name}")
    last = vehicle.last_maintenance
    if last is not None:
        print(f"Last service: {last.date} ({last.type})")
    print(f"Records: {len(records)}")
    if total_cost > 0:
        print(f"Total cost: {format_cost(total_cost)}")
    print()

    if not records:
        print("No maintenance records found.")
        return 0

    headers = ["Date", "Type", "Vendor", "Performed By", "Cost", "Description"]
    print(tabulate(make_history_table(records, fleet), headers=headers, tablefmt="simple"))
    return 0


def cmd_vendors(args, fleet: Fleet):
    """List vendors with derived work counts."""
    counts = fleet.vendor_work_counts()
    rows = [
        [v.id, v.name, v.contact_person or "-", v.phone or "-", v.rating or "-", counts[v.id]]
        for v in fleet.vendors
    ]

    print(f"Vendors: {len(rows)}")
    print()
    headers = ["ID", "Name", "Contact", "Phone", "Rating", "Work count"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))
    return 0


# =============================================================================
# Write commands
# =============================================================================


def cmd_log(args, fleet: Fleet):
    """Add a maintenance record to a vehicle."""
    vehicle = fleet.get_vehicle(args.vehicle_id)
    if vehicle is None:
        print(f"Error: Unknown vehicle '{args.vehicle_id}'")
        return 1

    record_date = args.date or date.today().isoformat()
    if parse_date(record_date) is None:
        print(f"Error: Invalid date '{record_date}'")
        return 1

    record = MaintenanceRecord(
        type=args.type,
        date=record_date,
        cost=args.cost,
        vendor_id=args.vendor,
        description=args.description,
        performed_by=args.by,
        notes=args.notes,
    )

    print(f"Adding maintenance record to {vehicle.name}:")
    print(f"  Type:    {record.type}")
    print(f"  Date:    {record.date}")
    print(f"  Cost:    {format_cost(record.cost)}")
    if record.vendor_id:
        print(f"  Vendor:  {fleet.vendor_name(record.vendor_id)}")
    if record.performed_by:
        print(f"  By:      {record.performed_by}")
    if record.notes:
        print(f"  Notes:   {record.notes}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    add_maintenance_record(args.fleet_file, vehicle.id, record)
    print("Record saved.")
    return 0


def cmd_add_mileage(args, fleet: Fleet):
    """Record distance driven in a month."""
    vehicle = fleet.get_vehicle(args.vehicle_id)
    if vehicle is None:
        print(f"Error: Unknown vehicle '{args.vehicle_id}'")
        return 1
    if parse_month(args.month) is None:
        print(f"Error: Invalid month '{args.month}' (expected YYYY-MM)")
        return 1

    print(f"Vehicle: {vehicle.name}")
    print(f"Month:    {args.month}")
    print(f"Distance: {args.distance:,.0f} km")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    add_monthly_mileage(
        args.fleet_file,
        vehicle.id,
        MonthlyMileage(args.month, args.distance, recorded_by=args.by),
    )
    print("Mileage saved.")
    return 0


# =============================================================================
# Main
# =============================================================================

COMMANDS = {
    "warnings": cmd_warnings,
    "costs": cmd_costs,
    "vehicle-costs": cmd_vehicle_costs,
    "history": cmd_history,
    "vendors": cmd_vendors,
    "log": cmd_log,
    "add-mileage": cmd_add_mileage,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Asset deadline and cost tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fleet.yaml warnings
  %(prog)s fleet.yaml warnings --category pc --as-of 2025-01-01
  %(prog)s fleet.yaml costs --start 2025-01 --end 2025-12
  %(prog)s fleet.yaml vehicle-costs --start 2025-04 --end 2025-09
  %(prog)s fleet.yaml history vehicle-1
  %(prog)s fleet.yaml log vehicle-1 --type oil_change --cost 8000 \\
      --vendor vendor-1 --date 2025-08-15
  %(prog)s fleet.yaml add-mileage vehicle-1 2025-09 1200
""",
    )
    parser.add_argument(
        "fleet_file",
        type=Path,
        help="Path to fleet YAML file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    warnings_parser = subparsers.add_parser(
        "warnings", help="Show upcoming and overdue deadlines"
    )
    warnings_parser.add_argument(
        "--category",
        choices=["all", "vehicle", "pc", "general"],
        default="all",
        help="Only show warnings for one asset category",
    )
    warnings_parser.add_argument(
        "--as-of",
        type=str,
        help="Reference date in YYYY-MM-DD format (default: today)",
    )

    for name, help_text in (
        ("costs", "Monthly cost summary"),
        ("vehicle-costs", "Per-vehicle cost breakdown"),
    ):
        cost_parser = subparsers.add_parser(name, help=help_text)
        cost_parser.add_argument("--start", required=True, help="First month (YYYY-MM)")
        cost_parser.add_argument("--end", required=True, help="Last month (YYYY-MM)")

    history_parser = subparsers.add_parser("history", help="View maintenance records")
    history_parser.add_argument("vehicle_id", type=str, help="Vehicle id")
    history_parser.add_argument(
        "--sort",
        choices=["date", "cost", "type"],
        default="date",
        help="Sort order (default: date)",
    )
    history_parser.add_argument(
        "--asc",
        action="store_true",
        help="Sort ascending instead of descending",
    )
    history_parser.add_argument(
        "--month",
        type=str,
        help="Only show records from one month (YYYY-MM)",
    )

    subparsers.add_parser("vendors", help="List vendors with work counts")

    log_parser = subparsers.add_parser("log", help="Add a maintenance record")
    log_parser.add_argument("vehicle_id", type=str, help="Vehicle id")
    log_parser.add_argument(
        "--type",
        required=True,
        choices=[t.value for t in MaintenanceType],
        help="Kind of work performed",
    )
    log_parser.add_argument(
        "--date", type=str, help="Service date in YYYY-MM-DD format (default: today)"
    )
    log_parser.add_argument("--cost", type=float, default=0, help="Cost in yen")
    log_parser.add_argument("--vendor", type=str, help="Vendor id")
    log_parser.add_argument("--description", type=str, help="What was done")
    log_parser.add_argument("--by", type=str, help="Who arranged the work")
    log_parser.add_argument("--notes", type=str, help="Notes about the work")
    log_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be added without saving",
    )

    mileage_parser = subparsers.add_parser(
        "add-mileage", help="Record distance driven in a month"
    )
    mileage_parser.add_argument("vehicle_id", type=str, help="Vehicle id")
    mileage_parser.add_argument("month", type=str, help="Month (YYYY-MM)")
    mileage_parser.add_argument("distance", type=float, help="Distance in km")
    mileage_parser.add_argument("--by", type=str, help="Who recorded it")
    mileage_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be added without saving",
    )

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Validate fleet file exists
    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    fleet = load_fleet(args.fleet_file)
    try:
        return COMMANDS[args.command](args, fleet)
    except AssetNotFoundError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
