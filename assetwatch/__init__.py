"""
Asset deadline and cost tracking.

This package provides data models and pure engines for fleet assets:
- Asset, Vehicle, PCAsset, GeneralAsset: tracked assets (tagged by category)
- LeaseInfo, MaintenanceRecord, MonthlyMileage, Vendor: supporting records
- compute_warnings: unified, severity-classified deadline feed
- compute_cost_summary / compute_vehicle_costs: monthly cost rollups
- Fleet, load_fleet: YAML-backed snapshot of all assets
"""

from .enums import (
    AssetCategory,
    AssetStatus,
    DeadlineType,
    MaintenanceType,
    OwnershipType,
    TireType,
)
from .level import WarningLevel
from .errors import AssetWatchError, AssetNotFoundError
from .lease import LeaseInfo
from .maintenance_record import MaintenanceRecord
from .monthly_mileage import MonthlyMileage
from .vendor import Vendor, vendor_work_counts, resolve_vendor_name, UNKNOWN_VENDOR
from .asset import Asset, PCAsset, GeneralAsset
from .vehicle import Vehicle
from .deadline_warning import DeadlineWarning
from .cost_summary import CostSummary, VehicleCost
from .calculations import (
    parse_date,
    parse_month,
    days_remaining,
    classify_level,
    month_range,
    lease_months,
)
from .deadlines import compute_warnings, filter_warnings, count_by_level
from .costs import compute_cost_summary, compute_vehicle_costs, grand_total
from .fleet import Fleet
from .loader import (
    load_fleet,
    read_fleet_json,
    add_maintenance_record,
    update_maintenance_record,
    delete_maintenance_record,
    add_monthly_mileage,
    delete_monthly_mileage,
    delete_vehicle,
    add_vendor,
    delete_vendor,
)

__all__ = [
    "AssetCategory",
    "AssetStatus",
    "DeadlineType",
    "MaintenanceType",
    "OwnershipType",
    "TireType",
    "WarningLevel",
    "AssetWatchError",
    "AssetNotFoundError",
    "LeaseInfo",
    "MaintenanceRecord",
    "MonthlyMileage",
    "Vendor",
    "vendor_work_counts",
    "resolve_vendor_name",
    "UNKNOWN_VENDOR",
    "Asset",
    "PCAsset",
    "GeneralAsset",
    "Vehicle",
    "DeadlineWarning",
    "CostSummary",
    "VehicleCost",
    "parse_date",
    "parse_month",
    "days_remaining",
    "classify_level",
    "month_range",
    "lease_months",
    "compute_warnings",
    "filter_warnings",
    "count_by_level",
    "compute_cost_summary",
    "compute_vehicle_costs",
    "grand_total",
    "Fleet",
    "load_fleet",
    "read_fleet_json",
    "add_maintenance_record",
    "update_maintenance_record",
    "delete_maintenance_record",
    "add_monthly_mileage",
    "delete_monthly_mileage",
    "delete_vehicle",
    "add_vendor",
    "delete_vendor",
]
