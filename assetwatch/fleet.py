"""Fleet class - the loaded snapshot of every tracked asset and vendor."""

from datetime import date, datetime
from typing import List, Optional, Union

from .asset import GeneralAsset, PCAsset
from .cost_summary import CostSummary, VehicleCost
from .costs import all_maintenance_records, compute_cost_summary, compute_vehicle_costs
from .deadline_warning import DeadlineWarning
from .deadlines import compute_warnings
from .logger import get_logger
from .maintenance_record import MaintenanceRecord
from .vehicle import Vehicle
from .vendor import Vendor, resolve_vendor_name, vendor_work_counts

logger = get_logger(__name__)


def _only(items: Optional[list], cls: type, section: str) -> list:
    """Keep entries that parsed as cls; anything else is logged and dropped."""
    kept = []
    for item in items or []:
        if isinstance(item, cls):
            kept.append(item)
        else:
            logger.warning("Skipping unrecognised %s entry: %r", section, item)
    return kept


class Fleet:
    """All assets and vendors read from one fleet file."""

    def __init__(
        self,
        vehicles: Optional[List[Vehicle]] = None,
        pcs: Optional[List[PCAsset]] = None,
        general_assets: Optional[List[GeneralAsset]] = None,
        vendors: Optional[List[Vendor]] = None,
    ):
        self.vehicles = _only(vehicles, Vehicle, "vehicles")
        self.pcs = _only(pcs, PCAsset, "pcs")
        self.general_assets = _only(general_assets, GeneralAsset, "generalAssets")
        self.vendors = _only(vendors, Vendor, "vendors")

    @property
    def asset_count(self) -> int:
        return len(self.vehicles) + len(self.pcs) + len(self.general_assets)

    @property
    def maintenance_records(self) -> List[MaintenanceRecord]:
        return all_maintenance_records(self.vehicles)

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def get_vendor(self, vendor_id: str) -> Optional[Vendor]:
        for vendor in self.vendors:
            if vendor.id == vendor_id:
                return vendor
        return None

    def vendor_name(self, vendor_id: Optional[str]) -> str:
        return resolve_vendor_name(vendor_id, self.vendors)

    def vendor_work_counts(self):
        return vendor_work_counts(self.vendors, self.maintenance_records)

    def warnings(self, now: Union[date, datetime]) -> List[DeadlineWarning]:
        return compute_warnings(self.vehicles, self.pcs, self.general_assets, now)

    def cost_summary(self, start_month: str, end_month: str) -> List[CostSummary]:
        return compute_cost_summary(
            self.vehicles,
            self.maintenance_records,
            start_month,
            end_month,
            pcs=self.pcs,
            general_assets=self.general_assets,
        )

    def vehicle_costs(self, start_month: str, end_month: str) -> List[VehicleCost]:
        return compute_vehicle_costs(
            self.vehicles, self.maintenance_records, start_month, end_month
        )
