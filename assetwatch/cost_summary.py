"""Cost rollup dataclasses."""

from dataclasses import dataclass
from typing import Any, Dict

from .enums import OwnershipType


@dataclass
class CostSummary:
    """Lease and maintenance cost for one calendar month."""

    month: str
    vehicle_lease_cost: float = 0
    pc_lease_cost: float = 0
    other_lease_cost: float = 0
    maintenance_cost: float = 0

    @property
    def lease_cost(self) -> float:
        return self.vehicle_lease_cost + self.pc_lease_cost + self.other_lease_cost

    @property
    def total(self) -> float:
        return self.lease_cost + self.maintenance_cost

    def to_dict(self) -> Dict[str, Any]:
        return {
            "month": self.month,
            "vehicleLeaseCost": self.vehicle_lease_cost,
            "pcLeaseCost": self.pc_lease_cost,
            "otherLeaseCost": self.other_lease_cost,
            "leaseCost": self.lease_cost,
            "maintenanceCost": self.maintenance_cost,
            "total": self.total,
        }


@dataclass
class VehicleCost:
    """Lease and maintenance cost for one vehicle over a month range."""

    vehicle_id: str
    vehicle_name: str
    ownership_type: OwnershipType
    lease_cost: float = 0
    maintenance_cost: float = 0

    @property
    def total(self) -> float:
        return self.lease_cost + self.maintenance_cost

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vehicleId": self.vehicle_id,
            "vehicleName": self.vehicle_name,
            "ownershipType": self.ownership_type.value,
            "leaseCost": self.lease_cost,
            "maintenanceCost": self.maintenance_cost,
            "total": self.total,
        }
