"""Vehicle class - asset record with maintenance history and mileage logs."""

from typing import Any, List, Optional, Tuple

from .asset import Asset
from .calculations import month_key, parse_date
from .enums import AssetCategory, AssetStatus, DeadlineType, OwnershipType, TireType
from .lease import LeaseInfo
from .maintenance_record import MaintenanceRecord
from .monthly_mileage import MonthlyMileage


class Vehicle(Asset):
    """Company vehicle with deadlines, maintenance records, and mileage."""

    category = AssetCategory.VEHICLE

    def __init__(
        self,
        id: str,
        vehicle_number: str,
        make: str,
        model: str,
        license_plate: Optional[str] = None,
        year: Optional[int] = None,
        ownership_type: str = OwnershipType.OWNED,
        status: str = AssetStatus.ACTIVE,
        lease: Optional[LeaseInfo] = None,
        inspection_date: Optional[str] = None,
        maintenance_date: Optional[str] = None,
        insurance_date: Optional[str] = None,
        tire_change_date: Optional[str] = None,
        current_tire_type: str = TireType.SUMMER,
        current_mileage: Optional[float] = None,
        maintenance_records: Optional[List[MaintenanceRecord]] = None,
        monthly_mileages: Optional[List[MonthlyMileage]] = None,
        notes: Optional[str] = None,
    ):
        super().__init__(id, ownership_type, status, lease, notes)
        self.vehicle_number = vehicle_number
        self.make = make
        self.model = model
        self.license_plate = license_plate
        self.year = year
        self.inspection_date = inspection_date
        self.maintenance_date = maintenance_date
        self.insurance_date = insurance_date
        self.tire_change_date = tire_change_date
        self.current_tire_type = TireType(current_tire_type or TireType.SUMMER)
        self.current_mileage = current_mileage
        self.maintenance_records = maintenance_records or []
        self.monthly_mileages = monthly_mileages or []
        # Records live inside the vehicle; fill in the back-reference
        for record in self.maintenance_records:
            if record.vehicle_id is None:
                record.vehicle_id = self.id

    @property
    def name(self) -> str:
        """Human-readable vehicle name."""
        return f"{self.vehicle_number} ({self.make} {self.model})"

    @property
    def next_tire_type(self) -> TireType:
        """The season's tires to switch to at the next tire change."""
        if self.current_tire_type == TireType.WINTER:
            return TireType.SUMMER
        return TireType.WINTER

    def deadline_dates(self) -> List[Tuple[DeadlineType, Any]]:
        dates = []
        for deadline_type, value in (
            (DeadlineType.INSPECTION, self.inspection_date),
            (DeadlineType.MAINTENANCE, self.maintenance_date),
            (DeadlineType.INSURANCE, self.insurance_date),
            (DeadlineType.TIRE_CHANGE, self.tire_change_date),
        ):
            if value:
                dates.append((deadline_type, value))
        return dates + super().deadline_dates()

    @property
    def last_maintenance(self) -> Optional[MaintenanceRecord]:
        """Most recent maintenance record by date."""
        if not self.maintenance_records:
            return None
        return max(self.maintenance_records, key=lambda r: str(r.date))

    def get_records_in_month(self, month: str) -> List[MaintenanceRecord]:
        """Records whose date falls in the given 'YYYY-MM' month."""
        matching = []
        for record in self.maintenance_records:
            record_date = parse_date(record.date)
            if record_date and month_key(record_date) == month:
                matching.append(record)
        return matching

    def get_records_sorted(
        self, sort_by: str = "date", reverse: bool = True
    ) -> List[MaintenanceRecord]:
        """
        Get maintenance records sorted by specified field.

        Args:
            sort_by: "date", "cost", or "type"
            reverse: If True, newest/most expensive first (default)
        """
        if sort_by == "date":
            return sorted(
                self.maintenance_records, key=lambda r: str(r.date), reverse=reverse
            )
        elif sort_by == "cost":
            return sorted(
                self.maintenance_records, key=lambda r: r.cost or 0, reverse=reverse
            )
        elif sort_by == "type":
            return sorted(
                self.maintenance_records,
                key=lambda r: (r.type, str(r.date)),
                reverse=reverse,
            )
        return self.maintenance_records

    def total_distance(self, since_month: Optional[str] = None) -> float:
        """Sum of logged monthly distances, optionally from a month onward."""
        return sum(
            m.distance
            for m in self.monthly_mileages
            if since_month is None or m.month >= since_month
        )
