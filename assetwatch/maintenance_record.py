"""MaintenanceRecord class for vehicle service and repair history."""
from typing import Optional


class MaintenanceRecord:
    """A record of maintenance or repair performed on a vehicle."""

    def __init__(
            self,
            type: str,
            date: str,
            cost: float = 0,
            vendor_id: Optional[str] = None,
            description: Optional[str] = None,
            performed_by: Optional[str] = None,
            notes: Optional[str] = None,
            tire_type: Optional[str] = None,
            id: Optional[str] = None,
            vehicle_id: Optional[str] = None,
            created_at: Optional[str] = None,
            updated_at: Optional[str] = None,
    ):
        self.id = id
        self.vehicle_id = vehicle_id
        self.type = type
        self.date = date
        self.cost = cost or 0
        self.vendor_id = vendor_id
        self.description = description
        self.performed_by = performed_by
        self.notes = notes
        self.tire_type = tire_type
        self.created_at = created_at
        self.updated_at = updated_at
