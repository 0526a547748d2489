"""MonthlyMileage class for per-month distance logs."""
from typing import Optional


class MonthlyMileage:
    """Distance driven by a vehicle in one calendar month."""

    def __init__(
            self,
            month: str,
            distance: float,
            recorded_by: Optional[str] = None,
            id: Optional[str] = None,
            recorded_at: Optional[str] = None,
    ):
        self.id = id
        self.month = month
        self.distance = distance
        self.recorded_by = recorded_by
        self.recorded_at = recorded_at
