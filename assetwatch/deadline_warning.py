"""DeadlineWarning dataclass for computed deadline alerts."""

from dataclasses import dataclass
from typing import Any, Dict

from .enums import AssetCategory, DeadlineType
from .level import WarningLevel


@dataclass
class DeadlineWarning:
    """An upcoming or overdue obligation on one asset."""

    id: str
    asset_id: str
    asset_name: str
    asset_category: AssetCategory
    deadline_type: DeadlineType
    deadline_date: str
    days_remaining: int
    level: WarningLevel

    @property
    def is_overdue(self) -> bool:
        return self.days_remaining < 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "assetId": self.asset_id,
            "assetName": self.asset_name,
            "assetCategory": self.asset_category.value,
            "deadlineType": self.deadline_type.value,
            "deadlineDate": self.deadline_date,
            "daysRemaining": self.days_remaining,
            "level": self.level.label,
        }
