"""WarningLevel enum for deadline severity."""

from enum import Enum


class WarningLevel(Enum):
    """Deadline warning severity. Lower value = more urgent."""

    CRITICAL = 1  # 30 days or less (including overdue)
    WARNING = 2  # 60 days or less
    INFO = 3  # 90 days or less, three-tier deadlines only

    @property
    def label(self) -> str:
        return self.name.lower()
