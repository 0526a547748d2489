"""Asset base class and the non-vehicle asset categories."""

from typing import Any, List, Optional, Tuple

from .enums import AssetCategory, AssetStatus, DeadlineType, OwnershipType
from .lease import LeaseInfo


class Asset:
    """
    Common fields for every tracked asset.

    Subclasses set `category` and extend `deadline_dates()` with their own
    date-based obligations.
    """

    category: AssetCategory

    def __init__(
        self,
        id: str,
        ownership_type: str = OwnershipType.OWNED,
        status: str = AssetStatus.ACTIVE,
        lease: Optional[LeaseInfo] = None,
        notes: Optional[str] = None,
    ):
        self.id = id
        self.ownership_type = OwnershipType(ownership_type)
        self.status = AssetStatus(status)
        self.lease = lease
        self.notes = notes

    @property
    def is_leased(self) -> bool:
        """Leased with contract terms on file."""
        return self.ownership_type == OwnershipType.LEASED and isinstance(
            self.lease, LeaseInfo
        )

    @property
    def name(self) -> str:
        return self.id

    def deadline_dates(self) -> List[Tuple[DeadlineType, Any]]:
        """Raw (deadline type, date) pairs; missing dates are left out."""
        if self.is_leased and self.lease.contract_end:
            return [(DeadlineType.LEASE, self.lease.contract_end)]
        return []


class PCAsset(Asset):
    """A company PC."""

    category = AssetCategory.PC

    def __init__(
        self,
        id: str,
        asset_number: str,
        manufacturer: str,
        model: str,
        serial_number: Optional[str] = None,
        warranty_expiration: Optional[str] = None,
        ownership_type: str = OwnershipType.OWNED,
        status: str = AssetStatus.ACTIVE,
        lease: Optional[LeaseInfo] = None,
        notes: Optional[str] = None,
    ):
        super().__init__(id, ownership_type, status, lease, notes)
        self.asset_number = asset_number
        self.manufacturer = manufacturer
        self.model = model
        self.serial_number = serial_number
        self.warranty_expiration = warranty_expiration

    @property
    def name(self) -> str:
        return f"{self.asset_number} ({self.manufacturer} {self.model})"

    def deadline_dates(self) -> List[Tuple[DeadlineType, Any]]:
        dates = []
        if self.warranty_expiration:
            dates.append((DeadlineType.WARRANTY, self.warranty_expiration))
        return dates + super().deadline_dates()


class GeneralAsset(Asset):
    """Any other tracked equipment (tablets, tools, furniture...)."""

    category = AssetCategory.GENERAL

    def __init__(
        self,
        id: str,
        asset_number: str,
        name: str,
        kind: Optional[str] = None,
        warranty_expiration: Optional[str] = None,
        ownership_type: str = OwnershipType.OWNED,
        status: str = AssetStatus.ACTIVE,
        lease: Optional[LeaseInfo] = None,
        notes: Optional[str] = None,
    ):
        super().__init__(id, ownership_type, status, lease, notes)
        self.asset_number = asset_number
        self.asset_name = name
        self.kind = kind
        self.warranty_expiration = warranty_expiration

    @property
    def name(self) -> str:
        return f"{self.asset_number} ({self.asset_name})"

    def deadline_dates(self) -> List[Tuple[DeadlineType, Any]]:
        dates = []
        if self.warranty_expiration:
            dates.append((DeadlineType.WARRANTY, self.warranty_expiration))
        return dates + super().deadline_dates()
