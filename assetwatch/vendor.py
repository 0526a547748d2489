"""Vendor class and derived vendor statistics."""

from collections import Counter
from typing import Dict, Iterable, Optional

from .maintenance_record import MaintenanceRecord

UNKNOWN_VENDOR = "unknown vendor"


class Vendor:
    """A service shop or dealer that performs maintenance work."""

    def __init__(
        self,
        id: str,
        name: str,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        contact_person: Optional[str] = None,
        email: Optional[str] = None,
        rating: Optional[int] = None,
        notes: Optional[str] = None,
    ):
        self.id = id
        self.name = name
        self.phone = phone
        self.address = address
        self.contact_person = contact_person
        self.email = email
        self.rating = rating
        self.notes = notes


def vendor_work_counts(
    vendors: Iterable[Vendor], records: Iterable[MaintenanceRecord]
) -> Dict[str, int]:
    """
    Number of maintenance records per vendor.

    Computed on demand from the records, so it can never drift from them.
    Vendors without work get 0; records pointing at unknown vendors are ignored.
    """
    counts = Counter(r.vendor_id for r in records if r.vendor_id)
    return {v.id: counts.get(v.id, 0) for v in vendors}


def resolve_vendor_name(vendor_id: Optional[str], vendors: Iterable[Vendor]) -> str:
    """Vendor name for a record, tolerating deleted or missing vendors."""
    for vendor in vendors:
        if vendor.id == vendor_id:
            return vendor.name
    return UNKNOWN_VENDOR
