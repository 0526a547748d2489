"""LeaseInfo class for leased asset contracts."""

from typing import Optional


class LeaseInfo:
    """Lease contract terms attached to a leased asset."""

    def __init__(
        self,
        company: str,
        monthly_cost: float,
        contract_start: str,
        contract_end: str,
        contact_person: Optional[str] = None,
        phone: Optional[str] = None,
    ):
        self.company = company
        self.monthly_cost = monthly_cost
        self.contract_start = contract_start
        self.contract_end = contract_end
        self.contact_person = contact_person
        self.phone = phone
