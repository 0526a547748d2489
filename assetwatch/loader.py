"""YAML loading and saving utilities for fleet data."""

import json
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .asset import GeneralAsset, PCAsset
from .errors import AssetNotFoundError
from .fleet import Fleet
from .lease import LeaseInfo
from .logger import get_logger
from .maintenance_record import MaintenanceRecord
from .monthly_mileage import MonthlyMileage
from .vehicle import Vehicle
from .vendor import Vendor

logger = get_logger(__name__)

FLEET_KEYS = ("vehicles", "pcs", "generalAssets", "vendors")


def _parse_object(dct: Dict[str, Any]) -> Any:
    """Parse dictionary into appropriate object type."""
    # Vehicle
    if "vehicleNumber" in dct:
        return Vehicle(
            dct["id"],
            dct["vehicleNumber"],
            dct["make"],
            dct["model"],
            license_plate=dct.get("licensePlate"),
            year=dct.get("year"),
            ownership_type=dct.get("ownershipType") or "owned",
            status=dct.get("status") or "active",
            lease=dct.get("leaseInfo"),
            inspection_date=dct.get("inspectionDate"),
            maintenance_date=dct.get("maintenanceDate"),
            insurance_date=dct.get("insuranceDate"),
            tire_change_date=dct.get("tireChangeDate"),
            current_tire_type=dct.get("currentTireType"),
            current_mileage=dct.get("currentMileage"),
            maintenance_records=dct.get("maintenanceRecords"),
            monthly_mileages=dct.get("monthlyMileages"),
            notes=dct.get("notes"),
        )
    # PC (has a manufacturer, unlike general assets)
    elif "assetNumber" in dct and "manufacturer" in dct:
        return PCAsset(
            dct["id"],
            dct["assetNumber"],
            dct["manufacturer"],
            dct["model"],
            serial_number=dct.get("serialNumber"),
            warranty_expiration=dct.get("warrantyExpiration"),
            ownership_type=dct.get("ownershipType") or "owned",
            status=dct.get("status") or "active",
            lease=dct.get("leaseInfo"),
            notes=dct.get("notes"),
        )
    # General asset
    elif "assetNumber" in dct:
        return GeneralAsset(
            dct["id"],
            dct["assetNumber"],
            dct["name"],
            kind=dct.get("kind"),
            warranty_expiration=dct.get("warrantyExpiration"),
            ownership_type=dct.get("ownershipType") or "owned",
            status=dct.get("status") or "active",
            lease=dct.get("leaseInfo"),
            notes=dct.get("notes"),
        )
    # Lease contract
    elif "company" in dct and "monthlyCost" in dct:
        return LeaseInfo(
            dct["company"],
            dct["monthlyCost"],
            dct.get("contractStart"),
            dct.get("contractEnd"),
            dct.get("contactPerson"),
            dct.get("phone"),
        )
    # Maintenance record
    elif "type" in dct and "date" in dct:
        return MaintenanceRecord(
            dct["type"],
            dct["date"],
            cost=dct.get("cost"),
            vendor_id=dct.get("vendorId"),
            description=dct.get("description"),
            performed_by=dct.get("performedBy"),
            notes=dct.get("notes"),
            tire_type=dct.get("tireType"),
            id=dct.get("id"),
            vehicle_id=dct.get("vehicleId"),
            created_at=dct.get("createdAt"),
            updated_at=dct.get("updatedAt"),
        )
    # Monthly mileage
    elif "month" in dct and "distance" in dct:
        return MonthlyMileage(
            dct["month"],
            dct["distance"],
            dct.get("recordedBy"),
            dct.get("id"),
            dct.get("recordedAt"),
        )
    # Vendor
    elif "id" in dct and "name" in dct:
        return Vendor(
            dct["id"],
            dct["name"],
            dct.get("phone"),
            dct.get("address"),
            dct.get("contactPerson"),
            dct.get("email"),
            dct.get("rating"),
            dct.get("notes"),
        )
    # Top-level fleet object
    elif any(key in dct for key in FLEET_KEYS):
        return Fleet(
            dct.get("vehicles"),
            dct.get("pcs"),
            dct.get("generalAssets"),
            dct.get("vendors"),
        )
    else:
        # Return dict as-is for unknown structures (like 'assignedTo')
        return dct


def read_fleet_json(filename: Union[str, Path]) -> str:
    """Read a fleet YAML file as JSON text, with YAML dates as ISO strings."""
    with open(filename, "rb") as fp:
        return json.dumps(yaml.load(fp, Loader=yaml.SafeLoader), default=str)


def load_fleet(filename: Union[str, Path]) -> Fleet:
    """Load a fleet from a YAML file."""
    fleet = json.loads(read_fleet_json(filename), object_hook=_parse_object)
    if not isinstance(fleet, Fleet):
        fleet = Fleet()
    logger.info(
        "Loaded %s: %d vehicles, %d PCs, %d general assets, %d vendors",
        filename,
        len(fleet.vehicles),
        len(fleet.pcs),
        len(fleet.general_assets),
        len(fleet.vendors),
    )
    return fleet


def _now() -> str:
    return datetime.now().isoformat(timespec="seconds")


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def _read_raw(filename: Union[str, Path]) -> Dict[str, Any]:
    """Load the raw YAML data (not parsed into objects)."""
    with open(filename, "r", encoding="utf-8") as fp:
        return yaml.load(fp, Loader=yaml.SafeLoader) or {}


def _write_raw(filename: Union[str, Path], data: Dict[str, Any]) -> None:
    with open(filename, "w", encoding="utf-8") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def _find_vehicle(data: Dict[str, Any], vehicle_id: str) -> Dict[str, Any]:
    for vehicle in data.get("vehicles") or []:
        if vehicle.get("id") == vehicle_id:
            return vehicle
    raise AssetNotFoundError("Vehicle", vehicle_id)


def _check_index(items: List[Any], index: int, what: str) -> None:
    if index < 0 or index >= len(items):
        raise IndexError(f"{what} index {index} out of range (0..{len(items) - 1})")


def _record_to_dict(record: MaintenanceRecord) -> Dict[str, Any]:
    """Serialize a MaintenanceRecord to the YAML dict format (camelCase keys)."""
    d: Dict[str, Any] = {"id": record.id, "type": record.type, "date": record.date}
    d["cost"] = record.cost
    optional = {
        "vehicleId": record.vehicle_id,
        "vendorId": record.vendor_id,
        "description": record.description,
        "performedBy": record.performed_by,
        "notes": record.notes,
        "tireType": record.tire_type,
        "createdAt": record.created_at,
        "updatedAt": record.updated_at,
    }
    d.update({k: v for k, v in optional.items() if v is not None})
    return d


def _mileage_to_dict(mileage: MonthlyMileage) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "id": mileage.id,
        "month": mileage.month,
        "distance": mileage.distance,
    }
    if mileage.recorded_by is not None:
        d["recordedBy"] = mileage.recorded_by
    if mileage.recorded_at is not None:
        d["recordedAt"] = mileage.recorded_at
    return d


def _vendor_to_dict(vendor: Vendor) -> Dict[str, Any]:
    d: Dict[str, Any] = {"id": vendor.id, "name": vendor.name}
    optional = {
        "phone": vendor.phone,
        "address": vendor.address,
        "contactPerson": vendor.contact_person,
        "email": vendor.email,
        "rating": vendor.rating,
        "notes": vendor.notes,
    }
    d.update({k: v for k, v in optional.items() if v is not None})
    return d


def add_maintenance_record(
    filename: Union[str, Path], vehicle_id: str, record: MaintenanceRecord
) -> str:
    """
    Append a maintenance record to a vehicle in a fleet YAML file.

    Fills in the id, vehicle back-reference and timestamps when missing.
    Vendor work counts are derived from records, so vendors are untouched.
    Returns the record id.
    """
    data = _read_raw(filename)
    vehicle = _find_vehicle(data, vehicle_id)

    now = _now()
    record.id = record.id or _new_id("maint")
    record.vehicle_id = vehicle_id
    record.created_at = record.created_at or now
    record.updated_at = record.updated_at or now

    if vehicle.get("maintenanceRecords") is None:
        vehicle["maintenanceRecords"] = []
    vehicle["maintenanceRecords"].append(_record_to_dict(record))

    _write_raw(filename, data)
    logger.info("Added maintenance record %s to %s", record.id, vehicle_id)
    return record.id


def update_maintenance_record(
    filename: Union[str, Path], vehicle_id: str, index: int, record: MaintenanceRecord
) -> None:
    """Replace the maintenance record at the given index on a vehicle."""
    data = _read_raw(filename)
    vehicle = _find_vehicle(data, vehicle_id)
    records = vehicle.get("maintenanceRecords") or []
    _check_index(records, index, "Maintenance record")

    previous = records[index]
    record.id = record.id or previous.get("id")
    record.vehicle_id = vehicle_id
    record.created_at = record.created_at or previous.get("createdAt")
    record.updated_at = _now()
    records[index] = _record_to_dict(record)

    _write_raw(filename, data)


def delete_maintenance_record(
    filename: Union[str, Path], vehicle_id: str, index: int
) -> None:
    """Remove the maintenance record at the given index on a vehicle."""
    data = _read_raw(filename)
    vehicle = _find_vehicle(data, vehicle_id)
    records = vehicle.get("maintenanceRecords") or []
    _check_index(records, index, "Maintenance record")

    del records[index]

    _write_raw(filename, data)


def add_monthly_mileage(
    filename: Union[str, Path], vehicle_id: str, mileage: MonthlyMileage
) -> str:
    """Append a monthly mileage entry to a vehicle. Returns the entry id."""
    data = _read_raw(filename)
    vehicle = _find_vehicle(data, vehicle_id)

    mileage.id = mileage.id or _new_id("mileage")
    mileage.recorded_at = mileage.recorded_at or _now()

    if vehicle.get("monthlyMileages") is None:
        vehicle["monthlyMileages"] = []
    vehicle["monthlyMileages"].append(_mileage_to_dict(mileage))

    _write_raw(filename, data)
    return mileage.id


def delete_monthly_mileage(
    filename: Union[str, Path], vehicle_id: str, index: int
) -> None:
    """Remove the monthly mileage entry at the given index on a vehicle."""
    data = _read_raw(filename)
    vehicle = _find_vehicle(data, vehicle_id)
    mileages = vehicle.get("monthlyMileages") or []
    _check_index(mileages, index, "Monthly mileage")

    del mileages[index]

    _write_raw(filename, data)


def delete_vehicle(filename: Union[str, Path], vehicle_id: str) -> None:
    """Remove a vehicle, and with it every record and mileage entry it holds."""
    data = _read_raw(filename)
    vehicle = _find_vehicle(data, vehicle_id)
    data["vehicles"].remove(vehicle)

    _write_raw(filename, data)
    logger.info("Deleted vehicle %s", vehicle_id)


def add_vendor(filename: Union[str, Path], vendor: Vendor) -> str:
    """Append a vendor to a fleet YAML file. Returns the vendor id."""
    data = _read_raw(filename)

    vendor.id = vendor.id or _new_id("vendor")
    if data.get("vendors") is None:
        data["vendors"] = []
    data["vendors"].append(_vendor_to_dict(vendor))

    _write_raw(filename, data)
    return vendor.id


def delete_vendor(filename: Union[str, Path], vendor_id: str) -> None:
    """
    Remove a vendor from a fleet YAML file.

    Records that reference the vendor are kept; their vendor resolves
    to "unknown vendor" afterwards.
    """
    data = _read_raw(filename)
    vendors = data.get("vendors") or []
    for vendor in vendors:
        if vendor.get("id") == vendor_id:
            vendors.remove(vendor)
            break
    else:
        raise AssetNotFoundError("Vendor", vendor_id)

    _write_raw(filename, data)
