#!/usr/bin/env python3
"""Tests for YAML loading and saving utilities."""

import json
from datetime import date
from pathlib import Path

import pytest
import yaml

from assetwatch import (
    AssetNotFoundError,
    Fleet,
    GeneralAsset,
    LeaseInfo,
    MaintenanceRecord,
    MonthlyMileage,
    OwnershipType,
    PCAsset,
    TireType,
    Vehicle,
    Vendor,
    add_maintenance_record,
    add_monthly_mileage,
    add_vendor,
    delete_maintenance_record,
    delete_monthly_mileage,
    delete_vehicle,
    delete_vendor,
    load_fleet,
    read_fleet_json,
    update_maintenance_record,
)

FLEET_YAML = """
vehicles:
  - id: vehicle-1
    vehicleNumber: V-001
    make: Toyota
    model: Prius
    ownershipType: leased
    leaseInfo:
      company: Toyota Finance
      monthlyCost: 45000
      contractStart: 2023-04-01
      contractEnd: 2028-03-31
    inspectionDate: 2026-06-15
    currentTireType: winter
    monthlyMileages:
      - month: 2025-09
        distance: 1200
    maintenanceRecords:
      - id: maint-1
        type: oil_change
        date: 2025-08-15
        cost: 8000
        vendorId: vendor-1
      - id: maint-2
        type: repair
        date: 2025-09-01
        cost: 30000
        vendorId: vendor-1
  - id: vehicle-2
    vehicleNumber: V-002
    make: Nissan
    model: Note

pcs:
  - id: pc-1
    assetNumber: PC-001
    manufacturer: Lenovo
    model: ThinkPad X1
    warrantyExpiration: '2026-01-31'

generalAssets:
  - id: asset-1
    assetNumber: GA-001
    name: Office projector
    kind: equipment

vendors:
  - id: vendor-1
    name: Auto Service Yamada
    rating: 5
"""


def read_yaml(path):
    with open(path) as f:
        return yaml.safe_load(f)


@pytest.fixture
def fleet_file(tmp_path):
    path = tmp_path / "fleet.yaml"
    path.write_text(FLEET_YAML)
    return path


# =============================================================================
# load_fleet tests
# =============================================================================


class TestLoadFleet:
    """Tests for load_fleet function."""

    def test_loads_all_categories(self, fleet_file):
        fleet = load_fleet(fleet_file)

        assert isinstance(fleet, Fleet)
        assert len(fleet.vehicles) == 2
        assert len(fleet.pcs) == 1
        assert len(fleet.general_assets) == 1
        assert len(fleet.vendors) == 1
        assert fleet.asset_count == 4

    def test_parses_vehicle(self, fleet_file):
        vehicle = load_fleet(fleet_file).vehicles[0]

        assert isinstance(vehicle, Vehicle)
        assert vehicle.name == "V-001 (Toyota Prius)"
        assert vehicle.ownership_type == OwnershipType.LEASED
        assert vehicle.current_tire_type == TireType.WINTER
        assert vehicle.inspection_date == "2026-06-15"

    def test_parses_lease(self, fleet_file):
        lease = load_fleet(fleet_file).vehicles[0].lease

        assert isinstance(lease, LeaseInfo)
        assert lease.company == "Toyota Finance"
        assert lease.monthly_cost == 45000
        assert lease.contract_start == "2023-04-01"
        assert lease.contract_end == "2028-03-31"

    def test_parses_records_and_mileage(self, fleet_file):
        vehicle = load_fleet(fleet_file).vehicles[0]

        assert len(vehicle.maintenance_records) == 2
        record = vehicle.maintenance_records[0]
        assert isinstance(record, MaintenanceRecord)
        assert record.type == "oil_change"
        assert record.date == "2025-08-15"
        assert record.cost == 8000
        assert record.vehicle_id == "vehicle-1"

        assert isinstance(vehicle.monthly_mileages[0], MonthlyMileage)
        assert vehicle.monthly_mileages[0].distance == 1200

    def test_parses_pc_and_general_asset(self, fleet_file):
        fleet = load_fleet(fleet_file)

        assert isinstance(fleet.pcs[0], PCAsset)
        assert fleet.pcs[0].warranty_expiration == "2026-01-31"
        assert isinstance(fleet.general_assets[0], GeneralAsset)
        assert fleet.general_assets[0].name == "GA-001 (Office projector)"

    def test_parses_vendor(self, fleet_file):
        vendor = load_fleet(fleet_file).vendors[0]

        assert isinstance(vendor, Vendor)
        assert vendor.name == "Auto Service Yamada"
        assert vendor.rating == 5

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        fleet = load_fleet(path)
        assert fleet.asset_count == 0
        assert fleet.vendors == []

    def test_accepts_str_path(self, fleet_file):
        assert len(load_fleet(str(fleet_file)).vehicles) == 2

    def test_example_file_loads(self):
        example = Path(__file__).parent.parent / "fleet.example.yaml"
        fleet = load_fleet(example)
        assert fleet.asset_count == 4
        assert len(fleet.vendors) == 2


class TestReadFleetJson:
    """Tests for read_fleet_json."""

    def test_dates_become_iso_strings(self, fleet_file):
        data = json.loads(read_fleet_json(fleet_file))
        assert data["vehicles"][0]["inspectionDate"] == "2026-06-15"
        assert data["vehicles"][0]["leaseInfo"]["contractEnd"] == "2028-03-31"

    def test_empty_file_is_null(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert read_fleet_json(path) == "null"


class TestUnrecognisedEntries:
    """Entries that parse as the wrong type are dropped from their section."""

    def test_general_asset_without_asset_number(self, tmp_path):
        path = tmp_path / "fleet.yaml"
        path.write_text("""
generalAssets:
  - id: asset-1
    name: Office projector
    warrantyExpiration: 2025-01-20
  - id: asset-2
    assetNumber: GA-002
    name: Tablet
    warrantyExpiration: 2025-01-20
""")
        fleet = load_fleet(path)
        assert [a.id for a in fleet.general_assets] == ["asset-2"]
        assert [w.asset_id for w in fleet.warnings(date(2025, 1, 1))] == ["asset-2"]

    def test_fleet_constructor_filters_by_type(self):
        vendor = Vendor("vendor-1", "Auto Service Yamada")
        fleet = Fleet(general_assets=[vendor], vendors=[vendor])
        assert fleet.general_assets == []
        assert fleet.vendors == [vendor]


class TestFleet:
    """Tests for Fleet lookups over a loaded file."""

    def test_get_vehicle(self, fleet_file):
        fleet = load_fleet(fleet_file)
        assert fleet.get_vehicle("vehicle-2").make == "Nissan"
        assert fleet.get_vehicle("nope") is None

    def test_vendor_name(self, fleet_file):
        fleet = load_fleet(fleet_file)
        assert fleet.vendor_name("vendor-1") == "Auto Service Yamada"
        assert fleet.vendor_name("vendor-gone") == "unknown vendor"
        assert fleet.vendor_name(None) == "unknown vendor"

    def test_vendor_work_counts(self, fleet_file):
        assert load_fleet(fleet_file).vendor_work_counts() == {"vendor-1": 2}

    def test_cost_summary_includes_embedded_records(self, fleet_file):
        summaries = load_fleet(fleet_file).cost_summary("2025-08", "2025-09")
        assert [s.maintenance_cost for s in summaries] == [8000, 30000]
        assert [s.vehicle_lease_cost for s in summaries] == [45000, 45000]


# =============================================================================
# Maintenance record writes
# =============================================================================


class TestAddMaintenanceRecord:
    """Tests for add_maintenance_record function."""

    def test_appends_record(self, fleet_file):
        record = MaintenanceRecord("inspection", "2025-10-01", cost=15000, vendor_id="vendor-1")

        record_id = add_maintenance_record(fleet_file, "vehicle-1", record)

        records = read_yaml(fleet_file)["vehicles"][0]["maintenanceRecords"]
        assert len(records) == 3
        assert records[2]["id"] == record_id
        assert record_id.startswith("maint-")
        assert records[2]["vehicleId"] == "vehicle-1"
        assert records[2]["cost"] == 15000
        assert "createdAt" in records[2]
        assert "updatedAt" in records[2]

    def test_creates_record_list(self, fleet_file):
        add_maintenance_record(
            fleet_file, "vehicle-2", MaintenanceRecord("oil_change", "2025-10-01")
        )
        records = read_yaml(fleet_file)["vehicles"][1]["maintenanceRecords"]
        assert len(records) == 1
        assert records[0]["cost"] == 0

    def test_omits_none_values(self, fleet_file):
        add_maintenance_record(
            fleet_file, "vehicle-2", MaintenanceRecord("oil_change", "2025-10-01")
        )
        record = read_yaml(fleet_file)["vehicles"][1]["maintenanceRecords"][0]
        assert "vendorId" not in record
        assert "description" not in record
        assert "tireType" not in record

    def test_work_count_follows_records(self, fleet_file):
        add_maintenance_record(
            fleet_file,
            "vehicle-2",
            MaintenanceRecord("repair", "2025-10-01", vendor_id="vendor-1"),
        )
        assert load_fleet(fleet_file).vendor_work_counts() == {"vendor-1": 3}
        # Vendor entries themselves are untouched
        assert read_yaml(fleet_file)["vendors"][0] == {
            "id": "vendor-1",
            "name": "Auto Service Yamada",
            "rating": 5,
        }

    def test_unknown_vehicle(self, fleet_file):
        with pytest.raises(AssetNotFoundError) as exc:
            add_maintenance_record(
                fleet_file, "vehicle-9", MaintenanceRecord("repair", "2025-10-01")
            )
        assert str(exc.value) == "Vehicle 'vehicle-9' not found"


class TestUpdateMaintenanceRecord:
    """Tests for update_maintenance_record function."""

    def test_replaces_record_at_index(self, fleet_file):
        record = MaintenanceRecord("repair", "2025-09-02", cost=28000, notes="Adjusted quote")

        update_maintenance_record(fleet_file, "vehicle-1", 1, record)

        records = read_yaml(fleet_file)["vehicles"][0]["maintenanceRecords"]
        assert len(records) == 2
        assert records[0]["cost"] == 8000
        assert records[1]["id"] == "maint-2"
        assert records[1]["cost"] == 28000
        assert records[1]["notes"] == "Adjusted quote"
        assert "updatedAt" in records[1]

    def test_index_out_of_range(self, fleet_file):
        with pytest.raises(IndexError):
            update_maintenance_record(
                fleet_file, "vehicle-1", 5, MaintenanceRecord("repair", "2025-09-02")
            )


class TestDeleteMaintenanceRecord:
    """Tests for delete_maintenance_record function."""

    def test_deletes_record_at_index(self, fleet_file):
        delete_maintenance_record(fleet_file, "vehicle-1", 0)

        records = read_yaml(fleet_file)["vehicles"][0]["maintenanceRecords"]
        assert [r["id"] for r in records] == ["maint-2"]

    def test_negative_index(self, fleet_file):
        with pytest.raises(IndexError):
            delete_maintenance_record(fleet_file, "vehicle-1", -1)

    def test_vehicle_without_records(self, fleet_file):
        with pytest.raises(IndexError):
            delete_maintenance_record(fleet_file, "vehicle-2", 0)


# =============================================================================
# Monthly mileage writes
# =============================================================================


class TestMonthlyMileage:
    """Tests for add_monthly_mileage and delete_monthly_mileage."""

    def test_add(self, fleet_file):
        mileage_id = add_monthly_mileage(
            fleet_file, "vehicle-1", MonthlyMileage("2025-10", 900, recorded_by="employee-1")
        )

        mileages = read_yaml(fleet_file)["vehicles"][0]["monthlyMileages"]
        assert len(mileages) == 2
        assert mileages[1]["id"] == mileage_id
        assert mileages[1]["month"] == "2025-10"
        assert mileages[1]["distance"] == 900
        assert mileages[1]["recordedBy"] == "employee-1"
        assert "recordedAt" in mileages[1]

    def test_add_to_vehicle_without_mileage(self, fleet_file):
        add_monthly_mileage(fleet_file, "vehicle-2", MonthlyMileage("2025-10", 300))
        assert load_fleet(fleet_file).vehicles[1].total_distance() == 300

    def test_delete(self, fleet_file):
        delete_monthly_mileage(fleet_file, "vehicle-1", 0)
        assert read_yaml(fleet_file)["vehicles"][0]["monthlyMileages"] == []

    def test_delete_out_of_range(self, fleet_file):
        with pytest.raises(IndexError):
            delete_monthly_mileage(fleet_file, "vehicle-1", 1)


# =============================================================================
# Vehicle and vendor deletes
# =============================================================================


class TestDeleteVehicle:
    """Tests for delete_vehicle function."""

    def test_removes_vehicle_and_its_records(self, fleet_file):
        delete_vehicle(fleet_file, "vehicle-1")

        fleet = load_fleet(fleet_file)
        assert [v.id for v in fleet.vehicles] == ["vehicle-2"]
        assert fleet.maintenance_records == []
        assert fleet.vendor_work_counts() == {"vendor-1": 0}

    def test_other_categories_untouched(self, fleet_file):
        delete_vehicle(fleet_file, "vehicle-1")
        fleet = load_fleet(fleet_file)
        assert len(fleet.pcs) == 1
        assert len(fleet.general_assets) == 1
        assert len(fleet.vendors) == 1

    def test_unknown_vehicle(self, fleet_file):
        with pytest.raises(AssetNotFoundError):
            delete_vehicle(fleet_file, "vehicle-9")


class TestVendors:
    """Tests for add_vendor and delete_vendor."""

    def test_add_vendor(self, fleet_file):
        vendor_id = add_vendor(
            fleet_file, Vendor(None, "Tire House Shinjuku", phone="03-9876-5432")
        )

        vendors = read_yaml(fleet_file)["vendors"]
        assert vendor_id.startswith("vendor-")
        assert vendors[1] == {
            "id": vendor_id,
            "name": "Tire House Shinjuku",
            "phone": "03-9876-5432",
        }

    def test_add_vendor_keeps_given_id(self, fleet_file):
        assert add_vendor(fleet_file, Vendor("vendor-7", "Body Shop")) == "vendor-7"

    def test_delete_vendor_keeps_records(self, fleet_file):
        delete_vendor(fleet_file, "vendor-1")

        fleet = load_fleet(fleet_file)
        assert fleet.vendors == []
        assert len(fleet.maintenance_records) == 2
        assert fleet.vendor_name(fleet.maintenance_records[0].vendor_id) == "unknown vendor"

    def test_delete_unknown_vendor(self, fleet_file):
        with pytest.raises(AssetNotFoundError) as exc:
            delete_vendor(fleet_file, "vendor-9")
        assert exc.value.kind == "Vendor"
