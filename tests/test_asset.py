#!/usr/bin/env python3
"""Tests for PCAsset and GeneralAsset classes."""

import pytest
from assetwatch import (
    AssetCategory,
    AssetStatus,
    DeadlineType,
    GeneralAsset,
    LeaseInfo,
    PCAsset,
)


@pytest.fixture
def lease():
    return LeaseInfo("Orix Rentec", 6000, "2023-02-01", "2026-01-31")


class TestPCAsset:
    """Tests for PCAsset."""

    def test_name_and_category(self):
        pc = PCAsset("pc-1", "PC-001", "Lenovo", "ThinkPad X1")
        assert pc.name == "PC-001 (Lenovo ThinkPad X1)"
        assert pc.category == AssetCategory.PC
        assert pc.status == AssetStatus.ACTIVE

    def test_deadline_dates_warranty_then_lease(self, lease):
        pc = PCAsset(
            "pc-1", "PC-001", "Lenovo", "ThinkPad X1",
            warranty_expiration="2026-01-31",
            ownership_type="leased",
            lease=lease,
        )
        assert pc.deadline_dates() == [
            (DeadlineType.WARRANTY, "2026-01-31"),
            (DeadlineType.LEASE, "2026-01-31"),
        ]

    def test_rental_is_not_leased(self, lease):
        pc = PCAsset("pc-1", "PC-001", "Lenovo", "ThinkPad X1", ownership_type="rental", lease=lease)
        assert not pc.is_leased
        assert pc.deadline_dates() == []


class TestGeneralAsset:
    """Tests for GeneralAsset."""

    def test_name_and_category(self):
        asset = GeneralAsset("asset-1", "GA-001", "Office projector", kind="equipment")
        assert asset.name == "GA-001 (Office projector)"
        assert asset.asset_name == "Office projector"
        assert asset.category == AssetCategory.GENERAL

    def test_deadline_dates(self, lease):
        asset = GeneralAsset("asset-1", "GA-001", "Tablet", ownership_type="leased", lease=lease)
        assert asset.deadline_dates() == [(DeadlineType.LEASE, "2026-01-31")]

    def test_invalid_status_rejected(self):
        with pytest.raises(ValueError):
            GeneralAsset("asset-1", "GA-001", "Tablet", status="lost")
