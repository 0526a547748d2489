"""Enumerations shared by the asset models."""

from enum import Enum


class OwnershipType(str, Enum):
    OWNED = "owned"
    LEASED = "leased"
    RENTAL = "rental"


class AssetStatus(str, Enum):
    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    RETIRED = "retired"


class AssetCategory(str, Enum):
    VEHICLE = "vehicle"
    PC = "pc"
    GENERAL = "general"


class DeadlineType(str, Enum):
    INSPECTION = "inspection"
    MAINTENANCE = "maintenance"
    INSURANCE = "insurance"
    TIRE_CHANGE = "tireChange"
    WARRANTY = "warranty"
    LEASE = "lease"


class TireType(str, Enum):
    SUMMER = "summer"
    WINTER = "winter"


class MaintenanceType(str, Enum):
    OIL_CHANGE = "oil_change"
    TIRE_CHANGE = "tire_change"
    INSPECTION = "inspection"
    SHAKEN = "shaken"
    REPAIR = "repair"
    OTHER = "other"
