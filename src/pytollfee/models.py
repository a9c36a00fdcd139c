"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VehicleType(Enum):
    """Closed set of vehicle categories known to the toll system."""

    CAR = ("Car", False)
    MOTORBIKE = ("Motorbike", True)
    TRACTOR = ("Tractor", True)
    EMERGENCY = ("Emergency", True)
    DIPLOMAT = ("Diplomat", True)
    FOREIGN = ("Foreign", True)
    MILITARY = ("Military", True)

    def __init__(self, label: str, toll_free: bool) -> None:
        self.label = label
        self.toll_free = toll_free


@dataclass(frozen=True, slots=True)
class Vehicle:
    type_label: str
    is_toll_free: bool

    @classmethod
    def from_type(cls, vehicle_type: VehicleType) -> Vehicle:
        return cls(type_label=vehicle_type.label, is_toll_free=vehicle_type.toll_free)


@dataclass(frozen=True, slots=True)
class HolidayProviderInfo:
    id: str
    name: str
    default_base_url: str
