"""
Finite value sets for enum-typed columns.

Each enum exposes ``values()`` which is used both for validation and for the
allowed-values message returned to clients.
"""
from enum import Enum
from typing import List


class ShopEnum(str, Enum):

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class Brand(ShopEnum):
    APPLE = "APPLE"
    SAMSUNG = "SAMSUNG"
    GOOGLE = "GOOGLE"
    ONEPLUS = "ONEPLUS"
    XIAOMI = "XIAOMI"
    OPPO = "OPPO"
    VIVO = "VIVO"
    REALME = "REALME"
    MOTOROLA = "MOTOROLA"
    NOKIA = "NOKIA"
    OTHER = "OTHER"


class ItemStatus(ShopEnum):
    IN_STOCK = "IN_STOCK"
    SOLD = "SOLD"
    RESERVED = "RESERVED"
    RETURNED = "RETURNED"
    OUT_OF_STOCK = "OUT_OF_STOCK"


class AccessoryType(ShopEnum):
    CASE = "CASE"
    CHARGER = "CHARGER"
    CABLE = "CABLE"
    EARPHONE = "EARPHONE"
    HEADPHONE = "HEADPHONE"
    SCREEN_GUARD = "SCREEN_GUARD"
    POWER_BANK = "POWER_BANK"
    ADAPTER = "ADAPTER"
    MEMORY_CARD = "MEMORY_CARD"
    OTHER = "OTHER"


class ServiceType(ShopEnum):
    SCREEN_REPLACEMENT = "SCREEN_REPLACEMENT"
    BATTERY_REPLACEMENT = "BATTERY_REPLACEMENT"
    CHARGING_PORT = "CHARGING_PORT"
    SOFTWARE = "SOFTWARE"
    WATER_DAMAGE = "WATER_DAMAGE"
    CAMERA = "CAMERA"
    SPEAKER = "SPEAKER"
    GENERAL = "GENERAL"
    OTHER = "OTHER"
