"""Marketplace enumerations shared by queries, records and workflows."""
from __future__ import annotations

from enum import Enum


class NFTCategory(str, Enum):
    PARCEL = "parcel"
    ESTATE = "estate"
    WEARABLE = "wearable"
    ENS = "ens"


class Network(str, Enum):
    ETHEREUM = "ETHEREUM"
    MATIC = "MATIC"


class OrderStatus(str, Enum):
    OPEN = "open"
    SOLD = "sold"
    CANCELLED = "cancelled"


class WearableGender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class BodyShape(str, Enum):
    """Body-shape enum values as the indexing schema spells them."""

    MALE = "BaseMale"
    FEMALE = "BaseFemale"


class Rarity(str, Enum):
    UNIQUE = "unique"
    MYTHIC = "mythic"
    LEGENDARY = "legendary"
    EPIC = "epic"
    RARE = "rare"
    UNCOMMON = "uncommon"
    COMMON = "common"


class WearableCategory(str, Enum):
    EYEBROWS = "eyebrows"
    EYES = "eyes"
    FACIAL_HAIR = "facial_hair"
    HAIR = "hair"
    MOUTH = "mouth"
    UPPER_BODY = "upper_body"
    LOWER_BODY = "lower_body"
    FEET = "feet"
    EARRING = "earring"
    EYEWEAR = "eyewear"
    HAT = "hat"
    HELMET = "helmet"
    MASK = "mask"
    TIARA = "tiara"
    TOP_HEAD = "top_head"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


__all__ = [
    "BodyShape",
    "NFTCategory",
    "Network",
    "OrderStatus",
    "Rarity",
    "SortDirection",
    "WearableCategory",
    "WearableGender",
]
