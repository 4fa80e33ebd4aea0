"""Pricing Data Models"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Union
from enum import Enum

from .exceptions import DeliveryConfigurationError
from .money import ZERO, to_decimal


class SizingMode(str, Enum):
    """How nail sizes are captured for a set"""
    STANDARD = "standard"
    PER_SET = "perSet"


@dataclass(frozen=True)
class CustomArtAsset:
    """Uploaded design reference attached to a set"""
    data: str  # Payload (usually base64 or a storage URL)
    id: Optional[str] = None
    file_name: Optional[str] = None


@dataclass(frozen=True)
class SizeProfile:
    """Per-finger sizes; not priced, carried through for the order"""
    mode: SizingMode = SizingMode.STANDARD
    values: tuple[tuple[str, str], ...] = ()  # (finger, size) pairs in input order

    def to_dict(self) -> dict[str, Any]:
        return {"mode": self.mode.value, "values": dict(self.values)}


@dataclass(frozen=True)
class ItemSelection:
    """One configured set in the customer's cart (already normalized)"""
    shape_id: str
    quantity: int = 1
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    custom_art_assets: tuple[CustomArtAsset, ...] = ()
    notes: Optional[str] = None
    sizes: SizeProfile = field(default_factory=SizeProfile)

    @property
    def requires_custom_art(self) -> bool:
        return bool(self.custom_art_assets) or bool(self.description)


@dataclass(frozen=True)
class CatalogShape:
    """Catalog entry for a nail shape"""
    id: str
    name: str
    base_price: Decimal


@dataclass(frozen=True)
class SpeedOption:
    """Turnaround tier of a delivery method"""
    id: str
    label: str
    fee: Decimal
    days: int
    description: str = ""
    tagline: str = ""


@dataclass(frozen=True)
class DeliveryMethodConfig:
    """Fulfillment channel with its speed tiers"""
    id: str
    label: str
    speed_options: dict[str, SpeedOption]
    default_speed: str
    description: str = ""
    base_fee: Decimal = Decimal("0")

    def __post_init__(self):
        if not self.speed_options:
            raise DeliveryConfigurationError(
                f"Delivery method '{self.id}' has no speed options"
            )
        if self.default_speed not in self.speed_options:
            raise DeliveryConfigurationError(
                f"Delivery method '{self.id}' default speed "
                f"'{self.default_speed}' is not one of its speed options"
            )
        if self.base_fee < 0:
            raise DeliveryConfigurationError(
                f"Delivery method '{self.id}' has a negative base fee"
            )
        for speed in self.speed_options.values():
            if speed.fee < 0 or speed.days < 0:
                raise DeliveryConfigurationError(
                    f"Speed '{speed.id}' of delivery method '{self.id}' "
                    "has a negative fee or day count"
                )


@dataclass(frozen=True)
class FulfillmentRequest:
    """Delivery method and speed requested by the customer"""
    method: Optional[str] = None
    speed: Optional[str] = None


@dataclass(frozen=True)
class ResolvedFulfillment:
    """Method and speed actually used after fallbacks"""
    method: DeliveryMethodConfig
    speed: SpeedOption

    @property
    def fee(self) -> Decimal:
        # Base fee and speed fee are charged as one fulfillment amount
        return self.method.base_fee + self.speed.fee


@dataclass(frozen=True)
class ValidatedPromo:
    """Promo already checked by a promo validator"""
    discount: Decimal
    description: Optional[str] = None
    code: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "discount", to_decimal(self.discount) or ZERO)


@dataclass(frozen=True)
class LegacyPromoCode:
    """Bare promo code string matched against the fixed code table"""
    code: str


PromoInput = Union[ValidatedPromo, LegacyPromoCode]


@dataclass(frozen=True)
class LineItem:
    """Signed entry of the itemized breakdown"""
    id: str
    label: str
    amount: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label, "amount": self.amount}


@dataclass(frozen=True)
class ItemSummary:
    """Pricing summary of one accepted selection"""
    id: str
    name: Optional[str]
    shape_id: str
    shape_name: str
    quantity: int
    unit_price: Decimal
    setup_fee: Decimal
    subtotal: Decimal
    requires_custom_art: bool
    notes: Optional[str] = None
    sizes: SizeProfile = field(default_factory=SizeProfile)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "shape_id": self.shape_id,
            "shape_name": self.shape_name,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "setup_fee": self.setup_fee,
            "subtotal": self.subtotal,
            "requires_custom_art": self.requires_custom_art,
            "notes": self.notes,
            "sizes": self.sizes.to_dict(),
        }


@dataclass(frozen=True)
class Breakdown:
    """Complete pricing result for one cart"""
    line_items: tuple[LineItem, ...]
    subtotal: Decimal
    discounts: Decimal
    total: Decimal
    estimated_completion_days: int
    estimated_completion_date: datetime
    summary: tuple[ItemSummary, ...]
    fulfillment: ResolvedFulfillment

    def line_item(self, item_id: str) -> Optional[LineItem]:
        """Find a line item by id"""
        return next((item for item in self.line_items if item.id == item_id), None)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation (amounts stay Decimal)"""
        return {
            "line_items": [item.to_dict() for item in self.line_items],
            "subtotal": self.subtotal,
            "discounts": self.discounts,
            "total": self.total,
            "estimated_completion_days": self.estimated_completion_days,
            "estimated_completion_date": self.estimated_completion_date.isoformat(),
            "summary": [item.to_dict() for item in self.summary],
            "fulfillment": {
                "method": self.fulfillment.method.id,
                "speed": self.fulfillment.speed.id,
            },
        }
