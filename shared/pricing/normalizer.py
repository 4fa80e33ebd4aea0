"""
Cart Normalizer

Turns loosely typed cart records (as posted by the order builder) into
ItemSelection values. Normalization is total: bad entries degrade to a
minimal valid shape or are dropped, nothing raises.
"""

import math
from dataclasses import replace
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any, Optional

from .models import (
    CustomArtAsset,
    ItemSelection,
    LegacyPromoCode,
    PromoInput,
    SizeProfile,
    SizingMode,
    ValidatedPromo,
)
from .money import ZERO, to_decimal

# Field names accepted for the same value (UI payloads use camelCase)
SHAPE_ID_KEYS = ("shapeId", "shape_id")
ASSET_LIST_KEYS = ("customArtAssets", "custom_art_assets", "designUploads", "design_uploads")
ASSET_PAYLOAD_KEYS = ("data", "base64", "content")
ASSET_FILE_NAME_KEYS = ("fileName", "file_name")
NOTES_KEYS = ("notes", "setNotes", "set_notes")

# Upper bound for a set quantity; larger requests are clamped to it
MAX_QUANTITY = 10_000


def _first(record: Mapping, keys: tuple[str, ...]) -> Any:
    """Return the first truthy value stored under any of the keys"""
    for key in keys:
        value = record.get(key)
        if value:
            return value
    return None


def _clean_text(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def normalize_quantity(value: Any) -> int:
    """max(1, floor(value)) capped at MAX_QUANTITY; anything non-numeric becomes 1"""
    number = to_decimal(value)
    if number is None:
        return 1
    if number >= MAX_QUANTITY:
        return MAX_QUANTITY
    return max(1, math.floor(number))


def normalize_asset(entry: Any) -> Optional[CustomArtAsset]:
    """Normalize one uploaded design reference, None if it has no payload"""
    if isinstance(entry, str):
        return CustomArtAsset(data=entry) if entry else None

    if isinstance(entry, Mapping):
        payload = _first(entry, ASSET_PAYLOAD_KEYS)
        if not isinstance(payload, str):
            return None
        asset_id = entry.get("id")
        return CustomArtAsset(
            data=payload,
            id=str(asset_id) if asset_id else None,
            file_name=_clean_text(_first(entry, ASSET_FILE_NAME_KEYS)),
        )

    if isinstance(entry, CustomArtAsset):
        return entry if entry.data else None

    return None


def normalize_sizes(sizes: Any) -> SizeProfile:
    """Sizing mode plus per-finger values; unknown modes fall back to standard"""
    if not isinstance(sizes, Mapping):
        return SizeProfile()

    mode = SizingMode.PER_SET if sizes.get("mode") in ("perSet", "custom") else SizingMode.STANDARD
    raw_values = sizes.get("values")
    values: tuple[tuple[str, str], ...] = ()
    if isinstance(raw_values, Mapping):
        values = tuple(
            (str(finger), value if isinstance(value, str) else "")
            for finger, value in raw_values.items()
        )

    return SizeProfile(mode=mode, values=values)


def _assets(raw: Any) -> tuple[CustomArtAsset, ...]:
    if not isinstance(raw, (list, tuple)):
        return ()
    assets = (normalize_asset(entry) for entry in raw)
    return tuple(asset for asset in assets if asset is not None)


def _renormalize(selection: ItemSelection) -> Optional[ItemSelection]:
    """Apply the record coercions to an already built selection"""
    if not selection.shape_id or not isinstance(selection.shape_id, str):
        return None

    sizes = selection.sizes
    if not isinstance(sizes, SizeProfile):
        sizes = normalize_sizes(sizes)

    return replace(
        selection,
        quantity=normalize_quantity(selection.quantity),
        id=str(selection.id) if selection.id else None,
        name=_clean_text(selection.name),
        description=_clean_text(selection.description),
        custom_art_assets=_assets(selection.custom_art_assets),
        notes=_clean_text(selection.notes),
        sizes=sizes,
    )


def normalize_selection(record: Any) -> Optional[ItemSelection]:
    """Normalize one cart record, None if it cannot be priced at all"""
    if isinstance(record, ItemSelection):
        return _renormalize(record)

    if not isinstance(record, Mapping):
        return None

    shape_id = _first(record, SHAPE_ID_KEYS)
    if shape_id is None or isinstance(shape_id, bool):
        return None

    selection_id = record.get("id")

    return ItemSelection(
        shape_id=str(shape_id),
        quantity=normalize_quantity(record.get("quantity")),
        id=str(selection_id) if selection_id else None,
        name=_clean_text(record.get("name")),
        description=_clean_text(record.get("description")),
        custom_art_assets=_assets(_first(record, ASSET_LIST_KEYS)),
        notes=_clean_text(_first(record, NOTES_KEYS)),
        sizes=normalize_sizes(record.get("sizes")),
    )


def normalize_cart(records: Any) -> list[ItemSelection]:
    """Normalize a raw cart, dropping records without a shape id"""
    if records is None or isinstance(records, (str, bytes, Mapping)):
        return []
    if not isinstance(records, Iterable):
        return []

    selections = []
    for record in records:
        selection = normalize_selection(record)
        if selection is not None:
            selections.append(selection)
    return selections


def normalize_admin_discount(value: Any) -> Decimal:
    """Admin override amount; absent, negative or non-numeric becomes 0"""
    amount = to_decimal(value)
    if amount is None or amount < 0:
        return ZERO
    return amount


def parse_promo(raw: Any) -> Optional[PromoInput]:
    """
    Convert caller promo input into one of the two promo variants.

    - {"valid": True, "discount": n, ...} -> ValidatedPromo
    - "holiday10"                         -> LegacyPromoCode
    - anything else                       -> None (no discount)
    """
    if isinstance(raw, (ValidatedPromo, LegacyPromoCode)):
        return raw

    if isinstance(raw, str):
        code = raw.strip()
        return LegacyPromoCode(code=code) if code else None

    if isinstance(raw, Mapping):
        if raw.get("valid") is not True:
            return None
        discount = to_decimal(raw.get("discount"))
        if discount is None:
            return None
        return ValidatedPromo(
            discount=discount,
            description=_clean_text(raw.get("discountDescription") or raw.get("discount_description")),
            code=_clean_text(raw.get("code")),
        )

    return None
