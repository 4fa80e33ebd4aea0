"""
Order Pricing Engine

Turns a cart, a fulfillment choice and optional discounts into an itemized
Breakdown with a completion estimate. Pure: no I/O, no shared state, and the
current date is read once per call.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from .delivery import (
    DEFAULT_DELIVERY_METHOD,
    build_delivery_line_item,
    compute_completion_date,
    load_delivery_methods,
    parse_fulfillment_request,
    resolve_fulfillment,
)
from .discounts import apply_discounts
from .exceptions import DeliveryConfigurationError
from .models import Breakdown, CatalogShape, ItemSelection, ItemSummary, LineItem
from .money import ZERO, quantize_money
from .normalizer import normalize_admin_discount, normalize_cart, parse_promo

logger = logging.getLogger(__name__)

CUSTOM_ART_SETUP_FEE = Decimal("10")

# Called with (selection, index) when a selection's shape is not in the catalog
UnresolvedShapeHook = Callable[[ItemSelection, int], None]


def _line_label(selection: ItemSelection, shape: CatalogShape) -> str:
    name = selection.name or f"{shape.name} Set"
    unit = "set" if selection.quantity == 1 else "sets"
    return f"{name} ({selection.quantity} {unit})"


class PricingEngine:
    """
    Computes order breakdowns.

    Usage:
        engine = PricingEngine(custom_art_setup_fee=Decimal("10"))
        breakdown = engine.compute_breakdown(
            cart=[{"shapeId": "almond", "quantity": 2}],
            fulfillment={"method": "pickup", "speed": "standard"},
            catalog=shapes,
            delivery_config=methods,
        )
        print(breakdown.total)
    """

    def __init__(
        self,
        custom_art_setup_fee: Decimal = CUSTOM_ART_SETUP_FEE,
        default_delivery_method: str = DEFAULT_DELIVERY_METHOD,
        today_provider: Callable[[], date] = date.today,
        on_unresolved_shape: Optional[UnresolvedShapeHook] = None,
    ):
        """
        Args:
            custom_art_setup_fee: Per-set surcharge when custom art is requested
            default_delivery_method: Method used when the requested one is unknown
            today_provider: Source of the current local date
            on_unresolved_shape: Diagnostic hook for selections dropped from pricing
        """
        self.custom_art_setup_fee = custom_art_setup_fee
        self.default_delivery_method = default_delivery_method
        self.today_provider = today_provider
        self.on_unresolved_shape = on_unresolved_shape

    def price_selection(
        self,
        selection: ItemSelection,
        shape: CatalogShape,
        index: int,
    ) -> tuple[LineItem, ItemSummary]:
        """Line item and summary for one resolved selection"""
        setup_fee = self.custom_art_setup_fee if selection.requires_custom_art else ZERO
        unit_price = quantize_money(shape.base_price + setup_fee)
        subtotal = quantize_money(unit_price * selection.quantity)
        line_id = f"set_{index}"

        line_item = LineItem(
            id=line_id,
            label=_line_label(selection, shape),
            amount=subtotal,
        )
        summary = ItemSummary(
            id=selection.id or line_id,
            name=selection.name,
            shape_id=selection.shape_id,
            shape_name=shape.name,
            quantity=selection.quantity,
            unit_price=unit_price,
            setup_fee=setup_fee,
            subtotal=subtotal,
            requires_custom_art=selection.requires_custom_art,
            notes=selection.notes,
            sizes=selection.sizes,
        )
        return line_item, summary

    def compute_breakdown(
        self,
        cart: Any,
        fulfillment: Any = None,
        promo: Any = None,
        admin_discount: Any = None,
        *,
        catalog: Mapping[str, CatalogShape],
        delivery_config: Any,
        today: Optional[date] = None,
    ) -> Breakdown:
        """
        Price a cart.

        Args:
            cart: Raw cart records or ItemSelection values
            fulfillment: FulfillmentRequest or {"method", "speed"} mapping
            promo: ValidatedPromo / LegacyPromoCode, a validator result mapping or a bare code
            admin_discount: Operator override amount (invalid values count as 0)
            catalog: Shape id -> CatalogShape lookup
            delivery_config: Delivery-method table (configs or raw mappings)
            today: Date the estimate is based on, defaults to today_provider()

        Returns:
            A complete Breakdown

        Raises:
            DeliveryConfigurationError: if the delivery table is missing or malformed
        """
        if delivery_config is None:
            raise DeliveryConfigurationError("Delivery configuration is missing")
        methods = load_delivery_methods(delivery_config)
        if today is None:
            today = self.today_provider()

        resolved = resolve_fulfillment(
            parse_fulfillment_request(fulfillment),
            methods,
            default_method=self.default_delivery_method,
        )

        line_items: list[LineItem] = []
        summary: list[ItemSummary] = []

        for index, selection in enumerate(normalize_cart(cart)):
            shape = catalog.get(selection.shape_id)
            if shape is None:
                logger.warning(
                    f"Shape '{selection.shape_id}' not in catalog, "
                    f"dropping set {selection.name or index + 1} from pricing"
                )
                if self.on_unresolved_shape:
                    self.on_unresolved_shape(selection, index)
                continue

            line_item, item_summary = self.price_selection(selection, shape, index)
            line_items.append(line_item)
            summary.append(item_summary)

        # Nothing to fulfill, nothing to charge; the estimate still applies
        if line_items:
            line_items.append(build_delivery_line_item(resolved))

        discounted = apply_discounts(
            line_items,
            promo=parse_promo(promo),
            admin_discount=normalize_admin_discount(admin_discount),
        )

        logger.debug(
            f"Priced {len(summary)} set(s): subtotal={discounted.subtotal} "
            f"discounts={discounted.discounts} total={discounted.total}"
        )

        return Breakdown(
            line_items=discounted.line_items,
            subtotal=discounted.subtotal,
            discounts=discounted.discounts,
            total=discounted.total,
            estimated_completion_days=resolved.speed.days,
            estimated_completion_date=compute_completion_date(resolved.speed.days, today),
            summary=tuple(summary),
            fulfillment=resolved,
        )


def compute_breakdown(
    cart: Any,
    fulfillment: Any = None,
    promo: Any = None,
    admin_discount: Any = None,
    *,
    catalog: Mapping[str, CatalogShape],
    delivery_config: Any,
    today: Optional[date] = None,
) -> Breakdown:
    """Price a cart with the default engine settings"""
    return PricingEngine().compute_breakdown(
        cart,
        fulfillment,
        promo,
        admin_discount,
        catalog=catalog,
        delivery_config=delivery_config,
        today=today,
    )
